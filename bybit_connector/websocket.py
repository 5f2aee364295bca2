"""WebSocket streams of the v5 API: public market data and authenticated private channels."""

from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import websocket as _ws

from . import consts
from .client import get_current_time, sign

MessageHandler = Callable[[str], Any]

_LOG = logging.getLogger(f"{consts.NAME}.websocket")
_RECONNECT_INTERVAL = 5.0
_AUTH_EXPIRY_MS = 10_000
_AUTH_URLS = frozenset(
    {
        consts.WEBSOCKET_PRIVATE_MAINNET,
        consts.WEBSOCKET_PRIVATE_TESTNET,
        consts.WEBSOCKET_TRADE_MAINNET,
        consts.WEBSOCKET_TRADE_TESTNET,
        consts.WEBSOCKET_TRADE_DEMO,
        consts.WEBSOCKET_PRIVATE_DEMO,
    }
)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def build_auth_message(api_key: str, api_secret: str, expires: int) -> dict[str, Any]:
    """Build the signed authentication message for a private stream."""
    signature = sign(api_secret, f"GET/realtime{expires}")
    return {
        "req_id": str(uuid.uuid4()),
        "op": "auth",
        "args": [api_key, expires, signature],
    }


class WebSocket:
    """A stream connection that reads in the background, pings and reconnects."""

    def __init__(
        self,
        url: str,
        handler: MessageHandler | None = None,
        api_key: str = "",
        api_secret: str = "",
        ping_interval: int = 20,
        max_alive_time: str = "",
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.api_secret = api_secret
        self.ping_interval = ping_interval
        self.max_alive_time = max_alive_time
        self.is_connected = False
        self._on_message = handler
        self._conn: Any = None
        self._send_lock = threading.Lock()
        self._stop = threading.Event()

    def set_message_handler(self, handler: MessageHandler | None) -> None:
        """Replace the function that receives each incoming message."""
        self._on_message = handler

    def requires_authentication(self) -> bool:
        """Tell whether the stream is private and needs an auth message."""
        return self.url in _AUTH_URLS

    def connect(self) -> "WebSocket":
        """Open the connection, authenticate if needed and start the background work."""
        self._stop = threading.Event()
        self._open()
        self._start(self._monitor)
        if self.ping_interval <= 0:
            _LOG.warning("Ping interval is set to a non-positive value.")
        else:
            self._start(self._ping)
        return self

    def send_subscription(self, args: Iterable[str]) -> "WebSocket":
        """Subscribe to topics."""
        message = {"req_id": str(uuid.uuid4()), "op": "subscribe", "args": list(args)}
        _LOG.info("subscribe msg: %s", message["args"])
        self._send_json(message)
        _LOG.info("Subscription sent successfully.")
        return self

    def send_request(
        self,
        op: str,
        args: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Send a custom operation, such as an order request on a trade stream."""
        message = {
            "reqId": str(uuid.uuid4()),
            "header": dict(headers or {}),
            "op": op,
            "args": [dict(args)],
        }
        _LOG.info("request headers: %s", message["header"])
        _LOG.info("request op channel: %s", op)
        _LOG.info("request msg: %s", message["args"])
        self._send_json(message)

    def disconnect(self) -> None:
        """Stop the background work and close the connection."""
        if self._conn is None:
            raise RuntimeError("websocket is not connected")
        self._stop.set()
        self.is_connected = False
        self._conn.close()

    def __enter__(self) -> "WebSocket":
        return self.connect()

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()

    def _url(self) -> str:
        if self.max_alive_time:
            return f"{self.url}?max_alive_time={self.max_alive_time}"
        return self.url

    def _open(self) -> None:
        conn = _ws.create_connection(self._url())
        self._conn = conn
        if self.requires_authentication():
            try:
                self._send_auth()
            except Exception:
                conn.close()
                raise
        self.is_connected = True
        self._start(self._read, conn)

    def _send_auth(self) -> None:
        expires = get_current_time() + _AUTH_EXPIRY_MS
        message = build_auth_message(self.api_key, self.api_secret, expires)
        _LOG.info("auth args: %s", message["args"])
        self._send_json(message)

    def _send_json(self, value: Any) -> None:
        self._send(_dumps(value))

    def _send(self, message: str) -> None:
        conn = self._conn
        if conn is None:
            raise RuntimeError("websocket is not connected")
        with self._send_lock:
            conn.send(message)

    @staticmethod
    def _start(target: Callable[..., None], *args: Any) -> None:
        threading.Thread(target=target, args=args, daemon=True).start()

    def _read(self, conn: Any) -> None:
        while True:
            try:
                message = conn.recv()
            except Exception as exc:
                if conn is self._conn and not self._stop.is_set():
                    _LOG.error("Error reading: %s", exc)
                    self.is_connected = False
                return
            if isinstance(message, bytes):
                message = message.decode(errors="replace")
            handler = self._on_message
            if handler is None:
                continue
            try:
                handler(message)
            except Exception:
                _LOG.exception("Error handling message")
                return

    def _monitor(self) -> None:
        stop = self._stop
        while not stop.wait(_RECONNECT_INTERVAL):
            if self.is_connected:
                continue
            _LOG.info("Attempting to reconnect...")
            try:
                self._open()
            except Exception as exc:
                _LOG.error("Reconnection failed: %s", exc)

    def _ping(self) -> None:
        stop = self._stop
        while not stop.wait(self.ping_interval):
            current = int(time.time())
            try:
                self._send_json({"op": "ping", "req_id": str(current)})
            except Exception as exc:
                _LOG.error("Failed to send ping: %s", exc)
                return
            _LOG.debug("Ping sent with UTC time: %d", current)
        _LOG.debug("Ping stopped.")


def new_private_websocket(
    url: str,
    api_key: str,
    api_secret: str,
    handler: MessageHandler | None,
    ping_interval: int = 20,
    max_alive_time: str = "",
) -> WebSocket:
    """Create a stream that authenticates with an API key."""
    return WebSocket(
        url,
        handler,
        api_key=api_key,
        api_secret=api_secret,
        ping_interval=ping_interval,
        max_alive_time=max_alive_time,
    )


def new_public_websocket(url: str, handler: MessageHandler | None) -> WebSocket:
    """Create a public market data stream."""
    return WebSocket(url, handler)