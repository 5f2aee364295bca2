"""HTTP client for the Bybit v5 REST API."""

from __future__ import annotations

import dataclasses
import hashlib
import hmac
import json
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import urlencode, urlsplit

import requests

from . import consts
from .errors import APIError, validate_params

_LOG = logging.getLogger(consts.NAME)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DEFAULT_RECV_WINDOW = "5000"


@dataclass
class ServerResponse:
    """The common envelope of every API response."""

    ret_code: Any = 0
    ret_msg: str = ""
    result: Any = None
    ret_ext_info: dict = field(default_factory=dict)
    time: Any = 0

    @classmethod
    def from_json(cls, data: bytes | str | Mapping[str, Any]) -> "ServerResponse":
        """Decode a response body."""
        payload = data if isinstance(data, Mapping) else json.loads(data)
        if not isinstance(payload, Mapping):
            raise ValueError("server response is not a JSON object")
        ext_info = payload.get("retExtInfo") or {}
        return cls(
            ret_code=payload.get("retCode", 0),
            ret_msg=payload.get("retMsg", ""),
            result=payload.get("result"),
            ret_ext_info=dict(ext_info) if isinstance(ext_info, Mapping) else {},
            time=payload.get("time", 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the response with the API's field names."""
        return {
            "retCode": self.ret_code,
            "retMsg": self.ret_msg,
            "result": self.result,
            "retExtInfo": self.ret_ext_info,
            "time": self.time,
        }


def get_server_response(data: bytes | str) -> ServerResponse:
    """Decode raw response bytes into a ServerResponse."""
    return ServerResponse.from_json(data)


def pretty_print(value: Any) -> str:
    """Render a value as indented JSON."""
    if isinstance(value, ServerResponse):
        value = value.to_dict()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value, indent=1, ensure_ascii=False, default=str)


def format_timestamp(moment: datetime) -> int:
    """Return a moment as Unix time in milliseconds; naive values are local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    micros = (moment - _EPOCH) // timedelta(microseconds=1)
    millis, rest = divmod(micros, 1000)
    if millis < 0 and rest:
        millis += 1
    return millis


def get_current_time() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def sign(secret: str, payload: str) -> str:
    """Return the hex HMAC-SHA256 of a payload."""
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_query(params: Mapping[str, Any]) -> str:
    return urlencode(sorted((key, _format_value(value)) for key, value in params.items()))


class Client:
    """Sends signed and unsigned requests to the REST API."""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = consts.MAINNET,
        debug: bool = False,
        proxy_url: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url
        self.debug = debug
        self.proxy_url = proxy_url
        self.session = session if session is not None else requests.Session()
        if proxy_url:
            parts = urlsplit(proxy_url)
            parts.port  # raises ValueError on a malformed port
            self.session.proxies = {"http": proxy_url, "https": proxy_url}

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _debug(self, message: str, *args: Any) -> None:
        if self.debug:
            _LOG.debug(message, *args)

    def call_api(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        signed: bool = False,
        recv_window: str = "",
    ) -> bytes:
        """Send a request and return the raw body; raise APIError on 4xx/5xx."""
        method = method.upper()
        params = dict(params or {})
        full_url = f"{self.base_url}{endpoint}"
        if method == "POST":
            query = ""
            body = json.dumps(params, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
        else:
            query = _encode_query(params)
            body = ""

        headers = {"User-Agent": f"{consts.NAME}/{consts.VERSION}"}
        if signed:
            timestamp = str(get_current_time())
            window = recv_window or _DEFAULT_RECV_WINDOW
            headers[consts.SIGN_TYPE_KEY] = "2"
            headers[consts.API_REQUEST_KEY] = self.api_key
            headers[consts.TIMESTAMP_KEY] = timestamp
            headers[consts.RECV_WINDOW_KEY] = window
            if method == "POST":
                headers["Content-Type"] = "application/json"
                payload = body
            else:
                payload = query
            headers[consts.SIGNATURE_KEY] = sign(
                self.api_secret, timestamp + self.api_key + window + payload
            )

        if query:
            full_url = f"{full_url}?{query}"
        self._debug("full url: %s, body: %s", full_url, body)

        response = self.session.request(
            method, full_url, data=body.encode() if body else None, headers=headers
        )
        data = response.content
        self._debug("response body: %s", data.decode(errors="replace"))
        self._debug("response status code: %d", response.status_code)

        if response.status_code >= 400:
            try:
                error = APIError.from_json(data)
            except ValueError as exc:
                self._debug("failed to unmarshal json: %s", exc)
                error = APIError()
            raise error
        return data


class ClientRequest:
    """A set of request parameters bound to a client and an account type."""

    def __init__(
        self,
        client: Client,
        params: Mapping[str, Any] | None = None,
        is_uta: bool = True,
    ) -> None:
        self.client = client
        self.params = dict(params) if params is not None else {}
        self.is_uta = is_uta

    def _call(
        self,
        method: str,
        endpoint: str,
        *,
        signed: bool = True,
        validate: bool = False,
    ) -> ServerResponse:
        if validate:
            validate_params(self.params)
        data = self.client.call_api(method, endpoint, self.params, signed=signed)
        return get_server_response(data)


def new_bybit_http_client(
    api_key: str = "",
    api_secret: str = "",
    base_url: str = consts.MAINNET,
    debug: bool = False,
    proxy_url: str = "",
) -> Client:
    """Create a client for the REST API."""
    return Client(
        api_key=api_key,
        api_secret=api_secret,
        base_url=base_url,
        debug=debug,
        proxy_url=proxy_url,
    )