# bybit-connector

A small client library for the Bybit v5 API. It signs private REST requests
with HMAC-SHA256, returns the server's JSON envelope as a `ServerResponse`,
decodes kline responses into typed candles, and keeps WebSocket
subscriptions alive with periodic pings and automatic reconnection.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `bybit_connector.consts`: REST base URLs (`MAINNET`, `MAINNET_BACKT`,
  `TESTNET`, `DEMO_ENV`), stream URLs (`SPOT_MAINNET`, `LINEAR_TESTNET`,
  `WEBSOCKET_PRIVATE_MAINNET`, ...) and the `X-BAPI-*` header names.
- `bybit_connector.errors`: `APIError`, `is_api_error`, `validate_params`.
- `bybit_connector.client`: `Client`, `ClientRequest`, `ServerResponse`,
  `new_bybit_http_client`, `get_server_response`, `pretty_print`, `sign`,
  `format_timestamp`, `get_current_time`.
- `bybit_connector.account`, `asset`, `broker`, `lending`, `market`: the
  endpoint methods, grouped as mixins.
- `bybit_connector.service`: `BybitClientRequest`, which carries all the
  endpoint methods, and the factories `new_uta_service` and
  `new_classical_service`.
- `bybit_connector.websocket`: `WebSocket`, `new_public_websocket`,
  `new_private_websocket`, `build_auth_message`.

## REST usage

Create a client, then wrap the request parameters in a service. A UTA
service targets unified trading accounts and a classical service targets
classic accounts; the only difference is the endpoint used by
`get_transaction_log`.

```python
from bybit_connector import consts
from bybit_connector.client import new_bybit_http_client, pretty_print
from bybit_connector.service import new_uta_service

client = new_bybit_http_client(
    api_key="placeholder", api_secret="secret", base_url=consts.TESTNET
)

service = new_uta_service(client, {"category": "linear", "symbol": "BTCUSDT"})
response = service.get_market_tickers()
print(response.ret_code, response.ret_msg)
print(pretty_print(response))
```

`Client` can also be built directly, takes an optional `requests.Session`
and a `proxy_url`, and works as a context manager that closes its session.
With `debug=True` it logs the URL, body and response through the standard
`logging` module.

`ServerResponse` holds `ret_code`, `ret_msg`, `result`, `ret_ext_info` and
`time`; `to_dict()` gives them back under the API's own field names.

### Signing

Public market endpoints (`get_server_time`, `get_market_kline`,
`get_order_book_info`, `get_funding_rate_history`, `get_market_tickers`, ...)
are sent unsigned. Account, asset, broker and lending endpoints
(`get_account_wallet`, `get_fee_rates`, `get_coin_info`,
`create_internal_transfer`, `get_broker_earning`, `get_ins_loan_info`, ...)
are signed. A signed request carries the key, a millisecond timestamp, a
receive window of 5000 and the hex HMAC-SHA256 of
`timestamp + api_key + recv_window + payload`, where the payload is the
sorted query string of a GET or the JSON body (sorted keys) of a POST.

`get_mark_price_kline`, `get_index_price_kline` and
`get_premium_index_price_kline` all query the mark price kline endpoint.

The `c2c_*` lending methods emit a `DeprecationWarning`.

### Parameter checks and errors

Many calls check their parameters before sending: an empty key or a `None`
value makes `validate_params` raise `ValueError`, and nothing is sent.

When the server answers with a status of 400 or above, the call raises
`APIError`, carrying the server's `code` and `message`.

```python
from bybit_connector.errors import APIError

try:
    new_uta_service(client, {"accountType": "UNIFIED"}).get_account_wallet()
except APIError as error:
    print(error.code, error.message)
```

### Klines

The raw JSON of a kline response can be decoded into frozen dataclasses:

```python
from bybit_connector.market import parse_market_kline

kline = parse_market_kline(raw_bytes)
for candle in kline.list:
    print(candle.start_time, candle.close_price, candle.volume)
```

`parse_mark_price_kline`, `parse_index_price_kline` and
`parse_premium_index_kline` return a `PriceKlineResponse` of five-field
`PriceKlineCandle`s. A row with too few fields raises `ValueError`.

## WebSocket usage

```python
from bybit_connector import consts
from bybit_connector.websocket import new_private_websocket, new_public_websocket

def on_message(message: str) -> None:
    print("Received:", message)

ws = new_public_websocket(consts.SPOT_MAINNET, on_message)
ws.connect()
ws.send_subscription(["orderbook.1.BTCUSDT", "orderbook.1.ETHUSDT"])
...
ws.disconnect()
```

Private and trade streams (`requires_authentication()` is true for them)
send an authentication message right after connecting:

```python
ws = new_private_websocket(
    consts.WEBSOCKET_PRIVATE_TESTNET,
    api_key="placeholder",
    api_secret="secret",
    handler=on_message,
    ping_interval=20,
)
with ws:
    ws.send_subscription(["order", "position", "wallet"])
```

Messages are read on a background thread and passed to the handler, which
`set_message_handler` can replace. A ping is sent every `ping_interval`
seconds (none if it is zero or less), a dropped connection is retried every
five seconds until `disconnect()` is called, and `max_alive_time` is passed
to the server as a query parameter. `send_request(op, args, headers)` sends a
custom operation on a trade stream.

## What this package does not do

- It has no endpoints for placing, amending or cancelling orders, for
  positions, or for requesting demo funds.
- Apart from klines, responses are not decoded into typed models; the
  `result` of a `ServerResponse` is the plain decoded JSON.
- It has no command-line tool; it is a library only.