"""Endpoints, identifiers and header names used by the Bybit connector."""

NAME = "bybit.api.go"
VERSION = "1.0.4"

_REST_HOST = "bybit.com"
_PUBLIC_PATH = "/v5/public"

_STREAM = "wss://stream.bybit.com"
_STREAM_TESTNET = "wss://stream-testnet.bybit.com"
# The demo stream addresses repeat the scheme; they are kept exactly as the
# service has always published them.
_STREAM_DEMO = "wss://wss://stream-demo.bybit.com"

MAINNET = f"https://api.{_REST_HOST}"
MAINNET_BACKT = "https://api.bytick.com"
TESTNET = f"https://api-testnet.{_REST_HOST}"
DEMO_ENV = f"https://api-demo.{_REST_HOST}"

SPOT_MAINNET = f"{_STREAM}{_PUBLIC_PATH}/spot"
LINEAR_MAINNET = f"{_STREAM}{_PUBLIC_PATH}/linear"
INVERSE_MAINNET = f"{_STREAM}{_PUBLIC_PATH}/inverse"
OPTION_MAINNET = f"{_STREAM}{_PUBLIC_PATH}/option"

SPOT_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC_PATH}/spot"
LINEAR_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC_PATH}/linear"
INVERSE_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC_PATH}/inverse"
OPTION_TESTNET = f"{_STREAM_TESTNET}{_PUBLIC_PATH}/option"

WEBSOCKET_PRIVATE_MAINNET = f"{_STREAM}/v5/private"
WEBSOCKET_TRADE_MAINNET = f"{_STREAM}/v5/trade"
WEBSOCKET_PRIVATE_TESTNET = f"{_STREAM_TESTNET}/v5/private"
WEBSOCKET_TRADE_TESTNET = f"{_STREAM_TESTNET}/v5/trade"
WEBSOCKET_PRIVATE_DEMO = f"{_STREAM_DEMO}/v5/private"
WEBSOCKET_TRADE_DEMO = f"{_STREAM_DEMO}/v5/trade"

# Deprecated: the v3 streams are replaced by v5.
V3_CONTRACT_PRIVATE = f"{_STREAM}/contract/private/v3"
V3_UNIFIED_PRIVATE = f"{_STREAM}/unified/private/v3"
V3_SPOT_PRIVATE = f"{_STREAM}/spot/private/v3"

# Streams that need an authentication message after connecting.
AUTHENTICATED_STREAMS = frozenset(
    {
        WEBSOCKET_PRIVATE_MAINNET,
        WEBSOCKET_PRIVATE_TESTNET,
        WEBSOCKET_TRADE_MAINNET,
        WEBSOCKET_TRADE_TESTNET,
        WEBSOCKET_TRADE_DEMO,
        WEBSOCKET_PRIVATE_DEMO,
    }
)

_HEADER_PREFIX = "X-BAPI-"

TIMESTAMP_KEY = _HEADER_PREFIX + "TIMESTAMP"
SIGNATURE_KEY = _HEADER_PREFIX + "SIGN"
API_REQUEST_KEY = _HEADER_PREFIX + "API-KEY"
RECV_WINDOW_KEY = _HEADER_PREFIX + "RECV-WINDOW"
SIGN_TYPE_KEY = _HEADER_PREFIX + "SIGN-TYPE"