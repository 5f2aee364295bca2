"""Client for the Bybit v5 REST and WebSocket APIs: signed requests, kline parsing and streams."""

__version__ = "1.0.4"

__all__ = ["__version__"]