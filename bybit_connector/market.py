"""Market data endpoints of the v5 REST API and decoders for kline responses."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .client import ServerResponse

_MARK_PRICE_KLINE = "/v5/market/mark-price-kline"


@dataclass(frozen=True)
class MarketKlineCandle:
    """One candle of the market kline: prices, volume and turnover as strings."""

    start_time: str = ""
    open_price: str = ""
    high_price: str = ""
    low_price: str = ""
    close_price: str = ""
    volume: str = ""
    turnover: str = ""


@dataclass(frozen=True)
class MarketKlineResponse:
    """The decoded result of a market kline query."""

    category: str = ""
    symbol: str = ""
    list: list[MarketKlineCandle] = field(default_factory=list)


@dataclass(frozen=True)
class PriceKlineCandle:
    """One candle of a mark, index or premium index price kline."""

    start_time: str = ""
    open_price: str = ""
    high_price: str = ""
    low_price: str = ""
    close_price: str = ""


@dataclass(frozen=True)
class PriceKlineResponse:
    """The decoded result of a mark, index or premium index price kline query."""

    category: str = ""
    symbol: str = ""
    list: list[PriceKlineCandle] = field(default_factory=list)


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _array(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _result(data: bytes | str | Mapping[str, Any]) -> Mapping[str, Any]:
    payload = data if isinstance(data, Mapping) else json.loads(data)
    result = payload.get("result") if isinstance(payload, Mapping) else None
    return result if isinstance(result, Mapping) else {}


def _rows(result: Mapping[str, Any], width: int) -> list[list[str]]:
    rows = []
    for item in _array(result.get("list")):
        fields = _array(item)
        if len(fields) < width:
            raise ValueError("invalid kline response")
        rows.append([_string(value) for value in fields[:width]])
    return rows


def parse_market_kline(data: bytes | str | Mapping[str, Any]) -> MarketKlineResponse:
    """Decode a market kline response; every row needs seven fields."""
    result = _result(data)
    return MarketKlineResponse(
        category=_string(result.get("category")),
        symbol=_string(result.get("symbol")),
        list=[MarketKlineCandle(*row) for row in _rows(result, 7)],
    )


def _parse_price_kline(data: bytes | str | Mapping[str, Any]) -> PriceKlineResponse:
    result = _result(data)
    return PriceKlineResponse(
        category=_string(result.get("category")),
        symbol=_string(result.get("symbol")),
        list=[PriceKlineCandle(*row) for row in _rows(result, 5)],
    )


def parse_mark_price_kline(data: bytes | str | Mapping[str, Any]) -> PriceKlineResponse:
    """Decode a mark price kline response; every row needs five fields."""
    return _parse_price_kline(data)


def parse_index_price_kline(data: bytes | str | Mapping[str, Any]) -> PriceKlineResponse:
    """Decode an index price kline response; every row needs five fields."""
    return _parse_price_kline(data)


def parse_premium_index_kline(data: bytes | str | Mapping[str, Any]) -> PriceKlineResponse:
    """Decode a premium index price kline response; every row needs five fields."""
    return _parse_price_kline(data)


class MarketMixin:
    """Public market data requests; none of them is signed."""

    _call: Callable[..., ServerResponse]

    def _public(self, endpoint: str) -> ServerResponse:
        return self._call("GET", endpoint, signed=False)

    def get_server_time(self) -> ServerResponse:
        """Query the server time."""
        return self._public("/v5/market/time")

    def get_market_kline(self) -> ServerResponse:
        """Query the market kline."""
        return self._public("/v5/market/kline")

    def get_mark_price_kline(self) -> ServerResponse:
        """Query the mark price kline."""
        return self._public(_MARK_PRICE_KLINE)

    def get_index_price_kline(self) -> ServerResponse:
        """Query the index price kline."""
        return self._public(_MARK_PRICE_KLINE)

    def get_premium_index_price_kline(self) -> ServerResponse:
        """Query the premium index price kline."""
        return self._public(_MARK_PRICE_KLINE)

    def get_instrument_info(self) -> ServerResponse:
        """Query instrument specifications."""
        return self._public("/v5/market/instruments-info")

    def get_order_book_info(self) -> ServerResponse:
        """Query the order book."""
        return self._public("/v5/market/orderbook")

    def get_market_tickers(self) -> ServerResponse:
        """Query the latest tickers."""
        return self._public("/v5/market/tickers")

    def get_funding_rate_history(self) -> ServerResponse:
        """Query the funding rate history."""
        return self._public("/v5/market/funding/history")

    def get_public_recent_trades(self) -> ServerResponse:
        """Query recent public trades."""
        return self._public("/v5/market/recent-trade")

    def get_open_interests(self) -> ServerResponse:
        """Query the open interest."""
        return self._public("/v5/market/open-interest")

    def get_history_volatility(self) -> ServerResponse:
        """Query the historical volatility of options."""
        return self._public("/v5/market/historical-volatility")

    def get_market_insurance(self) -> ServerResponse:
        """Query the insurance fund."""
        return self._public("/v5/market/insurance")

    def get_market_risk_limits(self) -> ServerResponse:
        """Query the risk limits."""
        return self._public("/v5/market/risk-limit")

    def get_delivery_price(self) -> ServerResponse:
        """Query the delivery prices."""
        return self._public("/v5/market/delivery-price")

    def get_long_short_ratio(self) -> ServerResponse:
        """Query the long/short account ratio."""
        return self._public("/v5/market/account-ratio")