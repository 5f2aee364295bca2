"""The request object that carries parameters to every REST endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .account import AccountMixin
from .asset import AssetMixin
from .broker import BrokerMixin
from .client import Client, ClientRequest
from .lending import LendingMixin
from .market import MarketMixin


class BybitClientRequest(
    AccountMixin,
    AssetMixin,
    BrokerMixin,
    LendingMixin,
    MarketMixin,
    ClientRequest,
):
    """Parameters bound to a client, with a method for each REST endpoint."""


def new_uta_service(
    client: Client, params: Mapping[str, Any] | None = None
) -> BybitClientRequest:
    """Create a request for a unified trading account."""
    return BybitClientRequest(client, params, is_uta=True)


def new_classical_service(
    client: Client, params: Mapping[str, Any] | None = None
) -> BybitClientRequest:
    """Create a request for a classic account."""
    return BybitClientRequest(client, params, is_uta=False)