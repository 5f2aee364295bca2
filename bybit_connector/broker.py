"""Broker endpoints of the v5 REST API."""

from __future__ import annotations

from collections.abc import Callable

from .client import ServerResponse


class BrokerMixin:
    """Requests available to exchange brokers."""

    _call: Callable[..., ServerResponse]

    def get_broker_earning(self) -> ServerResponse:
        """Query the broker's earnings."""
        return self._call("GET", "/v5/broker/earnings-info", validate=True)

    def get_broker_account_info(self) -> ServerResponse:
        """Query the broker account's information."""
        return self._call("GET", "/v5/broker/account-info", validate=True)

    def get_all_sub_members_deposit_records(self) -> ServerResponse:
        """Query the deposit records of all sub-members."""
        return self._call(
            "GET", "/v5/broker/asset/query-sub-member-deposit-record", validate=True
        )