"""Institutional loan and C2C lending endpoints of the v5 REST API."""

from __future__ import annotations

import warnings
from collections.abc import Callable

from .client import ServerResponse


def _deprecated(name: str) -> None:
    warnings.warn(f"{name} is deprecated", DeprecationWarning, stacklevel=3)


class LendingMixin:
    """Requests on institutional loans and the deprecated C2C lending."""

    _call: Callable[..., ServerResponse]

    def get_ins_loan_info(self) -> ServerResponse:
        """Query institutional loan products."""
        return self._call("GET", "/v5/ins-loan/product-infos", validate=True)

    def get_ins_margin_coin_info(self) -> ServerResponse:
        """Query margin coin conversion information."""
        return self._call("GET", "/v5/ins-loan/ensure-tokens-convert", validate=True)

    def get_ins_loan_orders(self) -> ServerResponse:
        """Query institutional loan orders."""
        return self._call("GET", "/v5/ins-loan/loan-order", validate=True)

    def get_ins_repay_orders(self) -> ServerResponse:
        """Query institutional loan repayments."""
        return self._call("GET", "/v5/ins-loan/repaid-history", validate=True)

    def get_ins_loan_to_value(self) -> ServerResponse:
        """Query the loan-to-value ratio."""
        return self._call("GET", "/v5/ins-loan/ltv-convert")

    def associate_ins_loan(self) -> ServerResponse:
        """Bind or unbind a uid to an institutional loan."""
        return self._call("POST", "/v5/ins-loan/association-uid")

    def get_c2c_lending_coin_info(self) -> ServerResponse:
        """Query C2C lending coins. Deprecated."""
        _deprecated("get_c2c_lending_coin_info")
        return self._call("GET", "/v5/lending/info", validate=True)

    def get_c2c_lending_orders(self) -> ServerResponse:
        """Query C2C lending order history. Deprecated."""
        _deprecated("get_c2c_lending_orders")
        return self._call("GET", "/v5/lending/history-order", validate=True)

    def get_c2c_lending_account_info(self) -> ServerResponse:
        """Query the C2C lending account. Deprecated."""
        _deprecated("get_c2c_lending_account_info")
        return self._call("GET", "/v5/lending/account", validate=True)

    def c2c_deposit_funds(self) -> ServerResponse:
        """Deposit funds into C2C lending. Deprecated."""
        _deprecated("c2c_deposit_funds")
        return self._call("POST", "/v5/lending/purchase", validate=True)

    def c2c_redeem_funds(self) -> ServerResponse:
        """Redeem funds from C2C lending. Deprecated."""
        _deprecated("c2c_redeem_funds")
        return self._call("POST", "/v5/lending/redeem", validate=True)

    def c2c_cancel_redeem_funds(self) -> ServerResponse:
        """Cancel a C2C lending redemption. Deprecated."""
        _deprecated("c2c_cancel_redeem_funds")
        return self._call("POST", "/v5/lending/redeem-cancel", validate=True)