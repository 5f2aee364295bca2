"""Account endpoints of the v5 REST API."""

from __future__ import annotations

from collections.abc import Callable

from .client import ServerResponse

_UTA_TRANSACTION_LOG = "/v5/account/transaction-log"
_CLASSIC_TRANSACTION_LOG = "/v5/account/contract-transaction-log"


class AccountMixin:
    """Requests on the account: wallet, fees, margin and protection settings."""

    is_uta: bool
    _call: Callable[..., ServerResponse]

    def get_transaction_log(self) -> ServerResponse:
        """Query the transaction log of the unified or the classic account."""
        endpoint = _UTA_TRANSACTION_LOG if self.is_uta else _CLASSIC_TRANSACTION_LOG
        return self._call("GET", endpoint, validate=True)

    def get_fee_rates(self) -> ServerResponse:
        """Query the trading fee rates."""
        return self._call("GET", "/v5/account/fee-rate", validate=True)

    def get_account_wallet(self) -> ServerResponse:
        """Query the wallet balance."""
        return self._call("GET", "/v5/account/wallet-balance", validate=True)

    def get_borrow_history(self) -> ServerResponse:
        """Query the interest and borrowing history."""
        return self._call("GET", "/v5/account/borrow-history", validate=True)

    def get_coin_greeks(self) -> ServerResponse:
        """Query the greeks of option positions per coin."""
        return self._call("GET", "/v5/asset/coin-greeks", validate=True)

    def get_collateral_info(self) -> ServerResponse:
        """Query the collateral information of coins."""
        return self._call("GET", "/v5/account/collateral-info", validate=True)

    def get_account_info(self) -> ServerResponse:
        """Query the account's margin mode and status."""
        return self._call("GET", "/v5/account/info")

    def get_mmp_state(self) -> ServerResponse:
        """Query the market maker protection state."""
        return self._call("GET", "/v5/account/mmp-state")

    def set_spot_hedge_mode(self) -> ServerResponse:
        """Switch spot hedging on or off."""
        return self._call("GET", "/v5/account/set-hedging-mode")

    def upgrade_to_uta(self) -> ServerResponse:
        """Upgrade the account to a unified trading account."""
        return self._call("POST", "/v5/account/upgrade-to-uta")

    def set_collateral_coin(self) -> ServerResponse:
        """Switch a coin's use as collateral."""
        return self._call("POST", "/v5/account/set-collateral-switch")

    def set_margin_mode(self) -> ServerResponse:
        """Set the account's margin mode."""
        return self._call("POST", "/v5/account/set-margin-mode")

    def set_market_maker_protection(self) -> ServerResponse:
        """Configure market maker protection."""
        return self._call("POST", "/v5/account/mmp-modify")

    def reset_market_maker_protection(self) -> ServerResponse:
        """Reset a frozen market maker protection."""
        return self._call("POST", "/v5/account/mmp-reset")

    def get_disconnect_protection_info(self) -> ServerResponse:
        """Query the disconnect cancel-all settings."""
        return self._call("GET", "/v5/account/query-dcp-info")

    def get_self_market_protection_group(self) -> ServerResponse:
        """Query the self-match prevention group."""
        return self._call("GET", "/v5/account/smp-group")