"""Asset endpoints of the v5 REST API: balances, transfers, deposits, withdrawals, conversion."""

from __future__ import annotations

from collections.abc import Callable

from .client import ServerResponse


class AssetMixin:
    """Requests on assets held across the account's wallets."""

    _call: Callable[..., ServerResponse]

    def get_asset_order_record(self) -> ServerResponse:
        """Query the coin exchange records."""
        return self._call("GET", "/v5/asset/exchange/order-record")

    def get_asset_info(self) -> ServerResponse:
        """Query the spot account's asset information."""
        return self._call("GET", "/v5/asset/transfer/query-asset-info")

    def get_delivery_record(self) -> ServerResponse:
        """Query the delivery records of expired contracts."""
        return self._call("GET", "/v5/asset/delivery-record")

    def get_usdc_settlement(self) -> ServerResponse:
        """Query the USDC session settlement records."""
        return self._call("GET", "/v5/asset/settlement-record")

    def get_all_coins_balance(self) -> ServerResponse:
        """Query the balance of every coin in an account type."""
        return self._call("GET", "/v5/asset/transfer/query-account-coins-balance")

    def get_single_coins_balance(self) -> ServerResponse:
        """Query the balance of one coin in an account type."""
        return self._call(
            "GET", "/v5/asset/transfer/query-account-coin-balance", validate=True
        )

    def get_transferable_coin(self) -> ServerResponse:
        """Query the coins that can move between two account types."""
        return self._call(
            "GET", "/v5/asset/transfer/query-transfer-coin-list", validate=True
        )

    def create_internal_transfer(self) -> ServerResponse:
        """Transfer a coin between the account types of one uid."""
        return self._call("POST", "/v5/asset/transfer/inter-transfer", validate=True)

    def create_universal_transfer(self) -> ServerResponse:
        """Transfer a coin between master and sub accounts."""
        return self._call(
            "POST", "/v5/asset/transfer/universal-transfer", validate=True
        )

    def set_deposit_account(self) -> ServerResponse:
        """Set the account type that receives deposits."""
        return self._call(
            "POST", "/v5/asset/deposit/deposit-to-account", validate=True
        )

    def create_withdraw(self) -> ServerResponse:
        """Withdraw a coin."""
        return self._call("POST", "/v5/asset/withdraw/create", validate=True)

    def cancel_withdraw(self) -> ServerResponse:
        """Cancel a pending withdrawal."""
        return self._call("POST", "/v5/asset/withdraw/cancel", validate=True)

    def get_internal_transfer_records(self) -> ServerResponse:
        """Query internal transfer records."""
        return self._call(
            "GET", "/v5/asset/transfer/query-inter-transfer-list", validate=True
        )

    def get_universal_transfer_records(self) -> ServerResponse:
        """Query universal transfer records."""
        return self._call("GET", "/v5/asset/transfer/query-universal-transfer-list")

    def get_sub_acc_uids(self) -> ServerResponse:
        """Query the uids of sub accounts."""
        return self._call("GET", "/v5/asset/transfer/query-sub-member-list")

    def get_allowed_deposit_coin(self) -> ServerResponse:
        """Query the coins and chains allowed for deposit."""
        return self._call("GET", "/v5/asset/deposit/query-allowed-list")

    def get_deposit_records(self) -> ServerResponse:
        """Query on-chain deposit records."""
        return self._call("GET", "/v5/asset/deposit/query-record")

    def get_sub_member_deposit_records(self) -> ServerResponse:
        """Query a sub-member's deposit records."""
        return self._call("GET", "/v5/asset/deposit/query-sub-member-record")

    def get_internal_deposit_records(self) -> ServerResponse:
        """Query internal (off-chain) deposit records."""
        return self._call("GET", "/v5/asset/deposit/query-internal-record")

    def get_master_acc_deposit_address(self) -> ServerResponse:
        """Query the master account's deposit address."""
        return self._call("GET", "/v5/asset/deposit/query-address")

    def get_sub_acc_deposit_address(self) -> ServerResponse:
        """Query a sub account's deposit address."""
        return self._call("GET", "/v5/asset/deposit/query-sub-member-address")

    def get_coin_info(self) -> ServerResponse:
        """Query coin and chain information."""
        return self._call("GET", "/v5/asset/coin/query-info")

    def get_withdrawal_amount(self) -> ServerResponse:
        """Query the amount that can be withdrawn."""
        return self._call("GET", "/v5/asset/withdraw/withdrawable-amount")

    def get_withdrawal_records(self) -> ServerResponse:
        """Query withdrawal records."""
        return self._call("GET", "/v5/asset/withdraw/query-record")

    def get_convert_coin_list(self) -> ServerResponse:
        """Query the coins available for conversion."""
        return self._call("GET", "/v5/asset/exchange/query-coin-list")

    def get_convert_status(self) -> ServerResponse:
        """Query the result of a conversion."""
        return self._call("GET", "/v5/asset/exchange/convert-result-query")

    def get_convert_history(self) -> ServerResponse:
        """Query the conversion history."""
        return self._call("GET", "/v5/asset/exchange/query-convert-history")

    def request_convert_quote(self) -> ServerResponse:
        """Request a conversion quote."""
        return self._call("POST", "/v5/asset/exchange/quote-apply")

    def confirm_convert_quote(self) -> ServerResponse:
        """Execute a conversion at a quoted price."""
        return self._call("POST", "/v5/asset/exchange/convert-execute")