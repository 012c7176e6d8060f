"""Formatting of raw ledger transactions for display."""

from collections.abc import Iterable
from typing import Any

from xrpl_wallet.domain.constants import FEE_NOT_AVAILABLE
from xrpl_wallet.domain.models import DisplayTransaction
from xrpl_wallet.domain.services import (
    drops_text_to_native_text,
    is_successful_result,
    label_transaction_type,
)


class TransactionFormatter:
    """Map raw explorer transaction records to ``DisplayTransaction``."""

    def format(self, raw_tx: Any) -> DisplayTransaction:
        """Format one raw record.

        Args:
            raw_tx: Mapping shaped like ``{"tx": {...}, "meta": {...}}``.
                Missing or malformed parts are tolerated.

        Returns:
            DisplayTransaction: Display-ready record.
        """
        tx = self._section(raw_tx, "tx")
        meta = self._section(raw_tx, "meta")

        # Issued-currency amounts are objects and are never shown as XRP.
        amount_native = drops_text_to_native_text(tx.get("Amount"))
        fee_native = drops_text_to_native_text(self._fee_text(tx.get("Fee")))

        return DisplayTransaction(
            type_label=label_transaction_type(tx.get("TransactionType")),
            succeeded=is_successful_result(meta.get("TransactionResult")),
            amount_native=amount_native,
            fee_native=fee_native or FEE_NOT_AVAILABLE,
        )

    def format_all(
        self,
        raw_transactions: Iterable[Any],
    ) -> tuple[DisplayTransaction, ...]:
        """Format records preserving their order."""
        return tuple(self.format(raw_tx) for raw_tx in raw_transactions)

    @staticmethod
    def _fee_text(value: Any) -> Any:
        # Fees may arrive as JSON numbers; amounts never do.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @staticmethod
    def _section(raw_tx: Any, key: str) -> dict:
        if not isinstance(raw_tx, dict):
            return {}
        section = raw_tx.get(key)
        return section if isinstance(section, dict) else {}


__all__ = ["TransactionFormatter"]
