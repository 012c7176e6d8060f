"""Transaction type and outcome classification."""

from xrpl_wallet.domain.constants import (
    SUCCESS_RESULT_CODE,
    TRANSACTION_TYPE_LABELS,
    UNKNOWN_TRANSACTION_TYPE,
)


def label_transaction_type(transaction_type) -> str:
    """Map a ledger transaction type to a display label.

    Known types use the fixed lookup, other codes pass through unchanged and
    a missing code becomes ``"Unknown"``.
    """
    if not transaction_type:
        return UNKNOWN_TRANSACTION_TYPE
    if not isinstance(transaction_type, str):
        return str(transaction_type)
    return TRANSACTION_TYPE_LABELS.get(transaction_type, transaction_type)


def is_successful_result(result_code) -> bool:
    """Return True only for the ledger success code."""
    return result_code == SUCCESS_RESULT_CODE


__all__ = ["label_transaction_type", "is_successful_result"]
