"""Domain constants for the XRP ledger wallet explorer."""

from decimal import Decimal

DROPS_PER_XRP = Decimal(10) ** 6
NATIVE_DECIMALS = 6
NATIVE_QUANTUM = Decimal("0.000001")

SUCCESS_RESULT_CODE = "tesSUCCESS"
UNKNOWN_TRANSACTION_TYPE = "Unknown"
FEE_NOT_AVAILABLE = "N/A"

TRANSACTION_TYPE_LABELS = {
    "Payment": "Payment",
    "AccountSet": "Account Update",
    "TrustSet": "Trustline Set",
}

FALLBACK_USD_PRICE = Decimal("0.50")

CONNECTION_FAILURE_MESSAGE = (
    "Failed to connect to the server or invalid address format."
)
DECODE_FAILURE_MESSAGE = "Server returned invalid JSON response"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

__all__ = [
    "DROPS_PER_XRP",
    "NATIVE_DECIMALS",
    "NATIVE_QUANTUM",
    "SUCCESS_RESULT_CODE",
    "UNKNOWN_TRANSACTION_TYPE",
    "FEE_NOT_AVAILABLE",
    "TRANSACTION_TYPE_LABELS",
    "FALLBACK_USD_PRICE",
    "CONNECTION_FAILURE_MESSAGE",
    "DECODE_FAILURE_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
]
