"""Domain package for wallet models and pure rules."""

from .errors import (
    ApplicationFailure,
    ConnectionFailure,
    DecodeFailure,
    WalletLookupError,
)
from .models import (
    DisplayTransaction,
    Error,
    ExplorerResponse,
    Idle,
    Loading,
    PriceQuote,
    Success,
    ViewState,
    WalletPayload,
    WalletQuery,
    WalletSummary,
)

__all__ = [
    "ApplicationFailure",
    "ConnectionFailure",
    "DecodeFailure",
    "WalletLookupError",
    "DisplayTransaction",
    "ExplorerResponse",
    "PriceQuote",
    "WalletPayload",
    "WalletQuery",
    "WalletSummary",
    "Idle",
    "Loading",
    "Success",
    "Error",
    "ViewState",
]
