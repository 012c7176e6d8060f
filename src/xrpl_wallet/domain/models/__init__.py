"""Domain models package."""

from .view_state import Error, Idle, Loading, Success, ViewState
from .wallet import (
    DisplayTransaction,
    ExplorerResponse,
    PriceQuote,
    WalletPayload,
    WalletQuery,
    WalletSummary,
)

__all__ = [
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
