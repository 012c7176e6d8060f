"""Application use cases package."""

from .decode_wallet_response import ResponseDecoder
from .explore_wallet import ExploreWalletUseCase
from .format_transactions import TransactionFormatter
from .view_state_controller import ViewStateController

__all__ = [
    "ResponseDecoder",
    "ExploreWalletUseCase",
    "TransactionFormatter",
    "ViewStateController",
]
