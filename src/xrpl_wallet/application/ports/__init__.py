"""Application ports package."""

from .account_explorer import AccountExplorerPort
from .price_feed import PriceQuotePort

__all__ = ["AccountExplorerPort", "PriceQuotePort"]
