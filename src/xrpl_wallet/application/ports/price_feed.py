"""Port for the market price feed."""

from typing import Protocol

from xrpl_wallet.domain.models import PriceQuote


class PriceQuotePort(Protocol):
    """Port returning the current USD price of the native asset.

    Implementations never raise; an unavailable feed yields the fallback
    quote instead.
    """

    async def fetch_quote(self) -> PriceQuote:
        """Return the current quote or the fallback quote."""


__all__ = ["PriceQuotePort"]
