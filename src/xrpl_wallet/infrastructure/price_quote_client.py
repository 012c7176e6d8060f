"""CoinGecko adapter for the native asset price."""

from decimal import Decimal, InvalidOperation

import httpx

from xrpl_wallet.domain.models import PriceQuote
from xrpl_wallet.infrastructure.logging.logger import get_app_logger


class CoinGeckoPriceQuoteClient:
    """Fetch the XRP/USD price from the CoinGecko simple price endpoint.

    Any transport error or unexpected body shape yields
    ``PriceQuote.fallback()``. One request per call, no retry.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Quote endpoint URL.
            timeout: Transport timeout in seconds.
            client: Optional shared ``httpx.AsyncClient``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._url = url
        self._timeout = timeout
        self._client = client
        self._logger = logger or get_app_logger()

    async def fetch_quote(self) -> PriceQuote:
        try:
            payload = await self._get_json()
            usd = self._extract_usd(payload)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            self._logger.warning(f"Failed to fetch XRP price: {exc!r}")
            return PriceQuote.fallback()
        return PriceQuote(usd=usd, is_fallback=False)

    async def _get_json(self):
        if self._client is not None:
            response = await self._client.get(self._url)
            return response.json()
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url)
        return response.json()

    @staticmethod
    def _extract_usd(payload) -> Decimal:
        """Return ``payload["ripple"]["usd"]`` as a Decimal.

        Raises:
            ValueError: If the field is missing or not a finite number.
        """
        asset = payload.get("ripple") if isinstance(payload, dict) else None
        value = asset.get("usd") if isinstance(asset, dict) else None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Unexpected price payload: {payload!r}")
        try:
            usd = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Unexpected price value: {value!r}") from exc
        if not usd.is_finite():
            raise ValueError(f"Unexpected price value: {value!r}")
        return usd


__all__ = ["CoinGeckoPriceQuoteClient"]
