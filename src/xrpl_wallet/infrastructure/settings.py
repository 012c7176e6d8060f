"""Settings for the remote services used by the wallet explorer."""

from dataclasses import dataclass
import os

from xrpl_wallet.infrastructure.logging.logger import get_app_logger

DEFAULT_EXPLORER_API_URL = "http://127.0.0.1:8000/api"
DEFAULT_PRICE_FEED_URL = (
    "https://api.coingecko.com/api/v3/simple/price"
    "?ids=ripple&vs_currencies=usd"
)
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ExplorerSettings:
    """Settings for the explorer backend and price feed.

    Attributes:
        explorer_api_url: Base URL of the explorer backend, without a
            trailing slash.
        price_feed_url: Full URL of the price quote endpoint.
        http_timeout: Transport timeout in seconds.
    """

    explorer_api_url: str = DEFAULT_EXPLORER_API_URL
    price_feed_url: str = DEFAULT_PRICE_FEED_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ExplorerSettings":
        """Build settings from environment variables.

        Returns:
            ExplorerSettings: Settings sourced from environment variables.
        """
        explorer_api_url = (
            os.getenv("EXPLORER_API_URL") or DEFAULT_EXPLORER_API_URL
        ).strip().rstrip("/")
        price_feed_url = (
            os.getenv("PRICE_FEED_URL") or DEFAULT_PRICE_FEED_URL
        ).strip()
        http_timeout = cls._parse_timeout(os.getenv("HTTP_TIMEOUT_SECONDS"))
        return cls(
            explorer_api_url=explorer_api_url,
            price_feed_url=price_feed_url,
            http_timeout=http_timeout,
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None) -> float:
        """Parse the timeout, falling back to the default on bad input.

        Args:
            raw_value: Raw environment value.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_HTTP_TIMEOUT_SECONDS
        try:
            timeout = float(raw_value)
        except ValueError:
            timeout = 0.0
        if timeout <= 0:
            get_app_logger().warning(
                f"Invalid HTTP_TIMEOUT_SECONDS={raw_value!r}; "
                f"using {DEFAULT_HTTP_TIMEOUT_SECONDS}"
            )
            return DEFAULT_HTTP_TIMEOUT_SECONDS
        return timeout


__all__ = [
    "ExplorerSettings",
    "DEFAULT_EXPLORER_API_URL",
    "DEFAULT_PRICE_FEED_URL",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
]
