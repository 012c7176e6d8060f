"""HTTP adapter for the account explorer backend."""

import httpx

from xrpl_wallet.domain.errors import ConnectionFailure
from xrpl_wallet.domain.models import ExplorerResponse
from xrpl_wallet.infrastructure.logging.logger import get_app_logger

EXPLORE_PATH = "/explore"
REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class HttpAccountExplorerClient:
    """POST an address to ``{base_url}/explore`` and return the raw reply."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Explorer base URL.
            timeout: Transport timeout in seconds.
            client: Optional shared ``httpx.AsyncClient``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._url = f"{base_url.rstrip('/')}{EXPLORE_PATH}"
        self._timeout = timeout
        self._client = client
        self._logger = logger or get_app_logger()

    @property
    def url(self) -> str:
        return self._url

    async def explore(self, address: str) -> ExplorerResponse:
        """Send ``address`` to the explorer.

        Args:
            address: Ledger address; format is validated by the backend.

        Returns:
            ExplorerResponse: Status code and raw body text.

        Raises:
            ValueError: If ``address`` is empty.
            ConnectionFailure: On connection errors, timeouts, or an
                unusable request URL.
        """
        if not isinstance(address, str) or not address:
            raise ValueError("address must be a non-empty string")

        body = {"address": address}
        self._logger.debug(f"Making request to: {self._url}")
        self._logger.debug(f"Request body: {body}")
        try:
            response = await self._post(body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._logger.error(f"Explorer request failed: {exc!r}")
            raise ConnectionFailure() from exc

        self._logger.info(f"Response status: {response.status_code}")
        self._logger.debug(f"Raw response: {response.text}")
        return ExplorerResponse(
            status=response.status_code,
            raw_body=response.text,
        )

    async def _post(self, body: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(
                self._url,
                json=body,
                headers=REQUEST_HEADERS,
            )
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(
                self._url,
                json=body,
                headers=REQUEST_HEADERS,
            )


__all__ = ["HttpAccountExplorerClient", "EXPLORE_PATH", "REQUEST_HEADERS"]
