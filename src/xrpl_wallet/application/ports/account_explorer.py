"""Port for the remote account explorer.

The explorer is a black box reached over HTTP. Adapters return the raw
status and body and leave decoding to the application layer.
"""

from typing import Protocol

from xrpl_wallet.domain.models import ExplorerResponse


class AccountExplorerPort(Protocol):
    """Port sending an address to the explorer backend."""

    async def explore(self, address: str) -> ExplorerResponse:
        """Look up an address.

        Args:
            address: Non-empty ledger address.

        Returns:
            ExplorerResponse: HTTP status and raw body text.

        Raises:
            ConnectionFailure: When the backend cannot be reached.
            ValueError: When ``address`` is empty.
        """


__all__ = ["AccountExplorerPort"]
