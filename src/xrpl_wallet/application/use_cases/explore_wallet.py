"""Use case to look up a wallet through the account explorer."""

from xrpl_wallet.application.ports.account_explorer import AccountExplorerPort
from xrpl_wallet.application.use_cases.decode_wallet_response import (
    ResponseDecoder,
)
from xrpl_wallet.application.use_cases.format_transactions import (
    TransactionFormatter,
)
from xrpl_wallet.domain.models import WalletQuery, WalletSummary
from xrpl_wallet.infrastructure.logging.logger import get_app_logger


class ExploreWalletUseCase:
    """Run the explore, decode and format stages for one query.

    Stages run strictly in sequence. Failures surface as
    ``WalletLookupError`` subclasses raised by the stage that failed.
    """

    def __init__(
        self,
        explorer: AccountExplorerPort,
        decoder: ResponseDecoder | None = None,
        formatter: TransactionFormatter | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            explorer: Port reaching the explorer backend.
            decoder: Optional decoder override.
            formatter: Optional transaction formatter override.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._explorer = explorer
        self._logger = logger or get_app_logger()
        self._decoder = decoder or ResponseDecoder(logger=self._logger)
        self._formatter = formatter or TransactionFormatter()

    async def execute(self, query: WalletQuery) -> WalletSummary:
        """Return the wallet summary for ``query``.

        Raises:
            ConnectionFailure: If the explorer cannot be reached.
            DecodeFailure: If the explorer body is not valid JSON.
            ApplicationFailure: If the explorer rejected the query.
        """
        response = await self._explorer.explore(query.address)
        payload = self._decoder.decode(response)
        transactions = self._formatter.format_all(payload.transactions)

        self._logger.info(
            f"Wallet summary built for {query.address}: "
            f"{len(transactions)} transactions"
        )
        return WalletSummary(
            address=payload.address,
            balance_native=payload.balance_xrp,
            usd_value=payload.usd_value,
            transactions=transactions,
        )


__all__ = ["ExploreWalletUseCase"]
