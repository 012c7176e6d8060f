"""Composition root for wiring infrastructure adapters."""

from xrpl_wallet.application.ports.account_explorer import AccountExplorerPort
from xrpl_wallet.application.ports.price_feed import PriceQuotePort
from xrpl_wallet.application.use_cases.explore_wallet import (
    ExploreWalletUseCase,
)
from xrpl_wallet.application.use_cases.view_state_controller import (
    ViewStateController,
)
from xrpl_wallet.infrastructure.account_explorer_client import (
    HttpAccountExplorerClient,
)
from xrpl_wallet.infrastructure.logging.logger import get_app_logger
from xrpl_wallet.infrastructure.price_quote_client import (
    CoinGeckoPriceQuoteClient,
)
from xrpl_wallet.infrastructure.settings import ExplorerSettings


def build_price_quote_client(
    settings: ExplorerSettings | None = None,
) -> PriceQuotePort:
    """Return the configured price feed adapter."""
    resolved = settings or ExplorerSettings.from_env()
    return CoinGeckoPriceQuoteClient(
        resolved.price_feed_url,
        timeout=resolved.http_timeout,
        logger=get_app_logger(),
    )


def build_account_explorer_client(
    settings: ExplorerSettings | None = None,
) -> AccountExplorerPort:
    """Return the configured explorer adapter."""
    resolved = settings or ExplorerSettings.from_env()
    return HttpAccountExplorerClient(
        resolved.explorer_api_url,
        timeout=resolved.http_timeout,
        logger=get_app_logger(),
    )


def build_explore_wallet_use_case(
    settings: ExplorerSettings | None = None,
) -> ExploreWalletUseCase:
    """Return the wallet lookup use case."""
    return ExploreWalletUseCase(
        build_account_explorer_client(settings),
        logger=get_app_logger(),
    )


def build_view_state_controller(
    settings: ExplorerSettings | None = None,
) -> ViewStateController:
    """Return a controller wired to the configured remote services."""
    resolved = settings or ExplorerSettings.from_env()
    return ViewStateController(
        build_explore_wallet_use_case(resolved),
        build_price_quote_client(resolved),
    )


__all__ = [
    "build_price_quote_client",
    "build_account_explorer_client",
    "build_explore_wallet_use_case",
    "build_view_state_controller",
]
