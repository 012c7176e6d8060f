"""Controller owning the wallet view state.

Two triggers drive the controller. ``mount`` schedules the price fetch and
``submit`` schedules a wallet query. Each runs as its own asyncio task and
hands its resolved value back through a done-callback, so only the
controller ever writes its state.
"""

import asyncio
from collections.abc import Callable

from xrpl_wallet.application.ports.price_feed import PriceQuotePort
from xrpl_wallet.application.use_cases.explore_wallet import (
    ExploreWalletUseCase,
)
from xrpl_wallet.domain.constants import UNKNOWN_ERROR_MESSAGE
from xrpl_wallet.domain.errors import WalletLookupError
from xrpl_wallet.domain.models import (
    Error,
    Idle,
    Loading,
    PriceQuote,
    Success,
    ViewState,
    WalletQuery,
    WalletSummary,
)
from xrpl_wallet.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

Listener = Callable[["ViewStateController"], None]


class ViewStateController:
    """Sequence the price and wallet flows and expose the current state."""

    def __init__(
        self,
        explore_wallet: ExploreWalletUseCase,
        price_feed: PriceQuotePort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the controller in the ``Idle`` state.

        Args:
            explore_wallet: Use case running a wallet query.
            price_feed: Port returning the native asset price.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording submitted queries.
        """
        self._explore_wallet = explore_wallet
        self._price_feed = price_feed
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._state: ViewState = Idle()
        self._price_quote: PriceQuote | None = None
        self._address_input = ""
        self._listeners: list[Listener] = []
        self._query_task: asyncio.Task | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def price_quote(self) -> PriceQuote | None:
        return self._price_quote

    @property
    def address_input(self) -> str:
        return self._address_input

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def can_submit(self) -> bool:
        """Return True when the submit trigger should be enabled."""
        return (
            not self.is_loading
            and WalletQuery(self._address_input).is_submittable
        )

    @property
    def summary(self) -> WalletSummary | None:
        if isinstance(self._state, Success):
            return self._state.summary
        return None

    @property
    def error_message(self) -> str | None:
        if isinstance(self._state, Error):
            return self._state.message
        return None

    def set_address_input(self, text: str) -> None:
        """Record the address typed by the user."""
        self._address_input = text or ""

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every state or price change.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def mount(self) -> asyncio.Task:
        """Schedule the price fetch. Must be called from a running loop."""
        task = asyncio.create_task(self._price_feed.fetch_quote())
        task.add_done_callback(self._on_price_resolved)
        return task

    def submit(self, address: str | None = None) -> asyncio.Task | None:
        """Start a wallet query unless one is running or the input is empty.

        Args:
            address: Optional address replacing the current input.

        Returns:
            asyncio.Task | None: The query task, or None when ignored.
        """
        if address is not None:
            self.set_address_input(address)
        if not self.can_submit:
            self._logger.debug(
                "Ignoring submission while loading or with empty address"
            )
            return None

        query = WalletQuery(self._address_input)
        self._usage_logger.info(f"Wallet query submitted: {query.address}")
        self._set_state(Loading(address=query.address))

        task = asyncio.create_task(self._run_query(query))
        task.add_done_callback(self._on_query_resolved)
        self._query_task = task
        return task

    async def refresh_price(self) -> PriceQuote | None:
        """Fetch the price and wait until the controller has stored it."""
        await asyncio.wait([self.mount()])
        return self._price_quote

    async def explore(self, address: str | None = None) -> ViewState:
        """Submit a query and wait for its terminal state."""
        task = self.submit(address)
        pending = task or self._query_task
        if pending is not None:
            await asyncio.wait([pending])
        return self._state

    async def _run_query(self, query: WalletQuery) -> ViewState:
        try:
            summary = await self._explore_wallet.execute(query)
        except WalletLookupError as exc:
            self._logger.warning(
                f"Wallet query for {query.address} failed: "
                f"{type(exc).__name__}: {exc.message}"
            )
            return Error(message=exc.message)
        return Success(summary=summary)

    def _on_query_resolved(self, task: asyncio.Task) -> None:
        if self._query_task is task:
            self._query_task = None
        if task.cancelled():
            self._logger.warning("Wallet query task was cancelled")
            self._set_state(Error(message=UNKNOWN_ERROR_MESSAGE))
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error(f"Unexpected wallet query failure: {exc!r}")
            self._set_state(Error(message=UNKNOWN_ERROR_MESSAGE))
            return
        self._set_state(task.result())

    def _on_price_resolved(self, task: asyncio.Task) -> None:
        if task.cancelled():
            quote = PriceQuote.fallback()
        elif task.exception() is not None:
            self._logger.error(
                f"Price feed raised unexpectedly: {task.exception()!r}"
            )
            quote = PriceQuote.fallback()
        else:
            quote = task.result()
        self._price_quote = quote
        self._logger.info(
            f"Price quote stored: usd={quote.usd}, "
            f"fallback={quote.is_fallback}"
        )
        self._notify()

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


__all__ = ["ViewStateController"]
