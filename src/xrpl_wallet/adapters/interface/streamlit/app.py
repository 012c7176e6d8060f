"""Streamlit page driving the wallet view state controller."""

import asyncio
from decimal import (
    Decimal,
    InvalidOperation,
    ROUND_HALF_UP,
    getcontext,
    localcontext,
)

from dotenv import load_dotenv
import streamlit as st

from xrpl_wallet.application.use_cases.view_state_controller import (
    ViewStateController,
)
from xrpl_wallet.domain.models import (
    DisplayTransaction,
    Error,
    PriceQuote,
    Success,
    ViewState,
    WalletSummary,
)
from xrpl_wallet.infrastructure.container import build_view_state_controller

CONTROLLER_KEY = "wallet_controller"


def _get_controller() -> ViewStateController:
    """Return the controller stored in the Streamlit session."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_view_state_controller()
    return st.session_state[CONTROLLER_KEY]


def _to_decimal(value) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount.adjusted() > getcontext().Emax:
        return None
    return amount


def _format_currency(value, decimals: int = 2) -> str:
    """Format a number with thousands separators and fixed decimals.

    Returns an all-zero string when ``value`` is missing or not numeric.
    """
    amount = _to_decimal(value)
    if amount is None:
        amount = Decimal("0")
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, max(amount.adjusted(), 0) + decimals + 2)
        rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:,.{decimals}f}"


def _format_price(quote: PriceQuote | None) -> str:
    if quote is None:
        return "$0.0000"
    return f"${_format_currency(quote.usd, 4)}"


def _transaction_row(tx: DisplayTransaction) -> dict[str, str]:
    amount = f"{tx.amount_native} XRP" if tx.amount_native else ""
    return {
        "": tx.type_initial,
        "Type": tx.type_label,
        "Status": tx.status_label,
        "Amount": amount,
        "Fee": f"{tx.fee_native} XRP",
    }


def _render_price(quote: PriceQuote | None) -> None:
    label = "XRP Price (fallback)" if quote and quote.is_fallback else "XRP Price"
    st.metric(label, _format_price(quote))


def _render_summary(summary: WalletSummary) -> None:
    st.subheader("Wallet Overview")
    st.caption(summary.address or "N/A")
    balance_col, usd_col = st.columns(2)
    balance_col.metric(
        "XRP Balance",
        f"{_format_currency(summary.balance_native, 6)} XRP",
    )
    usd_col.metric(
        "USD Value",
        f"${_format_currency(summary.usd_value, 2)}",
    )

    st.subheader("Recent Transactions")
    st.caption(f"{summary.transaction_count} txns")
    if not summary.transactions:
        st.info("No recent transactions found")
        return
    st.dataframe(
        [_transaction_row(tx) for tx in summary.transactions],
        width="stretch",
        hide_index=True,
    )


def _render_state(state: ViewState) -> None:
    if isinstance(state, Error):
        st.error(state.message)
    elif isinstance(state, Success):
        _render_summary(state.summary)


def main() -> None:
    """Render the wallet explorer page."""
    load_dotenv()
    st.set_page_config(page_title="XRPL Wallet Explorer")
    st.title("XRPL Wallet Explorer")
    st.caption("Explore XRP wallets • Track balances • View transactions")

    controller = _get_controller()
    if controller.price_quote is None:
        asyncio.run(controller.refresh_price())
    _render_price(controller.price_quote)

    address = st.text_input(
        "Search Wallet",
        placeholder="Enter XRP address (r...)",
    )
    controller.set_address_input(address)
    if st.button("Explore", disabled=not controller.can_submit):
        with st.spinner("Loading wallet..."):
            asyncio.run(controller.explore())

    _render_state(controller.state)


if __name__ == "__main__":  # pragma: no cover
    main()
