"""Tests for wallet domain models."""

from decimal import Decimal

from xrpl_wallet.domain.errors import (
    ApplicationFailure,
    ConnectionFailure,
    DecodeFailure,
)
from xrpl_wallet.domain.models import (
    DisplayTransaction,
    ExplorerResponse,
    PriceQuote,
    WalletQuery,
    WalletSummary,
)


def test_wallet_query_requires_non_empty_address() -> None:
    assert WalletQuery("rAnything").is_submittable is True
    assert WalletQuery("").is_submittable is False


def test_explorer_response_ok_for_2xx_only() -> None:
    assert ExplorerResponse(200, "").ok is True
    assert ExplorerResponse(204, "").ok is True
    assert ExplorerResponse(302, "").ok is False
    assert ExplorerResponse(500, "").ok is False


def test_display_transaction_labels() -> None:
    tx = DisplayTransaction(
        type_label="Account Update",
        succeeded=False,
        amount_native=None,
        fee_native="N/A",
    )
    assert tx.status_label == "FAILED"
    assert tx.type_initial == "A"


def test_wallet_summary_counts_transactions() -> None:
    tx = DisplayTransaction("Payment", True, "1.000000", "0.000010")
    summary = WalletSummary("rA", "10", "5", (tx, tx))
    assert summary.transaction_count == 2


def test_price_quote_fallback() -> None:
    assert PriceQuote.fallback() == PriceQuote(Decimal("0.50"), True)


def test_error_messages() -> None:
    assert ConnectionFailure().message == (
        "Failed to connect to the server or invalid address format."
    )
    assert DecodeFailure().message == "Server returned invalid JSON response"
    assert ApplicationFailure().message == "An unknown error occurred."
    assert ApplicationFailure("bad address", status=400).status == 400
