"""Tests for transaction type and outcome classification."""

import pytest

from xrpl_wallet.domain.services.classification import (
    is_successful_result,
    label_transaction_type,
)


@pytest.mark.parametrize(
    ("code", "label"),
    [
        ("Payment", "Payment"),
        ("AccountSet", "Account Update"),
        ("TrustSet", "Trustline Set"),
        ("OfferCreate", "OfferCreate"),
        (None, "Unknown"),
        ("", "Unknown"),
    ],
)
def test_label_transaction_type(code, label) -> None:
    """Known codes map to labels; others pass through."""
    assert label_transaction_type(code) == label


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("tesSUCCESS", True),
        ("tecUNFUNDED_PAYMENT", False),
        ("tesSuccess", False),
        ("", False),
        (None, False),
    ],
)
def test_is_successful_result(code, expected) -> None:
    """Only the literal success code counts as success."""
    assert is_successful_result(code) is expected
