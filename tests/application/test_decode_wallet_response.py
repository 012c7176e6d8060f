"""Tests for the ResponseDecoder."""

import json

import pytest

from xrpl_wallet.application.use_cases.decode_wallet_response import (
    ResponseDecoder,
)
from xrpl_wallet.domain.errors import ApplicationFailure, DecodeFailure
from xrpl_wallet.domain.models import ExplorerResponse


def _decoder(fake_logger) -> ResponseDecoder:
    return ResponseDecoder(logger=fake_logger)


def test_decode_success_body(fake_logger) -> None:
    """A 2xx JSON object should decode into a payload."""
    body = json.dumps(
        {
            "address": "rPT1Sjq2YGrBMTttX4GZHjKu9dyfzbpAYe",
            "balanceXRP": "25.5",
            "usdValue": 13.26,
            "transactions": [{"tx": {"TransactionType": "Payment"}}],
        }
    )

    payload = _decoder(fake_logger).decode(ExplorerResponse(200, body))

    assert payload.address == "rPT1Sjq2YGrBMTttX4GZHjKu9dyfzbpAYe"
    assert payload.balance_xrp == "25.5"
    assert payload.usd_value == "13.26"
    assert payload.transactions == ({"tx": {"TransactionType": "Payment"}},)


def test_malformed_body_with_200_is_decode_failure(fake_logger) -> None:
    """Invalid JSON wins over a success status."""
    with pytest.raises(DecodeFailure) as excinfo:
        _decoder(fake_logger).decode(ExplorerResponse(200, "<html>oops"))

    assert excinfo.value.message == "Server returned invalid JSON response"
    fake_logger.error.assert_called_once()


def test_malformed_body_with_500_is_decode_failure(fake_logger) -> None:
    """Invalid JSON is a decode failure regardless of status."""
    with pytest.raises(DecodeFailure):
        _decoder(fake_logger).decode(ExplorerResponse(500, "Internal Error"))


def test_empty_body_is_decode_failure(fake_logger) -> None:
    with pytest.raises(DecodeFailure):
        _decoder(fake_logger).decode(ExplorerResponse(200, ""))


def test_error_status_uses_message_field(fake_logger) -> None:
    """A JSON error body should surface its message."""
    response = ExplorerResponse(400, '{"message": "bad address"}')

    with pytest.raises(ApplicationFailure) as excinfo:
        _decoder(fake_logger).decode(response)

    assert excinfo.value.message == "bad address"
    assert excinfo.value.status == 400


@pytest.mark.parametrize(
    "body",
    ['{"detail": "nope"}', '{"message": ""}', '["not", "an", "object"]', "null"],
)
def test_error_status_without_message_uses_fallback(fake_logger, body) -> None:
    """Missing messages fall back to the generic text."""
    with pytest.raises(ApplicationFailure) as excinfo:
        _decoder(fake_logger).decode(ExplorerResponse(400, body))

    assert excinfo.value.message == "An unknown error occurred."


def test_success_status_with_non_object_is_decode_failure(fake_logger) -> None:
    with pytest.raises(DecodeFailure):
        _decoder(fake_logger).decode(ExplorerResponse(200, "[1, 2, 3]"))


def test_missing_fields_are_tolerated(fake_logger) -> None:
    """Partial bodies decode with absent fields."""
    payload = _decoder(fake_logger).decode(ExplorerResponse(200, "{}"))

    assert payload.address is None
    assert payload.balance_xrp is None
    assert payload.usd_value is None
    assert payload.transactions == ()


def test_non_list_transactions_are_ignored(fake_logger) -> None:
    body = '{"address": "rA", "transactions": {"tx": {}}}'

    payload = _decoder(fake_logger).decode(ExplorerResponse(200, body))

    assert payload.transactions == ()
    fake_logger.warning.assert_called_once()
