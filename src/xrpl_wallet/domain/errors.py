"""Error kinds raised while looking up a wallet.

Each kind carries the message shown to the user. They are raised where the
failure happens and converted to an ``Error`` view state by the controller.
"""

from xrpl_wallet.domain.constants import (
    CONNECTION_FAILURE_MESSAGE,
    DECODE_FAILURE_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)


class WalletLookupError(Exception):
    """Base class for failures terminal to a wallet query."""

    default_message = UNKNOWN_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConnectionFailure(WalletLookupError):
    """Transport-level failure reaching the explorer."""

    default_message = CONNECTION_FAILURE_MESSAGE


class DecodeFailure(WalletLookupError):
    """Response body was not valid structured data."""

    default_message = DECODE_FAILURE_MESSAGE


class ApplicationFailure(WalletLookupError):
    """Well-formed body returned with a non-success status."""

    def __init__(
        self,
        message: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status


__all__ = [
    "WalletLookupError",
    "ConnectionFailure",
    "DecodeFailure",
    "ApplicationFailure",
]
