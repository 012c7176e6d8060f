"""Domain models for wallet lookups."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from xrpl_wallet.domain.constants import FALLBACK_USD_PRICE


@dataclass(frozen=True)
class WalletQuery:
    """Address submitted by the user.

    Attributes:
        address: Ledger account address, checked only for non-emptiness.
    """

    address: str

    @property
    def is_submittable(self) -> bool:
        """Return True when the address is non-empty."""
        return bool(self.address)


@dataclass(frozen=True)
class ExplorerResponse:
    """Raw reply from the account explorer."""

    status: int
    raw_body: str

    @property
    def ok(self) -> bool:
        """Return True for 2xx statuses."""
        return 200 <= self.status < 300


@dataclass(frozen=True)
class WalletPayload:
    """Decoded explorer body for a successful lookup.

    Attributes:
        address: Address echoed by the explorer.
        balance_xrp: Native balance as text, when present.
        usd_value: Fiat value as text, when present.
        transactions: Raw transaction records, most recent first.
    """

    address: str | None
    balance_xrp: str | None
    usd_value: str | None
    transactions: tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DisplayTransaction:
    """Transaction ready for display.

    Attributes:
        type_label: Human readable transaction type.
        succeeded: Whether the ledger result code is the success code.
        amount_native: Native amount with six decimals, or None when the
            amount is missing or not a native amount.
        fee_native: Native fee with six decimals, or ``"N/A"``.
    """

    type_label: str
    succeeded: bool
    amount_native: str | None
    fee_native: str

    @property
    def status_label(self) -> str:
        return "SUCCESS" if self.succeeded else "FAILED"

    @property
    def type_initial(self) -> str:
        return self.type_label[:1]


@dataclass(frozen=True)
class WalletSummary:
    """Normalized wallet view produced by a successful query."""

    address: str | None
    balance_native: str | None
    usd_value: str | None
    transactions: tuple[DisplayTransaction, ...]

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)


@dataclass(frozen=True)
class PriceQuote:
    """Current USD price of the native asset.

    Attributes:
        usd: Price in USD.
        is_fallback: True when the feed was unavailable.
    """

    usd: Decimal
    is_fallback: bool = False

    @classmethod
    def fallback(cls) -> "PriceQuote":
        """Return the fixed quote used when the feed is unavailable."""
        return cls(usd=FALLBACK_USD_PRICE, is_fallback=True)


__all__ = [
    "WalletQuery",
    "ExplorerResponse",
    "WalletPayload",
    "DisplayTransaction",
    "WalletSummary",
    "PriceQuote",
]
