"""View states rendered by the presentation layer.

Exactly one state is live at a time: ``Idle`` before any query, ``Loading``
while a query runs, then ``Success`` or ``Error`` until the next submission.
"""

from dataclasses import dataclass
from typing import Union

from xrpl_wallet.domain.models.wallet import WalletSummary


@dataclass(frozen=True)
class Idle:
    """No query submitted yet."""


@dataclass(frozen=True)
class Loading:
    """A query is in flight."""

    address: str


@dataclass(frozen=True)
class Success:
    """The last query produced a wallet summary."""

    summary: WalletSummary


@dataclass(frozen=True)
class Error:
    """The last query failed."""

    message: str


ViewState = Union[Idle, Loading, Success, Error]


__all__ = ["Idle", "Loading", "Success", "Error", "ViewState"]
