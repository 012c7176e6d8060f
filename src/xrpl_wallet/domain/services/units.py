"""Conversion between ledger drops and native XRP amounts."""

from decimal import (
    Decimal,
    InvalidOperation,
    ROUND_HALF_UP,
    getcontext,
    localcontext,
)

from xrpl_wallet.domain.constants import (
    DROPS_PER_XRP,
    NATIVE_DECIMALS,
    NATIVE_QUANTUM,
)


def parse_drops(value) -> Decimal | None:
    """Parse a drops amount delivered as text.

    Args:
        value: Raw field value from a transaction record.

    Returns:
        Decimal | None: Parsed amount, or None for non-string, blank,
        non-numeric or out-of-range values.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount.adjusted() > getcontext().Emax:
        return None
    return amount


def _precision_for(amount: Decimal) -> int:
    # Enough digits to hold the integer part plus six fractional digits.
    return max(amount.adjusted(), 0) + NATIVE_DECIMALS * 2 + 2


def drops_to_native(drops: Decimal) -> Decimal:
    """Convert drops to native units without losing integer digits."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(drops))
        return drops / DROPS_PER_XRP


def format_native(amount: Decimal) -> str:
    """Render a native amount with six fractional digits."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(amount))
        return str(amount.quantize(NATIVE_QUANTUM, rounding=ROUND_HALF_UP))


def drops_text_to_native_text(value) -> str | None:
    """Convert raw drops text straight to display text.

    Returns:
        str | None: Six-decimal native amount, or None when ``value`` is not
        a numeric string.
    """
    drops = parse_drops(value)
    if drops is None:
        return None
    return format_native(drops_to_native(drops))


__all__ = [
    "parse_drops",
    "drops_to_native",
    "format_native",
    "drops_text_to_native_text",
]
