"""Domain services package."""

from .classification import is_successful_result, label_transaction_type
from .units import (
    drops_text_to_native_text,
    drops_to_native,
    format_native,
    parse_drops,
)

__all__ = [
    "is_successful_result",
    "label_transaction_type",
    "drops_text_to_native_text",
    "drops_to_native",
    "format_native",
    "parse_drops",
]
