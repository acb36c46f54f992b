"""Amount parsing and validation package."""

from account_ledger.validation.amount import (
    ZERO,
    coerce_amount,
    exceeds,
    format_amount,
    parse_amount,
)

__all__ = [
    "ZERO",
    "coerce_amount",
    "exceeds",
    "format_amount",
    "parse_amount",
]
