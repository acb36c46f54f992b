"""
Money Handling Utilities

Two different contracts guard the balance:

PARSE-OR-ZERO (user input):
- Text typed at a prompt is read the way a float parser reads it:
  surrounding whitespace is ignored and the longest leading number is taken
  ("12.50", "12.50 GBP" and "1e3" all parse).
- Empty, non-numeric, NaN or infinite input becomes 0.
- It never raises. A bad amount turns the operation into a no-op change.

COERCE (store writes):
- Only finite real numbers are valid balances.
- Anything else (None, booleans, strings, NaN) is reported as None so the
  store can ignore the write.

All amounts are Decimal. Floats are converted through str() so 0.1 stays 0.1.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext
from typing import Any, Optional

from account_ledger.observability import get_logger


ZERO = Decimal("0")
_CENT = Decimal("0.01")

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

logger = get_logger(__name__)


def parse_amount(raw: Any) -> Decimal:
    """
    Parse a line of user input into an amount (parse-or-zero).
    
    Decimal places are kept as typed; rounding to two places only
    happens when an amount is displayed.
    """
    text = raw if isinstance(raw, str) else ""
    match = _NUMBER_PREFIX.match(text.strip())
    if match is None:
        logger.debug("amount_parse_defaulted", raw=text)
        return ZERO
    
    try:
        # Unary plus applies the context, which surfaces exponent overflow.
        value = +Decimal(match.group(0))
    except DecimalException:
        logger.debug("amount_parse_defaulted", raw=text, reason="out_of_range")
        return ZERO
    return value


def coerce_amount(value: Any) -> Optional[Decimal]:
    """Return value as a finite Decimal, or None if it is not a valid balance."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return Decimal(str(value))
    return None


def format_amount(value: Decimal) -> str:
    """Render an amount with exactly two decimal digits, rounding half up."""
    with localcontext() as ctx:
        # Room for every integer digit plus the cents.
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        text = format(value.quantize(_CENT, rounding=ROUND_HALF_UP), "f")
    # A signed zero ("-0") is not a negative balance. Real sub-cent
    # negatives keep their sign and render as "-0.00".
    if text.startswith("-") and value == 0:
        text = text[1:]
    return text


def exceeds(amount: Decimal, limit: Decimal, epsilon: Decimal = ZERO) -> bool:
    """
    True if amount is greater than limit by more than epsilon.
    
    An amount equal to the limit (within epsilon) does not exceed it.
    """
    return amount - limit > epsilon
