"""Amount parsing, normalization and display formatting.

The engine only ever sees plain floats. Everything that comes from a user
(CLI flags, profile.yaml, MCP tool arguments) passes through
normalize_amount() first, which maps anything unusable to 0.0 instead of
raising.
"""

import math
import re
from typing import Any

PESO_SIGN = "₱"

_NON_NUMERIC = re.compile(r"[^0-9.]")
# a minus ahead of the first digit, e.g. "-500" or "P -1,200"
_NEGATIVE = re.compile(r"^[^0-9.]*-")


def parse_amount(text: str) -> float:
    """Parse a formatted amount string such as '25,000.50' into a float.

    Everything except digits and the decimal point is stripped first, so
    thousands separators, currency signs and stray whitespace are ignored.
    Unparsable input returns 0.0.

    Example:
        parse_amount("P 25,000.50")  # -> 25000.5
        parse_amount("abc")          # -> 0.0
    """
    cleaned = _NON_NUMERIC.sub("", text or "")
    try:
        value = float(cleaned)
    except ValueError:
        # "" or "1.2.3"; take the leading valid part like a lenient parser would
        match = re.match(r"\d*\.?\d+|\d+", cleaned)
        if not match:
            return 0.0
        value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def normalize_amount(value: Any) -> float:
    """Coerce any input to a non-negative finite float.

    None, NaN, infinities, negatives, booleans and non-numeric values all
    become 0.0. Strings go through parse_amount(), except that a string
    carrying a leading minus sign is a negative amount and also becomes 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        if _NEGATIVE.match(value.strip()):
            return 0.0
        return parse_amount(value)
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def format_amount(value: float, decimals: int = 2) -> str:
    """Format with thousands separators: 25000 -> '25,000.00'."""
    return f"{value:,.{decimals}f}"


def format_currency(value: float, sign: str = PESO_SIGN) -> str:
    """Format as pesos: 25000 -> '₱25,000.00'.

    Negative values keep the minus ahead of the sign ('-₱12.00').
    """
    if value < 0:
        return f"-{sign}{format_amount(-value)}"
    return f"{sign}{format_amount(value)}"


def format_percent(value: float) -> str:
    """Format a percentage figure with two decimals: 9.5 -> '9.50%'."""
    return f"{value:.2f}%"
