"""Tolerant numeric parsing for pasted illustration text.

Pure functions: str in, Decimal/int out. Unparseable input becomes zero.
"""

import math
import re
from decimal import Decimal, InvalidOperation

# Leading number the way a spreadsheet paste usually carries it: "1234.50", "-12", ".5", "1e3"
_NUMBER_PREFIX = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")

_STRIP_CHARS = str.maketrans("", "", "$,")


def parse_currency(text: str) -> Decimal:
    """Parse "$1,234.50" style text into a Decimal.

    Strips dollar signs and thousands separators, then reads the leading
    decimal number. Anything unparseable or non-finite is Decimal("0").
    """
    cleaned = text.translate(_STRIP_CHARS).strip()
    match = _NUMBER_PREFIX.match(cleaned)
    if match is None:
        return Decimal("0")
    try:
        value = Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")
    # Outside double range: overflow is non-finite, underflow is zero
    as_float = float(value)
    if not math.isfinite(as_float) or (as_float == 0 and value != 0):
        return Decimal("0")
    return value


def parse_int(text: str) -> int:
    """Read the leading integer of a token, 0 if there is none."""
    match = _INT_PREFIX.match(text.strip())
    if match is None:
        return 0
    return int(match.group(0))


def parse_rate(text: str) -> Decimal:
    """Parse a percentage like "6.2" or "6.2%" into Decimal percent points."""
    return parse_currency(text.replace("%", ""))
