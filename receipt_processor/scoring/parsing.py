"""
Lenient parsers for the text fields of a receipt.

A value that cannot be parsed never raises: amounts fall back to zero and
dates/times fall back to ``None``.  The scoring rules treat those fallbacks
as neutral values.
"""
from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

ZERO = Decimal(0)

# Receipt amounts stay within 10**-18 .. 10**18; larger exponents overflow the
# default decimal context once scaled.
MAX_AMOUNT_EXPONENT = 18


def parse_amount(value: str) -> Decimal:
    """Parse a decimal amount such as ``"6.49"``.

    Returns ``Decimal(0)`` if the value is empty, malformed, not finite
    (``"NaN"``, ``"Infinity"``) or of an absurd magnitude (``"1e999999999"``).
    Surrounding whitespace is not accepted.
    """
    if value != value.strip():
        return ZERO
    try:
        amount = Decimal(value)
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite() or abs(amount.adjusted()) > MAX_AMOUNT_EXPONENT:
        return ZERO
    return amount


def parse_purchase_date(value: str) -> date | None:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_purchase_time(value: str) -> time | None:
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        return None
