"""
Currency Conversion and Rounding

USD (source) <-> CAD (target) conversion helpers and the numeric precision
rules applied to every calculation row.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any

NOT_AVAILABLE = "N/A"

MONEY_PLACES = 2
TIMELINE_PLACES = 9
ROI_PLACES = 6

# Wide enough to quantize any finite float without overflow
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def to_target(source_amount: float, rate: float) -> float:
    """Convert a USD amount to CAD."""
    return source_amount * rate


def to_source(target_amount: float, rate: float) -> float:
    """
    Convert a CAD amount to USD.

    The caller guarantees rate > 0.
    """
    return target_amount / rate


def round_ratio(value: float, places: int = TIMELINE_PLACES) -> float:
    """
    Round a value to a fixed number of decimal places.

    Ties round away from zero on the exact binary value of the float,
    the same way the web front end formats numbers.

    Args:
        value: Number to round
        places: Decimal places to keep (9 for timelines, 6 for ROI)

    Returns:
        Rounded float
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, context=_ROUNDING_CONTEXT))


def round_money(value: float) -> float:
    """Round monetary amounts to two decimals."""
    return round_ratio(value, MONEY_PLACES)


def sanitize_number(value: Any) -> float:
    """
    Return value as a finite float, or 0.0 when it is not a finite number.

    Strings are not parsed; "12.5" counts as 0 like any other non-number.

    Every raw numeric input goes through this before any arithmetic so that
    NaN and Infinity never reach a result row.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return 0.0
    number = float(value)
    return number if math.isfinite(number) else 0.0
