"""Decides whether an exact amount survives conversion to a float.

"Safe" is defined by round trip: the decimal text is parsed into a float, the float is turned
back into a decimal and rounded to the currency's digits, and the result must equal the
original amount exactly. Magnitude and digit count alone do not decide it.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Callable

from suite_money.utils.decimal_tools import as_decimal


class PrecisionHandling(Enum):
    """Policy applied by `Money.to_locale_string` when the amount is not float-safe.

    Members:
        SAFE: Refuse to format; raise `UnsafePrecisionError`.
        UNCHECKED: Format the nearest float without any indication.
        SHOW_IMPRECISION: Format the nearest float and mark the result as approximate.
    """

    SAFE = "safe"
    UNCHECKED = "unchecked"
    SHOW_IMPRECISION = "show_imprecision"


def to_decimal_text(amount: Decimal) -> str:
    """Return the shortest exact fixed-point text of $amount, e.g. "10" for 10.00.

    Trailing fractional zeros are dropped, exponent notation is never used and zero never
    carries a sign.
    """
    if amount.is_zero():
        return "0"

    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_number_unchecked(amount: Decimal) -> float:
    """Return the float nearest to $amount; precision may be lost."""
    return float(to_decimal_text(amount))


def to_safe_number_or_none(amount: Decimal, requantize: Callable[[Decimal], Decimal]) -> float | None:
    """Return $amount as a float if it survives the round trip, otherwise None.

    Args:
        amount: Exact amount, already rounded to its currency's digits.
        requantize: Rounds a decimal to the same currency digits as $amount.

    Returns:
        float | None: The float, or None when converting it back does not yield $amount.
    """
    number = to_number_unchecked(amount)

    # Overflow to infinity never round-trips
    if not math.isfinite(number):
        return None

    if requantize(as_decimal(number)) == amount:
        return number
    return None
