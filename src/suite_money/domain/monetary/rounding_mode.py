from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from enum import Enum


class RoundingMode(Enum):
    """How a decimal is cut down to a fixed number of fractional digits.

    Each value is the matching `decimal` module rounding constant.

    Members:
        DOWN: Toward zero.
        UP: Away from zero.
        HALF_UP: To nearest; ties away from zero.
        HALF_EVEN: To nearest; ties to the even neighbour (banker's rounding).
    """

    DOWN = ROUND_DOWN
    UP = ROUND_UP
    HALF_UP = ROUND_HALF_UP
    HALF_EVEN = ROUND_HALF_EVEN
