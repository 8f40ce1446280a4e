from __future__ import annotations

import re
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_05UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Plain decimal literal: optional sign, digits around an optional point, no exponent, no whitespace
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

# Largest absolute exponent `parse_decimal` accepts; working precision grows with it
MAX_EXPONENT = 10_000


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def parse_decimal(value: object) -> Decimal:
    """Strictly converts $value into a finite `Decimal`.

    Accepted inputs are finite `Decimal`, `int` and `float` values and strings holding a plain
    decimal literal (`"12"`, `"-0.5"`, `".17"`, `"3."`). Exponent notation, hexadecimal,
    whitespace and empty strings are rejected, as are `bool` and every other type. Only ASCII
    digits count as digits.

    Args:
        value: Candidate amount.

    Returns:
        Finite `Decimal` holding exactly the given value.

    Raises:
        TypeError: If $value has an unsupported type.
        ValueError: If $value is not finite or is not a plain decimal literal, or its
            exponent exceeds `MAX_EXPONENT` in absolute value.
    """
    # Raise: bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Cannot call `parse_decimal` because $value has unsupported type '{type(value).__name__}'")

    if isinstance(value, str):
        # Raise: only plain decimal literals are accepted
        if _DECIMAL_LITERAL.fullmatch(value) is None:
            raise ValueError(f"Cannot call `parse_decimal` because $value ('{value}') is not a plain decimal literal")
        result = Decimal(value)
    else:
        result = as_decimal(value)

        # Raise: infinities and NaN carry no exact amount
        if not result.is_finite():
            raise ValueError(f"Cannot call `parse_decimal` because $value ({value}) is not finite")

    # Raise: exponent beyond MAX_EXPONENT would need an unbounded working precision
    if abs(result.as_tuple().exponent) > MAX_EXPONENT:
        raise ValueError(f"Cannot call `parse_decimal` because $value has exponent {result.as_tuple().exponent} beyond +-{MAX_EXPONENT}")

    return result


def working_context(*operands: Decimal, precision: int, extra_digits: int = 0) -> Context:
    """Returns a `Context` wide enough for exact arithmetic on $operands.

    Addition, subtraction, multiplication and remainder of $operands never round inside the
    returned context. Division rounds with `ROUND_05UP`, which keeps a later rounding to
    at most `extra_digits` fractional digits correct.

    Args:
        operands: Finite operands of the upcoming operation.
        precision: Lower bound for the context precision.
        extra_digits: Fractional digits the result will be quantized to afterwards.

    Returns:
        Context with enough significant digits and an unbounded exponent range.
    """
    needed = 2 + extra_digits
    for operand in operands:
        sign, digits, exponent = operand.as_tuple()
        needed += len(digits) + abs(exponent)
    return Context(
        prec=max(precision, needed),
        rounding=ROUND_05UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def quantize_fraction(value: Decimal, fraction_digits: int, rounding: str, precision: int) -> Decimal:
    """Rounds $value to exactly $fraction_digits digits after the decimal point.

    Args:
        value: Finite value to round.
        fraction_digits: Number of fractional digits to keep (>= 0).
        rounding: One of the `decimal` module rounding constants.
        precision: Lower bound for the working precision.

    Returns:
        Rounded value whose exponent is `-fraction_digits`.
    """
    context = working_context(value, precision=precision, extra_digits=fraction_digits)
    return value.quantize(Decimal(1).scaleb(-fraction_digits), rounding=rounding, context=context)
