from __future__ import annotations

import math
from decimal import Decimal

import pytest

from suite_money.domain.monetary.errors import UnsafePrecisionError
from suite_money.domain.monetary.precision import to_decimal_text, to_number_unchecked, to_safe_number_or_none
from tests.helpers.helper_money import EUR, JPY, m

MAX_SAFE_INTEGER = 2**53 - 1

SAFE_NUMBERS = ["10.00", MAX_SAFE_INTEGER, -MAX_SAFE_INTEGER, "0.10", "-1234.56"]

UNSAFE_NUMBERS = ["12341234123412341234.12", "1234123412341235.51"]


@pytest.mark.parametrize("number", SAFE_NUMBERS)
def test_to_safe_number_on_safe_amount(number) -> None:
    money = m(number, EUR)
    assert money.to_safe_number() == float(number)
    assert money.to_safe_number_or_none() == float(number)
    assert money.is_safe_number()


@pytest.mark.parametrize("number", UNSAFE_NUMBERS)
def test_to_safe_number_on_unsafe_amount(number: str) -> None:
    money = m(number, EUR)
    assert money.to_safe_number_or_none() is None
    assert not money.is_safe_number()

    with pytest.raises(UnsafePrecisionError) as exc_info:
        money.to_safe_number()

    assert exc_info.value.amount == number
    assert number in str(exc_info.value)


def test_safety_depends_on_round_trip_not_magnitude() -> None:
    # 0.10 has no exact binary form but survives the round trip; 1e20 is far beyond 2**53
    assert m("0.10", EUR).is_safe_number()
    assert m("100000000000000000000", JPY).is_safe_number()
    assert not m(2**53 + 1, JPY).is_safe_number()


def test_to_number_unchecked() -> None:
    assert m("10.00", EUR).to_number_unchecked() == 10.0
    assert m("1234123412341235.51", EUR).to_number_unchecked() == 1234123412341235.5
    assert m("12341234123412341234.12", EUR).to_number_unchecked() == 1.2341234123412341234e19


def test_float_overflow_is_never_safe() -> None:
    money = m(Decimal("1E+400"), EUR)
    assert math.isinf(money.to_number_unchecked())
    assert money.to_safe_number_or_none() is None


@pytest.mark.parametrize(
    "number, expected",
    [
        ("10.00", "10"),
        (MAX_SAFE_INTEGER, "9007199254740991"),
        (-MAX_SAFE_INTEGER, "-9007199254740991"),
        ("0.10", "0.1"),
        ("-1234.56", "-1234.56"),
        ("12341234123412341234.12", "12341234123412341234.12"),
        ("1234123412341235.51", "1234123412341235.51"),
    ],
)
def test_str_and_decimal_string_are_exact(number, expected: str) -> None:
    money = m(number, EUR)
    assert money.to_decimal_string() == expected
    assert str(money) == f"EUR {expected}"


def test_engine_functions() -> None:
    cents = Decimal("0.01")
    assert to_decimal_text(Decimal("-0.00")) == "0"
    assert to_decimal_text(Decimal("1E+3")) == "1000"
    assert to_decimal_text(Decimal("-2.500")) == "-2.5"
    assert to_number_unchecked(Decimal("0.10")) == 0.1
    assert to_safe_number_or_none(Decimal("0.10"), lambda value: value.quantize(cents)) == 0.1
    assert to_safe_number_or_none(Decimal("1234123412341235.51"), lambda value: value.quantize(cents)) is None
