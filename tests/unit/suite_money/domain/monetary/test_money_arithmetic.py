from __future__ import annotations

from decimal import Decimal

import pytest

from suite_money.domain.monetary.errors import CurrencyMismatchError, DivisionByZeroError, InvalidAmountError
from suite_money.domain.monetary.rounding_mode import RoundingMode
from tests.helpers.helper_money import EUR, IQD, USD, assert_money_eq, d, m


# region add / sub


@pytest.mark.parametrize(
    "expected, left, right",
    [
        ("101", "100", "1"),
        ("0", "101", "-101"),
        ("0", "0", "0"),
        ("1.57", "1.34", "0.23"),
    ],
)
def test_add(expected: str, left: str, right: str) -> None:
    # Addition is checked in both directions
    assert_money_eq(m(expected, EUR), m(left, EUR).add(m(right, EUR)))
    assert_money_eq(m(expected, EUR), m(right, EUR).add(m(left, EUR)))
    assert_money_eq(m(expected, EUR), m(left, EUR) + m(right, EUR))


def test_sub() -> None:
    assert_money_eq(m("99.01", EUR), m("101", EUR).sub(m("1.99", EUR)))
    assert_money_eq(m("99.01", EUR), m("101", EUR) - m("1.99", EUR))


def test_add_then_sub_is_identity() -> None:
    pairs = [("100.00", "0.01"), ("-3.17", "12.99"), ("98765432109876543210987654321.99", "0.01")]
    for a, b in pairs:
        left = m(a, EUR)
        right = m(b, EUR)
        assert left.add(right).sub(right).eq(left)


def test_add_beyond_default_decimal_context_is_exact() -> None:
    total = m("123456789012345678901234567890123456789.99", USD).add(m("0.01", USD))
    assert total.to_decimal_string() == "123456789012345678901234567890123456790"


@pytest.mark.parametrize("operation", ["add", "sub", "mod"])
def test_unit_ops_reject_currency_mismatch(operation: str) -> None:
    with pytest.raises(CurrencyMismatchError) as exc_info:
        getattr(m("100.00", EUR), operation)(m("10.00", USD))

    assert exc_info.value.operation == operation
    assert exc_info.value.currency == EUR
    assert exc_info.value.other_currency == USD


def test_add_operator_rejects_non_money() -> None:
    with pytest.raises(TypeError):
        m("1.00", EUR) + 1


# endregion

# region mul / div


@pytest.mark.parametrize(
    "expected, amount, factor, rounding",
    [
        ("15.85", "3.17", 5, None),
        ("0", "3.17", 0, None),
        ("5.55", "3.17", 1.75, None),
        ("5.55", "3.17", "1.75", None),
        ("5.55", "3.17", Decimal("1.75"), None),
        ("5.54", "3.17", "1.75", RoundingMode.DOWN),
        ("33.33", "100.00", "0.3333", RoundingMode.HALF_UP),
        ("-5.55", "-3.17", "1.75", None),
    ],
)
def test_mul(expected: str, amount: str, factor, rounding: RoundingMode | None) -> None:
    product = m(amount, EUR).mul(factor, rounding)
    assert_money_eq(m(expected, EUR), product)
    assert -product.amount.as_tuple().exponent <= 2


def test_mul_operators_and_scale_alias() -> None:
    money = m("3.17", EUR)
    assert_money_eq(m("15.85", EUR), money * 5)
    assert_money_eq(m("15.85", EUR), 5 * money)
    assert_money_eq(m("15.85", EUR), money.scale(5))


def test_mul_of_large_amount_is_exact() -> None:
    product = m("999999999999999999999999999999.99", EUR).mul(3)
    assert product.to_decimal_string() == "2999999999999999999999999999999.97"


@pytest.mark.parametrize("factor", ["abc", "1e3", None, True, float("nan")])
def test_mul_rejects_invalid_scalar(factor) -> None:
    with pytest.raises(InvalidAmountError):
        m("3.17", EUR).mul(factor)


def test_mul_rejects_money_factor() -> None:
    with pytest.raises(TypeError):
        m("3.17", EUR).mul(m("2.00", EUR))


@pytest.mark.parametrize(
    "expected, amount, divisor, rounding",
    [
        ("0.63", "3.17", 5, None),
        ("0.01", "0.50", 100, None),
        ("0.00", "0.50", 100, RoundingMode.DOWN),
        ("33.33", "100.00", 3, None),
        ("0.12", "0.25", 2, RoundingMode.HALF_EVEN),
        ("0.13", "0.25", 2, RoundingMode.HALF_UP),
        ("-0.13", "-0.25", "2", RoundingMode.UP),
    ],
)
def test_div(expected: str, amount: str, divisor, rounding: RoundingMode | None) -> None:
    assert_money_eq(m(expected, EUR), m(amount, EUR).div(divisor, rounding))


def test_div_operator() -> None:
    assert_money_eq(m("0.63", EUR), m("3.17", EUR) / 5)


@pytest.mark.parametrize("divisor", [0, "0", "0.000", Decimal("-0"), 0.0])
def test_div_by_zero(divisor) -> None:
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        m("10.00", EUR).div(divisor)


def test_div_keeps_currency_digits() -> None:
    assert m("1.000", IQD).div(3).to_decimal_string() == "0.333"


# endregion

# region mod


@pytest.mark.parametrize(
    "expected, amount, modulus",
    [
        ("0.63", "0.63", "5.16"),
        ("1.00", "7.00", "3.00"),
        ("-1.00", "-7.00", "3.00"),
        ("1.00", "7.00", "-3.00"),
    ],
)
def test_mod(expected: str, amount: str, modulus: str) -> None:
    assert_money_eq(m(expected, EUR), m(amount, EUR).mod(m(modulus, EUR)))
    assert_money_eq(m(expected, EUR), m(amount, EUR) % m(modulus, EUR))


def test_mod_by_zero() -> None:
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        m("10.00", EUR).mod(m("0.00", EUR))


# endregion

# region abs / negate / ratio_of / convert_currency


@pytest.mark.parametrize("expected, amount", [("0.00", "0.00"), ("2.31", "2.31"), ("2.31", "-2.31")])
def test_abs(expected: str, amount: str) -> None:
    assert_money_eq(m(expected, EUR), m(amount, EUR).abs())
    assert_money_eq(m(expected, EUR), abs(m(amount, EUR)))


def test_negate() -> None:
    assert_money_eq(m("-2.31", EUR), -m("2.31", EUR))
    assert (-m("0.00", EUR)).sign() == 0


@pytest.mark.parametrize(
    "expected, left, right",
    [
        ("2", "4.00", "2.00"),
        ("1.42857142857142857143", "10.00", "7.00"),
        ("-0.2", "10.00", "-50.00"),
        ("0", "0.00", "2.00"),
    ],
)
def test_ratio_of(expected: str, left: str, right: str) -> None:
    ratio = m(left, EUR).ratio_of(m(right, EUR))
    assert isinstance(ratio, Decimal)
    assert ratio == d(expected)
    assert m(left, EUR) / m(right, EUR) == d(expected)


def test_ratio_of_zero() -> None:
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        m("10.00", EUR).ratio_of(m("0.00", EUR))


def test_ratio_of_currency_mismatch() -> None:
    with pytest.raises(CurrencyMismatchError, match="ratio_of"):
        m("10.00", EUR).ratio_of(m("10.00", USD))


def test_convert_currency() -> None:
    converted = m("23405160032451", USD).convert_currency("IRR", "42105")
    assert converted.currency == "IRR"
    assert converted.amount == Decimal("985474263166349355")
    assert converted.to_decimal_string() == "985474263166349355"


def test_convert_currency_rounds_to_target_digits() -> None:
    converted = m("10.00", EUR).convert_currency("jpy", "161.237")
    assert converted.currency == "JPY"
    assert converted.to_decimal_string() == "1612"

    to_iqd = m("1.00", USD).convert_currency(IQD, "1310.12345")
    assert to_iqd.to_decimal_string() == "1310.123"


def test_operations_return_new_instances() -> None:
    money = m("1.00", EUR)
    money.add(m("1.00", EUR))
    money.mul(3)
    assert money.to_decimal_string() == "1"


# endregion
