from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    UnsafePrecisionError,
)
from suite_money.domain.monetary.locale_formatter import format_money
from suite_money.domain.monetary.money_family import MoneyFamily, get_default_family
from suite_money.domain.monetary.precision import (
    PrecisionHandling,
    to_decimal_text,
    to_number_unchecked,
    to_safe_number_or_none,
)
from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.utils.decimal_tools import DecimalLike, parse_decimal, working_context

_SCALAR_TYPES = (Decimal, int, float, str)


class Money:
    """Represents an exact monetary amount with currency.

    The amount is a `Decimal` of any magnitude, rounded on construction to the fractional
    digits of its currency (2 for EUR, 0 for JPY, 3 for IQD). Operations never mutate;
    they return new Money. Operations on two Money values require the same currency, except
    `eq`, which simply answers False.

    Arithmetic is exact; only `mul`, `div`, `ratio_of` and `convert_currency` round, and
    only down to the digits the currency allows.
    """

    __slots__ = ("_amount", "_currency", "_family")

    def __init__(self, amount: DecimalLike, currency: str | Currency, rounding: RoundingMode | None = None, *, family: MoneyFamily | None = None):
        """Initialize Money with amount and currency.

        Args:
            amount: Finite Decimal, int or float, or a plain decimal string such as "-.173".
                Exponent notation is not accepted in strings.
            currency: Three-letter currency code in any case, or `Currency`.
            rounding: Rounding mode for the amount; defaults to the family's.
            family: Configuration family; defaults to `get_default_family()`.

        Raises:
            InvalidCurrencyError: If $currency cannot be resolved.
            InvalidAmountError: If $amount is not an exact finite decimal.
        """
        family = family if family is not None else get_default_family()
        currency_info = family.currency_cache.get_or_resolve(currency)

        try:
            parsed_amount = parse_decimal(amount)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(amount, str(e)) from e

        self._amount = family.round(parsed_amount, currency_info.precision, rounding)
        self._currency = currency_info
        self._family = family

    @classmethod
    def create(cls, amount: DecimalLike, currency: str | Currency) -> Money:
        """Create Money in the default family."""
        return cls(amount, currency)

    @classmethod
    def _create_unchecked(cls, amount: Decimal, currency: Currency, family: MoneyFamily) -> Money:
        # Only for amounts already rounded to $currency digits
        money = cls.__new__(cls)
        money._amount = amount
        money._currency = currency
        money._family = family
        return money

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from the `str` form, e.g. 'EUR 1000.50'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object in the default family.

        Raises:
            ValueError: If string format is invalid.
        """
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'currency_code value'")

        currency_part, value_part = parts
        return cls(value_part, currency_part)

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the exact amount."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the uppercase currency code."""
        return self._currency.code

    @property
    def currency_info(self) -> Currency:
        """Get the resolved currency metadata."""
        return self._currency

    @property
    def family(self) -> MoneyFamily:
        """Get the configuration family."""
        return self._family

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        return self._apply_unit_op("add", other, lambda context, a, b: context.add(a, b))

    def sub(self, other: Money) -> Money:
        return self._apply_unit_op("sub", other, lambda context, a, b: context.subtract(a, b))

    def mod(self, other: Money) -> Money:
        """Remainder of dividing by $other; the sign follows this amount.

        Raises:
            CurrencyMismatchError: If currencies differ.
            DivisionByZeroError: If $other is zero.
        """
        self._verify_compatible("mod", other)

        # Raise: modulus cannot be zero
        if other._amount.is_zero():
            raise DivisionByZeroError("mod")

        return self._apply_unit_op("mod", other, lambda context, a, b: context.remainder(a, b))

    def mul(self, factor: DecimalLike, rounding: RoundingMode | None = None) -> Money:
        """Multiply by a scalar and round to the currency digits.

        Args:
            factor: Decimal, int, float or plain decimal string.
            rounding: Rounding mode for the product; defaults to the family's.

        Raises:
            InvalidAmountError: If $factor is not a finite decimal.
        """
        scalar = self._parse_scalar("mul", factor)
        context = working_context(self._amount, scalar, precision=self._family.precision)
        product = context.multiply(self._amount, scalar)
        return self._with_amount(self._family.round(product, self._currency.precision, rounding))

    def scale(self, factor: DecimalLike, rounding: RoundingMode | None = None) -> Money:
        """Alias of `mul`."""
        return self.mul(factor, rounding)

    def div(self, divisor: DecimalLike, rounding: RoundingMode | None = None) -> Money:
        """Divide by a scalar and round to the currency digits.

        Args:
            divisor: Decimal, int, float or plain decimal string.
            rounding: Rounding mode for the quotient; defaults to the family's.

        Raises:
            InvalidAmountError: If $divisor is not a finite decimal.
            DivisionByZeroError: If $divisor is zero.
        """
        scalar = self._parse_scalar("div", divisor)

        # Raise: divisor cannot be zero
        if scalar.is_zero():
            raise DivisionByZeroError("div")

        digits = self._currency.precision
        context = working_context(self._amount, scalar, precision=self._family.precision, extra_digits=digits)
        quotient = context.divide(self._amount, scalar)
        return self._with_amount(self._family.round(quotient, digits, rounding))

    def ratio_of(self, other: Money) -> Decimal:
        """Return the currency-less ratio of this amount to $other's.

        Exact ratios are returned as is; others are rounded to the family's
        `ratio_decimal_places` with its default rounding mode.

        Raises:
            CurrencyMismatchError: If currencies differ.
            DivisionByZeroError: If $other is zero.
        """
        self._verify_compatible("ratio_of", other)

        # Raise: ratio against zero is undefined
        if other._amount.is_zero():
            raise DivisionByZeroError("ratio_of")

        places = self._family.ratio_decimal_places
        context = working_context(self._amount, other._amount, precision=self._family.precision, extra_digits=places)
        ratio = context.divide(self._amount, other._amount)
        if ratio.as_tuple().exponent < -places:
            ratio = self._family.round(ratio, places)
        return ratio

    def convert_currency(self, currency: str | Currency, rate: DecimalLike, rounding: RoundingMode | None = None) -> Money:
        """Return new Money in $currency worth this amount times $rate.

        The product goes through full construction, so it is rounded to the digits of the
        new currency.

        Raises:
            InvalidAmountError: If $rate is not a finite decimal.
            InvalidCurrencyError: If $currency cannot be resolved.
        """
        scalar = self._parse_scalar("convert_currency", rate)
        context = working_context(self._amount, scalar, precision=self._family.precision)
        return self.__class__(context.multiply(self._amount, scalar), currency, rounding, family=self._family)

    def abs(self) -> Money:
        return self._with_amount(self._amount.copy_abs())

    def negate(self) -> Money:
        return self._with_amount(self._amount.copy_negate())

    # endregion

    # region Comparison

    def eq(self, other: object) -> bool:
        """Return True if $other is Money with the same currency and amount; never raises."""
        if not isinstance(other, Money):
            return False
        return self.currency == other.currency and self._amount == other._amount

    def lt(self, other: Money) -> bool:
        self._verify_compatible("lt", other)
        return self._amount < other._amount

    def lte(self, other: Money) -> bool:
        self._verify_compatible("lte", other)
        return self._amount <= other._amount

    def gt(self, other: Money) -> bool:
        self._verify_compatible("gt", other)
        return self._amount > other._amount

    def gte(self, other: Money) -> bool:
        self._verify_compatible("gte", other)
        return self._amount >= other._amount

    def cmp(self, other: Money) -> int:
        """Three-way comparison: -1, 0 or 1."""
        self._verify_compatible("cmp", other)
        if self._amount < other._amount:
            return -1
        if self._amount > other._amount:
            return 1
        return 0

    def has_same_currency(self, other: Money) -> bool:
        return self.currency == other.currency

    # endregion

    # region Sign

    def sign(self) -> int:
        """Return -1, 0 or 1; zero is 0 even when stored as negative zero."""
        if self._amount.is_zero():
            return 0
        return -1 if self._amount.is_signed() else 1

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    # endregion

    # region Precision

    def to_safe_number_or_none(self) -> float | None:
        """Return the amount as a float if it converts back without loss, otherwise None."""
        return to_safe_number_or_none(self._amount, self._requantize)

    def to_safe_number(self) -> float:
        """Return the amount as a float that converts back without loss.

        Raises:
            UnsafePrecisionError: If no float represents the amount exactly.
        """
        number = self.to_safe_number_or_none()
        if number is None:
            raise UnsafePrecisionError(self.to_decimal_string())
        return number

    def is_safe_number(self) -> bool:
        return self.to_safe_number_or_none() is not None

    def to_number_unchecked(self) -> float:
        """Return the nearest float; precision may be lost silently."""
        return to_number_unchecked(self._amount)

    # endregion

    # region Formatting

    def to_decimal_string(self) -> str:
        """Return the exact amount as fixed-point text without trailing zeros, e.g. '10' for 10.00."""
        return to_decimal_text(self._amount)

    def to_locale_string(self, locale: str | None = None, precision_handling: PrecisionHandling | str = PrecisionHandling.SAFE, **options: Any) -> str:
        """Render the amount for $locale.

        Args:
            locale: Locale identifier such as "en", "de_DE" or "en-GB"; defaults to the family's.
            precision_handling: What to do when the amount cannot be represented by a float:
                "safe" raises, "unchecked" renders the nearest float, "show_imprecision"
                renders the nearest float marked by the family's `format_imprecision`.
            **options: Passed to the renderer (`style`, `currency_display`, `currency_sign`,
                `use_grouping`, `minimum_fraction_digits`, `maximum_fraction_digits`).
                `currency` may only repeat this Money's currency.

        Returns:
            str: Localized text.

        Raises:
            InvalidOptionError: If $precision_handling is not recognized.
            CurrencyOverrideNotAllowedError: If `currency` names another currency.
            UnsafePrecisionError: With "safe" handling when the amount is not float-safe.
        """
        return format_money(self, locale, precision_handling, options)

    # endregion

    # region Internals

    def _with_amount(self, amount: Decimal) -> Money:
        return self._create_unchecked(amount, self._currency, self._family)

    def _requantize(self, value: Decimal) -> Decimal:
        return self._family.round(value, self._currency.precision)

    def _verify_compatible(self, operation: str, other: Money) -> None:
        # Raise: the other operand must be Money
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other is not Money (got type '{type(other).__name__}')")

        # Raise: no implicit currency conversion
        if self.currency != other.currency:
            raise CurrencyMismatchError(operation, self.currency, other.currency)

    def _apply_unit_op(self, operation: str, other: Money, op: Callable[[Any, Decimal, Decimal], Decimal]) -> Money:
        self._verify_compatible(operation, other)
        context = working_context(self._amount, other._amount, precision=self._family.precision)
        return self._with_amount(op(context, self._amount, other._amount))

    @staticmethod
    def _parse_scalar(operation: str, value: object) -> Decimal:
        # Raise: Money carries a currency and is not a scalar
        if isinstance(value, Money):
            raise TypeError(f"Cannot call `{operation}` because the operand is Money; pass a scalar")
        try:
            return parse_decimal(value)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(value, str(e)) from e

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        return self.eq(other)

    def __hash__(self) -> int:
        return hash((self._amount, self.currency))

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        """Multiply Money by a scalar (returns Money)."""
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a scalar (returns Money) or by Money (returns the Decimal ratio)."""
        if isinstance(other, Money):
            return self.ratio_of(other)
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.div(other)

    def __mod__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.mod(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self.abs()

    def __str__(self) -> str:
        """Return exact text like 'EUR 1000.5'."""
        return f"{self.currency} {self.to_decimal_string()}"

    def __repr__(self) -> str:
        """Return string like "Money('1000.5', 'EUR')"."""
        return f"{self.__class__.__name__}('{self.to_decimal_string()}', '{self.currency}')"

    # endregion
