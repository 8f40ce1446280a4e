from __future__ import annotations

from enum import Enum

# ISO 4217 minor units never exceed 4; the bound leaves room for unlisted codes
MAX_FRACTION_DIGITS = 18


class CurrencyType(Enum):
    """Where a code sits in ISO 4217."""

    FIAT = "FIAT"
    COMMODITY = "COMMODITY"
    SPECIAL = "SPECIAL"
    UNLISTED = "UNLISTED"


class Currency:
    """Resolved metadata of one currency code.

    Money keeps a `Currency` next to its amount; `precision` is the number of fractional digits
    every amount in this currency is rounded to. Instances are built by `resolve_currency` and
    shared through `CurrencyCache`, so they never change after creation.
    """

    __slots__ = ("_code", "_precision", "_name", "_currency_type")

    def __init__(self, code: str, precision: int, name: str, currency_type: CurrencyType):
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"Cannot create `Currency` because $code ({code!r}) is not a non-empty string")

        # Raise: fractional digits must be a plain int within range
        if isinstance(precision, bool) or not isinstance(precision, int) or not 0 <= precision <= MAX_FRACTION_DIGITS:
            raise ValueError(f"Cannot create `Currency` because $precision ({precision!r}) is not an int between 0 and {MAX_FRACTION_DIGITS}")

        # Raise: name is shown to users and cannot be blank
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot create `Currency` because $name ({name!r}) is blank")

        # Raise: currency_type must be a CurrencyType member
        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"Cannot create `Currency` because $currency_type ({currency_type!r}) is not CurrencyType")

        self._code = code.strip().upper()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Uppercase code, e.g. "IQD"."""
        return self._code

    @property
    def precision(self) -> int:
        """Fractional digits of amounts in this currency (0 for JPY, 3 for IQD)."""
        return self._precision

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        return self._currency_type

    @property
    def is_listed(self) -> bool:
        """False for well-formed codes accepted without an ISO 4217 entry."""
        return self._currency_type is not CurrencyType.UNLISTED

    def __eq__(self, other) -> bool:
        return isinstance(other, Currency) and self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._code}', precision={self._precision}, {self._currency_type.name})"
