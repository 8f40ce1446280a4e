__version__ = "0.0.1"

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_cache import CurrencyCache, get_currency
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    CurrencyOverrideNotAllowedError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidOptionError,
    MoneyError,
    UnsafePrecisionError,
)
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.money_family import MoneyFamily, get_default_family
from suite_money.domain.monetary.precision import PrecisionHandling
from suite_money.domain.monetary.rounding_mode import RoundingMode

__all__ = [
    "Currency",
    "CurrencyCache",
    "CurrencyMismatchError",
    "CurrencyOverrideNotAllowedError",
    "CurrencyType",
    "DivisionByZeroError",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidOptionError",
    "Money",
    "MoneyError",
    "MoneyFamily",
    "PrecisionHandling",
    "RoundingMode",
    "UnsafePrecisionError",
    "get_currency",
    "get_default_family",
]
