"""Failures raised by the monetary domain.

Every failure is raised at the call that detects it; nothing is retried or suppressed.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base class for all monetary domain failures."""


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an amount cannot be parsed as an exact decimal."""

    def __init__(self, amount: object, reason: str | None = None):
        self.amount = amount
        self.reason = reason

        message = f"Invalid amount: {amount!r}"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class InvalidCurrencyError(MoneyError, ValueError):
    """Raised when a currency code cannot be resolved."""

    def __init__(self, currency: object, reason: str | None = None):
        self.currency = currency
        self.reason = reason

        message = f"Invalid currency: {currency!r}"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when a two-operand operation receives different currencies."""

    def __init__(self, operation: str, currency: str, other_currency: str):
        self.operation = operation
        self.currency = currency
        self.other_currency = other_currency
        super().__init__(f"Cannot apply operation `{operation}` to currencies {currency} and {other_currency}")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised on division, modulo or ratio against zero."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Division by zero in `{operation}`")


class UnsafePrecisionError(MoneyError, ArithmeticError):
    """Raised when an amount cannot round-trip through a float without loss."""

    def __init__(self, amount: str):
        self.amount = amount
        super().__init__(f"Cannot convert Money to a float because the amount {amount} cannot be accurately represented by a float")


class CurrencyOverrideNotAllowedError(MoneyError, ValueError):
    """Raised when formatting options try to display a different currency."""

    def __init__(self, currency: str, requested: object):
        self.currency = currency
        self.requested = requested
        super().__init__(f"Cannot format Money in {currency} using $currency ({requested!r}); the currency of Money cannot be overridden")


class InvalidOptionError(MoneyError, ValueError):
    """Raised when a formatting option has an unrecognized value."""

    def __init__(self, option: str, value: object, allowed: list[str]):
        self.option = option
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid value for ${option}: {value!r}. Allowed values: {allowed}")
