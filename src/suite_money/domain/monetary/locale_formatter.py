"""Locale-aware rendering of Money through Babel's CLDR number patterns.

`render_number` is the renderer: it knows nothing about Money and turns a float into a
localized string. `format_money` is the adapter used by `Money.to_locale_string`: it picks
the float according to the precision-handling policy, assembles renderer options and marks
approximate results.
"""

from __future__ import annotations

from copy import copy
from typing import TYPE_CHECKING, Any, Mapping

from babel import Locale
from babel.numbers import NumberPattern, parse_pattern

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyOverrideNotAllowedError, InvalidOptionError
from suite_money.domain.monetary.precision import PrecisionHandling

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

APPROXIMATION_MARKER = "~"
NO_BREAK_SPACE = "\u00a0"

# Upper bound for fraction digit options
MAX_FRACTION_DIGITS = 100


def mark_imprecise(formatted: str, locale: str, options: Mapping[str, Any]) -> str:
    """Default approximation marking: prefix $formatted with "~" and a no-break space."""
    return f"{APPROXIMATION_MARKER}{NO_BREAK_SPACE}{formatted}"


# region Renderer


def render_number(
    number: float,
    locale: str,
    *,
    style: str = "currency",
    currency: str | None = None,
    currency_display: str = "symbol",
    currency_sign: str = "standard",
    use_grouping: bool = True,
    minimum_fraction_digits: int | None = None,
    maximum_fraction_digits: int | None = None,
) -> str:
    """Render $number for $locale.

    Args:
        number: Value to render.
        locale: Locale identifier; "-" and "_" separators are both accepted (e.g. "en-GB").
        style: "currency", "decimal" or "percent".
        currency: ISO code; required for the "currency" style.
        currency_display: "symbol" (e.g. "€") or "code" (e.g. "EUR").
        currency_sign: "standard" or "accounting" pattern of the locale.
        use_grouping: Whether to insert group separators.
        minimum_fraction_digits: Lower bound of fractional digits; defaults to the pattern's.
        maximum_fraction_digits: Upper bound of fractional digits; defaults to the pattern's.

    Returns:
        str: Localized text.

    Raises:
        ValueError: If an option has an unsupported value.
        babel.UnknownLocaleError: If $locale is not known to CLDR.
    """
    babel_locale = Locale.parse(locale.replace("-", "_"))
    pattern = copy(_select_pattern(babel_locale, style, currency, currency_display, currency_sign))
    pattern.frac_prec = _fraction_bounds(pattern.frac_prec, minimum_fraction_digits, maximum_fraction_digits)
    return pattern.apply(number, babel_locale, currency=currency, currency_digits=False, group_separator=use_grouping)


def _select_pattern(locale: Locale, style: str, currency: str | None, currency_display: str, currency_sign: str) -> NumberPattern:
    if style == "decimal":
        return locale.decimal_formats[None]
    if style == "percent":
        return locale.percent_formats[None]

    # Raise: unsupported style
    if style != "currency":
        raise ValueError(f"Cannot call `render_number` because $style ('{style}') is not one of ['currency', 'decimal', 'percent']")

    # Raise: currency style needs a currency
    if currency is None:
        raise ValueError("Cannot call `render_number` because $currency is required for $style 'currency'")

    # Raise: unsupported currency sign
    if currency_sign not in ("standard", "accounting"):
        raise ValueError(f"Cannot call `render_number` because $currency_sign ('{currency_sign}') is not one of ['standard', 'accounting']")

    pattern = locale.currency_formats[currency_sign]
    if currency_display == "symbol":
        return pattern
    if currency_display == "code":
        return parse_pattern(pattern.pattern.replace("¤", "¤¤"))

    # Raise: unsupported currency display
    raise ValueError(f"Cannot call `render_number` because $currency_display ('{currency_display}') is not one of ['symbol', 'code']")


def _fraction_bounds(default: tuple[int, int], minimum: int | None, maximum: int | None) -> tuple[int, int]:
    for name, value in (("minimum_fraction_digits", minimum), ("maximum_fraction_digits", maximum)):
        # Raise: fraction digits must be an int within range
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_FRACTION_DIGITS):
            raise ValueError(f"Cannot call `render_number` because ${name} ({value!r}) is not an int between 0 and {MAX_FRACTION_DIGITS}")

    default_min, default_max = default
    if minimum is None and maximum is None:
        return default_min, default_max
    if maximum is None:
        return minimum, max(default_max, minimum)
    if minimum is None:
        return min(default_min, maximum), maximum

    # Raise: explicit bounds must not be inverted
    if minimum > maximum:
        raise ValueError(f"Cannot call `render_number` because $minimum_fraction_digits ({minimum}) > $maximum_fraction_digits ({maximum})")
    return minimum, maximum


# endregion

# region Adapter


def parse_precision_handling(value: object) -> PrecisionHandling:
    """Return the `PrecisionHandling` named by $value (member or exact lowercase value)."""
    if isinstance(value, PrecisionHandling):
        return value
    if isinstance(value, str):
        try:
            return PrecisionHandling(value)
        except ValueError:
            pass
    raise InvalidOptionError("precision_handling", value, [policy.value for policy in PrecisionHandling])


def format_money(money: Money, locale: str | None, precision_handling: object, options: Mapping[str, Any]) -> str:
    """Render $money for $locale following the $precision_handling policy.

    Args:
        money: Amount to render.
        locale: Locale identifier, or None for the family default.
        precision_handling: `PrecisionHandling` member or its value.
        options: Renderer options (see `render_number`); `currency` may only repeat the
            currency of $money.

    Returns:
        str: Localized text, marked as approximate when the policy asks for it.

    Raises:
        InvalidOptionError: If $precision_handling is not recognized.
        CurrencyOverrideNotAllowedError: If `currency` names another currency.
        UnsafePrecisionError: Under the SAFE policy when the amount is not float-safe.
    """
    policy = parse_precision_handling(precision_handling)

    render_options = dict(options)
    requested_currency = render_options.pop("currency", None)

    # Raise: the rendered currency is always the currency of Money
    if requested_currency is not None and not _is_same_code(requested_currency, money.currency):
        raise CurrencyOverrideNotAllowedError(money.currency, requested_currency)

    # SAFE raises here, before anything is rendered
    if policy is PrecisionHandling.SAFE:
        number = money.to_safe_number()
    else:
        number = money.to_number_unchecked()

    render_options.setdefault("style", "currency")
    render_options["currency"] = money.currency
    if render_options["style"] == "currency":
        digits = money.currency_info.precision
        bounds = _fraction_bounds((digits, digits), render_options.get("minimum_fraction_digits"), render_options.get("maximum_fraction_digits"))
        render_options["minimum_fraction_digits"], render_options["maximum_fraction_digits"] = bounds

    locale = locale or money.family.locale
    formatted = render_number(number, locale, **render_options)

    if policy is PrecisionHandling.SHOW_IMPRECISION and not money.is_safe_number():
        formatted = money.family.format_imprecision(formatted, locale, render_options)
    return formatted


def _is_same_code(requested: object, currency: str) -> bool:
    if isinstance(requested, Currency):
        return requested.code == currency
    return isinstance(requested, str) and requested.upper() == currency


# endregion
