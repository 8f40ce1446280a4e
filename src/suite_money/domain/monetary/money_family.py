from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import cache
from typing import TYPE_CHECKING, Any, Callable, Mapping

from suite_money.config import MoneySettings
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_cache import CURRENCY_CACHE, CurrencyCache
from suite_money.domain.monetary.locale_formatter import mark_imprecise
from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.utils.decimal_tools import quantize_fraction

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

logger = logging.getLogger(__name__)

ImprecisionFormatter = Callable[[str, str, Mapping[str, Any]], str]


@dataclass(frozen=True)
class MoneyFamily:
    """Named configuration shared by a group of Money values.

    Every Money belongs to a family, and results of its operations stay in that family.
    Customization (default rounding, working precision, approximate-value presentation) is
    done by creating another family, not by subclassing Money.

    Example:
        ```python
        circa = MoneyFamily(name="circa", format_imprecision=lambda text, locale, options: f"circa {text}")
        money = circa.create("12341234123412341234.12", "EUR")
        money.to_locale_string("en", precision_handling="show_imprecision")  # 'circa €12,341,...'
        ```

    Attributes:
        name: Label used in logs and repr.
        rounding: Default rounding mode for construction, `mul`, `div` and `ratio_of`.
        precision: Minimum working precision (significant digits) of intermediate arithmetic.
        ratio_decimal_places: Fractional digits kept by `Money.ratio_of` for inexact ratios.
        locale: Locale used by `Money.to_locale_string` when none is passed.
        format_imprecision: Marks a rendered approximate value; receives the rendered text,
            the locale and the renderer options.
        currency_cache: Where currency metadata is resolved and cached.
    """

    name: str = "default"
    rounding: RoundingMode = RoundingMode.HALF_UP
    precision: int = 100
    ratio_decimal_places: int = 20
    locale: str = "en_US"
    format_imprecision: ImprecisionFormatter = mark_imprecise
    currency_cache: CurrencyCache = field(default=CURRENCY_CACHE, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Raise: rounding must be a RoundingMode member
        if not isinstance(self.rounding, RoundingMode):
            raise TypeError(f"Cannot create `MoneyFamily` because $rounding ({self.rounding!r}) is not RoundingMode")

        # Raise: working precision must be positive
        if self.precision < 1:
            raise ValueError(f"Cannot create `MoneyFamily` because $precision ({self.precision}) < 1")

        # Raise: ratio decimal places cannot be negative
        if self.ratio_decimal_places < 0:
            raise ValueError(f"Cannot create `MoneyFamily` because $ratio_decimal_places ({self.ratio_decimal_places}) < 0")

    @classmethod
    def from_settings(cls, settings: MoneySettings, name: str = "default") -> MoneyFamily:
        """Create a family from process $settings."""
        return cls(
            name=name,
            rounding=settings.rounding,
            precision=settings.precision,
            ratio_decimal_places=settings.ratio_decimal_places,
            locale=settings.locale,
        )

    def replace(self, **changes: Any) -> MoneyFamily:
        """Return a copy of this family with $changes applied."""
        return dataclasses.replace(self, **changes)

    def create(self, amount: object, currency: str | Currency, rounding: RoundingMode | None = None) -> Money:
        """Create Money in this family; same as `Money(amount, currency, rounding, family=self)`."""
        from suite_money.domain.monetary.money import Money

        return Money(amount, currency, rounding, family=self)

    def round(self, value: Decimal, fraction_digits: int, rounding: RoundingMode | None = None) -> Decimal:
        """Round $value to $fraction_digits using $rounding or the family default.

        Raises:
            TypeError: If $rounding is neither None nor a RoundingMode member.
        """
        if rounding is None:
            rounding = self.rounding

        # Raise: rounding must be a RoundingMode member
        if not isinstance(rounding, RoundingMode):
            raise TypeError(f"Cannot call `round` because $rounding ({rounding!r}) is not RoundingMode")

        return quantize_fraction(value, fraction_digits, rounding.value, self.precision)


@cache
def get_default_family() -> MoneyFamily:
    """Return the process-wide default family, built once from `MoneySettings.from_env`."""
    family = MoneyFamily.from_settings(MoneySettings.from_env())
    logger.debug(f"Created default {family}")
    return family
