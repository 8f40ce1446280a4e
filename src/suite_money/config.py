"""Process settings for money families, read from the environment and an optional `.env` file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from suite_money.domain.monetary.rounding_mode import RoundingMode

logger = logging.getLogger(__name__)

ENV_ROUNDING = "SUITE_MONEY_ROUNDING"
ENV_PRECISION = "SUITE_MONEY_PRECISION"
ENV_RATIO_DECIMAL_PLACES = "SUITE_MONEY_RATIO_DECIMAL_PLACES"
ENV_LOCALE = "SUITE_MONEY_LOCALE"


@dataclass(frozen=True)
class MoneySettings:
    """Defaults for the process-wide money family.

    Attributes:
        rounding: Default rounding mode for construction and scaling.
        precision: Minimum working precision (significant digits) for intermediate arithmetic.
        ratio_decimal_places: Fractional digits kept by `Money.ratio_of`.
        locale: Locale used by `Money.to_locale_string` when none is passed.
    """

    rounding: RoundingMode = RoundingMode.HALF_UP
    precision: int = 100
    ratio_decimal_places: int = 20
    locale: str = "en_US"

    def __post_init__(self) -> None:
        # Raise: rounding must be a RoundingMode member
        if not isinstance(self.rounding, RoundingMode):
            raise TypeError(f"Cannot create `MoneySettings` because $rounding ({self.rounding!r}) is not RoundingMode")

        # Raise: working precision must be positive
        if self.precision < 1:
            raise ValueError(f"Cannot create `MoneySettings` because $precision ({self.precision}) < 1")

        # Raise: ratio decimal places cannot be negative
        if self.ratio_decimal_places < 0:
            raise ValueError(f"Cannot create `MoneySettings` because $ratio_decimal_places ({self.ratio_decimal_places}) < 0")

        # Raise: locale must be a non-empty identifier
        if not self.locale.strip():
            raise ValueError("Cannot create `MoneySettings` because $locale is empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MoneySettings:
        """Build settings from environment variables.

        When $environ is None, a `.env` file is loaded first (existing variables win) and
        `os.environ` is read. Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of the process environment.

        Returns:
            MoneySettings: Parsed settings.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        defaults = cls()
        settings = cls(
            rounding=_parse_rounding(environ.get(ENV_ROUNDING), defaults.rounding),
            precision=_parse_int(ENV_PRECISION, environ.get(ENV_PRECISION), defaults.precision),
            ratio_decimal_places=_parse_int(ENV_RATIO_DECIMAL_PLACES, environ.get(ENV_RATIO_DECIMAL_PLACES), defaults.ratio_decimal_places),
            locale=environ.get(ENV_LOCALE) or defaults.locale,
        )
        logger.debug(f"Loaded {settings}")
        return settings


def _parse_rounding(raw: str | None, default: RoundingMode) -> RoundingMode:
    if raw is None or not raw.strip():
        return default
    try:
        return RoundingMode[raw.strip().upper()]
    except KeyError as e:
        raise ValueError(f"${ENV_ROUNDING} ('{raw}') must be one of {[mode.name for mode in RoundingMode]}") from e


def _parse_int(name: str, raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"${name} ('{raw}') must be an integer") from e
