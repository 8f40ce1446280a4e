"""ISO 4217 currency table and code resolution."""

from __future__ import annotations

import re

from babel.numbers import get_currency_name

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.errors import InvalidCurrencyError

# Fractional digits for codes that are unlisted or listed without minor unit ("N.A.")
DEFAULT_FRACTION_DIGITS = 2

# Well-formed code: exactly three ASCII letters, any case
_CURRENCY_CODE = re.compile(r"[A-Za-z]{3}")

# Minor units of listed currencies that differ from DEFAULT_FRACTION_DIGITS
_MINOR_UNITS = {
    "BHD": 3, "BIF": 0, "CLF": 4, "CLP": 0, "DJF": 0, "GNF": 0, "IQD": 3, "ISK": 0,
    "JOD": 3, "JPY": 0, "KMF": 0, "KRW": 0, "KWD": 3, "LYD": 3, "OMR": 3, "PYG": 0,
    "RWF": 0, "TND": 3, "UGX": 0, "UYI": 0, "UYW": 4, "VND": 0, "VUV": 0, "XAF": 0,
    "XOF": 0, "XPF": 0,
}

_FIAT_CODES = frozenset("""
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB BOV BRL BSD BTN BWP BYN
    BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU CRC CUC CUP CVE CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD
    FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HRK HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS
    KHR KMF KPW KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN
    MXV MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR
    SDG SEK SGD SHP SLE SLL SOS SRD SSP STN SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD
    USN UYI UYU UYW UZS VED VES VND VUV WST XAF XCD XOF XPF YER ZAR ZMW ZWG ZWL
""".split())

_COMMODITY_CODES = frozenset({"XAG", "XAU", "XPD", "XPT"})

# Bond market units, SDR, SUCRE, ADB unit, testing and "no currency"
_SPECIAL_CODES = frozenset({"XBA", "XBB", "XBC", "XBD", "XDR", "XSU", "XTS", "XUA", "XXX"})


def _currency_type(code: str) -> CurrencyType:
    if code in _FIAT_CODES:
        return CurrencyType.FIAT
    if code in _COMMODITY_CODES:
        return CurrencyType.COMMODITY
    if code in _SPECIAL_CODES:
        return CurrencyType.SPECIAL
    return CurrencyType.UNLISTED


def fraction_digits(code: str) -> int:
    """Return the canonical number of fractional digits for uppercase $code."""
    return _MINOR_UNITS.get(code, DEFAULT_FRACTION_DIGITS)


def resolve_currency(code: object) -> Currency:
    """Resolve $code into `Currency` metadata.

    Matching is case-insensitive. Any well-formed three-letter code is accepted; codes outside
    the ISO 4217 list resolve as `CurrencyType.UNLISTED` with `DEFAULT_FRACTION_DIGITS`.

    Args:
        code: Currency code such as "eur" or "USD", or an already resolved `Currency`.

    Returns:
        Currency: Metadata with the normalized uppercase code.

    Raises:
        InvalidCurrencyError: If $code is not a string of exactly three ASCII letters.
    """
    if isinstance(code, Currency):
        return code

    # Raise: only strings can name a currency
    if not isinstance(code, str):
        raise InvalidCurrencyError(code, f"expected str, got '{type(code).__name__}'")

    # Raise: currency code must be exactly three ASCII letters
    if _CURRENCY_CODE.fullmatch(code) is None:
        raise InvalidCurrencyError(code, "expected exactly three ASCII letters")

    normalized = code.upper()
    name = get_currency_name(normalized, locale="en")
    return Currency(normalized, fraction_digits(normalized), name, _currency_type(normalized))


def listed_codes() -> list[str]:
    """Return all ISO 4217 codes known to this registry, sorted."""
    return sorted(_FIAT_CODES | _COMMODITY_CODES | _SPECIAL_CODES)
