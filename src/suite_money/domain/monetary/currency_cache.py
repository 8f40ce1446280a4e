from __future__ import annotations

import logging
from typing import Callable

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import resolve_currency

logger = logging.getLogger(__name__)


class CurrencyCache:
    """Append-only cache of resolved `Currency` metadata, keyed by the code as given.

    Entries are immutable and never evicted. Concurrent callers may race on a miss; both
    resolve the same metadata, so the second insert is harmless.
    """

    def __init__(self, resolver: Callable[[object], Currency] = resolve_currency):
        """Initialize an empty cache.

        Args:
            resolver: Function turning a code into `Currency`; raises on unresolvable codes.
        """
        self._resolver = resolver
        self._entries: dict[str, Currency] = {}

    def get_or_resolve(self, code: object) -> Currency:
        """Return cached metadata for $code, resolving and inserting it on first use.

        Args:
            code: Currency code (any case) or `Currency` instance.

        Returns:
            Currency: Resolved metadata.

        Raises:
            InvalidCurrencyError: If $code cannot be resolved. Failures are not cached.
        """
        if isinstance(code, Currency):
            return code

        # Unhashable or non-string input goes straight to the resolver, which rejects it
        if not isinstance(code, str):
            return self._resolver(code)

        currency = self._entries.get(code)
        if currency is None:
            currency = self._resolver(code)
            self._entries[code] = currency
            logger.debug(f"CurrencyCache resolved $code '{code}' as {currency!r}")
        return currency

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Process-wide cache shared by all money families unless one is given its own
CURRENCY_CACHE = CurrencyCache()


def get_currency(code: object) -> Currency:
    """Resolve $code through the process-wide `CURRENCY_CACHE`."""
    return CURRENCY_CACHE.get_or_resolve(code)
