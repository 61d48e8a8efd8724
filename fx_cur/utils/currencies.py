"""Currency codes and connector words understood by the command line."""

from __future__ import annotations

from typing import Final

BASE_CURRENCY: Final[str] = "EUR"

# Every code the ECB daily reference document has carried, base included.
SUPPORTED_CURRENCIES: Final[frozenset[str]] = frozenset(
    {
        "AUD",
        "BGN",
        "BRL",
        "CAD",
        "CHF",
        "CNY",
        "CZK",
        "DKK",
        "EUR",
        "GBP",
        "HKD",
        "HRK",
        "HUF",
        "IDR",
        "ILS",
        "INR",
        "ISK",
        "JPY",
        "KRW",
        "MXN",
        "MYR",
        "NOK",
        "NZD",
        "PHP",
        "PLN",
        "RON",
        "RUB",
        "SEK",
        "SGD",
        "THB",
        "TRY",
        "USD",
        "ZAR",
    }
)

SORTED_CURRENCIES: Final[tuple[str, ...]] = tuple(sorted(SUPPORTED_CURRENCIES))

CONNECTORS: Final[tuple[str, ...]] = ("to", "as", "in")


def is_supported_currency(code: str) -> bool:
    """Return True when ``code`` names a supported currency (any case)."""

    return code.upper() in SUPPORTED_CURRENCIES


def is_connector(word: str) -> bool:
    return word.lower() in CONNECTORS


__all__ = [
    "BASE_CURRENCY",
    "CONNECTORS",
    "SORTED_CURRENCIES",
    "SUPPORTED_CURRENCIES",
    "is_connector",
    "is_supported_currency",
]
