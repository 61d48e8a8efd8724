"""Exception hierarchy shared by every fx_cur component."""

from __future__ import annotations


class FxCurError(Exception):
    """Base class for failures that abort a conversion."""


class UsageError(FxCurError):
    """Raised when command line tokens do not form a conversion request."""


class CacheError(FxCurError):
    """Raised when the cache file exists but cannot be read or replaced."""


class RateFetchError(FxCurError):
    """Raised when the reference-rate document cannot be downloaded."""


class RateParseError(FxCurError, ValueError):
    """Raised when a reference-rate document is malformed."""


class UnsupportedCurrencyError(FxCurError, KeyError):
    """Raised when a currency code is missing from the rate table."""

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "CacheError",
    "FxCurError",
    "RateFetchError",
    "RateParseError",
    "UnsupportedCurrencyError",
    "UsageError",
]
