"""Abstractions for pluggable rate sources."""

from __future__ import annotations

from typing import Protocol


class RateSource(Protocol):
    """Contract for fetching the raw reference-rate document.

    Implementations perform a single download and return the document bytes
    untouched so it can be cached byte-for-byte.
    """

    def fetch(self) -> bytes:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateSource"]
