"""Data models shared across ingestion and conversion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping

from fx_cur.errors import UnsupportedCurrencyError
from fx_cur.utils.currencies import BASE_CURRENCY


@dataclass(frozen=True, slots=True)
class RateTable:
    """Exchange rates relative to ``base``, read-only once built."""

    rates: Mapping[str, float]
    base: str = BASE_CURRENCY

    def __post_init__(self) -> None:
        frozen = {code.upper(): float(rate) for code, rate in self.rates.items()}
        frozen.setdefault(self.base, 1.0)
        for code, rate in frozen.items():
            if rate <= 0:
                raise ValueError(f"Rate for {code} must be positive, got {rate}")
        object.__setattr__(self, "rates", MappingProxyType(frozen))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self.rates

    def __getitem__(self, code: str) -> float:
        try:
            return self.rates[code.upper()]
        except KeyError:
            raise UnsupportedCurrencyError(f"No rate available for {code}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def codes(self) -> list[str]:
        return sorted(self.rates)

    def convert(self, amount: float, source: str, destination: str) -> float:
        """Convert ``amount`` of ``source`` into ``destination``."""

        return amount * self[destination] / self[source]


@dataclass(frozen=True, slots=True)
class RateDocument:
    """A parsed reference-rate document."""

    publication_date: date
    table: RateTable


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    source: str
    destination: str
    amount: float = 1.0
    long_output: bool = False


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a conversion together with the snapshot it used."""

    request: ConversionRequest
    converted: float
    publication_date: date
    from_cache: bool = False


__all__ = ["ConversionRequest", "ConversionResult", "RateDocument", "RateTable"]
