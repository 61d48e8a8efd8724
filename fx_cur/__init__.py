"""Public interface for the fx_cur package."""

from __future__ import annotations

from datetime import date, datetime
from importlib import metadata as importlib_metadata
from pathlib import Path

from fx_cur.cache.file_store import RateCache
from fx_cur.config import Settings
from fx_cur.engine import ConversionEngine
from fx_cur.errors import (
    CacheError,
    FxCurError,
    RateFetchError,
    RateParseError,
    UnsupportedCurrencyError,
    UsageError,
)
from fx_cur.ingestion.ecb_requests import ECBRequestsClient
from fx_cur.ingestion.models import ConversionRequest, ConversionResult, RateTable
from fx_cur.ingestion.strategy import RateSource
from fx_cur.utils.currencies import SORTED_CURRENCIES
from fx_cur.utils.freshness import FreshnessPolicy, is_fresh

__all__ = [
    "__version__",
    "CacheError",
    "ConversionRequest",
    "ConversionResult",
    "FreshnessPolicy",
    "FxCur",
    "FxCurError",
    "RateFetchError",
    "RateParseError",
    "RateTable",
    "UnsupportedCurrencyError",
    "UsageError",
    "is_fresh",
]

try:
    __version__ = importlib_metadata.version("fx-cur")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class FxCur:
    """Package facade bundling the cache, the ECB client and the engine."""

    __slots__ = ("settings", "engine", "_client")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        cache_path: str | Path | None = None,
        source: RateSource | None = None,
    ) -> None:
        """Configure where rates are cached and how they are fetched.

        Without arguments the settings come from the ``FX_CUR_*`` environment
        variables. ``cache_path`` overrides the cache location and ``source``
        replaces the ECB client, which is mostly useful in tests. A supplied
        ``source`` is not closed by :meth:`close`.
        """

        self.settings = settings or Settings.from_env()
        cache = RateCache(cache_path or self.settings.cache_path)
        self._client: ECBRequestsClient | None = None
        if source is None:
            self._client = ECBRequestsClient(
                url=self.settings.source_url, timeout=self.settings.timeout
            )
        self.engine = ConversionEngine(cache, source or self._client)

    def close(self) -> None:
        """Release the HTTP session of the ECB client created by this facade."""

        if self._client is not None:
            self._client.close()

    def __enter__(self) -> "FxCur":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @staticmethod
    def currencies() -> tuple[str, ...]:
        """Return the supported currency codes in alphabetical order."""

        return SORTED_CURRENCIES

    def rates(self, now: datetime | None = None) -> RateTable:
        """Return the current rate table, refreshing the cache if needed."""

        document, _ = self.engine.load_rates(now)
        return document.table

    def publication_date(self, now: datetime | None = None) -> date:
        document, _ = self.engine.load_rates(now)
        return document.publication_date

    def convert(
        self,
        amount: float,
        source: str,
        destination: str,
        *,
        now: datetime | None = None,
    ) -> float:
        """Convert ``amount`` from ``source`` to ``destination``."""

        request = ConversionRequest(
            source=source.upper(), destination=destination.upper(), amount=amount
        )
        return self.engine.convert(request, now).converted
