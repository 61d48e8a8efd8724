"""Obtain a trustworthy rate table and convert amounts with it."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fx_cur.cache.file_store import RateCache
from fx_cur.errors import RateParseError
from fx_cur.ingestion.ecb_xml import parse_rate_document
from fx_cur.ingestion.models import ConversionRequest, ConversionResult, RateDocument
from fx_cur.ingestion.strategy import RateSource
from fx_cur.utils.freshness import DEFAULT_POLICY, FreshnessPolicy, utc_now
from fx_cur.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ConversionEngine:
    """Serve conversions from the cache, refreshing it when it is stale."""

    __slots__ = ("cache", "source", "policy", "clock")

    def __init__(
        self,
        cache: RateCache,
        source: RateSource,
        *,
        policy: FreshnessPolicy = DEFAULT_POLICY,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.cache = cache
        self.source = source
        self.policy = policy
        self.clock = clock

    def load_rates(self, now: datetime | None = None) -> tuple[RateDocument, bool]:
        """Return the document to convert with and whether it came from the cache.

        A missing or unparseable cache counts as absent. Anything read
        successfully is kept only if the freshness policy accepts it; otherwise
        one fetch replaces the cache file.
        """

        now = now or self.clock()
        cached = self._read_cached()
        if cached is not None:
            if self.policy.is_fresh(now, cached.publication_date):
                LOGGER.debug("Cached rates from %s are fresh", cached.publication_date)
                return cached, True
            LOGGER.info(
                "Cached rates from %s are stale (expected %s or newer)",
                cached.publication_date,
                self.policy.expected_publication_date(now),
            )

        raw = self.source.fetch()
        document = parse_rate_document(raw)
        self.cache.write(raw)
        return document, False

    def convert(self, request: ConversionRequest, now: datetime | None = None) -> ConversionResult:
        document, from_cache = self.load_rates(now)
        converted = document.table.convert(request.amount, request.source, request.destination)
        return ConversionResult(
            request=request,
            converted=converted,
            publication_date=document.publication_date,
            from_cache=from_cache,
        )

    def _read_cached(self) -> RateDocument | None:
        raw = self.cache.read()
        if raw is None:
            return None
        try:
            return parse_rate_document(raw)
        except RateParseError as exc:
            LOGGER.warning("Ignoring unreadable cache at %s: %s", self.cache.path, exc)
            return None


__all__ = ["ConversionEngine"]
