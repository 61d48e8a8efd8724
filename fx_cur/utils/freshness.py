"""Decide whether a cached ECB reference-rate snapshot can still be trusted.

The ECB publishes one snapshot per business day at around 14:00 UTC. A cached
document is fresh when it is at least as new as the snapshot that should exist
at ``now``: before the cutoff (publication time plus a one hour grace) the
newest expected snapshot is the previous day's, and on weekends it is Friday's.
Public holidays are not modelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Final

FRIDAY: Final[int] = 4
PUBLICATION_CUTOFF: Final[timedelta] = timedelta(hours=15)


@dataclass(frozen=True, slots=True)
class FreshnessPolicy:
    """Cutoff and business-week settings of the staleness rule."""

    cutoff: timedelta = PUBLICATION_CUTOFF
    last_business_weekday: int = FRIDAY

    def expected_publication_date(self, now: datetime) -> date:
        """Return the newest snapshot date that should be published at ``now``."""

        effective = _as_utc(now) - self.cutoff
        days_back = max(effective.weekday() - self.last_business_weekday, 0)
        return (effective - timedelta(days=days_back)).date()

    def is_fresh(self, now: datetime, publication_date: date) -> bool:
        return publication_date >= self.expected_publication_date(now)


DEFAULT_POLICY: Final[FreshnessPolicy] = FreshnessPolicy()


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("now must be a timezone-aware datetime")
    return value.astimezone(timezone.utc)


def expected_publication_date(now: datetime) -> date:
    """Module-level shortcut for :meth:`FreshnessPolicy.expected_publication_date`."""

    return DEFAULT_POLICY.expected_publication_date(now)


def is_fresh(now: datetime, publication_date: date) -> bool:
    """Return True when a snapshot from ``publication_date`` is current at ``now``."""

    return DEFAULT_POLICY.is_fresh(now, publication_date)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = [
    "DEFAULT_POLICY",
    "FRIDAY",
    "FreshnessPolicy",
    "PUBLICATION_CUTOFF",
    "expected_publication_date",
    "is_fresh",
    "utc_now",
]
