"""Cached emissions reports per user.

Reports are read-through cached for ``CACHE_TTL_SECONDS``. The cache store
is injected, so a Redis-, disk- or memory-backed store can be swapped in.

Cache keys:

- ``emissions_summary:user:{user_id}:period:{period}``
- ``emissions_summary:user:{user_id}:range:{start}:{end}:period:{period}``
  with dates formatted ``YYYY-MM-DD``

``clear_user_cache`` only removes the four canonical period keys. Date-range
reports are left to expire on their TTL.

Concurrent misses on the same key are not deduplicated: each request
computes and the last write wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from pydantic import ValidationError

from greentrip.contracts.emissions import (
    BookingEmissionEntry,
    DateRange,
    UserEmissionsSummary,
)
from greentrip.contracts.enums import PeriodGranularity
from greentrip.persistence.cache_store import CacheStore
from greentrip.persistence.errors import CacheStoreError
from greentrip.services.emissions.aggregator import summarize_emissions, validate_date_range
from greentrip.services.emissions.periods import parse_granularity

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 120
CACHE_KEY_PREFIX = "emissions_summary"


class BookingHistoryProvider(Protocol):
    async def load_entries(
        self, user_id: str, date_range: DateRange | None = None
    ) -> list[BookingEmissionEntry]: ...


def summary_cache_key(
    user_id: str,
    period: str | PeriodGranularity,
    date_range: DateRange | None = None,
) -> str:
    """Deterministic cache key for a report request."""
    period = parse_granularity(period).value
    if date_range is None:
        return f"{CACHE_KEY_PREFIX}:user:{user_id}:period:{period}"
    start = date_range.start.strftime("%Y-%m-%d")
    end = date_range.end.strftime("%Y-%m-%d")
    return f"{CACHE_KEY_PREFIX}:user:{user_id}:range:{start}:{end}:period:{period}"


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class EmissionsReportingService:
    """Read-through cache in front of the emissions aggregator."""

    def __init__(
        self,
        history: BookingHistoryProvider,
        cache: CacheStore,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._history = history
        self._cache = cache
        self._ttl = ttl_seconds
        self._clock = clock

    async def get_summary(
        self,
        user_id: str,
        user_name: str | None = None,
        period: str | PeriodGranularity = PeriodGranularity.MONTHLY,
        date_range: DateRange | None = None,
    ) -> UserEmissionsSummary:
        """Return the user's report, from cache when a fresh copy exists."""
        granularity = parse_granularity(period)
        validate_date_range(date_range)
        key = summary_cache_key(user_id, granularity, date_range)

        cached = self._cache_get(key)
        if cached is not None:
            logger.debug("Report cache hit: %s", key)
            return cached

        entries = await self._history.load_entries(user_id, date_range)
        summary = summarize_emissions(
            entries,
            granularity,
            user_id=user_id,
            user_name=user_name,
            date_range=date_range,
            generated_at=self._clock(),
        )
        self._cache_put(key, summary)
        return summary

    def clear_user_cache(self, user_id: str) -> None:
        """Drop the user's daily/weekly/monthly/yearly reports.

        Raises ``CacheStoreError`` if the store is down.
        """
        for period in PeriodGranularity:
            self._cache.delete(summary_cache_key(user_id, period))

    # ------------------------------------------------------------------
    # Cache access, degrading to direct computation on failure
    # ------------------------------------------------------------------

    def _cache_get(self, key: str) -> UserEmissionsSummary | None:
        try:
            raw = self._cache.get(key)
        except CacheStoreError as exc:
            logger.warning("Report cache unavailable, computing directly: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return UserEmissionsSummary.from_firestore(raw)
        except ValidationError as exc:
            logger.warning("Discarding unreadable cached report %s: %s", key, exc)
            return None

    def _cache_put(self, key: str, summary: UserEmissionsSummary) -> None:
        try:
            self._cache.put(key, summary.to_firestore(), self._ttl)
        except CacheStoreError as exc:
            logger.warning("Report cache unavailable, result not cached: %s", exc)
