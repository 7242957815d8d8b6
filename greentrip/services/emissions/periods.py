"""Calendar periods used as report grouping keys.

A ``CalendarPeriod`` is compared on its integer parts, so sorting periods
is chronological without relying on label formatting. Labels are
zero-padded and therefore sort the same way as strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from greentrip.contracts.enums import PeriodGranularity
from greentrip.services.errors import InputValidationError


def parse_granularity(period: str | PeriodGranularity) -> PeriodGranularity:
    """Resolve a period granularity name."""
    if isinstance(period, PeriodGranularity):
        return period
    try:
        return PeriodGranularity(str(period).strip().lower())
    except ValueError:
        valid = [p.value for p in PeriodGranularity]
        raise InputValidationError(
            f"Invalid period. Must be one of: {', '.join(valid)}",
            period=period,
            valid_periods=valid,
        ) from None


@dataclass(frozen=True, order=True)
class CalendarPeriod:
    """One bucket of a period granularity.

    ``parts`` holds (year, month, day) for daily, (ISO year, ISO week) for
    weekly, (year, month) for monthly and (year,) for yearly.
    """

    parts: tuple[int, ...]
    granularity: PeriodGranularity = field(compare=False)

    @classmethod
    def containing(
        cls, moment: datetime, granularity: str | PeriodGranularity
    ) -> CalendarPeriod:
        """The period of *granularity* that contains *moment* (UTC)."""
        granularity = parse_granularity(granularity)
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)

        if granularity is PeriodGranularity.DAILY:
            parts = (moment.year, moment.month, moment.day)
        elif granularity is PeriodGranularity.WEEKLY:
            iso = moment.isocalendar()
            parts = (iso.year, iso.week)
        elif granularity is PeriodGranularity.MONTHLY:
            parts = (moment.year, moment.month)
        else:
            parts = (moment.year,)
        return cls(parts=parts, granularity=granularity)

    @property
    def label(self) -> str:
        """``2025-03-14``, ``2025-W11``, ``2025-03`` or ``2025``."""
        if self.granularity is PeriodGranularity.DAILY:
            year, month, day = self.parts
            return f"{year:04d}-{month:02d}-{day:02d}"
        if self.granularity is PeriodGranularity.WEEKLY:
            year, week = self.parts
            return f"{year:04d}-W{week:02d}"
        if self.granularity is PeriodGranularity.MONTHLY:
            year, month = self.parts
            return f"{year:04d}-{month:02d}"
        return f"{self.parts[0]:04d}"

    def __str__(self) -> str:
        return self.label
