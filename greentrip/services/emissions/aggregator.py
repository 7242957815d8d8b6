"""Group a user's booking emissions into calendar periods."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone

from greentrip.contracts.emissions import (
    BookingEmissionEntry,
    DateRange,
    PeriodSummary,
    UserEmissionsSummary,
)
from greentrip.contracts.enums import PeriodGranularity
from greentrip.services.emissions.model import round_half_up
from greentrip.services.emissions.periods import CalendarPeriod, parse_granularity
from greentrip.services.errors import InputValidationError


def validate_date_range(date_range: DateRange | None) -> None:
    if date_range is not None and date_range.end < date_range.start:
        raise InputValidationError(
            "End date must be on or after start date",
            start_date=date_range.start.isoformat(),
            end_date=date_range.end.isoformat(),
        )


def summarize_period(
    period: CalendarPeriod, entries: list[BookingEmissionEntry]
) -> PeriodSummary:
    """Totals for the entries of one period, oldest booking first."""
    count = len(entries)
    total = sum(e.emissions_kg for e in entries)
    average = total / count if count else 0.0
    return PeriodSummary(
        period=period.label,
        total_emissions=round_half_up(total),
        booking_count=count,
        average_emissions_per_booking=round_half_up(average),
        bookings=sorted(entries, key=lambda e: e.created_at),
    )


def summarize_emissions(
    entries: list[BookingEmissionEntry],
    period: str | PeriodGranularity,
    *,
    user_id: str,
    user_name: str | None = None,
    date_range: DateRange | None = None,
    generated_at: datetime | None = None,
) -> UserEmissionsSummary:
    """Build a user's emissions report.

    Every entry counts regardless of its status: a cancelled booking still
    consumed the emissions recorded on it. With *date_range*, only entries
    created on a date inside the inclusive window are considered.
    """
    granularity = parse_granularity(period)
    validate_date_range(date_range)

    if date_range is not None:
        entries = [e for e in entries if date_range.contains(e.created_at)]

    groups: dict[CalendarPeriod, list[BookingEmissionEntry]] = defaultdict(list)
    for entry in entries:
        groups[CalendarPeriod.containing(entry.created_at, granularity)].append(entry)

    periods = [summarize_period(key, groups[key]) for key in sorted(groups)]

    return UserEmissionsSummary(
        user_id=user_id,
        user_name=user_name,
        period_type=granularity,
        date_range=date_range,
        total_emissions=round_half_up(sum(e.emissions_kg for e in entries)),
        total_bookings=len(entries),
        periods=periods,
        generated_at=generated_at or datetime.now(tz=timezone.utc),
    )
