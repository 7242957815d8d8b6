"""Tests for calendar period bucketing."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from greentrip.contracts.enums import PeriodGranularity
from greentrip.services.emissions.periods import CalendarPeriod, parse_granularity
from greentrip.services.errors import InputValidationError


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestLabels:
    @pytest.mark.parametrize(
        "granularity, label",
        [
            ("daily", "2025-03-07"),
            ("weekly", "2025-W10"),
            ("monthly", "2025-03"),
            ("yearly", "2025"),
        ],
    )
    def test_label_per_granularity(self, granularity, label):
        assert CalendarPeriod.containing(_utc(2025, 3, 7, 15, 30), granularity).label == label

    def test_weekly_uses_iso_year_at_year_start(self):
        # 2021-01-01 is a Friday in ISO week 53 of 2020
        period = CalendarPeriod.containing(_utc(2021, 1, 1), PeriodGranularity.WEEKLY)
        assert period.label == "2020-W53"

    def test_weekly_uses_iso_year_at_year_end(self):
        # 2024-12-30 is the Monday of ISO week 1 of 2025
        period = CalendarPeriod.containing(_utc(2024, 12, 30), PeriodGranularity.WEEKLY)
        assert period.label == "2025-W01"

    def test_aware_timestamp_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2025, 4, 1, 1, 0, tzinfo=plus_two)  # 2025-03-31 23:00 UTC
        assert CalendarPeriod.containing(moment, "monthly").label == "2025-03"

    def test_naive_timestamp_taken_as_is(self):
        assert CalendarPeriod.containing(datetime(2025, 4, 1, 0, 5), "daily").label == "2025-04-01"


class TestOrdering:
    def test_same_bucket_equal(self):
        a = CalendarPeriod.containing(_utc(2025, 3, 1), "monthly")
        b = CalendarPeriod.containing(_utc(2025, 3, 31, 23, 59), "monthly")
        assert a == b
        assert hash(a) == hash(b)

    def test_structural_order_matches_label_order(self):
        moments = [_utc(2024, 12, 31), _utc(2025, 1, 6), _utc(2023, 6, 15), _utc(2025, 11, 2)]
        for granularity in PeriodGranularity:
            periods = sorted(CalendarPeriod.containing(m, granularity) for m in moments)
            labels = [p.label for p in periods]
            assert labels == sorted(labels)

    def test_october_after_september(self):
        sep = CalendarPeriod.containing(_utc(2025, 9, 30), "monthly")
        oct_ = CalendarPeriod.containing(_utc(2025, 10, 1), "monthly")
        assert sep < oct_


class TestParseGranularity:
    def test_case_insensitive(self):
        assert parse_granularity("Weekly") is PeriodGranularity.WEEKLY

    def test_unknown(self):
        with pytest.raises(InputValidationError, match="daily, weekly, monthly, yearly"):
            parse_granularity("hourly")
