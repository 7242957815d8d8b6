"""Emissions calculation and reporting models.

Calculated (never persisted)
----------------------------
- ``EmissionEstimate`` — result of a one-off route calculation
- ``UserEmissionsSummary`` / ``PeriodSummary`` — report payloads, cached for
  a short TTL and otherwise rebuilt on demand

Read-only inputs
----------------
- ``BookingEmissionEntry`` — projection of a persisted ``Booking`` handed to
  the aggregator by the booking history provider
"""

from datetime import date, datetime, timezone
from typing import Self

from pydantic import Field, model_validator

from greentrip.contracts.common import FirestoreModel
from greentrip.contracts.enums import PeriodGranularity, TravelClass
from greentrip.contracts.flight import IATA_PATTERN


class EmissionCalculationRequest(FirestoreModel):
    """Body of ``POST /emissions/calculate``.

    ``class`` is kept as a free string so that unknown values reach the
    emission model and produce its error listing the valid classes.
    """

    from_: str = Field(..., alias="from", min_length=3, max_length=3, pattern=r"^[A-Za-z]{3}$")
    to: str = Field(..., min_length=3, max_length=3, pattern=r"^[A-Za-z]{3}$")
    travel_class: str = Field(..., alias="class", min_length=1)
    passengers: int = Field(..., ge=1, le=1000)

    @model_validator(mode="after")
    def normalize_codes(self) -> Self:
        self.from_ = self.from_.upper()
        self.to = self.to.upper()
        if self.from_ == self.to:
            raise ValueError("Origin and destination airports must be different")
        return self


class EmissionEstimate(FirestoreModel):
    """Distance and emissions for one trip."""

    travel_class: TravelClass = Field(..., alias="class")
    passengers: int = Field(..., ge=1, le=1000)
    distance_km: float = Field(..., ge=0)
    emissions_kg: float = Field(..., ge=0)


class RouteInfo(FirestoreModel):
    """Display-only route details attached to a report entry."""

    from_: str = Field(..., alias="from", pattern=IATA_PATTERN)
    to: str = Field(..., pattern=IATA_PATTERN)
    airline: str | None = None
    departure_date: date | None = Field(default=None, alias="date")


class BookingEmissionEntry(FirestoreModel):
    """One booking's frozen emissions, as fed to the aggregator.

    Serialized inside a period as ``{"id", "emissions", "status", "flight",
    "created_at"}``; ``user_id`` stays internal.
    """

    booking_id: str = Field(..., alias="id")
    user_id: str | None = Field(default=None, exclude=True)
    emissions_kg: float = Field(..., ge=0, alias="emissions")
    status: str
    created_at: datetime
    route: RouteInfo = Field(..., alias="flight")


class DateRange(FirestoreModel):
    """Inclusive calendar-date window for a report."""

    start: date
    end: date

    def contains(self, moment: datetime) -> bool:
        """True when the UTC calendar date of *moment* is within the window."""
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return self.start <= moment.date() <= self.end


class PeriodSummary(FirestoreModel):
    """Totals for a single calendar period."""

    period: str = Field(..., description="Period label, e.g. '2025-03' or '2025-W11'")
    total_emissions: float = Field(..., ge=0)
    booking_count: int = Field(..., ge=0)
    average_emissions_per_booking: float = Field(..., ge=0)
    bookings: list[BookingEmissionEntry] = Field(default_factory=list)


class UserEmissionsSummary(FirestoreModel):
    """A user's emissions report for one period granularity.

    ``generated_at`` is the time the report was computed. A cached copy keeps
    its original timestamp.
    """

    user_id: str
    user_name: str | None = None
    period_type: PeriodGranularity
    date_range: DateRange | None = None
    total_emissions: float = Field(..., ge=0)
    total_bookings: int = Field(..., ge=0)
    periods: list[PeriodSummary] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
