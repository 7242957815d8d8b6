"""Flight offers and flight search request/response models.

Flights come from the provider fixture (opaque data source). Only the
snapshot embedded in a ``Booking`` is ever persisted.
"""

from datetime import date, datetime, timezone
from typing import Self

from pydantic import Field, field_validator, model_validator

from greentrip.contracts.common import FirestoreModel

IATA_PATTERN = r"^[A-Z]{3}$"


class Flight(FirestoreModel):
    """A scheduled flight offered by the provider."""

    id: str
    airline: str
    flight_number: str
    from_: str = Field(..., alias="from", pattern=IATA_PATTERN)
    to: str = Field(..., pattern=IATA_PATTERN)
    departure_time: str = Field(..., description="Local time, HH:MM")
    arrival_time: str = Field(..., description="Local time, HH:MM")
    duration: str
    price: float = Field(..., ge=0)
    seats_available: int = Field(..., ge=0)
    aircraft: str
    carbon_footprint: float = Field(..., ge=0, description="Provider eco score input")
    eco_rating: float = Field(..., ge=0, le=5)

    # Populated on search results only
    departure_date: date | None = Field(default=None, alias="date")
    total_price: float | None = Field(default=None, ge=0)


class FlightSearchRequest(FirestoreModel):
    """Search criteria for ``POST /flights/search``."""

    from_: str = Field(..., alias="from", pattern=IATA_PATTERN)
    to: str = Field(..., pattern=IATA_PATTERN)
    departure_date: date = Field(..., alias="date")
    passengers: int = Field(default=1, ge=1, le=10)

    @field_validator("departure_date")
    @classmethod
    def not_in_past(cls, v: date) -> date:
        if v < datetime.now(tz=timezone.utc).date():
            raise ValueError("Flight date must be today or in the future")
        return v

    @model_validator(mode="after")
    def distinct_airports(self) -> Self:
        if self.from_ == self.to:
            raise ValueError("Origin and destination airports must be different")
        return self


class FlightSearchResult(FirestoreModel):
    """Response body of a flight search."""

    flights: list[Flight] = Field(default_factory=list)
    search_criteria: FlightSearchRequest
    total_count: int = Field(..., ge=0)
    search_timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
