"""Booking — a confirmed (or cancelled) reservation on a provider flight.

Stored at: ``/users/{user_id}/bookings/{booking_id}``

The emissions figure is computed once when the booking is created and is
never recalculated afterwards. Cancelling a booking is a soft delete:
``status`` becomes ``cancelled`` and ``deleted_at`` is stamped, but the
document stays so emissions reports keep counting it.
"""

from datetime import date, datetime, timezone
from typing import Self

from pydantic import EmailStr, Field, model_validator

from greentrip.contracts.common import FirestoreModel
from greentrip.contracts.enums import BookingStatus, TravelClass
from greentrip.contracts.flight import IATA_PATTERN, Flight


class Passenger(FirestoreModel):
    """A traveller listed on a booking."""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    passport_number: str = Field(..., min_length=1, max_length=20)

    @model_validator(mode="after")
    def born_in_past(self) -> Self:
        if self.date_of_birth >= datetime.now(tz=timezone.utc).date():
            raise ValueError("Date of birth must be in the past")
        return self


class FlightSnapshot(FirestoreModel):
    """Frozen copy of the provider flight at booking time."""

    flight_id: str
    airline: str
    flight_number: str
    from_: str = Field(..., alias="from", pattern=IATA_PATTERN)
    to: str = Field(..., pattern=IATA_PATTERN)
    departure_date: date = Field(..., alias="date")
    departure_time: str | None = None
    arrival_time: str | None = None
    aircraft: str | None = None
    price: float = Field(..., ge=0)

    @classmethod
    def from_flight(cls, flight: Flight, departure_date: date) -> "FlightSnapshot":
        return cls(
            flight_id=flight.id,
            airline=flight.airline,
            flight_number=flight.flight_number,
            from_=flight.from_,
            to=flight.to,
            departure_date=departure_date,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            aircraft=flight.aircraft,
            price=flight.price,
        )


class BookingRequest(FirestoreModel):
    """Body of ``POST /flights/book``."""

    flight_id: str = Field(..., min_length=1)
    departure_date: date = Field(..., alias="date")
    travel_class: TravelClass = Field(default=TravelClass.ECONOMY, alias="class")
    passengers: int = Field(..., ge=1, le=10)
    passenger_details: list[Passenger] = Field(..., min_length=1)
    contact_email: EmailStr
    contact_phone: str | None = Field(default=None, max_length=20)

    @model_validator(mode="after")
    def passenger_count_matches(self) -> Self:
        if len(self.passenger_details) != self.passengers:
            raise ValueError(
                "Number of passengers must match the number of passenger details provided"
            )
        return self


class Booking(FirestoreModel):
    """A user's booking.

    **Persisted fields**: everything below.

    **Frozen at creation**: ``flight``, ``distance_km``, ``emissions_kg``.
    """

    id: str | None = None
    booking_reference: str = Field(..., pattern=r"^GT[0-9A-F]{8}$")
    flight: FlightSnapshot
    travel_class: TravelClass = Field(default=TravelClass.ECONOMY, alias="class")
    passengers: int = Field(..., ge=1, le=1000)
    passenger_details: list[Passenger] = Field(default_factory=list)
    contact_email: str
    contact_phone: str | None = None
    total_price: float = Field(..., ge=0)

    distance_km: float = Field(..., gt=0)
    emissions_kg: float = Field(..., ge=0)

    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_cancelled(self) -> bool:
        return self.deleted_at is not None or self.status == BookingStatus.CANCELLED
