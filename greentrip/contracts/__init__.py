"""GreenTrip data contracts — Pydantic v2 models for flight booking and emissions.

Data authority
--------------

**Firestore** (source of truth for user-owned data):
- ``Booking`` — ``/users/{uid}/bookings/{id}`` (cancelled bookings are
  soft-deleted and remain readable for emissions reporting)

**Provider fixture** (static, read-only reference data):
- ``Flight`` — flight offers
- ``Airport`` — IATA code → name and coordinates

**Report cache** (diskcache, 120 s TTL):
- ``UserEmissionsSummary`` — keyed by user, period and optional date range

Calculated (never persisted)
----------------------------
- ``EmissionEstimate`` — distance and emissions of a one-off trip
- ``FlightSearchResult`` — search response DTO
"""

from greentrip.contracts.enums import BookingStatus, PeriodGranularity, TravelClass
from greentrip.contracts.common import FirestoreModel, GeoPoint
from greentrip.contracts.result import ServiceError, ServiceResult
from greentrip.contracts.airport import Airport
from greentrip.contracts.flight import Flight, FlightSearchRequest, FlightSearchResult
from greentrip.contracts.booking import Booking, BookingRequest, FlightSnapshot, Passenger
from greentrip.contracts.emissions import (
    BookingEmissionEntry,
    DateRange,
    EmissionCalculationRequest,
    EmissionEstimate,
    PeriodSummary,
    RouteInfo,
    UserEmissionsSummary,
)

__all__ = [
    # Enums
    "BookingStatus",
    "PeriodGranularity",
    "TravelClass",
    # Common
    "FirestoreModel",
    "GeoPoint",
    # Result
    "ServiceError",
    "ServiceResult",
    # Reference data
    "Airport",
    "Flight",
    "FlightSearchRequest",
    "FlightSearchResult",
    # Bookings
    "Booking",
    "BookingRequest",
    "FlightSnapshot",
    "Passenger",
    # Emissions
    "BookingEmissionEntry",
    "DateRange",
    "EmissionCalculationRequest",
    "EmissionEstimate",
    "PeriodSummary",
    "RouteInfo",
    "UserEmissionsSummary",
]
