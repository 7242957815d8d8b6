"""Flight search and booking.

Booking freezes the trip's emissions: the distance between the two
airports and the resulting kg CO2 are computed once here and stored on
the booking document.
"""

from __future__ import annotations

import hashlib
import logging
import uuid

from greentrip.contracts.airport import Airport
from greentrip.contracts.booking import Booking, BookingRequest, FlightSnapshot
from greentrip.contracts.emissions import EmissionEstimate
from greentrip.contracts.enums import BookingStatus, TravelClass
from greentrip.contracts.flight import Flight, FlightSearchRequest, FlightSearchResult
from greentrip.persistence.errors import CacheStoreError
from greentrip.persistence.repositories.booking_repo import BookingRepository
from greentrip.services.emissions.model import estimate_route_emissions
from greentrip.services.emissions.reporting import EmissionsReportingService
from greentrip.services.errors import InputValidationError, NotFoundError
from greentrip.services.flight_provider import FlightProvider

logger = logging.getLogger(__name__)


def generate_booking_reference() -> str:
    """``GT`` followed by 8 uppercase hex characters."""
    return "GT" + hashlib.md5(uuid.uuid4().bytes).hexdigest()[:8].upper()


class FlightService:
    def __init__(
        self,
        provider: FlightProvider,
        bookings: BookingRepository,
        reports: EmissionsReportingService | None = None,
    ):
        self._provider = provider
        self._bookings = bookings
        self._reports = reports

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    def search_flights(self, criteria: FlightSearchRequest) -> FlightSearchResult:
        flights = self._provider.search_flights(
            criteria.from_, criteria.to, criteria.departure_date, criteria.passengers
        )
        return FlightSearchResult(
            flights=flights,
            search_criteria=criteria,
            total_count=len(flights),
        )

    def get_flight(self, flight_id: str) -> Flight | None:
        return self._provider.get_flight(flight_id)

    def get_airports(self) -> list[Airport]:
        return self._provider.get_airports()

    # ------------------------------------------------------------------
    # Emissions
    # ------------------------------------------------------------------

    def resolve_airports(self, origin: str, destination: str) -> tuple[Airport, Airport]:
        """Look up both ends of a trip. Fails if either code is unknown."""
        dep = self._provider.get_airport(origin)
        arr = self._provider.get_airport(destination)
        if dep is None or arr is None:
            raise NotFoundError(
                "Unknown IATA code(s).", origin=origin.upper(), destination=destination.upper()
            )
        return dep, arr

    def estimate_emissions(
        self,
        origin: str,
        destination: str,
        travel_class: str | TravelClass,
        passengers: int = 1,
    ) -> EmissionEstimate:
        dep, arr = self.resolve_airports(origin, destination)
        return estimate_route_emissions(dep.location, arr.location, travel_class, passengers)

    # ------------------------------------------------------------------
    # Booking
    # ------------------------------------------------------------------

    async def book_flight(self, user_id: str, request: BookingRequest) -> Booking:
        """Create a confirmed booking and return it with its document ID."""
        flight = self._provider.get_flight(request.flight_id)
        if flight is None:
            raise NotFoundError("Flight not found", flight_id=request.flight_id)
        if flight.seats_available < request.passengers:
            raise InputValidationError(
                "Insufficient seats available for this flight",
                flight_id=flight.id,
                seats_available=flight.seats_available,
            )

        estimate = self.estimate_emissions(
            flight.from_, flight.to, request.travel_class, request.passengers
        )

        booking = Booking(
            booking_reference=generate_booking_reference(),
            flight=FlightSnapshot.from_flight(flight, request.departure_date),
            travel_class=request.travel_class,
            passengers=request.passengers,
            passenger_details=request.passenger_details,
            contact_email=request.contact_email,
            contact_phone=request.contact_phone,
            total_price=round(flight.price * request.passengers, 2),
            distance_km=estimate.distance_km,
            emissions_kg=estimate.emissions_kg,
            status=BookingStatus.CONFIRMED,
        )
        booking.id = await self._bookings.create(user_id, booking)
        logger.info(
            "Booked %s for user %s: %s kg CO2", booking.booking_reference, user_id, booking.emissions_kg
        )
        self._invalidate_reports(user_id)
        return booking

    async def cancel_booking(self, user_id: str, booking_id: str) -> Booking:
        """Soft-delete a booking. Raises ``DocumentNotFoundError`` if absent."""
        booking = await self._bookings.cancel(user_id, booking_id)
        logger.info("Cancelled booking %s for user %s", booking_id, user_id)
        self._invalidate_reports(user_id)
        return booking

    def _invalidate_reports(self, user_id: str) -> None:
        if self._reports is None:
            return
        try:
            self._reports.clear_user_cache(user_id)
        except CacheStoreError as exc:
            logger.warning("Report cache not cleared for user %s: %s", user_id, exc)
