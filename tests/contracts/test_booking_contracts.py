"""Tests for booking and flight search contracts."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from greentrip.contracts.booking import Booking, BookingRequest, FlightSnapshot, Passenger
from greentrip.contracts.flight import FlightSearchRequest

FUTURE = date.today() + timedelta(days=30)


def _passenger(**overrides) -> dict:
    data = {
        "first_name": "Grace",
        "last_name": "Hopper",
        "date_of_birth": "1980-12-09",
        "passport_number": "US1234",
    }
    data.update(overrides)
    return data


class TestFlightSearchRequest:
    def test_wire_aliases(self):
        req = FlightSearchRequest.model_validate(
            {"from": "JFK", "to": "LAX", "date": FUTURE.isoformat()}
        )
        assert req.from_ == "JFK"
        assert req.departure_date == FUTURE
        assert req.passengers == 1

    def test_past_date_rejected(self):
        with pytest.raises(ValidationError, match="today or in the future"):
            FlightSearchRequest(from_="JFK", to="LAX", departure_date=date(2000, 1, 1))

    def test_same_airports_rejected(self):
        with pytest.raises(ValidationError, match="must be different"):
            FlightSearchRequest(from_="JFK", to="JFK", departure_date=FUTURE)

    @pytest.mark.parametrize("code", ["jfk", "JF", "JFKX", "J1K"])
    def test_bad_iata(self, code):
        with pytest.raises(ValidationError):
            FlightSearchRequest(from_=code, to="LAX", departure_date=FUTURE)

    @pytest.mark.parametrize("passengers", [0, 11])
    def test_passenger_bounds(self, passengers):
        with pytest.raises(ValidationError):
            FlightSearchRequest(from_="JFK", to="LAX", departure_date=FUTURE, passengers=passengers)


class TestBookingRequest:
    def _payload(self, **overrides) -> dict:
        data = {
            "flight_id": "FL001",
            "date": FUTURE.isoformat(),
            "passengers": 1,
            "passenger_details": [_passenger()],
            "contact_email": "grace@example.com",
        }
        data.update(overrides)
        return data

    def test_defaults_to_economy(self):
        req = BookingRequest.model_validate(self._payload())
        assert req.travel_class == "economy"

    def test_class_alias(self):
        req = BookingRequest.model_validate(self._payload(**{"class": "business"}))
        assert req.travel_class == "business"

    def test_unknown_class(self):
        with pytest.raises(ValidationError):
            BookingRequest.model_validate(self._payload(**{"class": "cargo"}))

    def test_passenger_count_mismatch(self):
        with pytest.raises(ValidationError, match="must match"):
            BookingRequest.model_validate(self._payload(passengers=2))

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            BookingRequest.model_validate(self._payload(contact_email="not-an-email"))

    def test_future_birth_date(self):
        details = [_passenger(date_of_birth=FUTURE.isoformat())]
        with pytest.raises(ValidationError, match="Date of birth"):
            BookingRequest.model_validate(self._payload(passenger_details=details))


class TestBooking:
    def _booking(self, **overrides) -> Booking:
        data = {
            "booking_reference": "GT1A2B3C4D",
            "flight": FlightSnapshot(
                flight_id="FL001",
                airline="Green Airlines",
                flight_number="GA101",
                from_="JFK",
                to="LAX",
                departure_date=FUTURE,
                price=299.99,
            ),
            "passengers": 1,
            "passenger_details": [Passenger.model_validate(_passenger())],
            "contact_email": "grace@example.com",
            "total_price": 299.99,
            "distance_km": 3974.2,
            "emissions_kg": 715.36,
        }
        data.update(overrides)
        return Booking(**data)

    def test_round_trip(self):
        booking = self._booking()
        restored = Booking.from_firestore(booking.to_firestore())
        assert restored == booking

    def test_reference_format(self):
        with pytest.raises(ValidationError):
            self._booking(booking_reference="GT1a2b3c4d")

    def test_zero_distance_rejected(self):
        with pytest.raises(ValidationError):
            self._booking(distance_km=0)

    def test_not_cancelled_by_default(self):
        booking = self._booking()
        assert booking.status == "confirmed"
        assert not booking.is_cancelled

    def test_cancelled_status(self):
        assert self._booking(status="cancelled").is_cancelled
