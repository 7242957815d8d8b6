"""Tests for the static flight provider fixture."""

from datetime import date

import pytest

from greentrip.services.flight_provider import AIRPORTS, FLIGHTS, StaticFlightProvider

TRAVEL_DATE = date(2030, 5, 17)


@pytest.fixture
def provider() -> StaticFlightProvider:
    return StaticFlightProvider()


class TestSearch:
    def test_matching_route(self, provider):
        flights = provider.search_flights("JFK", "LAX", TRAVEL_DATE)
        assert [f.id for f in flights] == ["FL001"]
        assert flights[0].departure_date == TRAVEL_DATE
        assert flights[0].total_price == 299.99

    def test_lowercase_codes(self, provider):
        assert [f.id for f in provider.search_flights("ord", "sfo", TRAVEL_DATE)] == ["FL003"]

    def test_total_price_scales_with_passengers(self, provider):
        flight = provider.search_flights("SFO", "ORD", TRAVEL_DATE, passengers=3)[0]
        assert flight.total_price == 749.97

    def test_not_enough_seats(self, provider):
        assert provider.search_flights("SFO", "ORD", TRAVEL_DATE, passengers=29) == []

    def test_unknown_route(self, provider):
        assert provider.search_flights("MIA", "SEA", TRAVEL_DATE) == []

    def test_sorted_by_price(self):
        extra = dict(FLIGHTS["FL001"], id="FL900", price=150.0)
        provider = StaticFlightProvider(flights={**FLIGHTS, "FL900": extra})
        flights = provider.search_flights("JFK", "LAX", TRAVEL_DATE)
        assert [f.id for f in flights] == ["FL900", "FL001"]

    def test_search_does_not_mutate_fixture(self, provider):
        provider.search_flights("JFK", "LAX", TRAVEL_DATE, passengers=2)
        assert provider.get_flight("FL001").total_price is None


class TestLookup:
    def test_get_flight(self, provider):
        flight = provider.get_flight("FL002")
        assert flight.airline == "EcoJet"
        assert flight.from_ == "LAX"

    def test_get_unknown_flight(self, provider):
        assert provider.get_flight("FL999") is None

    def test_airports(self, provider):
        codes = {a.code for a in provider.get_airports()}
        assert codes == set(AIRPORTS)

    def test_every_flight_endpoint_has_coordinates(self, provider):
        for flight in FLIGHTS.values():
            assert provider.get_airport(flight["from"]) is not None
            assert provider.get_airport(flight["to"]) is not None

    def test_get_airport_case_insensitive(self, provider):
        airport = provider.get_airport("lhr")
        assert airport.city == "London"
        assert airport.location.latitude == pytest.approx(51.47)

    def test_get_unknown_airport(self, provider):
        assert provider.get_airport("XXX") is None
