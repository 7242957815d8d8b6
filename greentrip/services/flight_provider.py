"""Flight provider — source of flight offers and airport coordinates.

``StaticFlightProvider`` serves a fixed in-process fixture. A live
provider only needs to implement the same three read methods.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Protocol

from greentrip.contracts.airport import Airport
from greentrip.contracts.flight import Flight

FLIGHTS: dict[str, dict[str, Any]] = {
    "FL001": {
        "id": "FL001",
        "airline": "Green Airlines",
        "flight_number": "GA101",
        "from": "JFK",
        "to": "LAX",
        "departure_time": "10:00",
        "arrival_time": "13:30",
        "duration": "5h 30m",
        "price": 299.99,
        "seats_available": 45,
        "aircraft": "Boeing 737",
        "carbon_footprint": 0.85,
        "eco_rating": 4.2,
    },
    "FL002": {
        "id": "FL002",
        "airline": "EcoJet",
        "flight_number": "EJ202",
        "from": "LAX",
        "to": "JFK",
        "departure_time": "14:15",
        "arrival_time": "22:45",
        "duration": "6h 30m",
        "price": 349.99,
        "seats_available": 32,
        "aircraft": "Airbus A320neo",
        "carbon_footprint": 0.72,
        "eco_rating": 4.5,
    },
    "FL003": {
        "id": "FL003",
        "airline": "Sustainable Airways",
        "flight_number": "SA303",
        "from": "ORD",
        "to": "SFO",
        "departure_time": "08:30",
        "arrival_time": "11:45",
        "duration": "4h 15m",
        "price": 199.99,
        "seats_available": 67,
        "aircraft": "Boeing 787 Dreamliner",
        "carbon_footprint": 0.68,
        "eco_rating": 4.8,
    },
    "FL004": {
        "id": "FL004",
        "airline": "Green Airlines",
        "flight_number": "GA404",
        "from": "SFO",
        "to": "ORD",
        "departure_time": "16:00",
        "arrival_time": "22:15",
        "duration": "4h 15m",
        "price": 249.99,
        "seats_available": 28,
        "aircraft": "Airbus A350",
        "carbon_footprint": 0.71,
        "eco_rating": 4.6,
    },
}

AIRPORTS: dict[str, dict[str, Any]] = {
    "JFK": {
        "code": "JFK",
        "name": "John F. Kennedy International Airport",
        "city": "New York",
        "country": "USA",
        "latitude": 40.6413,
        "longitude": -73.7781,
    },
    "LAX": {
        "code": "LAX",
        "name": "Los Angeles International Airport",
        "city": "Los Angeles",
        "country": "USA",
        "latitude": 33.9416,
        "longitude": -118.4085,
    },
    "ORD": {
        "code": "ORD",
        "name": "O'Hare International Airport",
        "city": "Chicago",
        "country": "USA",
        "latitude": 41.9742,
        "longitude": -87.9073,
    },
    "SFO": {
        "code": "SFO",
        "name": "San Francisco International Airport",
        "city": "San Francisco",
        "country": "USA",
        "latitude": 37.6213,
        "longitude": -122.3790,
    },
    "MIA": {
        "code": "MIA",
        "name": "Miami International Airport",
        "city": "Miami",
        "country": "USA",
        "latitude": 25.7959,
        "longitude": -80.2870,
    },
    "SEA": {
        "code": "SEA",
        "name": "Seattle-Tacoma International Airport",
        "city": "Seattle",
        "country": "USA",
        "latitude": 47.4502,
        "longitude": -122.3088,
    },
    "LHR": {
        "code": "LHR",
        "name": "Heathrow Airport",
        "city": "London",
        "country": "United Kingdom",
        "latitude": 51.4700,
        "longitude": -0.4543,
    },
    "CDG": {
        "code": "CDG",
        "name": "Paris Charles de Gaulle Airport",
        "city": "Paris",
        "country": "France",
        "latitude": 49.0097,
        "longitude": 2.5479,
    },
}


class FlightProvider(Protocol):
    def search_flights(
        self, origin: str, destination: str, departure_date: date, passengers: int = 1
    ) -> list[Flight]: ...

    def get_flight(self, flight_id: str) -> Flight | None: ...

    def get_airports(self) -> list[Airport]: ...

    def get_airport(self, code: str) -> Airport | None: ...


class StaticFlightProvider:
    """Provider backed by the in-module fixture."""

    def __init__(
        self,
        flights: dict[str, dict[str, Any]] | None = None,
        airports: dict[str, dict[str, Any]] | None = None,
    ):
        self._flights = {
            fid: Flight.model_validate(data) for fid, data in (flights or FLIGHTS).items()
        }
        self._airports = {
            code: Airport.model_validate(data) for code, data in (airports or AIRPORTS).items()
        }

    def search_flights(
        self, origin: str, destination: str, departure_date: date, passengers: int = 1
    ) -> list[Flight]:
        """Flights on the route with enough seats, cheapest first."""
        origin, destination = origin.upper(), destination.upper()
        matches = [
            f.model_copy(
                update={
                    "departure_date": departure_date,
                    "total_price": round(f.price * passengers, 2),
                }
            )
            for f in self._flights.values()
            if f.from_ == origin and f.to == destination and f.seats_available >= passengers
        ]
        return sorted(matches, key=lambda f: f.price)

    def get_flight(self, flight_id: str) -> Flight | None:
        return self._flights.get(flight_id)

    def get_airports(self) -> list[Airport]:
        return list(self._airports.values())

    def get_airport(self, code: str) -> Airport | None:
        return self._airports.get(code.upper())
