"""Passenger CO2 emissions model for a single flight.

emissions = distance_km x base_rate x class_multiplier x passengers

- Short haul (< 1500 km): 0.255 kg CO2 / passenger / km
- Long haul (>= 1500 km): 0.180 kg CO2 / passenger / km

Short flights burn a larger share of their fuel in take-off and climb,
hence the higher per-km rate. Results are rounded to 2 decimals,
half away from zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from greentrip.contracts.common import GeoPoint
from greentrip.contracts.emissions import EmissionEstimate
from greentrip.contracts.enums import TravelClass
from greentrip.services.emissions.geo import distance_km
from greentrip.services.errors import InputValidationError

SHORT_HAUL_THRESHOLD_KM = 1500.0
BASE_RATE_SHORT_HAUL = 0.255  # kg CO2 / passenger / km
BASE_RATE_LONG_HAUL = 0.180  # kg CO2 / passenger / km

MIN_PASSENGERS = 1
MAX_PASSENGERS = 1000

# Ordered: also the order of get_available_classes()
CLASS_MULTIPLIERS: dict[TravelClass, float] = {
    TravelClass.ECONOMY: 1.0,
    TravelClass.PREMIUM_ECONOMY: 1.2,
    TravelClass.BUSINESS: 1.5,
    TravelClass.FIRST: 2.0,
}

_CENT = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to 2 decimals, half away from zero.

    The float is first read at 15 significant digits, so binary noise on a
    decimal midpoint is discarded: 0.255 -> 0.26, and 5 km economy for 3
    passengers (3.825, computed a hair below) -> 3.83.
    """
    return float(Decimal(f"{value:.15g}").quantize(_CENT, rounding=ROUND_HALF_UP))


def parse_travel_class(travel_class: str | TravelClass) -> TravelClass:
    """Resolve a travel class, case-insensitively."""
    if isinstance(travel_class, TravelClass):
        return travel_class
    try:
        return TravelClass(str(travel_class).strip().lower())
    except ValueError:
        valid = get_available_classes()
        raise InputValidationError(
            f"Invalid travel class. Must be one of: {', '.join(valid)}",
            travel_class=travel_class,
            valid_classes=valid,
        ) from None


def get_class_multiplier(travel_class: str | TravelClass) -> float:
    return CLASS_MULTIPLIERS[parse_travel_class(travel_class)]


def get_available_classes() -> list[str]:
    return [c.value for c in CLASS_MULTIPLIERS]


def base_rate(distance: float) -> float:
    """Per-passenger, per-km rate for the distance band."""
    if distance < SHORT_HAUL_THRESHOLD_KM:
        return BASE_RATE_SHORT_HAUL
    return BASE_RATE_LONG_HAUL


def _validate(distance: float, travel_class: str | TravelClass, passengers: int) -> TravelClass:
    if distance <= 0:
        raise InputValidationError("Distance must be greater than 0", distance_km=distance)
    if passengers < MIN_PASSENGERS:
        raise InputValidationError(
            "Number of passengers must be greater than 0", passengers=passengers
        )
    if passengers > MAX_PASSENGERS:
        raise InputValidationError(
            f"Number of passengers cannot exceed {MAX_PASSENGERS}", passengers=passengers
        )
    return parse_travel_class(travel_class)


def calculate_emissions(
    distance: float, travel_class: str | TravelClass, passengers: int = 1
) -> float:
    """Total kg CO2 for *passengers* flying *distance* km in *travel_class*."""
    cls = _validate(distance, travel_class, passengers)
    per_passenger = distance * base_rate(distance) * CLASS_MULTIPLIERS[cls]
    return round_half_up(per_passenger * passengers)


def calculate_short_haul_emissions(
    distance: float, travel_class: str | TravelClass, passengers: int = 1
) -> float:
    if distance >= SHORT_HAUL_THRESHOLD_KM:
        raise InputValidationError(
            f"Distance must be less than {SHORT_HAUL_THRESHOLD_KM:g}km for short haul flights",
            distance_km=distance,
        )
    return calculate_emissions(distance, travel_class, passengers)


def calculate_long_haul_emissions(
    distance: float, travel_class: str | TravelClass, passengers: int = 1
) -> float:
    if distance < SHORT_HAUL_THRESHOLD_KM:
        raise InputValidationError(
            f"Distance must be at least {SHORT_HAUL_THRESHOLD_KM:g}km for long haul flights",
            distance_km=distance,
        )
    return calculate_emissions(distance, travel_class, passengers)


def calculate_round_trip_emissions(
    distance: float, travel_class: str | TravelClass, passengers: int = 1
) -> float:
    """Outbound plus return on the same route and class."""
    return round_half_up(calculate_emissions(distance, travel_class, passengers) * 2)


def estimate_route_emissions(
    origin: GeoPoint,
    destination: GeoPoint,
    travel_class: str | TravelClass,
    passengers: int = 1,
) -> EmissionEstimate:
    """Distance and emissions between two coordinates.

    This is the figure frozen on a booking at creation time.
    """
    distance = distance_km(origin, destination)
    emissions = calculate_emissions(distance, travel_class, passengers)
    return EmissionEstimate(
        travel_class=parse_travel_class(travel_class),
        passengers=passengers,
        distance_km=round_half_up(distance),
        emissions_kg=emissions,
    )
