"""Great-circle distance on a spherical Earth (Haversine formula)."""

from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from pydantic import ValidationError

from greentrip.contracts.common import GeoPoint
from greentrip.services.errors import InputValidationError

EARTH_RADIUS_KM = 6371.0


def to_geo_point(latitude: float, longitude: float) -> GeoPoint:
    """Build a ``GeoPoint`` from raw degrees.

    Out-of-range values raise ``InputValidationError`` rather than the
    pydantic ``ValidationError`` of the model itself.
    """
    try:
        return GeoPoint(latitude=latitude, longitude=longitude)
    except ValidationError as exc:
        raise InputValidationError(
            "Latitude must be within [-90, 90] and longitude within [-180, 180]",
            latitude=latitude,
            longitude=longitude,
        ) from exc


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in km between two points given in decimal degrees."""
    return distance_km(to_geo_point(lat1, lon1), to_geo_point(lat2, lon2))


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in km between two coordinates.

    Symmetric, and exactly 0.0 when both points are identical.
    """
    lat1, lon1, lat2, lon2 = map(radians, [a.latitude, a.longitude, b.latitude, b.longitude])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))
