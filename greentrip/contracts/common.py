"""Base classes and shared types for GreenTrip contracts.

Unit conventions (all contracts and API responses):
- **Distances**: kilometers (km) — suffix ``_km``
- **Emissions**: kilograms of CO2 (kg) — suffix ``_kg``, rounded to 2 decimals
- **Prices**: USD, plain floats
- **Datetimes**: always UTC, ISO 8601 in serialized form
- **Dates**: ``YYYY-MM-DD``
- **Coordinates**: WGS84 decimal degrees

Legacy wire names (``total_emissions``, ``booking_count``, ``from``/``to``)
are kept where existing API consumers rely on them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict (datetimes as ISO 8601).
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class GeoPoint(BaseModel):
    """WGS84 geographic coordinate."""

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)
