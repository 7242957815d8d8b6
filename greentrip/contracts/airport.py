"""Airport reference data served by the flight provider."""

from pydantic import Field

from greentrip.contracts.common import FirestoreModel, GeoPoint


class Airport(FirestoreModel):
    """An airport resolvable by its IATA code.

    Read model — comes from the provider fixture, never stored per-user.
    """

    code: str = Field(..., pattern=r"^[A-Z]{3}$", description="IATA code")
    name: str
    city: str
    country: str
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
