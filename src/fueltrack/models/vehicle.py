"""Vehicle model."""

from __future__ import annotations

from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import Field

from fueltrack.models._base import FuelTrackBaseModel


class TripType(StrEnum):
    """Driving conditions a vehicle's stated consumption applies to."""

    CITY = "City"
    HIGHWAY = "Highway"
    MIXED = "Mixed"


class Vehicle(FuelTrackBaseModel):
    """A vehicle in the garage.

    Consumption figures are the manufacturer-stated rates in L/100km;
    ``0.0`` means "not provided".
    """

    id: UUID = Field(default_factory=uuid4)
    """Opaque identifier, generated at creation."""
    name: str = ""
    """Display name (e.g. ``"My Civic"``)."""
    make: str = ""
    """Manufacturer (e.g. ``"Honda"``)."""
    model: str = ""
    """Model (e.g. ``"Civic"``)."""
    year: str = ""
    """Manufacturing year, free-form."""
    consumption_city: float = Field(default=0.0, ge=0.0)
    """City driving consumption (L/100km)."""
    consumption_highway: float = Field(default=0.0, ge=0.0)
    """Highway driving consumption (L/100km)."""
    consumption_mixed: float = Field(default=0.0, ge=0.0)
    """Mixed driving consumption (L/100km)."""

    @property
    def average_consumption(self) -> float:
        """Mixed consumption if set, else the mean of city and highway."""
        if self.consumption_mixed > 0:
            return self.consumption_mixed
        return (self.consumption_city + self.consumption_highway) / 2

    def consumption_for(self, trip_type: TripType) -> float:
        """Stated consumption for *trip_type*."""
        if trip_type == TripType.CITY:
            return self.consumption_city
        if trip_type == TripType.HIGHWAY:
            return self.consumption_highway
        return self.consumption_mixed
