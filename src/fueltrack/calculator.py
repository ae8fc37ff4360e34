"""Trip fuel and cost estimates from stated consumption rates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fueltrack._constants import CONSUMPTION_DISTANCE_BASE
from fueltrack.models.vehicle import TripType, Vehicle


class TripEstimate(BaseModel):
    """Fuel and money needed to drive *distance* at *consumption*.

    Parameters
    ----------
    distance : float
        Trip length in km.
    consumption : float
        Expected consumption in L/100km.
    fuel_price : float
        Price per liter.
    """

    model_config = ConfigDict(frozen=True)

    distance: float = 0.0
    consumption: float = 0.0
    fuel_price: float = 0.0

    @property
    def has_valid_inputs(self) -> bool:
        return self.distance > 0 and self.consumption > 0 and self.fuel_price > 0

    @property
    def fuel_needed(self) -> float:
        """Liters needed, ``0.0`` without a positive distance and consumption."""
        if self.distance <= 0 or self.consumption <= 0:
            return 0.0
        return self.distance * self.consumption / CONSUMPTION_DISTANCE_BASE

    @property
    def total_cost(self) -> float:
        return self.fuel_needed * self.fuel_price


def estimate_trip(
    distance: float,
    fuel_price: float,
    *,
    vehicle: Vehicle | None = None,
    trip_type: TripType = TripType.MIXED,
    consumption: float = 0.0,
) -> TripEstimate:
    """Estimate a trip.

    When *vehicle* is given its stated rate for *trip_type* is used and
    *consumption* is ignored.
    """
    if vehicle is not None:
        consumption = vehicle.consumption_for(trip_type)
    return TripEstimate(distance=distance, consumption=consumption, fuel_price=fuel_price)
