"""Fill-up record model."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import Field, model_validator

from fueltrack._constants import CONSUMPTION_DISTANCE_BASE
from fueltrack.models._base import FuelTrackBaseModel, LocalizedDatetime, local_now


class FillUp(FuelTrackBaseModel):
    """One fueling event.

    ``total_cost`` is fixed when the record is built: it is computed as
    ``volume * price_per_liter`` unless a value is supplied (as it is when
    a stored record is decoded), and never recomputed afterwards.

    ``real_consumption`` is an optional precomputed value carried with the
    record. The statistics functions never read it; they derive
    consumption from consecutive odometer readings instead.
    """

    id: UUID = Field(default_factory=uuid4)
    """Opaque identifier, generated at creation."""
    vehicle_id: UUID
    """Vehicle this fill-up belongs to (not enforced to exist)."""
    date: LocalizedDatetime = Field(default_factory=local_now)
    """When the fill-up happened."""
    odometer: float
    """Odometer reading in km."""
    volume: float
    """Fuel added in liters."""
    price_per_liter: float
    """Price paid per liter."""
    total_cost: float = 0.0
    """``volume * price_per_liter`` at construction time."""
    is_full_tank: bool = True
    """Whether the tank was filled completely."""
    real_consumption: float = 0.0
    """Precomputed consumption in L/100km, ``0.0`` when unknown."""

    @model_validator(mode="before")
    @classmethod
    def _fill_total_cost(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        if "total_cost" in values or "totalCost" in values:
            return values
        volume = values.get("volume")
        price = values.get("price_per_liter", values.get("pricePerLiter"))
        try:
            total = float(volume) * float(price)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            # Leave it to field validation to report the bad input.
            return values
        merged = dict(values)
        merged["total_cost"] = total
        return merged

    @staticmethod
    def calculate_real_consumption(current: FillUp, previous: FillUp | None) -> float:
        """Consumption between *previous* and *current* in L/100km.

        Returns ``0.0`` when there is no previous fill-up, the odometer did
        not increase, or *current* was not a full tank.
        """
        if previous is None or current.odometer <= previous.odometer or not current.is_full_tank:
            return 0.0
        distance = current.odometer - previous.odometer
        return current.volume / distance * CONSUMPTION_DISTANCE_BASE
