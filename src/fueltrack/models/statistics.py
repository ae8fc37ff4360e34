"""Result types produced by the statistics functions."""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ConsumptionPoint(NamedTuple):
    """Real consumption (L/100km) measured at a full-tank fill-up."""

    date: datetime
    value: float


class PricePoint(NamedTuple):
    """Price per liter paid at a fill-up."""

    date: datetime
    price_per_liter: float


class MonthlyCost(NamedTuple):
    """Total spent in one ``"YYYY-MM"`` calendar month."""

    month: str
    total: float


class FuelStatistics(BaseModel):
    """All aggregates for a fill-up collection, optionally for one vehicle.

    Parameters
    ----------
    vehicle_id : UUID or None
        Vehicle the figures are scoped to, ``None`` for every vehicle.
    fill_up_count : int
        Number of fill-ups the figures were derived from.
    total_distance : float
        Odometer span in km.
    total_fuel : float
        Liters added.
    total_cost : float
        Money spent.
    average_consumption : float
        L/100km over the odometer span.
    real_consumption_history : list of ConsumptionPoint
        Per fill-up consumption between consecutive readings.
    monthly_costs : list of MonthlyCost
        Spend per calendar month, ascending.
    price_history : list of PricePoint
        Price per liter over time, ascending.
    """

    model_config = ConfigDict(frozen=True)

    vehicle_id: UUID | None = None
    fill_up_count: int = 0
    total_distance: float = 0.0
    total_fuel: float = 0.0
    total_cost: float = 0.0
    average_consumption: float = 0.0
    real_consumption_history: list[ConsumptionPoint] = Field(default_factory=list)
    monthly_costs: list[MonthlyCost] = Field(default_factory=list)
    price_history: list[PricePoint] = Field(default_factory=list)

    @property
    def cost_per_km(self) -> float:
        """Money spent per km driven, ``0.0`` without a distance."""
        if self.total_distance <= 0:
            return 0.0
        return self.total_cost / self.total_distance
