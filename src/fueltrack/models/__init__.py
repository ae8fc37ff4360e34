"""Data models for fueltrack records and statistics."""

from fueltrack.models._base import FuelTrackBaseModel, LocalizedDatetime, ensure_tz_aware
from fueltrack.models.fill_up import FillUp
from fueltrack.models.statistics import ConsumptionPoint, FuelStatistics, MonthlyCost, PricePoint
from fueltrack.models.vehicle import TripType, Vehicle

__all__ = [
    "ConsumptionPoint",
    "FillUp",
    "FuelStatistics",
    "FuelTrackBaseModel",
    "LocalizedDatetime",
    "MonthlyCost",
    "PricePoint",
    "TripType",
    "Vehicle",
    "ensure_tz_aware",
]
