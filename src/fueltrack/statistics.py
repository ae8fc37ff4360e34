"""Consumption statistics over fill-up collections.

Every function here is pure: it reads the fill-ups it is given and returns
a fresh value. None of them raise for any input shape; empty and
single-record collections produce zero or empty results, and negative or
out-of-order values pass through unchanged.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import tzinfo
from operator import attrgetter
from uuid import UUID

from fueltrack._constants import CONSUMPTION_DISTANCE_BASE, month_key
from fueltrack.models.fill_up import FillUp
from fueltrack.models.statistics import ConsumptionPoint, FuelStatistics, MonthlyCost, PricePoint

_by_date = attrgetter("date")
_by_odometer = attrgetter("odometer")


def for_vehicle(fill_ups: Iterable[FillUp], vehicle_id: UUID) -> list[FillUp]:
    """Return the fill-ups belonging to *vehicle_id*, in input order."""
    return [fill_up for fill_up in fill_ups if fill_up.vehicle_id == vehicle_id]


def total_distance(fill_ups: Iterable[FillUp]) -> float:
    """Span between the lowest and highest odometer reading.

    Uses the range of readings regardless of the fill-up dates, so a
    mis-dated entry still counts towards the span.
    """
    ordered = sorted(fill_ups, key=_by_odometer)
    if len(ordered) < 2:
        return 0.0
    return ordered[-1].odometer - ordered[0].odometer


def total_fuel(fill_ups: Iterable[FillUp]) -> float:
    return sum((fill_up.volume for fill_up in fill_ups), 0.0)


def total_cost(fill_ups: Iterable[FillUp]) -> float:
    """Sum of the costs stored on each fill-up."""
    return sum((fill_up.total_cost for fill_up in fill_ups), 0.0)


def average_consumption(fill_ups: Iterable[FillUp]) -> float:
    """Liters per 100 km over the odometer span, ``0.0`` without a span."""
    records = list(fill_ups)
    distance = total_distance(records)
    if distance <= 0:
        return 0.0
    return total_fuel(records) / distance * CONSUMPTION_DISTANCE_BASE


def real_consumption_history(fill_ups: Iterable[FillUp]) -> list[ConsumptionPoint]:
    """Consumption measured at each full-tank fill-up, oldest first.

    Fill-ups are ordered by date and compared with their direct
    predecessor. A point is produced for a fill-up only when it is a full
    tank and its odometer is above the predecessor's. Skipped fill-ups
    still serve as the predecessor of the next one.
    """
    ordered = sorted(fill_ups, key=_by_date)
    history: list[ConsumptionPoint] = []
    for previous, current in zip(ordered, ordered[1:]):
        if not current.is_full_tank or current.odometer <= previous.odometer:
            continue
        consumption = FillUp.calculate_real_consumption(current, previous)
        if consumption > 0:
            history.append(ConsumptionPoint(current.date, consumption))
    return history


def monthly_costs(fill_ups: Iterable[FillUp], tz: tzinfo | None = None) -> list[MonthlyCost]:
    """Total cost per ``"YYYY-MM"`` month, sorted by month.

    Months are taken from each date converted to *tz*, or to the system
    local time zone when *tz* is ``None``.
    """
    totals: dict[str, float] = defaultdict(float)
    for fill_up in fill_ups:
        local = fill_up.date.astimezone(tz)
        totals[month_key(local.year, local.month)] += fill_up.total_cost
    return [MonthlyCost(month, total) for month, total in sorted(totals.items())]


def price_history(fill_ups: Iterable[FillUp]) -> list[PricePoint]:
    """Price per liter of every fill-up, oldest first."""
    return [PricePoint(fill_up.date, fill_up.price_per_liter) for fill_up in sorted(fill_ups, key=_by_date)]


def summarize(
    fill_ups: Iterable[FillUp],
    vehicle_id: UUID | None = None,
    tz: tzinfo | None = None,
) -> FuelStatistics:
    """Compute every aggregate in one pass over a snapshot of *fill_ups*."""
    records = list(fill_ups) if vehicle_id is None else for_vehicle(fill_ups, vehicle_id)
    return FuelStatistics(
        vehicle_id=vehicle_id,
        fill_up_count=len(records),
        total_distance=total_distance(records),
        total_fuel=total_fuel(records),
        total_cost=total_cost(records),
        average_consumption=average_consumption(records),
        real_consumption_history=real_consumption_history(records),
        monthly_costs=monthly_costs(records, tz),
        price_history=price_history(records),
    )
