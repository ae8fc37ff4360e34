"""Validation of user-entered values before records are built.

The statistics functions accept any record; this module is where entered
values are checked against the minimums in :mod:`fueltrack._constants`.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any
from uuid import UUID

from fueltrack import _constants
from fueltrack.exceptions import FuelTrackValidationError
from fueltrack.models.fill_up import FillUp
from fueltrack.models.vehicle import Vehicle


def parse_decimal(value: Any, *, field: str = "") -> float:
    """Parse a number typed by a user, accepting ``","`` as decimal mark.

    Raises :class:`FuelTrackValidationError` for blank or non-numeric input.
    """
    if isinstance(value, bool):
        raise FuelTrackValidationError(f"{field or 'value'} must be a number", field=field)
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip().replace(" ", "").replace(",", ".") if value is not None else ""
        if not text:
            raise FuelTrackValidationError(f"{field or 'value'} is required", field=field)
        try:
            result = float(text)
        except ValueError as exc:
            raise FuelTrackValidationError(f"{field or 'value'} must be a number, got {value!r}", field=field) from exc
    if math.isnan(result) or math.isinf(result):
        raise FuelTrackValidationError(f"{field or 'value'} must be finite", field=field)
    return result


def _require_minimum(value: float, minimum: float, field: str) -> None:
    if value < minimum:
        raise FuelTrackValidationError(f"{field} must be at least {minimum}, got {value}", field=field)


def validate_fill_up_input(
    *,
    vehicle_id: UUID | None,
    odometer: Any,
    volume: Any,
    price_per_liter: Any,
    is_full_tank: bool = True,
    date: datetime | None = None,
) -> FillUp:
    """Check entered fill-up values and build the record.

    Raises
    ------
    FuelTrackValidationError
        No vehicle selected, or a value is missing, non-numeric or below
        its minimum.
    """
    if vehicle_id is None:
        raise FuelTrackValidationError("a vehicle must be selected", field="vehicle_id")
    odometer_value = parse_decimal(odometer, field="odometer")
    volume_value = parse_decimal(volume, field="volume")
    price_value = parse_decimal(price_per_liter, field="price_per_liter")
    _require_minimum(odometer_value, _constants.MIN_ODOMETER, "odometer")
    _require_minimum(volume_value, _constants.MIN_VOLUME, "volume")
    _require_minimum(price_value, _constants.MIN_FUEL_PRICE, "price_per_liter")

    kwargs: dict[str, Any] = {
        "vehicle_id": vehicle_id,
        "odometer": odometer_value,
        "volume": volume_value,
        "price_per_liter": price_value,
        "is_full_tank": is_full_tank,
    }
    if date is not None:
        kwargs["date"] = date
    return FillUp(**kwargs)


def validate_vehicle_input(
    *,
    name: str,
    make: str = "",
    model: str = "",
    year: str = "",
    consumption_city: Any = 0.0,
    consumption_highway: Any = 0.0,
    consumption_mixed: Any = 0.0,
) -> Vehicle:
    """Check entered vehicle values and build the record.

    Consumption fields left blank count as ``0.0`` (not provided); any
    provided rate must reach the minimum consumption.
    """
    name = name.strip()
    if not name:
        raise FuelTrackValidationError("name is required", field="name")

    rates: dict[str, float] = {}
    for field, raw in (
        ("consumption_city", consumption_city),
        ("consumption_highway", consumption_highway),
        ("consumption_mixed", consumption_mixed),
    ):
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            rates[field] = 0.0
            continue
        value = parse_decimal(raw, field=field)
        if value != 0.0:
            _require_minimum(value, _constants.MIN_CONSUMPTION, field)
        rates[field] = value

    return Vehicle(name=name, make=make.strip(), model=model.strip(), year=year.strip(), **rates)


def validate_trip_input(*, distance: Any, fuel_price: Any) -> tuple[float, float]:
    """Parse and check a trip distance and fuel price for the calculator."""
    distance_value = parse_decimal(distance, field="distance")
    price_value = parse_decimal(fuel_price, field="fuel_price")
    _require_minimum(distance_value, _constants.MIN_DISTANCE, "distance")
    _require_minimum(price_value, _constants.MIN_FUEL_PRICE, "fuel_price")
    return distance_value, price_value
