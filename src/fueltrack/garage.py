"""Garage: the user's vehicles."""

from __future__ import annotations

from uuid import UUID

from fueltrack._collection import RecordCollection
from fueltrack.models.vehicle import Vehicle


class Garage(RecordCollection[Vehicle]):
    """Vehicles loaded from, and saved back to, a records repository.

    Deleting a vehicle leaves its fill-ups in place.
    """

    _KIND = "vehicles"

    def _read(self) -> list[Vehicle]:
        return self._repository.load_vehicles()

    def _write(self, records: list[Vehicle]) -> None:
        self._repository.save_vehicles(records)

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(self._records)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Add *vehicle*, replacing any stored vehicle with the same id."""
        self._add(vehicle)

    def update_vehicle(self, vehicle: Vehicle) -> bool:
        """Replace the vehicle with ``vehicle.id``; ``False`` if unknown."""
        return self._replace(vehicle)

    def delete_vehicle(self, vehicle_id: UUID) -> bool:
        return self._delete(vehicle_id)
