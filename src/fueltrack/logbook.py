"""Fill-up log with statistics accessors."""

from __future__ import annotations

from datetime import tzinfo
from operator import attrgetter
from uuid import UUID

from fueltrack import statistics as fuel_stats
from fueltrack._collection import RecordCollection
from fueltrack.models.fill_up import FillUp
from fueltrack.models.statistics import ConsumptionPoint, FuelStatistics, MonthlyCost, PricePoint


class FillUpLog(RecordCollection[FillUp]):
    """Fill-ups loaded from, and saved back to, a records repository.

    Statistics accessors take an optional ``vehicle_id`` to scope the
    figures to one vehicle and always work on the current in-memory
    records.
    """

    _KIND = "fill-ups"

    def _read(self) -> list[FillUp]:
        return self._repository.load_fill_ups()

    def _write(self, records: list[FillUp]) -> None:
        self._repository.save_fill_ups(records)

    @property
    def fill_ups(self) -> tuple[FillUp, ...]:
        return tuple(self._records)

    def for_vehicle(self, vehicle_id: UUID) -> list[FillUp]:
        return fuel_stats.for_vehicle(self._records, vehicle_id)

    def previous_fill_up(self, fill_up: FillUp) -> FillUp | None:
        """The fill-up of the same vehicle directly before *fill_up* by date.

        Ties on date keep collection order, with *fill_up* placed where
        :meth:`add_fill_up` would put it, so the pairing matches
        :func:`fueltrack.statistics.real_consumption_history`.
        """
        records = list(self._records)
        index = self._index_of(fill_up.id)
        if index is None:
            records.append(fill_up)
        else:
            records[index] = fill_up
        ordered = sorted(fuel_stats.for_vehicle(records, fill_up.vehicle_id), key=attrgetter("date"))
        position = next(i for i, other in enumerate(ordered) if other.id == fill_up.id)
        if position == 0:
            return None
        return ordered[position - 1]

    def add_fill_up(self, fill_up: FillUp, *, compute_real_consumption: bool = False) -> FillUp:
        """Add *fill_up* and return the stored record.

        With *compute_real_consumption* the record's ``real_consumption``
        is filled from the previous fill-up of the same vehicle, using the
        same rule as :func:`fueltrack.statistics.real_consumption_history`.
        """
        if compute_real_consumption:
            value = FillUp.calculate_real_consumption(fill_up, self.previous_fill_up(fill_up))
            fill_up = fill_up.model_copy(update={"real_consumption": value})
        self._add(fill_up)
        return fill_up

    def update_fill_up(self, fill_up: FillUp) -> bool:
        """Replace the fill-up with ``fill_up.id``; ``False`` if unknown."""
        return self._replace(fill_up)

    def delete_fill_up(self, fill_up_id: UUID) -> bool:
        return self._delete(fill_up_id)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def _scoped(self, vehicle_id: UUID | None) -> list[FillUp]:
        if vehicle_id is None:
            return list(self._records)
        return self.for_vehicle(vehicle_id)

    def _tz(self) -> tzinfo | None:
        return self._repository.config.tzinfo()

    def total_distance(self, vehicle_id: UUID | None = None) -> float:
        return fuel_stats.total_distance(self._scoped(vehicle_id))

    def total_fuel(self, vehicle_id: UUID | None = None) -> float:
        return fuel_stats.total_fuel(self._scoped(vehicle_id))

    def total_cost(self, vehicle_id: UUID | None = None) -> float:
        return fuel_stats.total_cost(self._scoped(vehicle_id))

    def average_consumption(self, vehicle_id: UUID | None = None) -> float:
        return fuel_stats.average_consumption(self._scoped(vehicle_id))

    def real_consumption_history(self, vehicle_id: UUID | None = None) -> list[ConsumptionPoint]:
        return fuel_stats.real_consumption_history(self._scoped(vehicle_id))

    def monthly_costs(self, vehicle_id: UUID | None = None) -> list[MonthlyCost]:
        return fuel_stats.monthly_costs(self._scoped(vehicle_id), self._tz())

    def price_history(self, vehicle_id: UUID | None = None) -> list[PricePoint]:
        return fuel_stats.price_history(self._scoped(vehicle_id))

    def statistics(self, vehicle_id: UUID | None = None) -> FuelStatistics:
        """Every aggregate at once; see :func:`fueltrack.statistics.summarize`."""
        return fuel_stats.summarize(self._records, vehicle_id, self._tz())
