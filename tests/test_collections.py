from __future__ import annotations

import logging
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from fueltrack._collection import RecordCollection
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import FuelTrackStorageError
from fueltrack.garage import Garage
from fueltrack.logbook import FillUpLog
from fueltrack.models.fill_up import FillUp
from fueltrack.models.vehicle import Vehicle
from fueltrack.storage.backends import MemoryBackend
from fueltrack.storage.repository import RecordsRepository


class _ReadOnlyBackend(MemoryBackend):
    """Backend whose writes always fail."""

    def set(self, key: str, value: bytes) -> None:
        raise FuelTrackStorageError("disk full", key=key)


def _repository(**initial: bytes) -> RecordsRepository:
    return RecordsRepository(MemoryBackend(initial), config=FuelTrackConfig(time_zone="UTC"))


def _fill(vehicle_id, day: int, odometer: float, volume: float = 30.0, *, full: bool = True) -> FillUp:
    return FillUp(
        vehicle_id=vehicle_id,
        date=datetime(2026, 1, day, tzinfo=UTC),
        odometer=odometer,
        volume=volume,
        price_per_liter=2.0,
        is_full_tank=full,
    )


# ------------------------------------------------------------------
# Garage
# ------------------------------------------------------------------


class TestGarage:
    def test_add_persists_whole_collection(self) -> None:
        repository = _repository()
        garage = Garage(repository)
        first, second = Vehicle(name="a"), Vehicle(name="b")
        garage.add_vehicle(first)
        garage.add_vehicle(second)
        assert repository.load_vehicles() == [first, second]
        assert Garage(repository).vehicles == (first, second)

    def test_update_replaces_by_id(self) -> None:
        repository = _repository()
        garage = Garage(repository)
        vehicle = Vehicle(name="a", consumption_city=8.0)
        garage.add_vehicle(vehicle)
        updated = vehicle.model_copy(update={"name": "renamed"})
        assert garage.update_vehicle(updated) is True
        assert garage.get(vehicle.id) == updated
        assert repository.load_vehicles() == [updated]

    def test_update_unknown_is_noop(self) -> None:
        garage = Garage(_repository())
        assert garage.update_vehicle(Vehicle(name="ghost")) is False
        assert len(garage) == 0

    def test_add_with_existing_id_replaces(self) -> None:
        garage = Garage(_repository())
        vehicle = Vehicle(name="a")
        garage.add_vehicle(vehicle)
        garage.add_vehicle(vehicle.model_copy(update={"name": "b"}))
        assert [v.name for v in garage] == ["b"]

    def test_delete_by_identity(self) -> None:
        repository = _repository()
        garage = Garage(repository)
        vehicles = [Vehicle(name=name) for name in "abc"]
        for vehicle in vehicles:
            garage.add_vehicle(vehicle)
        assert garage.delete_vehicle(vehicles[1].id) is True
        assert garage.delete_vehicle(vehicles[1].id) is False
        assert [v.name for v in repository.load_vehicles()] == ["a", "c"]

    def test_delete_leaves_fill_ups(self) -> None:
        repository = _repository()
        garage = Garage(repository)
        log = FillUpLog(repository)
        vehicle = Vehicle(name="a")
        garage.add_vehicle(vehicle)
        log.add_fill_up(_fill(vehicle.id, 1, 1000))
        garage.delete_vehicle(vehicle.id)
        assert len(FillUpLog(repository)) == 1

    def test_corrupt_store_loads_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        repository = _repository(SavedVehicles=b"not json")
        with caplog.at_level(logging.WARNING, logger="fueltrack"):
            garage = Garage(repository)
        assert garage.vehicles == ()
        assert "Error loading vehicles" in caplog.text

    def test_failed_save_keeps_memory_state(self, caplog: pytest.LogCaptureFixture) -> None:
        repository = RecordsRepository(_ReadOnlyBackend())
        garage = Garage(repository)
        vehicle = Vehicle(name="a")
        with caplog.at_level(logging.ERROR, logger="fueltrack"):
            garage.add_vehicle(vehicle)
        assert garage.vehicles == (vehicle,)
        assert "Error saving vehicles" in caplog.text
        assert garage.save() is False

    def test_iteration_is_a_snapshot(self) -> None:
        garage = Garage(_repository())
        vehicle = Vehicle(name="a")
        garage.add_vehicle(vehicle)
        for item in garage:
            garage.delete_vehicle(item.id)
        assert len(garage) == 0

    def test_autoload_disabled(self) -> None:
        repository = _repository()
        repository.save_vehicles([Vehicle(name="a")])
        garage = Garage(repository, autoload=False)
        assert len(garage) == 0
        garage.load()
        assert len(garage) == 1


# ------------------------------------------------------------------
# FillUpLog
# ------------------------------------------------------------------


class TestFillUpLog:
    VEHICLE = uuid4()

    def test_add_update_delete(self) -> None:
        repository = _repository()
        log = FillUpLog(repository)
        fill_up = _fill(self.VEHICLE, 1, 1000)
        log.add_fill_up(fill_up)
        assert repository.load_fill_ups() == [fill_up]

        corrected = fill_up.model_copy(update={"odometer": 1010.0})
        assert log.update_fill_up(corrected) is True
        assert log.get(fill_up.id) == corrected

        assert log.delete_fill_up(fill_up.id) is True
        assert log.fill_ups == ()
        assert repository.load_fill_ups() == []

    def test_corrupt_store_loads_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="fueltrack"):
            log = FillUpLog(_repository(SavedFillUps=b"[{]"))
        assert log.fill_ups == ()
        assert "Error loading fill-ups" in caplog.text

    def test_real_consumption_not_computed_by_default(self) -> None:
        log = FillUpLog(_repository())
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000))
        stored = log.add_fill_up(_fill(self.VEHICLE, 2, 1500, volume=30))
        assert stored.real_consumption == 0.0

    def test_real_consumption_from_previous_of_same_vehicle(self) -> None:
        other = uuid4()
        log = FillUpLog(_repository())
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000))
        log.add_fill_up(_fill(other, 2, 1400))
        stored = log.add_fill_up(_fill(self.VEHICLE, 3, 1500, volume=30), compute_real_consumption=True)
        assert stored.real_consumption == pytest.approx(6.0)
        assert log.get(stored.id) == stored

    def test_real_consumption_zero_for_partial_or_first(self) -> None:
        log = FillUpLog(_repository())
        first = log.add_fill_up(_fill(self.VEHICLE, 1, 1000), compute_real_consumption=True)
        partial = log.add_fill_up(_fill(self.VEHICLE, 2, 1300, full=False), compute_real_consumption=True)
        assert first.real_consumption == 0.0
        assert partial.real_consumption == 0.0

    def test_stored_value_matches_history(self) -> None:
        log = FillUpLog(_repository())
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000), compute_real_consumption=True)
        stored = log.add_fill_up(_fill(self.VEHICLE, 2, 1400, volume=32), compute_real_consumption=True)
        assert log.real_consumption_history() == [(stored.date, pytest.approx(stored.real_consumption))]

    def test_statistics_scoped_by_vehicle(self) -> None:
        other = uuid4()
        log = FillUpLog(_repository())
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000, volume=40))
        log.add_fill_up(_fill(self.VEHICLE, 2, 1400, volume=32))
        log.add_fill_up(_fill(other, 3, 80_000, volume=50))

        assert log.total_distance(self.VEHICLE) == 400
        assert log.total_distance() == 79_000
        assert log.total_fuel(self.VEHICLE) == pytest.approx(72)
        assert log.total_cost(other) == pytest.approx(100)
        assert log.average_consumption(self.VEHICLE) == pytest.approx(18.0)
        assert log.real_consumption_history(self.VEHICLE) == [
            (datetime(2026, 1, 2, tzinfo=UTC), pytest.approx(8.0))
        ]
        assert log.monthly_costs() == [("2026-01", pytest.approx(244.0))]
        assert [point.price_per_liter for point in log.price_history(other)] == [2.0]

        summary = log.statistics(self.VEHICLE)
        assert summary.vehicle_id == self.VEHICLE
        assert summary.fill_up_count == 2

    def test_statistics_see_unsaved_changes(self) -> None:
        log = FillUpLog(RecordsRepository(_ReadOnlyBackend()))
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000))
        log.add_fill_up(_fill(self.VEHICLE, 2, 1250))
        assert log.total_distance() == 250

    def test_real_consumption_on_tied_dates_follows_insertion_order(self) -> None:
        log = FillUpLog(_repository())
        log.add_fill_up(_fill(self.VEHICLE, 1, 1000))
        log.add_fill_up(_fill(self.VEHICLE, 1, 1200))
        stored = log.add_fill_up(_fill(self.VEHICLE, 1, 1500, volume=30), compute_real_consumption=True)
        assert stored.real_consumption == pytest.approx(10.0)
        assert log.real_consumption_history()[-1].value == pytest.approx(stored.real_consumption)

    def test_previous_fill_up_of_stored_record_keeps_its_position(self) -> None:
        log = FillUpLog(_repository())
        first = log.add_fill_up(_fill(self.VEHICLE, 1, 1000))
        second = log.add_fill_up(_fill(self.VEHICLE, 1, 1200))
        log.add_fill_up(_fill(self.VEHICLE, 1, 1500))
        assert log.previous_fill_up(first) is None
        assert log.previous_fill_up(second) == first


def test_record_collection_is_abstract() -> None:
    with pytest.raises(TypeError):
        RecordCollection(_repository())  # type: ignore[abstract]
