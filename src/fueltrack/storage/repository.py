"""Records repository: whole-collection JSON blobs over a key-value backend.

Each collection (vehicles, fill-ups) is stored as a single JSON array
under its own key and is always read and written in full.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import FuelTrackDecodingError, FuelTrackEncodingError
from fueltrack.models.fill_up import FillUp
from fueltrack.models.vehicle import Vehicle
from fueltrack.storage.backends import FileBackend, KeyValueBackend, MemoryBackend

_logger = logging.getLogger(__name__)

T = TypeVar("T", Vehicle, FillUp)

_VEHICLES = TypeAdapter(list[Vehicle])
_FILL_UPS = TypeAdapter(list[FillUp])


def _non_finite_field(record: Any) -> str | None:
    """Name of the first NaN/inf float field of *record*, if any.

    JSON has no encoding for these; pydantic would write ``null`` and the
    collection could not be read back.
    """
    if not isinstance(record, BaseModel):
        return None
    for name, value in record:
        if isinstance(value, float) and not math.isfinite(value):
            return name
    return None


class RecordsRepository:
    """Load and save the vehicles and fill-ups collections.

    Usage::

        repository = RecordsRepository.from_config(FuelTrackConfig.from_env())
        vehicles = repository.load_vehicles()
    """

    def __init__(self, backend: KeyValueBackend, *, config: FuelTrackConfig | None = None) -> None:
        self._backend = backend
        self._config = config or FuelTrackConfig()

    @classmethod
    def from_config(cls, config: FuelTrackConfig) -> RecordsRepository:
        """Build a repository on a :class:`FileBackend` at ``config.data_dir``.

        Falls back to a :class:`MemoryBackend` when no directory is set.
        """
        backend: KeyValueBackend
        if config.data_dir is None:
            backend = MemoryBackend()
        else:
            backend = FileBackend(config.data_dir)
        return cls(backend, config=config)

    @property
    def config(self) -> FuelTrackConfig:
        return self._config

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def load_vehicles(self) -> list[Vehicle]:
        """Return stored vehicles, ``[]`` when none were saved.

        Raises
        ------
        FuelTrackDecodingError
            Stored bytes are not a valid vehicles collection.
        """
        return self._load(self._config.vehicles_key, _VEHICLES)

    def save_vehicles(self, vehicles: Iterable[Vehicle]) -> None:
        """Replace the stored vehicles collection.

        Raises
        ------
        FuelTrackEncodingError
            The collection could not be serialized.
        """
        self._save(self._config.vehicles_key, _VEHICLES, vehicles)

    def load_fill_ups(self) -> list[FillUp]:
        """Return stored fill-ups, ``[]`` when none were saved.

        Raises
        ------
        FuelTrackDecodingError
            Stored bytes are not a valid fill-ups collection.
        """
        return self._load(self._config.fill_ups_key, _FILL_UPS)

    def save_fill_ups(self, fill_ups: Iterable[FillUp]) -> None:
        """Replace the stored fill-ups collection.

        Raises
        ------
        FuelTrackEncodingError
            The collection could not be serialized.
        """
        self._save(self._config.fill_ups_key, _FILL_UPS, fill_ups)

    def clear_all_data(self) -> None:
        """Remove both collections. The first-launch flag is kept."""
        self._backend.remove(self._config.vehicles_key)
        self._backend.remove(self._config.fill_ups_key)
        _logger.info("Cleared stored vehicles and fill-ups")

    def has_data(self) -> bool:
        """Whether either collection has been saved."""
        return self._backend.contains(self._config.vehicles_key) or self._backend.contains(
            self._config.fill_ups_key
        )

    # ------------------------------------------------------------------
    # First launch
    # ------------------------------------------------------------------

    def is_first_launch(self) -> bool:
        raw = self._backend.get(self._config.has_launched_before_key)
        if raw is None:
            return True
        try:
            return json.loads(raw) is not True
        except ValueError:
            _logger.warning("Ignoring unreadable first-launch flag under %s", self._config.has_launched_before_key)
            return True

    def mark_as_launched(self) -> None:
        self._backend.set(self._config.has_launched_before_key, b"true")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load(self, key: str, adapter: TypeAdapter[list[T]]) -> list[T]:
        data = self._backend.get(key)
        if data is None:
            _logger.debug("No stored data under %s", key)
            return []
        try:
            records = adapter.validate_json(data)
        except ValidationError as exc:
            raise FuelTrackDecodingError(
                f"stored data under {key!r} is malformed: {exc.error_count()} error(s)",
                key=key,
            ) from exc
        _logger.debug("Loaded %d record(s) from %s (%d bytes)", len(records), key, len(data))
        return records

    def _save(self, key: str, adapter: TypeAdapter[list[T]], records: Iterable[Any]) -> None:
        items = list(records)
        for index, item in enumerate(items):
            bad_field = _non_finite_field(item)
            if bad_field is not None:
                raise FuelTrackEncodingError(
                    f"failed to serialize {key!r}: record {index} has non-finite {bad_field}",
                    key=key,
                )
        try:
            data = adapter.dump_json(items, by_alias=True, warnings="error")
        except (TypeError, ValueError) as exc:
            raise FuelTrackEncodingError(f"failed to serialize {key!r}: {exc}", key=key) from exc
        self._backend.set(key, data)
        _logger.debug("Saved %d record(s) to %s (%d bytes)", len(items), key, len(data))
