"""Shared in-memory collection with whole-collection persistence."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar, Generic, TypeVar
from uuid import UUID

from fueltrack.exceptions import FuelTrackStorageError
from fueltrack.models.fill_up import FillUp
from fueltrack.models.vehicle import Vehicle
from fueltrack.storage.repository import RecordsRepository

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Vehicle, FillUp)


class RecordCollection(ABC, Generic[RecordT]):
    """Records held in memory and saved in full after every change.

    The in-memory list is the source of truth. A failed load leaves the
    collection empty; a failed save is logged and the change is kept in
    memory until the next successful save.
    """

    _KIND: ClassVar[str] = "records"

    def __init__(self, repository: RecordsRepository, *, autoload: bool = True) -> None:
        self._repository = repository
        self._records: list[RecordT] = []
        if autoload:
            self.load()

    @property
    def repository(self) -> RecordsRepository:
        return self._repository

    @abstractmethod
    def _read(self) -> list[RecordT]:
        """Load the stored collection from the repository."""

    @abstractmethod
    def _write(self, records: list[RecordT]) -> None:
        """Save *records* as the whole stored collection."""

    def load(self) -> None:
        """Replace the in-memory records with the stored collection."""
        try:
            self._records = self._read()
        except FuelTrackStorageError as exc:
            _logger.warning("Error loading %s, continuing with none: %s", self._KIND, exc)
            self._records = []

    def save(self) -> bool:
        """Persist the whole collection; ``False`` when the save failed."""
        try:
            self._write(self._records)
        except FuelTrackStorageError as exc:
            _logger.error("Error saving %s: %s", self._KIND, exc)
            return False
        return True

    def get(self, record_id: UUID) -> RecordT | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def _index_of(self, record_id: UUID) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _add(self, record: RecordT) -> None:
        index = self._index_of(record.id)
        if index is None:
            self._records.append(record)
        else:
            self._records[index] = record
        self.save()

    def _replace(self, record: RecordT) -> bool:
        index = self._index_of(record.id)
        if index is None:
            _logger.debug("No %s with id %s to update", self._KIND, record.id)
            return False
        self._records[index] = record
        self.save()
        return True

    def _delete(self, record_id: UUID) -> bool:
        index = self._index_of(record_id)
        if index is None:
            return False
        del self._records[index]
        self.save()
        return True

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(tuple(self._records))
