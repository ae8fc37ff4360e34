"""Key-value blob backends for the records store."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from fueltrack.exceptions import FuelTrackStorageError

_logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """Structural blob-store interface used by the records repository.

    Values are opaque bytes; a missing key reads as ``None``.
    """

    def get(self, key: str) -> bytes | None:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def contains(self, key: str) -> bool:
        ...


class MemoryBackend:
    """In-process backend; contents live as long as the instance."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._data


class FileBackend:
    """One ``<key>.json`` file per key inside *directory*.

    Writes go to a temporary file in the same directory and are moved into
    place, so a reader never sees a half-written blob.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise FuelTrackStorageError(f"invalid storage key: {key!r}", key=key)
        return self._directory / f"{key}.json"

    def get(self, key: str) -> bytes | None:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise FuelTrackStorageError(f"failed to read {path}: {exc}", key=key) from exc

    def set(self, key: str, value: bytes) -> None:
        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise FuelTrackStorageError(f"failed to write {path}: {exc}", key=key) from exc
        _logger.debug("Wrote %d bytes to %s", len(value), path)

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise FuelTrackStorageError(f"failed to remove {path}: {exc}", key=key) from exc

    def contains(self, key: str) -> bool:
        return self._path(key).is_file()
