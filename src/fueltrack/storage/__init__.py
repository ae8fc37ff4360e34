"""Records store layer.

The only place vehicles and fill-ups are read from or written to
persistent storage, always as whole collections.
"""

from fueltrack.storage.backends import FileBackend, KeyValueBackend, MemoryBackend
from fueltrack.storage.repository import RecordsRepository

__all__ = [
    "FileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "RecordsRepository",
]
