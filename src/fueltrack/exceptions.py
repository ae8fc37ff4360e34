"""Custom exception hierarchy for fueltrack."""

from __future__ import annotations


class FuelTrackError(Exception):
    """Base exception for all fueltrack errors."""


class FuelTrackConfigError(FuelTrackError):
    """Invalid or missing configuration."""


class FuelTrackValidationError(FuelTrackError):
    """User-entered values rejected at the input boundary."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class FuelTrackStorageError(FuelTrackError):
    """Records store failure for a single collection key."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class FuelTrackEncodingError(FuelTrackStorageError):
    """A collection could not be serialized on save.

    Callers log this and keep their in-memory collection as the source of
    truth until the next successful save.
    """


class FuelTrackDecodingError(FuelTrackStorageError):
    """Stored bytes for a collection could not be deserialized on load.

    Callers log this and continue with an empty collection.
    """
