"""Base model for persisted fueltrack records.

Every record model inherits from :class:`FuelTrackBaseModel` which
provides:

* ``alias_generator=to_camel`` so stored camelCase keys
  (``vehicleId``, ``pricePerLiter``) map to snake_case fields.
* Frozen instances: records change only by full replacement.
* ``to_record()`` producing the camelCase dict written to storage.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_tz_aware(value: datetime) -> datetime:
    """Attach the system local time zone to naive datetimes.

    Keeps every stored date comparable with every other one; a naive
    value is read as local wall-clock time.
    """
    if value.tzinfo is None:
        return value.astimezone()
    return value


def local_now() -> datetime:
    return datetime.now().astimezone()


LocalizedDatetime = Annotated[datetime, AfterValidator(ensure_tz_aware)]
"""Annotated type that normalises naive datetimes to local aware ones."""


class FuelTrackBaseModel(BaseModel):
    """Base for persisted record models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_record(self) -> dict[str, Any]:
        """Return the JSON-compatible camelCase dict used for storage."""
        return self.model_dump(mode="json", by_alias=True)
