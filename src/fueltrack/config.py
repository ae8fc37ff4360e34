"""Library configuration for fueltrack."""

from __future__ import annotations

import dataclasses
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fueltrack import _constants
from fueltrack.exceptions import FuelTrackConfigError


@dataclasses.dataclass(frozen=True)
class FuelTrackConfig:
    """Records store and display configuration.

    Parameters
    ----------
    data_dir : Path or None
        Directory holding one JSON blob per collection. ``None`` keeps
        all records in memory only.
    vehicles_key : str
        Storage key of the vehicles collection.
    fill_ups_key : str
        Storage key of the fill-ups collection.
    has_launched_before_key : str
        Storage key of the first-launch flag.
    time_zone : str or None
        IANA time zone used to bucket fill-ups into calendar months.
        ``None`` uses the system local time zone.
    currency_symbol : str
        Symbol printed in front of costs.
    distance_unit : str
        Unit of odometer readings and distances.
    volume_unit : str
        Unit of fuel volumes.
    consumption_unit : str
        Unit of consumption figures.
    """

    data_dir: Path | None = None
    vehicles_key: str = _constants.VEHICLES_KEY
    fill_ups_key: str = _constants.FILL_UPS_KEY
    has_launched_before_key: str = _constants.HAS_LAUNCHED_BEFORE_KEY
    time_zone: str | None = None
    currency_symbol: str = _constants.CURRENCY_SYMBOL
    distance_unit: str = _constants.DISTANCE_UNIT
    volume_unit: str = _constants.VOLUME_UNIT
    consumption_unit: str = _constants.CONSUMPTION_UNIT

    def __post_init__(self) -> None:
        if self.data_dir is not None:
            object.__setattr__(self, "data_dir", Path(self.data_dir).expanduser())
        for name in ("vehicles_key", "fill_ups_key", "has_launched_before_key"):
            if not getattr(self, name):
                raise FuelTrackConfigError(f"{name} must be non-empty")
        keys = {self.vehicles_key, self.fill_ups_key, self.has_launched_before_key}
        if len(keys) != 3:
            raise FuelTrackConfigError("storage keys must be distinct")
        self.tzinfo()

    def tzinfo(self) -> tzinfo | None:
        """Resolve :attr:`time_zone`; ``None`` means system local time."""
        if not self.time_zone:
            return None
        try:
            return ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise FuelTrackConfigError(f"unknown time zone: {self.time_zone!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> FuelTrackConfig:
        """Create configuration from environment variables.

        Reads the optional ``FUELTRACK_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        FuelTrackConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "FUELTRACK_VEHICLES_KEY": "vehicles_key",
            "FUELTRACK_FILL_UPS_KEY": "fill_ups_key",
            "FUELTRACK_HAS_LAUNCHED_KEY": "has_launched_before_key",
            "FUELTRACK_TIME_ZONE": "time_zone",
            "FUELTRACK_CURRENCY_SYMBOL": "currency_symbol",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # data_dir is a path, handle separately
        data_dir_env = env.get("FUELTRACK_DATA_DIR")
        if data_dir_env and "data_dir" not in overrides:
            config_kwargs["data_dir"] = Path(data_dir_env).expanduser()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
