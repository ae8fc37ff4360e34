"""fueltrack - Fuel fill-up log and consumption statistics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfueltrack")
except PackageNotFoundError:
    __version__ = "0+local"
from fueltrack.calculator import TripEstimate, estimate_trip
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import (
    FuelTrackConfigError,
    FuelTrackDecodingError,
    FuelTrackEncodingError,
    FuelTrackError,
    FuelTrackStorageError,
    FuelTrackValidationError,
)
from fueltrack.garage import Garage
from fueltrack.logbook import FillUpLog
from fueltrack.models import (
    ConsumptionPoint,
    FillUp,
    FuelStatistics,
    MonthlyCost,
    PricePoint,
    TripType,
    Vehicle,
)
from fueltrack.storage import FileBackend, KeyValueBackend, MemoryBackend, RecordsRepository

__all__ = [
    "__version__",
    "ConsumptionPoint",
    "FileBackend",
    "FillUp",
    "FillUpLog",
    "FuelStatistics",
    "FuelTrackConfig",
    "FuelTrackConfigError",
    "FuelTrackDecodingError",
    "FuelTrackEncodingError",
    "FuelTrackError",
    "FuelTrackStorageError",
    "FuelTrackValidationError",
    "Garage",
    "KeyValueBackend",
    "MemoryBackend",
    "MonthlyCost",
    "PricePoint",
    "RecordsRepository",
    "TripEstimate",
    "TripType",
    "Vehicle",
    "estimate_trip",
]
