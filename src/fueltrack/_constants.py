"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Storage keys
# ------------------------------------------------------------------

VEHICLES_KEY = "SavedVehicles"
FILL_UPS_KEY = "SavedFillUps"
HAS_LAUNCHED_BEFORE_KEY = "HasLaunchedBefore"

# ------------------------------------------------------------------
# Display units
# ------------------------------------------------------------------

CURRENCY_SYMBOL = "$"
DISTANCE_UNIT = "km"
VOLUME_UNIT = "L"
CONSUMPTION_UNIT = "L/100km"

# ------------------------------------------------------------------
# Input validation minimums  (applied at the input boundary only)
# ------------------------------------------------------------------

MIN_DISTANCE = 0.1
MIN_CONSUMPTION = 0.1
MIN_FUEL_PRICE = 0.01
MIN_ODOMETER = 0.1
MIN_VOLUME = 0.1

#: Consumption is expressed per this many distance units (L/100km).
CONSUMPTION_DISTANCE_BASE = 100.0


def month_key(year: int, month: int) -> str:
    """Return the ``"YYYY-MM"`` bucket key used by monthly aggregates."""
    return f"{year}-{month:02d}"
