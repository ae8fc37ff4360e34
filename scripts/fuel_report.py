#!/usr/bin/env python3
"""Print fuel statistics for the records stored in a data directory.

Usage
-----
Point the script at the directory holding the stored collections::

    export FUELTRACK_DATA_DIR="$HOME/.fueltrack"
    python scripts/fuel_report.py

Options::

    --data-dir DIR      Read records from DIR (default: $FUELTRACK_DATA_DIR)
    --vehicle NAME|ID   Only report this vehicle (default: every vehicle)
    --json              Output as machine-readable JSON
    --verbose           Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any
from uuid import UUID

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from fueltrack import FillUpLog, FuelStatistics, FuelTrackConfig, Garage, RecordsRepository, Vehicle  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _find_vehicle(vehicles: tuple[Vehicle, ...], needle: str) -> Vehicle | None:
    try:
        wanted: UUID | None = UUID(needle)
    except ValueError:
        wanted = None
    for vehicle in vehicles:
        if vehicle.id == wanted or vehicle.name.casefold() == needle.casefold():
            return vehicle
    return None


def _format_stats(title: str, stats: FuelStatistics, config: FuelTrackConfig) -> list[str]:
    cur = config.currency_symbol
    dist = config.distance_unit
    vol = config.volume_unit
    unit = config.consumption_unit
    out = [_section(title)]
    out.append(f"  fill-ups:            {stats.fill_up_count}")
    out.append(f"  total distance:      {stats.total_distance:.1f} {dist}")
    out.append(f"  total fuel:          {stats.total_fuel:.2f} {vol}")
    out.append(f"  total cost:          {cur}{stats.total_cost:.2f}")
    out.append(f"  average consumption: {stats.average_consumption:.2f} {unit}")
    out.append(f"  cost per {dist}:         {cur}{stats.cost_per_km:.3f}")

    out.append("\n  ── real consumption ──")
    if not stats.real_consumption_history:
        out.append("  (not enough full-tank fill-ups)")
    for point in stats.real_consumption_history:
        out.append(f"  {point.date:%Y-%m-%d}  {point.value:6.2f} {unit}")

    out.append("\n  ── monthly costs ──")
    for month in stats.monthly_costs:
        out.append(f"  {month.month}  {cur}{month.total:9.2f}")

    out.append("\n  ── price history ──")
    for price in stats.price_history:
        out.append(f"  {price.date:%Y-%m-%d}  {cur}{price.price_per_liter:.3f}/{vol}")
    return out


# ── main ─────────────────────────────────────────────────────


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print fuel consumption statistics from stored fill-ups.",
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding the stored collections")
    parser.add_argument("--vehicle", help="Only report this vehicle (name or id)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir
    config = FuelTrackConfig.from_env(**overrides)
    if config.data_dir is None:
        parser.error("no data directory: pass --data-dir or set FUELTRACK_DATA_DIR")

    repository = RecordsRepository.from_config(config)
    garage = Garage(repository)
    log = FillUpLog(repository)

    targets: list[tuple[str, UUID | None]] = []
    if args.vehicle:
        vehicle = _find_vehicle(garage.vehicles, args.vehicle)
        if vehicle is None:
            print(f"No vehicle matching {args.vehicle!r}", file=sys.stderr)
            return 1
        targets.append((vehicle.name or str(vehicle.id), vehicle.id))
    else:
        targets.append(("ALL VEHICLES", None))
        targets.extend((vehicle.name or str(vehicle.id), vehicle.id) for vehicle in garage.vehicles)

    if args.json:
        payload = {title: log.statistics(vehicle_id).model_dump(mode="json") for title, vehicle_id in targets}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    lines: list[str] = []
    for title, vehicle_id in targets:
        lines.extend(_format_stats(title, log.statistics(vehicle_id), config))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
