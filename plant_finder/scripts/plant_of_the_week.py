#!/usr/bin/env python3
"""Show the featured plant of the week for a zone."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from plant_finder.scripts import emit_json
from plant_finder.weekly_feature import get_plant_of_the_week, get_selection_reasons
from plant_finder.zone_lookup import validate_zone


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Pick the plant of the week for a zone")
    parser.add_argument("zone", type=validate_zone, help="USDA hardiness zone (1-13)")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Day to pick for (YYYY-MM-DD, defaults to today)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the result JSON")
    args = parser.parse_args(argv)

    plant = get_plant_of_the_week(args.zone, today=args.date or date.today())
    if plant is None:
        payload = None
    else:
        payload = {"plant": plant.as_dict(), "reasons": get_selection_reasons(plant)}
    emit_json(payload, args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
