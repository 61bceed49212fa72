#!/usr/bin/env python3
"""Suggest companion plants for a catalog plant."""

from __future__ import annotations

import argparse
from pathlib import Path

from plant_finder.catalog import get_plant_by_id
from plant_finder.companions import get_companion_plants
from plant_finder.constants import DEFAULT_COMPANION_LIMIT
from plant_finder.scripts import emit_json
from plant_finder.zone_lookup import validate_zone


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Suggest companions for a plant")
    parser.add_argument("plant_id", help="Catalog plant identifier")
    parser.add_argument("zone", type=validate_zone, help="USDA hardiness zone (1-13)")
    parser.add_argument("--limit", type=int, default=DEFAULT_COMPANION_LIMIT)
    parser.add_argument("--output", type=Path, help="Optional path to write the companions JSON")
    args = parser.parse_args(argv)

    plant = get_plant_by_id(args.plant_id)
    if plant is None:
        parser.error(f"unknown plant id: {args.plant_id}")
    companions = get_companion_plants(plant, args.zone, args.limit)
    emit_json([p.as_dict() for p in companions], args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
