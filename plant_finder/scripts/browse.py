#!/usr/bin/env python3
"""List catalog plants for a zone, filters and optional search query."""

from __future__ import annotations

import argparse
from pathlib import Path

from plant_finder.catalog import get_curated_plants_for_zone, get_plants
from plant_finder.constants import PLANT_TYPES, SUN_EXPOSURES, WATER_NEEDS
from plant_finder.filters import filter_plants
from plant_finder.plant import PlantFilters
from plant_finder.scripts import emit_json
from plant_finder.search import search_plants
from plant_finder.zone_lookup import validate_zone


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Browse plants suited to a hardiness zone")
    parser.add_argument("--zone", type=validate_zone, help="USDA hardiness zone (1-13)")
    parser.add_argument("--query", help="Free text, keyword or 'zone N' search")
    parser.add_argument("--native-only", action="store_true")
    parser.add_argument("--pollinator-only", action="store_true")
    parser.add_argument("--pet-safe", action="store_true", help="Exclude plants toxic to pets")
    parser.add_argument("--beginner-only", action="store_true")
    parser.add_argument("--sun", action="append", choices=SUN_EXPOSURES, default=[])
    parser.add_argument("--type", dest="plant_type", action="append", choices=PLANT_TYPES, default=[])
    parser.add_argument("--water", choices=WATER_NEEDS)
    parser.add_argument("--curated", action="store_true", help="Only curated starter plants")
    parser.add_argument("--output", type=Path, help="Optional path to write the results JSON")
    args = parser.parse_args(argv)

    if args.curated:
        if args.zone is None:
            parser.error("--curated requires --zone")
        plants = get_curated_plants_for_zone(args.zone)
    else:
        plants = list(get_plants())

    filters = PlantFilters(
        zone=args.zone,
        native_only=args.native_only,
        pollinator_friendly_only=args.pollinator_only,
        exclude_toxic_to_pets=args.pet_safe,
        sun_exposure=tuple(args.sun),
        plant_type=tuple(args.plant_type),
        water_needs=args.water,
        beginner_friendly_only=args.beginner_only,
    )
    results = search_plants(filter_plants(plants, filters), args.query, args.zone)
    emit_json([p.as_dict() for p in results], args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
