#!/usr/bin/env python3
"""Show themed plant bundles for a hardiness zone."""

from __future__ import annotations

import argparse
from pathlib import Path

from plant_finder.bundles import BUNDLE_IDS, get_all_bundles, get_bundle
from plant_finder.scripts import emit_json
from plant_finder.zone_lookup import validate_zone


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build curated plant bundles for a zone")
    parser.add_argument("zone", type=validate_zone, help="USDA hardiness zone (1-13)")
    parser.add_argument("--bundle", choices=BUNDLE_IDS, help="Only build this bundle")
    parser.add_argument("--output", type=Path, help="Optional path to write the bundles JSON")
    args = parser.parse_args(argv)

    if args.bundle:
        payload = get_bundle(args.bundle, args.zone).as_dict()
    else:
        payload = [b.as_dict() for b in get_all_bundles(args.zone)]
    emit_json(payload, args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
