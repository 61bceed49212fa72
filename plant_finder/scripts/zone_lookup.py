#!/usr/bin/env python3
"""Resolve the hardiness zone for a US ZIP code."""

from __future__ import annotations

import argparse
from pathlib import Path

from plant_finder.scripts import emit_json
from plant_finder.zone_lookup import lookup_zone


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Look up the USDA hardiness zone for a ZIP code")
    parser.add_argument("zip_code", help="5-digit US ZIP code")
    parser.add_argument("--output", type=Path, help="Optional path to write the zone JSON")
    args = parser.parse_args(argv)

    try:
        info = lookup_zone(args.zip_code)
    except ValueError as exc:
        parser.error(str(exc))
    emit_json(info.as_dict(), args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
