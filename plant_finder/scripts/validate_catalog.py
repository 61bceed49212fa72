#!/usr/bin/env python3
"""Validate plant catalog records against the plant schema."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from plant_finder.catalog import CATALOG_FILE, validate_catalog
from plant_finder.utils import dataset_file, load_data, load_dataset


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a plant catalog file")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Catalog JSON/YAML file (defaults to the bundled catalog)",
    )
    args = parser.parse_args(argv)

    records = load_data(args.path) if args.path else load_dataset(CATALOG_FILE)
    source = args.path or dataset_file(CATALOG_FILE)
    if not isinstance(records, list):
        print("Catalog validation failed:")
        print(" - catalog must be a list of plant records")
        return 1

    issues = validate_catalog(records)
    if issues:
        print("Catalog validation failed:")
        for issue in issues:
            print(" -", issue)
        return 1
    print(f"Catalog validation passed ({len(records)} records in {source}).")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
