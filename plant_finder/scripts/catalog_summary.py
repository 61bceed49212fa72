#!/usr/bin/env python3
"""Summarize the catalog by plant type and attributes."""

from __future__ import annotations

import argparse
from pathlib import Path

from plant_finder.catalog import catalog_frame
from plant_finder.scripts import emit_json


def summarize(frame) -> dict[str, object]:
    """Return plant counts overall, per type and per attribute."""
    if frame.empty:
        return {"plants": 0, "by_type": {}, "native": 0, "pollinator_friendly": 0, "pet_safe": 0}

    def _count_true(column: str) -> int:
        if column not in frame:
            return 0
        return int((frame[column] == True).sum())  # noqa: E712

    by_type = frame["plantType"].fillna("unknown").value_counts() if "plantType" in frame else None
    toxicity = frame.get("toxicityToPets")
    return {
        "plants": int(len(frame)),
        "by_type": {str(k): int(v) for k, v in by_type.items()} if by_type is not None else {},
        "native": _count_true("isNative"),
        "pollinator_friendly": _count_true("isPollinatorFriendly"),
        "pet_safe": int((toxicity == "non-toxic").sum()) if toxicity is not None else 0,
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Summarize the bundled plant catalog")
    parser.add_argument("--output", type=Path, help="Optional path to write the summary JSON")
    args = parser.parse_args(argv)

    emit_json(summarize(catalog_frame()), args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
