"""USDA hardiness zone lookup for US ZIP codes."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import MAX_ZONE, MIN_ZONE
from .utils import load_dataset

DATA_FILE = "zones/zip_zones.json"

__all__ = ["ZoneInfo", "parse_zone_label", "validate_zone", "lookup_zone"]

_ZIP_PATTERN = re.compile(r"^\d{5}$")
_LABEL_PATTERN = re.compile(r"^\s*(\d{1,2})\s*([ab]?)\s*$", re.IGNORECASE)

DEFAULT_ZONE = "6a"
# (first ZIP, last ZIP, zone) used when a ZIP is not in the dataset
ZIP_RANGE_ZONES: tuple[tuple[int, int, str], ...] = (
    (85000, 99999, "9a"),
    (70000, 84999, "7b"),
    (60000, 69999, "5b"),
    (30000, 59999, "7a"),
    (20000, 29999, "7a"),
)


@dataclass(slots=True, frozen=True)
class ZoneInfo:
    """Hardiness zone resolved for a ZIP code."""

    zip: str
    zone: str
    zone_number: int
    zone_letter: str

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping used in JSON output."""
        return {
            "zip": self.zip,
            "zone": self.zone,
            "zoneNumber": self.zone_number,
            "zoneLetter": self.zone_letter,
        }


def parse_zone_label(label: str) -> tuple[int, str]:
    """Return ``(number, letter)`` for a label such as ``"7b"``.

    The letter is empty when the label has no half-zone suffix. A
    :class:`ValueError` is raised for malformed labels or zones outside 1-13.
    """
    match = _LABEL_PATTERN.match(str(label))
    if not match:
        raise ValueError(f"Invalid hardiness zone: {label!r}")
    number = int(match.group(1))
    if not MIN_ZONE <= number <= MAX_ZONE:
        raise ValueError(f"Hardiness zone out of range: {label!r}")
    return number, match.group(2).lower()


def validate_zone(value: Any) -> int:
    """Return ``value`` as a zone number between 1 and 13."""
    try:
        zone = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Please enter a valid zone (1-13), got {value!r}") from exc
    if isinstance(value, bool) or not MIN_ZONE <= zone <= MAX_ZONE:
        raise ValueError(f"Please enter a valid zone (1-13), got {value!r}")
    return zone


def _fallback_zone(zip_code: str) -> str:
    zip_num = int(zip_code)
    for low, high, zone in ZIP_RANGE_ZONES:
        if low <= zip_num <= high:
            return zone
    return DEFAULT_ZONE


def lookup_zone(zip_code: str) -> ZoneInfo:
    """Return the hardiness zone for a 5-digit US ``zip_code``.

    Known ZIP codes come from the bundled table. Others are approximated from
    broad ZIP ranges.
    """
    zip_code = str(zip_code).strip()
    if not _ZIP_PATTERN.match(zip_code):
        raise ValueError("Invalid ZIP code format. Please provide a 5-digit US ZIP code.")

    table = load_dataset(DATA_FILE)
    entry = table.get(zip_code) if isinstance(table, Mapping) else None
    label = entry.get("zone") if isinstance(entry, Mapping) else None
    if not label:
        label = _fallback_zone(zip_code)

    number, letter = parse_zone_label(label)
    return ZoneInfo(zip=zip_code, zone=f"{number}{letter}", zone_number=number, zone_letter=letter)
