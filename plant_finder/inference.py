"""Derive missing plant attributes from the data that is available.

The helpers operate on raw catalog records (camelCase mappings) before they
become :class:`~plant_finder.plant.Plant` objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constants import FULL_SUN, PART_SUN, SHADE, WATER_HIGH, WATER_LOW, WATER_MEDIUM

__all__ = [
    "infer_beginner_friendly",
    "infer_pollinator_friendly",
    "infer_water_needs",
    "infer_sun_exposure",
    "normalize_zone_range",
    "apply_inference",
]

BEGINNER_SCORE_THRESHOLD = 3


def infer_beginner_friendly(plant: Mapping[str, Any]) -> bool:
    """Return whether ``plant`` is easy to grow.

    An explicit ``beginnerFriendly`` value always wins. Otherwise points are
    awarded for native status (2), medium or high drought tolerance, low or
    medium water needs, a range covering zones 5-7, perennial habit and full
    sun tolerance (1 each). Three points or more is beginner friendly.
    """
    explicit = plant.get("beginnerFriendly")
    if explicit is not None:
        return bool(explicit)

    score = 0
    if plant.get("isNative") is True:
        score += 2
    if plant.get("droughtTolerance") in ("medium", "high"):
        score += 1
    if plant.get("waterNeeds") in (WATER_LOW, WATER_MEDIUM):
        score += 1
    zone_min, zone_max = plant.get("zoneMin"), plant.get("zoneMax")
    if zone_min is not None and zone_max is not None and zone_min <= 5 and zone_max >= 7:
        score += 1
    if plant.get("plantType") == "perennial":
        score += 1
    if FULL_SUN in (plant.get("sunExposure") or ()):
        score += 1
    return score >= BEGINNER_SCORE_THRESHOLD


def infer_pollinator_friendly(plant: Mapping[str, Any]) -> bool:
    """Return whether ``plant`` is likely to support pollinators."""
    explicit = plant.get("isPollinatorFriendly")
    if explicit is not None:
        return bool(explicit)
    if plant.get("pollinators"):
        return True
    # native flowering plants
    return bool(plant.get("isNative") and plant.get("bloomPeriod"))


def infer_water_needs(drought_tolerance: str | None) -> str | None:
    """Return water needs implied by a drought tolerance rating."""
    if not drought_tolerance:
        return None
    tolerance = drought_tolerance.lower()
    if tolerance == "high":
        return WATER_LOW
    if tolerance == "medium":
        return WATER_MEDIUM
    if tolerance in ("low", "none"):
        return WATER_HIGH
    return None


def infer_sun_exposure(shade_tolerance: str | None) -> list[str] | None:
    """Return sun exposure implied by a shade tolerance rating."""
    if not shade_tolerance:
        return None
    tolerance = shade_tolerance.lower()
    if tolerance == "intolerant":
        return [FULL_SUN]
    if tolerance == "intermediate":
        return [FULL_SUN, PART_SUN]
    if tolerance == "tolerant":
        return [PART_SUN, SHADE]
    return None


def normalize_zone_range(
    zone_min: int | None, zone_max: int | None
) -> tuple[int | None, int | None]:
    """Return ``(zone_min, zone_max)`` with ``zone_min <= zone_max``.

    A single known bound is used for both ends.
    """
    if zone_min is None and zone_max is None:
        return None, None
    if zone_max is None:
        return zone_min, zone_min
    if zone_min is None:
        return zone_max, zone_max
    if zone_min > zone_max:
        return zone_max, zone_min
    return zone_min, zone_max


def apply_inference(plant: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``plant`` with inferred attributes filled in."""
    enriched = dict(plant)

    enriched["beginnerFriendly"] = infer_beginner_friendly(enriched)
    enriched["isPollinatorFriendly"] = infer_pollinator_friendly(enriched)

    if not enriched.get("waterNeeds") and enriched.get("droughtTolerance"):
        enriched["waterNeeds"] = infer_water_needs(enriched["droughtTolerance"])

    if not enriched.get("sunExposure") and enriched.get("shadeTolerance"):
        enriched["sunExposure"] = infer_sun_exposure(enriched["shadeTolerance"])

    zone_min, zone_max = normalize_zone_range(enriched.get("zoneMin"), enriched.get("zoneMax"))
    enriched["zoneMin"] = zone_min
    enriched["zoneMax"] = zone_max
    return enriched
