"""Companion plant suggestions based on shared growing conditions."""

from __future__ import annotations

from collections.abc import Iterable

from .catalog import get_plants
from .constants import DEFAULT_COMPANION_LIMIT
from .plant import Plant
from .zone_ranking import zone_score

__all__ = ["SHARED_SUN_WEIGHT", "companion_score", "get_companion_plants"]

SHARED_SUN_WEIGHT = 25
SAME_WATER_BONUS = 30
BOTH_NATIVE_BONUS = 40
BOTH_POLLINATOR_BONUS = 35
TYPE_DIVERSITY_BONUS = 15


def companion_score(plant: Plant, candidate: Plant, zone: int) -> int:
    """Return how well ``candidate`` complements ``plant`` in ``zone``.

    Shared sun exposure, matching water needs and common native or pollinator
    value all add points. A different plant type adds a diversity bonus.
    Two unknown water needs count as matching and an unknown plant type
    differs from a known one.
    """
    score = zone_score(candidate, zone)
    shared_sun = [se for se in plant.sun_exposure if se in candidate.sun_exposure]
    score += SHARED_SUN_WEIGHT * len(shared_sun)
    if plant.water_needs == candidate.water_needs:
        score += SAME_WATER_BONUS
    if plant.is_native is True and candidate.is_native is True:
        score += BOTH_NATIVE_BONUS
    if plant.is_pollinator_friendly is True and candidate.is_pollinator_friendly is True:
        score += BOTH_POLLINATOR_BONUS
    if plant.plant_type != candidate.plant_type:
        score += TYPE_DIVERSITY_BONUS
    return score


def get_companion_plants(
    plant: Plant,
    zone: int,
    limit: int = DEFAULT_COMPANION_LIMIT,
    plants: Iterable[Plant] | None = None,
) -> list[Plant]:
    """Return up to ``limit`` companions for ``plant``, best first.

    ``plant`` itself is never suggested. Equal scores keep catalog order.
    """
    if limit <= 0:
        return []
    source = get_plants() if plants is None else plants
    scored = [
        (companion_score(plant, candidate, zone), candidate)
        for candidate in source
        if candidate.id != plant.id
    ]
    scored.sort(key=lambda item: -item[0])
    return [candidate for _, candidate in scored[:limit]]
