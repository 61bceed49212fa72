"""Hardiness zone compatibility scoring and catalog ordering."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from .constants import SCORE_CLOSE, SCORE_IDEAL, SCORE_POOR, SCORE_UNKNOWN
from .plant import Plant

__all__ = [
    "zone_score",
    "is_ideal_for_zone",
    "is_close_to_zone",
    "sort_by_zone_score",
    "default_sort",
    "rank_plants",
]


def zone_score(plant: Plant, zone: int) -> int:
    """Return how well ``plant`` fits hardiness ``zone``.

    ``100`` when the zone lies inside the plant's range, ``50`` when it is one
    zone beyond either bound or when the range is unknown and ``0`` otherwise.
    The zone itself is not validated.
    """
    if plant.zone_min is None or plant.zone_max is None:
        return SCORE_UNKNOWN
    if plant.zone_min <= zone <= plant.zone_max:
        return SCORE_IDEAL
    if abs(zone - plant.zone_min) == 1 or abs(zone - plant.zone_max) == 1:
        return SCORE_CLOSE
    return SCORE_POOR


def is_ideal_for_zone(plant: Plant, zone: int) -> bool:
    """Return ``True`` if ``zone`` falls within the plant's range."""
    return zone_score(plant, zone) == SCORE_IDEAL


def is_close_to_zone(plant: Plant, zone: int) -> bool:
    """Return ``True`` if the plant is ideal or within one zone."""
    return zone_score(plant, zone) >= SCORE_CLOSE


def sort_by_zone_score(plants: Iterable[Plant], zone: int) -> list[Plant]:
    """Return ``plants`` ordered by descending zone score.

    Plants with equal scores keep their original relative order.
    """
    return sorted(plants, key=lambda p: -zone_score(p, zone))


def _name_key(name: str) -> str:
    """Return ``name`` folded for alphabetical comparison (accents ignored)."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _default_key(plant: Plant) -> tuple:
    return (
        plant.is_native is not True,
        plant.is_pollinator_friendly is not True,
        plant.beginner_friendly is not True,
        _name_key(plant.common_name),
        plant.common_name,
    )


def default_sort(plants: Iterable[Plant]) -> list[Plant]:
    """Return ``plants`` ordered native, pollinator and beginner first.

    Each flag prefers ``True`` over ``False`` or unknown; remaining ties are
    broken alphabetically by common name, ignoring case and accents.
    """
    return sorted(plants, key=_default_key)


def rank_plants(plants: Iterable[Plant], zone: int | None = None) -> list[Plant]:
    """Return the browse ordering for ``plants``.

    Without a zone this is :func:`default_sort`. With a zone the plants are
    ordered by zone score and the default ordering breaks score ties.
    """
    ordered = default_sort(plants)
    if zone is None:
        return ordered
    return sort_by_zone_score(ordered, zone)
