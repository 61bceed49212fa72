"""Attribute filters for narrowing a plant collection.

A filter only removes a plant when the plant's known attributes contradict
the selection. Unknown zone ranges, sun exposure, water needs and plant types
therefore pass. The ``*_only`` flags ask for a confirmed attribute, so a plant
whose native, pollinator or beginner status is unknown does not satisfy them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .constants import NON_TOXIC, TOXIC
from .plant import ChipFilters, Plant, PlantFilters

__all__ = [
    "matches_zone",
    "matches_sun_exposure",
    "matches_water_needs",
    "matches_plant_type",
    "matches_special_attribute",
    "filter_plants",
    "apply_chip_filters",
]


def matches_zone(plant: Plant, zone: int) -> bool:
    """Return ``False`` only when the plant's known range excludes ``zone``."""
    if not plant.has_zone_range:
        return True
    return plant.zone_min <= zone <= plant.zone_max


def matches_sun_exposure(plant: Plant, selected: Iterable[str]) -> bool:
    selected = set(selected)
    if not selected or not plant.sun_exposure:
        return True
    return any(se in selected for se in plant.sun_exposure)


def matches_water_needs(plant: Plant, water_needs: str | None) -> bool:
    if not water_needs or plant.water_needs is None:
        return True
    return plant.water_needs == water_needs


def matches_plant_type(plant: Plant, selected: Iterable[str]) -> bool:
    selected = set(selected)
    if not selected or plant.plant_type is None:
        return True
    return plant.plant_type in selected


def matches_special_attribute(plant: Plant, attribute: str) -> bool:
    """Return ``True`` if ``plant`` has the chip ``attribute`` confirmed."""
    if attribute == "native":
        return plant.is_native is True
    if attribute == "pollinator":
        return plant.is_pollinator_friendly is True
    if attribute == "beginner-friendly":
        return plant.beginner_friendly is True
    if attribute == "toxic":
        return plant.toxicity_to_pets == TOXIC
    if attribute == "non-toxic":
        return plant.toxicity_to_pets == NON_TOXIC
    raise ValueError(f"Unknown special attribute: {attribute}")


def _matches_filters(plant: Plant, filters: PlantFilters) -> bool:
    if filters.zone is not None and not matches_zone(plant, filters.zone):
        return False
    if filters.native_only and plant.is_native is not True:
        return False
    if filters.pollinator_friendly_only and plant.is_pollinator_friendly is not True:
        return False
    if filters.exclude_toxic_to_pets and plant.toxicity_to_pets == TOXIC:
        return False
    if not matches_sun_exposure(plant, filters.sun_exposure):
        return False
    if not matches_plant_type(plant, filters.plant_type):
        return False
    if not matches_water_needs(plant, filters.water_needs):
        return False
    if filters.beginner_friendly_only and plant.beginner_friendly is not True:
        return False
    return True


def filter_plants(
    plants: Iterable[Plant],
    filters: PlantFilters | Mapping[str, Any] | None = None,
) -> list[Plant]:
    """Return the plants matching every dimension of ``filters``.

    ``filters`` may be a :class:`PlantFilters` or a mapping using the browse
    page keys (``nativeOnly``, ``excludeToxicToPets`` ...). Order is kept.
    """
    if not isinstance(filters, PlantFilters):
        filters = PlantFilters.from_dict(filters)
    return [p for p in plants if _matches_filters(p, filters)]


def apply_chip_filters(plants: Iterable[Plant], chips: ChipFilters | None) -> list[Plant]:
    """Return plants matching the chip selections.

    Sun exposures and plant types match when any selected value applies.
    Special attributes must all hold.
    """
    if chips is None:
        return list(plants)
    result: list[Plant] = []
    for plant in plants:
        if not matches_sun_exposure(plant, chips.sun_exposure):
            continue
        if not matches_water_needs(plant, chips.water_needs):
            continue
        if not matches_plant_type(plant, chips.plant_types):
            continue
        if not all(matches_special_attribute(plant, a) for a in chips.special_attributes):
            continue
        result.append(plant)
    return result
