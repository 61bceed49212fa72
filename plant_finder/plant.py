"""Plant records and filter selections consumed by the ranking engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .constants import (PLANT_TYPES, SPECIAL_ATTRIBUTES, SUN_EXPOSURES,
                        TOXICITY_UNKNOWN, TOXICITY_VALUES, WATER_NEEDS)
from .log_utils import warn_record

_LOGGER = logging.getLogger(__name__)

__all__ = ["Plant", "PlantFilters", "ChipFilters"]

# dataset key -> attribute name
_CAMEL_KEYS: dict[str, str] = {
    "id": "id",
    "commonName": "common_name",
    "scientificName": "scientific_name",
    "imageUrl": "image_url",
    "zoneMin": "zone_min",
    "zoneMax": "zone_max",
    "isNative": "is_native",
    "isPollinatorFriendly": "is_pollinator_friendly",
    "sunExposure": "sun_exposure",
    "soilPhRange": "soil_ph_range",
    "waterNeeds": "water_needs",
    "plantType": "plant_type",
    "bloomPeriod": "bloom_period",
    "spacingInches": "spacing_inches",
    "plantingDepthInches": "planting_depth_inches",
    "toxicityToPets": "toxicity_to_pets",
    "aspcaUrl": "aspca_url",
    "beginnerFriendly": "beginner_friendly",
    "curatedForZones": "curated_for_zones",
    "notes": "notes",
    "description": "description",
    "pollinators": "pollinators",
    "suggestedUse": "suggested_use",
}
_ATTR_KEYS = {v: k for k, v in _CAMEL_KEYS.items()}


def _opt_bool(value: Any) -> bool | None:
    if value is None:
        return None
    return bool(value)


def _opt_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _opt_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _choice(plant_id: str, name: str, value: Any, allowed: tuple[str, ...]) -> str | None:
    """Return ``value`` when it is one of ``allowed`` else ``None``."""
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in allowed:
        return text
    warn_record(_LOGGER, name, plant_id, f"ignoring unknown value {value!r}")
    return None


def _str_tuple(values: Any) -> tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(str(v) for v in values if v is not None and str(v).strip())


@dataclass(slots=True, frozen=True)
class Plant:
    """Read-only plant record."""

    id: str
    common_name: str = ""
    scientific_name: str = ""
    zone_min: int | None = None
    zone_max: int | None = None
    is_native: bool | None = None
    is_pollinator_friendly: bool | None = None
    beginner_friendly: bool | None = None
    toxicity_to_pets: str = TOXICITY_UNKNOWN
    sun_exposure: tuple[str, ...] = ()
    water_needs: str | None = None
    plant_type: str | None = None
    image_url: str | None = None
    bloom_period: str | None = None
    pollinators: tuple[str, ...] = ()
    suggested_use: str | None = None
    description: str | None = None
    notes: str | None = None
    aspca_url: str | None = None
    soil_ph_range: tuple[float, float] | None = None
    spacing_inches: float | None = None
    planting_depth_inches: float | None = None
    curated_for_zones: tuple[int, ...] = field(default_factory=tuple)

    @property
    def has_zone_range(self) -> bool:
        """Return ``True`` when both hardiness bounds are known."""
        return self.zone_min is not None and self.zone_max is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Plant:
        """Return a :class:`Plant` from a camelCase or snake_case mapping.

        Values outside the known vocabularies for sun exposure, water needs,
        plant type and pet toxicity are dropped and reported through
        :func:`~plant_finder.log_utils.warn_record`.
        """

        raw: dict[str, Any] = {}
        for key, value in data.items():
            attr = _CAMEL_KEYS.get(key, key)
            raw[attr] = value

        plant_id = _opt_str(raw.get("id"))
        if plant_id is None:
            raise ValueError("plant record is missing an id")

        sun: list[str] = []
        for value in _str_tuple(raw.get("sun_exposure")):
            choice = _choice(plant_id, "sun exposure", value, SUN_EXPOSURES)
            if choice and choice not in sun:
                sun.append(choice)

        toxicity = _choice(plant_id, "toxicity", raw.get("toxicity_to_pets"), TOXICITY_VALUES)

        ph = raw.get("soil_ph_range")
        ph_range: tuple[float, float] | None = None
        if isinstance(ph, Mapping):
            low, high = _opt_float(ph.get("min")), _opt_float(ph.get("max"))
            if low is not None and high is not None:
                ph_range = (low, high)
        elif isinstance(ph, list | tuple) and len(ph) == 2:
            low, high = _opt_float(ph[0]), _opt_float(ph[1])
            if low is not None and high is not None:
                ph_range = (low, high)

        curated = raw.get("curated_for_zones") or ()
        curated_zones = tuple(z for z in (_opt_int(v) for v in curated) if z is not None)

        return cls(
            id=plant_id,
            common_name=_opt_str(raw.get("common_name")) or "",
            scientific_name=_opt_str(raw.get("scientific_name")) or "",
            zone_min=_opt_int(raw.get("zone_min")),
            zone_max=_opt_int(raw.get("zone_max")),
            is_native=_opt_bool(raw.get("is_native")),
            is_pollinator_friendly=_opt_bool(raw.get("is_pollinator_friendly")),
            beginner_friendly=_opt_bool(raw.get("beginner_friendly")),
            toxicity_to_pets=toxicity or TOXICITY_UNKNOWN,
            sun_exposure=tuple(sun),
            water_needs=_choice(plant_id, "water needs", raw.get("water_needs"), WATER_NEEDS),
            plant_type=_choice(plant_id, "plant type", raw.get("plant_type"), PLANT_TYPES),
            image_url=_opt_str(raw.get("image_url")),
            bloom_period=_opt_str(raw.get("bloom_period")),
            pollinators=_str_tuple(raw.get("pollinators")),
            suggested_use=_opt_str(raw.get("suggested_use")),
            description=_opt_str(raw.get("description")),
            notes=_opt_str(raw.get("notes")),
            aspca_url=_opt_str(raw.get("aspca_url")),
            soil_ph_range=ph_range,
            spacing_inches=_opt_float(raw.get("spacing_inches")),
            planting_depth_inches=_opt_float(raw.get("planting_depth_inches")),
            curated_for_zones=curated_zones,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the record using the camelCase dataset keys.

        Attributes that are unknown are omitted.
        """

        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == ():
                continue
            if f.name == "soil_ph_range":
                value = {"min": value[0], "max": value[1]}
            elif isinstance(value, tuple):
                value = list(value)
            result[_ATTR_KEYS[f.name]] = value
        return result


# PlantFilters mapping keys accepted from callers
_FILTER_KEYS = {
    "zone": "zone",
    "nativeOnly": "native_only",
    "pollinatorFriendlyOnly": "pollinator_friendly_only",
    "excludeToxicToPets": "exclude_toxic_to_pets",
    "sunExposure": "sun_exposure",
    "plantType": "plant_type",
    "waterNeeds": "water_needs",
    "beginnerFriendlyOnly": "beginner_friendly_only",
}


@dataclass(slots=True, frozen=True)
class PlantFilters:
    """Browse filters. Unset fields impose no constraint."""

    zone: int | None = None
    native_only: bool = False
    pollinator_friendly_only: bool = False
    exclude_toxic_to_pets: bool = False
    sun_exposure: tuple[str, ...] = ()
    plant_type: tuple[str, ...] = ()
    water_needs: str | None = None
    beginner_friendly_only: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PlantFilters:
        """Return filters from a camelCase or snake_case mapping."""
        if not data:
            return cls()
        values: dict[str, Any] = {}
        for key, value in data.items():
            attr = _FILTER_KEYS.get(key, key)
            if value is None:
                continue
            if attr in ("sun_exposure", "plant_type"):
                value = _str_tuple(value)
            elif attr == "zone":
                value = _opt_int(value)
            elif attr == "water_needs":
                value = str(value)
            elif attr in ("native_only", "pollinator_friendly_only",
                          "exclude_toxic_to_pets", "beginner_friendly_only"):
                value = bool(value)
            else:
                continue
            values[attr] = value
        return cls(**values)


@dataclass(slots=True, frozen=True)
class ChipFilters:
    """Multi-select chip state from the browse page."""

    sun_exposure: tuple[str, ...] = ()
    water_needs: str | None = None
    special_attributes: tuple[str, ...] = ()
    plant_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        unknown = [a for a in self.special_attributes if a not in SPECIAL_ATTRIBUTES]
        if unknown:
            raise ValueError(f"Unknown special attributes: {', '.join(unknown)}")

    @classmethod
    def build(
        cls,
        sun_exposure: Iterable[str] = (),
        water_needs: str | None = None,
        special_attributes: Iterable[str] = (),
        plant_types: Iterable[str] = (),
    ) -> ChipFilters:
        """Return chip filters from any iterables."""
        return cls(
            sun_exposure=tuple(sun_exposure),
            water_needs=water_needs,
            special_attributes=tuple(special_attributes),
            plant_types=tuple(plant_types),
        )
