"""Themed plant bundles built from zone fit and weighted ecological criteria.

Each theme is described declaratively in ``bundles/bundle_themes.yaml``: a
list of required attribute rules plus a table of bonus rules. Candidates must
satisfy every requirement and be ideal for the target zone; their score is the
zone score plus the weights of all matching bonus rules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .catalog import get_plants
from .constants import BUNDLE_MAX_PLANTS, BUNDLE_MIN_PLANTS, BUNDLE_MIN_USEFUL
from .plant import Plant
from .utils import load_dataset
from .zone_ranking import is_ideal_for_zone, zone_score

_LOGGER = logging.getLogger(__name__)

DATA_FILE = "bundles/bundle_themes.yaml"

BEGINNER_STARTER = "beginner-starter"
POLLINATOR_GARDEN = "pollinator-garden"
NATIVE_GARDEN = "native-garden"
SHADE_GARDEN = "shade-garden"
LOW_WATER_GARDEN = "low-water-garden"
FULL_SUN_GARDEN = "full-sun-garden"

BUNDLE_IDS: tuple[str, ...] = (
    BEGINNER_STARTER,
    POLLINATOR_GARDEN,
    NATIVE_GARDEN,
    SHADE_GARDEN,
    LOW_WATER_GARDEN,
    FULL_SUN_GARDEN,
)

_OPERATORS = {"is_true", "eq", "ne", "contains"}

__all__ = [
    "BUNDLE_IDS",
    "Rule",
    "BundleTheme",
    "PlantBundle",
    "get_theme",
    "score_candidate",
    "build_bundle",
    "get_bundle",
    "get_beginner_starter_pack",
    "get_pollinator_garden_pack",
    "get_native_garden_pack",
    "get_shade_garden_pack",
    "get_low_water_garden_pack",
    "get_full_sun_garden_pack",
    "get_all_bundles",
]


@dataclass(slots=True, frozen=True)
class Rule:
    """Attribute check applied to a plant."""

    field: str
    op: str
    value: Any = None
    weight: int = 0

    def matches(self, plant: Plant) -> bool:
        actual = getattr(plant, self.field)
        if self.op == "is_true":
            return actual is True
        if self.op == "eq":
            return actual == self.value
        if self.op == "ne":
            return actual != self.value
        return self.value in (actual or ())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        op = str(data.get("op", "eq"))
        if op not in _OPERATORS:
            raise ValueError(f"Unknown bundle rule operator: {op}")
        field_name = str(data["field"])
        if field_name not in Plant.__dataclass_fields__:
            raise ValueError(f"Unknown plant attribute in bundle rule: {field_name}")
        return cls(
            field=field_name,
            op=op,
            value=data.get("value"),
            weight=int(data.get("weight", 0)),
        )


@dataclass(slots=True, frozen=True)
class BundleTheme:
    """Selection and scoring rules for one bundle kind."""

    id: str
    name: str
    description: str
    criteria: tuple[str, ...]
    require: tuple[Rule, ...]
    bonus: tuple[Rule, ...]

    def accepts(self, plant: Plant) -> bool:
        return all(rule.matches(plant) for rule in self.require)


@dataclass(slots=True, frozen=True)
class PlantBundle:
    """A named collection of plants selected for a theme and zone."""

    id: str
    name: str
    description: str
    plants: tuple[Plant, ...]
    criteria: tuple[str, ...]

    def as_dict(self) -> dict[str, Any]:
        """Return a serializable representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "plants": [p.as_dict() for p in self.plants],
            "criteria": list(self.criteria),
        }


def _themes() -> dict[str, BundleTheme]:
    # parsed per call from the cached dataset so refresh_catalog() reloads it
    data = load_dataset(DATA_FILE)
    themes: dict[str, BundleTheme] = {}
    for bundle_id, info in data.items():
        themes[bundle_id] = BundleTheme(
            id=bundle_id,
            name=str(info.get("name", bundle_id)),
            description=str(info.get("description", "")),
            criteria=tuple(str(c) for c in info.get("criteria", ())),
            require=tuple(Rule.from_dict(r) for r in info.get("require", ())),
            bonus=tuple(Rule.from_dict(r) for r in info.get("bonus", ())),
        )
    return themes


def get_theme(bundle_id: str) -> BundleTheme:
    """Return the theme for ``bundle_id``; unknown ids raise ``KeyError``."""
    return _themes()[bundle_id]


def score_candidate(theme: BundleTheme, plant: Plant, zone: int) -> int:
    """Return the zone score of ``plant`` plus the theme's matching bonuses."""
    score = zone_score(plant, zone)
    for rule in theme.bonus:
        if rule.matches(plant):
            score += rule.weight
    return score


def _catalog(plants: Iterable[Plant] | None) -> Iterable[Plant]:
    return get_plants() if plants is None else plants


def build_bundle(theme: BundleTheme, zone: int, plants: Iterable[Plant]) -> PlantBundle:
    """Return the bundle ``theme`` selects from ``plants`` for ``zone``."""
    scored = [
        (score_candidate(theme, plant, zone), plant)
        for plant in plants
        if theme.accepts(plant) and is_ideal_for_zone(plant, zone)
    ]
    scored.sort(key=lambda item: -item[0])

    count = min(BUNDLE_MAX_PLANTS, max(BUNDLE_MIN_PLANTS, len(scored)))
    selected = tuple(plant for _, plant in scored[:count])
    _LOGGER.debug(
        "Bundle %s zone %s: %d candidates, %d selected",
        theme.id, zone, len(scored), len(selected),
    )
    return PlantBundle(
        id=theme.id,
        name=theme.name,
        description=theme.description,
        plants=selected,
        criteria=theme.criteria,
    )


def get_bundle(bundle_id: str, zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Return bundle ``bundle_id`` for ``zone``."""
    return build_bundle(get_theme(bundle_id), zone, _catalog(plants))


def get_beginner_starter_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Easy, pet-safe plants without high water needs."""
    return get_bundle(BEGINNER_STARTER, zone, plants)


def get_pollinator_garden_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Pollinator-friendly plants, natives first."""
    return get_bundle(POLLINATOR_GARDEN, zone, plants)


def get_native_garden_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Native plants weighted toward pollinator value and drought tolerance."""
    return get_bundle(NATIVE_GARDEN, zone, plants)


def get_shade_garden_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Plants tolerating shade."""
    return get_bundle(SHADE_GARDEN, zone, plants)


def get_low_water_garden_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Drought-resistant plants with low water needs."""
    return get_bundle(LOW_WATER_GARDEN, zone, plants)


def get_full_sun_garden_pack(zone: int, plants: Iterable[Plant] | None = None) -> PlantBundle:
    """Plants for full sun."""
    return get_bundle(FULL_SUN_GARDEN, zone, plants)


def get_all_bundles(zone: int, plants: Iterable[Plant] | None = None) -> list[PlantBundle]:
    """Return every bundle holding at least three plants for ``zone``."""
    source = list(_catalog(plants))
    bundles = [get_bundle(bundle_id, zone, source) for bundle_id in BUNDLE_IDS]
    return [b for b in bundles if len(b.plants) >= BUNDLE_MIN_USEFUL]
