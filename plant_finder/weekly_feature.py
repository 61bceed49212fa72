"""Weekly featured plant selection.

The pick is a pure function of the zone, the catalog and the calendar week of
``today``: every call within the same week returns the same plant.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date

from .catalog import get_plants
from .constants import NON_TOXIC, WATER_LOW
from .plant import Plant
from .zone_ranking import is_ideal_for_zone

__all__ = [
    "week_number",
    "week_seed",
    "seeded_random",
    "feature_score",
    "get_plant_of_the_week",
    "get_selection_reasons",
]

CANDIDATE_SHARE = 0.5


def week_number(day: date) -> int:
    """Return the week of the year for ``day`` (weeks start on Sunday).

    Week 1 is the partial week containing January 1st.
    """
    first = date(day.year, 1, 1)
    past_days = (day - first).days
    # Sunday = 0
    offset = (first.weekday() + 1) % 7
    return math.ceil((past_days + offset + 1) / 7)


def week_seed(day: date) -> int:
    """Return the selection seed for the week containing ``day``."""
    return day.year * 100 + week_number(day)


def seeded_random(seed: int) -> float:
    """Return a deterministic pseudo-random number in ``[0, 1)`` for ``seed``."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def feature_score(plant: Plant) -> int:
    """Return the preference score used to shortlist featured plants."""
    score = 0
    if plant.is_pollinator_friendly is True:
        score += 3
    if plant.beginner_friendly is True:
        score += 2
    if plant.is_native is True:
        score += 2
    if plant.toxicity_to_pets == NON_TOXIC:
        score += 1
    if plant.image_url:
        score += 1
    return score


def get_plant_of_the_week(
    zone: int,
    plants: Iterable[Plant] | None = None,
    *,
    today: date | None = None,
) -> Plant | None:
    """Return the featured plant for ``zone`` during the week of ``today``.

    The best scoring half of the plants ideal for ``zone`` are shortlisted and
    one is chosen with a generator seeded by year and week. When no plant
    suits the zone the first catalog plant is returned, or ``None`` for an
    empty catalog.
    """
    source = list(get_plants() if plants is None else plants)
    zone_plants = [p for p in source if is_ideal_for_zone(p, zone)]
    if not zone_plants:
        return source[0] if source else None

    ranked = sorted(zone_plants, key=lambda p: -feature_score(p))
    count = max(1, math.ceil(len(ranked) * CANDIDATE_SHARE))
    candidates = ranked[:count]

    day = today or date.today()
    index = math.floor(seeded_random(week_seed(day)) * len(candidates))
    return candidates[min(index, len(candidates) - 1)]


def get_selection_reasons(plant: Plant) -> list[str]:
    """Return display reasons derived from the plant's attributes."""
    reasons: list[str] = []
    if plant.is_pollinator_friendly is True:
        reasons.append("Attracts beneficial pollinators")
    if plant.is_native is True:
        reasons.append("Native to your region")
    if plant.beginner_friendly is True:
        reasons.append("Perfect for beginners")
    if plant.toxicity_to_pets == NON_TOXIC:
        reasons.append("Safe for pets")
    if plant.water_needs == WATER_LOW:
        reasons.append("Drought tolerant")
    return reasons
