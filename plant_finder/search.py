"""Free-text catalog search.

Queries are interpreted in three steps. A hardiness zone reference such as
``zone 6``, ``zone:6``, ``z6`` or a half-zone label like ``zone 6b`` filters
to that zone. Otherwise the first
recognized attribute keyword (``native``, ``pet safe``, ``drought`` ...)
filters to plants with that attribute. Anything else falls back to fuzzy
matching over the descriptive fields.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from difflib import SequenceMatcher

from .constants import (FULL_SUN, MAX_ZONE, MIN_ZONE, NON_TOXIC, PART_SUN,
                        SHADE, TOXIC, WATER_HIGH, WATER_LOW, WATER_MEDIUM)
from .filters import matches_zone
from .plant import Plant
from .zone_ranking import rank_plants

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "FUZZY_THRESHOLD",
    "FIELD_WEIGHTS",
    "parse_zone_query",
    "match_keyword",
    "fuzzy_search",
    "search_plants",
]

FUZZY_THRESHOLD = 0.6

FIELD_WEIGHTS: dict[str, float] = {
    "common_name": 2.0,
    "scientific_name": 1.5,
    "plant_type": 1.0,
    "pollinators": 1.0,
    "sun_exposure": 0.5,
    "water_needs": 0.5,
    "suggested_use": 1.0,
    "description": 0.75,
}

_ZONE_PATTERN = re.compile(r"\b(?:zone\s+|zone:\s*|z)(\d{1,2})(?!\d)", re.IGNORECASE)
# "toxic" must not fire on "non-toxic" / "non toxic"
_TOXIC_PATTERN = re.compile(r"(?<!non-)(?<!non )\btoxic")
_WORD_PATTERN = re.compile(r"[\w']+")

Predicate = Callable[[Plant], bool]


def _contains(*phrases: str) -> Callable[[str], bool]:
    return lambda query: any(phrase in query for phrase in phrases)


# (keyword, query test, plant predicate) in priority order
_KEYWORDS: tuple[tuple[str, Callable[[str], bool], Predicate], ...] = (
    ("native", _contains("native"), lambda p: p.is_native is True),
    ("pollinator", _contains("pollinator"), lambda p: p.is_pollinator_friendly is True),
    ("toxic", lambda q: bool(_TOXIC_PATTERN.search(q)), lambda p: p.toxicity_to_pets == TOXIC),
    ("non-toxic", _contains("non-toxic", "non toxic"), lambda p: p.toxicity_to_pets == NON_TOXIC),
    ("pet safe", _contains("pet safe", "pet friendly"), lambda p: p.toxicity_to_pets == NON_TOXIC),
    ("beginner", _contains("beginner"), lambda p: p.beginner_friendly is True),
    ("full sun", _contains("full sun"), lambda p: FULL_SUN in p.sun_exposure),
    ("part sun", _contains("part sun"), lambda p: PART_SUN in p.sun_exposure),
    ("shade", _contains("shade"), lambda p: SHADE in p.sun_exposure),
    ("low water", _contains("low water", "drought"), lambda p: p.water_needs == WATER_LOW),
    ("medium water", _contains("medium water"), lambda p: p.water_needs == WATER_MEDIUM),
    ("high water", _contains("high water"), lambda p: p.water_needs == WATER_HIGH),
)


def parse_zone_query(query: str) -> int | None:
    """Return the hardiness zone referenced by ``query`` if any.

    Only zones between 1 and 13 are recognized.
    """
    match = _ZONE_PATTERN.search(query.strip())
    if not match:
        return None
    zone = int(match.group(1))
    if MIN_ZONE <= zone <= MAX_ZONE:
        return zone
    return None


def match_keyword(query: str) -> str | None:
    """Return the first attribute keyword recognized in ``query``."""
    text = query.strip().lower()
    for keyword, test, _ in _KEYWORDS:
        if test(text):
            return keyword
    return None


def _field_text(plant: Plant, name: str) -> str:
    value = getattr(plant, name)
    if value is None:
        return ""
    if isinstance(value, tuple):
        return " ".join(value)
    return str(value)


def _similarity(query: str, text: str) -> float:
    """Return the best match ratio of ``query`` against ``text``.

    A substring hit scores ``1.0``. Otherwise ``query`` is compared with each
    run of words in ``text`` holding as many words as the query.
    """
    text = text.lower().replace("-", " ")
    if not text:
        return 0.0
    if query in text:
        return 1.0
    words = _WORD_PATTERN.findall(text)
    size = max(1, len(query.split()))
    best = 0.0
    for start in range(max(1, len(words) - size + 1)):
        window = " ".join(words[start:start + size])
        ratio = SequenceMatcher(None, query, window).ratio()
        if ratio > best:
            best = ratio
    return best


def fuzzy_search(
    plants: Iterable[Plant],
    query: str,
    threshold: float = FUZZY_THRESHOLD,
) -> list[Plant]:
    """Return plants loosely matching ``query`` best first.

    Plants whose closest field is below ``threshold`` are left out. The rest
    are ordered by their best weighted field similarity, ties keeping the
    input order.
    """
    needle = query.strip().lower().replace("-", " ")
    if not needle:
        return list(plants)

    scored: list[tuple[float, Plant]] = []
    for plant in plants:
        best_raw = 0.0
        best_weighted = 0.0
        for name, weight in FIELD_WEIGHTS.items():
            sim = _similarity(needle, _field_text(plant, name))
            best_raw = max(best_raw, sim)
            best_weighted = max(best_weighted, sim * weight)
        if best_raw >= threshold:
            scored.append((best_weighted, plant))

    scored.sort(key=lambda item: -item[0])
    return [plant for _, plant in scored]


def search_plants(
    plants: Iterable[Plant],
    query: str | None,
    zone: int | None = None,
) -> list[Plant]:
    """Return plants matching ``query`` in browse order.

    Zone and keyword queries return the matching plants ranked with
    :func:`~plant_finder.zone_ranking.rank_plants`; a zone named in the query
    replaces ``zone``. Fuzzy results keep their relevance order.
    """
    plants = list(plants)
    if query is None or not query.strip():
        return rank_plants(plants, zone)

    query_zone = parse_zone_query(query)
    if query_zone is not None:
        _LOGGER.debug("Zone query %r -> zone %s", query, query_zone)
        matching = [p for p in plants if matches_zone(p, query_zone)]
        return rank_plants(matching, query_zone)

    text = query.strip().lower()
    for keyword, test, predicate in _KEYWORDS:
        if test(text):
            _LOGGER.debug("Keyword query %r -> %s", query, keyword)
            return rank_plants([p for p in plants if predicate(p)], zone)

    return fuzzy_search(plants, query)
