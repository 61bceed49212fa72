"""Load the bundled plant catalog into read-only :class:`Plant` records.

The catalog is the only part of the package that touches the filesystem. Raw
records are merged with per-plant overrides, validated against the plant JSON
schema, enriched by :mod:`plant_finder.inference` and converted to an
immutable tuple consumed by the ranking and recommendation modules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import cache
from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator

from .filters import matches_zone
from .inference import apply_inference
from .log_utils import warn_record
from .plant import Plant
from .utils import clear_dataset_cache, load_dataset

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

_LOGGER = logging.getLogger(__name__)

CATALOG_FILE = "plants/plant_catalog.json"
OVERRIDES_FILE = "plants/plant_overrides.json"
SCHEMA_FILE = "schema/plant.schema.json"

__all__ = [
    "CatalogError",
    "apply_overrides",
    "validate_catalog",
    "load_catalog",
    "get_plants",
    "get_plant_by_id",
    "get_plants_for_zone",
    "get_curated_plants_for_zone",
    "catalog_frame",
    "refresh_catalog",
]


class CatalogError(ValueError):
    """Raised when the catalog dataset does not hold a list of records."""


@cache
def _validator() -> Draft202012Validator:
    schema = load_dataset(SCHEMA_FILE)
    return Draft202012Validator(schema)


def _record_errors(record: Any) -> list[str]:
    issues: list[str] = []
    for err in _validator().iter_errors(record):
        location = ".".join(str(part) for part in err.absolute_path) or "<root>"
        issues.append(f"{location}: {err.message}")
    return issues


def validate_catalog(records: Iterable[Any]) -> list[str]:
    """Return human readable schema errors for ``records`` (empty if valid)."""
    issues: list[str] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        label = record.get("id", f"#{index}") if isinstance(record, Mapping) else f"#{index}"
        issues.extend(f"{label}: {msg}" for msg in _record_errors(record))
        if isinstance(record, Mapping) and "id" in record:
            if record["id"] in seen:
                issues.append(f"{label}: duplicate id")
            seen.add(record["id"])
    return issues


def apply_overrides(
    record: Mapping[str, Any], overrides: Mapping[str, Mapping[str, Any]]
) -> dict[str, Any]:
    """Return ``record`` with its entry from ``overrides`` applied.

    Override fields replace catalog values, except ``notes`` which keeps the
    catalog text when the override leaves it empty.
    """
    merged = dict(record)
    override = overrides.get(str(record.get("id")))
    if not override:
        return merged
    merged.update({k: v for k, v in override.items() if k != "id"})
    merged["notes"] = override.get("notes") or record.get("notes")
    return merged


def load_catalog(
    records: Iterable[Mapping[str, Any]] | None = None,
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
) -> tuple[Plant, ...]:
    """Return plants built from ``records``.

    The bundled datasets are used when arguments are omitted. Records failing
    schema validation are skipped with a warning; later duplicates of an id
    are ignored.
    """
    if records is None:
        records = load_dataset(CATALOG_FILE)
        if not isinstance(records, list):
            raise CatalogError(f"{CATALOG_FILE} must contain a list of plant records")
    if overrides is None:
        overrides = load_dataset(OVERRIDES_FILE)
        if not isinstance(overrides, Mapping):
            overrides = {}

    plants: list[Plant] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        merged = apply_overrides(record, overrides) if isinstance(record, Mapping) else record
        errors = _record_errors(merged)
        if errors:
            label = merged.get("id", f"#{index}") if isinstance(merged, Mapping) else f"#{index}"
            warn_record(_LOGGER, "invalid", label, "; ".join(errors))
            continue
        if merged["id"] in seen:
            warn_record(_LOGGER, "duplicate", merged["id"], "duplicate plant id skipped")
            continue
        seen.add(merged["id"])
        zone_min, zone_max = merged.get("zoneMin"), merged.get("zoneMax")
        if zone_min is not None and zone_max is not None and zone_min > zone_max:
            warn_record(_LOGGER, "zones", merged["id"], "reversed zone range swapped")
        plants.append(Plant.from_dict(apply_inference(merged)))

    _LOGGER.debug("Loaded %d plants", len(plants))
    return tuple(plants)


@cache
def get_plants() -> tuple[Plant, ...]:
    """Return the bundled catalog, loaded once per process."""
    return load_catalog()


def get_plant_by_id(plant_id: str, plants: Iterable[Plant] | None = None) -> Plant | None:
    """Return the plant with ``plant_id`` or ``None``."""
    for plant in get_plants() if plants is None else plants:
        if plant.id == plant_id:
            return plant
    return None


def get_plants_for_zone(zone: int, plants: Iterable[Plant] | None = None) -> list[Plant]:
    """Return plants whose range includes ``zone``; unknown ranges are kept."""
    source = get_plants() if plants is None else plants
    return [p for p in source if matches_zone(p, zone)]


def get_curated_plants_for_zone(zone: int, plants: Iterable[Plant] | None = None) -> list[Plant]:
    """Return zone-suitable plants hand picked as starters for ``zone``."""
    return [p for p in get_plants_for_zone(zone, plants) if zone in p.curated_for_zones]


def catalog_frame(plants: Iterable[Plant] | None = None) -> pd.DataFrame:
    """Return ``plants`` as a :class:`pandas.DataFrame` indexed by id."""

    import pandas as pd

    source = get_plants() if plants is None else plants
    rows = [p.as_dict() for p in source]
    frame = pd.DataFrame(rows)
    if not frame.empty:
        frame = frame.set_index("id")
    return frame


def refresh_catalog() -> None:
    """Clear cached datasets so the next call reloads the catalog.

    Bundle themes are read through the same dataset cache and reload too.
    """
    clear_dataset_cache()
    _validator.cache_clear()
    get_plants.cache_clear()
