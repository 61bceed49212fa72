"""Convenient access to plant finder functionality."""

from __future__ import annotations

from . import (bundles, catalog, companions, filters, inference, search,
               weekly_feature, zone_lookup, zone_ranking)
from .bundles import *  # noqa: F401,F403
from .catalog import *  # noqa: F401,F403
from .companions import *  # noqa: F401,F403
from .filters import *  # noqa: F401,F403
from .inference import *  # noqa: F401,F403
from .plant import ChipFilters, Plant, PlantFilters
from .search import *  # noqa: F401,F403
from .weekly_feature import *  # noqa: F401,F403
from .zone_lookup import *  # noqa: F401,F403
from .zone_ranking import *  # noqa: F401,F403

__version__ = "0.3.0"

__all__ = sorted(
    set(zone_ranking.__all__)
    | set(filters.__all__)
    | set(search.__all__)
    | set(bundles.__all__)
    | set(companions.__all__)
    | set(weekly_feature.__all__)
    | set(inference.__all__)
    | set(catalog.__all__)
    | set(zone_lookup.__all__)
    | {"Plant", "PlantFilters", "ChipFilters"}
)
