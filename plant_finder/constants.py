"""Central constants used across the plant finder."""

from __future__ import annotations

MIN_ZONE = 1
MAX_ZONE = 13

# Zone compatibility scores
SCORE_IDEAL = 100
SCORE_CLOSE = 50
SCORE_UNKNOWN = 50
SCORE_POOR = 0

FULL_SUN = "full-sun"
PART_SUN = "part-sun"
SHADE = "shade"
SUN_EXPOSURES: tuple[str, ...] = (FULL_SUN, PART_SUN, SHADE)

WATER_LOW = "low"
WATER_MEDIUM = "medium"
WATER_HIGH = "high"
WATER_NEEDS: tuple[str, ...] = (WATER_LOW, WATER_MEDIUM, WATER_HIGH)

TOXIC = "toxic"
NON_TOXIC = "non-toxic"
TOXICITY_UNKNOWN = "unknown"
TOXICITY_VALUES: tuple[str, ...] = (TOXIC, NON_TOXIC, TOXICITY_UNKNOWN)

PLANT_TYPES: tuple[str, ...] = (
    "tree",
    "shrub",
    "perennial",
    "annual",
    "vine",
    "groundcover",
    "grass",
    "herb",
    "vegetable",
    "fruit",
)

# Special attribute chips offered on the browse page
SPECIAL_ATTRIBUTES: tuple[str, ...] = (
    "native",
    "pollinator",
    "toxic",
    "non-toxic",
    "beginner-friendly",
)

# Bundle sizing
BUNDLE_MIN_PLANTS = 8
BUNDLE_MAX_PLANTS = 12
BUNDLE_MIN_USEFUL = 3

DEFAULT_COMPANION_LIMIT = 6
