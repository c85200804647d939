"""Utility functions and constants for the subsector generator."""

from .constants import (
    COLUMNS,
    DEFAULT_FACTION_NAME,
    DEFAULT_SUBSECTOR_NAME,
    NUM_WORLD_TAGS,
    RNG_SEED_DEFAULT,
    ROWS,
    SIZE_MAX,
    SIZE_MIN,
    TABLE_DIR,
    TECH_LEVEL_MAX,
    TECH_LEVEL_MIN,
    WORLD_PRESENCE_TARGET,
)
from .errors import (
    AssetLoadError,
    EmptySourceError,
    ErrorType,
    OutOfBoundsError,
    SubsectorError,
    SubsectorParseError,
)
from .naming import random_name, random_names
from .rng import DiceRNG, clamp, clamp_to_table_bounds

__all__ = [
    "COLUMNS",
    "DEFAULT_FACTION_NAME",
    "DEFAULT_SUBSECTOR_NAME",
    "NUM_WORLD_TAGS",
    "RNG_SEED_DEFAULT",
    "ROWS",
    "SIZE_MAX",
    "SIZE_MIN",
    "TABLE_DIR",
    "TECH_LEVEL_MAX",
    "TECH_LEVEL_MIN",
    "WORLD_PRESENCE_TARGET",
    "AssetLoadError",
    "EmptySourceError",
    "ErrorType",
    "OutOfBoundsError",
    "SubsectorError",
    "SubsectorParseError",
    "random_name",
    "random_names",
    "DiceRNG",
    "clamp",
    "clamp_to_table_bounds",
]
