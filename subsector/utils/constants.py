"""Subsector generation configuration constants."""

from pathlib import Path

# Grid dimensions (1-based, inclusive)
COLUMNS = 8
ROWS = 10

# Subsector generation
WORLD_PRESENCE_TARGET = 4  # 1d6 + abundance modifier must reach this to place a world
DEFAULT_SUBSECTOR_NAME = "Subsector"

# World attributes
SIZE_MIN = 0
SIZE_MAX = 10
TECH_LEVEL_MIN = 0
TECH_LEVEL_MAX = 15
NUM_WORLD_TAGS = 2
DEFAULT_FACTION_NAME = "Unnamed"

# Reference tables bundled with the package
TABLE_DIR = Path(__file__).parent.parent / "data" / "tables"

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
