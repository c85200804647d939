"""World generation engine."""

from .classification import resolve_derived, trade_codes_for, travel_code_for
from .editing import WorldEditor
from .factions import (
    add_faction,
    generate_factions,
    random_faction,
    regenerate_faction,
    remove_faction,
)
from .subsector_generator import WorldAbundance, generate_subsector, insert_random_world
from .tables import TableStore, find_by_key, load_table, load_tables
from .world_generator import GENERATION_STAGES, GenerationStage, WorldGenerator

__all__ = [
    "resolve_derived",
    "trade_codes_for",
    "travel_code_for",
    "WorldEditor",
    "add_faction",
    "generate_factions",
    "random_faction",
    "regenerate_faction",
    "remove_faction",
    "WorldAbundance",
    "generate_subsector",
    "insert_random_world",
    "TableStore",
    "find_by_key",
    "load_table",
    "load_tables",
    "GENERATION_STAGES",
    "GenerationStage",
    "WorldGenerator",
]
