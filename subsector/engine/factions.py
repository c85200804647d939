"""Faction sub-generator and faction list editing."""

from typing import List

from ..models.records import safe_mutate
from ..models.world import Faction, World
from ..utils.constants import DEFAULT_FACTION_NAME
from ..utils.rng import DiceRNG, clamp_to_table_bounds
from .tables import TableStore


def random_faction(tables: TableStore, rng: DiceRNG) -> Faction:
    """Roll a faction's strength and government independently on 2d6.

    The faction's government has no connection to the world's own government.
    """
    strength_index = clamp_to_table_bounds(rng.roll_2d(6), len(tables.faction_strengths))
    strength = tables.faction_strengths[strength_index]
    gov_index = clamp_to_table_bounds(rng.roll_2d(6), len(tables.governments))

    return Faction(
        name=DEFAULT_FACTION_NAME,
        strength_code=strength.code,
        strength=strength.strength,
        government=tables.governments[gov_index],
    )


def faction_count_modifier(government_code: int) -> int:
    """More factions under anarchy or balkanisation, fewer under strongmen."""
    if government_code in (0, 7):
        return 1
    if government_code >= 10:
        return -1
    return 0


def generate_factions(world: World, tables: TableStore, rng: DiceRNG) -> List[Faction]:
    """Roll 1d3 (adjusted by government) factions for a populated world.

    Uninhabited worlds get none, and a negative count yields none.
    """
    if world.population.code == 0:
        return []

    count = rng.roll_1d(3) + faction_count_modifier(world.government.code)
    return [random_faction(tables, rng) for _ in range(max(0, count))]


def add_faction(world: World, tables: TableStore, rng: DiceRNG) -> int:
    """Append a random faction and return its index."""
    world.factions.append(random_faction(tables, rng))
    return len(world.factions) - 1


def remove_faction(world: World, index: int) -> int:
    """Remove the faction at `index` and return the nearest valid index.

    Does nothing and returns 0 if `index` is out of range.
    """
    if not (0 <= index < len(world.factions)):
        return 0

    del world.factions[index]
    if not world.factions:
        return 0
    return min(index, len(world.factions) - 1)


def regenerate_faction(world: World, index: int, tables: TableStore, rng: DiceRNG) -> bool:
    """Re-roll the faction at `index`, keeping its name and any edited description.

    Returns:
        True if a faction was regenerated, False if `index` was out of range
    """
    if not (0 <= index < len(world.factions)):
        return False

    old = world.factions[index]
    new = random_faction(tables, rng)
    new.name = old.name
    new.government = safe_mutate(old.government, new.government, tables.governments)
    world.factions[index] = new
    return True
