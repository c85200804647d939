"""Whole-subsector generation."""

import logging
from enum import Enum
from typing import Optional

from ..models.point import Point, all_points
from ..models.subsector import Subsector
from ..models.world import World
from ..utils.constants import COLUMNS, ROWS, WORLD_PRESENCE_TARGET
from ..utils.errors import OutOfBoundsError
from ..utils.naming import NAME_PATTERNS, random_name, random_names
from ..utils.rng import DiceRNG
from .tables import TableStore
from .world_generator import WorldGenerator

logger = logging.getLogger(__name__)


class WorldAbundance(Enum):
    """Preset world density, as a modifier to the 1d6 world presence roll."""

    RIFT = -2
    SPARSE = -1
    NOMINAL = 0
    DENSE = 1
    ABUNDANT = 2

    @property
    def modifier(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "WorldAbundance":
        """Look up a preset by case-insensitive name.

        Raises:
            ValueError: If no preset has that name
        """
        try:
            return cls[name.upper()]
        except KeyError:
            valid = ", ".join(a.name.lower() for a in cls)
            raise ValueError(f"Unknown world abundance '{name}' (must be one of: {valid})") from None


def generate_subsector(
    tables: TableStore,
    rng: Optional[DiceRNG] = None,
    world_abundance_modifier: int = 0,
    name: Optional[str] = None,
) -> Subsector:
    """Generate a complete subsector in one pass over the grid.

    Each hex independently gets a world when 1d6 + modifier reaches the
    presence target. Hexes are visited column by column so a given seed always
    produces the same subsector.

    Args:
        tables: Loaded reference tables
        rng: Dice roller (defaults to an unseeded one)
        world_abundance_modifier: Modifier to the presence roll (see WorldAbundance)
        name: Subsector name (defaults to a random name)

    Returns:
        Newly generated Subsector
    """
    rng = rng if rng is not None else DiceRNG()
    generator = WorldGenerator(tables, rng)

    # One name for the subsector, then one per hex so names never run out
    names = random_names(COLUMNS * ROWS + 1, rng)
    subsector = Subsector.empty(name if name is not None else names[0])
    world_names = iter(names[1:])

    for point in all_points():
        world_name = next(world_names)
        if rng.roll_1d(6) + world_abundance_modifier >= WORLD_PRESENCE_TARGET:
            subsector.insert(point, generator.generate(world_name, point))

    logger.info(
        f"Generated subsector {subsector.name} with {len(subsector)} worlds "
        f"(abundance modifier {world_abundance_modifier:+d})"
    )
    return subsector


def insert_random_world(
    subsector: Subsector, point: Point, generator: WorldGenerator
) -> Optional[World]:
    """Generate a randomly named world and insert it at `point`.

    Returns:
        The World displaced from `point`, if any

    Raises:
        OutOfBoundsError: If `point` is off the grid
    """
    # Checked before rolling so a bad point does not consume dice
    if not point.in_bounds:
        raise OutOfBoundsError(f"Can not insert a world at an out of bounds point: {point}")

    pattern = generator.rng.roll_uniform(0, len(NAME_PATTERNS) - 1)
    world = generator.generate(random_name(generator.rng, pattern), point)
    return subsector.insert(point, world)
