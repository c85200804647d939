"""Staged world generation.

A world is built by running a fixed sequence of named stages. Each stage rolls
one group of attributes and may only read fields written by earlier stages;
the order is checked when a generator is constructed, so stages cannot be
reshuffled without the dependency violation being caught.
"""

import logging
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Sequence, Set, Tuple, TypeVar

from ..models.point import Point
from ..models.records import StarportClass, TableRecord, WorldTagRecord
from ..models.world import World
from ..utils.constants import (
    NUM_WORLD_TAGS,
    SIZE_MAX,
    SIZE_MIN,
    TECH_LEVEL_MAX,
    TECH_LEVEL_MIN,
)
from ..utils.rng import DiceRNG, clamp, clamp_to_table_bounds
from .classification import resolve_derived
from .factions import generate_factions
from .tables import TableStore

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TableRecord)


@dataclass(frozen=True)
class GenerationStage:
    """One step of world generation and the World fields it depends on."""

    name: str
    reads: Tuple[str, ...]
    writes: Tuple[str, ...]


GENERATION_STAGES: Tuple[GenerationStage, ...] = (
    GenerationStage("gas_giant", (), ("has_gas_giant",)),
    GenerationStage("size", (), ("size", "diameter")),
    GenerationStage("atmosphere", ("size",), ("atmosphere",)),
    GenerationStage("temperature", ("atmosphere",), ("temperature",)),
    GenerationStage("hydrographics", ("size", "atmosphere", "temperature"), ("hydrographics",)),
    GenerationStage(
        "population",
        ("size", "atmosphere", "hydrographics"),
        ("population", "unmodified_population"),
    ),
    GenerationStage("government", ("population", "unmodified_population"), ("government",)),
    GenerationStage("law_level", ("population", "government"), ("law_level",)),
    GenerationStage("factions", ("population", "government"), ("factions",)),
    GenerationStage("culture", (), ("culture",)),
    GenerationStage("world_tags", (), ("world_tags",)),
    GenerationStage("starport", ("population",), ("starport",)),
    GenerationStage(
        "tech_level",
        ("size", "atmosphere", "hydrographics", "population", "government", "starport"),
        ("tech_level",),
    ),
    GenerationStage("bases", ("starport",), ("has_naval_base", "has_scout_base", "has_research_base", "has_tas")),
)


def validate_stage_order(stages: Sequence[GenerationStage]) -> None:
    """Check that every stage only reads fields written by an earlier stage.

    Raises:
        ValueError: On a duplicate stage name or a read-before-write dependency
    """
    written: Set[str] = set()
    seen: Set[str] = set()
    for stage in stages:
        if stage.name in seen:
            raise ValueError(f"Duplicate generation stage: {stage.name}")
        seen.add(stage.name)

        missing = set(stage.reads) - written
        if missing:
            raise ValueError(
                f"Stage '{stage.name}' reads {sorted(missing)} before any stage writes them"
            )
        written.update(stage.writes)


# Temperature DM by atmosphere code
TEMPERATURE_ATMO_MODIFIERS: Dict[int, int] = {
    0: 0, 1: 0,
    2: -2, 3: -2,
    4: -1, 5: -1, 14: -1,
    6: 0, 7: 0,
    8: 1, 9: 1,
    10: 2, 13: 2, 15: 2,
    11: 6, 12: 6,
}


class BaseTargets(NamedTuple):
    """2d6 targets for each base type at a starport class."""

    naval: int
    scout: int
    research: int
    tas: int


GUARANTEED = 0
IMPOSSIBLE = 13  # above the 2d6 maximum

BASE_TARGETS: Dict[StarportClass, BaseTargets] = {
    StarportClass.A: BaseTargets(naval=8, scout=10, research=8, tas=GUARANTEED),
    StarportClass.B: BaseTargets(naval=8, scout=8, research=10, tas=GUARANTEED),
    StarportClass.C: BaseTargets(naval=IMPOSSIBLE, scout=8, research=10, tas=10),
    StarportClass.D: BaseTargets(naval=IMPOSSIBLE, scout=7, research=IMPOSSIBLE, tas=IMPOSSIBLE),
    StarportClass.E: BaseTargets(IMPOSSIBLE, IMPOSSIBLE, IMPOSSIBLE, IMPOSSIBLE),
    StarportClass.X: BaseTargets(IMPOSSIBLE, IMPOSSIBLE, IMPOSSIBLE, IMPOSSIBLE),
}

STARPORT_TECH_MODIFIERS: Dict[StarportClass, int] = {
    StarportClass.A: 6,
    StarportClass.B: 4,
    StarportClass.C: 2,
    StarportClass.D: 0,
    StarportClass.E: 0,
    StarportClass.X: -4,
}


def temperature_modifier(atmosphere_code: int) -> int:
    return TEMPERATURE_ATMO_MODIFIERS.get(atmosphere_code, 0)


def hydrographics_modifier(world: World) -> int:
    """Atmosphere DM plus a temperature DM for hot worlds.

    Thin, exotic and corrosive atmospheres give -4. Hot (10-11) and boiling (12)
    temperatures give -2 and -6, except under atmosphere 13.
    """
    atmo = world.atmosphere.code
    atmo_mod = -4 if atmo in (0, 1, 10, 11, 12) else 0
    temp_mod = 0
    if atmo != 13:
        temp = world.temperature.code
        if temp in (10, 11):
            temp_mod = -2
        elif temp == 12:
            temp_mod = -6
    return atmo_mod + temp_mod


def population_modifier(world: World) -> int:
    """Habitability DM: +1 for each of a good size, atmosphere and hydrographics, else -1."""
    size_mod = 1 if world.size in (7, 8, 9) else -1
    atmo_mod = 1 if 5 <= world.atmosphere.code <= 8 else -1
    hydro_mod = 1 if 2 <= world.hydrographics.code <= 8 else -1
    return size_mod + atmo_mod + hydro_mod


def starport_modifier(population_code: int) -> int:
    if population_code >= 10:
        return 2
    if population_code >= 8:
        return 1
    if population_code <= 2:
        return -2
    if population_code <= 4:
        return -1
    return 0


def tech_level_modifier(world: World) -> int:
    """Sum of the size, atmosphere, hydrographics, population, government and starport DMs."""
    size = world.size
    atmo = world.atmosphere.code
    hydro = world.hydrographics.code
    pop = world.population.code
    gov = world.government.code

    size_mod = 2 if size <= 1 else 1 if size <= 4 else 0
    atmo_mod = 1 if atmo <= 3 or 10 <= atmo <= 15 else 0
    hydro_mod = {0: 1, 9: 1, 10: 2}.get(hydro, 0)
    if 1 <= pop <= 5 or pop == 8:
        pop_mod = 1
    else:
        pop_mod = {9: 2, 10: 4}.get(pop, 0)
    gov_mod = {0: 1, 5: 1, 7: 2, 13: -2, 14: -2}.get(gov, 0)
    starport_mod = STARPORT_TECH_MODIFIERS[world.starport.starport_class]

    return size_mod + atmo_mod + hydro_mod + pop_mod + gov_mod + starport_mod


class WorldGenerator:
    """Rolls worlds against a loaded TableStore.

    Every stage is also available on its own (`generate_<stage>`, or `reroll`)
    so an editor can re-roll a single attribute. Re-rolling a stage never
    cascades to the stages that depend on it.
    """

    def __init__(
        self,
        tables: TableStore,
        rng: Optional[DiceRNG] = None,
        stages: Sequence[GenerationStage] = GENERATION_STAGES,
    ):
        """Initialize generator.

        Args:
            tables: Loaded reference tables
            rng: Dice roller (defaults to an unseeded one)
            stages: Stage order to run

        Raises:
            ValueError: If the stage order violates a dependency
        """
        validate_stage_order(stages)
        self.tables = tables
        self.rng = rng if rng is not None else DiceRNG()
        self.stages = tuple(stages)
        self._stage_names = {stage.name for stage in self.stages}

    def blank(self, name: str = "", location: Point = Point(1, 1)) -> World:
        """A world with every table field at its first row and nothing rolled."""
        t = self.tables
        return World(
            name=name,
            location=location,
            has_gas_giant=False,
            size=0,
            diameter=0,
            atmosphere=t.atmospheres[0],
            temperature=t.temperatures[0],
            hydrographics=t.hydrographics[0],
            population=t.populations[0],
            unmodified_population=0,
            government=t.governments[0],
            law_level=t.law_levels[0],
            factions=[],
            culture=t.cultures[0],
            world_tags=[t.world_tags[0] for _ in range(NUM_WORLD_TAGS)],
            starport=t.starports[0],
            tech_level=0,
        )

    def generate(self, name: str, location: Point) -> World:
        """Roll a complete, self-consistent world.

        Args:
            name: World name
            location: Hex the world will occupy

        Returns:
            Generated World with derived fields resolved
        """
        world = self.blank(name, location)
        for stage in self.stages:
            self.run_stage(world, stage.name)
        resolve_derived(world)

        logger.debug(f"Generated world {name} at {location}")
        return world

    def run_stage(self, world: World, stage_name: str) -> None:
        """Run one named stage against `world` without resolving derived fields.

        Raises:
            ValueError: If no stage has that name
        """
        if stage_name not in self._stage_names:
            raise ValueError(f"Unknown generation stage: {stage_name}")
        getattr(self, f"generate_{stage_name}")(world)

    def reroll(self, world: World, stage_name: str) -> World:
        """Re-run one stage, then re-resolve travel and trade codes."""
        self.run_stage(world, stage_name)
        return resolve_derived(world)

    def _pick(self, table: Sequence[R], index: int) -> R:
        return table[clamp_to_table_bounds(index, len(table))]

    def generate_gas_giant(self, world: World) -> None:
        world.has_gas_giant = self.rng.roll_2d(6) <= 9

    def generate_size(self, world: World) -> None:
        world.size = clamp(self.rng.roll_2d(6) - 2, SIZE_MIN, SIZE_MAX)
        median = 700 if world.size == 0 else 1600 * world.size
        world.diameter = self.rng.roll_uniform(median - 200, median + 200)

    def generate_atmosphere(self, world: World) -> None:
        roll = self.rng.roll_2d(6) - 7 + world.size
        world.atmosphere = self._pick(self.tables.atmospheres, roll)

    def generate_temperature(self, world: World) -> None:
        roll = self.rng.roll_2d(6) + temperature_modifier(world.atmosphere.code)
        world.temperature = self._pick(self.tables.temperatures, roll)

    def generate_hydrographics(self, world: World) -> None:
        # Tiny bodies cannot hold surface liquid
        if world.size <= 1:
            world.hydrographics = self.tables.hydrographics[0]
            return

        roll = self.rng.roll_2d(6) - 7 + hydrographics_modifier(world)
        world.hydrographics = self._pick(self.tables.hydrographics, roll)

    def generate_population(self, world: World) -> None:
        roll = self.rng.roll_2d(6) - 2
        world.unmodified_population = clamp_to_table_bounds(roll, len(self.tables.populations))
        world.population = self._pick(self.tables.populations, roll + population_modifier(world))

    def generate_government(self, world: World) -> None:
        if world.population.code == 0:
            world.government = self.tables.governments[0]
            return

        # Rolled from the unmodified population so habitability does not also
        # push governments towards the tyrannical end of the table
        roll = self.rng.roll_2d(6) - 7 + world.unmodified_population
        world.government = self._pick(self.tables.governments, roll)

    def generate_law_level(self, world: World) -> None:
        if world.population.code == 0:
            world.law_level = self.tables.law_levels[0]
            return

        roll = self.rng.roll_2d(6) - 7 + world.government.code
        world.law_level = self._pick(self.tables.law_levels, roll)

    def generate_factions(self, world: World) -> None:
        world.factions = generate_factions(world, self.tables, self.rng)

    def generate_culture(self, world: World) -> None:
        index = self.rng.roll_uniform(0, len(self.tables.cultures) - 1)
        world.culture = self.tables.cultures[index]

    def generate_world_tag(self, world: World, index: int) -> Optional[WorldTagRecord]:
        """Replace the world tag at `index` with a random one.

        Returns:
            The displaced tag, or None if `index` is not a valid tag slot
        """
        if not (0 <= index < len(world.world_tags)):
            return None

        old_tag = world.world_tags[index]
        tag_index = self.rng.roll_uniform(0, len(self.tables.world_tags) - 1)
        world.world_tags[index] = self.tables.world_tags[tag_index]
        return old_tag

    def generate_world_tags(self, world: World) -> None:
        for index in range(len(world.world_tags)):
            self.generate_world_tag(world, index)

    def generate_starport(self, world: World) -> None:
        roll = self.rng.roll_2d(6) + starport_modifier(world.population.code)
        world.starport = self._pick(self.tables.starports, roll)
        self.generate_berthing_cost(world)

    def generate_berthing_cost(self, world: World) -> None:
        """Re-roll berthing cost as 1d6 times the base cost of the starport's row."""
        base_cost = self.tables.starports[world.starport.code].berthing_cost
        world.starport = world.starport.model_copy(
            update={"berthing_cost": self.rng.roll_1d(6) * base_cost}
        )

    def generate_tech_level(self, world: World) -> None:
        roll = self.rng.roll_1d(6) + tech_level_modifier(world)
        world.tech_level = clamp(roll, TECH_LEVEL_MIN, TECH_LEVEL_MAX)

    def generate_bases(self, world: World) -> None:
        targets = BASE_TARGETS[world.starport.starport_class]
        world.has_naval_base = self.rng.roll_2d(6) >= targets.naval
        world.has_scout_base = self.rng.roll_2d(6) >= targets.scout
        world.has_research_base = self.rng.roll_2d(6) >= targets.research
        world.has_tas = self.rng.roll_2d(6) >= targets.tas
