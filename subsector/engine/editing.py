"""Copy-edit-apply sessions for hand-editing a subsector's worlds."""

import copy
import logging
from typing import Optional, Sequence, TypeVar

from ..models.point import Point
from ..models.records import StarportClass, TableRecord, safe_mutate
from ..models.subsector import Subsector
from ..models.world import World
from .classification import resolve_derived
from .factions import add_faction, remove_faction, regenerate_faction
from .subsector_generator import insert_random_world
from .tables import TableStore
from .world_generator import WorldGenerator

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TableRecord)


class WorldEditor:
    """Edits one world of a subsector through a working copy.

    `select` checks out a copy of the world at a point. Every edit operates on
    that copy, re-resolving travel and trade codes as it goes, and nothing
    reaches the subsector until `apply` is called. `revert` throws the copy
    away and checks the stored world out again.

    Operations that need a selected world raise RuntimeError when there is
    none, since calling them then is a programming error in the host.
    """

    def __init__(self, subsector: Subsector, tables: TableStore, generator: WorldGenerator):
        """Initialize editor.

        Args:
            subsector: Subsector being edited
            tables: Loaded reference tables
            generator: World generator used for re-rolls
        """
        self.subsector = subsector
        self.tables = tables
        self.generator = generator
        self.point: Optional[Point] = None
        self.world: Optional[World] = None
        self.faction_index = 0

    @property
    def rng(self):
        return self.generator.rng

    def select(self, point: Point) -> Optional[World]:
        """Check out a working copy of the world at `point`.

        Returns:
            The working copy, or None if the hex is empty
        """
        self.point = point
        self.faction_index = 0
        stored = self.subsector.get(point)
        self.world = copy.deepcopy(stored) if stored is not None else None
        return self.world

    @property
    def edited(self) -> bool:
        """Whether the working copy differs from the stored world."""
        if self.world is None or self.point is None:
            return False
        return self.world != self.subsector.get(self.point)

    def apply(self) -> bool:
        """Write the working copy back into the subsector.

        Returns:
            True if changes were written, False if there was nothing to apply
        """
        if self.world is None or self.point is None or not self.edited:
            return False

        resolve_derived(self.world)
        self.subsector.insert(self.point, copy.deepcopy(self.world))
        logger.debug(f"Applied edits to {self.world.name} at {self.point}")
        return True

    def revert(self) -> Optional[World]:
        """Discard unapplied edits and check the stored world out again."""
        if self.point is None:
            return None
        return self.select(self.point)

    def relocate(self, destination: Point) -> Optional[World]:
        """Move the stored world to `destination` and follow it there.

        Unapplied edits to the working copy are kept.

        Returns:
            The World displaced from `destination`, if any

        Raises:
            OutOfBoundsError: If `destination` is off the grid
            EmptySourceError: If no world is stored at the selected point
        """
        if self.point is None:
            raise RuntimeError("No point selected")

        displaced = self.subsector.move_world(self.point, destination)
        self.point = destination
        if self.world is not None:
            self.world.location = destination
        return displaced

    def regenerate_world(self) -> Optional[World]:
        """Replace the selected hex with a freshly generated world and check it out.

        Returns:
            The World that was replaced, if any
        """
        if self.point is None:
            raise RuntimeError("No point selected")

        replaced = insert_random_world(self.subsector, self.point, self.generator)
        self.select(self.point)
        return replaced

    def remove_world(self) -> Optional[World]:
        """Remove the world at the selected point and drop the working copy."""
        if self.point is None:
            raise RuntimeError("No point selected")

        self.world = None
        return self.subsector.remove(self.point)

    def _require_world(self) -> World:
        if self.world is None:
            raise RuntimeError("No world selected")
        return self.world

    @staticmethod
    def _row(table: Sequence[R], code: int, field_name: str) -> R:
        if not (0 <= code < len(table)):
            raise ValueError(f"Invalid {field_name} code: {code} (must be 0-{len(table) - 1})")
        return table[code]

    def reroll(self, stage_name: str) -> World:
        """Re-roll one generation stage of the working copy.

        Dependent attributes are left alone; re-roll them separately if wanted.
        """
        return self.generator.reroll(self._require_world(), stage_name)

    def reroll_berthing_cost(self) -> World:
        world = self._require_world()
        self.generator.generate_berthing_cost(world)
        return world

    def reroll_government(self) -> World:
        """Re-roll the government, keeping an edited description."""
        world = self._require_world()
        old = world.government
        self.generator.generate_government(world)
        world.government = safe_mutate(old, world.government, self.tables.governments)
        return resolve_derived(world)

    def reroll_culture(self) -> World:
        """Re-roll the cultural difference, keeping an edited description."""
        world = self._require_world()
        old = world.culture
        self.generator.generate_culture(world)
        world.culture = safe_mutate(old, world.culture, self.tables.cultures)
        return world

    def reroll_world_tag(self, index: int) -> World:
        """Re-roll one world tag, keeping an edited description.

        An invalid index leaves the world unchanged.
        """
        world = self._require_world()
        old = self.generator.generate_world_tag(world, index)
        if old is not None:
            world.world_tags[index] = safe_mutate(old, world.world_tags[index], self.tables.world_tags)
        return world

    def select_government(self, code: int) -> World:
        world = self._require_world()
        replacement = self._row(self.tables.governments, code, "government")
        world.government = safe_mutate(world.government, replacement, self.tables.governments)
        return resolve_derived(world)

    def select_culture(self, code: int) -> World:
        world = self._require_world()
        replacement = self._row(self.tables.cultures, code, "culture")
        world.culture = safe_mutate(world.culture, replacement, self.tables.cultures)
        return world

    def select_world_tag(self, index: int, code: int) -> World:
        world = self._require_world()
        replacement = self._row(self.tables.world_tags, code, "world tag")
        if 0 <= index < len(world.world_tags):
            world.world_tags[index] = safe_mutate(
                world.world_tags[index], replacement, self.tables.world_tags
            )
        return world

    def select_starport_class(self, starport_class: StarportClass) -> World:
        """Switch the starport to the first row of `starport_class`.

        Fuel and facilities follow the new row and berthing cost is re-rolled.
        """
        world = self._require_world()
        starport_class = StarportClass(starport_class)
        row = next(s for s in self.tables.starports if s.starport_class == starport_class)
        world.starport = row
        self.generator.generate_berthing_cost(world)
        return world

    def add_faction(self) -> int:
        """Add a random faction and select it."""
        self.faction_index = add_faction(self._require_world(), self.tables, self.rng)
        return self.faction_index

    def remove_faction(self) -> int:
        """Remove the selected faction and select its nearest neighbour."""
        self.faction_index = remove_faction(self._require_world(), self.faction_index)
        return self.faction_index

    def regenerate_faction(self) -> bool:
        return regenerate_faction(self._require_world(), self.faction_index, self.tables, self.rng)

    def select_faction_strength(self, code: int) -> World:
        world = self._require_world()
        strength = self._row(self.tables.faction_strengths, code, "faction strength")
        if 0 <= self.faction_index < len(world.factions):
            faction = world.factions[self.faction_index]
            faction.strength_code = strength.code
            faction.strength = strength.strength
        return world

    def select_faction_government(self, code: int) -> World:
        world = self._require_world()
        government = self._row(self.tables.governments, code, "government")
        if 0 <= self.faction_index < len(world.factions):
            faction = world.factions[self.faction_index]
            faction.government = safe_mutate(
                faction.government, government, self.tables.governments
            )
        return world
