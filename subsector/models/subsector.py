"""Subsector aggregate: a sparse 8x10 grid of worlds."""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..utils.constants import COLUMNS, DEFAULT_SUBSECTOR_NAME, ROWS
from ..utils.errors import EmptySourceError, OutOfBoundsError
from .point import Point
from .world import World

logger = logging.getLogger(__name__)


@dataclass
class Subsector:
    """A named subsector owning at most one World per in-bounds hex.

    Every mutation checks bounds before touching the map, so a failed call
    leaves the subsector exactly as it was. Stored worlds are owned by the
    subsector; `get` hands back the stored object, and editors should work on
    a copy until they are ready to `insert` it back.
    """

    name: str = DEFAULT_SUBSECTOR_NAME
    worlds: Dict[Point, World] = field(default_factory=dict)

    def __post_init__(self):
        """Validate subsector data after initialization."""
        for point in self.worlds:
            if not point.in_bounds:
                raise ValueError(
                    f"Invalid world location: {point} "
                    f"(must be within {COLUMNS} columns x {ROWS} rows)"
                )

    @classmethod
    def empty(cls, name: str = DEFAULT_SUBSECTOR_NAME) -> "Subsector":
        """Create a subsector with no worlds."""
        return cls(name=name)

    def __len__(self) -> int:
        return len(self.worlds)

    def __contains__(self, point: Point) -> bool:
        return point in self.worlds

    def items(self) -> Iterator[Tuple[Point, World]]:
        """Iterate (point, world) pairs in column-major point order."""
        for point in sorted(self.worlds):
            yield point, self.worlds[point]

    def points(self) -> List[Point]:
        """Occupied points in column-major order."""
        return sorted(self.worlds)

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def get(self, point: Point) -> Optional[World]:
        """Return the World at `point`, or None if the hex is empty."""
        return self.worlds.get(point)

    def insert(self, point: Point, world: World) -> Optional[World]:
        """Place `world` at `point`, displacing any World already there.

        The inserted world's `location` is updated to `point`.

        Returns:
            The displaced World, or None if the hex was empty

        Raises:
            OutOfBoundsError: If `point` is off the grid
        """
        self._check_bounds(point, "insert a world at")
        displaced = self.worlds.get(point)
        world.location = point
        self.worlds[point] = world
        return displaced

    def remove(self, point: Point) -> Optional[World]:
        """Remove and return the World at `point`, if any.

        Raises:
            OutOfBoundsError: If `point` is off the grid
        """
        self._check_bounds(point, "remove a world from")
        return self.worlds.pop(point, None)

    def move_world(self, source: Point, destination: Point) -> Optional[World]:
        """Move the World at `source` to `destination`, displacing any World there.

        If the move cannot complete, the source world is put back where it was
        and the subsector is left unchanged.

        Returns:
            The World displaced from `destination`, or None if it was empty

        Raises:
            OutOfBoundsError: If either point is off the grid
            EmptySourceError: If there is no World at `source`
        """
        world = self.remove(source)
        if world is None:
            raise EmptySourceError(f"No world to move at {source}")

        try:
            return self.insert(destination, world)
        except OutOfBoundsError:
            logger.warning(f"Move from {source} to {destination} failed, restoring {world.name}")
            self.insert(source, world)
            raise

    def copy_player_safe(self, tables) -> "Subsector":
        """Return a deep copy with spoiler-prone world fields redacted.

        Factions and notes are blanked; culture and world tags are reset to the
        first row of their tables. The original subsector is not modified.

        Args:
            tables: TableStore supplying the default rows
        """
        player_safe = copy.deepcopy(self)
        for world in player_safe.worlds.values():
            world.factions = []
            world.culture = tables.cultures[0]
            world.world_tags = [tables.world_tags[0] for _ in world.world_tags]
            world.notes = ""
        return player_safe

    @staticmethod
    def _check_bounds(point: Point, action: str) -> None:
        if not point.in_bounds:
            raise OutOfBoundsError(f"Can not {action} an out of bounds point: {point}")
