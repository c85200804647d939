"""Map rendering: renderer-ready hex descriptions and an ASCII preview.

Drawing the actual hex map (SVG or otherwise) is left to an external renderer;
`describe_subsector` gives it everything it needs per occupied hex.
"""

from dataclasses import dataclass
from typing import List

from ..models.point import Point
from ..models.subsector import Subsector
from ..utils.constants import COLUMNS, ROWS
from .profile import profile_str, starport_tl_str


@dataclass(frozen=True)
class HexMarker:
    """What a map renderer draws in one occupied hex."""

    point: Point
    name: str
    has_gas_giant: bool
    hydrographics: int  # wet symbol when > 3
    starport_tl: str  # e.g. "C-9"
    uwp: str
    is_wet: bool


def describe_subsector(subsector: Subsector) -> List[HexMarker]:
    """Renderer-ready markers for every occupied hex, in point order."""
    return [
        HexMarker(
            point=point,
            name=world.name,
            has_gas_giant=world.has_gas_giant,
            hydrographics=world.hydrographics.code,
            starport_tl=starport_tl_str(world),
            uwp=profile_str(world),
            is_wet=world.is_wet_world,
        )
        for point, world in subsector.items()
    ]


class MapRenderer:
    """Renders the 8x10 subsector grid as ASCII art."""

    EMPTY = "."
    WORLD = "*"
    GAS_GIANT = "G"

    def render(self, subsector: Subsector) -> str:
        """Render the grid one row per line, columns left to right.

        Output format (8 columns x 10 rows):
        . * . . G . . .
        * . . . . . * .
        ...

        Legend:
        - 'G' = world with a gas giant
        - '*' = world without a gas giant
        - '.' = empty hex

        Args:
            subsector: Subsector to render

        Returns:
            Multi-line ASCII art string
        """
        grid = [[self.EMPTY] * COLUMNS for _ in range(ROWS)]

        for marker in describe_subsector(subsector):
            cell = self.GAS_GIANT if marker.has_gas_giant else self.WORLD
            grid[marker.point.y - 1][marker.point.x - 1] = cell

        return "\n".join(" ".join(row) for row in grid)

    def render_with_coords(self, subsector: Subsector) -> str:
        """Render map with 1-based column and row labels.

        Args:
            subsector: Subsector to render

        Returns:
            Map with the subsector name and coordinate labels on edges
        """
        map_str = self.render(subsector)

        header = "   " + " ".join(str(x) for x in range(1, COLUMNS + 1))
        numbered_lines = [f"{y:2d} {line}" for y, line in enumerate(map_str.split("\n"), start=1)]

        return "\n".join([subsector.name, header] + numbered_lines)
