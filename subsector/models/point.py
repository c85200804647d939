"""Hex grid coordinate model."""

import re
from dataclasses import dataclass

from ..utils.constants import COLUMNS, ROWS
from ..utils.errors import SubsectorParseError

# Older save files prefixed hex strings to stop spreadsheets eating the leading zero
LEGACY_PREFIXES = ("'", "_")

_POINT_PATTERN = re.compile(r"(\d{2})(\d{2})", re.ASCII)


@dataclass(frozen=True, order=True)
class Point:
    """A 1-based (column, row) hex on the subsector grid.

    Points order by (x, y), which gives map iteration a stable column-major order.
    The string form is the four-digit hex code used on printed maps: column 1,
    row 2 is "0102".
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x:02}{self.y:02}"

    @property
    def in_bounds(self) -> bool:
        """Whether the point lies on the 8x10 subsector grid."""
        return 1 <= self.x <= COLUMNS and 1 <= self.y <= ROWS

    @classmethod
    def parse(cls, text: str) -> "Point":
        """Parse a four-digit hex code like "0102" into a Point.

        Surrounding whitespace and the legacy "'" and "_" prefixes (in that
        order) are ignored.
        The result is not checked against the grid bounds.

        Args:
            text: Hex code to parse

        Returns:
            Parsed Point

        Raises:
            SubsectorParseError: If the string is not exactly four digits
        """
        stripped = text.strip()
        for prefix in LEGACY_PREFIXES:
            if stripped.startswith(prefix):
                stripped = stripped[len(prefix):].strip()

        if len(stripped) < 4:
            raise SubsectorParseError(f"World location string too short: '{text}'")
        if len(stripped) > 4:
            raise SubsectorParseError(f"World location string too long: '{text}'")

        match = _POINT_PATTERN.fullmatch(stripped)
        if match is None:
            raise SubsectorParseError(f"World location string is not numeric: '{text}'")

        return cls(x=int(match.group(1)), y=int(match.group(2)))


def all_points() -> list[Point]:
    """Every in-bounds point, in column-major order."""
    return [Point(x, y) for x in range(1, COLUMNS + 1) for y in range(1, ROWS + 1)]
