"""Fixed-width T5-style sector table export."""

from typing import Dict, List

from ..models.subsector import Subsector
from .profile import base_str, profile_str, trade_code_str

UWP_REFERENCE = r"""# UWP Reference Diagram:
#
#      ,- Starport
#     |  ,- Atmosphere
#     | |  ,- Population
#     | | |  ,- Law Level
#     | | | |
#     CA6A643-9
#      | | |  |
#      | | |   `- Tech Level
#      | |  `- Government
#      |  `- Hydrographics
#       `- Size"""

HEADERS = ["Hex", "Name", "UWP", "Remarks", "Bases", "Zone", "PBG", "A", "Stellar"]

COLUMN_SEPARATOR = "  "


def t5_rows(subsector: Subsector) -> List[Dict[str, str]]:
    """One row per world, keyed by header, in point order.

    PBG, allegiance and stellar data are not modelled, so they hold fixed
    placeholder values.
    """
    rows = []
    for point, world in subsector.items():
        rows.append({
            "Hex": str(point),
            "Name": world.name,
            "UWP": profile_str(world),
            "Remarks": trade_code_str(world),
            "Bases": base_str(world),
            "Zone": world.travel_code.short,
            "PBG": "101" if world.has_gas_giant else "100",
            "A": "Na",
            "Stellar": "",
        })
    return rows


def t5_table(subsector: Subsector) -> str:
    """Render the subsector as a fixed-width table followed by the UWP reference.

    Each column is as wide as its longest cell or header.
    """
    rows = t5_rows(subsector)
    widths = {
        header: max([len(header)] + [len(row[header]) for row in rows])
        for header in HEADERS
    }

    lines = [
        COLUMN_SEPARATOR.join(f"{header:<{widths[header]}}" for header in HEADERS),
        COLUMN_SEPARATOR.join("-" * widths[header] for header in HEADERS),
    ]
    for row in rows:
        line = COLUMN_SEPARATOR.join(f"{row[header]:<{widths[header]}}" for header in HEADERS)
        lines.append(line.strip())

    return "\n".join(lines) + "\n\n" + UWP_REFERENCE
