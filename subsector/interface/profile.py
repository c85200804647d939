"""Compact display strings for a world: UWP profile, bases, trade codes."""

from typing import Dict

from ..models.world import World, sorted_trade_codes

EHEX_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Surface gravity by size code; size 0 (asteroid belt) has none
SURFACE_GRAVITY: Dict[int, str] = {
    0: "N/A",
    1: "0.05 G",
    2: "0.15 G",
    3: "0.25 G",
    4: "0.35 G",
    5: "0.45 G",
    6: "0.70 G",
    7: "0.90 G",
    8: "1.00 G",
    9: "1.25 G",
    10: "1.40 G",
}


def ehex(value: int) -> str:
    """Render a code as a single digit: 0-9, then A for 10, B for 11 and so on.

    Raises:
        ValueError: If the value has no single-digit form
    """
    if not (0 <= value < len(EHEX_DIGITS)):
        raise ValueError(f"Cannot render {value} as a single profile digit")
    return EHEX_DIGITS[value]


def profile_str(world: World) -> str:
    """Universal World Profile, e.g. "CA6A643-9".

    Starport class, then size, atmosphere, hydrographics, population,
    government and law level, a dash, and the tech level.
    """
    return (
        f"{world.starport.starport_class.value}"
        f"{ehex(world.size)}"
        f"{ehex(world.atmosphere.code)}"
        f"{ehex(world.hydrographics.code)}"
        f"{ehex(world.population.code)}"
        f"{ehex(world.government.code)}"
        f"{ehex(world.law_level.code)}"
        f"-{ehex(world.tech_level)}"
    )


def base_str(world: World) -> str:
    """Base letters in N, R, S, T order, or "-" when there are none."""
    bases = ""
    if world.has_naval_base:
        bases += "N"
    if world.has_research_base:
        bases += "R"
    if world.has_scout_base:
        bases += "S"
    if world.has_tas:
        bases += "T"
    return bases or "-"


def trade_code_str(world: World) -> str:
    """Space-separated short trade codes, or "-" when there are none."""
    return " ".join(code.value for code in sorted_trade_codes(world.trade_codes)) or "-"


def trade_code_long_str(world: World) -> str:
    return ", ".join(code.long_name for code in sorted_trade_codes(world.trade_codes))


def starport_tl_str(world: World) -> str:
    """Starport class and tech level as shown under a map hex, e.g. "C-9"."""
    return f"{world.starport.starport_class.value}-{world.tech_level}"


def gravity_str(world: World) -> str:
    return SURFACE_GRAVITY[world.size]
