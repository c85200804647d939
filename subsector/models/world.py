"""World and faction data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Set

from ..utils.constants import (
    NUM_WORLD_TAGS,
    SIZE_MAX,
    SIZE_MIN,
    TECH_LEVEL_MAX,
    TECH_LEVEL_MIN,
)
from .point import Point
from .records import (
    AtmoRecord,
    CulturalDiffRecord,
    GovRecord,
    HydroRecord,
    LawRecord,
    PopRecord,
    StarportRecord,
    TempRecord,
    WorldTagRecord,
)


class TravelCode(Enum):
    """Travel advisory zone."""

    SAFE = "Safe"
    AMBER = "Amber"
    RED = "Red"

    @property
    def short(self) -> str:
        """Single-character zone used in sector tables."""
        return {"Safe": "-", "Amber": "A", "Red": "R"}[self.value]


class TradeCode(Enum):
    """Trade classification derived from a world's other attributes.

    Declaration order is the canonical display order.
    """

    AG = "Ag"
    AS = "As"
    BA = "Ba"
    DE = "De"
    FL = "Fl"
    GA = "Ga"
    HI = "Hi"
    HT = "Ht"
    IC = "Ic"
    IN = "In"
    LO = "Lo"
    LT = "Lt"
    NA = "Na"
    NI = "Ni"
    PO = "Po"
    RI = "Ri"
    VA = "Va"
    WA = "Wa"

    @property
    def long_name(self) -> str:
        return TRADE_CODE_LONG_NAMES[self]


TRADE_CODE_LONG_NAMES = {
    TradeCode.AG: "Agricultural",
    TradeCode.AS: "Asteroid",
    TradeCode.BA: "Barren",
    TradeCode.DE: "Desert",
    TradeCode.FL: "Fluid Oceans",
    TradeCode.GA: "Garden",
    TradeCode.HI: "High Population",
    TradeCode.HT: "High Tech",
    TradeCode.IC: "Ice-Capped",
    TradeCode.IN: "Industrial",
    TradeCode.LO: "Low Population",
    TradeCode.LT: "Low Tech",
    TradeCode.NA: "Non-Agricultural",
    TradeCode.NI: "Non-Industrial",
    TradeCode.PO: "Poor",
    TradeCode.RI: "Rich",
    TradeCode.VA: "Vacuum",
    TradeCode.WA: "Water World",
}


def sorted_trade_codes(codes: Set[TradeCode]) -> List[TradeCode]:
    """Trade codes in canonical display order."""
    order = list(TradeCode)
    return sorted(codes, key=order.index)


@dataclass
class Faction:
    """A political group on a world, independent of its formal government.

    Equality ignores `strength_code`; it is rebuilt from the strength text when
    a faction is loaded from JSON.
    """

    name: str
    strength_code: int = field(compare=False)
    strength: str
    government: GovRecord

    def __post_init__(self):
        """Validate faction data after initialization."""
        if self.strength_code < 0:
            raise ValueError(f"Invalid strength_code: {self.strength_code} (must be >= 0)")


@dataclass
class World:
    """A generated planetary system occupying one hex of a subsector.

    `travel_code` and `trade_codes` are derived from the other fields and must be
    re-resolved (see `engine.classification.resolve_derived`) after any edit.
    `unmodified_population` only biases the government roll, so it takes no part
    in equality.
    """

    name: str
    location: Point
    has_gas_giant: bool
    size: int  # 0-10
    diameter: int  # km
    atmosphere: AtmoRecord
    temperature: TempRecord
    hydrographics: HydroRecord
    population: PopRecord
    unmodified_population: int = field(compare=False)
    government: GovRecord
    law_level: LawRecord
    factions: List[Faction]
    culture: CulturalDiffRecord
    world_tags: List[WorldTagRecord]
    starport: StarportRecord
    tech_level: int  # 0-15
    has_naval_base: bool = False
    has_scout_base: bool = False
    has_research_base: bool = False
    has_tas: bool = False
    travel_code: TravelCode = TravelCode.SAFE
    trade_codes: Set[TradeCode] = field(default_factory=set)
    notes: str = ""

    def __post_init__(self):
        """Validate world data after initialization."""
        if not (SIZE_MIN <= self.size <= SIZE_MAX):
            raise ValueError(f"Invalid size: {self.size} (must be {SIZE_MIN}-{SIZE_MAX})")
        if not (TECH_LEVEL_MIN <= self.tech_level <= TECH_LEVEL_MAX):
            raise ValueError(
                f"Invalid tech_level: {self.tech_level} "
                f"(must be {TECH_LEVEL_MIN}-{TECH_LEVEL_MAX})"
            )
        if len(self.world_tags) != NUM_WORLD_TAGS:
            raise ValueError(
                f"Invalid world_tags: {len(self.world_tags)} tags (must be {NUM_WORLD_TAGS})"
            )
        if self.diameter < 0:
            raise ValueError(f"Invalid diameter: {self.diameter} (must be >= 0)")

    @property
    def is_wet_world(self) -> bool:
        """Whether the map should draw this world with the wet symbol."""
        return self.hydrographics.code > 3
