"""Data models for the subsector generator."""

from .point import Point, all_points
from .records import (
    AtmoRecord,
    CulturalDiffRecord,
    FactionStrengthRecord,
    GovRecord,
    HydroRecord,
    LawRecord,
    PopRecord,
    StarportClass,
    StarportRecord,
    TableRecord,
    TempRecord,
    WorldTagRecord,
    safe_mutate,
)
from .subsector import Subsector
from .world import Faction, TradeCode, TravelCode, World, sorted_trade_codes

__all__ = [
    "Point",
    "all_points",
    "TableRecord",
    "AtmoRecord",
    "TempRecord",
    "HydroRecord",
    "PopRecord",
    "GovRecord",
    "FactionStrengthRecord",
    "CulturalDiffRecord",
    "WorldTagRecord",
    "LawRecord",
    "StarportClass",
    "StarportRecord",
    "Faction",
    "TradeCode",
    "TravelCode",
    "World",
    "sorted_trade_codes",
    "safe_mutate",
    "Subsector",
]
