"""Distribution statistics over many generated worlds.

Useful for checking that a change to the generation tables or modifiers
produces the distributions you expect, e.g.:

    python generate.py --stats 10000
"""

import logging
from typing import Dict, Generic, Hashable, Iterable, Optional, TypeVar

from ..engine.tables import TableStore
from ..engine.world_generator import WorldGenerator
from ..models.point import Point
from ..models.records import StarportClass
from ..models.world import TradeCode
from ..utils.constants import SIZE_MAX, SIZE_MIN, TECH_LEVEL_MAX, TECH_LEVEL_MIN
from ..utils.rng import DiceRNG

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

BAR_WIDTH = 60


class Histogram(Generic[T]):
    """Counts of discrete outcomes, printable as a bar chart.

    Items are shown in the order they were first seen, so pass `domain` to
    fix the order and include outcomes that never occur.
    """

    def __init__(self, title: str, domain: Optional[Iterable[T]] = None):
        self.title = title
        self.counts: Dict[T, int] = {item: 0 for item in domain} if domain is not None else {}
        self.total = 0

    def inc(self, item: T) -> None:
        self.counts[item] = self.counts.get(item, 0) + 1
        self.total += 1

    def dec(self, item: T) -> None:
        """Undo one `inc` of `item`. Unknown or zero-count items are ignored."""
        if self.counts.get(item, 0) > 0:
            self.counts[item] -= 1
            self.total -= 1

    def percent(self, item: T) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * self.counts.get(item, 0) / self.total

    def _bar(self, count: int, scale: int) -> str:
        # Any non-zero count gets at least one star
        scaled = 1 if 0 < count < scale else count // scale
        return "*" * scaled

    def render(self, scale: int = 1, percent: bool = False) -> str:
        """Render one bar per item, `scale` occurrences per star.

        Args:
            scale: Occurrences represented by each star (values below 1 mean 1)
            percent: Show each item's share of the total instead of its count
        """
        scale = max(1, scale)
        lines = [self.title, "=" * BAR_WIDTH]
        for item, count in self.counts.items():
            label = getattr(item, "value", item)
            detail = f"{self.percent(item):.2f}%" if percent else str(count)
            lines.append(f"{str(label):>5}|{self._bar(count, scale)} ({detail})")
        return "\n".join(lines)


def world_histograms(tables: TableStore, rng: DiceRNG, count: int) -> Dict[str, Histogram]:
    """Generate `count` worlds and histogram every rolled attribute.

    Args:
        tables: Loaded reference tables
        rng: Dice roller
        count: Number of worlds to generate

    Returns:
        Histograms keyed by attribute name
    """
    generator = WorldGenerator(tables, rng)
    histograms: Dict[str, Histogram] = {
        "gas_giant": Histogram("Gas Giant", [False, True]),
        "size": Histogram("Size", range(SIZE_MIN, SIZE_MAX + 1)),
        "atmosphere": Histogram("Atmosphere", range(len(tables.atmospheres))),
        "temperature": Histogram("Temperature", range(len(tables.temperatures))),
        "hydrographics": Histogram("Hydrographics", range(len(tables.hydrographics))),
        "population": Histogram("Population", range(len(tables.populations))),
        "government": Histogram("Government", range(len(tables.governments))),
        "law_level": Histogram("Law Level", range(len(tables.law_levels))),
        "factions": Histogram("Faction Count"),
        "starport": Histogram("Starport Class", list(StarportClass)),
        "tech_level": Histogram("Tech Level", range(TECH_LEVEL_MIN, TECH_LEVEL_MAX + 1)),
        "trade_codes": Histogram("Trade Codes", list(TradeCode)),
    }

    for _ in range(count):
        world = generator.generate("", Point(1, 1))
        histograms["gas_giant"].inc(world.has_gas_giant)
        histograms["size"].inc(world.size)
        histograms["atmosphere"].inc(world.atmosphere.code)
        histograms["temperature"].inc(world.temperature.code)
        histograms["hydrographics"].inc(world.hydrographics.code)
        histograms["population"].inc(world.population.code)
        histograms["government"].inc(world.government.code)
        histograms["law_level"].inc(world.law_level.code)
        histograms["factions"].inc(len(world.factions))
        histograms["starport"].inc(world.starport.starport_class)
        histograms["tech_level"].inc(world.tech_level)
        for code in world.trade_codes:
            histograms["trade_codes"].inc(code)

    logger.info(f"Collected statistics over {count} generated worlds")
    return histograms
