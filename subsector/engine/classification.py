"""Derived world classification: travel zone and trade codes.

Both are pure functions of a world's physical and social codes. They are never
rolled, and must be re-resolved whenever an input field changes.
"""

from typing import Callable, Dict, Set

from ..models.world import TradeCode, TravelCode, World

Test = Callable[[int], bool]


def between(low: int, high: int) -> Test:
    return lambda value: low <= value <= high


def at_least(low: int) -> Test:
    return lambda value: value >= low


def at_most(high: int) -> Test:
    return lambda value: value <= high


def one_of(*values: int) -> Test:
    allowed = frozenset(values)
    return lambda value: value in allowed


# Each rule is a conjunction of tests over the classification inputs below.
# Rules are independent; a world gets every code whose rule it satisfies.
TRADE_CODE_RULES: Dict[TradeCode, Dict[str, Test]] = {
    TradeCode.AG: {"atmosphere": between(4, 9), "hydrographics": between(4, 8), "population": between(5, 7)},
    TradeCode.AS: {"size": one_of(0), "atmosphere": one_of(0), "hydrographics": one_of(0)},
    TradeCode.BA: {"population": one_of(0), "government": one_of(0), "law_level": one_of(0)},
    TradeCode.DE: {"atmosphere": at_least(2), "hydrographics": one_of(0)},
    TradeCode.FL: {"atmosphere": at_least(10), "hydrographics": at_least(1)},
    TradeCode.GA: {"size": between(6, 8), "atmosphere": one_of(5, 6, 8), "population": between(5, 7)},
    TradeCode.HI: {"population": at_least(9)},
    TradeCode.HT: {"tech_level": at_least(12)},
    TradeCode.IC: {"atmosphere": between(0, 1), "hydrographics": at_least(1)},
    TradeCode.IN: {"atmosphere": one_of(0, 1, 2, 4, 7, 9), "population": at_least(9)},
    TradeCode.LO: {"population": at_most(3)},
    TradeCode.LT: {"tech_level": at_most(5)},
    TradeCode.NA: {"atmosphere": between(0, 3), "hydrographics": between(0, 3), "population": at_least(6)},
    TradeCode.NI: {"population": at_most(6)},
    TradeCode.PO: {"atmosphere": between(2, 5), "hydrographics": at_most(3)},
    TradeCode.RI: {"atmosphere": one_of(6, 8), "population": between(6, 8), "government": between(4, 9)},
    TradeCode.VA: {"atmosphere": one_of(0)},
    TradeCode.WA: {"hydrographics": at_least(10)},
}


def classification_inputs(world: World) -> Dict[str, int]:
    """The codes that travel and trade classification may depend on."""
    return {
        "size": world.size,
        "atmosphere": world.atmosphere.code,
        "hydrographics": world.hydrographics.code,
        "population": world.population.code,
        "government": world.government.code,
        "law_level": world.law_level.code,
        "tech_level": world.tech_level,
    }


def trade_codes_for(world: World) -> Set[TradeCode]:
    """Evaluate every trade code rule against the world."""
    inputs = classification_inputs(world)
    return {
        code
        for code, rule in TRADE_CODE_RULES.items()
        if all(test(inputs[attribute]) for attribute, test in rule.items())
    }


def travel_code_for(world: World) -> TravelCode:
    """Amber for hostile atmospheres, unstable governments, or extreme law levels.

    Red is never derived.
    """
    if world.atmosphere.code >= 10:
        return TravelCode.AMBER
    if world.government.code in (0, 7, 10):
        return TravelCode.AMBER
    if world.law_level.code == 0 or world.law_level.code >= 9:
        return TravelCode.AMBER
    return TravelCode.SAFE


def resolve_derived(world: World) -> World:
    """Recompute `travel_code` and `trade_codes` in place. Idempotent.

    Returns:
        The same world, for chaining
    """
    world.travel_code = travel_code_for(world)
    world.trade_codes = trade_codes_for(world)
    return world
