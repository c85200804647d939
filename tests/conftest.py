"""Shared fixtures for subsector generator tests."""

import pytest

from subsector.engine.tables import load_tables
from subsector.engine.world_generator import WorldGenerator
from subsector.models import Point
from subsector.utils import RNG_SEED_DEFAULT, DiceRNG


@pytest.fixture(scope="session")
def tables():
    """Bundled reference tables, loaded once per test session."""
    return load_tables()


@pytest.fixture
def rng():
    """Seeded dice roller so generation is reproducible."""
    return DiceRNG(RNG_SEED_DEFAULT)


@pytest.fixture
def generator(tables, rng):
    return WorldGenerator(tables, rng)


@pytest.fixture
def make_world(tables, generator):
    """Build a blank world with chosen table codes.

    Keyword arguments naming a table field (atmosphere, population, ...) take a
    row code; anything else is set on the world directly.
    """
    table_fields = {
        "atmosphere": tables.atmospheres,
        "temperature": tables.temperatures,
        "hydrographics": tables.hydrographics,
        "population": tables.populations,
        "government": tables.governments,
        "law_level": tables.law_levels,
        "culture": tables.cultures,
        "starport": tables.starports,
    }

    def _make_world(name="Testworld", location=Point(1, 1), **fields):
        world = generator.blank(name, location)
        for field_name, value in fields.items():
            if field_name in table_fields:
                value = table_fields[field_name][value]
            setattr(world, field_name, value)
        return world

    return _make_world
