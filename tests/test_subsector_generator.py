"""Tests for whole-subsector generation."""

import pytest

from subsector.engine.subsector_generator import (
    WorldAbundance,
    generate_subsector,
    insert_random_world,
)
from subsector.models import Point, Subsector
from subsector.utils import COLUMNS, ROWS, DiceRNG, OutOfBoundsError


class TestGenerateSubsector:
    """Test generate_subsector."""

    def test_reproducible(self, tables):
        """Test the same seed gives the same subsector."""
        a = generate_subsector(tables, DiceRNG(42))
        b = generate_subsector(tables, DiceRNG(42))
        assert a == b
        assert a.name == b.name

    def test_worlds_in_bounds_and_located(self, tables):
        """Test every world sits on the grid at its own location."""
        subsector = generate_subsector(tables, DiceRNG(1))
        assert 0 < len(subsector) <= COLUMNS * ROWS
        for point, world in subsector.items():
            assert point.in_bounds
            assert world.location == point
            assert world.name

    def test_explicit_name(self, tables):
        """Test an explicit name overrides the random one."""
        subsector = generate_subsector(tables, DiceRNG(1), name="Spinward Reach")
        assert subsector.name == "Spinward Reach"

    def test_explicit_name_keeps_world_names(self, tables):
        """Test naming the subsector does not change the dice sequence."""
        random_named = generate_subsector(tables, DiceRNG(3))
        named = generate_subsector(tables, DiceRNG(3), name="Fixed")
        assert [w.name for _, w in named.items()] == [w.name for _, w in random_named.items()]

    def test_abundant_fills_grid(self, tables):
        """Test +3 always reaches the presence target of 4."""
        subsector = generate_subsector(tables, DiceRNG(2), world_abundance_modifier=3)
        assert len(subsector) == COLUMNS * ROWS

    def test_empty_grid(self, tables):
        """Test -3 can never reach the presence target."""
        subsector = generate_subsector(tables, DiceRNG(2), world_abundance_modifier=-3)
        assert len(subsector) == 0

    def test_abundance_changes_density(self, tables):
        """Test denser presets place more worlds on average."""
        def average(abundance):
            rng = DiceRNG(10)
            return sum(len(generate_subsector(tables, rng, abundance.modifier)) for _ in range(20)) / 20

        assert average(WorldAbundance.RIFT) < average(WorldAbundance.NOMINAL) < average(WorldAbundance.ABUNDANT)


class TestWorldAbundance:
    """Test abundance presets."""

    def test_modifiers(self):
        """Test each preset's modifier."""
        assert WorldAbundance.RIFT.modifier == -2
        assert WorldAbundance.SPARSE.modifier == -1
        assert WorldAbundance.NOMINAL.modifier == 0
        assert WorldAbundance.DENSE.modifier == 1
        assert WorldAbundance.ABUNDANT.modifier == 2

    def test_from_name(self):
        """Test case-insensitive lookup."""
        assert WorldAbundance.from_name("Dense") is WorldAbundance.DENSE

    def test_from_unknown_name(self):
        """Test unknown presets are rejected."""
        with pytest.raises(ValueError, match="Unknown world abundance"):
            WorldAbundance.from_name("crowded")


class TestInsertRandomWorld:
    """Test insert_random_world."""

    def test_insert_into_empty_hex(self, generator):
        """Test a new world is placed and named."""
        subsector = Subsector.empty()
        assert insert_random_world(subsector, Point(3, 4), generator) is None
        world = subsector.get(Point(3, 4))
        assert world is not None
        assert world.name
        assert world.location == Point(3, 4)

    def test_insert_displaces(self, generator, make_world):
        """Test an existing world is returned when replaced."""
        subsector = Subsector.empty()
        old = make_world("Old")
        subsector.insert(Point(3, 4), old)
        assert insert_random_world(subsector, Point(3, 4), generator) is old
        assert subsector.get(Point(3, 4)) is not old

    def test_insert_out_of_bounds(self, generator):
        """Test off-grid points are rejected without rolling."""
        subsector = Subsector.empty()
        state = generator.rng.get_state()
        with pytest.raises(OutOfBoundsError):
            insert_random_world(subsector, Point(0, 4), generator)
        assert generator.rng.get_state() == state
        assert len(subsector) == 0
