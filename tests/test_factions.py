"""Tests for the faction sub-generator."""

from subsector.engine.factions import (
    add_faction,
    faction_count_modifier,
    generate_factions,
    random_faction,
    regenerate_faction,
    remove_faction,
)
from subsector.models import Faction
from subsector.utils import DEFAULT_FACTION_NAME, DiceRNG


class TestFactionGeneration:
    """Test faction rolls."""

    def test_random_faction(self, tables, rng):
        """Test a random faction has a placeholder name and valid rows."""
        faction = random_faction(tables, rng)
        assert faction.name == DEFAULT_FACTION_NAME
        assert tables.faction_strengths[faction.strength_code].strength == faction.strength
        assert faction.government is tables.governments[faction.government.code]

    def test_strength_codes_from_2d6(self, tables):
        """Test faction strength indices come from 2d6 (2-12)."""
        rng = DiceRNG(5)
        codes = {random_faction(tables, rng).strength_code for _ in range(2000)}
        assert codes == set(range(2, 13))

    def test_count_modifier(self):
        """Test faction count modifiers by government."""
        assert faction_count_modifier(0) == 1
        assert faction_count_modifier(7) == 1
        assert faction_count_modifier(4) == 0
        assert faction_count_modifier(9) == 0
        assert faction_count_modifier(10) == -1
        assert faction_count_modifier(15) == -1

    def test_no_factions_without_population(self, tables, rng, make_world):
        """Test uninhabited worlds have no factions."""
        world = make_world(population=0, government=7)
        for _ in range(50):
            assert generate_factions(world, tables, rng) == []

    def test_faction_counts(self, tables, make_world):
        """Test counts follow 1d3 plus the government modifier, floored at 0."""
        rng = DiceRNG(11)
        balkanised = make_world(population=6, government=7)
        assert {len(generate_factions(balkanised, tables, rng)) for _ in range(300)} == {2, 3, 4}

        dictatorship = make_world(population=6, government=12)
        assert {len(generate_factions(dictatorship, tables, rng)) for _ in range(300)} == {0, 1, 2}

        democracy = make_world(population=6, government=4)
        assert {len(generate_factions(democracy, tables, rng)) for _ in range(300)} == {1, 2, 3}


class TestFactionEditing:
    """Test adding, removing and regenerating factions."""

    def setup_method(self):
        self.rng = DiceRNG(3)

    def test_faction_equality_ignores_code(self, tables):
        """Test factions compare by strength text, not code."""
        gov = tables.governments[2]
        a = Faction(name="Reds", strength_code=0, strength="Obscure group", government=gov)
        b = Faction(name="Reds", strength_code=3, strength="Obscure group", government=gov)
        assert a == b

    def test_add_faction_returns_index(self, tables, make_world):
        """Test added factions go on the end."""
        world = make_world(population=5)
        assert add_faction(world, tables, self.rng) == 0
        assert add_faction(world, tables, self.rng) == 1
        assert len(world.factions) == 2

    def test_remove_faction_nearest_index(self, tables, make_world):
        """Test removal returns the nearest remaining index."""
        world = make_world(population=5)
        for _ in range(3):
            add_faction(world, tables, self.rng)
        world.factions[2].name = "Last"

        assert remove_faction(world, 1) == 1
        assert world.factions[1].name == "Last"
        assert remove_faction(world, 1) == 0
        assert remove_faction(world, 0) == 0
        assert world.factions == []

    def test_remove_faction_invalid_index(self, tables, make_world):
        """Test an invalid index changes nothing and returns 0."""
        world = make_world(population=5)
        add_faction(world, tables, self.rng)
        assert remove_faction(world, 4) == 0
        assert remove_faction(world, -1) == 0
        assert len(world.factions) == 1

    def test_regenerate_keeps_name(self, tables, make_world):
        """Test a regenerated faction keeps its user-given name."""
        world = make_world(population=5)
        add_faction(world, tables, self.rng)
        world.factions[0].name = "Free Traders"
        assert regenerate_faction(world, 0, tables, self.rng)
        assert world.factions[0].name == "Free Traders"

    def test_regenerate_keeps_edited_description(self, tables, make_world):
        """Test an edited government description survives a regeneration."""
        world = make_world(population=5)
        add_faction(world, tables, self.rng)
        faction = world.factions[0]
        faction.government = faction.government.model_copy(update={"description": "Run by cats."})

        for _ in range(10):
            regenerate_faction(world, 0, tables, self.rng)
            assert world.factions[0].government.description == "Run by cats."

    def test_regenerate_invalid_index(self, tables, make_world):
        """Test regenerating a missing faction reports failure."""
        world = make_world(population=5)
        assert not regenerate_faction(world, 0, tables, self.rng)
