"""Seedable dice roller for reproducible world generation."""

import random
from typing import Optional


class DiceRNG:
    """Wrapper around Python's random.Random exposing tabletop dice rolls.

    All randomness in generation should go through this class so that the same
    seed always produces the same subsector. Passing no seed gives an
    unpredictable (system-seeded) roller.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic rolls, or None for a random seed
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def roll_uniform(self, low: int, high: int) -> int:
        """Return random integer in range [low, high], inclusive.

        Raises:
            ValueError: If the range is empty (low > high)
        """
        if low > high:
            raise ValueError(f"Empty roll range: {low}..={high}")
        return self.rng.randint(low, high)

    def roll_1d(self, sides: int = 6) -> int:
        """Roll one die with the given number of sides."""
        return self.roll_uniform(1, sides)

    def roll_2d(self, sides: int = 6) -> int:
        """Roll two dice with the given number of sides and sum them."""
        return self.roll_1d(sides) + self.roll_1d(sides)

    def roll_d66(self) -> int:
        """Roll two six-sided dice read as tens and units (11..66)."""
        return 10 * self.roll_1d(6) + self.roll_1d(6)

    def get_state(self):
        """Get the current state of the RNG for serialization."""
        return self.rng.getstate()

    def set_state(self, state):
        """Set the state of the RNG from get_state output."""
        self.rng.setstate(state)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def clamp_to_table_bounds(value: int, table_length: int) -> int:
    """Clamp a (possibly negative) modified roll into a valid table index.

    Args:
        value: Roll result after modifiers
        table_length: Number of rows in the table being indexed

    Returns:
        Index in 0..=table_length-1

    Raises:
        ValueError: If the table is empty
    """
    if table_length < 1:
        raise ValueError("Cannot index into an empty table")
    return clamp(value, 0, table_length - 1)
