"""
Dice parser module for the battle tracker.

Turns "NdM" dice expressions into random sums. The random source is
injected, so every roll can be reproduced in tests by passing a seeded
``random.Random`` or any object exposing ``randint(a, b)``.
"""

import random
import re
from typing import Protocol

from pydantic import BaseModel, Field

from .logging import log_debug

DICE_PATTERN = re.compile(r"^\s*(\d+)d(\d+)\s*$")


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b]."""

    def randint(self, a: int, b: int) -> int: ...


class RollBreakdown(BaseModel):
    """Class to hold roll breakdown information."""

    value: int = Field(
        description="Total roll result",
    )
    description: str = Field(
        description="Description of the roll",
    )
    rolls: list[int] = Field(
        description="List of individual dice rolls",
        default_factory=list,
    )


def parse_dice(expression: str | None) -> tuple[int, int] | None:
    """
    Splits a dice expression into its count and number of sides.

    Args:
        expression (str | None):
            The expression, e.g. "2d6".

    Returns:
        tuple[int, int] | None:
            The (count, sides) pair, or None when either part is not a
            positive integer.

    """
    if not expression or not isinstance(expression, str):
        return None
    match = DICE_PATTERN.match(expression)
    if not match:
        return None
    count, sides = int(match.group(1)), int(match.group(2))
    if count <= 0 or sides <= 0:
        return None
    return count, sides


def roll_and_describe(expression: str | None, rng: RandomSource) -> RollBreakdown:
    """
    Rolls a dice expression and keeps the individual dice.

    Args:
        expression (str | None):
            The expression to roll.
        rng (RandomSource):
            The random source.

    Returns:
        RollBreakdown:
            The total, a readable description and the single dice. A malformed
            expression yields a zero total with no dice.

    """
    parsed = parse_dice(expression)
    if parsed is None:
        log_debug("Malformed dice expression, rolling 0", {"expression": expression})
        return RollBreakdown(value=0, description="0")
    count, sides = parsed
    rolls = [rng.randint(1, sides) for _ in range(count)]
    if count == 1:
        description = f"d{sides}({rolls[0]})"
    else:
        description = f"{count}d{sides}({'+'.join(map(str, rolls))})"
    return RollBreakdown(value=sum(rolls), description=description, rolls=rolls)


def roll_dice(expression: str | None, rng: RandomSource) -> int:
    """
    Rolls a dice expression.

    Args:
        expression (str | None):
            The expression to roll.
        rng (RandomSource):
            The random source.

    Returns:
        int:
            The sum of the dice, 0 for a malformed expression.

    """
    return roll_and_describe(expression, rng).value


class DiceRoller:
    """Rolls dice against a single shared random source."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        """
        Initialize the roller.

        Args:
            rng (RandomSource | None):
                The random source, a fresh ``random.Random`` when omitted.

        """
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def roll(self, expression: str | None) -> int:
        """Rolls an expression, returning 0 when it is malformed."""
        return roll_dice(expression, self.rng)

    def describe(self, expression: str | None) -> RollBreakdown:
        """Rolls an expression and returns the full breakdown."""
        return roll_and_describe(expression, self.rng)

    def d20(self) -> int:
        """Rolls a single twenty-sided die."""
        return self.roll("1d20")
