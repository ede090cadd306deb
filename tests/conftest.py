"""
Shared fixtures for the battle tracker tests.
"""

import pytest

from battle_tracker.character import AbilityScores, CombatantTemplate
from battle_tracker.combat.combat_manager import CombatManager


class ScriptedRandom:
    """Random source returning pre-arranged values, in order."""

    def __init__(self, *values: int) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def push(self, *values: int) -> None:
        self.values.extend(values)

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self.values:
            raise AssertionError(f"unexpected roll randint({a}, {b})")
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


def build_template(
    name: str = "Dummy",
    hp: int = 20,
    dex: int = 10,
    con: int = 10,
    **kwargs,
) -> CombatantTemplate:
    return CombatantTemplate(
        name=name,
        hit_points=hp,
        ability_scores=AbilityScores(dexterity=dex, constitution=con),
        **kwargs,
    )


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def make_template():
    return build_template


@pytest.fixture
def messages():
    return []


@pytest.fixture
def manager(rng, messages):
    return CombatManager(rng=rng, notifier=messages.append)
