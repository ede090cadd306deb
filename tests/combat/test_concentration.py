"""
Tests for concentration tracking and checks.
"""

import pytest

from battle_tracker.combat.combat_state import CombatState
from battle_tracker.combat.concentration import ConcentrationMonitor
from battle_tracker.combat.registry import CombatantRegistry
from battle_tracker.core.dice_parser import DiceRoller


@pytest.fixture
def state():
    return CombatState()


@pytest.fixture
def monitor(state, rng):
    return ConcentrationMonitor(state, DiceRoller(rng))


@pytest.fixture
def caster(state, make_template):
    return CombatantRegistry(state).add(make_template("Caster", hp=40, con=14))


def test_toggle(monitor, state, caster):
    assert monitor.toggle(caster.instance_id) is True
    assert state.concentrating == {caster.instance_id}
    assert monitor.toggle(caster.instance_id) is False
    assert state.concentrating == set()


def test_toggle_unknown_combatant_is_noop(monitor, state):
    assert monitor.toggle("ghost") is None
    assert state.concentrating == set()


def test_low_roll_breaks_concentration(monitor, state, rng, caster):
    monitor.toggle(caster.instance_id)
    rng.push(1)

    result = monitor.check_on_damage(caster.instance_id, 10)

    assert (result.roll, result.modifier, result.total, result.dc) == (1, 2, 3, 10)
    assert result.maintained is False
    assert caster.instance_id not in state.concentrating
    assert result.message == "Caster failed concentration check (DC 10): 3 < 10"


def test_high_roll_keeps_concentration(monitor, state, rng, caster):
    monitor.toggle(caster.instance_id)
    rng.push(20)

    result = monitor.check_on_damage(caster.instance_id, 10)

    assert result.total == 22
    assert result.maintained is True
    assert caster.instance_id in state.concentrating
    assert result.message == "Caster maintained concentration (DC 10): 22 >= 10"


def test_meeting_the_dc_succeeds(monitor, state, rng, caster):
    monitor.toggle(caster.instance_id)
    rng.push(8)
    assert monitor.check_on_damage(caster.instance_id, 4).maintained is True


@pytest.mark.parametrize("damage, dc", [(1, 10), (20, 10), (21, 10), (22, 11), (45, 22)])
def test_save_dc(monitor, damage, dc):
    assert monitor.save_dc(damage) == dc


def test_check_without_concentration_does_nothing(monitor, rng, caster):
    assert monitor.check_on_damage(caster.instance_id, 10) is None
    assert rng.calls == []


def test_check_leaves_hit_points_alone(monitor, rng, caster):
    monitor.toggle(caster.instance_id)
    rng.push(1)
    monitor.check_on_damage(caster.instance_id, 30)
    assert caster.hit_points.current == 40
