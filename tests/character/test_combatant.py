"""
Tests for the combatant data model.
"""

import pytest
from pydantic import ValidationError

from battle_tracker.character import (
    Attack,
    Combatant,
    CombatantTemplate,
    HitPoints,
    KnownSpell,
)
from battle_tracker.core.constants import AbilityKey


@pytest.fixture
def template():
    return CombatantTemplate(
        name="Orc",
        hit_points=15,
        armor_class=13,
        attacks=[Attack(name="Greataxe", damage="1d12", to_hit_bonus=5)],
        known_spells=[KnownSpell(name="Shield", level=1)],
    )


def test_from_template_starts_fresh(template):
    combatant = Combatant.from_template(template)
    assert combatant.name == "Orc"
    assert combatant.hit_points.current == 15
    assert combatant.hit_points.max == 15
    assert combatant.effects == []
    assert combatant.is_favorite is False
    assert combatant.initiative is None
    assert combatant.instance_id


def test_instances_do_not_alias_template(template):
    first = Combatant.from_template(template)
    second = Combatant.from_template(template)
    assert first.instance_id != second.instance_id

    first.attacks[0].damage = "9d9"
    first.attacks.append(Attack(name="Bite"))
    first.ability_scores.dexterity = 20

    assert template.attacks[0].damage == "1d12"
    assert len(template.attacks) == 1
    assert second.attacks[0].damage == "1d12"
    assert second.ability_scores.dexterity == 10


def test_attack_defaults():
    attack = Attack(name="Claw")
    assert attack.damage == "1d4"
    assert attack.damage_type == "slashing"
    assert attack.to_hit_bonus == 0


def test_hit_points_adjust_clamps():
    hp = HitPoints.full(10)
    assert hp.adjust(-4) == -4
    assert hp.current == 6
    assert hp.adjust(-50) == -6
    assert hp.current == 0
    assert hp.adjust(100) == 10
    assert hp.current == 10


@pytest.mark.parametrize("value", [-1, 11])
def test_hit_points_reject_out_of_range_writes(value):
    hp = HitPoints.full(10)
    with pytest.raises(ValidationError):
        hp.current = value
    assert hp.current == 10


def test_hit_points_reject_out_of_range_construction():
    with pytest.raises(ValidationError):
        HitPoints(current=12, max=10)


def test_ability_modifiers(template):
    combatant = Combatant.from_template(template)
    combatant.ability_scores.wisdom = 14
    assert combatant.modifier(AbilityKey.WIS) == 2
    assert combatant.DEX == 0
