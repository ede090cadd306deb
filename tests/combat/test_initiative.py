"""
Tests for initiative rolling and turn rotation.
"""

import random

from battle_tracker.combat.combat_manager import CombatManager
from battle_tracker.core.constants import CombatPhase
from battle_tracker.effects.base_effect import EffectSpec


def scripted_prompt(*answers):
    """A manual-entry stub answering in order and recording the questions."""
    queue = list(answers)
    questions = []

    def ask(question, default):
        questions.append((question, default))
        return queue.pop(0)

    ask.questions = questions
    return ask


def names(manager):
    return [c.name for c in manager.roster]


def test_no_acting_combatant_before_initiative(manager, make_template):
    manager.add_combatant(make_template("A"))
    assert manager.phase is CombatPhase.SETUP
    assert manager.acting is None


def test_roll_initiative_sorts_descending(manager, rng, make_template):
    manager.add_combatant(make_template("Slow", dex=8))
    manager.add_combatant(make_template("Quick", dex=18))
    manager.add_combatant(make_template("Mid", dex=12))
    rng.push(5, 3, 10)

    manager.roll_initiative()

    assert [c.initiative for c in manager.roster] == [11, 7, 4]
    assert names(manager) == ["Mid", "Quick", "Slow"]
    assert manager.phase is CombatPhase.ROLLED_INITIATIVE
    assert manager.acting.name == "Mid"


def test_roll_initiative_with_seeded_dice_is_non_increasing(make_template):
    manager = CombatManager(rng=random.Random(7))
    for i in range(8):
        manager.add_combatant(make_template(f"C{i}", dex=6 + i))
    manager.roll_initiative()
    values = [c.initiative for c in manager.roster]
    assert values == sorted(values, reverse=True)


def test_favorite_wins_when_manual_value_is_higher(rng, make_template):
    prompt = scripted_prompt("15")
    manager = CombatManager(rng=rng, manual_entry=prompt)
    manager.add_combatant(make_template("A", dex=16))
    b = manager.add_combatant(make_template("B", dex=10))
    manager.toggle_favorite(b)
    rng.push(11)

    manager.roll_initiative()

    assert names(manager) == ["B", "A"]
    assert [c.initiative for c in manager.roster] == [15, 14]
    assert prompt.questions == [("Enter initiative for B:", "10")]


def test_rolled_combatant_wins_when_roll_is_higher(rng, make_template):
    manager = CombatManager(rng=rng, manual_entry=scripted_prompt("15"))
    manager.add_combatant(make_template("A", dex=16))
    b = manager.add_combatant(make_template("B", dex=10))
    manager.toggle_favorite(b)
    rng.push(13)

    manager.roll_initiative()

    assert names(manager) == ["A", "B"]
    assert manager.acting.initiative == 16


def test_unparsable_manual_entry_defaults_to_zero(rng, make_template):
    manager = CombatManager(rng=rng, manual_entry=scripted_prompt("abc", None, "12abc"))
    for name in ("X", "Y", "Z"):
        manager.toggle_favorite(manager.add_combatant(make_template(name)))

    manager.roll_initiative()

    assert {c.name: c.initiative for c in manager.roster} == {"X": 0, "Y": 0, "Z": 12}
    assert rng.calls == []


def test_favorite_without_prompt_uses_default_answer(manager, rng, make_template):
    manager.toggle_favorite(manager.add_combatant(make_template("Fav")))
    manager.roll_initiative()
    assert manager.acting.initiative == 10


def test_ties_keep_roster_order(rng, make_template):
    manager = CombatManager(rng=rng, manual_entry=scripted_prompt("12"))
    manager.add_combatant(make_template("First", dex=10))
    manager.add_combatant(make_template("Second", dex=12))
    manager.toggle_favorite(manager.add_combatant(make_template("Third")))
    rng.push(12, 11)

    manager.roll_initiative()

    assert [c.initiative for c in manager.roster] == [12, 12, 12]
    assert names(manager) == ["First", "Second", "Third"]


def test_end_turn_rotates_and_full_cycle_restores_order(manager, rng, make_template):
    for name, dex in (("A", 14), ("B", 12), ("C", 10)):
        manager.add_combatant(make_template(name, dex=dex))
    rng.push(10, 10, 10)
    manager.roll_initiative()
    start = names(manager)

    assert manager.end_turn().name == "B"
    assert names(manager) == ["B", "C", "A"]
    manager.end_turn()
    manager.end_turn()
    assert names(manager) == start


def test_end_turn_before_initiative_is_noop(manager, make_template):
    manager.add_combatant(make_template("A"))
    manager.add_combatant(make_template("B"))
    assert manager.end_turn() is None
    assert names(manager) == ["A", "B"]


def test_end_turn_on_small_rosters(manager, rng, make_template):
    manager.roll_initiative()
    assert manager.end_turn() is None

    manager.add_combatant(make_template("Solo"))
    rng.push(4)
    manager.roll_initiative()
    assert manager.end_turn().name == "Solo"
    assert names(manager) == ["Solo"]


def test_end_turn_decays_only_the_acting_combatant(manager, rng, make_template):
    a = manager.add_combatant(make_template("A", dex=20))
    b = manager.add_combatant(make_template("B", dex=1))
    rng.push(10, 10)
    manager.roll_initiative()
    manager.add_effect(EffectSpec(name="Blessed", rounds=2), a)
    manager.add_effect(EffectSpec(name="Cursed", rounds=2), b)

    manager.end_turn()

    assert manager.get(a).effects[0].remaining_rounds == 1
    assert manager.get(b).effects[0].remaining_rounds == 2


def test_initiative_can_be_rerolled(manager, rng, make_template):
    manager.add_combatant(make_template("A"))
    manager.add_combatant(make_template("B"))
    rng.push(5, 15)
    manager.roll_initiative()
    assert names(manager) == ["B", "A"]
    # Rolls follow the current order: B first, then A.
    rng.push(5, 15)
    manager.roll_initiative()
    assert names(manager) == ["A", "B"]
