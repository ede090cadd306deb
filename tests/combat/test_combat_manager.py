"""
End-to-end tests for the combat manager.
"""

import random

from battle_tracker.combat.combat_manager import CombatManager
from battle_tracker.core.constants import CombatPhase
from battle_tracker.core.content import ContentRepository
from battle_tracker.main import ENCOUNTER, play_turn


def test_full_round(manager, rng, messages, make_template):
    fighter = manager.add_combatant(make_template("Fighter", hp=30, dex=12, con=14))
    wizard = manager.add_combatant(make_template("Wizard", hp=12, dex=14, con=10))
    assert manager.phase is CombatPhase.SETUP
    assert manager.acting is None

    rng.push(10, 15)
    manager.roll_initiative()
    assert manager.acting.instance_id == wizard
    assert manager.get(wizard).initiative == 17

    manager.toggle_concentration(wizard)
    rng.push(1)
    change = manager.modify_hp(-8, wizard)
    assert change.current == 4
    assert wizard not in manager.concentrating
    assert messages == ["Wizard failed concentration check (DC 10): 1 < 10"]

    assert manager.end_turn().instance_id == fighter
    assert manager.end_turn().instance_id == wizard


def test_apply_hp_input(manager, make_template):
    ids = [manager.add_combatant(make_template(n, hp=20)) for n in ("A", "B")]
    results = manager.apply_hp_input("-7", ids)
    assert [r.current for r in results] == [13, 13]
    assert manager.apply_hp_input("abc", ids) == []
    assert manager.apply_hp_input("+3 hp", ids + ["ghost"])[1].current == 16


def test_queries_return_copies(manager, make_template):
    target = manager.add_combatant(make_template())
    manager.toggle_concentration(target)

    manager.roster.clear()
    assert len(manager.roster) == 1
    assert isinstance(manager.concentrating, frozenset)
    assert target in manager.concentrating


def test_remove_combatant(manager, rng, make_template):
    a = manager.add_combatant(make_template("A"))
    b = manager.add_combatant(make_template("B"))
    rng.push(18, 4)
    manager.roll_initiative()
    manager.toggle_concentration(a)

    removed = manager.remove_combatant(a)

    assert removed.name == "A"
    assert a not in manager.concentrating
    assert manager.acting.instance_id == b
    assert manager.remove_combatant(a) is None


def test_bundled_encounter_plays_out():
    repo = ContentRepository.bundled()
    manager = CombatManager(rng=random.Random(7))
    for entry_id in ENCOUNTER:
        manager.add_combatant(repo.get_combatant(entry_id))
    manager.roll_initiative()

    initiatives = [c.initiative for c in manager.roster]
    assert initiatives == sorted(initiatives, reverse=True)

    for _ in range(3 * len(ENCOUNTER)):
        play_turn(manager)
        assert manager.phase is CombatPhase.ROLLED_INITIATIVE
        for combatant in manager.roster:
            hp = combatant.hit_points
            assert 0 <= hp.current <= hp.max
            assert all(e.remaining_rounds >= 1 for e in combatant.effects)
        assert manager.concentrating <= {c.instance_id for c in manager.roster}
