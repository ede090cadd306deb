"""
Main entry point for the battle tracker.

Loads the bundled catalog, sets up a small encounter and plays a few turns:
every acting combatant casts its last listed spell or swings its first attack
at the next combatant in line. Favorite combatants are asked for their initiative.
"""

import logging

from battle_tracker.combat.combat_manager import CombatManager
from battle_tracker.core.content import ContentRepository
from battle_tracker.core.logging import setup_logging
from battle_tracker.core.utils import cprint, crule
from battle_tracker.ui.cli_interface import ask_value, notify, print_turn_order

ENCOUNTER = ["goblin-mm", "goblin-mm", "orc-mm", "cult-fanatic-mm", "knight-mm"]


def play_turn(manager: CombatManager) -> None:
    """Lets the acting combatant act against the next one in the turn order."""
    actor = manager.acting
    if actor is None or len(manager.roster) < 2:
        return
    target = manager.roster[1]
    if actor.known_spells:
        spell = actor.known_spells[-1]
        results = manager.resolve_spell(spell, [target.instance_id])
        if actor.instance_id not in manager.concentrating:
            manager.toggle_concentration(actor.instance_id)
    elif actor.attacks:
        results = manager.resolve_attack(actor.attacks[0], [target.instance_id])
    else:
        results = []
    for result in results:
        cprint(
            f"    {actor.name} uses [bold]{result.source_name}[/] on {target.name}: "
            f"{result.damage} damage ({result.description})"
        )
    manager.end_turn()


def main(rounds: int = 2) -> None:
    setup_logging(logging.INFO)
    crule("Battle Tracker", style="bold green")

    repo = ContentRepository.bundled()
    manager = CombatManager(manual_entry=ask_value, notifier=notify)
    for entry_id in ENCOUNTER:
        template = repo.get_combatant(entry_id)
        if template is not None:
            manager.add_combatant(template)
    # The knight is played by a human and rolls at the table.
    knight = next(c for c in manager.roster if c.name == "Knight")
    manager.toggle_favorite(knight.instance_id)

    crule(":crossed_swords:  Initiative", style="bold green")
    manager.roll_initiative()
    print_turn_order(manager)

    try:
        for turn in range(rounds * len(manager.roster)):
            crule(f"Turn {turn + 1}: {manager.acting}", style="cyan")
            play_turn(manager)
        print_turn_order(manager)
    except KeyboardInterrupt:
        cprint("")
        crule(":crossed_swords:  Combat Interrupted", style="bold red")


if __name__ == "__main__":
    main()
