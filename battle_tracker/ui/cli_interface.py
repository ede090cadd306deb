"""
User interface module for the battle tracker.

Provides the console collaborators of the combat core: a prompt_toolkit prompt
for manually entered initiative, a rich notification sink for save and
concentration outcomes, and a rich table of the turn order.
"""

from prompt_toolkit import ANSI, PromptSession
from rich.panel import Panel
from rich.table import Table

from battle_tracker.combat.combat_manager import CombatManager
from battle_tracker.core.utils import ccapture, cprint, make_bar

_session: PromptSession | None = None


def _get_session() -> PromptSession:
    # one session keeps history
    global _session
    if _session is None:
        _session = PromptSession(erase_when_done=True)
    return _session


def ask_value(question: str, default: str) -> str | None:
    """
    Asks the user to type a value.

    Args:
        question (str): The question to show.
        default (str): The answer pre-filled in the prompt.

    Returns:
        str | None: The typed text, None if the prompt was aborted.

    """
    prompt = ccapture(f"[bold yellow]{question}[/] ")
    try:
        return _get_session().prompt(ANSI(prompt), default=default)
    except (EOFError, KeyboardInterrupt):
        return None


def notify(message: str) -> None:
    """Shows a save or concentration outcome."""
    cprint(Panel(message, border_style="cyan", expand=False))


def turn_order_table(manager: CombatManager) -> Table:
    """
    Builds a table of the roster in turn order.

    Args:
        manager (CombatManager): The encounter to show.

    Returns:
        Table: One row per combatant, the acting one highlighted.

    """
    acting = manager.acting
    table = Table(title="Turn Order", pad_edge=False)
    table.add_column("Init", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("HP")
    table.add_column("AC", justify="right")
    table.add_column("Conc.", justify="center")
    table.add_column("Effects")
    for combatant in manager.roster:
        hp = combatant.hit_points
        name = combatant.name
        if combatant.is_favorite:
            name = f"★ {name}"
        if combatant == acting:
            name = f"[reverse]{name}[/]"
        effects = ", ".join(e.display_name for e in combatant.effects) or "-"
        table.add_row(
            "-" if combatant.initiative is None else str(combatant.initiative),
            name,
            f"{make_bar(hp.current, hp.max, color='red')} {hp}",
            str(combatant.armor_class),
            "◉" if combatant.instance_id in manager.concentrating else "",
            effects,
        )
    return table


def print_turn_order(manager: CombatManager) -> None:
    """Prints the turn order table."""
    cprint(turn_order_table(manager))
