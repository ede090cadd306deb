"""
Initiative module for the battle tracker.

Rolls initiative, sorts the roster and rotates turns. Favorite combatants get
their initiative typed in by hand through an injected prompt; everyone else
rolls a d20 plus their dexterity modifier.
"""

from collections import deque
from collections.abc import Callable

from battle_tracker.character.main import Combatant
from battle_tracker.core.constants import CombatPhase, TrackerSettings
from battle_tracker.core.dice_parser import DiceRoller
from battle_tracker.core.logging import log_debug, log_info
from battle_tracker.core.utils import parse_int_input
from battle_tracker.effects.effect_manager import EffectTracker

from .combat_state import CombatState

# Asks for a value: receives the question and the suggested answer, returns
# the raw text typed (None if nothing was entered).
ManualEntry = Callable[[str, str], str | None]


class InitiativeScheduler:
    """
    Orders the roster and rotates turns.

    The scheduler has two phases, ``SETUP`` and ``ROLLED_INITIATIVE``. Rolling
    initiative moves to the second phase and may be repeated to re-roll.
    """

    def __init__(
        self,
        state: CombatState,
        dice: DiceRoller,
        effects: EffectTracker,
        manual_entry: ManualEntry | None = None,
        settings: TrackerSettings | None = None,
    ) -> None:
        self.state = state
        self.dice = dice
        self.effects = effects
        self.settings = settings or TrackerSettings()
        self.manual_entry: ManualEntry = manual_entry or self._default_entry

    def _default_entry(self, _question: str, default: str) -> str:
        return default

    def _initiative_of(self, combatant: Combatant) -> int:
        if combatant.is_favorite:
            answer = self.manual_entry(
                f"Enter initiative for {combatant.name}:",
                self.settings.manual_initiative_default,
            )
            return parse_int_input(answer, default=0)
        return self.dice.d20() + combatant.DEX

    def roll_initiative(self) -> list[Combatant]:
        """
        Assigns an initiative to every combatant and sorts the roster.

        The roster is sorted by descending initiative. Combatants with the
        same initiative keep the order they had before the roll.

        Returns:
            list[Combatant]:
                The new turn order. Its first element is the acting combatant.

        """
        for combatant in self.state.turn_order:
            combatant.initiative = self._initiative_of(combatant)

        ranked = sorted(
            enumerate(self.state.turn_order),
            key=lambda entry: (-(entry[1].initiative or 0), entry[0]),
        )
        self.state.turn_order = deque(combatant for _, combatant in ranked)
        self.state.phase = CombatPhase.ROLLED_INITIATIVE

        log_info(
            "Initiative rolled: "
            + ", ".join(f"{c.name} ({c.initiative})" for c in self.state.turn_order)
        )
        return list(self.state.turn_order)

    def end_turn(self) -> Combatant | None:
        """
        Ends the turn of the acting combatant.

        The acting combatant's effects tick down once, then it moves to the
        back of the turn order. Nothing happens before initiative is rolled.

        Returns:
            Combatant | None:
                The new acting combatant, or None if nobody is acting.

        """
        acting = self.state.acting
        if acting is None:
            log_debug("No acting combatant, ignoring end of turn")
            return None
        self.effects.decay(acting.instance_id)
        self.state.turn_order.rotate(-1)
        log_debug(f"Turn passes from {acting.name} to {self.state.acting}")
        return self.state.acting
