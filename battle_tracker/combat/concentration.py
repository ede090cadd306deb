"""
Concentration module for the battle tracker.

Tracks which combatants are maintaining concentration and arbitrates the
save-or-break check when a concentrating combatant takes damage. The check is
only ever run by the hit point resolver, before the damage is committed.
"""

from catchery import log_warning

from battle_tracker.core.constants import TrackerSettings
from battle_tracker.core.dice_parser import DiceRoller
from battle_tracker.core.logging import log_info

from .combat_result import ConcentrationCheckResult
from .combat_state import CombatState


class ConcentrationMonitor:
    """Manages the concentration set of an encounter."""

    def __init__(
        self,
        state: CombatState,
        dice: DiceRoller,
        settings: TrackerSettings | None = None,
    ) -> None:
        self.state = state
        self.dice = dice
        self.settings = settings or TrackerSettings()

    def toggle(self, combatant_id: str | None) -> bool | None:
        """
        Starts or stops concentration for a combatant.

        Args:
            combatant_id (str | None):
                The combatant to toggle.

        Returns:
            bool | None:
                True if the combatant is now concentrating, False if it
                stopped, None if the id is not in the roster.

        """
        if combatant_id not in self.state:
            log_warning(
                "Cannot toggle concentration of unknown combatant",
                {"id": combatant_id, "context": "toggle_concentration"},
            )
            return None
        if combatant_id in self.state.concentrating:
            self.state.concentrating.discard(combatant_id)
            return False
        self.state.concentrating.add(combatant_id)
        return True

    def save_dc(self, damage: int) -> int:
        """Returns the DC of the check caused by an amount of damage."""
        return max(self.settings.min_concentration_dc, abs(damage) // 2)

    def check_on_damage(
        self,
        combatant_id: str | None,
        damage: int,
    ) -> ConcentrationCheckResult | None:
        """
        Runs a concentration check against an amount of damage.

        The combatant rolls a d20 plus its constitution modifier against
        ``max(10, damage // 2)``. On a failure it leaves the concentration
        set. Hit points are never touched here, and the outcome is not
        reported: the caller notifies once the damage is committed.

        Args:
            combatant_id (str | None):
                The combatant taking the damage.
            damage (int):
                The amount of damage taken.

        Returns:
            ConcentrationCheckResult | None:
                The outcome, or None if the combatant is not concentrating.

        """
        if not self.state.is_concentrating(combatant_id):
            return None
        combatant = self.state.get(combatant_id)
        if combatant is None:
            # Stale id, the set must only hold roster members.
            self.state.concentrating.discard(combatant_id)
            return None

        dc = self.save_dc(damage)
        modifier = combatant.CON
        roll = self.dice.d20()
        total = roll + modifier
        maintained = total >= dc
        if not maintained:
            self.state.concentrating.discard(combatant.instance_id)

        result = ConcentrationCheckResult(
            combatant_id=combatant.instance_id,
            combatant_name=combatant.name,
            roll=roll,
            modifier=modifier,
            total=total,
            dc=dc,
            maintained=maintained,
        )
        log_info(result.message, {"roll": roll, "modifier": modifier})
        return result
