"""
Combatant registry module for the battle tracker.

Owns the roster: adds fresh combatant instances built from templates, looks
them up, toggles the favorite flag and removes them from the encounter.
"""

from catchery import log_warning

from battle_tracker.character.main import Combatant, CombatantTemplate
from battle_tracker.core.logging import log_debug

from .combat_state import CombatState


class CombatantRegistry:
    """Adds, finds and removes combatants of a ``CombatState``."""

    def __init__(self, state: CombatState) -> None:
        self.state = state

    def add(self, template: CombatantTemplate) -> Combatant:
        """
        Appends a new combatant built from a template.

        Args:
            template (CombatantTemplate):
                The normalized template to copy.

        Returns:
            Combatant:
                The new instance, placed at the end of the turn order.

        """
        combatant = Combatant.from_template(template)
        self.state.turn_order.append(combatant)
        log_debug(
            f"Added {combatant.name} to the roster",
            {"id": combatant.instance_id, "roster_size": len(self.state)},
        )
        return combatant

    def get(self, instance_id: str | None) -> Combatant | None:
        """Returns the combatant with the given id, None when absent."""
        return self.state.get(instance_id)

    def toggle_favorite(self, instance_id: str | None) -> bool | None:
        """
        Flips the favorite flag of a combatant.

        Args:
            instance_id (str | None):
                The combatant to toggle.

        Returns:
            bool | None:
                The new flag, or None if the id is not in the roster.

        """
        combatant = self.state.get(instance_id)
        if combatant is None:
            log_warning(
                "Cannot toggle favorite of unknown combatant",
                {"id": instance_id, "context": "toggle_favorite"},
            )
            return None
        combatant.is_favorite = not combatant.is_favorite
        return combatant.is_favorite

    def remove(self, instance_id: str | None) -> Combatant | None:
        """
        Removes a combatant from the encounter.

        The combatant leaves the turn order and stops concentrating. The
        relative order of the remaining combatants is unchanged.

        Args:
            instance_id (str | None):
                The combatant to remove.

        Returns:
            Combatant | None:
                The removed combatant, or None if the id is not in the roster.

        """
        combatant = self.state.get(instance_id)
        if combatant is None:
            log_warning(
                "Cannot remove unknown combatant",
                {"id": instance_id, "context": "remove_combatant"},
            )
            return None
        self.state.turn_order.remove(combatant)
        self.state.concentrating.discard(combatant.instance_id)
        log_debug(f"Removed {combatant.name} from the roster", {"id": instance_id})
        return combatant
