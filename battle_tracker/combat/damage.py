"""
Damage module for the battle tracker.

Applies healing and damage to combatants. Damage against a concentrating
combatant first goes through the concentration check; the hit points are then
clamped between zero and the maximum. The outcome of the check is reported
only after the new hit points are committed.
"""

from catchery import log_warning

from battle_tracker.core.logging import log_debug

from .combat_result import HpChangeResult, Notifier
from .combat_state import CombatState
from .concentration import ConcentrationMonitor


class HpResolver:
    """Commits hit point changes to the combatants of an encounter."""

    def __init__(
        self,
        state: CombatState,
        concentration: ConcentrationMonitor,
        notifier: Notifier | None = None,
    ) -> None:
        self.state = state
        self.concentration = concentration
        self.notifier = notifier

    def modify_hp(self, amount: int | None, target_id: str | None) -> HpChangeResult | None:
        """
        Heals or damages a combatant.

        A negative amount is damage, a positive amount is healing. Overheal
        and overkill are silently clamped.

        Args:
            amount (int | None):
                The signed change. Zero or None changes nothing.
            target_id (str | None):
                The combatant to change.

        Returns:
            HpChangeResult | None:
                The committed change, or None when nothing was committed.

        """
        if not amount:
            return None
        target = self.state.get(target_id)
        if target is None:
            log_warning(
                "Cannot modify HP of unknown combatant",
                {"id": target_id, "amount": amount, "context": "modify_hp"},
            )
            return None

        check = None
        if amount < 0 and self.state.is_concentrating(target.instance_id):
            check = self.concentration.check_on_damage(target.instance_id, abs(amount))

        previous = target.hit_points.current
        target.hit_points.adjust(amount)

        log_debug(
            f"{target.name} HP {previous} -> {target.hit_points}",
            {"amount": amount},
        )
        result = HpChangeResult(
            combatant_id=target.instance_id,
            amount=amount,
            previous=previous,
            current=target.hit_points.current,
            concentration=check,
        )
        if check is not None and self.notifier:
            self.notifier(check.message)
        return result
