"""
Effect manager module for the battle tracker.

Attaches timed status effects to combatants and counts them down. Decay is
scoped to a single combatant: ending a turn only ticks the effects of the
combatant whose turn ended, never those of the rest of the roster.
"""

from catchery import log_warning

from battle_tracker.combat.combat_state import CombatState
from battle_tracker.core.constants import TrackerSettings
from battle_tracker.core.logging import log_debug
from battle_tracker.core.utils import parse_int_input

from .base_effect import CustomEffectForm, EffectSpec, StatusEffect


class EffectTracker:
    """
    Manages the status effects of the combatants of an encounter.

    Attributes:
        state (CombatState):
            The encounter whose combatants carry the effects.
        settings (TrackerSettings):
            Provides the default duration and the unknown source name.

    """

    def __init__(self, state: CombatState, settings: TrackerSettings | None = None) -> None:
        self.state = state
        self.settings = settings or TrackerSettings()

    def _source_name(self) -> str:
        acting = self.state.acting
        return acting.name if acting else self.settings.unknown_source

    def add_effect(
        self,
        effect: EffectSpec | None,
        target_id: str | None,
    ) -> StatusEffect | None:
        """
        Attaches an effect to a combatant.

        The effect lasts ``effect.rounds`` rounds, or the configured default
        when no duration is given. Its source is the acting combatant.

        Args:
            effect (EffectSpec | None):
                The name, description and optional duration of the effect.
            target_id (str | None):
                The combatant receiving the effect.

        Returns:
            StatusEffect | None:
                The attached effect, or None if the effect or the target is
                missing.

        """
        if effect is None:
            return None
        target = self.state.get(target_id)
        if target is None:
            log_warning(
                "Cannot add effect to unknown combatant",
                {"id": target_id, "effect": effect.name, "context": "add_effect"},
            )
            return None
        status = StatusEffect(
            name=effect.name,
            description=effect.description,
            remaining_rounds=effect.rounds or self.settings.effect_duration,
            source_name=self._source_name(),
        )
        target.effects.append(status)
        log_debug(
            f"{target.name} gains {status.display_name}",
            {"source": status.source_name},
        )
        return status

    def add_custom_effect(
        self,
        form: CustomEffectForm | None,
        target_id: str | None,
    ) -> StatusEffect | None:
        """
        Commits a custom-effect form typed by a user.

        The form is rejected, without touching the encounter, when the name is
        empty, the target is unknown or the duration is not a positive
        integer.

        Args:
            form (CustomEffectForm | None):
                The raw form.
            target_id (str | None):
                The combatant receiving the effect.

        Returns:
            StatusEffect | None:
                The attached effect, or None if the form was rejected.

        """
        if form is None or not form.name:
            return None
        rounds = parse_int_input(form.rounds, default=None)
        if rounds is None or rounds < 1:
            log_warning(
                "Effect duration must be a positive integer",
                {"rounds": form.rounds, "effect": form.name, "context": "add_custom_effect"},
            )
            return None
        return self.add_effect(
            EffectSpec(name=form.name, description=form.description, rounds=rounds),
            target_id,
        )

    def decay(self, combatant_id: str | None) -> list[StatusEffect]:
        """
        Ticks down the effects of one combatant.

        Every effect loses one round; effects reaching zero are removed in the
        same step. Effects of other combatants are left untouched.

        Args:
            combatant_id (str | None):
                The combatant whose turn just ended.

        Returns:
            list[StatusEffect]:
                The effects that expired.

        """
        combatant = self.state.get(combatant_id)
        if combatant is None:
            return []
        remaining: list[StatusEffect] = []
        expired: list[StatusEffect] = []
        for effect in combatant.effects:
            if effect.tick():
                remaining.append(effect)
            else:
                expired.append(effect)
        combatant.effects = remaining
        for effect in expired:
            log_debug(f"{effect.name} expired on {combatant.name}")
        return expired
