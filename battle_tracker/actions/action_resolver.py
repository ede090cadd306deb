"""
Action resolver module for the battle tracker.

Turns a chosen attack or spell into dice rolls, hit point changes and status
effects against each selected target, and rolls saving throws on request.
Attacks always hit: armor class is not compared.
"""

from collections.abc import Iterable

from catchery import log_warning

from battle_tracker.character.character_actions import Attack, KnownSpell
from battle_tracker.combat.combat_result import DamageResult, Notifier, SavingThrowResult
from battle_tracker.combat.combat_state import CombatState
from battle_tracker.combat.damage import HpResolver
from battle_tracker.core.constants import AbilityKey, TrackerSettings
from battle_tracker.core.dice_parser import DiceRoller
from battle_tracker.core.logging import log_info
from battle_tracker.effects.base_effect import EffectSpec
from battle_tracker.effects.effect_manager import EffectTracker


class ActionResolver:
    """Resolves attacks, spells and saving throws."""

    def __init__(
        self,
        state: CombatState,
        dice: DiceRoller,
        hp: HpResolver,
        effects: EffectTracker,
        notifier: Notifier | None = None,
        settings: TrackerSettings | None = None,
    ) -> None:
        self.state = state
        self.dice = dice
        self.hp = hp
        self.effects = effects
        self.notifier = notifier
        self.settings = settings or TrackerSettings()

    def _known_targets(self, target_ids: Iterable[str] | None, context: str) -> list[str]:
        targets = []
        for target_id in target_ids or []:
            if target_id in self.state:
                targets.append(target_id)
            else:
                log_warning(
                    "Skipping unknown target",
                    {"id": target_id, "context": context},
                )
        return targets

    def resolve_attack(
        self,
        attack: Attack | None,
        target_ids: Iterable[str] | None,
    ) -> list[DamageResult]:
        """
        Hits every target with an attack.

        Damage is rolled separately for each target.

        Args:
            attack (Attack | None):
                The attack to use.
            target_ids (Iterable[str] | None):
                The targets, in selection order.

        Returns:
            list[DamageResult]:
                One result per known target.

        """
        if attack is None:
            return []
        results = []
        for target_id in self._known_targets(target_ids, "resolve_attack"):
            breakdown = self.dice.describe(attack.damage)
            change = self.hp.modify_hp(-breakdown.value, target_id)
            results.append(
                DamageResult(
                    target_id=target_id,
                    source_name=attack.name,
                    damage=breakdown.value,
                    description=breakdown.description,
                    hp_change=change,
                )
            )
        return results

    def resolve_spell(
        self,
        spell: KnownSpell | None,
        target_ids: Iterable[str] | None,
    ) -> list[DamageResult]:
        """
        Casts a spell on every target.

        Each target takes the fixed spell damage. When the spell description
        contains the effect keyword, the target also gains a status effect
        named after the spell.

        Args:
            spell (KnownSpell | None):
                The spell to cast.
            target_ids (Iterable[str] | None):
                The targets, in selection order.

        Returns:
            list[DamageResult]:
                One result per known target.

        """
        if spell is None:
            return []
        adds_effect = spell.mentions(self.settings.spell_effect_keyword)
        results = []
        for target_id in self._known_targets(target_ids, "resolve_spell"):
            breakdown = self.dice.describe(self.settings.spell_damage_roll)
            change = self.hp.modify_hp(-breakdown.value, target_id)
            effect = None
            if adds_effect:
                effect = self.effects.add_effect(
                    EffectSpec(name=spell.name, description=spell.description),
                    target_id,
                )
            results.append(
                DamageResult(
                    target_id=target_id,
                    source_name=spell.name,
                    damage=breakdown.value,
                    description=breakdown.description,
                    hp_change=change,
                    effect_added=effect is not None,
                )
            )
        return results

    def roll_saving_throw(
        self,
        combatant_id: str | None,
        ability_key: AbilityKey | str | None,
    ) -> SavingThrowResult | None:
        """
        Rolls a saving throw for a combatant.

        Args:
            combatant_id (str | None):
                The combatant making the save.
            ability_key (AbilityKey | str | None):
                The ability, as an enum, short key ("dex") or full name.

        Returns:
            SavingThrowResult | None:
                The roll, modifier and total, or None if the combatant or the
                ability is unknown.

        """
        combatant = self.state.get(combatant_id)
        ability = AbilityKey.parse(ability_key)
        if combatant is None or ability is None:
            log_warning(
                "Cannot roll saving throw",
                {"id": combatant_id, "ability": ability_key, "context": "roll_saving_throw"},
            )
            return None
        modifier = combatant.modifier(ability)
        roll = self.dice.d20()
        result = SavingThrowResult(
            combatant_id=combatant.instance_id,
            combatant_name=combatant.name,
            ability=ability,
            roll=roll,
            modifier=modifier,
            total=roll + modifier,
        )
        log_info(f"{combatant.name} rolls a {ability.value.upper()} save", {"total": result.total})
        if self.notifier:
            self.notifier(result.message)
        return result
