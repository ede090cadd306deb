"""
Combat manager module for the battle tracker.

Owns the encounter state and wires the combat components together, exposing
the whole tracker as a set of commands and read-only queries. Commands run to
completion one at a time; none of them raises on bad input.
"""

from collections.abc import Iterable

from battle_tracker.actions.action_resolver import ActionResolver
from battle_tracker.character.character_actions import Attack, KnownSpell
from battle_tracker.character.main import Combatant, CombatantTemplate
from battle_tracker.core.constants import AbilityKey, CombatPhase, TrackerSettings
from battle_tracker.core.dice_parser import DiceRoller, RandomSource
from battle_tracker.core.utils import parse_int_input
from battle_tracker.effects.base_effect import CustomEffectForm, EffectSpec, StatusEffect
from battle_tracker.effects.effect_manager import EffectTracker

from .combat_result import DamageResult, HpChangeResult, Notifier, SavingThrowResult
from .combat_state import CombatState
from .concentration import ConcentrationMonitor
from .damage import HpResolver
from .initiative import InitiativeScheduler, ManualEntry
from .registry import CombatantRegistry


class CombatManager:
    """
    Manages an encounter: roster, initiative, hit points, effects and
    concentration.

    Args:
        rng (RandomSource | None):
            Random source for every roll, a fresh ``random.Random`` if None.
        manual_entry (ManualEntry | None):
            Prompt used for the initiative of favorite combatants.
        notifier (Notifier | None):
            Receives the text of saving throw and concentration outcomes.
        settings (TrackerSettings | None):
            Tunable defaults.

    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        manual_entry: ManualEntry | None = None,
        notifier: Notifier | None = None,
        settings: TrackerSettings | None = None,
    ) -> None:
        self.settings: TrackerSettings = settings or TrackerSettings()
        self.state: CombatState = CombatState()
        self.dice: DiceRoller = DiceRoller(rng)

        self.registry = CombatantRegistry(self.state)
        self.effects = EffectTracker(self.state, self.settings)
        self.concentration = ConcentrationMonitor(self.state, self.dice, self.settings)
        self.hp = HpResolver(self.state, self.concentration, notifier)
        self.scheduler = InitiativeScheduler(
            self.state, self.dice, self.effects, manual_entry, self.settings
        )
        self.actions = ActionResolver(
            self.state, self.dice, self.hp, self.effects, notifier, self.settings
        )

    # ============================================================================
    # QUERIES
    # ============================================================================

    @property
    def roster(self) -> list[Combatant]:
        """The combatants in turn order."""
        return list(self.state.turn_order)

    @property
    def acting(self) -> Combatant | None:
        """The combatant whose turn it is, None before initiative."""
        return self.state.acting

    @property
    def concentrating(self) -> frozenset[str]:
        """Ids of the combatants maintaining concentration."""
        return frozenset(self.state.concentrating)

    @property
    def phase(self) -> CombatPhase:
        return self.state.phase

    def get(self, instance_id: str | None) -> Combatant | None:
        return self.state.get(instance_id)

    # ============================================================================
    # ROSTER
    # ============================================================================

    def add_combatant(self, template: CombatantTemplate) -> str:
        """Adds a copy of a template to the roster and returns its id."""
        return self.registry.add(template).instance_id

    def remove_combatant(self, instance_id: str | None) -> Combatant | None:
        return self.registry.remove(instance_id)

    def toggle_favorite(self, instance_id: str | None) -> bool | None:
        return self.registry.toggle_favorite(instance_id)

    # ============================================================================
    # TURNS
    # ============================================================================

    def roll_initiative(self) -> list[Combatant]:
        return self.scheduler.roll_initiative()

    def end_turn(self) -> Combatant | None:
        return self.scheduler.end_turn()

    # ============================================================================
    # HIT POINTS, EFFECTS, CONCENTRATION
    # ============================================================================

    def modify_hp(self, amount: int | None, instance_id: str | None) -> HpChangeResult | None:
        return self.hp.modify_hp(amount, instance_id)

    def apply_hp_input(
        self,
        text: str | None,
        instance_ids: Iterable[str],
    ) -> list[HpChangeResult]:
        """
        Applies an HP change typed by a user to several combatants.

        Args:
            text (str | None):
                The raw amount, e.g. "-7". Unparsable text counts as 0 and
                commits nothing.
            instance_ids (Iterable[str]):
                The selected combatants.

        Returns:
            list[HpChangeResult]:
                The committed changes.

        """
        amount = parse_int_input(text, default=0)
        results = []
        for instance_id in instance_ids:
            change = self.hp.modify_hp(amount, instance_id)
            if change is not None:
                results.append(change)
        return results

    def toggle_concentration(self, instance_id: str | None) -> bool | None:
        return self.concentration.toggle(instance_id)

    def add_effect(self, effect: EffectSpec | None, instance_id: str | None) -> StatusEffect | None:
        return self.effects.add_effect(effect, instance_id)

    def add_custom_effect(
        self,
        form: CustomEffectForm | None,
        instance_id: str | None,
    ) -> StatusEffect | None:
        return self.effects.add_custom_effect(form, instance_id)

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def roll_saving_throw(
        self,
        instance_id: str | None,
        ability_key: AbilityKey | str | None,
    ) -> SavingThrowResult | None:
        return self.actions.roll_saving_throw(instance_id, ability_key)

    def resolve_attack(
        self,
        attack: Attack | None,
        instance_ids: Iterable[str] | None,
    ) -> list[DamageResult]:
        return self.actions.resolve_attack(attack, instance_ids)

    def resolve_spell(
        self,
        spell: KnownSpell | None,
        instance_ids: Iterable[str] | None,
    ) -> list[DamageResult]:
        return self.actions.resolve_spell(spell, instance_ids)
