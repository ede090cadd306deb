"""
Combatant module for the battle tracker.

Defines the normalized combatant template produced by the catalog, and the
combatant instance that occupies one slot of the roster. Instances are deep
copies of their template and never share state with it or with each other.
"""

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from battle_tracker.core.constants import AbilityKey
from battle_tracker.effects.base_effect import StatusEffect

from .character_actions import Attack, KnownSpell, NonAttackAction
from .character_stats import AbilityScores, HitPoints


class CombatantTemplate(BaseModel):
    """
    A normalized stat block, as delivered by the catalog.

    Attributes:
        name (str):
            The name of the creature.
        hit_points (int):
            The average hit points, used as both current and maximum HP.
        armor_class (int):
            The armor class.
        ability_scores (AbilityScores):
            The six ability scores.
        attacks (list[Attack]):
            The attacks, in stat block order.
        non_attack_actions (list[NonAttackAction]):
            The other actions, in stat block order.
        known_spells (list[KnownSpell]):
            The spells the creature can cast.

    """

    name: str = Field("Unknown Monster", description="The name of the creature.")
    hit_points: int = Field(0, ge=0, description="The average hit points.")
    armor_class: int = Field(10, description="The armor class.")
    ability_scores: AbilityScores = Field(
        default_factory=AbilityScores,
        description="The six ability scores.",
    )
    attacks: list[Attack] = Field(default_factory=list)
    non_attack_actions: list[NonAttackAction] = Field(default_factory=list)
    known_spells: list[KnownSpell] = Field(default_factory=list)
    creature_type: str | None = Field(None, description="The creature type.")
    challenge_rating: str | None = Field(None, description="The challenge rating.")
    source: str | None = Field(None, description="The book the stat block comes from.")


def new_instance_id() -> str:
    """Generates a session-unique combatant identifier."""
    return uuid4().hex


class Combatant(BaseModel):
    """
    One participant of the encounter.

    Created by the registry from a template; mutated in place by the combat
    components (hit points, effects, favorite flag, initiative).
    """

    instance_id: str = Field(
        default_factory=new_instance_id,
        description="Unique identifier assigned when added to the roster.",
    )
    name: str = Field(description="The name of the combatant.")
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    armor_class: int = Field(10, description="The armor class.")
    hit_points: HitPoints = Field(description="Current and maximum hit points.")
    attacks: list[Attack] = Field(default_factory=list)
    non_attack_actions: list[NonAttackAction] = Field(default_factory=list)
    known_spells: list[KnownSpell] = Field(default_factory=list)
    effects: list[StatusEffect] = Field(default_factory=list)
    is_favorite: bool = Field(
        False,
        description="Favorites get their initiative typed in by hand.",
    )
    initiative: int | None = Field(
        None,
        description="Initiative value, None until initiative is rolled.",
    )
    creature_type: str | None = Field(None)
    challenge_rating: str | None = Field(None)
    source: str | None = Field(None)

    @classmethod
    def from_template(cls, template: CombatantTemplate) -> "Combatant":
        """
        Builds a fresh combatant from a template.

        Every nested record is deep-copied, so the new combatant shares no
        mutable state with the template.

        Args:
            template (CombatantTemplate):
                The template to copy.

        Returns:
            Combatant:
                A combatant with a new id, full hit points, no effects, not a
                favorite and no initiative.

        """
        data = template.model_copy(deep=True)
        return cls(
            name=data.name,
            ability_scores=data.ability_scores,
            armor_class=data.armor_class,
            hit_points=HitPoints.full(data.hit_points),
            attacks=data.attacks,
            non_attack_actions=data.non_attack_actions,
            known_spells=data.known_spells,
            creature_type=data.creature_type,
            challenge_rating=data.challenge_rating,
            source=data.source,
        )

    @property
    def DEX(self) -> int:
        """Returns the D&D dexterity modifier."""
        return self.ability_scores.DEX

    @property
    def CON(self) -> int:
        """Returns the D&D constitution modifier."""
        return self.ability_scores.CON

    def modifier(self, key: AbilityKey) -> int:
        """Returns the modifier of an ability."""
        return self.ability_scores.modifier(key)

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(self.instance_id)

    def __eq__(self, other: Any) -> bool:
        return self.instance_id == getattr(other, "instance_id", None)
