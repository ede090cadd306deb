"""
Combatant actions module for the battle tracker.

Defines the attack, non-attack action and spell records carried by a
combatant. Spell templates from the catalog extend the known-spell record with
the extra catalog data.
"""

from pydantic import BaseModel, Field

from battle_tracker.core.constants import DEFAULT_ATTACK_DAMAGE, DEFAULT_DAMAGE_TYPE, DEFAULT_SPELL_DC


class Attack(BaseModel):
    """An attack a combatant can make. Attacks always hit."""

    name: str = Field(description="The name of the attack.")
    damage: str = Field(
        DEFAULT_ATTACK_DAMAGE,
        description="The damage dice expression (e.g. '1d6').",
    )
    damage_type: str = Field(
        DEFAULT_DAMAGE_TYPE,
        description="The type of damage dealt.",
    )
    to_hit_bonus: int = Field(0, description="The attack roll bonus.")
    description: str = Field("", description="Free text of the attack entry.")

    def __str__(self) -> str:
        return f"{self.name} ({self.damage} {self.damage_type}, {self.to_hit_bonus:+d})"


class NonAttackAction(BaseModel):
    """An action with no mechanical resolution."""

    name: str = Field(description="The name of the action.")
    description: str = Field("", description="What the action does.")


class KnownSpell(BaseModel):
    """A spell known by a combatant."""

    name: str = Field(description="The name of the spell.")
    level: int = Field(0, ge=0, description="The spell level, 0 for cantrips.")
    save_dc: int = Field(
        DEFAULT_SPELL_DC,
        description="The save DC of the spell.",
    )
    description: str = Field("", description="The spell text.")

    def mentions(self, keyword: str) -> bool:
        """Checks whether the spell description contains a word."""
        return keyword in self.description


class SpellTemplate(KnownSpell):
    """A spell from the catalog."""

    school: str | None = Field(None, description="The school of magic.")
    damage_inflict: list[str] = Field(
        default_factory=list,
        description="Damage types the spell can inflict.",
    )
    saving_throw: list[str] = Field(
        default_factory=list,
        description="Abilities used to resist the spell.",
    )
    source: str | None = Field(None, description="The book the spell comes from.")
