"""
Constants and enumerations for the battle tracker.

Defines the default values used by the combat components, the enumerations for
ability scores and combat phases, and the settings model that bundles the
defaults into a single configurable object.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

# Default number of rounds a status effect lasts.
DEFAULT_EFFECT_DURATION = 10
# Damage rolled by every spell, spell-specific formulas are not modeled.
SPELL_DAMAGE_ROLL = "1d6"
# Spells whose description contains this word also apply a status effect.
SPELL_EFFECT_KEYWORD = "effect"
# Lowest DC a concentration check can have.
MIN_CONCENTRATION_DC = 10
# Save DC assigned to spells that do not declare one.
DEFAULT_SPELL_DC = 15
# Text offered by the manual initiative prompt.
DEFAULT_MANUAL_INITIATIVE = "10"
# Source name recorded on effects added while no combatant is acting.
UNKNOWN_SOURCE = "Unknown"
# Default attack values for attacks without explicit data.
DEFAULT_ATTACK_DAMAGE = "1d4"
DEFAULT_DAMAGE_TYPE = "slashing"
# Location of the bundled catalog files.
DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class AbilityKey(NiceEnum):
    """The six ability scores, keyed by their short name."""

    STR = "str"
    DEX = "dex"
    CON = "con"
    INT = "int"
    WIS = "wis"
    CHA = "cha"

    @property
    def attribute(self) -> str:
        """Returns the name of the matching AbilityScores field."""
        return {
            AbilityKey.STR: "strength",
            AbilityKey.DEX: "dexterity",
            AbilityKey.CON: "constitution",
            AbilityKey.INT: "intelligence",
            AbilityKey.WIS: "wisdom",
            AbilityKey.CHA: "charisma",
        }[self]

    @classmethod
    def parse(cls, key: "AbilityKey | str | None") -> "AbilityKey | None":
        """
        Resolves a short key ("dex") or a full name ("dexterity").

        Args:
            key (AbilityKey | str | None):
                The key to resolve.

        Returns:
            AbilityKey | None:
                The matching ability, or None when the key is unknown.

        """
        if isinstance(key, AbilityKey):
            return key
        if not isinstance(key, str):
            return None
        normalized = key.strip().lower()
        for ability in cls:
            if normalized in (ability.value, ability.attribute):
                return ability
        return None


class CombatPhase(NiceEnum):
    """The phases of an encounter."""

    SETUP = "SETUP"
    ROLLED_INITIATIVE = "ROLLED_INITIATIVE"


class TrackerSettings(BaseModel):
    """Tunable knobs shared by every combat component."""

    effect_duration: int = Field(
        DEFAULT_EFFECT_DURATION,
        ge=1,
        description="Rounds a status effect lasts when no duration is given.",
    )
    spell_damage_roll: str = Field(
        SPELL_DAMAGE_ROLL,
        description="Dice rolled against each spell target.",
    )
    spell_effect_keyword: str = Field(
        SPELL_EFFECT_KEYWORD,
        description="Substring of a spell description that triggers an effect.",
    )
    min_concentration_dc: int = Field(
        MIN_CONCENTRATION_DC,
        description="Lowest DC of a concentration check.",
    )
    default_spell_dc: int = Field(
        DEFAULT_SPELL_DC,
        description="Save DC of spells that do not declare one.",
    )
    manual_initiative_default: str = Field(
        DEFAULT_MANUAL_INITIATIVE,
        description="Answer offered by the manual initiative prompt.",
    )
    unknown_source: str = Field(
        UNKNOWN_SOURCE,
        description="Effect source name used when nobody is acting.",
    )
