"""
Combat result module for the battle tracker.

Structured outcomes returned by the combat commands. Each result carries the
figures of the resolution and a ``message`` for display; the text is never
read back as state.
"""

from collections.abc import Callable

from pydantic import BaseModel, Field

from battle_tracker.core.constants import AbilityKey

# Sink receiving the display text of save and concentration outcomes.
Notifier = Callable[[str], None]


class ConcentrationCheckResult(BaseModel):
    """Outcome of a concentration check triggered by damage."""

    combatant_id: str = Field(description="The concentrating combatant.")
    combatant_name: str = Field(description="Its name, for display.")
    roll: int = Field(description="The natural d20 roll.")
    modifier: int = Field(description="The constitution modifier.")
    total: int = Field(description="Roll plus modifier.")
    dc: int = Field(description="The DC of the check.")
    maintained: bool = Field(description="True if concentration holds.")

    @property
    def message(self) -> str:
        if self.maintained:
            return (
                f"{self.combatant_name} maintained concentration (DC {self.dc}): "
                f"{self.total} >= {self.dc}"
            )
        return (
            f"{self.combatant_name} failed concentration check (DC {self.dc}): "
            f"{self.total} < {self.dc}"
        )


class SavingThrowResult(BaseModel):
    """Outcome of a saving throw. Pure report, nothing is mutated."""

    combatant_id: str
    combatant_name: str
    ability: AbilityKey
    roll: int
    modifier: int
    total: int

    @property
    def message(self) -> str:
        return (
            f"{self.combatant_name}'s {self.ability.value.upper()} save:\n"
            f"Roll: {self.roll}\n"
            f"Modifier: {self.modifier}\n"
            f"Total: {self.total}"
        )


class HpChangeResult(BaseModel):
    """Outcome of a hit point change on one combatant."""

    combatant_id: str
    amount: int = Field(description="The requested signed change.")
    previous: int = Field(description="Hit points before the change.")
    current: int = Field(description="Hit points after clamping.")
    concentration: ConcentrationCheckResult | None = Field(
        None,
        description="The concentration check run before the damage, if any.",
    )

    @property
    def applied(self) -> int:
        """The signed change actually committed after clamping."""
        return self.current - self.previous


class DamageResult(BaseModel):
    """Outcome of an attack or spell against one target."""

    target_id: str
    source_name: str = Field(description="The attack or spell used.")
    damage: int = Field(description="The rolled damage.")
    description: str = Field("", description="How the damage was rolled.")
    hp_change: HpChangeResult | None = Field(
        None,
        description="The committed hit point change, None for 0 damage.",
    )
    effect_added: bool = Field(
        False,
        description="True if the spell also attached a status effect.",
    )
