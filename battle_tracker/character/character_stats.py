"""
Combatant stats module for the battle tracker.

Holds the six ability scores and the hit point pool of a combatant. The hit
point pool enforces ``0 <= current <= max`` on every write.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from battle_tracker.core.constants import AbilityKey
from battle_tracker.core.utils import get_stat_modifier


class AbilityScores(BaseModel):
    """
    The six ability scores of a combatant.

    Missing scores default to 10, the value the catalog uses for creatures
    without an explicit score.
    """

    strength: int = Field(10, description="Strength score.")
    dexterity: int = Field(10, description="Dexterity score.")
    constitution: int = Field(10, description="Constitution score.")
    intelligence: int = Field(10, description="Intelligence score.")
    wisdom: int = Field(10, description="Wisdom score.")
    charisma: int = Field(10, description="Charisma score.")

    def score(self, key: AbilityKey) -> int:
        """Returns the raw score of an ability."""
        return getattr(self, key.attribute)

    def modifier(self, key: AbilityKey) -> int:
        """Returns the D&D modifier of an ability."""
        return get_stat_modifier(self.score(key))

    @property
    def DEX(self) -> int:
        """Returns the D&D dexterity modifier."""
        return self.modifier(AbilityKey.DEX)

    @property
    def CON(self) -> int:
        """Returns the D&D constitution modifier."""
        return self.modifier(AbilityKey.CON)


class HitPoints(BaseModel):
    """
    Current and maximum hit points.

    Assignments are validated, so writing a value outside ``[0, max]`` raises
    ``pydantic.ValidationError``. ``adjust`` is the clamping write path.
    """

    model_config = ConfigDict(validate_assignment=True)

    max: int = Field(ge=0, description="Maximum hit points.")
    current: int = Field(description="Current hit points.")

    @field_validator("current")
    @classmethod
    def _check_current(cls, value: int, info: ValidationInfo) -> int:
        maximum = info.data.get("max")
        if value < 0 or (maximum is not None and value > maximum):
            raise ValueError(f"current hit points {value} outside [0, {maximum}]")
        return value

    @field_validator("max")
    @classmethod
    def _check_max(cls, value: int, info: ValidationInfo) -> int:
        current = info.data.get("current")
        if current is not None and value < current:
            raise ValueError(f"maximum hit points {value} below current {current}")
        return value

    @classmethod
    def full(cls, average: int) -> "HitPoints":
        """Builds a full pool from an average hit point value."""
        average = max(0, average)
        return cls(current=average, max=average)

    def adjust(self, amount: int) -> int:
        """
        Adjusts the current hit points, clamped between 0 and max.

        Args:
            amount (int):
                The amount to adjust HP by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at max
                or min).

        """
        new_hp = max(0, min(self.current + amount, self.max))
        actual_adjustment = new_hp - self.current
        self.current = new_hp
        return actual_adjustment

    def __str__(self) -> str:
        return f"{self.current}/{self.max}"
