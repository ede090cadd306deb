"""
Base effect module for the battle tracker.

Defines the timed status effect attached to a combatant, and the two request
shapes used to create one: a plain effect description coming from a spell, and
the raw custom-effect form filled in by a user.
"""

from typing import Any

from pydantic import BaseModel, Field


class StatusEffect(BaseModel):
    """
    A named, timed modifier attached to a combatant.

    ``remaining_rounds`` is at least 1 while the effect is present; the effect
    tracker removes it in the same step that brings the count to zero.
    """

    name: str = Field(
        description="The name of the effect.",
    )
    description: str = Field(
        "",
        description="A brief description of the effect.",
    )
    remaining_rounds: int = Field(
        ge=1,
        description="Rounds left before the effect expires.",
    )
    source_name: str = Field(
        description="Name of the combatant that applied the effect.",
    )

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.remaining_rounds})"

    def tick(self) -> bool:
        """
        Consumes one round.

        Returns:
            bool:
                True if the effect is still active, False if it has expired and
                must be dropped.

        """
        if self.remaining_rounds <= 1:
            return False
        self.remaining_rounds -= 1
        return True


class EffectSpec(BaseModel):
    """The name and text of an effect to apply, e.g. taken from a spell."""

    name: str = Field(description="The name of the effect.")
    description: str = Field("", description="A brief description of the effect.")
    rounds: int | None = Field(
        None,
        ge=1,
        description="Duration override, the configured default when None.",
    )


class CustomEffectForm(BaseModel):
    """
    The custom-effect form as typed by a user.

    ``rounds`` holds the raw duration input and is only parsed when the form
    is committed.
    """

    name: str = Field("", description="The name typed for the effect.")
    description: str = Field("", description="The description typed for the effect.")
    rounds: Any = Field(10, description="The raw duration input.")
