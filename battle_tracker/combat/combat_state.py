"""
Combat state module for the battle tracker.

Holds the single mutable state of an encounter: the turn order, the set of
concentrating combatants and the current phase. Every combat component takes
the same ``CombatState`` instance and mutates it in place.
"""

from collections import deque
from collections.abc import Iterator

from battle_tracker.character.main import Combatant
from battle_tracker.core.constants import CombatPhase


class CombatState:
    """
    The state of the active encounter.

    Attributes:
        turn_order (deque[Combatant]):
            The roster in turn order. Once initiative has been rolled, the
            front element is the acting combatant. Rotation is circular.
        concentrating (set[str]):
            Ids of the combatants maintaining concentration. Always a subset
            of the ids in ``turn_order``.
        phase (CombatPhase):
            SETUP until initiative is rolled, ROLLED_INITIATIVE afterwards.

    """

    turn_order: deque[Combatant]
    concentrating: set[str]
    phase: CombatPhase

    def __init__(self) -> None:
        self.turn_order = deque()
        self.concentrating = set()
        self.phase = CombatPhase.SETUP

    def get(self, instance_id: str | None) -> Combatant | None:
        """
        Finds a combatant by id.

        Args:
            instance_id (str | None):
                The id to look up.

        Returns:
            Combatant | None:
                The combatant, or None when the id is not in the roster.

        """
        if not instance_id:
            return None
        for combatant in self.turn_order:
            if combatant.instance_id == instance_id:
                return combatant
        return None

    def __contains__(self, instance_id: object) -> bool:
        return any(c.instance_id == instance_id for c in self.turn_order)

    def __iter__(self) -> Iterator[Combatant]:
        return iter(self.turn_order)

    def __len__(self) -> int:
        return len(self.turn_order)

    @property
    def acting(self) -> Combatant | None:
        """The combatant whose turn it is, None before initiative is rolled."""
        if self.phase != CombatPhase.ROLLED_INITIATIVE or not self.turn_order:
            return None
        return self.turn_order[0]

    @property
    def ids(self) -> list[str]:
        """The ids of the roster, in turn order."""
        return [c.instance_id for c in self.turn_order]

    def is_concentrating(self, instance_id: str | None) -> bool:
        """Checks whether a combatant is maintaining concentration."""
        return instance_id in self.concentrating
