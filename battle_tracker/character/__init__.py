"""
Combatant data model for the battle tracker.

This package holds the combatant template and instance records, together with
their ability scores, hit points, attacks, actions and spells.
"""

from .character_actions import Attack, KnownSpell, NonAttackAction, SpellTemplate
from .character_stats import AbilityScores, HitPoints
from .main import Combatant, CombatantTemplate, new_instance_id

__all__ = [
    # Import from character_actions.py
    "Attack",
    "KnownSpell",
    "NonAttackAction",
    "SpellTemplate",
    # Import from character_stats.py
    "AbilityScores",
    "HitPoints",
    # Import from main.py
    "Combatant",
    "CombatantTemplate",
    "new_instance_id",
]
