"""
Actions system module for the battle tracker.

This module resolves the attacks, spells and saving throws chosen for the
acting combatant into dice rolls, hit point changes and status effects.
"""

from .action_resolver import ActionResolver

__all__ = ["ActionResolver"]
