"""
Effects system module for the battle tracker.

This module contains the timed status effects attached to combatants and the
tracker that applies them and counts their remaining rounds down.
"""

from .base_effect import CustomEffectForm, EffectSpec, StatusEffect

__all__ = [
    "CustomEffectForm",
    "EffectSpec",
    "StatusEffect",
]
