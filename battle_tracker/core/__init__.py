"""
Core system module for the battle tracker.

This module contains the fundamental components shared by the combat code,
including constants and settings, dice rolling, catalog loading, logging and
console utilities.
"""

from .constants import (
    AbilityKey,
    CombatPhase,
    TrackerSettings,
)
from .dice_parser import (
    DiceRoller,
    RandomSource,
    RollBreakdown,
    parse_dice,
    roll_and_describe,
    roll_dice,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    get_stat_modifier,
    make_bar,
    parse_int_input,
)

__all__ = [
    # Import from constants.py
    "AbilityKey",
    "CombatPhase",
    "TrackerSettings",
    # Import from dice_parser.py
    "DiceRoller",
    "RandomSource",
    "RollBreakdown",
    "parse_dice",
    "roll_and_describe",
    "roll_dice",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "get_stat_modifier",
    "make_bar",
    "parse_int_input",
]
