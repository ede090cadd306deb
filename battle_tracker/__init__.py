"""
Battle tracker package.

This package contains the modules of the turn-based combat tracker, including
the combatant data model, initiative scheduling, hit point resolution, status
effects, concentration checks, action resolution and the console front-end.
"""
