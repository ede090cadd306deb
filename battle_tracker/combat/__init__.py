"""
Combat system module for the battle tracker.

This module handles the combat resolution state machine: the shared encounter
state, the roster, initiative and turn rotation, hit point changes and
concentration checks, plus the manager that exposes them as commands.
"""
