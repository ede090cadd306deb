"""
User interface module for the battle tracker.

This module provides the console collaborators of the combat core: the manual
initiative prompt, the notification sink and the turn order display.
"""
