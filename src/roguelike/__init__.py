"""
Roguelike demo package root.

A two-room dungeon, a player and an NPC, and a turn-based render/input loop.
Backend specifics (Arcade) stay in ``rendering.arcade_terminal``; everything
else runs headless.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
