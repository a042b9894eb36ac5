"""
Input abstraction layer.

Exposes:
- InputAction: Logical input actions used by the game loop.
- KeyPress: A key-down event with modifier flags.
- InputMapper: Rebindable mapping from physical keys to actions.
"""
from .actions import InputAction, KeyPress
from .mapping import InputMapper

__all__ = [
    "InputAction",
    "KeyPress",
    "InputMapper",
]
