"""
Input layer for Straight Ahead.

Exposes:
- InputAction: Logical input actions used by the game.
- InputMapper: Rebindable mapping from physical keys to actions.
- cell_at: Pixel coordinate -> (row, col) cell address.
- dispatch: Route an action onto the core world.
"""
from .actions import InputAction
from .mapping import InputMapper
from .dispatch import cell_at, dispatch

__all__ = [
    "InputAction",
    "InputMapper",
    "cell_at",
    "dispatch",
]
