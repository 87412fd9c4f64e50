"""
Straight Ahead package root.

The player walks forward through a grid of door tiles; clicking a tile turns
it. Rules live in ``straight_ahead.core`` and never touch Arcade, so the same
world can be driven from the GUI, the headless CLI, or tests.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "core",
]
