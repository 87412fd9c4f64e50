"""Presentation helpers. These only read world state."""
from .text import render_lines

__all__ = ["render_lines"]
