from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

from .commands import Command, parse_commands
from .core import World, advance, rotate
from .engine import GameConfig, GameEngine
from .exceptions import LayoutError, OutOfBoundsError, StraightAheadError
from .input import InputAction
from .layout import load_layout
from .settings import Settings
from .ui.text import describe, render_lines

logger = logging.getLogger(__name__)


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def apply_command(world: World, command: Command) -> bool:
    """Run one scripted command against the world. Off-board cells raise OutOfBoundsError."""
    if command.action is InputAction.ADVANCE:
        return advance(world)
    if command.action is InputAction.ROTATE_CELL and command.cell is not None:
        rotate(world, *command.cell)
        return True
    return False


def _print_board(world: World) -> None:
    for line in render_lines(world):
        print(line)
    print(describe(world))


def run_gui(
    max_steps: Optional[int] = None,
    settings: Optional[Settings] = None,
    layout: Optional[str] = None,
) -> int:
    """Run the board in an Arcade window if available, otherwise fall back to headless.

    Args:
        max_steps: Optional stop after N frames; None runs until the window is closed.
        settings: Runtime settings; loaded from env/file when omitted.
        layout: Optional layout file; the packaged default board otherwise.

    Returns:
        Process exit code (0 on success).
    """
    settings = settings or Settings.from_sources()
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(max_steps=max_steps, settings=settings, layout=layout)

    from .ui.window import BoardWindow

    try:
        world = load_layout(layout or settings.layout_path)
    except LayoutError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    window = BoardWindow(world, settings, max_steps=max_steps)
    try:
        logger.info("Launching Arcade window")
        window.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1


def run_headless(
    max_steps: Optional[int] = 60,
    settings: Optional[Settings] = None,
    layout: Optional[str] = None,
    commands: Sequence[str] = (),
) -> int:
    """Run the board in the console.

    Prints the starting board, applies the command script, runs the frame
    loop for ``max_steps`` frames and prints the final board.
    """
    settings = settings or Settings.from_sources()
    if max_steps is None:
        # Always bound the loop without a window to close
        max_steps = 60

    print(f"{settings.window_title} (headless)")
    try:
        world = load_layout(layout or settings.layout_path)
        script = parse_commands(commands)
    except StraightAheadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    _print_board(world)

    engine = GameEngine(
        world,
        GameConfig(tick_rate=settings.tick_rate, max_steps=max_steps, goal_spin_rate=settings.goal_spin_rate),
    )
    try:
        for command in script:
            apply_command(world, command)
        if script:
            print()
            _print_board(world)
        engine.run()
        print(f"Loop complete (steps={engine.step})")
        return 0
    except OutOfBoundsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        engine.stop()
        print("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unhandled exception in headless loop")
        return 1


def run_auto(
    max_steps: Optional[int] = None,
    settings: Optional[Settings] = None,
    layout: Optional[str] = None,
    commands: Sequence[str] = (),
) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors environment overrides:
      - SA_HEADLESS=1 forces headless.
    A command script always runs headless.
    """
    if os.getenv("SA_HEADLESS") == "1" or commands:
        return run_headless(max_steps=max_steps, settings=settings, layout=layout, commands=commands)
    return run_gui(max_steps=max_steps, settings=settings, layout=layout)
