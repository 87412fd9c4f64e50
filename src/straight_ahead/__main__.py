from __future__ import annotations

import argparse
import sys

from . import __version__
from .app import run_auto, run_gui, run_headless
from .logging_config import configure_logging, verbosity_to_level
from .settings import Settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="straight-ahead",
        description="Straight Ahead - walk forward through turning door tiles",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument("--layout", default=None, help="YAML layout file (default: packaged 4x4 board)")
    parser.add_argument("--settings", default=None, help="TOML settings file")
    parser.add_argument(
        "--commands",
        nargs="*",
        default=[],
        help="Headless script, e.g. --commands advance 'rotate 1,1' advance",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N frames (for testing)")
    parser.add_argument("--tick-rate", type=float, default=None, help="Target frame rate (Hz)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(verbosity_to_level(args.verbose))

    settings = Settings.from_sources(file_path=args.settings)
    if args.tick_rate is not None:
        settings.tick_rate = args.tick_rate
        settings.validate()

    # Honor CLI over env vars
    if args.gui:
        return run_gui(max_steps=args.max_steps, settings=settings, layout=args.layout)

    if args.headless:
        return run_headless(
            max_steps=args.max_steps, settings=settings, layout=args.layout, commands=args.commands
        )

    return run_auto(max_steps=args.max_steps, settings=settings, layout=args.layout, commands=args.commands)


if __name__ == "__main__":
    sys.exit(main())
