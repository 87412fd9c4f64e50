from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .exceptions import CommandError
from .input import InputAction

logger = logging.getLogger(__name__)

ADVANCE_WORDS = {"a", "advance", "tick", "space"}
ROTATE_WORDS = {"r", "rotate"}


@dataclass(frozen=True)
class Command:
    action: InputAction
    cell: Optional[Tuple[int, int]] = None


def _cell(text: str) -> Tuple[int, int]:
    parts = text.split(",")
    if len(parts) != 2:
        raise CommandError(f"expected ROW,COL but got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise CommandError(f"cell must be two integers, got {text!r}") from None


def parse_commands(words: Iterable[str]) -> List[Command]:
    """Parse a headless command script.

    Accepted forms: ``advance`` (or ``a``), ``rotate ROW COL``,
    ``rotate ROW,COL`` and ``r:ROW,COL``.
    """
    tokens: List[str] = []
    for word in words:
        tokens.extend(word.replace(";", " ").split())

    out: List[Command] = []
    i = 0
    while i < len(tokens):
        token = tokens[i].lower()
        i += 1
        head, sep, tail = token.partition(":")
        if head in ADVANCE_WORDS and not sep:
            out.append(Command(InputAction.ADVANCE))
        elif head in ROTATE_WORDS:
            if sep:
                out.append(Command(InputAction.ROTATE_CELL, _cell(tail)))
            elif i < len(tokens) and "," in tokens[i]:
                out.append(Command(InputAction.ROTATE_CELL, _cell(tokens[i])))
                i += 1
            elif i + 1 < len(tokens):
                out.append(Command(InputAction.ROTATE_CELL, _cell(f"{tokens[i]},{tokens[i + 1]}")))
                i += 2
            else:
                raise CommandError(f"{token!r} needs a cell")
        else:
            raise CommandError(f"unknown command {tokens[i - 1]!r}")
    logger.debug("Parsed %d commands", len(out))
    return out


__all__ = ["Command", "parse_commands"]
