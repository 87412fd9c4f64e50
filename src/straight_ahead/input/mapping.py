from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical keys/buttons to logical actions.

    Keys are strings normalized to upper case, so any backend works once its
    key constants are translated to names (``"SPACE"``, ``"ESCAPE"``...).

    Example usage:
        mapper = InputMapper.default()
        action = mapper.translate_key("space")   # -> InputAction.ADVANCE
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    @staticmethod
    def _normalize(key: str | int | None) -> Optional[str]:
        """Normalize a key into a canonical uppercase string, or None."""
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str | int, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register an alias, e.g. set_alias(32, "SPACE")."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    @classmethod
    def default(cls) -> "InputMapper":
        """Space advances, Escape quits."""
        mapper = cls()
        mapper.bind_many(["SPACE"], InputAction.ADVANCE)
        mapper.bind_many(["ESCAPE", "ESC"], InputAction.QUIT)
        return mapper


__all__ = ["InputMapper"]
