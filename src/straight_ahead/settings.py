from __future__ import annotations

import dataclasses
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 50
DEFAULT_TITLE = "Straight Ahead!"
DEFAULT_SPIN_RATE = 2.0
DEFAULT_TICK_RATE = 60.0


@dataclass
class Settings:
    """Runtime settings for the window, the frame loop and the board.

    The settings can be constructed/overridden from:
    - Environment variables (prefix: SA_)
    - A TOML config file (env SA_SETTINGS_FILE)

    Precedence, lowest to highest: defaults < file < env.
    """

    # Pixel edge of one cell; also the divisor for mouse -> cell mapping
    tile_size: int = DEFAULT_TILE_SIZE
    window_title: str = DEFAULT_TITLE
    # Goal spin in radians per second
    goal_spin_rate: float = DEFAULT_SPIN_RATE
    tick_rate: float = DEFAULT_TICK_RATE
    layout_path: Optional[str] = None

    def validate(self) -> None:
        """Validate and normalize settings to safe values."""
        try:
            self.tile_size = int(self.tile_size)
        except (TypeError, ValueError):
            self.tile_size = 0
        if self.tile_size <= 0:
            logger.warning("Invalid tile_size %r; resetting to %d", self.tile_size, DEFAULT_TILE_SIZE)
            self.tile_size = DEFAULT_TILE_SIZE
        try:
            self.goal_spin_rate = float(self.goal_spin_rate)
        except (TypeError, ValueError):
            logger.warning("Invalid goal_spin_rate %r; resetting to %s", self.goal_spin_rate, DEFAULT_SPIN_RATE)
            self.goal_spin_rate = DEFAULT_SPIN_RATE
        try:
            self.tick_rate = float(self.tick_rate)
        except (TypeError, ValueError):
            self.tick_rate = -1.0
        if self.tick_rate < 0:
            logger.warning("Invalid tick_rate %r; resetting to %s", self.tick_rate, DEFAULT_TICK_RATE)
            self.tick_rate = DEFAULT_TICK_RATE
        self.window_title = str(self.window_title) if self.window_title else DEFAULT_TITLE
        if self.layout_path is not None:
            self.layout_path = str(self.layout_path) or None

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in allowed}
        obj = cls(**filtered)  # type: ignore[arg-type]
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            "SA_TILE_SIZE": ("tile_size", int),
            "SA_WINDOW_TITLE": ("window_title", str),
            "SA_GOAL_SPIN_RATE": ("goal_spin_rate", float),
            "SA_TICK_RATE": ("tick_rate", float),
            "SA_LAYOUT": ("layout_path", str),
        }
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    logger.error("Invalid env for %s=%r: %s", env_key, env[env_key], exc)
        return out

    @classmethod
    def from_toml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        try:
            with path.open("rb") as f:
                doc = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to read settings TOML %s: %s", path, exc)
            return {}
        # Flatten either top-level or under [window]/[board]
        flat: Dict[str, Any] = {}
        for section in ("window", "board"):
            if isinstance(doc.get(section), dict):
                flat.update(doc[section])
        for k, v in doc.items():
            if isinstance(v, dict):
                continue
            flat[k] = v
        return flat

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Dict[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "Settings":
        data: Dict[str, Any] = {}
        env_map = os.environ if env is None else env
        chosen_path: Optional[Path] = None
        if file_path is not None:
            chosen_path = Path(file_path).expanduser().resolve()
        elif env_map.get("SA_SETTINGS_FILE"):
            chosen_path = Path(env_map["SA_SETTINGS_FILE"]).expanduser().resolve()
        if chosen_path is not None:
            data.update(cls.from_toml_file(chosen_path))
        data.update(cls.from_env(env_map))
        return cls.from_dict(data)


__all__ = ["Settings"]
