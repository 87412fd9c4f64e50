from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..core import World

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    tick_rate: float = 60.0
    # Frame budget; None means until the window closes
    max_steps: Optional[int] = None
    goal_spin_rate: float = 2.0


class GameEngine:
    """Per-frame animation of a World.

    Frames only spin the goal. Moves and tile turns are discrete input
    events and never go through here.
    """

    def __init__(self, world: World, config: Optional[GameConfig] = None) -> None:
        self.world = world
        self.config = config or GameConfig()
        self._running = False
        self._step = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        self._running = True
        self._step = 0

    def stop(self) -> None:
        self._running = False

    def update(self, dt: float) -> None:
        """Animate one frame of ``dt`` seconds; stops once the frame budget is spent."""
        if not self._running:
            return
        self.world.goal.spin(dt, self.config.goal_spin_rate)
        self._step += 1
        if self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Play ``max_steps`` frames without a window.

        Every frame lasts exactly one period (1 / tick_rate), so the final
        goal angle does not depend on scheduler jitter. A tick rate of 0
        plays the frames back to back with no elapsed time.
        """
        if self.config.max_steps is None:
            raise ValueError("a windowless run needs max_steps")
        period = 1.0 / self.config.tick_rate if self.config.tick_rate else 0.0
        self.start()
        while self._running:
            self.update(period)
            if period:
                time.sleep(period)
        logger.info("Played %d frames, goal angle %.3f", self._step, self.world.goal.angle)
