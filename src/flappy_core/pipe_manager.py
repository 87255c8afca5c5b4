"""
pipe_manager.py: Spawning, scrolling, scoring and retiring of pipe pairs.
"""

import logging
import random
from typing import List, Optional

from .constants import GameConfig, DEFAULT_CONFIG
from .data_models import Pipe

logger = logging.getLogger(__name__)


class PipeManager:
    """
    Owns the ordered pipe collection. Oldest pipe first, newest appended on the right.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.pipes: List[Pipe] = []
        self.spawn_timer = 0.0

    def clear(self):
        self.pipes = []
        self.spawn_timer = 0.0

    def spawn(self, width: float, height: float, gap_height: Optional[float] = None) -> Pipe:
        """Generates a new pipe pair just off-screen to the right."""
        cfg = self.config
        if gap_height is None:
            gap_height = cfg.pipe_gap

        min_gap_y = cfg.min_gap_y
        max_gap_y = height * cfg.ground_y_ratio - gap_height - cfg.gap_margin
        if max_gap_y <= min_gap_y:
            # Viewport too short for a random gap
            gap_y = min_gap_y
        else:
            gap_y = min_gap_y + self.rng.random() * (max_gap_y - min_gap_y)

        pipe = Pipe(x=width + cfg.pipe_width, gap_y=gap_y,
                    gap_height=gap_height, width=cfg.pipe_width, view_height=height)
        self.pipes.append(pipe)
        logger.debug("Spawned pipe at x=%.1f gap_y=%.1f", pipe.x, gap_y)
        return pipe

    def advance(self, dt: float, speed: float, bird_x: float, height: float) -> List[Pipe]:
        """
        Scrolls every pipe left, marks pipes the bird has cleared and retires
        pipes that left the screen. Returns the pipes passed during this call.
        """
        dx = speed * (dt / self.config.nominal_step_ms)
        passed = []

        for pipe in self.pipes:
            pipe.x -= dx
            pipe.update_geometry(height)

            if not pipe.passed and bird_x > pipe.right:
                pipe.passed = True
                passed.append(pipe)

        kept = [p for p in self.pipes if p.right >= 0]
        if len(kept) != len(self.pipes):
            logger.debug("Retired %d pipe(s)", len(self.pipes) - len(kept))
        self.pipes = kept
        return passed

    def maybe_spawn(self, dt: float, interval: float, width: float, height: float) -> Optional[Pipe]:
        """
        Accumulates dt and spawns one pipe once the interval is reached.
        The timer resets to zero rather than carrying the overshoot.
        """
        self.spawn_timer += dt
        if self.spawn_timer >= interval:
            self.spawn_timer = 0.0
            return self.spawn(width, height)
        return None
