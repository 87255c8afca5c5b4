"""
difficulty.py: Pipe speed and spawn cadence as pure functions of the score.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import GameConfig, DEFAULT_CONFIG


@dataclass(frozen=True)
class DifficultyCurve:
    config: GameConfig = DEFAULT_CONFIG

    def speed(self, score: int, base_speed: Optional[float] = None) -> float:
        """Pipe speed in pixels per nominal step. Grows linearly with the score."""
        if base_speed is None:
            base_speed = self.config.pipe_speed_initial
        return base_speed * (1 + score * self.config.speed_gain_per_point)

    def spawn_interval(self, score: int) -> float:
        """Milliseconds between pipe spawns, shrinking with the score down to a floor."""
        cfg = self.config
        return max(cfg.min_spawn_interval, cfg.spawn_interval - score * cfg.spawn_interval_decay)
