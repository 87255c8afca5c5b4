"""
physics_core.py: Deterministic agent kinematics and collision logic.
"""

from typing import Iterable, Optional

from .constants import GameConfig, DEFAULT_CONFIG
from .data_models import Bird, Pipe, CollisionKind


def step_factor(dt: float, config: GameConfig = DEFAULT_CONFIG) -> float:
    """Normalizes elapsed milliseconds to nominal steps, capped for stability."""
    return min(dt / config.nominal_step_ms, config.max_step_factor)


def circle_rect(cx: float, cy: float, r: float,
                rx: float, ry: float, rw: float, rh: float) -> bool:
    """
    Exact circle vs axis-aligned rectangle test.
    Touching (distance == radius) counts as a hit.
    """
    closest_x = max(rx, min(cx, rx + rw))
    closest_y = max(ry, min(cy, ry + rh))
    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy <= r * r


def check_collisions(bird: Bird, ground_y: float,
                     pipes: Iterable[Pipe]) -> Optional[CollisionKind]:
    """
    Checks the bird against the ground, the ceiling and every pipe.
    The ceiling is a soft limit: it clamps the bird instead of killing it.
    Returns the first collision found, or None.
    """
    # 1. Ground
    if bird.y + bird.radius >= ground_y:
        return CollisionKind.GROUND

    # 2. Ceiling
    if bird.y - bird.radius <= 0:
        bird.y = bird.radius
        bird.vy = 0.0

    # 3. Pipes
    for pipe in pipes:
        if (circle_rect(bird.x, bird.y, bird.radius, *pipe.top.as_tuple()) or
                circle_rect(bird.x, bird.y, bird.radius, *pipe.bottom.as_tuple())):
            return CollisionKind.PIPE

    return None


class PhysicsCore:
    """
    Vertical motion of the bird: gravity, terminal velocity and the flap impulse.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config

    def integrate(self, bird: Bird, dt: float):
        """Advances the bird by dt milliseconds. Mutates the bird."""
        cfg = self.config
        f = step_factor(dt, cfg)

        bird.vy += cfg.gravity * f
        bird.vy = min(bird.vy, cfg.max_fall_speed)
        bird.y += bird.vy * f

        bird.rotation += (self.target_rotation(bird.vy) - bird.rotation) * cfg.rotation_smoothing

    def target_rotation(self, vy: float) -> float:
        """Tilt up while rising, tilt down proportionally to fall speed."""
        if vy < 0:
            return -self.config.tilt_up
        return min(self.config.tilt_down_max, vy * self.config.tilt_gain)

    def flap(self, bird: Bird):
        """Replaces the vertical velocity with the flap impulse."""
        bird.vy = self.config.flap_impulse
