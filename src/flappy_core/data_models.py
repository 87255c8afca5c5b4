"""
data_models.py: Data structures for the simulation state and render snapshots.
"""

from dataclasses import dataclass, field, InitVar
from enum import Enum
from typing import Optional, Tuple

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_Y_RATIO


class Phase(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class SoundEvent(Enum):
    FLAP = "flap"
    SCORE = "score"
    HIT = "hit"


class CollisionKind(Enum):
    GROUND = "ground"
    PIPE = "pipe"


@dataclass
class Rect:
    """Axis-aligned rectangle, top-left origin."""
    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Viewport:
    """Play-area dimensions supplied by the host window."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    ground_ratio: float = GROUND_Y_RATIO

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport dimensions must be positive, got {self.width}x{self.height}")
        if not 0 < self.ground_ratio <= 1:
            raise ValueError(
                f"Ground ratio must be in (0, 1], got {self.ground_ratio}")

    @property
    def ground_y(self) -> float:
        return self.height * self.ground_ratio


@dataclass
class Bird:
    """The agent. x never changes after construction."""
    x: float
    y: float
    radius: float
    vy: float = 0.0
    rotation: float = 0.0


@dataclass
class Pipe:
    """A top/bottom pipe pair with a passable gap between them."""
    x: float
    gap_y: float
    gap_height: float
    width: float
    view_height: InitVar[float]
    passed: bool = False
    top: Rect = field(init=False)
    bottom: Rect = field(init=False)

    def __post_init__(self, view_height: float):
        self.top = Rect(self.x, 0.0, self.width, self.gap_y)
        self.bottom = Rect(self.x, self.gap_y + self.gap_height, self.width, 0.0)
        self.update_geometry(view_height)

    @property
    def right(self) -> float:
        return self.x + self.width

    def update_geometry(self, view_height: float):
        """Re-derives both rectangles from x, the gap and the current view height."""
        self.top.x = self.x
        self.top.y = 0.0
        self.top.width = self.width
        self.top.height = self.gap_y

        self.bottom.x = self.x
        self.bottom.y = self.gap_y + self.gap_height
        self.bottom.width = self.width
        self.bottom.height = view_height - self.bottom.y


# -------- Read-only snapshots handed to the renderer --------

@dataclass(frozen=True)
class BirdSnapshot:
    x: float
    y: float
    rotation: float
    radius: float


@dataclass(frozen=True)
class PipeSnapshot:
    top: Tuple[float, float, float, float]
    bottom: Tuple[float, float, float, float]


@dataclass(frozen=True)
class FrameSnapshot:
    phase: Phase
    score: int
    best: int
    width: float
    height: float
    ground_y: float
    bird: Optional[BirdSnapshot]
    pipes: Tuple[PipeSnapshot, ...] = ()
