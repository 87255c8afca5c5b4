"""
collaborators.py: Interfaces the simulation consumes, plus trivial implementations.
"""

import logging
from typing import Callable, List, Protocol, TypeVar

from .data_models import FrameSnapshot, SoundEvent

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Renderer(Protocol):
    def render(self, snapshot: FrameSnapshot) -> None: ...


class AudioNotifier(Protocol):
    def play(self, event: SoundEvent) -> None: ...


class ScoreStore(Protocol):
    def read_best(self) -> int: ...

    def write_best(self, score: int) -> None: ...


def call_safely(what: str, fn: Callable[..., T], *args, fallback: T = None) -> T:
    """
    Invokes a collaborator. Failures are logged and replaced by the fallback
    so they never interrupt a simulation tick.
    """
    try:
        return fn(*args)
    except Exception as e:
        logger.warning("%s failed: %s", what, e)
        return fallback


class NullRenderer:
    def render(self, snapshot: FrameSnapshot) -> None:
        pass


class SilentAudio:
    def play(self, event: SoundEvent) -> None:
        pass


class MemoryScoreStore:
    """Best score held in memory for the lifetime of the process."""

    def __init__(self, best: int = 0):
        self.best = best
        self.writes: List[int] = []

    def read_best(self) -> int:
        return self.best

    def write_best(self, score: int) -> None:
        self.writes.append(score)
        self.best = max(self.best, score)
