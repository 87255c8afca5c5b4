"""
flappy_core: Frame-rate independent flappy bird simulation.
"""

from .constants import GameConfig, DEFAULT_CONFIG
from .data_models import (
    Bird, CollisionKind, FrameSnapshot, Phase, Pipe, Rect, SoundEvent, Viewport
)
from .difficulty import DifficultyCurve
from .frame_loop import FrameScheduler
from .physics_core import PhysicsCore, check_collisions, circle_rect, step_factor
from .pipe_manager import PipeManager
from .simulation import SimulationContext, SimulationController

__all__ = [
    "GameConfig", "DEFAULT_CONFIG",
    "Bird", "CollisionKind", "FrameSnapshot", "Phase", "Pipe", "Rect", "SoundEvent", "Viewport",
    "DifficultyCurve", "FrameScheduler",
    "PhysicsCore", "check_collisions", "circle_rect", "step_factor",
    "PipeManager", "SimulationContext", "SimulationController",
]
