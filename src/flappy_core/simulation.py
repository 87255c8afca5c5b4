"""
simulation.py: Session state and the controller that drives one game session.

The controller runs every tick in a fixed order:
integrate bird -> scroll/score/retire pipes -> maybe spawn -> collisions.
A collision moves the session to GAME_OVER and halts frame scheduling.
"""

import logging
import random
from typing import Optional

from .collaborators import (
    AudioNotifier, MemoryScoreStore, NullRenderer, Renderer, ScoreStore,
    SilentAudio, call_safely
)
from .constants import GameConfig, DEFAULT_CONFIG
from .data_models import (
    Bird, BirdSnapshot, CollisionKind, FrameSnapshot, Phase, PipeSnapshot,
    SoundEvent, Viewport
)
from .difficulty import DifficultyCurve
from .frame_loop import FrameScheduler
from .physics_core import PhysicsCore, check_collisions
from .pipe_manager import PipeManager

logger = logging.getLogger(__name__)


class SimulationContext:
    """
    All mutable state of one simulation instance. Nothing here is global, so
    several independent instances can coexist.
    """

    def __init__(self, viewport: Optional[Viewport] = None,
                 config: GameConfig = DEFAULT_CONFIG,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.viewport = viewport if viewport is not None else Viewport()
        self.phase = Phase.START
        self.score = 0
        self.best = 0
        self.base_speed = config.pipe_speed_initial
        self.pipes = PipeManager(config, rng)
        self.bird: Optional[Bird] = self.new_bird()
        self.last_timestamp: Optional[float] = None

    @property
    def ground_y(self) -> float:
        return self.viewport.ground_y

    def new_bird(self) -> Bird:
        """A bird at rest, halfway between the sky and the ground."""
        return Bird(
            x=self.viewport.width * self.config.bird_x_ratio,
            y=self.ground_y * self.config.bird_start_ratio,
            radius=self.config.bird_radius,
        )

    def reset(self):
        """Fresh session state. The best score survives."""
        self.score = 0
        self.base_speed = self.config.pipe_speed_initial
        self.pipes.clear()
        self.bird = self.new_bird()
        self.last_timestamp = None

    def teardown(self):
        self.pipes.clear()
        self.bird = None
        self.last_timestamp = None
        self.phase = Phase.START


class SimulationController:
    """
    Owns the START -> PLAYING -> GAME_OVER state machine and the per-tick order.
    Input entry points are validated against the current phase and return
    whether they had any effect.
    """

    def __init__(self, context: Optional[SimulationContext] = None, *,
                 renderer: Optional[Renderer] = None,
                 audio: Optional[AudioNotifier] = None,
                 store: Optional[ScoreStore] = None,
                 scheduler: Optional[FrameScheduler] = None):
        self.context = context if context is not None else SimulationContext()
        self.physics = PhysicsCore(self.context.config)
        self.difficulty = DifficultyCurve(self.context.config)

        self.renderer = renderer if renderer is not None else NullRenderer()
        self.audio = audio if audio is not None else SilentAudio()
        self.store = store if store is not None else MemoryScoreStore()
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()

        self.context.best = call_safely("Reading best score", self.store.read_best, fallback=0)

    @property
    def phase(self) -> Phase:
        return self.context.phase

    # -------- Input entry points --------

    def on_start(self) -> bool:
        if self.context.phase is not Phase.START:
            return False
        logger.info("Session started (best %d)", self.context.best)
        self._begin()
        return True

    def on_restart(self) -> bool:
        if self.context.phase is not Phase.GAME_OVER:
            return False
        logger.info("Session restarted")
        self._begin()
        return True

    def on_flap(self) -> bool:
        ctx = self.context
        if ctx.phase is not Phase.PLAYING or ctx.bird is None:
            return False
        self.physics.flap(ctx.bird)
        self._notify(SoundEvent.FLAP)
        return True

    # -------- Frame loop --------

    def frame(self, timestamp_ms: float):
        """Scheduled once per display refresh while PLAYING."""
        ctx = self.context
        if ctx.phase is not Phase.PLAYING:
            return

        if ctx.last_timestamp is None:
            dt = 0.0
        else:
            dt = max(0.0, timestamp_ms - ctx.last_timestamp)
        ctx.last_timestamp = timestamp_ms

        self.tick(dt)
        self.render()

        if ctx.phase is Phase.PLAYING:
            self.scheduler.request(self.frame)

    def tick(self, dt: float) -> Optional[CollisionKind]:
        """
        Advances the simulation by dt milliseconds.
        Returns the collision that ended the session, if any.
        """
        ctx = self.context
        if ctx.phase is not Phase.PLAYING or ctx.bird is None:
            return None
        bird = ctx.bird
        view = ctx.viewport

        # 1. Bird physics
        self.physics.integrate(bird, dt)

        # 2. Scroll pipes, score and retire
        speed = self.difficulty.speed(ctx.score, ctx.base_speed)
        for _ in ctx.pipes.advance(dt, speed, bird.x, view.height):
            self._score_point()

        # 3. Spawn
        interval = self.difficulty.spawn_interval(ctx.score)
        ctx.pipes.maybe_spawn(dt, interval, view.width, view.height)

        # 4. Collisions
        collision = check_collisions(bird, ctx.ground_y, ctx.pipes.pipes)
        if collision is not None:
            self._game_over(collision)
        return collision

    def render(self):
        call_safely("Rendering", self.renderer.render, self.snapshot())

    # -------- Host events --------

    def resize(self, viewport: Viewport):
        """Adopts new play-area dimensions and re-seats the bird above the new ground."""
        ctx = self.context
        ctx.viewport = viewport
        if ctx.bird is not None:
            ctx.bird.y = ctx.ground_y * ctx.config.bird_start_ratio
        for pipe in ctx.pipes.pipes:
            pipe.update_geometry(viewport.height)

    def snapshot(self) -> FrameSnapshot:
        ctx = self.context
        bird = None
        if ctx.bird is not None:
            bird = BirdSnapshot(ctx.bird.x, ctx.bird.y, ctx.bird.rotation, ctx.bird.radius)
        pipes = tuple(
            PipeSnapshot(top=p.top.as_tuple(), bottom=p.bottom.as_tuple())
            for p in ctx.pipes.pipes
        )
        return FrameSnapshot(
            phase=ctx.phase,
            score=ctx.score,
            best=ctx.best,
            width=ctx.viewport.width,
            height=ctx.viewport.height,
            ground_y=ctx.ground_y,
            bird=bird,
            pipes=pipes,
        )

    def close(self):
        """Stops scheduling and releases session state."""
        self.scheduler.cancel()
        self.context.teardown()

    # -------- Internals --------

    def _begin(self):
        ctx = self.context
        ctx.reset()
        ctx.phase = Phase.PLAYING
        self.scheduler.request(self.frame)

    def _score_point(self):
        ctx = self.context
        ctx.score += 1
        self._notify(SoundEvent.SCORE)
        if ctx.score > ctx.best:
            ctx.best = ctx.score
            call_safely("Saving best score", self.store.write_best, ctx.best)
            logger.debug("New best score: %d", ctx.best)

    def _game_over(self, kind: CollisionKind):
        ctx = self.context
        ctx.phase = Phase.GAME_OVER
        self.scheduler.cancel()
        self._notify(SoundEvent.HIT)
        logger.info("Game over (%s). Final score: %d, best: %d", kind.value, ctx.score, ctx.best)

    def _notify(self, event: SoundEvent):
        call_safely(f"Playing {event.value} sound", self.audio.play, event)
