#!/usr/bin/env python3
"""
client.py

Pygame host for the simulation: window, input wiring, display-refresh pumping.
"""

import argparse
import logging
from typing import Optional, Sequence

import pygame

from .audio import ToneAudio
from .constants import RENDER_FPS, SCREEN_WIDTH, SCREEN_HEIGHT
from .data_models import Phase, Viewport
from .frame_loop import FrameScheduler
from .log import LOG_LEVELS, setup_logging
from .renderer import PygameRenderer
from .score_store import DB_FILE, SqliteScoreStore
from .simulation import SimulationContext, SimulationController

logger = logging.getLogger(__name__)


def dispatch_action(controller: SimulationController) -> bool:
    """
    Space or click: starts from the start screen, flaps while playing.
    Ignored on the game-over screen, where only R restarts.
    """
    if controller.phase is Phase.START:
        return controller.on_start()
    return controller.on_flap()


class FlappyClient:
    def __init__(self, db_file: str = DB_FILE, sound: bool = True):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy")

        self.store = SqliteScoreStore(db_file)
        self.audio = ToneAudio(enabled=sound)
        self.renderer = PygameRenderer(self.screen)
        self.scheduler = FrameScheduler()
        self.controller = SimulationController(
            SimulationContext(Viewport(SCREEN_WIDTH, SCREEN_HEIGHT)),
            renderer=self.renderer,
            audio=self.audio,
            store=self.store,
            scheduler=self.scheduler,
        )
        self.clock = pygame.time.Clock()

    def run(self):
        """The main host loop: one pass per display refresh."""
        running = True
        try:
            while running:
                self.clock.tick(RENDER_FPS)

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        running = self._handle_key(event.key)
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self._handle_action()
                    elif event.type == pygame.VIDEORESIZE:
                        self._handle_resize(event.w, event.h)

                # Idle screens are redrawn by the host; PLAYING frames render themselves
                if not self.scheduler.pump(pygame.time.get_ticks()):
                    self.controller.render()
        finally:
            self.controller.close()
            self.store.close()
            pygame.quit()

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_SPACE:
            self._handle_action()
        elif key == pygame.K_r:
            self.controller.on_restart()
        elif key == pygame.K_m:
            self.audio.toggle()
        return True

    def _handle_action(self):
        dispatch_action(self.controller)

    def _handle_resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            logger.warning("Ignoring resize to %dx%d", width, height)
            return
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.renderer.screen = self.screen
        self.controller.resize(Viewport(width, height))


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Side-scrolling flappy bird game.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--log-level", default="info", choices=LOG_LEVELS,
                        help="Logging verbosity")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    client = FlappyClient(db_file=args.db, sound=not args.mute)
    client.run()


if __name__ == "__main__":
    main()
