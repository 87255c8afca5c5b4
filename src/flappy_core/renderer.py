"""
renderer.py: Draws simulation snapshots with pygame.
"""

import math

import pygame

from .data_models import FrameSnapshot, Phase, PipeSnapshot, BirdSnapshot

SKY = (112, 197, 206)
GROUND = (222, 216, 149)
GROUND_EDGE = (84, 56, 71)
PIPE_GREEN = (115, 191, 46)
PIPE_DARK = (90, 154, 36)
PIPE_CAP = (74, 138, 26)
BIRD_BODY = (241, 196, 15)
BIRD_OUTLINE = (214, 137, 16)
BEAK = (230, 126, 34)
WHITE = (255, 255, 255)
DARK = (51, 51, 51)
RED = (231, 76, 60)

CAP_HEIGHT = 24


class PygameRenderer:
    """Renders one FrameSnapshot per call onto the display surface."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

    def render(self, snapshot: FrameSnapshot):
        self.screen.fill(SKY)
        for pipe in snapshot.pipes:
            self._draw_pipe(pipe, snapshot.height)
        self._draw_ground(snapshot)
        if snapshot.bird is not None:
            self._draw_bird(snapshot.bird)
        self._draw_hud(snapshot)
        pygame.display.flip()

    def _draw_pipe(self, pipe: PipeSnapshot, height: float):
        x, _, w, gap_y = pipe.top
        bottom_y = pipe.bottom[1]

        # Top pipe, cap at the gap
        pygame.draw.rect(self.screen, PIPE_DARK, (x, 0, w + 2, gap_y + 2))
        pygame.draw.rect(self.screen, PIPE_GREEN, (x + 2, 0, w - 2, gap_y - 2))
        pygame.draw.rect(self.screen, PIPE_CAP, (x - 2, gap_y - CAP_HEIGHT, w + 6, CAP_HEIGHT))

        # Bottom pipe
        pygame.draw.rect(self.screen, PIPE_DARK, (x, bottom_y, w + 2, height - bottom_y))
        pygame.draw.rect(self.screen, PIPE_GREEN, (x + 2, bottom_y + 2, w - 2, height - bottom_y - 2))
        pygame.draw.rect(self.screen, PIPE_CAP, (x - 2, bottom_y, w + 6, CAP_HEIGHT))

    def _draw_ground(self, snapshot: FrameSnapshot):
        ground_y = snapshot.ground_y
        pygame.draw.rect(self.screen, GROUND,
                         (0, ground_y, snapshot.width, snapshot.height - ground_y))
        pygame.draw.line(self.screen, GROUND_EDGE, (0, ground_y), (snapshot.width, ground_y), 3)

    def _draw_bird(self, bird: BirdSnapshot):
        r = bird.radius
        size = int(r * 3)
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        cx = cy = size // 2

        body = pygame.Rect(0, 0, int(r * 2.2), int(r * 1.8))
        body.center = (cx, cy)
        pygame.draw.ellipse(surf, BIRD_BODY, body)
        pygame.draw.ellipse(surf, BIRD_OUTLINE, body, 2)

        pygame.draw.circle(surf, WHITE, (cx + 6, cy - 4), 5)
        pygame.draw.circle(surf, DARK, (cx + 7, cy - 4), 2)
        pygame.draw.polygon(surf, BEAK, [(cx + 12, cy), (cx + 20, cy - 3), (cx + 20, cy + 3)])

        # Positive rotation tilts the nose down; pygame rotates counter-clockwise
        rotated = pygame.transform.rotate(surf, -math.degrees(bird.rotation))
        self.screen.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))

    def _draw_hud(self, snapshot: FrameSnapshot):
        center_x = snapshot.width // 2

        if snapshot.phase is Phase.PLAYING:
            score = self.large_font.render(str(snapshot.score), True, WHITE)
            self.screen.blit(score, (center_x - score.get_width() // 2, 30))

        best = self.font.render(f"Best: {snapshot.best}", True, WHITE)
        self.screen.blit(best, (10, 10))

        if snapshot.phase is Phase.START:
            self._draw_lines(snapshot, [
                (self.large_font, "Flappy", WHITE),
                (self.font, "Click or press SPACE to start", WHITE),
                (self.font, "M = toggle sound", WHITE),
            ])
        elif snapshot.phase is Phase.GAME_OVER:
            self._draw_lines(snapshot, [
                (self.large_font, "Game Over", RED),
                (self.font, f"Score: {snapshot.score}", WHITE),
                (self.font, f"Best: {snapshot.best}", WHITE),
                (self.font, "Press R to restart", WHITE),
            ])

    def _draw_lines(self, snapshot: FrameSnapshot, lines):
        y = snapshot.ground_y * 0.3
        for font, text, color in lines:
            surf = font.render(text, True, color)
            self.screen.blit(surf, (snapshot.width // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 10
