"""
renderer.py: Draws a GameSnapshot with pygame. Never touches the engine.
"""

from typing import Optional

import pygame

from .assets import Assets
from .config import GameConfig
from .data_models import GameSnapshot, RunState, Viewport

SKY_COLOR = (0x70, 0xC5, 0xCE)
PIPE_COLOR = (0x22, 0x8B, 0x22)
GROUND_COLOR = (0xDE, 0xD8, 0x95)
BIRD_COLOR = (255, 255, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREY = (238, 238, 238)


def bird_rotation(velocity: float) -> float:
    """Tilt in degrees, nose-down positive, clamped to +/-30."""
    return max(-30.0, min(30.0, velocity * 3))


class Renderer:
    def __init__(self, surface: pygame.Surface, config: GameConfig,
                 assets: Optional[Assets] = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.config = config
        self.assets = assets or Assets()
        font_path = self.assets.font_path
        self.large_font = pygame.font.Font(font_path, 24)
        self.font = pygame.font.Font(font_path, 16)
        self.small_font = pygame.font.Font(font_path, 12)
        self.countdown_font = pygame.font.Font(font_path, 48)

    def draw(self, snapshot: GameSnapshot):
        width, height = self.surface.get_size()
        ground_h = self.config.geometry(Viewport(width, height)).ground_height

        self._draw_background(width, height)
        for pipe in snapshot.pipes:
            self._draw_pipe(pipe, height)
        self._draw_ground(width, height, ground_h)
        self._draw_bird(snapshot)
        self._draw_hud(snapshot, width, height)

    # ---------- World ----------

    def _draw_background(self, width: int, height: int):
        background = self.assets.image("background")
        if background is not None:
            self.surface.blit(pygame.transform.scale(background, (width, height)), (0, 0))
        else:
            self.surface.fill(SKY_COLOR)

    def _draw_pipe(self, pipe, height: int):
        sprite = self.assets.image("pipe")
        top_rect = pygame.Rect(int(pipe.x), 0, int(pipe.width), int(pipe.gap_y))
        bottom_y = int(pipe.gap_y + pipe.gap_height)
        bottom_rect = pygame.Rect(int(pipe.x), bottom_y, int(pipe.width), max(0, height - bottom_y))

        if sprite is None:
            pygame.draw.rect(self.surface, PIPE_COLOR, top_rect)
            pygame.draw.rect(self.surface, PIPE_COLOR, bottom_rect)
            return

        body = pygame.transform.scale(sprite, (int(pipe.width), height))
        # Top pipe is the sprite flipped so its cap faces the gap
        flipped = pygame.transform.flip(body, False, True)
        self.surface.blit(flipped, (top_rect.x, top_rect.bottom - height))
        self.surface.blit(body, bottom_rect.topleft)

    def _draw_ground(self, width: int, height: int, ground_h: float):
        rect = pygame.Rect(0, int(height - ground_h), width, int(ground_h) + 1)
        ground = self.assets.image("ground")
        if ground is not None:
            self.surface.blit(pygame.transform.scale(ground, rect.size), rect.topleft)
        else:
            pygame.draw.rect(self.surface, GROUND_COLOR, rect)

    def _draw_bird(self, snapshot: GameSnapshot):
        bird = snapshot.bird
        rect = pygame.Rect(int(bird.x), int(bird.y), int(bird.width), int(bird.height))
        sprite = self.assets.image("bird")
        if sprite is None:
            pygame.draw.rect(self.surface, BIRD_COLOR, rect)
            return
        scaled = pygame.transform.scale(sprite, rect.size)
        # pygame rotates counter-clockwise for positive angles
        rotated = pygame.transform.rotate(scaled, -bird_rotation(bird.velocity))
        self.surface.blit(rotated, rotated.get_rect(center=rect.center))

    # ---------- HUD ----------

    def _blit_centered(self, font, text: str, color, center):
        surf = font.render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=center))

    def _draw_hud(self, snapshot: GameSnapshot, width: int, height: int):
        cx, cy = width // 2, height // 2
        self._blit_centered(self.small_font, f"High Score: {snapshot.high_score}", GREY, (cx, 30))
        self._blit_centered(self.large_font, str(snapshot.score), WHITE, (cx, 80))

        if snapshot.state is RunState.GAME_OVER:
            self._blit_centered(self.large_font, "Game Over", RED, (cx, cy))
            self._blit_centered(self.font, "Click or Tap to Restart", WHITE, (cx, cy + 40))
        elif snapshot.state is RunState.NOT_STARTED:
            self._blit_centered(self.large_font, "Tap or Click to Start", WHITE, (cx, cy))
        elif snapshot.pause_countdown > 0:
            self._blit_centered(self.countdown_font, str(snapshot.pause_countdown), WHITE, (cx, cy))
        elif snapshot.state is RunState.PAUSED:
            self._blit_centered(self.large_font, "Paused", WHITE, (cx, cy))
