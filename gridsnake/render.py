"""
Render adapters.

The engine hands every frame a ``Snapshot`` and never draws itself, so any
backend with a ``draw_frame`` method works: the pygame renderer below, the
no-op renderer for headless runs, or a recorder in tests.
"""

import math
from typing import Callable, Optional, Protocol, Tuple

import pygame

from .config import (
    DARK_BG,
    FOOD_COLOR,
    FOOD_GLOW,
    GAME_OVER_COLOR,
    GRID_LINE_COLOR,
    PARTICLE_RADIUS,
    SCORE_COLOR,
    SNAKE_BODY_COLOR,
    SNAKE_HEAD_COLOR,
    SNAKE_HEAD_GLOW,
    TITLE_COLOR,
    WHITE,
)
from .model import GameState, Snapshot


class Renderer(Protocol):
    def draw_frame(self, snapshot: Snapshot) -> None: ...


class NullRenderer:
    """Draws nothing"""

    def draw_frame(self, snapshot: Snapshot) -> None:
        pass


class PygameRenderer:
    """Draws snapshots onto a pygame surface with glow and fade effects"""

    def __init__(self, surface: pygame.Surface, flip: bool = True,
                 time_source: Optional[Callable[[], int]] = None):
        self.surface = surface
        self.flip = flip
        self.time_source = time_source or pygame.time.get_ticks

        pygame.font.init()
        self.font_large = pygame.font.Font(None, 72)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 32)

    def draw_frame(self, snapshot: Snapshot) -> None:
        """Draw everything"""
        self.draw_background(snapshot)

        if snapshot.state is not GameState.NOT_STARTED:
            self.draw_food(snapshot)
            self.draw_snake(snapshot)
        self.draw_particles(snapshot)
        self.draw_ui(snapshot)

        if snapshot.state is GameState.NOT_STARTED:
            self.draw_start_screen()
        elif snapshot.state is GameState.GAME_OVER:
            self.draw_game_over(snapshot)

        if self.flip:
            pygame.display.flip()

    def draw_background(self, snapshot: Snapshot):
        """Fill and draw the subtle grid"""
        self.surface.fill(DARK_BG)

        width, height = snapshot.grid.pixel_size
        tile = snapshot.grid.cell_size
        grid_surface = pygame.Surface((width + 1, height + 1), pygame.SRCALPHA)
        for x in range(0, width + 1, tile):
            pygame.draw.line(grid_surface, GRID_LINE_COLOR, (x, 0), (x, height))
        for y in range(0, height + 1, tile):
            pygame.draw.line(grid_surface, GRID_LINE_COLOR, (0, y), (width, y))
        self.surface.blit(grid_surface, (0, 0))

    def draw_food(self, snapshot: Snapshot):
        """Draw food with pulsing glow effect"""
        tile = snapshot.grid.cell_size
        x, y = (int(v) for v in snapshot.grid.pixel_center(snapshot.food))
        pulse = math.sin(self.time_source() / 200) * 2

        glow_size = int(tile * 1.2)
        glow_surface = pygame.Surface((glow_size * 2, glow_size * 2), pygame.SRCALPHA)
        for i in range(4):
            alpha = int(40 * (1 - i / 4))
            size = glow_size - i * 4
            if size > 0:
                pygame.draw.circle(glow_surface, (*FOOD_GLOW, alpha), (glow_size, glow_size), size)
        self.surface.blit(glow_surface, (x - glow_size, y - glow_size))

        radius = max(1, int(tile / 2 - 4 + pulse))
        pygame.draw.circle(self.surface, FOOD_COLOR, (x, y), radius)

    def draw_snake(self, snapshot: Snapshot):
        """Draw head with glow, body fading towards the tail"""
        tile = snapshot.grid.cell_size
        length = len(snapshot.snake)
        body_surface = pygame.Surface(snapshot.grid.pixel_size, pygame.SRCALPHA)

        for index, (cx, cy) in enumerate(snapshot.snake):
            rect = pygame.Rect(cx * tile + 1, cy * tile + 1, tile - 2, tile - 2)

            if index == 0:
                glow_size = tile
                glow_surface = pygame.Surface((glow_size * 2, glow_size * 2), pygame.SRCALPHA)
                for j in range(3):
                    alpha = int(45 * (1 - j / 3))
                    pygame.draw.circle(glow_surface, (*SNAKE_HEAD_GLOW, alpha),
                                       (glow_size, glow_size), glow_size - j * 4)
                self.surface.blit(glow_surface, (rect.centerx - glow_size, rect.centery - glow_size))
                color: Tuple[int, ...] = (*SNAKE_HEAD_COLOR, 255)
            else:
                fade = 1 - index / (length + 5)
                color = (*SNAKE_BODY_COLOR, int(255 * fade))

            pygame.draw.rect(body_surface, color, rect, border_radius=4)

        self.surface.blit(body_surface, (0, 0))

    def draw_particles(self, snapshot: Snapshot):
        """Draw particles with alpha from remaining life"""
        if not snapshot.particles:
            return
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        for p in snapshot.particles:
            alpha = max(0, min(255, int(255 * p.life)))
            pygame.draw.circle(layer, (*p.color, alpha), (int(p.x), int(p.y)), PARTICLE_RADIUS)
        self.surface.blit(layer, (0, 0))

    def draw_ui(self, snapshot: Snapshot):
        """Draw score and high score"""
        score_surface = self.font_small.render(f"Score: {snapshot.score}", True, SCORE_COLOR)
        self.surface.blit(score_surface, (10, 10))

        high_surface = self.font_small.render(f"High: {snapshot.high_score}", True, SCORE_COLOR)
        self.surface.blit(high_surface, (self.surface.get_width() - high_surface.get_width() - 10, 10))

    def _overlay(self, alpha: int):
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, 0))

    def _centered(self, font: pygame.font.Font, text: str, color, dy: int):
        text_surface = font.render(text, True, color)
        center = (self.surface.get_width() // 2, self.surface.get_height() // 2 + dy)
        self.surface.blit(text_surface, text_surface.get_rect(center=center))

    def draw_start_screen(self):
        self._overlay(150)
        self._centered(self.font_large, "SNAKE", TITLE_COLOR, -40)
        self._centered(self.font_small, "Press SPACE or an arrow key to start", SCORE_COLOR, 20)

    def draw_game_over(self, snapshot: Snapshot):
        """Draw game over screen"""
        self._overlay(170)
        self._centered(self.font_large, "GAME OVER", GAME_OVER_COLOR, -50)
        self._centered(self.font_medium, f"Final Score: {snapshot.score}", WHITE, 20)
        if snapshot.score > 0 and snapshot.score == snapshot.high_score:
            self._centered(self.font_small, "NEW HIGH SCORE!", (255, 200, 50), 60)
        self._centered(self.font_small, "Press SPACE to restart  |  ESC to quit", SCORE_COLOR, 110)
