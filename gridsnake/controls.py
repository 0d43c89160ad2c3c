"""
Input adapter: keyboard and drag gestures to game intents.

Everything here funnels into ``Game.set_direction``, ``Game.start_game`` and
``Game.reset_game``.
"""

from typing import Callable, Optional, Tuple

import pygame

from .config import SWIPE_DEAD_ZONE
from .engine import Game
from .model import DOWN, LEFT, RIGHT, UP, Direction, GameState, layout_for_surface

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

START_KEYS = {pygame.K_SPACE, pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT}


def swipe_direction(dx: float, dy: float,
                    dead_zone: float = SWIPE_DEAD_ZONE) -> Optional[Direction]:
    """Map a drag vector to a direction by its dominant axis"""
    if max(abs(dx), abs(dy)) < dead_zone:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def begin_or_restart(game: Game):
    if game.state is GameState.GAME_OVER:
        game.reset_game()
    else:
        game.start_game()


def handle_key(game: Game, key: int) -> bool:
    """Apply one key press, return False if the player asked to quit"""
    if key == pygame.K_ESCAPE:
        return False

    if not game.running:
        if key in START_KEYS:
            begin_or_restart(game)
        return True

    direction = KEY_DIRECTIONS.get(key)
    if direction is not None:
        game.set_direction(*direction)
    return True


class InputHandler:
    """Pumps pygame events into a game"""

    def __init__(self, game: Game,
                 on_resize: Optional[Callable[[Tuple[int, int]], None]] = None):
        self.game = game
        self.on_resize = on_resize
        self.drag_start: Optional[Tuple[int, int]] = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle one event, return False to quit"""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            return handle_key(self.game, event.key)

        if event.type == pygame.VIDEORESIZE:
            if self.on_resize:
                self.on_resize(event.size)
            self.game.resize(layout_for_surface(*event.size))
            return True

        if event.type == pygame.MOUSEBUTTONDOWN:
            self.drag_start = event.pos
            if not self.game.running:
                begin_or_restart(self.game)

        elif event.type == pygame.MOUSEBUTTONUP and self.drag_start is not None:
            start_x, start_y = self.drag_start
            self.drag_start = None
            if self.game.running:
                direction = swipe_direction(event.pos[0] - start_x, event.pos[1] - start_y)
                if direction is not None:
                    self.game.set_direction(*direction)

        return True

    def handle_input(self) -> bool:
        """Handle all queued events"""
        running = True
        for event in pygame.event.get():
            if not self.handle_event(event):
                running = False
        return running
