"""
Window, event pump and the main loop.

Run with: python -m gridsnake
For headless testing: SDL_VIDEODRIVER=dummy python -m gridsnake --headless
"""

import logging
import os
import random
from typing import Optional

import pygame

from .config import (
    CAPTION,
    FPS,
    HEADLESS,
    HEADLESS_FRAMES,
    HIGHSCORE_FILE,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controls import InputHandler
from .engine import Game
from .highscore import FileHighScoreStore, MemoryHighScoreStore
from .model import Direction, World, layout_for_surface
from .render import PygameRenderer

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def create_game(screen: pygame.Surface, headless: bool = False,
                rng: Optional[random.Random] = None) -> Game:
    """Build a game sized to the screen"""
    width, height = screen.get_size()
    store = MemoryHighScoreStore() if headless else FileHighScoreStore(HIGHSCORE_FILE)
    return Game(
        grid=layout_for_surface(width, height),
        renderer=PygameRenderer(screen),
        high_scores=store,
        rng=rng,
    )


def run():
    """Main game loop"""
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    game = create_game(screen)

    def on_resize(size):
        surface = pygame.display.set_mode(size, pygame.RESIZABLE)
        game.renderer = PygameRenderer(surface)

    handler = InputHandler(game, on_resize=on_resize)
    logger.info("High score on record: %d", game.high_score)

    running = True
    while running:
        running = handler.handle_input()
        game.frame()
        clock.tick(FPS)

    pygame.quit()


def steer_towards_food(world: World) -> Direction:
    """Greedy autopilot for the headless self-test"""
    hx, hy = world.head
    fx, fy = world.food
    if fx != hx:
        return (1, 0) if fx > hx else (-1, 0)
    return (0, 1) if fy > hy else (0, -1)


def run_headless(frames: int = HEADLESS_FRAMES, seed: int = 7) -> Game:
    """Run a scripted session on a fake clock"""
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    game = create_game(screen, headless=True, rng=random.Random(seed))
    game.start_game()

    now = 0.0
    for _ in range(frames):
        if game.running:
            game.set_direction(*steer_towards_food(game.world))
        game.frame(now)
        now += 1.0 / FPS
    return game


def main():
    """Entry point"""
    setup_logging()

    if HEADLESS:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'
    pygame.init()

    if HEADLESS:
        print("Running in headless mode for testing...")
        game = run_headless()
        print(f"Headless test complete. Score: {game.score}")
        pygame.quit()
    else:
        run()


if __name__ == "__main__":
    main()
