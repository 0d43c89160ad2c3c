"""
Frame loop and session state.

``Game`` owns the only mutable state of a session: the World, the particle
system and the tick accumulator. The host calls ``frame()`` once per display
refresh; input adapters call ``set_direction``, ``start_game`` and
``reset_game``.
"""

import logging
import random
import time
from dataclasses import replace
from typing import Callable, Optional

from .config import BASE_SPEED
from .food import place_food
from .highscore import HighScoreStore, MemoryHighScoreStore
from .model import DIRECTIONS, STILL, UP, GameState, Grid, Snapshot, World
from .particles import ParticleSystem
from .render import NullRenderer, Renderer
from .simulation import StepResult, step

logger = logging.getLogger(__name__)


class Game:
    """Main game class"""

    def __init__(self, grid: Grid, renderer: Optional[Renderer] = None,
                 high_scores: Optional[HighScoreStore] = None,
                 clock: Callable[[], float] = time.perf_counter,
                 rng: Optional[random.Random] = None,
                 on_game_over: Optional[Callable[[int], None]] = None):
        self.grid = grid
        self.renderer = renderer or NullRenderer()
        self.high_scores = high_scores or MemoryHighScoreStore()
        self.clock = clock
        self.rng = rng or random.Random()
        self.on_game_over = on_game_over

        self.state = GameState.NOT_STARTED
        self.world: Optional[World] = None
        self.particles = ParticleSystem(self.rng)
        self.high_score = self.high_scores.load()
        self.last_death = ""

        # Seconds since the last logic tick
        self.accumulator = 0.0
        self.last_frame: Optional[float] = None
        self.pending_grid: Optional[Grid] = None

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def score(self) -> int:
        return self.world.score if self.world else 0

    @property
    def tick_interval(self) -> float:
        speed = self.world.speed if self.world else BASE_SPEED
        return 1.0 / speed

    # Session control

    def start_game(self):
        """Begin a fresh session; ignored while one is running"""
        if self.running:
            return

        if self.pending_grid is not None:
            self.grid = self.pending_grid
            self.pending_grid = None

        snake = [self.grid.center]
        self.world = World(
            grid=self.grid,
            snake=snake,
            food=place_food(self.grid, snake, self.rng),
            direction=STILL,
            next_direction=UP,
        )
        self.last_death = ""
        self.state = GameState.RUNNING
        # First frame of a session moves straight away
        self.accumulator = self.tick_interval
        logger.info("Game started on %dx%d grid", self.grid.width, self.grid.height)

    def reset_game(self):
        """Throw away a finished session and start again"""
        if self.running:
            return
        self.particles.clear()
        self.start_game()

    def set_direction(self, dx: int, dy: int):
        """Queue a turn for the next tick, refusing a reversal onto the neck"""
        if not self.running or (dx, dy) not in DIRECTIONS:
            return
        active = self.world.direction
        if active != STILL and (dx, dy) == (-active[0], -active[1]):
            return
        self.world.next_direction = (dx, dy)

    def resize(self, grid: Grid):
        """Use a new grid; deferred to the next session while one is running"""
        if self.running:
            logger.debug("Deferring resize to %dx%d until next game", grid.width, grid.height)
            self.pending_grid = grid
            return
        self.grid = grid
        self.pending_grid = None

    # Frame loop

    def frame(self, now: Optional[float] = None) -> StepResult:
        """Run one display frame: maybe tick, always update particles and draw"""
        if now is None:
            now = self.clock()
        if self.last_frame is not None:
            self.accumulator += max(0.0, now - self.last_frame)
        self.last_frame = now

        result = StepResult()
        interval = self.tick_interval
        if self.running and self.accumulator >= interval:
            # Carry the remainder; after a stall keep at most one tick banked
            self.accumulator = min(self.accumulator - interval, interval)
            result = self.tick()

        self.particles.tick()
        self.renderer.draw_frame(self.snapshot())
        return result

    def tick(self) -> StepResult:
        """Advance the simulation once, ignoring the clock"""
        if not self.running:
            return StepResult()
        result = step(self.world, self.particles, self.rng)
        if result.game_over:
            self._game_over(result.reason)
        return result

    def _game_over(self, reason: str):
        self.state = GameState.GAME_OVER
        self.last_death = reason
        score = self.world.score
        logger.info("Game over (%s collision), score %d", reason, score)

        if score > self.high_score:
            self.high_score = score
            self.high_scores.save(score)
            logger.info("New high score: %d", score)

        if self.on_game_over:
            self.on_game_over(score)

    def snapshot(self) -> Snapshot:
        """Freeze the current state for drawing"""
        particles = tuple(replace(p) for p in self.particles.particles)
        if self.world is None:
            return Snapshot(
                state=self.state,
                grid=self.grid,
                particles=particles,
                high_score=self.high_score,
            )
        return Snapshot(
            state=self.state,
            grid=self.world.grid,
            snake=tuple(self.world.snake),
            food=self.world.food,
            particles=particles,
            score=self.world.score,
            high_score=self.high_score,
            speed=self.world.speed,
            direction=self.world.direction,
            last_death=self.last_death,
        )
