"""Grid, entity state and session state for the snake engine."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple

from .config import (
    BASE_SPEED,
    GRID_SIZE,
    LARGE_SCREEN_TILES,
    MAX_SPEED,
    SCORE_PER_SPEED_STEP,
    SMALL_SCREEN_TILES,
    SMALL_SCREEN_WIDTH,
)
from .particles import Particle

Cell = Tuple[int, int]
Direction = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
STILL: Direction = (0, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class GameState(Enum):
    """Session state, owned by the game loop"""
    NOT_STARTED = auto()
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Grid:
    """Playfield size in cells, plus the pixel size of one cell"""
    width: int
    height: int
    cell_size: int = GRID_SIZE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.cell_size <= 0:
            raise ValueError(f"cell size must be positive, got {self.cell_size}")

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return (self.width * self.cell_size, self.height * self.cell_size)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_center(self, cell: Cell) -> Tuple[float, float]:
        """Screen position of the middle of a cell"""
        x, y = cell
        half = self.cell_size / 2
        return (x * self.cell_size + half, y * self.cell_size + half)


def speed_for_score(score: int) -> int:
    """Moves per second for a score: +1 every 50 points, capped"""
    return min(MAX_SPEED, BASE_SPEED + score // SCORE_PER_SPEED_STEP)


@dataclass
class World:
    """Everything a simulation tick reads and mutates"""
    grid: Grid
    snake: List[Cell]
    food: Cell
    direction: Direction = STILL
    next_direction: Direction = UP
    score: int = 0
    speed: int = BASE_SPEED

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.snake


def layout_for_surface(width_px: int, height_px: int) -> Grid:
    """
    Fit a grid to a drawable area.

    Narrow surfaces get fewer, larger tiles. The tile size is kept even so
    cell centres land on whole pixels.
    """
    target_tiles = SMALL_SCREEN_TILES if width_px < SMALL_SCREEN_WIDTH else LARGE_SCREEN_TILES
    tile = width_px // target_tiles
    tile -= tile % 2
    tile = max(2, tile)
    return Grid(
        width=max(1, width_px // tile),
        height=max(1, height_px // tile),
        cell_size=tile,
    )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer; particles are copies"""
    state: GameState
    grid: Grid
    snake: Tuple[Cell, ...] = ()
    food: Cell = (0, 0)
    particles: Tuple[Particle, ...] = field(default_factory=tuple)
    score: int = 0
    high_score: int = 0
    speed: int = BASE_SPEED
    direction: Direction = STILL
    last_death: str = ""
