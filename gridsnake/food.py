"""Random food placement on free cells."""

import logging
import random
from typing import Iterable, Optional

from .config import MAX_FOOD_ATTEMPTS
from .model import Cell, Grid

logger = logging.getLogger(__name__)


class FoodPlacementError(RuntimeError):
    """No free cell was found within the attempt budget (grid is full)"""


def place_food(grid: Grid, occupied: Iterable[Cell], rng: Optional[random.Random] = None,
               max_attempts: int = MAX_FOOD_ATTEMPTS) -> Cell:
    """
    Pick a uniformly random cell that is not occupied.

    Rejection sampling: draw any cell, redraw while it lies on the snake.
    Raises FoodPlacementError once ``max_attempts`` draws all land on
    occupied cells.
    """
    rng = rng or random
    exclude = set(occupied)
    for _ in range(max_attempts):
        pos = (rng.randrange(grid.width), rng.randrange(grid.height))
        if pos not in exclude:
            return pos

    logger.error("No free cell for food after %d attempts (%d of %d cells occupied)",
                 max_attempts, len(exclude), grid.width * grid.height)
    raise FoodPlacementError(f"no free cell found after {max_attempts} attempts")
