"""
One logic tick of the snake.

``step`` is the only place the World changes during a session: it resolves
the direction, moves the head, checks walls and the body, and handles food.
"""

import random
from dataclasses import dataclass
from typing import Optional

from .config import FOOD_COLOR, FOOD_SCORE
from .food import place_food
from .model import STILL, World, speed_for_score
from .particles import ParticleSystem

WALL = "wall"
SELF = "self"


@dataclass(frozen=True)
class StepResult:
    """What happened during one tick"""
    moved: bool = False
    ate: bool = False
    game_over: bool = False
    reason: str = ""


IDLE = StepResult()


def step(world: World, particles: Optional[ParticleSystem] = None,
         rng: Optional[random.Random] = None) -> StepResult:
    """Advance the world by one tick"""
    world.direction = world.next_direction
    if world.direction == STILL:
        return IDLE

    head_x, head_y = world.head
    dx, dy = world.direction
    new_head = (head_x + dx, head_y + dy)

    if not world.grid.contains(new_head):
        return StepResult(game_over=True, reason=WALL)

    # Checked before the tail moves: stepping onto the current tail is fatal
    if world.occupies(new_head):
        return StepResult(game_over=True, reason=SELF)

    world.snake.insert(0, new_head)

    if new_head == world.food:
        world.score += FOOD_SCORE
        if particles is not None:
            px, py = world.grid.pixel_center(new_head)
            particles.spawn(px, py, FOOD_COLOR)
        world.speed = speed_for_score(world.score)
        world.food = place_food(world.grid, world.snake, rng)
        return StepResult(moved=True, ate=True)

    world.snake.pop()
    return StepResult(moved=True)
