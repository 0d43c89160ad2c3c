"""Grid Snake: a real-time arcade snake on a fixed-timestep engine."""

from .engine import Game
from .food import FoodPlacementError, place_food
from .model import DOWN, LEFT, RIGHT, STILL, UP, GameState, Grid, Snapshot, World, speed_for_score
from .particles import Particle, ParticleSystem
from .simulation import StepResult, step

__version__ = "1.0.0"

__all__ = [
    "DOWN",
    "FoodPlacementError",
    "Game",
    "GameState",
    "Grid",
    "LEFT",
    "Particle",
    "ParticleSystem",
    "RIGHT",
    "STILL",
    "Snapshot",
    "StepResult",
    "UP",
    "World",
    "place_food",
    "speed_for_score",
    "step",
]
