"""Burst particles, ticked once per rendered frame."""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import BURST_SIZE, LIFE_DECAY, PARTICLE_SPREAD

# Repeated float subtraction of the decay leaves a ~1e-17 residue after the
# last expected tick; anything below this counts as dead.
LIFE_EPSILON = 1e-9


@dataclass
class Particle:
    """Particle for visual effects"""
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: Tuple[int, int, int]

    def update(self, decay: float = LIFE_DECAY) -> bool:
        """Advance one frame, return False if dead"""
        self.x += self.vx
        self.y += self.vy
        self.life -= decay
        return self.life > LIFE_EPSILON


class ParticleSystem:
    """Manages particle effects"""

    def __init__(self, rng: Optional[random.Random] = None, burst_size: int = BURST_SIZE,
                 decay: float = LIFE_DECAY):
        self.particles: List[Particle] = []
        self.rng = rng or random.Random()
        self.burst_size = burst_size
        self.decay = decay

    def __len__(self) -> int:
        return len(self.particles)

    def spawn(self, x: float, y: float, color: Tuple[int, int, int]):
        """Emit one burst at position"""
        for _ in range(self.burst_size):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(self.rng.random() - 0.5) * PARTICLE_SPREAD,
                vy=(self.rng.random() - 0.5) * PARTICLE_SPREAD,
                life=1.0,
                color=color,
            ))

    def tick(self):
        """Update all particles, dropping dead ones"""
        self.particles = [p for p in self.particles if p.update(self.decay)]

    def clear(self):
        self.particles = []
