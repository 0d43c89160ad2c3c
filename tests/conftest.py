import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from gridsnake.model import Grid


class RecordingRenderer:
    """Keeps every snapshot it is asked to draw"""

    def __init__(self):
        self.frames = []

    def draw_frame(self, snapshot):
        self.frames.append(snapshot)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def grid():
    return Grid(20, 20)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
