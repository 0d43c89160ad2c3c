"""
Game constants and environment overrides.

Tuning values live here as plain module constants so every module (and the
tests) read the same numbers.
"""

import os
import sys
from pathlib import Path

# Headless mode: dummy SDL drivers, no window
HEADLESS = '--headless' in sys.argv or os.environ.get('SDL_VIDEODRIVER') == 'dummy'

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60
CAPTION = "Grid Snake"

# Grid layout
GRID_SIZE = 20  # Default cell size in pixels
SMALL_SCREEN_WIDTH = 600
SMALL_SCREEN_TILES = 15
LARGE_SCREEN_TILES = 25

# Speed (moves per second)
BASE_SPEED = 10
MAX_SPEED = 20
SCORE_PER_SPEED_STEP = 50

# Scoring
FOOD_SCORE = 10

# Food placement
MAX_FOOD_ATTEMPTS = 10_000

# Particles
BURST_SIZE = 10
PARTICLE_SPREAD = 10.0  # Velocity components fall in [-SPREAD/2, SPREAD/2)
LIFE_DECAY = 0.05
PARTICLE_RADIUS = 3

# Swipe gestures shorter than this (pixels) are treated as taps
SWIPE_DEAD_ZONE = 10

# Colors
DARK_BG = (15, 15, 26)
WHITE = (255, 255, 255)
GRID_LINE_COLOR = (255, 255, 255, 8)

SNAKE_HEAD_COLOR = (0, 255, 136)
SNAKE_HEAD_GLOW = (0, 200, 110)
SNAKE_BODY_COLOR = (0, 204, 106)

FOOD_COLOR = (255, 0, 85)
FOOD_GLOW = (255, 90, 140)

SCORE_COLOR = (180, 180, 220)
GAME_OVER_COLOR = (255, 80, 100)
TITLE_COLOR = (100, 200, 255)

# Persistence
HIGHSCORE_FILE = Path(
    os.environ.get('GRIDSNAKE_HIGHSCORE', Path.home() / '.gridsnake' / 'highscore.txt')
)

# Logging
LOG_LEVEL = os.environ.get('GRIDSNAKE_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Headless self-test length in frames
HEADLESS_FRAMES = 300
