import pygame
import pytest

from gridsnake.controls import InputHandler, handle_key, swipe_direction
from gridsnake.engine import Game
from gridsnake.model import DOWN, LEFT, RIGHT, UP, GameState, Grid


@pytest.mark.parametrize("dx,dy,expected", [
    (40, 5, RIGHT),
    (-40, 12, LEFT),
    (3, 30, DOWN),
    (-8, -30, UP),
    (20, -20, UP),
    (2, 3, None),
])
def test_swipe_uses_dominant_axis(dx, dy, expected):
    assert swipe_direction(dx, dy) == expected


@pytest.fixture
def game(rng):
    return Game(Grid(20, 20), rng=rng)


def test_space_starts_game(game):
    assert handle_key(game, pygame.K_SPACE)
    assert game.state is GameState.RUNNING


def test_other_keys_do_not_start(game):
    handle_key(game, pygame.K_x)
    assert game.state is GameState.NOT_STARTED


def test_escape_quits(game):
    assert handle_key(game, pygame.K_ESCAPE) is False


def test_arrow_and_wasd_steer(game):
    game.start_game()
    handle_key(game, pygame.K_a)
    assert game.world.next_direction == LEFT
    handle_key(game, pygame.K_RIGHT)
    assert game.world.next_direction == RIGHT


def test_start_key_during_game_over_restarts(game):
    game.start_game()
    game.world.food = (0, 19)
    while game.running:
        game.tick()
    game.particles.spawn(0.0, 0.0, (1, 1, 1))

    handle_key(game, pygame.K_UP)

    assert game.state is GameState.RUNNING
    assert game.world.snake == [(10, 10)]
    assert len(game.particles) == 0


def test_drag_starts_then_steers(game):
    handler = InputHandler(game)

    handler.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
    assert game.running

    handler.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(160, 110), button=1))
    assert game.world.next_direction == RIGHT


def test_tap_does_not_steer(game):
    game.start_game()
    handler = InputHandler(game)

    handler.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
    handler.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(102, 101), button=1))

    assert game.world.next_direction == UP


def test_quit_event(game):
    handler = InputHandler(game)
    assert handler.handle_event(pygame.event.Event(pygame.QUIT)) is False


def test_resize_event_regrids_and_notifies(game):
    sizes = []
    handler = InputHandler(game, on_resize=sizes.append)

    assert handler.handle_event(pygame.event.Event(pygame.VIDEORESIZE, size=(500, 400), w=500, h=400))

    assert sizes == [(500, 400)]
    assert game.grid == Grid(15, 12, cell_size=32)


def test_handle_input_drains_queue(game, pygame_session):
    pygame.display.set_mode((100, 100))
    pygame.event.clear()
    handler = InputHandler(game)

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert handler.handle_input()
    assert game.running

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert handler.handle_input() is False
