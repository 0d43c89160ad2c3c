import pytest

from gridsnake.model import Grid, World, layout_for_surface, speed_for_score


@pytest.mark.parametrize("score,speed", [
    (0, 10),
    (40, 10),
    (50, 11),
    (120, 12),
    (450, 19),
    (500, 20),
    (990, 20),
    (10_000, 20),
])
def test_speed_curve(score, speed):
    assert speed_for_score(score) == speed


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_grid_rejects_empty_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_grid_bounds():
    grid = Grid(20, 15)
    assert grid.contains((0, 0))
    assert grid.contains((19, 14))
    for cell in [(-1, 0), (20, 0), (0, -1), (0, 15)]:
        assert not grid.contains(cell)


def test_grid_center_and_pixels():
    grid = Grid(20, 20, cell_size=20)
    assert grid.center == (10, 10)
    assert grid.pixel_size == (400, 400)
    assert grid.pixel_center((6, 5)) == (130.0, 110.0)


def test_world_head_is_first_cell():
    world = World(grid=Grid(5, 5), snake=[(2, 2), (2, 3)], food=(0, 0))
    assert world.head == (2, 2)
    assert world.occupies((2, 3))
    assert not world.occupies((0, 0))


def test_layout_for_wide_surface():
    grid = layout_for_surface(800, 600)
    assert grid.cell_size == 32
    assert (grid.width, grid.height) == (25, 18)


def test_layout_for_narrow_surface():
    grid = layout_for_surface(500, 400)
    assert grid.cell_size == 32
    assert (grid.width, grid.height) == (15, 12)


def test_layout_keeps_tile_size_even():
    grid = layout_for_surface(690, 500)
    assert grid.cell_size % 2 == 0
