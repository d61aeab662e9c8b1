import numpy as np
import pytest
from PIL import Image

from maze_lib.schema import MazeFeature

W = MazeFeature.WALL
S = MazeFeature.ENTRANCE
E = MazeFeature.EXIT

FEATURE_RGB = {
    MazeFeature.PATH: (255, 255, 255),
    MazeFeature.WALL: (0, 0, 0),
    MazeFeature.ENTRANCE: (255, 0, 0),
    MazeFeature.EXIT: (0, 0, 255),
}


def base_maze(width=10, height=10):
    """A grid of open path surrounded by a one pixel wall."""
    grid = np.full((height, width), MazeFeature.PATH, dtype=np.uint8)
    grid[0, :] = W
    grid[-1, :] = W
    grid[:, 0] = W
    grid[:, -1] = W
    return grid


def paint(grid, feature, points):
    for x, y in points:
        grid[y, x] = feature
    return grid


def blank_maze():
    return np.full((10, 10), MazeFeature.PATH, dtype=np.uint8)


def unsolvable_maze():
    """2x2 entrance at x,y 1-2 and a 2x2 exit at x 4-5, y 1-2 sealed in by walls."""
    grid = base_maze()
    paint(grid, S, [(1, 1), (2, 1), (1, 2), (2, 2)])
    paint(grid, E, [(4, 1), (5, 1), (4, 2), (5, 2)])
    paint(grid, W, [(3, 1), (3, 2), (3, 3), (4, 3), (5, 3), (6, 3), (6, 2), (6, 1)])
    return grid


def split_maze():
    """Entrance and exit on opposite sides of a wall with no gap."""
    grid = base_maze()
    paint(grid, S, [(1, 1), (2, 1), (1, 2), (2, 2)])
    paint(grid, E, [(8, 1), (8, 2), (7, 1), (7, 2)])
    paint(
        grid,
        W,
        [(3, y) for y in range(1, 7)]
        + [(4, 6), (5, 6), (6, 6), (5, 7), (5, 8)]
        + [(6, y) for y in range(1, 6)],
    )
    return grid


def perimeter_ports_maze():
    grid = base_maze()
    paint(grid, S, [(1, 1), (2, 1), (1, 2), (2, 2)])
    paint(grid, E, [(4, 1), (4, 2), (5, 1), (5, 2)])
    paint(
        grid,
        W,
        [(3, y) for y in range(1, 7)]
        + [(4, 3), (4, 4), (5, 3), (5, 4)]
        + [(6, y) for y in range(3, 7)],
    )
    return grid


def touching_ports_maze():
    """Entrance at x 1-2 and exit at x 3-4 sharing a single row corridor."""
    grid = base_maze(6, 4)
    paint(grid, W, [(x, 2) for x in range(1, 5)])
    paint(grid, S, [(1, 1), (2, 1)])
    paint(grid, E, [(3, 1), (4, 1)])
    return grid


def one_pixel_maze():
    """A single-pixel-wide U shaped corridor from (1, 1) down, across and up to (8, 1)."""
    grid = base_maze()
    paint(grid, S, [(1, 1)])
    paint(grid, E, [(8, 1)])
    paint(
        grid,
        W,
        [(2, y) for y in range(1, 8)]
        + [(x, 7) for x in range(3, 8)]
        + [(7, y) for y in range(1, 7)],
    )
    return grid


def l_room_maze():
    """An L shaped room: rows 1-2 and columns 1-2 open, a wall block filling the rest."""
    grid = base_maze(7, 7)
    paint(grid, W, [(x, y) for x in range(3, 6) for y in range(3, 6)])
    paint(grid, S, [(1, 1)])
    paint(grid, E, [(5, 2)])
    return grid


def to_rgb(grid):
    img = np.zeros(grid.shape + (3,), dtype=np.uint8)
    for feature, color in FEATURE_RGB.items():
        img[grid == feature] = color
    return img


@pytest.fixture
def write_maze_image(tmp_path):
    """Writes a feature grid as a PNG and returns its path."""

    def _write(grid, name="maze.png"):
        path = tmp_path / name
        Image.fromarray(to_rgb(grid)).save(path)
        return str(path)

    return _write
