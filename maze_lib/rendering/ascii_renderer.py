# --- maze_lib/rendering/ascii_renderer.py ---
from typing import Iterable, List

import numpy as np

from maze_lib.schema import BoundingBox, MazeFeature

FEATURE_CHARS = {
    MazeFeature.PATH: ".",
    MazeFeature.WALL: "#",
    MazeFeature.ENTRANCE: "S",
    MazeFeature.EXIT: "E",
}
SOLUTION_CHAR = "*"


class ASCIIRenderer:
    """Renders a classified maze grid as ASCII art for debugging."""

    def __init__(self):
        self.canvas: List[List[str]] = []

    def render_grid(self, features: np.ndarray, solution: Iterable[BoundingBox] = ()):
        self.canvas = [
            [FEATURE_CHARS[MazeFeature(int(v))] for v in row] for row in features
        ]
        for rect in solution:
            for x, y in rect.pixels():
                self.canvas[y][x] = SOLUTION_CHAR

    def get_output(self) -> str:
        return "\n".join("".join(row) for row in self.canvas)
