# --- maze_lib/analysis/maze.py ---
import logging
import threading
from typing import List, Optional, Tuple

import numpy as np

from maze_lib.config import DEFAULT_COLORS, MazeColors
from maze_lib.schema import BoundingBox, MazeFeature
from .features import classify_image
from .regions import locate_regions
from .segments import CorridorSet, build_segments
from .solver import find_corridor_chain
from .trimmer import trim_solution

log = logging.getLogger("mazewiz.analysis")

MISSING_ENTRANCE = "The maze entrance could not be identified."
MISSING_EXIT = "The maze exit could not be identified."
INVALID_PERIMETER = "The maze perimeter can only contain wall features."


class Maze:
    """
    A classified maze grid with its entrance, exit, corridors and solution.

    Regions, validation and corridors are computed on construction. The
    solution is computed on the first call to get_solution() and reused after
    that; the instance is otherwise read-only.
    """

    def __init__(self, features: np.ndarray):
        if features.ndim != 2:
            raise ValueError(f"Expected a 2D feature grid, got shape {features.shape}")
        self._features = np.array(features, dtype=np.uint8)
        self._features.flags.writeable = False

        self._errors: List[str] = []
        self._corridors = CorridorSet()
        self._entrance_corridor: Optional[BoundingBox] = None
        self._exit_corridor: Optional[BoundingBox] = None
        self._solution: Optional[List[BoundingBox]] = None
        self._has_solution = False
        self._solve_lock = threading.Lock()

        log.info("Analyzing %dx%d maze grid...", self.width, self.height)
        self._entrance, self._exit = locate_regions(self._features)
        self._validate()
        if not self.is_valid:
            log.info("Maze is invalid: %s", "; ".join(self._errors))
            return

        scan = build_segments(self._features, self._entrance, self._exit)
        self._corridors = scan.corridors
        self._entrance_corridor = scan.entrance_corridor
        self._exit_corridor = scan.exit_corridor

    @classmethod
    def from_rgb(cls, img: np.ndarray, colors: MazeColors = DEFAULT_COLORS) -> "Maze":
        """Builds a maze from an H x W x 3 RGB pixel array."""
        return cls(classify_image(img, colors))

    @property
    def features(self) -> np.ndarray:
        return self._features

    @property
    def width(self) -> int:
        return self._features.shape[1]

    @property
    def height(self) -> int:
        return self._features.shape[0]

    @property
    def entrance(self) -> Optional[BoundingBox]:
        return self._entrance

    @property
    def exit(self) -> Optional[BoundingBox]:
        return self._exit

    @property
    def entrance_corridor(self) -> Optional[BoundingBox]:
        return self._entrance_corridor

    @property
    def exit_corridor(self) -> Optional[BoundingBox]:
        return self._exit_corridor

    @property
    def corridors(self) -> Tuple[BoundingBox, ...]:
        return tuple(self._corridors)

    @property
    def is_valid(self) -> bool:
        """
        True when the maze has an entrance, an exit and an all-wall perimeter.
        Says nothing about whether it can be solved.
        """
        return not self._errors

    @property
    def validation_errors(self) -> List[str]:
        return list(self._errors)

    def get_solution(self) -> List[BoundingBox]:
        """
        The trimmed rectangles leading from entrance to exit, in that order.
        Empty if the maze is invalid or cannot be solved.
        Entrance and exit regions that touch leave nothing to paint, so an
        empty list alone does not mean unsolvable; see has_solution.
        """
        if self._solution is None:
            with self._solve_lock:
                if self._solution is None:
                    self._solution = self._solve()
        return list(self._solution)

    @property
    def has_solution(self) -> bool:
        """True when a corridor chain links the entrance to the exit."""
        self.get_solution()
        return self._has_solution

    def range_has_feature(self, box: BoundingBox, feature: MazeFeature) -> bool:
        """True if any pixel inside box has the given feature."""
        window = self._features[box.min_y : box.max_y + 1, box.min_x : box.max_x + 1]
        return bool(np.any(window == feature))

    def _validate(self):
        if self._entrance is None:
            self._errors.append(MISSING_ENTRANCE)
        if self._exit is None:
            self._errors.append(MISSING_EXIT)
        if not self._is_perimeter_valid():
            self._errors.append(INVALID_PERIMETER)

    def _is_perimeter_valid(self) -> bool:
        f = self._features
        wall = MazeFeature.WALL
        if f.size == 0:
            return False
        return bool(
            np.all(f[0, :] == wall)
            and np.all(f[-1, :] == wall)
            and np.all(f[:, 0] == wall)
            and np.all(f[:, -1] == wall)
        )

    def _solve(self) -> List[BoundingBox]:
        if not self.is_valid:
            return []

        chain = find_corridor_chain(
            self._corridors, self._entrance_corridor, self._exit_corridor
        )
        if not chain:
            log.info("Maze has no solution.")
            return []

        self._has_solution = True
        log.debug("Raw corridor chain: %s", chain)
        solution = trim_solution(chain, self._entrance, self._exit)
        log.info("Solution found with %d rectangles.", len(solution))
        return solution
