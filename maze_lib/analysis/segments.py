# --- maze_lib/analysis/segments.py ---
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from maze_lib.schema import BoundingBox, MazeFeature

log = logging.getLogger("mazewiz.segments")


class CornerType(Enum):
    """
    The quadrant of walls that makes a pixel an open corner. The value holds
    the (dx, dy) offsets that must all be walls: vertical, horizontal, diagonal.
    """

    BOTTOM_LEFT = ((0, 1), (-1, 0), (-1, 1))
    BOTTOM_RIGHT = ((0, 1), (1, 0), (1, 1))
    TOP_RIGHT = ((0, -1), (1, 0), (1, -1))
    TOP_LEFT = ((0, -1), (-1, 0), (-1, -1))

    @property
    def scan_direction(self) -> Tuple[int, int]:
        """Direction (dx, dy) pointing away from the walls, into the corridor."""
        dx = 1 if self in (CornerType.TOP_LEFT, CornerType.BOTTOM_LEFT) else -1
        dy = 1 if self in (CornerType.TOP_LEFT, CornerType.TOP_RIGHT) else -1
        return dx, dy


# Precedence when a pixel matches several templates (e.g. a dead end).
CORNER_ORDER = (
    CornerType.BOTTOM_LEFT,
    CornerType.BOTTOM_RIGHT,
    CornerType.TOP_RIGHT,
    CornerType.TOP_LEFT,
)


class CorridorSet:
    """
    Insertion-ordered, deduplicated collection of corridor rectangles.

    Corridors live in an indexed list with a lookup keyed by their bounds, so
    the same corridor found from two corners is stored once. Adjacency is a
    closed-interval intersection test, computed per corridor on first request.
    """

    def __init__(self):
        self._boxes: List[BoundingBox] = []
        self._index: Dict[BoundingBox, int] = {}
        self._bounds: Optional[np.ndarray] = None
        self._neighbors: Dict[int, List[int]] = {}

    def add(self, box: BoundingBox) -> int:
        idx = self._index.get(box)
        if idx is None:
            idx = len(self._boxes)
            self._boxes.append(box)
            self._index[box] = idx
            self._bounds = None
            self._neighbors.clear()
        return idx

    def index_of(self, box: BoundingBox) -> int:
        return self._index[box]

    def __getitem__(self, idx: int) -> BoundingBox:
        return self._boxes[idx]

    def __contains__(self, box) -> bool:
        return box in self._index

    def __iter__(self) -> Iterator[BoundingBox]:
        return iter(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def neighbors(self, idx: int) -> List[int]:
        """Indices of every other corridor touching corridor idx, in insertion order."""
        cached = self._neighbors.get(idx)
        if cached is not None:
            return cached

        if self._bounds is None:
            self._bounds = np.array([b.to_list() for b in self._boxes], dtype=np.int64)
        b = self._bounds
        box = self._boxes[idx]
        touching = ~(
            (b[:, 0] > box.max_x)
            | (b[:, 1] < box.min_x)
            | (b[:, 2] > box.max_y)
            | (b[:, 3] < box.min_y)
        )
        touching[idx] = False
        result = [int(i) for i in np.flatnonzero(touching)]
        self._neighbors[idx] = result
        return result


@dataclass
class SegmentScan:
    """Everything the corridor scan produces for one grid."""

    corridors: CorridorSet
    entrance_corridor: Optional[BoundingBox] = None
    exit_corridor: Optional[BoundingBox] = None


def find_corners(features: np.ndarray) -> List[Tuple[int, int, CornerType]]:
    """
    Finds every open corner among the interior pixels. Results are ordered
    column by column (x, then y), which is the order corridors are discovered.
    """
    h, w = features.shape
    if w < 3 or h < 3:
        return []

    wall = features == MazeFeature.WALL
    open_interior = ~wall[1 : h - 1, 1 : w - 1]
    corner_at = np.full(open_interior.shape, -1, dtype=np.int8)

    for order, corner in enumerate(CORNER_ORDER):
        mask = open_interior.copy()
        for dx, dy in corner.value:
            mask &= wall[1 + dy : h - 1 + dy, 1 + dx : w - 1 + dx]
        corner_at[(corner_at < 0) & mask] = order

    xs, ys = np.nonzero(corner_at.T >= 0)
    return [
        (int(x) + 1, int(y) + 1, CORNER_ORDER[corner_at[y, x]]) for x, y in zip(xs, ys)
    ]


def corridors_from_corner(
    features: np.ndarray, x0: int, y0: int, corner: CornerType
) -> Tuple[BoundingBox, BoundingBox]:
    """
    Derives the two corridors anchored at an open corner.

    The width-first corridor runs along x until a wall, then grows along y
    while its whole x span stays clear. The height-first corridor does the
    same with the axes swapped.
    """
    h, w = features.shape
    dx, dy = corner.scan_direction
    wall = MazeFeature.WALL

    # Width first.
    x = x0
    while 0 <= x < w and features[y0, x] != wall:
        x += dx
    x -= dx
    lo_x, hi_x = min(x0, x), max(x0, x)
    y = y0 + dy
    while 0 <= y < h and not np.any(features[y, lo_x : hi_x + 1] == wall):
        y += dy
    y -= dy
    width_first = BoundingBox(lo_x, hi_x, min(y0, y), max(y0, y))

    # Height first.
    y = y0
    while 0 <= y < h and features[y, x0] != wall:
        y += dy
    y -= dy
    lo_y, hi_y = min(y0, y), max(y0, y)
    x = x0 + dx
    while 0 <= x < w and not np.any(features[lo_y : hi_y + 1, x] == wall):
        x += dx
    x -= dx
    height_first = BoundingBox(min(x0, x), max(x0, x), lo_y, hi_y)

    return width_first, height_first


def build_segments(
    features: np.ndarray,
    entrance: Optional[BoundingBox] = None,
    exit: Optional[BoundingBox] = None,
) -> SegmentScan:
    """
    Builds the corridor set of a grid. A corridor touching the entrance (or
    exit) region is remembered as the entrance (or exit) corridor; when
    several do, the last one produced by the scan is kept.
    """
    scan = SegmentScan(corridors=CorridorSet())
    corners = find_corners(features)
    log.debug("Found %d open corners.", len(corners))

    for x, y, corner in corners:
        for corridor in corridors_from_corner(features, x, y, corner):
            if entrance is not None and corridor.intersects(entrance):
                scan.entrance_corridor = corridor
            if exit is not None and corridor.intersects(exit):
                scan.exit_corridor = corridor
            scan.corridors.add(corridor)

    log.info(
        "Built %d corridors. Entrance corridor: %s, exit corridor: %s",
        len(scan.corridors),
        scan.entrance_corridor,
        scan.exit_corridor,
    )
    return scan
