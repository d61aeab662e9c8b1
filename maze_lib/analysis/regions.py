# --- maze_lib/analysis/regions.py ---
import logging
import math
from typing import Optional, Tuple

import numpy as np

from maze_lib.schema import BoundingBox, MazeFeature

log = logging.getLogger("mazewiz.regions")

# Fraction of each dimension skipped between samples of the inner ring.
RING_SAMPLE_FRACTION = 0.05


class RegionLocator:
    """
    Finds the entrance and exit regions of a classified grid.

    Most mazes put their entrance and exit against the border, so the ring one
    pixel inside the perimeter is sampled first with a coarse stride. Regions
    still missing after that are found with an exhaustive interior scan.
    """

    def __init__(self, features: np.ndarray):
        self.features = features
        self.height, self.width = features.shape
        self.entrance: Optional[BoundingBox] = None
        self.exit: Optional[BoundingBox] = None

    @property
    def _done(self) -> bool:
        return self.entrance is not None and self.exit is not None

    def locate(self) -> Tuple[Optional[BoundingBox], Optional[BoundingBox]]:
        if self.width < 3 or self.height < 3:
            log.warning("Grid %dx%d has no interior to scan.", self.width, self.height)
            return None, None

        self._scan_inner_ring()
        if not self._done:
            log.debug("Inner ring scan incomplete; scanning the full interior.")
            self._scan_interior()

        log.info("Entrance region: %s, exit region: %s", self.entrance, self.exit)
        return self.entrance, self.exit

    def _scan_inner_ring(self):
        x_step = max(1, math.floor(self.width * RING_SAMPLE_FRACTION))
        y_step = max(1, math.floor(self.height * RING_SAMPLE_FRACTION))
        log.debug("Sampling inner ring with stride (%d, %d).", x_step, y_step)

        x_start, y_start = 1, 1
        while True:
            if x_start <= x_step:
                for x in range(x_start, self.width, x_step):
                    self._sample(x, 1)
                    self._sample(x, self.height - 2)
                    if self._done:
                        break
            if self._done:
                return

            if y_start <= y_step:
                for y in range(y_start, self.height, y_step):
                    self._sample(1, y)
                    self._sample(self.width - 2, y)
                    if self._done:
                        break

            x_start += 1
            y_start += 1
            if self._done or (x_start > x_step and y_start > y_step):
                return

    def _scan_interior(self):
        for x in range(1, self.width - 1):
            for y in range(1, self.height - 1):
                self._sample(x, y)
                if self._done:
                    return

    def _sample(self, x: int, y: int):
        feature = self.features[y, x]
        if feature == MazeFeature.ENTRANCE and self.entrance is None:
            self.entrance = self.survey(x, y, MazeFeature.ENTRANCE)
            log.debug("Entrance pixel hit at (%d, %d).", x, y)
        elif feature == MazeFeature.EXIT and self.exit is None:
            self.exit = self.survey(x, y, MazeFeature.EXIT)
            log.debug("Exit pixel hit at (%d, %d).", x, y)

    def survey(self, x: int, y: int, feature: MazeFeature) -> BoundingBox:
        """
        Grows a hit pixel into the full rectangle of its feature: left, then up,
        then right, then down. Only correct for solid rectangular regions; an
        L-shaped region yields whichever rectangle this walk happens to trace.
        """
        f = self.features
        while x - 1 >= 0 and f[y, x - 1] == feature:
            x -= 1
        min_x = x
        while y - 1 >= 0 and f[y - 1, x] == feature:
            y -= 1
        min_y = y
        while x + 1 < self.width and f[y, x + 1] == feature:
            x += 1
        max_x = x
        while y + 1 < self.height and f[y + 1, x] == feature:
            y += 1
        max_y = y
        return BoundingBox(min_x, max_x, min_y, max_y)


def locate_regions(
    features: np.ndarray,
) -> Tuple[Optional[BoundingBox], Optional[BoundingBox]]:
    """Returns the (entrance, exit) regions of a grid; either may be None."""
    return RegionLocator(features).locate()
