# --- maze_lib/analysis/features.py ---
import logging
from typing import Sequence

import numpy as np

from maze_lib.config import DEFAULT_COLORS, MazeColors
from maze_lib.schema import MazeFeature

log = logging.getLogger("mazewiz.analysis")


def classify(sample: Sequence[int], colors: MazeColors = DEFAULT_COLORS) -> MazeFeature:
    """
    Maps a single pixel color to its maze feature. Only the first three
    channels are compared, so RGBA samples classify like their RGB part.
    """
    rgb = tuple(int(c) for c in sample[:3])
    if rgb == colors.entrance:
        return MazeFeature.ENTRANCE
    if rgb == colors.exit:
        return MazeFeature.EXIT
    if rgb == colors.wall:
        return MazeFeature.WALL
    return MazeFeature.PATH


def classify_image(img: np.ndarray, colors: MazeColors = DEFAULT_COLORS) -> np.ndarray:
    """Classifies every pixel of an H x W x 3 (or x 4) RGB image at once."""
    if img.ndim != 3 or img.shape[2] < 3:
        raise ValueError(f"Expected an H x W x 3 RGB image, got shape {img.shape}")

    rgb = img[:, :, :3]
    features = np.full(rgb.shape[:2], MazeFeature.PATH, dtype=np.uint8)
    # Same precedence as classify(): entrance, then exit, then wall.
    for feature, color in (
        (MazeFeature.WALL, colors.wall),
        (MazeFeature.EXIT, colors.exit),
        (MazeFeature.ENTRANCE, colors.entrance),
    ):
        mask = np.all(rgb == np.array(color, dtype=rgb.dtype), axis=2)
        features[mask] = feature

    log.debug(
        "Classified %dx%d image: %d wall, %d entrance, %d exit pixels.",
        features.shape[1],
        features.shape[0],
        int(np.count_nonzero(features == MazeFeature.WALL)),
        int(np.count_nonzero(features == MazeFeature.ENTRANCE)),
        int(np.count_nonzero(features == MazeFeature.EXIT)),
    )
    return features
