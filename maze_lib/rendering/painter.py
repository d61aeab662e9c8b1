# --- maze_lib/rendering/painter.py ---
import logging
from typing import Iterable, List, Tuple

import numpy as np
from PIL import Image

from maze_lib.schema import BoundingBox

log = logging.getLogger("mazewiz.render")


def load_image(image_path: str) -> np.ndarray:
    """Loads an image file as an H x W x 3 RGB uint8 array."""
    with Image.open(image_path) as img:
        rgb = img.convert("RGB")
        return np.array(rgb, dtype=np.uint8)


def save_image(img: np.ndarray, output_path: str) -> None:
    """Saves an RGB array; the format follows the file extension."""
    Image.fromarray(np.ascontiguousarray(img, dtype=np.uint8)).save(output_path)
    log.info("Saved image to '%s'", output_path)


def expand_solution(rects: Iterable[BoundingBox]) -> List[Tuple[int, int]]:
    """
    Every (x, y) covered by the rectangles, bounds included. Pixels shared by
    overlapping rectangles appear once per rectangle.
    """
    return [p for rect in rects for p in rect.pixels()]


def paint_solution(
    img: np.ndarray, rects: Iterable[BoundingBox], color: Tuple[int, int, int]
) -> np.ndarray:
    """Returns a copy of img with every pixel the rectangles cover set to color."""
    painted = img.copy()
    pixels = expand_solution(rects)
    if pixels:
        xs, ys = zip(*pixels)
        painted[list(ys), list(xs), :3] = color
    log.debug("Painted %d solution pixels in %s.", len(pixels), color)
    return painted
