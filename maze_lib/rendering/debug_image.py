# --- maze_lib/rendering/debug_image.py ---
import logging
import os
from typing import Iterable, Optional

import cv2
import numpy as np

from maze_lib.schema import BoundingBox

log = logging.getLogger("mazewiz.render")

# BGR, as OpenCV expects.
CORRIDOR_COLOR = (255, 200, 0)
SOLUTION_COLOR = (0, 200, 0)
REGION_COLOR = (0, 165, 255)


def _draw_box(canvas: np.ndarray, box: BoundingBox, color, thickness: int, scale: int):
    cv2.rectangle(
        canvas,
        (box.min_x * scale, box.min_y * scale),
        ((box.max_x + 1) * scale - 1, (box.max_y + 1) * scale - 1),
        color,
        thickness,
    )


def save_corridor_debug_image(
    img: np.ndarray,
    corridors: Iterable[BoundingBox],
    solution: Iterable[BoundingBox],
    entrance: Optional[BoundingBox],
    exit: Optional[BoundingBox],
    save_path: str,
    name: str,
    scale: int = 4,
) -> str:
    """
    Saves an upscaled copy of the maze with corridor outlines, the entrance
    and exit regions, and the trimmed solution drawn over it.
    """
    bgr = cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
    canvas = cv2.resize(
        bgr, None, fx=scale, fy=scale, interpolation=cv2.INTER_NEAREST
    )
    overlay = canvas.copy()

    for box in solution:
        _draw_box(overlay, box, SOLUTION_COLOR, -1, scale)
    cv2.addWeighted(overlay, 0.4, canvas, 0.6, 0, canvas)

    for box in corridors:
        _draw_box(canvas, box, CORRIDOR_COLOR, 1, scale)
    for region in (entrance, exit):
        if region is not None:
            _draw_box(canvas, region, REGION_COLOR, 2, scale)

    filename = os.path.join(save_path, f"{name}_corridors.png")
    cv2.imwrite(filename, canvas)
    log.info("Saved corridor debug image to %s", filename)
    return filename
