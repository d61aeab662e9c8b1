# --- maze_lib/service.py ---
import logging
import os
from typing import List, Optional, Tuple

from maze_lib import schema
from maze_lib.analysis.maze import Maze
from maze_lib.config import DEFAULT_COLORS, MazeColors
from maze_lib.rendering.ascii_renderer import ASCIIRenderer
from maze_lib.rendering.debug_image import save_corridor_debug_image
from maze_lib.rendering.painter import load_image, paint_solution, save_image

log = logging.getLogger("mazewiz.main")

NO_SOLUTION = "Unable to find a solution for the input file"


def _build_report(source_path: str, maze: Maze, solution) -> schema.SolveReport:
    return schema.SolveReport(
        sourceImage=os.path.basename(source_path),
        width=maze.width,
        height=maze.height,
        isValid=maze.is_valid,
        errors=maze.validation_errors,
        entrance=maze.entrance.to_list() if maze.entrance else None,
        exit=maze.exit.to_list() if maze.exit else None,
        corridorCount=len(maze.corridors),
        hasSolution=maze.has_solution,
        solution=[box.to_list() for box in solution],
    )


def solve_rectangular_maze(
    source_path: str,
    destination_path: str,
    colors: Optional[MazeColors] = None,
    ascii_debug: bool = False,
    save_intermediate_path: Optional[str] = None,
    report_path: Optional[str] = None,
) -> Tuple[bool, List[str]]:
    """
    Solves the maze in source_path and writes the painted solution to
    destination_path.

    Returns:
        (success, errors). Structural validation errors and the unsolvable
        case are reported as separate messages; nothing is written on failure.

    Raises:
        FileNotFoundError: If source_path does not exist.
    """
    colors = colors or DEFAULT_COLORS
    log.info("Starting analysis of maze image: '%s'", source_path)
    if not os.path.exists(source_path):
        raise FileNotFoundError(f"Could not read image at {source_path}")

    try:
        img = load_image(source_path)
    except OSError as e:
        log.error("Could not decode image '%s': %s", source_path, e)
        return False, [f"Unable to read image file: {e}"]

    maze = Maze.from_rgb(img, colors)
    solution = maze.get_solution() if maze.is_valid else []

    if ascii_debug:
        log.info("--- ASCII Debug Output ---")
        renderer = ASCIIRenderer()
        renderer.render_grid(maze.features, solution)
        log.info("\n%s", renderer.get_output(), extra={"raw": True})
        log.info("--- End ASCII Debug Output ---")

    if save_intermediate_path:
        name = os.path.splitext(os.path.basename(source_path))[0]
        save_corridor_debug_image(
            img,
            maze.corridors,
            solution,
            maze.entrance,
            maze.exit,
            save_intermediate_path,
            name,
        )

    if report_path:
        schema.save_json(_build_report(source_path, maze, solution), report_path)
        log.info("Saved solve report to '%s'", report_path)

    if not maze.is_valid:
        return False, maze.validation_errors

    if not maze.has_solution:
        return False, [NO_SOLUTION]

    painted = paint_solution(img, solution, colors.highlight)
    try:
        save_image(painted, destination_path)
    except (OSError, ValueError) as e:
        log.error("Could not write solution image: %s", e)
        return False, [f"Unable to write the destination file: {e}"]

    return True, []
