# --- maze_lib/analysis/solver.py ---
import logging
from typing import Iterator, List, Optional, Tuple

from maze_lib.schema import BoundingBox
from .segments import CorridorSet

log = logging.getLogger("mazewiz.solver")


def find_corridor_chain(
    corridors: CorridorSet,
    start: Optional[BoundingBox],
    goal: Optional[BoundingBox],
) -> List[BoundingBox]:
    """
    Depth-first search from the start corridor to the goal corridor over the
    graph whose edges join intersecting corridors.

    Neighbors are visited in corridor insertion order, which makes the chain
    found deterministic for a given grid. An explicit stack stands in for
    recursion so very long chains cannot hit the interpreter's depth limit.

    Returns:
        The chain of corridors from start to goal inclusive, or an empty list
        when either end is missing or the goal is unreachable.
    """
    if start is None or goal is None:
        log.info("No entrance or exit corridor; nothing to search.")
        return []

    start_idx = corridors.index_of(start)
    goal_idx = corridors.index_of(goal)
    if start_idx == goal_idx:
        return [start]

    visited = {start_idx}
    stack: List[Tuple[int, Iterator[int]]] = [
        (start_idx, iter(corridors.neighbors(start_idx)))
    ]

    while stack:
        _, pending = stack[-1]
        for nxt in pending:
            if nxt in visited:
                continue
            if nxt == goal_idx:
                chain = [corridors[idx] for idx, _ in stack] + [corridors[nxt]]
                log.info(
                    "Exit reached through %d corridors (%d visited).",
                    len(chain),
                    len(visited),
                )
                return chain
            visited.add(nxt)
            stack.append((nxt, iter(corridors.neighbors(nxt))))
            break
        else:
            stack.pop()

    log.info("Search exhausted %d reachable corridors without reaching the exit.", len(visited))
    return []
