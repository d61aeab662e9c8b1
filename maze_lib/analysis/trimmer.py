# --- maze_lib/analysis/trimmer.py ---
import logging
from typing import List, Optional

from maze_lib.schema import BoundingBox

log = logging.getLogger("mazewiz.trim")


def _narrow(box: BoundingBox, junction: BoundingBox, context: BoundingBox) -> BoundingBox:
    """
    Cuts the junction out of box and keeps the piece that reaches context,
    grown back over the junction. Falls back to the junction alone when only
    the junction touches context.
    """
    if not box.spans(junction):
        # Parallel overlap: the junction is not a clean slice of the box.
        log.debug("Junction %s does not span %s; keeping it whole.", junction, box)
        return box

    for piece in box.split(junction):
        if piece.intersects(context):
            return piece.union(junction)
    return junction


def trim_untraversed(
    chain: List[BoundingBox], entrance: BoundingBox, exit: BoundingBox
) -> List[BoundingBox]:
    """
    Narrows each corridor of an entrance-to-exit chain to the part actually
    walked between its neighbours.

    Corridors are taken in pairs from the entrance end. The first of the pair
    is narrowed towards what precedes it (the last output rectangle, or the
    entrance region) and emitted; the second is narrowed towards what follows
    it (the next corridor, or the exit region) and goes back on the input to
    be paired again. The final corridor is emitted as is.
    """
    remaining = list(reversed(chain))
    output: List[BoundingBox] = []

    while remaining:
        if len(remaining) == 1:
            output.append(remaining.pop())
            continue

        before = output[-1] if output else entrance
        a = remaining.pop()
        b = remaining.pop()
        after = remaining[-1] if remaining else exit

        junction = a.intersect(b)
        if junction is None:
            log.warning("Chain links %s and %s no longer touch; leaving them untrimmed.", a, b)
            output.append(a)
            remaining.append(b)
            continue

        output.append(_narrow(a, junction, before))
        remaining.append(_narrow(b, junction, after))

    log.debug("Trimmed chain: %s", output)
    return output


def _cut_region(
    box: BoundingBox, region: BoundingBox, neighbours: List[BoundingBox]
) -> Optional[BoundingBox]:
    """
    Removes the part of box lying over region, keeping the piece that still
    reaches a neighbour. None if nothing is left.
    """
    if region.contains(box):
        return None
    overlap = box.intersect(region)
    if overlap is None:
        return box

    if not box.spans(overlap):
        # Cut a band across the corridor, perpendicular to its long axis.
        if box.width <= box.height:
            overlap = BoundingBox(box.min_x, box.max_x, overlap.min_y, overlap.max_y)
        else:
            overlap = BoundingBox(overlap.min_x, overlap.max_x, box.min_y, box.max_y)

    pieces = box.split(overlap)
    if not pieces:
        return None
    for piece in pieces:
        if any(piece.intersects(n) for n in neighbours):
            return piece
    return pieces[0]


def trim_regions(
    chain: List[BoundingBox], entrance: BoundingBox, exit: BoundingBox
) -> List[BoundingBox]:
    """
    Removes the exit region, then the entrance region, from the solution so
    painting it leaves both regions visible. Normally only the last and first
    rectangles touch them; a rectangle lying wholly inside a region is dropped
    and the next one is cut instead.

    A corridor that runs on past its region keeps its far piece when no piece
    reaches a neighbour, so the painted end can be a short stub that no
    longer touches the rest of the solution.
    """
    result = list(chain)
    for region in (exit, entrance):
        trimmed = []
        for i, box in enumerate(result):
            neighbours = result[max(0, i - 1) : i] + result[i + 1 : i + 2]
            cut = _cut_region(box, region, neighbours)
            if cut is not None:
                trimmed.append(cut)
        result = trimmed

    return result


def trim_solution(
    chain: List[BoundingBox], entrance: BoundingBox, exit: BoundingBox
) -> List[BoundingBox]:
    """Full trim: narrow the corridors, then clear the entrance and exit regions."""
    if not chain:
        return []
    narrowed = trim_untraversed(chain, entrance, exit)
    return trim_regions(narrowed, entrance, exit)
