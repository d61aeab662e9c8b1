# --- maze_lib/schema.py ---
import json
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple


class MazeFeature(IntEnum):
    """Classification of a single maze pixel."""

    PATH = 0
    WALL = 1
    ENTRANCE = 2
    EXIT = 3


@dataclass(frozen=True)
class BoundingBox:
    """
    An immutable axis-aligned rectangle of pixels. Both bounds on each axis are
    inclusive, so a single pixel is BoundingBox(x, x, y, y).
    """

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def __post_init__(self):
        if self.min_x < 0:
            raise ValueError(f"min_x must be >= 0, got {self.min_x}")
        if self.min_y < 0:
            raise ValueError(f"min_y must be >= 0, got {self.min_y}")
        if self.min_x > self.max_x:
            raise ValueError(f"max_x ({self.max_x}) must be >= min_x ({self.min_x})")
        if self.min_y > self.max_y:
            raise ValueError(f"max_y ({self.max_y}) must be >= min_y ({self.min_y})")

    @property
    def x_range(self) -> int:
        return self.max_x - self.min_x

    @property
    def y_range(self) -> int:
        return self.max_y - self.min_y

    @property
    def width(self) -> int:
        return self.x_range + 1

    @property
    def height(self) -> int:
        return self.y_range + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def shift(self, dx: int = 0, dy: int = 0) -> "BoundingBox":
        """Returns a copy translated by (dx, dy)."""
        return BoundingBox(
            self.min_x + dx, self.max_x + dx, self.min_y + dy, self.max_y + dy
        )

    def intersect(self, other: "BoundingBox") -> Optional["BoundingBox"]:
        """
        Returns the overlapping area of two boxes, or None. Boxes that only
        share an edge row or column still intersect on that row or column.
        """
        min_x = max(self.min_x, other.min_x)
        max_x = min(self.max_x, other.max_x)
        min_y = max(self.min_y, other.min_y)
        max_y = min(self.max_y, other.max_y)

        if min_x > max_x or min_y > max_y:
            return None
        return BoundingBox(min_x, max_x, min_y, max_y)

    def intersects(self, other: "BoundingBox") -> bool:
        return not (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )

    def contains(self, other: "BoundingBox") -> bool:
        return (
            self.min_x <= other.min_x
            and other.max_x <= self.max_x
            and self.min_y <= other.min_y
            and other.max_y <= self.max_y
        )

    def spans(self, delimiter: "BoundingBox") -> bool:
        """True if the delimiter covers this box's full range on either axis."""
        return (delimiter.min_x == self.min_x and delimiter.max_x == self.max_x) or (
            delimiter.min_y == self.min_y and delimiter.max_y == self.max_y
        )

    def split(self, delimiter: "BoundingBox") -> List["BoundingBox"]:
        """
        Removes a full-width or full-height slice from this box.

        The pieces after the delimiter come first, then the piece before it.
        A delimiter touching one end of the box leaves a single piece, one
        covering the whole box leaves none.

        Raises:
            ValueError: If the delimiter shares neither axis range with the box.
        """
        pieces = []
        if delimiter.min_x == self.min_x and delimiter.max_x == self.max_x:
            if self.max_y > delimiter.max_y:
                pieces.append(
                    BoundingBox(self.min_x, self.max_x, delimiter.max_y + 1, self.max_y)
                )
            if self.min_y < delimiter.min_y:
                pieces.append(
                    BoundingBox(self.min_x, self.max_x, self.min_y, delimiter.min_y - 1)
                )
            return pieces

        if delimiter.min_y == self.min_y and delimiter.max_y == self.max_y:
            if self.max_x > delimiter.max_x:
                pieces.append(
                    BoundingBox(delimiter.max_x + 1, self.max_x, self.min_y, self.max_y)
                )
            if self.min_x < delimiter.min_x:
                pieces.append(
                    BoundingBox(self.min_x, delimiter.min_x - 1, self.min_y, self.max_y)
                )
            return pieces

        raise ValueError(f"Cannot split {self} by {delimiter}: no shared x or y bounds.")

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box covering both boxes."""
        return BoundingBox(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
        )

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """Yields every (x, y) inside the box, row by row."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield x, y

    def to_list(self) -> List[int]:
        return [self.min_x, self.max_x, self.min_y, self.max_y]

    @classmethod
    def from_list(cls, values: List[int]) -> "BoundingBox":
        return cls(*values)


@dataclass
class SolveReport:
    """Summary of a single solve run, written next to the output image on request."""

    sourceImage: str
    width: int
    height: int
    isValid: bool
    errors: List[str] = field(default_factory=list)
    entrance: Optional[List[int]] = None
    exit: Optional[List[int]] = None
    corridorCount: int = 0
    hasSolution: bool = False
    solution: List[List[int]] = field(default_factory=list)

    @property
    def solution_boxes(self) -> List[BoundingBox]:
        return [BoundingBox.from_list(r) for r in self.solution]


def save_json(report: SolveReport, output_path: str) -> None:
    """
    Serializes a SolveReport to a JSON file.

    Args:
        report: The SolveReport to serialize.
        output_path: The path to the output .json file.
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(asdict(report), f, indent=2)


def load_json(input_path: str) -> SolveReport:
    """
    Deserializes a JSON file into a SolveReport.

    Args:
        input_path: The path to the input .json file.

    Returns:
        The SolveReport stored in the file.
    """
    with open(input_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return SolveReport(**data)
