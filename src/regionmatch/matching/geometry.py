"""Integer geometry shared by both matching engines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box with inclusive corners.

    A box from (0,0) to (7,7) covers 8x8 pixels. Boxes built from seed
    placements put the max corner at origin + side, one pixel past the last
    matched row and column, so a matched 6x6 block reports a 7x7 area unless
    the corner is clipped at the image edge.
    """
    min: Point
    max: Point

    def __post_init__(self) -> None:
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(f"Degenerate bounding box {self.min}-{self.max}")

    def width(self) -> int:
        return self.max.x - self.min.x + 1

    def height(self) -> int:
        return self.max.y - self.min.y + 1

    def area(self) -> int:
        return self.width() * self.height()

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


@dataclass(frozen=True)
class MatchRegion:
    """A pair of boxes, one per compared image, covering duplicated content."""
    box_a: BoundingBox
    box_b: BoundingBox


class BoxAccumulator:
    """
    Running union of seed placements for one image.

    The max corner is origin + side, one pixel beyond the placed window.
    """

    def __init__(self) -> None:
        self._min_x = None
        self._min_y = None
        self._max_x = None
        self._max_y = None

    def add(self, origin: Point, side: int) -> None:
        """Extend the box to cover a seed placed at origin."""
        if self._min_x is None:
            self._min_x, self._min_y = origin.x, origin.y
            self._max_x, self._max_y = origin.x + side, origin.y + side
            return
        self._min_x = min(self._min_x, origin.x)
        self._min_y = min(self._min_y, origin.y)
        self._max_x = max(self._max_x, origin.x + side)
        self._max_y = max(self._max_y, origin.y + side)

    def is_empty(self) -> bool:
        return self._min_x is None

    def box(self) -> BoundingBox:
        if self.is_empty():
            raise ValueError("No seed placements recorded")
        return BoundingBox(Point(self._min_x, self._min_y), Point(self._max_x, self._max_y))
