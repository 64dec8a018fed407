"""Integer grid geometry for phoneme placement.

This module defines the two geometric primitives used by words and syllables:
- Point: An integer grid position
- BoundingRange: The axis-aligned rectangle enclosing a set of points
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sajka.exceptions import EmptyRangeError


@dataclass(frozen=True, slots=True)
class Point:
    """A position on the phoneme grid.

    Immutable and hashable for use as a dictionary key.
    The y axis grows downwards, matching the row order of word text.

    Attributes:
        x: Column
        y: Row
    """

    x: int
    y: int

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def neighbors(self) -> tuple["Point", "Point", "Point", "Point"]:
        """Get the four edge-adjacent points (west, east, north, south).

        Returns:
            Tuple of neighbouring points
        """
        return (
            Point(self.x - 1, self.y),
            Point(self.x + 1, self.y),
            Point(self.x, self.y - 1),
            Point(self.x, self.y + 1),
        )

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class BoundingRange:
    """Inclusive integer rectangle covering a set of grid points.

    Iterating yields every point of the rectangle left-to-right,
    top-to-bottom. Every row starts again at ``min_x``.

    Attributes:
        min_x: Smallest column
        max_x: Largest column
        min_y: Smallest row
        max_y: Largest row
    """

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def of(cls, points: Iterable[Point]) -> "BoundingRange":
        """Compute the minimal range enclosing the given points.

        Args:
            points: Points to enclose

        Returns:
            BoundingRange instance

        Raises:
            EmptyRangeError: If no points are given
        """
        points = list(points)
        if not points:
            raise EmptyRangeError()

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def origin(self) -> Point:
        """Top-left corner of the range."""
        return Point(self.min_x, self.min_y)

    def __iter__(self) -> Iterator[Point]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield Point(x, y)

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point):
            return False
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y
