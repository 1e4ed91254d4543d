"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout earclip:
- Point: An immutable 2D coordinate
- Polygon: An ordered ring of points describing a simple polygon
- WindingDirection: Enum for polygon winding direction
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Polygon winding direction.

    Uses the mathematical convention (Y axis pointing up):
    - Positive signed area: counter-clockwise
    - Negative signed area: clockwise

    Note: In screen coordinates (Y axis pointing down) the visual
    direction is mirrored.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.
    Uses slots for memory efficiency in parallel processing.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass
class Polygon:
    """An ordered ring of points describing a polygon boundary.

    The ring is implicitly closed: the last point connects back to the
    first. Point order defines the indices referenced by triangulation
    output.

    Attributes:
        points: List of points forming the polygon boundary
        name: Optional label, used in batch files and reports
    """

    points: list[Point]
    name: str | None = None
    _cached_area: float | None = field(default=None, repr=False, init=False)
    _cached_bbox: tuple[float, float, float, float] | None = field(
        default=None, repr=False, init=False
    )

    @classmethod
    def from_tuples(
        cls, coords: Iterable[tuple[float, float]], name: str | None = None
    ) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(points=[Point(float(x), float(y)) for x, y in coords], name=name)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the ring."""
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the polygon
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def area(self) -> float:
        """Unsigned area of the polygon."""
        return abs(self.signed_area())

    def direction(self) -> WindingDirection | None:
        """Winding direction from the shoelace sign.

        Returns:
            WindingDirection, or None for degenerate (zero-area) polygons
        """
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Result is cached for efficiency.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.points:
            self._cached_bbox = (0.0, 0.0, 0.0, 0.0)
            return self._cached_bbox

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        points = [Point.from_dict(p) for p in data["points"]]
        return cls(points=points, name=data.get("name"))
