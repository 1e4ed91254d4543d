"""Ear-clipping triangulation engine.

This module splits a simple polygon into triangles by repeatedly removing
"ears": convex vertices whose triangle with their two neighbours holds no
reflex vertex. Each removal emits one triangle as three indices into the
input points. When three vertices remain they form the last triangle.

Process:
1. Build the vertex ring and winding values (PolygonTopology)
2. Detect orientation from the leftmost vertex
3. Classify reflex vertices (ReflexSet)
4. Walk the ring clipping ears until a triangle remains

If a full pass over the remaining ring finds no ear the input is not a
simple polygon and the engine gives up with an empty result instead of
emitting wrong triangles.
"""

import logging
from collections.abc import Sequence

from earclip.core.geometry import triangle_contains
from earclip.core.reflex import ReflexSet
from earclip.core.topology import PolygonTopology, detect_orientation
from earclip.domain import (
    Point,
    TriangulationResult,
    TriangulationStatus,
    WindingDirection,
)

logger = logging.getLogger(__name__)


class EarClipper:
    """Clips ears from one polygon.

    Instances own their vertex ring and reflex set for the duration of a
    single run and must not be reused.

    Example:
        clipper = EarClipper(points)
        result = clipper.run()
    """

    def __init__(self, points: Sequence[Point]) -> None:
        """Build ring, orientation and reflex set for a polygon.

        Args:
            points: Ordered polygon points (at least 3)
        """
        self.points = points
        self.topology = PolygonTopology(points)
        self.direction: WindingDirection = detect_orientation(points, self.topology)
        self.reflex = ReflexSet(self.topology, self.direction)

    def is_ear(self, index: int) -> bool:
        """Check whether a vertex can be clipped.

        Args:
            index: Vertex index still in the ring

        Returns:
            True if the vertex is convex and its triangle holds no other
            reflex vertex
        """
        node = self.topology[index]
        if node.is_reflex:
            return False

        a = self.points[node.prev]
        b = self.points[index]
        c = self.points[node.next]

        for candidate in self.reflex:
            if candidate == node.prev or candidate == node.next:
                continue
            if triangle_contains(a, b, c, self.points[candidate]):
                return False

        return True

    def run(self) -> TriangulationResult:
        """Clip ears until a single triangle remains.

        Returns:
            TriangulationResult with status TRIANGULATED, or NON_SIMPLE with
            no indices if the ear search stalled
        """
        n = len(self.points)
        indices: list[int] = []
        skipped = 0
        current = 0

        while len(self.topology) > 3:
            node = self.topology[current]
            prev, nxt = node.prev, node.next

            if self.is_ear(current):
                indices.extend((prev, current, nxt))
                self.topology.unlink(current)
                self.reflex.reclassify(prev)
                self.reflex.reclassify(nxt)
                skipped = 0
            else:
                skipped += 1
                if skipped > len(self.topology):
                    logger.debug(
                        "Ear search stalled after %d triangles "
                        "(vertices=%d, remaining=%d, reflex=%d)",
                        len(indices) // 3,
                        n,
                        len(self.topology),
                        len(self.reflex),
                    )
                    return TriangulationResult(
                        status=TriangulationStatus.NON_SIMPLE, vertex_count=n
                    )

            current = nxt

        node = self.topology[current]
        indices.extend((node.prev, current, node.next))

        return TriangulationResult(
            indices=indices,
            status=TriangulationStatus.TRIANGULATED,
            vertex_count=n,
        )


def triangulate_polygon(polygon: Sequence[Point]) -> TriangulationResult:
    """Triangulate a simple polygon, reporting the outcome.

    Args:
        polygon: Ordered polygon points. Never modified.

    Returns:
        TriangulationResult. Triangles share the polygon's winding
        (clockwise input gives clockwise triangles).
    """
    n = len(polygon)
    if n <= 2:
        return TriangulationResult(status=TriangulationStatus.DEGENERATE, vertex_count=n)

    return EarClipper(polygon).run()


def triangulate(polygon: Sequence[Point]) -> list[int]:
    """Split a polygon into triangles.

    Args:
        polygon: Ordered polygon points. Never modified.

    Returns:
        Flat list of indices into polygon, three per triangle. Empty for
        fewer than 3 points or when the polygon is not simple.

    Examples:
        >>> square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
        >>> triangulate(square)
        [3, 0, 1, 3, 1, 2]
    """
    return triangulate_polygon(polygon).indices
