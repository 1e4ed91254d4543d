"""Vertex ring construction and orientation detection.

The polygon is held as an arena of VertexNode records addressed by their
original point index. Each node stores its neighbours as indices into the
same arena, so clipping a vertex only rewrites two integer links.

Orientation is read from the leftmost vertex (lowest Y on ties). That vertex
is always convex for a simple polygon, so the sign of its winding value
reflects the winding of the whole ring.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from earclip.core.geometry import winding_value
from earclip.domain import Point, WindingDirection


@dataclass
class VertexNode:
    """One vertex of the shrinking polygon.

    Attributes:
        index: Index of the vertex in the input point list
        prev: Index of the previous remaining vertex
        next: Index of the next remaining vertex
        winding_value: Cross product at this vertex given its current neighbours
        is_reflex: True if the interior angle is concave (>= 180 degrees)
    """

    index: int
    prev: int
    next: int
    winding_value: float = 0.0
    is_reflex: bool = False


class PolygonTopology:
    """Circular doubly-linked ring over the vertices of a polygon.

    Example:
        topology = PolygonTopology(points)
        direction = detect_orientation(points, topology)
        topology.unlink(3)
    """

    def __init__(self, points: Sequence[Point]) -> None:
        """Link every vertex to its neighbours and compute winding values.

        Args:
            points: Ordered polygon points
        """
        self.points = points
        n = len(points)
        self.nodes: list[VertexNode] = [
            VertexNode(index=i, prev=(i - 1) % n, next=(i + 1) % n) for i in range(n)
        ]
        self.remaining = n

        for node in self.nodes:
            self.refresh_winding(node.index)

    def __len__(self) -> int:
        return self.remaining

    def __getitem__(self, index: int) -> VertexNode:
        return self.nodes[index]

    def refresh_winding(self, index: int) -> float:
        """Recompute the winding value of a vertex from its current neighbours.

        Args:
            index: Vertex index

        Returns:
            The new winding value
        """
        node = self.nodes[index]
        node.winding_value = winding_value(
            self.points[node.prev], self.points[index], self.points[node.next]
        )
        return node.winding_value

    def unlink(self, index: int) -> tuple[int, int]:
        """Remove a vertex from the ring, joining its neighbours.

        Args:
            index: Vertex index to remove

        Returns:
            Tuple of (prev, next) indices that are now adjacent
        """
        node = self.nodes[index]
        prev, nxt = node.prev, node.next
        self.nodes[prev].next = nxt
        self.nodes[nxt].prev = prev
        self.remaining -= 1
        return prev, nxt

    def ring(self, start: int = 0) -> list[int]:
        """Walk the remaining ring starting at a vertex.

        Args:
            start: Index of a vertex still in the ring

        Returns:
            Indices of the remaining vertices in ring order
        """
        order = [start]
        current = self.nodes[start].next
        while current != start and len(order) <= len(self.nodes):
            order.append(current)
            current = self.nodes[current].next
        return order


def find_leftmost(points: Sequence[Point]) -> int:
    """Index of the point with smallest X, ties broken by smallest Y.

    The first such point wins when points coincide.

    Args:
        points: Polygon points (must not be empty)

    Returns:
        Index of the leftmost point
    """
    leftmost = 0
    for i, p in enumerate(points):
        lm = points[leftmost]
        if p.x < lm.x or (p.x == lm.x and p.y < lm.y):
            leftmost = i
    return leftmost


def detect_orientation(
    points: Sequence[Point], topology: PolygonTopology
) -> WindingDirection:
    """Determine polygon winding from the leftmost vertex.

    Args:
        points: Polygon points
        topology: Ring built over the same points

    Returns:
        COUNTER_CLOCKWISE if the leftmost vertex turns left, else CLOCKWISE
    """
    leftmost = find_leftmost(points)
    if topology[leftmost].winding_value > 0.0:
        return WindingDirection.COUNTER_CLOCKWISE
    return WindingDirection.CLOCKWISE
