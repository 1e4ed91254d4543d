"""Reflex vertex classification.

A vertex is reflex when its winding value has the wrong sign for the
polygon's orientation. Collinear vertices (winding value of zero) count as
reflex in both orientations, so they are never clipped as ears.
"""

from collections.abc import Iterator

from earclip.core.topology import PolygonTopology
from earclip.domain import WindingDirection


def is_reflex(winding: float, direction: WindingDirection) -> bool:
    """Classify a winding value against the polygon orientation.

    Args:
        winding: Winding value of the vertex
        direction: Orientation of the polygon

    Returns:
        True if the vertex is reflex
    """
    if direction is WindingDirection.COUNTER_CLOCKWISE:
        return winding <= 0.0
    return winding >= 0.0


class ReflexSet:
    """Live set of reflex vertex indices for a shrinking polygon.

    Membership is kept in step with each node's is_reflex flag.
    """

    def __init__(self, topology: PolygonTopology, direction: WindingDirection) -> None:
        """Classify every vertex of the ring.

        Args:
            topology: Ring with initial winding values
            direction: Orientation of the polygon
        """
        self._topology = topology
        self._direction = direction
        self._indices: set[int] = set()

        for node in topology.nodes:
            node.is_reflex = is_reflex(node.winding_value, direction)
            if node.is_reflex:
                self._indices.add(node.index)

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def reclassify(self, index: int) -> bool:
        """Recompute winding and reflex status for one vertex after a clip.

        Args:
            index: Vertex whose neighbours just changed

        Returns:
            The new reflex status
        """
        node = self._topology[index]
        node.is_reflex = is_reflex(
            self._topology.refresh_winding(index), self._direction
        )

        # A convex vertex turning reflex only happens for degenerate or
        # self-intersecting rings
        if node.is_reflex:
            self._indices.add(index)
        else:
            self._indices.discard(index)

        return node.is_reflex
