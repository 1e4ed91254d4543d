"""Triangulation result types.

This module defines the result of triangulating one polygon: the flat
index list consumed by renderers plus a status discriminating between
success, degenerate input and input that could not be simplified.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from earclip.exceptions import TriangulationError


class TriangulationStatus(str, Enum):
    """Outcome of a triangulation call.

    - TRIANGULATED: Triangles were produced
    - DEGENERATE: Fewer than 3 points, nothing to triangulate
    - NON_SIMPLE: Ear search stalled, the input is not a simple polygon
    """

    TRIANGULATED = "triangulated"
    DEGENERATE = "degenerate"
    NON_SIMPLE = "non_simple"


@dataclass
class TriangulationResult:
    """Triangles produced for one polygon.

    Attributes:
        indices: Flat list of indices into the input points, three per
            triangle. Empty unless status is TRIANGULATED.
        status: Outcome of the triangulation
        vertex_count: Number of points in the input polygon
    """

    indices: list[int] = field(default_factory=list)
    status: TriangulationStatus = TriangulationStatus.TRIANGULATED
    vertex_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check whether triangles were produced."""
        return self.status is TriangulationStatus.TRIANGULATED

    @property
    def triangle_count(self) -> int:
        """Number of triangles in the result."""
        return len(self.indices) // 3

    def triangles(self) -> list[tuple[int, int, int]]:
        """Group the flat index list into triangles.

        Returns:
            List of (a, b, c) index triples
        """
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx) - 2, 3)]

    def require_indices(self) -> list[int]:
        """Return the index list, raising if triangulation did not succeed.

        Raises:
            TriangulationError: If status is not TRIANGULATED
        """
        if not self.is_success:
            raise TriangulationError(self.status.value, self.vertex_count)
        return self.indices

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the result
        """
        return {
            "indices": list(self.indices),
            "status": self.status.value,
            "vertex_count": self.vertex_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TriangulationResult":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a result

        Returns:
            TriangulationResult instance
        """
        return cls(
            indices=list(data["indices"]),
            status=TriangulationStatus(data["status"]),
            vertex_count=data["vertex_count"],
        )
