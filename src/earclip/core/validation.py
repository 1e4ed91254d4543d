"""Consistency checks for triangulation output.

This module verifies that an index list is a proper triangulation of a
polygon:
- Index count is a multiple of 3 and every index is in range
- A simple polygon with N vertices yields N - 2 triangles
- Every vertex is used by at least one triangle
- Triangle areas sum to the polygon area
- Every triangle shares the polygon's winding

The checks are used by the batch processor and the CLI when verification
is enabled.
"""

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from earclip.core.geometry import signed_area, triangle_signed_area
from earclip.domain import Point


@dataclass
class ValidationReport:
    """Findings from validating one triangulation.

    Attributes:
        vertex_count: Number of polygon vertices
        triangle_count: Number of complete triangles in the index list
        polygon_area: Unsigned polygon area (shoelace)
        triangle_area: Sum of unsigned triangle areas
        malformed_length: True if index count is not a multiple of 3
        out_of_range: Indices outside [0, vertex_count)
        unused_vertices: Vertices not referenced by any triangle
        orientation_mismatches: Triangles (by position) wound against the polygon
        area_mismatch: True if the area sums disagree beyond tolerance
    """

    vertex_count: int
    triangle_count: int
    polygon_area: float = 0.0
    triangle_area: float = 0.0
    malformed_length: bool = False
    out_of_range: list[int] = field(default_factory=list)
    unused_vertices: list[int] = field(default_factory=list)
    orientation_mismatches: list[int] = field(default_factory=list)
    area_mismatch: bool = False

    @property
    def expected_triangle_count(self) -> int:
        """Triangle count of a complete triangulation."""
        return max(self.vertex_count - 2, 0)

    @property
    def is_valid(self) -> bool:
        """Check whether the triangulation passed every check."""
        return not self.issues()

    def issues(self) -> list[str]:
        """Describe every failed check.

        Returns:
            Human readable messages, empty when valid
        """
        messages: list[str] = []
        if self.malformed_length:
            messages.append("index count is not a multiple of 3")
        if self.out_of_range:
            messages.append(f"indices out of range: {self.out_of_range[:10]}")
        if self.triangle_count != self.expected_triangle_count:
            messages.append(
                f"expected {self.expected_triangle_count} triangles, "
                f"got {self.triangle_count}"
            )
        if self.unused_vertices:
            messages.append(f"vertices not covered: {self.unused_vertices[:10]}")
        if self.orientation_mismatches:
            messages.append(
                f"{len(self.orientation_mismatches)} triangles wound against polygon"
            )
        if self.area_mismatch:
            messages.append(
                f"triangle area {self.triangle_area:.6g} != "
                f"polygon area {self.polygon_area:.6g}"
            )
        return messages


def validate_triangulation(
    points: Sequence[Point],
    indices: Sequence[int],
    area_tolerance: float = 1e-6,
) -> ValidationReport:
    """Check a triangulation against its polygon.

    Args:
        points: Polygon points
        indices: Flat triangle index list
        area_tolerance: Allowed relative difference between area sums

    Returns:
        ValidationReport describing the result
    """
    n = len(points)
    report = ValidationReport(vertex_count=n, triangle_count=len(indices) // 3)
    report.malformed_length = len(indices) % 3 != 0
    report.out_of_range = [i for i in indices if not 0 <= i < n]

    polygon_signed = signed_area(points)
    report.polygon_area = abs(polygon_signed)

    used: set[int] = set()
    total = 0.0
    for t in range(report.triangle_count):
        a, b, c = indices[3 * t : 3 * t + 3]
        if not (0 <= a < n and 0 <= b < n and 0 <= c < n):
            continue
        used.update((a, b, c))
        area = triangle_signed_area(points[a], points[b], points[c])
        total += abs(area)
        if area * polygon_signed < 0.0:
            report.orientation_mismatches.append(t)

    report.triangle_area = total
    report.unused_vertices = [i for i in range(n) if i not in used]

    scale = max(report.polygon_area, sys.float_info.min)
    report.area_mismatch = abs(total - report.polygon_area) > area_tolerance * scale

    return report
