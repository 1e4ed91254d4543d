"""Domain models for earclip.

This module contains the core domain models representing polygons and
triangulation results. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of file format details

Key classes:
- Point: An immutable 2D coordinate
- Polygon: An ordered ring of points
- TriangulationResult: Flat triangle indices plus outcome status
"""

from earclip.domain.polygon import Point, Polygon, WindingDirection
from earclip.domain.triangulation import TriangulationResult, TriangulationStatus

__all__: list[str] = [
    # Enums
    "WindingDirection",
    "TriangulationStatus",
    # Core types
    "Point",
    "Polygon",
    "TriangulationResult",
]
