"""Polygon I/O layer for earclip.

This module handles reading polygon files and writing triangulation
results. It provides a clean abstraction layer between file formats and
the domain models.

Key responsibilities:
- Load JSON/CSV polygon files
- Convert raw coordinates to domain models
- Write triangulation results with proper naming convention

Key classes:
- PolygonReader: Load polygon files
- TriangulationWriter: Save triangulation results
"""

from earclip.io.reader import PolygonReader
from earclip.io.writer import TriangulationWriter

__all__ = [
    "PolygonReader",
    "TriangulationWriter",
]
