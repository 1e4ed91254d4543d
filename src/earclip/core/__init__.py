"""Core processing algorithms for earclip.

This module contains the core algorithms for:

- Geometry operations (signed area, winding value, point-in-triangle)
- Vertex ring construction and orientation detection
- Reflex vertex classification
- Ear clipping
- Triangulation validation
- Batch processing of polygon files

All triangulation services are designed to be:
- Re-entrant (each call owns its own vertex ring)
- Pure (no side effects on the input points)

Key functions:
- triangulate: Flat triangle indices for a polygon
- triangulate_polygon: Triangle indices plus outcome status
- validate_triangulation: Check output against the polygon
- signed_area: Polygon area using shoelace formula
- triangle_contains: Point-in-triangle test

Key classes:
- PolygonTopology: Circular vertex ring over an index arena
- ReflexSet: Live set of reflex vertices
- EarClipper: The ear-clipping engine
- PolygonProcessor: Parallel batch triangulation of polygon files
"""

from earclip.core.geometry import (
    signed_area,
    triangle_contains,
    triangle_signed_area,
    winding_value,
)
from earclip.core.processor import PolygonProcessor, process_polygon
from earclip.core.reflex import ReflexSet, is_reflex
from earclip.core.topology import (
    PolygonTopology,
    VertexNode,
    detect_orientation,
    find_leftmost,
)
from earclip.core.triangulator import EarClipper, triangulate, triangulate_polygon
from earclip.core.validation import ValidationReport, validate_triangulation

__all__ = [
    # Engine classes
    "EarClipper",
    # Processor classes
    "PolygonProcessor",
    # Topology classes
    "PolygonTopology",
    "ReflexSet",
    "ValidationReport",
    "VertexNode",
    "detect_orientation",
    "find_leftmost",
    "is_reflex",
    "process_polygon",
    # Geometry functions
    "signed_area",
    "triangle_contains",
    "triangle_signed_area",
    "triangulate",
    "triangulate_polygon",
    "validate_triangulation",
    "winding_value",
]
