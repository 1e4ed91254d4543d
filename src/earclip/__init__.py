"""Earclip - Ear-clipping triangulation for simple polygons.

Earclip decomposes a simple polygon, given as an ordered sequence of 2D points,
into triangles whose corners are drawn exclusively from the input points. The
result is a flat list of indices into the input, three per triangle.

Example:
    >>> from earclip import Point, triangulate
    >>> triangulate([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])
    [3, 0, 1, 3, 1, 2]

A command line front end is also installed:

    $ earclip triangulate shapes.json

This will create shapes-triangles.json with the triangle indices of every
polygon in the input file.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from earclip.core.triangulator import triangulate, triangulate_polygon  # noqa: E402
from earclip.domain import (  # noqa: E402
    Point,
    Polygon,
    TriangulationResult,
    TriangulationStatus,
    WindingDirection,
)

__all__ = [
    "Point",
    "Polygon",
    "TriangulationResult",
    "TriangulationStatus",
    "WindingDirection",
    "__author__",
    "__version__",
    "triangulate",
    "triangulate_polygon",
]
