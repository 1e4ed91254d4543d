"""Conversion between raw file data and domain models.

This module handles the translation of decoded JSON/CSV values into
Point and Polygon objects, and of triangulation results into the plain
structures written to output files.

Accepted point forms:
- [x, y] or (x, y)
- {"x": x, "y": y}

Accepted polygon forms:
- A list of points
- {"name": ..., "points": [...]}
"""

import math
from typing import Any

from earclip.domain import Point, Polygon, TriangulationResult
from earclip.exceptions import PolygonFormatError


def raw_to_point(raw: Any, source: str = "<data>") -> Point:
    """Convert a decoded point value to a Point.

    Args:
        raw: [x, y] pair or {"x": .., "y": ..} mapping
        source: Label used in error messages (usually the file path)

    Returns:
        Point instance

    Raises:
        PolygonFormatError: If the value is not a pair of finite numbers
    """
    if isinstance(raw, dict):
        if "x" not in raw or "y" not in raw:
            raise PolygonFormatError(source, f"point mapping needs 'x' and 'y': {raw!r}")
        x, y = raw["x"], raw["y"]
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        raise PolygonFormatError(source, f"expected [x, y] point, got {raw!r}")

    try:
        fx, fy = float(x), float(y)
    except (TypeError, ValueError):
        raise PolygonFormatError(source, f"non-numeric coordinate in {raw!r}") from None

    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise PolygonFormatError(source, f"non-finite coordinate in {raw!r}")

    return Point(fx, fy)


def raw_to_polygon(raw: Any, source: str = "<data>", default_name: str | None = None) -> Polygon:
    """Convert a decoded polygon value to a Polygon.

    Args:
        raw: List of points or {"name": .., "points": [..]} mapping
        source: Label used in error messages
        default_name: Name to use when the data carries none

    Returns:
        Polygon instance

    Raises:
        PolygonFormatError: If the value is not a recognised polygon form
    """
    name = default_name
    if isinstance(raw, dict):
        if "points" not in raw:
            raise PolygonFormatError(source, "polygon mapping needs a 'points' list")
        name = raw.get("name", default_name)
        raw_points = raw["points"]
    else:
        raw_points = raw

    if not isinstance(raw_points, list):
        raise PolygonFormatError(
            source, f"expected list of points, got {type(raw_points).__name__}"
        )

    points = [raw_to_point(p, source) for p in raw_points]
    return Polygon(points=points, name=None if name is None else str(name))


def document_to_polygons(document: Any, source: str = "<data>") -> list[Polygon]:
    """Convert a decoded JSON document to polygons.

    Supports a bare point list, a single polygon mapping, or a
    {"polygons": [...]} collection. Unnamed polygons are named by position.

    Args:
        document: Decoded JSON value
        source: Label used in error messages

    Returns:
        List of polygons in document order

    Raises:
        PolygonFormatError: If the document layout is not recognised
    """
    if isinstance(document, dict) and "polygons" in document:
        entries = document["polygons"]
        if not isinstance(entries, list):
            raise PolygonFormatError(source, "'polygons' must be a list")
        return [
            raw_to_polygon(entry, source, default_name=f"polygon_{i}")
            for i, entry in enumerate(entries)
        ]

    if isinstance(document, (dict, list)):
        return [raw_to_polygon(document, source, default_name="polygon_0")]

    raise PolygonFormatError(source, f"unsupported document type {type(document).__name__}")


def result_to_record(
    polygon: Polygon,
    result: TriangulationResult,
    include_triangles: bool = True,
) -> dict[str, Any]:
    """Build the output record for one triangulated polygon.

    Args:
        polygon: The input polygon
        result: Its triangulation
        include_triangles: Also write indices grouped into triples

    Returns:
        JSON-serializable dictionary
    """
    record: dict[str, Any] = {
        "name": polygon.name,
        "vertex_count": result.vertex_count,
        "status": result.status.value,
        "indices": list(result.indices),
    }
    if include_triangles:
        record["triangles"] = [list(t) for t in result.triangles()]
    return record
