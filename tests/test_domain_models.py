"""Tests for domain models to verify they work correctly."""

import pytest

from earclip.domain import (
    Point,
    Polygon,
    TriangulationResult,
    TriangulationStatus,
    WindingDirection,
)
from earclip.exceptions import TriangulationError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.5, -3.25)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestPolygon:
    """Tests for Polygon class."""

    def test_polygon_creation(self) -> None:
        """Test basic polygon creation."""
        polygon = Polygon(points=[Point(0, 0), Point(100, 0), Point(100, 100)])
        assert polygon.vertex_count == 3
        assert polygon.name is None

    def test_from_tuples(self) -> None:
        """Polygons can be built from coordinate pairs."""
        polygon = Polygon.from_tuples([(0, 0), (1, 0), (1, 1)], name="tri")
        assert polygon.points[2] == Point(1.0, 1.0)
        assert polygon.name == "tri"

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        polygon = Polygon.from_tuples([(0, 0), (100, 0), (100, 100), (0, 100)])
        assert polygon.signed_area() == pytest.approx(10000.0)
        assert polygon.direction() == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        polygon = Polygon.from_tuples([(0, 0), (0, 100), (100, 100), (100, 0)])
        assert polygon.signed_area() == pytest.approx(-10000.0)
        assert polygon.area() == pytest.approx(10000.0)
        assert polygon.direction() == WindingDirection.CLOCKWISE

    def test_degenerate_polygon_has_no_direction(self) -> None:
        """Collinear and short rings have zero area."""
        assert Polygon.from_tuples([(0, 0), (1, 0)]).signed_area() == 0.0
        assert Polygon.from_tuples([(0, 0), (1, 0), (2, 0)]).direction() is None

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        polygon = Polygon.from_tuples([(10, 20), (100, 30), (50, 150)])
        assert polygon.bounding_box() == (10.0, 20.0, 100.0, 150.0)

    def test_empty_bounding_box(self) -> None:
        """Empty polygon has a zero bounding box."""
        assert Polygon(points=[]).bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_polygon_serialization(self) -> None:
        """Test polygon serialization and deserialization."""
        p1 = Polygon.from_tuples([(0, 0), (100, 0), (100, 100)], name="corner")
        p2 = Polygon.from_dict(p1.to_dict())

        assert p2.points == p1.points
        assert p2.name == "corner"


class TestTriangulationResult:
    """Tests for TriangulationResult class."""

    def test_triangles_grouping(self) -> None:
        """Flat indices group into triples."""
        result = TriangulationResult(indices=[3, 0, 1, 3, 1, 2], vertex_count=4)
        assert result.triangles() == [(3, 0, 1), (3, 1, 2)]
        assert result.triangle_count == 2
        assert result.is_success

    def test_failed_result(self) -> None:
        """Non-simple results carry no triangles."""
        result = TriangulationResult(status=TriangulationStatus.NON_SIMPLE, vertex_count=6)
        assert not result.is_success
        assert result.triangles() == []
        assert result.triangle_count == 0

    def test_require_indices_success(self) -> None:
        """Successful results hand back their indices."""
        result = TriangulationResult(indices=[2, 0, 1], vertex_count=3)
        assert result.require_indices() == [2, 0, 1]

    def test_require_indices_raises(self) -> None:
        """Failed results raise TriangulationError."""
        result = TriangulationResult(status=TriangulationStatus.DEGENERATE, vertex_count=2)
        with pytest.raises(TriangulationError, match="degenerate") as exc_info:
            result.require_indices()
        assert exc_info.value.vertex_count == 2

    def test_result_serialization(self) -> None:
        """Test result serialization and deserialization."""
        r1 = TriangulationResult(
            indices=[2, 0, 1], status=TriangulationStatus.TRIANGULATED, vertex_count=3
        )
        data = r1.to_dict()
        assert data["status"] == "triangulated"

        r2 = TriangulationResult.from_dict(data)
        assert r2 == r1
