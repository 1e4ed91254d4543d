"""Integration tests for triangulation guarantees over many polygons.

Every simple polygon with N vertices must come back as N - 2 triangles that
cover every vertex, sum to the polygon area and share its winding. Polygons
are generated star-shaped around the origin with a seeded RNG so they are
always simple and coordinates are in general position.
"""

import math
import random

import pytest

from earclip import triangulate, triangulate_polygon
from earclip.core.geometry import signed_area, triangle_signed_area
from earclip.core.validation import validate_triangulation
from earclip.domain import Point, TriangulationStatus


def random_star_polygon(seed: int, n: int) -> list[Point]:
    """Generate a simple counter-clockwise star-shaped polygon.

    One vertex per angular sector keeps every gap below pi.
    """
    rng = random.Random(seed)
    step = 2.0 * math.pi / n
    angles = [(i + rng.uniform(0.1, 0.9)) * step for i in range(n)]
    return [
        Point(r * math.cos(a), r * math.sin(a))
        for a, r in ((a, rng.uniform(20.0, 100.0)) for a in angles)
    ]


def regular_polygon(n: int, radius: float = 50.0) -> list[Point]:
    return [
        Point(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def star(points: int = 5, outer: float = 10.0, inner: float = 4.0) -> list[Point]:
    coords = []
    for i in range(2 * points):
        r = outer if i % 2 == 0 else inner
        angle = math.pi / 2 + i * math.pi / points
        coords.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return coords


def strictly_inside(a: Point, b: Point, c: Point, p: Point) -> bool:
    d1 = triangle_signed_area(a, b, p)
    d2 = triangle_signed_area(b, c, p)
    d3 = triangle_signed_area(c, a, p)
    return (d1 > 0 and d2 > 0 and d3 > 0) or (d1 < 0 and d2 < 0 and d3 < 0)


def assert_valid_triangulation(points: list[Point]) -> list[int]:
    indices = triangulate(points)
    report = validate_triangulation(points, indices, area_tolerance=1e-9)
    assert report.is_valid, report.issues()
    return indices


class TestConvexPolygons:
    """Convex input of every size."""

    @pytest.mark.parametrize("n", [3, 4, 5, 8, 16, 64])
    def test_regular(self, n):
        assert len(assert_valid_triangulation(regular_polygon(n))) == 3 * (n - 2)

    @pytest.mark.parametrize("n", [4, 9, 33])
    def test_regular_clockwise(self, n):
        points = list(reversed(regular_polygon(n)))
        indices = assert_valid_triangulation(points)

        for t in range(0, len(indices), 3):
            a, b, c = (points[i] for i in indices[t : t + 3])
            assert triangle_signed_area(a, b, c) < 0.0


class TestConcavePolygons:
    """Concave input."""

    def test_star(self):
        points = star()
        indices = assert_valid_triangulation(points)
        assert len(indices) == 3 * 8

    def test_star_clockwise(self):
        assert_valid_triangulation(list(reversed(star(7))))

    def test_arrow_triangles_hold_no_vertices(self):
        points = [
            Point(100, 200), Point(200, 100), Point(400, 150), Point(300, 200),
            Point(350, 300), Point(150, 400), Point(250, 300),
        ]
        indices = assert_valid_triangulation(points)

        for t in range(0, len(indices), 3):
            tri = indices[t : t + 3]
            a, b, c = (points[i] for i in tri)
            for i, p in enumerate(points):
                if i not in tri:
                    assert not strictly_inside(a, b, c, p)

    @pytest.mark.parametrize("seed", range(25))
    def test_random_star_shaped(self, seed):
        n = 5 + seed * 3
        points = random_star_polygon(seed, n)
        assert signed_area(points) > 0.0
        assert_valid_triangulation(points)

    @pytest.mark.parametrize("seed", range(10))
    def test_random_star_shaped_clockwise(self, seed):
        assert_valid_triangulation(list(reversed(random_star_polygon(100 + seed, 40))))


class TestInvariance:
    """Properties that hold under transformations of the input."""

    @pytest.mark.parametrize("shift", range(7))
    def test_rotation_keeps_area(self, shift):
        base = star(4)
        rotated = base[shift:] + base[:shift]
        indices = assert_valid_triangulation(rotated)

        total = sum(
            abs(triangle_signed_area(*(rotated[i] for i in indices[t : t + 3])))
            for t in range(0, len(indices), 3)
        )
        assert total == pytest.approx(abs(signed_area(base)))

    def test_translation(self):
        base = random_star_polygon(7, 30)
        moved = [Point(p.x + 1000.0, p.y - 500.0) for p in base]
        assert len(assert_valid_triangulation(moved)) == len(triangulate(base))

    def test_large_polygon(self):
        points = random_star_polygon(42, 600)
        result = triangulate_polygon(points)

        assert result.status == TriangulationStatus.TRIANGULATED
        assert result.triangle_count == 598
