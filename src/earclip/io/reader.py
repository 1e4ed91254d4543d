"""Polygon reader for loading JSON and CSV polygon files.

This module provides the PolygonReader class for loading polygon files
and converting their contents into domain models.
"""

import csv
import json
from collections.abc import Iterator
from pathlib import Path

from earclip.domain import Polygon
from earclip.exceptions import PolygonFormatError
from earclip.io.converter import document_to_polygons, raw_to_point

SUPPORTED_SUFFIXES = (".json", ".csv")


class PolygonReader:
    """Loads polygon files and exposes their polygons.

    JSON files may hold a single point list, a single polygon mapping or a
    {"polygons": [...]} collection. CSV files hold one polygon as x,y rows
    with an optional header line.

    Example:
        reader = PolygonReader(Path("shapes.json"))
        reader.load()
        for polygon in reader.iter_polygons():
            print(polygon.name, polygon.vertex_count)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            path: Path to the JSON or CSV polygon file
        """
        self._path = path
        self._polygons: list[Polygon] | None = None

    def load(self) -> None:
        """Load and parse the polygon file.

        Raises:
            FileNotFoundError: If the file does not exist
            PolygonFormatError: If the file cannot be parsed
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Polygon file not found: {self._path}")

        suffix = self._path.suffix.lower()
        if suffix == ".csv":
            self._polygons = self._load_csv()
        elif suffix == ".json":
            self._polygons = self._load_json()
        else:
            raise PolygonFormatError(
                str(self._path),
                f"unsupported extension '{suffix}' "
                f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})",
            )

    def _load_json(self) -> list[Polygon]:
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PolygonFormatError(str(self._path), f"invalid JSON: {e}") from e
        return document_to_polygons(document, str(self._path))

    def _load_csv(self) -> list[Polygon]:
        source = str(self._path)
        points = []
        with self._path.open(newline="", encoding="utf-8") as handle:
            for line_no, row in enumerate(csv.reader(handle), start=1):
                cells = [cell.strip() for cell in row]
                if not cells or all(not cell for cell in cells):
                    continue
                if line_no == 1 and [c.lower() for c in cells[:2]] == ["x", "y"]:
                    continue
                if len(cells) != 2:
                    raise PolygonFormatError(
                        source, f"line {line_no}: expected 2 columns, got {len(cells)}"
                    )
                points.append(raw_to_point(cells, source))
        return [Polygon(points=points, name=self._path.stem)]

    def _require_loaded(self) -> list[Polygon]:
        if self._polygons is None:
            raise RuntimeError("Polygons not loaded. Call load() first.")
        return self._polygons

    @property
    def polygon_count(self) -> int:
        """Return number of polygons in the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return len(self._require_loaded())

    @property
    def vertex_count(self) -> int:
        """Return total number of vertices across all polygons.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return sum(p.vertex_count for p in self._require_loaded())

    def iter_polygons(self) -> Iterator[Polygon]:
        """Iterate over polygons in file order.

        Yields:
            Polygon domain models

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        yield from self._require_loaded()

    def get_polygon(self, name: str) -> Polygon | None:
        """Get a specific polygon by name.

        Args:
            name: Name of the polygon to retrieve

        Returns:
            Polygon, or None if no polygon has that name

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        for polygon in self._require_loaded():
            if polygon.name == name:
                return polygon
        return None

    def close(self) -> None:
        """Drop loaded polygons."""
        self._polygons = None

    def __enter__(self) -> "PolygonReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
