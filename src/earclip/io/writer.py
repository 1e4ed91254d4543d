"""Triangulation writer for saving results.

This module provides the TriangulationWriter class for writing
triangulation results with the "-triangles" naming convention.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from earclip.domain import Polygon, TriangulationResult
from earclip.exceptions import PolygonSaveError
from earclip.io.converter import result_to_record


class TriangulationWriter:
    """Writes triangulation results as a JSON document.

    Output layout:
        {
          "generated": "<ISO timestamp>",
          "polygons": [
            {"name": .., "vertex_count": .., "status": ..,
             "indices": [..], "triangles": [[a, b, c], ..]}
          ]
        }

    Example:
        writer = TriangulationWriter(Path("shapes-triangles.json"))
        writer.add_result(polygon, result)
        writer.save()
    """

    def __init__(
        self,
        output_path: Path,
        indent: int | None = 2,
        include_triangles: bool = True,
    ) -> None:
        """Initialize the triangulation writer.

        Args:
            output_path: Path where the JSON document will be saved
            indent: JSON indentation (None for compact output)
            include_triangles: Also write indices grouped into triples
        """
        self._output_path = output_path
        self._indent = indent
        self._include_triangles = include_triangles
        self._records: list[dict[str, Any]] = []

    @property
    def record_count(self) -> int:
        """Number of results added so far."""
        return len(self._records)

    def add_result(self, polygon: Polygon, result: TriangulationResult) -> None:
        """Add the triangulation of one polygon.

        Args:
            polygon: The input polygon
            result: Its triangulation result
        """
        self._records.append(
            result_to_record(polygon, result, include_triangles=self._include_triangles)
        )

    def to_document(self) -> dict[str, Any]:
        """Build the JSON document without writing it."""
        return {
            "generated": datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
            "polygons": list(self._records),
        }

    def save(self) -> None:
        """Write the document to the output path.

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        try:
            self._output_path.write_text(
                json.dumps(self.to_document(), indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate output path with triangles naming convention.

        Converts: shapes.json -> shapes-triangles.json
                  outline.csv -> outline-triangles.json

        Args:
            input_path: Polygon file path

        Returns:
            Path with -triangles suffix and .json extension
        """
        return input_path.parent / f"{input_path.stem}-triangles.json"
