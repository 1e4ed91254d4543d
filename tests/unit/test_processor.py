"""Unit tests for batch processing.

Tests cover:
- The picklable worker function
- File-level processing with worker processes
- Vertex limit filtering
- Output ordering and naming
- Failed verification counts
- Cancellation with Ctrl+C
"""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

import earclip.core.processor as processor_module
from earclip.config import EarclipSettings, ProcessingConfig, TriangulationConfig
from earclip.core.processor import PolygonProcessor, process_polygon
from earclip.core.validation import ValidationReport
from earclip.domain import Polygon

SQUARE = [[0, 0], [4, 0], [4, 4], [0, 4]]
ARROW = [[100, 200], [200, 100], [400, 150], [300, 200], [350, 300], [150, 400], [250, 300]]
FIGURE_EIGHT = [[0, 0], [2, -2], [6, 2], [8, 0], [6, -2], [2, 2]]


@pytest.fixture
def shapes_file(tmp_path):
    path = tmp_path / "shapes.json"
    path.write_text(
        json.dumps(
            {
                "polygons": [
                    {"name": "square", "points": SQUARE},
                    {"points": ARROW},
                    {"name": "bowtie", "points": FIGURE_EIGHT},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def _settings(**triangulation) -> EarclipSettings:
    return EarclipSettings(
        triangulation=TriangulationConfig(**triangulation),
        processing=ProcessingConfig(max_workers=1),
    )


def _failing_report(points, indices, area_tolerance=1e-6):
    return ValidationReport(
        vertex_count=len(points), triangle_count=len(indices) // 3, area_mismatch=True
    )


class TestProcessPolygon:
    """Tests for the worker function."""

    def test_success(self):
        polygon = Polygon.from_tuples(SQUARE, name="square")
        outcome = process_polygon(polygon.to_dict(), TriangulationConfig().model_dump())

        assert "error" not in outcome
        assert outcome["result"]["indices"] == [3, 0, 1, 3, 1, 2]
        assert outcome["result"]["status"] == "triangulated"
        assert outcome["issues"] == []
        assert outcome["duration_ms"] >= 0.0

    def test_verified(self):
        polygon = Polygon.from_tuples(ARROW, name="arrow")
        config = TriangulationConfig(verify=True).model_dump()

        outcome = process_polygon(polygon.to_dict(), config)
        assert outcome["issues"] == []

    def test_non_simple(self):
        polygon = Polygon.from_tuples(FIGURE_EIGHT, name="bowtie")
        outcome = process_polygon(polygon.to_dict(), TriangulationConfig(verify=True).model_dump())

        assert outcome["result"]["status"] == "non_simple"
        assert outcome["result"]["indices"] == []
        assert outcome["issues"] == []

    def test_failed_check_reported(self, monkeypatch):
        monkeypatch.setattr(processor_module, "validate_triangulation", _failing_report)
        polygon = Polygon.from_tuples(SQUARE, name="square")

        outcome = process_polygon(polygon.to_dict(), TriangulationConfig(verify=True).model_dump())

        assert outcome["result"]["status"] == "triangulated"
        assert len(outcome["issues"]) == 1
        assert "polygon area" in outcome["issues"][0]

    def test_check_skipped_without_verify(self, monkeypatch):
        monkeypatch.setattr(processor_module, "validate_triangulation", _failing_report)
        polygon = Polygon.from_tuples(SQUARE, name="square")

        outcome = process_polygon(polygon.to_dict(), TriangulationConfig().model_dump())
        assert outcome["issues"] == []

    def test_error_captured(self):
        """Malformed input comes back as an error record."""
        outcome = process_polygon({"name": "broken", "points": [{"x": 1}]}, {})

        assert "result" not in outcome
        assert outcome["polygon_name"] == "broken"
        assert "Traceback" in outcome["traceback"]


class TestPolygonProcessor:
    """Tests for PolygonProcessor."""

    def test_process_file(self, shapes_file, tmp_path):
        output = tmp_path / "result.json"
        processor = PolygonProcessor(_settings(verify=True), quiet=True)

        stats = processor.process(shapes_file, output)

        assert stats.processed_count == 2
        assert stats.failed_count == 1
        assert stats.error_count == 0
        assert stats.skipped_count == 0
        assert stats.invalid_count == 0
        assert stats.triangles_emitted == 2 + 5
        assert stats.end_time is not None

        document = json.loads(output.read_text(encoding="utf-8"))
        records = document["polygons"]
        assert [r["name"] for r in records] == ["square", "polygon_1", "bowtie"]
        assert [r["status"] for r in records] == ["triangulated", "triangulated", "non_simple"]
        assert records[0]["indices"] == [3, 0, 1, 3, 1, 2]
        assert records[1]["triangles"][0] == [6, 0, 1]

    def test_default_output_path(self, shapes_file):
        processor = PolygonProcessor(_settings(), quiet=True)
        processor.process(shapes_file)

        assert (shapes_file.parent / "shapes-triangles.json").exists()

    def test_vertex_limit(self, shapes_file, tmp_path):
        output = tmp_path / "result.json"
        processor = PolygonProcessor(_settings(max_vertices=4), quiet=True)

        stats = processor.process(shapes_file, output)

        assert stats.skipped_count == 2
        assert stats.processed_count == 1
        records = json.loads(output.read_text(encoding="utf-8"))["polygons"]
        assert [r["name"] for r in records] == ["square"]

    def test_progress_callback(self, shapes_file, tmp_path):
        calls = []
        processor = PolygonProcessor(_settings(), quiet=True)

        processor.process(
            shapes_file,
            tmp_path / "result.json",
            progress_callback=lambda done, total, name, ok: calls.append((done, total, ok)),
        )

        assert [c[0] for c in calls] == [1, 2, 3]
        assert all(c[1] == 3 for c in calls)
        assert sorted(c[2] for c in calls) == [False, True, True]

    def test_log_file(self, shapes_file, tmp_path):
        log_file = tmp_path / "run.log"
        settings = _settings()
        settings.logging.log_file = log_file

        PolygonProcessor(settings, quiet=True).process(shapes_file, tmp_path / "out.json")

        text = log_file.read_text(encoding="utf-8")
        assert "Processing complete" in text
        assert "Polygon not triangulated" in text

    def test_failed_checks_counted(self, shapes_file, tmp_path, monkeypatch):
        """Triangulations that fail verification are counted as invalid."""
        # Threads keep the patched validator in this process
        monkeypatch.setattr(processor_module, "ProcessPoolExecutor", ThreadPoolExecutor)
        monkeypatch.setattr(processor_module, "validate_triangulation", _failing_report)

        processor = PolygonProcessor(_settings(verify=True), quiet=True)
        stats = processor.process(shapes_file, tmp_path / "result.json")

        assert stats.invalid_count == 2
        assert stats.processed_count == 2
        assert stats.failed_count == 1


class TestCancellation:
    """Tests for KeyboardInterrupt handling."""

    @pytest.fixture
    def many_shapes(self, tmp_path):
        path = tmp_path / "many.json"
        polygons = [{"name": f"square_{i}", "points": SQUARE} for i in range(6)]
        path.write_text(json.dumps({"polygons": polygons}), encoding="utf-8")
        return path

    def test_interrupt_cancels_pending(self, many_shapes, tmp_path):
        output = tmp_path / "result.json"
        processor = PolygonProcessor(_settings(), quiet=True)

        def interrupt(*_):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            processor.process(many_shapes, output, progress_callback=interrupt)

        stats = processor.processing_logger.stats
        assert stats.was_cancelled
        assert stats.cancelled_count == 5
        assert not output.exists()
