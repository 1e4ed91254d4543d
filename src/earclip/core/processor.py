"""Parallel processing orchestration for batch triangulation.

This module coordinates triangulation of every polygon in a file with
parallel processing using ProcessPoolExecutor. Each triangulation call owns
its own vertex ring, so polygons are processed independently.

Key components:
- process_polygon: Top-level picklable function for parallel execution
- PolygonProcessor: Main orchestrator class for polygon files
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from earclip.config import EarclipSettings, TriangulationConfig
from earclip.core.triangulator import triangulate_polygon
from earclip.core.validation import validate_triangulation
from earclip.domain import Polygon, TriangulationResult
from earclip.io import PolygonReader, TriangulationWriter
from earclip.utils import ProcessingLogger, ProcessingStats, configure_logging


def process_polygon(
    polygon_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Triangulate a single polygon.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes polygon, triangulates it, optionally validates the output,
    and returns the result.

    Args:
        polygon_dict: Serialized polygon (from Polygon.to_dict())
        config_dict: Serialized triangulation configuration

    Returns:
        Dictionary containing either:
        - Success: {"result": result_dict, "issues": list[str], "duration_ms": float}
        - Error: {"error": str, "polygon_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        polygon = Polygon.from_dict(polygon_dict)
        config = TriangulationConfig(**config_dict)

        result = triangulate_polygon(polygon.points)

        issues: list[str] = []
        if config.verify and result.is_success:
            report = validate_triangulation(
                polygon.points, result.indices, area_tolerance=config.area_tolerance
            )
            issues = report.issues()

        duration_ms = (time.time() - start_time) * 1000
        return {
            "result": result.to_dict(),
            "issues": issues,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        # Capture full traceback for debugging
        duration_ms = (time.time() - start_time) * 1000
        tb = traceback.format_exc()
        return {
            "error": str(e),
            "polygon_name": polygon_dict.get("name") or "unknown",
            "traceback": tb,
            "duration_ms": duration_ms,
        }


class PolygonProcessor:
    """Orchestrates parallel triangulation of polygon files.

    Manages the complete workflow:
    1. Load polygon file
    2. Filter polygons above the vertex limit
    3. Triangulate polygons in parallel using worker processes
    4. Collect results and update statistics
    5. Save triangulation document

    Example:
        settings = EarclipSettings()
        processor = PolygonProcessor(settings)
        stats = processor.process(
            input_path=Path("shapes.json"),
            output_path=Path("shapes-triangles.json"),
            max_workers=4
        )
    """

    def __init__(self, config: EarclipSettings, quiet: bool = False) -> None:
        """Initialize polygon processor with configuration.

        Args:
            config: Earclip settings containing triangulation and processing config
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        input_path: Path,
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Triangulate every polygon of a file with parallel workers.

        Args:
            input_path: Path to JSON or CSV polygon file
            output_path: Path for output document (auto-generated if None)
            max_workers: Maximum worker processes (None = auto-detect)
            progress_callback: Optional callback(completed, total, polygon_name, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            FileNotFoundError: If polygon file does not exist
            PolygonFormatError: If the file cannot be parsed
            PolygonSaveError: If the output cannot be written
            KeyboardInterrupt: If processing is cancelled by user
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        # Use config default if max_workers not specified
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if output_path is None:
            output_path = TriangulationWriter.get_output_path(input_path)

        self.logger.info(
            "Starting polygon processing",
            input=str(input_path),
            output=str(output_path),
            max_workers=max_workers,
        )

        with PolygonReader(input_path) as reader:
            polygons = list(reader.iter_polygons())

        self.logger.info(
            "Polygons loaded",
            polygon_count=len(polygons),
            vertex_count=sum(p.vertex_count for p in polygons),
        )

        limits = self.config.triangulation
        to_process: dict[int, Polygon] = {}
        for position, polygon in enumerate(polygons):
            name = polygon.name or f"polygon_{position}"
            if limits.exceeds_limit(polygon.vertex_count):
                self.processing_logger.log_polygon_skipped(
                    name,
                    f"{polygon.vertex_count} vertices exceeds limit of {limits.max_vertices}",
                )
                continue
            to_process[position] = polygon

        self.logger.info(
            "Filtered polygons",
            total=len(polygons),
            to_process=len(to_process),
            skipped=stats.skipped_count,
        )

        results: dict[int, TriangulationResult] = {}
        if to_process:
            results = self._process_parallel(
                polygons=to_process,
                max_workers=max_workers,
                stats=stats,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No polygons to process")

        self._save_results(output_path, polygons, results)

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            failed=stats.failed_count,
            errors=stats.error_count,
            triangles=stats.triangles_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _process_parallel(
        self,
        polygons: dict[int, Polygon],
        max_workers: int | None,
        stats: ProcessingStats,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> dict[int, TriangulationResult]:
        """Triangulate polygons in parallel using ProcessPoolExecutor.

        Args:
            polygons: Polygons to process, keyed by position in the file
            max_workers: Maximum worker processes
            stats: Statistics object to update
            progress_callback: Optional callback(completed, total, polygon_name, success)
                for progress updates

        Returns:
            Dictionary mapping file positions to triangulation results
        """
        results: dict[int, TriangulationResult] = {}

        # Serialize configuration for workers
        config_dict = self.config.triangulation.model_dump()

        self.logger.info(
            "Starting parallel processing",
            polygon_count=len(polygons),
            max_workers=max_workers,
        )

        total = len(polygons)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for position, polygon in polygons.items():
                name = polygon.name or f"polygon_{position}"
                self.processing_logger.log_polygon_start(name, polygon.vertex_count)
                future = executor.submit(process_polygon, polygon.to_dict(), config_dict)
                pending_futures[future] = (position, name)

            try:
                for future in as_completed(pending_futures):
                    position, name = pending_futures.pop(future)
                    success = False

                    try:
                        outcome = future.result()

                        if "error" in outcome:
                            self.processing_logger.log_polygon_error(
                                polygon_name=name,
                                error=Exception(outcome["error"]),
                                traceback=outcome.get("traceback"),
                            )
                        else:
                            result = TriangulationResult.from_dict(outcome["result"])
                            results[position] = result

                            if result.is_success:
                                success = True
                                self.processing_logger.log_polygon_complete(
                                    polygon_name=name,
                                    triangle_count=result.triangle_count,
                                    duration_ms=outcome.get("duration_ms", 0.0),
                                )
                            else:
                                self.processing_logger.log_polygon_failed(
                                    name, result.status.value
                                )

                            if outcome.get("issues"):
                                self.processing_logger.log_validation_issues(
                                    name, outcome["issues"]
                                )

                    except Exception as e:
                        # Executor-level error
                        tb = traceback.format_exc()
                        self.processing_logger.log_polygon_error(
                            polygon_name=name,
                            error=e,
                            traceback=tb,
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results

    def _save_results(
        self,
        output_path: Path,
        polygons: list[Polygon],
        results: dict[int, TriangulationResult],
    ) -> None:
        """Write results in file order.

        Args:
            output_path: Path to save the triangulation document
            polygons: All polygons from the input file
            results: Triangulation results keyed by file position
        """
        writer = TriangulationWriter(
            output_path,
            indent=self.config.output.indent,
            include_triangles=self.config.output.include_triangles,
        )

        for position in sorted(results):
            polygon = polygons[position]
            if polygon.name is None:
                polygon = Polygon(points=polygon.points, name=f"polygon_{position}")
            writer.add_result(polygon, results[position])

        writer.save()

        self.logger.info(
            "Triangulation saved",
            output=str(output_path),
            polygons=writer.record_count,
        )
