"""Logging utilities for Earclip."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    skipped_count: int = 0
    failed_count: int = 0
    error_count: int = 0
    triangles_emitted: int = 0
    invalid_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    polygon_timings_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_polygon_time_ms(self) -> float | None:
        """Average triangulation time per polygon."""
        if not self.polygon_timings_ms:
            return None
        return sum(self.polygon_timings_ms) / len(self.polygon_timings_ms)

    @property
    def min_polygon_time_ms(self) -> float | None:
        """Fastest triangulation time."""
        return min(self.polygon_timings_ms) if self.polygon_timings_ms else None

    @property
    def max_polygon_time_ms(self) -> float | None:
        """Slowest triangulation time."""
        return max(self.polygon_timings_ms) if self.polygon_timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced, so configuring
    twice does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("earclip")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_polygon_start(self, polygon_name: str, vertex_count: int) -> None:
        """Log start of polygon processing."""
        self._logger.debug(
            "Processing polygon", polygon=polygon_name, vertices=vertex_count
        )

    def log_polygon_complete(
        self,
        polygon_name: str,
        triangle_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful triangulation."""
        self._logger.info(
            "Polygon triangulated",
            polygon=polygon_name,
            triangles=triangle_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.triangles_emitted += triangle_count
        self._stats.polygon_timings_ms.append(duration_ms)

    def log_polygon_skipped(self, polygon_name: str, reason: str) -> None:
        """Log skipped polygon."""
        self._logger.debug("Polygon skipped", polygon=polygon_name, reason=reason)
        self._stats.skipped_count += 1

    def log_polygon_failed(self, polygon_name: str, status: str) -> None:
        """Log a polygon that produced no triangles."""
        self._logger.warning(
            "Polygon not triangulated", polygon=polygon_name, status=status
        )
        self._stats.failed_count += 1

    def log_polygon_error(
        self,
        polygon_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log polygon processing error."""
        self._logger.error(
            "Polygon processing failed",
            polygon=polygon_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((polygon_name, str(error)))

    def log_validation_issues(self, polygon_name: str, issues: list[str]) -> None:
        """Log failed consistency checks for a triangulation."""
        self._logger.warning(
            "Triangulation check failed", polygon=polygon_name, issues=issues
        )
        self._stats.invalid_count += 1

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
