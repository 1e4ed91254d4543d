"""Configuration settings for Earclip."""

from pathlib import Path

from pydantic import BaseModel, Field


class TriangulationConfig(BaseModel):
    """Configuration for triangulation runs."""

    max_vertices: int | None = Field(
        default=100_000,
        ge=3,
        description="Reject polygons with more vertices than this (None = no limit)",
    )
    verify: bool = Field(
        default=False,
        description="Check every triangulation for coverage, area and orientation",
    )
    area_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=0.1,
        description="Relative tolerance when comparing triangle and polygon areas",
    )

    def exceeds_limit(self, vertex_count: int) -> bool:
        """Check a vertex count against the configured limit.

        Args:
            vertex_count: Number of polygon vertices

        Returns:
            True if the polygon should be rejected
        """
        return self.max_vertices is not None and vertex_count > self.max_vertices


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )


class OutputConfig(BaseModel):
    """Configuration for triangulation output files."""

    indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="JSON indentation (None = compact)",
    )
    include_triangles: bool = Field(
        default=True,
        description="Also write indices grouped into triangles",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class EarclipSettings(BaseModel):
    """Main application settings."""

    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EarclipSettings:
    """Get default application settings."""
    return EarclipSettings()
