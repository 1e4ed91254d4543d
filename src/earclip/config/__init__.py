"""Configuration management for earclip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TriangulationConfig: Vertex limit and verification settings
- ProcessingConfig: Batch processing settings
- OutputConfig: Output file settings
- LoggingConfig: Logging settings
- EarclipSettings: Main application settings
"""

from earclip.config.settings import (
    EarclipSettings,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    TriangulationConfig,
    get_default_settings,
)

__all__ = [
    "EarclipSettings",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "TriangulationConfig",
    "get_default_settings",
]
