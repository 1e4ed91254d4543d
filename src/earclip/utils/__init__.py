"""Utility functions for earclip.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics and progress reporting helpers
"""

from earclip.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
