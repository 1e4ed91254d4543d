"""Command-line interface for earclip.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for batch triangulation
- Triangle tables for inspecting results
- Optional consistency checks
- Detailed error reporting
"""

from earclip.cli.app import cli, main

__all__ = ["cli", "main"]
