"""CLI application entry point for earclip.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from earclip import __version__
from earclip.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_cancellation_summary,
    print_error,
    print_file_info,
    print_header,
    print_processing_info,
    print_step,
    print_success,
    print_triangulation,
)
from earclip.config import (
    EarclipSettings,
    LoggingConfig,
    ProcessingConfig,
    TriangulationConfig,
)
from earclip.core import PolygonProcessor, triangulate_polygon, validate_triangulation
from earclip.domain import Polygon
from earclip.exceptions import (
    EarclipError,
    PolygonFormatError,
    PolygonLoadError,
    PolygonSaveError,
)
from earclip.io import PolygonReader, TriangulationWriter

# Concave "arrow" used by the demo command
DEMO_POLYGON = Polygon.from_tuples(
    [
        (100, 200),
        (200, 100),
        (400, 150),
        (300, 200),
        (350, 300),
        (150, 400),
        (250, 300),
    ],
    name="arrow",
)

# Create the Typer app
app = typer.Typer(
    name="earclip",
    help="Triangulate simple polygons by ear clipping.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Earclip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Triangulate simple polygons by ear clipping."""


def _load_polygons(input_path: Path) -> list[Polygon]:
    """Load every polygon from a file, wrapping unexpected failures."""
    try:
        with PolygonReader(input_path) as reader:
            return list(reader.iter_polygons())
    except PolygonFormatError:
        raise
    except Exception as e:
        raise PolygonLoadError(str(input_path), str(e)) from e


def _check_input(input_path: Path) -> None:
    """Exit with an error if the input path is unusable."""
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(
            f"Input path is not a file: {input_path}",
            details="Please provide a path to a JSON or CSV polygon file.",
        )
        raise typer.Exit(code=1)


@app.command()
def triangulate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON/CSV polygon file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-triangles.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    max_vertices: Annotated[
        int | None,
        typer.Option(
            "--max-vertices",
            help="Skip polygons with more vertices than this",
            min=3,
        ),
    ] = 100_000,
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Verify coverage, area and orientation of every triangulation",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Triangulate every polygon in a file and write the triangle indices.

    Input files are JSON (a point list, a {"points": [...]} polygon or a
    {"polygons": [...]} collection) or CSV (x,y rows).

    Example:
        earclip triangulate shapes.json

    This will create shapes-triangles.json holding, for every polygon, a flat
    list of indices into its points with three indices per triangle.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    _check_input(input_file)

    if not quiet:
        print_header(__version__)

    settings = EarclipSettings(
        triangulation=TriangulationConfig(
            max_vertices=max_vertices,
            verify=check,
        ),
        processing=ProcessingConfig(
            max_workers=workers,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else (log_level if not quiet else "ERROR"),
        ),
    )

    try:
        if not quiet:
            print_step("Loading polygons")

        polygons = _load_polygons(input_file)

        if not quiet:
            print_file_info(
                path=str(input_file),
                polygon_count=len(polygons),
                vertex_count=sum(p.vertex_count for p in polygons),
            )

        if not polygons:
            if not quiet:
                console.print("\nNo polygons found. Nothing to process.")
            raise typer.Exit(code=0)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Triangulating")
            print_processing_info(actual_workers, is_auto=(workers is None))

        actual_output_path = output or TriangulationWriter.get_output_path(input_file)

        processor = PolygonProcessor(settings, quiet=quiet)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Triangulating {len(polygons)} polygons",
                        total=len(polygons),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        input_path=input_file,
                        output_path=actual_output_path,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    input_path=input_file,
                    output_path=actual_output_path,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                stats = processor.processing_logger.stats
                print_cancellation_notice()
                print_cancellation_summary(
                    processed=stats.processed_count,
                    cancelled=stats.cancelled_count,
                )
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_path=str(actual_output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                triangles=stats.triangles_emitted,
                failed=stats.failed_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_polygon_time_ms,
                min_time_ms=stats.min_polygon_time_ms,
                max_time_ms=stats.max_polygon_time_ms,
            )
            if stats.skipped_count:
                console.print(f"  {stats.skipped_count} skipped (vertex limit)")
            if check and stats.invalid_count:
                console.print(f"  [red]{stats.invalid_count} failed checks[/red]")

        if check and stats.invalid_count:
            raise typer.Exit(code=1)

    except PolygonLoadError as e:
        print_error(f"Could not load polygons: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonFormatError as e:
        print_error("Invalid polygon file", details=e.details)
        raise typer.Exit(code=1)
    except PolygonSaveError as e:
        print_error(f"Could not save triangulation: {e.reason}")
        raise typer.Exit(code=1)
    except EarclipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def show(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON/CSV polygon file",
            show_default=False,
        ),
    ],
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Verify coverage, area and orientation of every triangulation",
        ),
    ] = False,
) -> None:
    """Print the triangles of every polygon in a file."""
    _check_input(input_file)

    try:
        polygons = _load_polygons(input_file)
    except PolygonFormatError as e:
        print_error("Invalid polygon file", details=e.details)
        raise typer.Exit(code=1)
    except PolygonLoadError as e:
        print_error(f"Could not load polygons: {e.reason}")
        raise typer.Exit(code=1)

    if not _show_polygons(polygons, check):
        raise typer.Exit(code=1)


@app.command()
def demo(
    check: Annotated[
        bool,
        typer.Option(
            "--check/--no-check",
            help="Verify the triangulation",
        ),
    ] = True,
) -> None:
    """Triangulate a built-in concave polygon and print the result."""
    print_header(__version__)
    _show_polygons([DEMO_POLYGON], check)


def _show_polygons(polygons: list[Polygon], check: bool) -> bool:
    """Triangulate and print polygons.

    Args:
        polygons: Polygons to show
        check: Run consistency checks on each triangulation

    Returns:
        False if any check failed
    """
    all_valid = True
    for polygon in polygons:
        result = triangulate_polygon(polygon.points)
        issues = None
        if check:
            issues = (
                validate_triangulation(polygon.points, result.indices).issues()
                if result.is_success
                else []
            )
            all_valid = all_valid and not issues
        print_triangulation(polygon, result, issues)
    return all_valid


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
