"""Rich console output helpers for the CLI.

Progress bars for batch runs, triangle tables for single polygons, and
the success, error and cancellation messages printed by the commands.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from earclip.core.geometry import triangle_signed_area
from earclip.domain import Polygon, TriangulationResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

STATUS_STYLES = {
    "triangulated": "green",
    "degenerate": "yellow",
    "non_simple": "red",
}


def create_progress() -> Progress:
    """Create a rich progress bar for polygon processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Earclip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, polygon_count: int, vertex_count: int) -> None:
    """Print polygon file information.

    Args:
        path: Path to the polygon file
        polygon_count: Number of polygons in the file
        vertex_count: Total number of vertices
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    plural = "polygon" if polygon_count == 1 else "polygons"
    console.print(f"  {polygon_count:,} {plural} {SYM_DOT} {vertex_count:,} vertices")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str,
    total_time_s: float,
    processed: int,
    triangles: int,
    failed: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of polygons triangulated
        triangles: Total number of triangles emitted
        failed: Number of polygons that could not be triangulated
        errors: Number of errors encountered
        avg_time_ms: Average processing time per polygon in milliseconds
        min_time_ms: Minimum processing time per polygon in milliseconds
        max_time_ms: Maximum processing time per polygon in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    failed_style = "yellow" if failed > 0 else "green"
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} polygons {SYM_DOT} {triangles} triangles {SYM_DOT} "
        f"[{failed_style}]{failed} failed[/{failed_style}] {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.2f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.2f}–{max_time_ms:.2f}ms range)"
        console.print(f"  {timing_str}")


def print_triangulation(
    polygon: Polygon,
    result: TriangulationResult,
    issues: list[str] | None = None,
) -> None:
    """Print one polygon's triangles as a table.

    Args:
        polygon: The input polygon
        result: Its triangulation
        issues: Failed consistency checks, if verification ran
    """
    style = STATUS_STYLES.get(result.status.value, "white")
    title = Text()
    title.append(polygon.name or "polygon", style="bold")
    title.append(f" {SYM_DOT} {polygon.vertex_count} vertices {SYM_DOT} ")
    title.append(result.status.value, style=style)
    console.print()
    console.print(title)

    if result.is_success:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", justify="right")
        table.add_column("Indices")
        table.add_column("Corners")
        table.add_column("Area", justify="right")

        for number, (a, b, c) in enumerate(result.triangles()):
            pa, pb, pc = polygon.points[a], polygon.points[b], polygon.points[c]
            area = abs(triangle_signed_area(pa, pb, pc))
            corners = "  ".join(f"({p.x:g}, {p.y:g})" for p in (pa, pb, pc))
            table.add_row(str(number), f"{a}, {b}, {c}", corners, f"{area:g}")

        console.print(table)
        console.print(f"  polygon area {polygon.area():g}")

    if issues is not None:
        if issues:
            for issue in issues:
                console.print(f"  [red]{SYM_ERR}[/red] {issue}")
        elif result.is_success:
            console.print(f"  [green]{SYM_OK}[/green] checks passed")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelling... waiting for in-progress polygons")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of polygons successfully processed before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} polygons completed {SYM_DOT} {cancelled} tasks cancelled")
    console.print("  No output file created")
