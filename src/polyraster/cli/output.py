"""Console reporting for the polyraster command.

Step markers, a per-scale progress bar, the render summary table and
error messages, all printed through one shared Rich console.
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

console = Console()

# Status glyphs
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for per-scale rendering.

    Returns:
        Progress with a bar, a percentage and elapsed time.
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
    console.print(f"\n[bold]Polyraster[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, source_format: str, shapes: int, points: int) -> None:
    """Print path source information.

    Args:
        source: Source file path or "inline"
        source_format: Source format (e.g., "SVG", "text")
        shapes: Number of closed loops parsed
        points: Total number of points
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(source)
    line1.append(f" ({source_format})")
    console.print(line1)
    console.print(f"  {shapes:,} shapes {SYM_DOT} {points:,} points")


def print_render_table(rows: list[tuple[float, float, int, int, int, float]]) -> None:
    """Print a summary table of rendered bitmaps.

    Args:
        rows: Tuples of (scale_x, scale_y, segments, width, height, duration_ms)
    """
    table = Table(box=None, padding=(0, 2), show_edge=False)
    table.add_column("Scale", justify="right")
    table.add_column("Segments", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Time", justify="right")

    for scale_x, scale_y, segments, width, height, duration_ms in rows:
        scale = f"{scale_x:g}" if scale_x == scale_y else f"{scale_x:g}x{scale_y:g}"
        table.add_row(scale, f"{segments:,}", f"{width}x{height}", f"{duration_ms:.1f}ms")

    console.print(table)


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


def print_processing_info(workers: int | None) -> None:
    """Print rasterization configuration.

    Args:
        workers: Number of worker processes, None for sequential
    """
    if workers is None or workers <= 1:
        console.print(f"  sequential {SYM_DOT} Ctrl+C to cancel")
    else:
        console.print(f"  {workers} workers {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_paths: list[str],
    total_time_s: float,
    bitmaps: int,
    pixels: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_paths: Paths of written files
        total_time_s: Total rendering time in seconds
        bitmaps: Number of bitmaps rendered
        pixels: Total number of pixels sampled
        avg_time_ms: Average build and rasterization time per bitmap
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    for output_path in output_paths:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    summary = f"  {bitmaps} bitmaps {SYM_DOT} {pixels:,} pixels"
    if avg_time_ms is not None:
        summary += f" {SYM_DOT} {avg_time_ms:.1f}ms avg"
    console.print(summary)


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
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
