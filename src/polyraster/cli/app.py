"""CLI application entry point for polyraster.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from polyraster import __version__
from polyraster.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_error,
    print_header,
    print_processing_info,
    print_render_table,
    print_source_info,
    print_step,
    print_success,
)
from polyraster.config import (
    LoggingConfig,
    ParserConfig,
    PolyRasterSettings,
    PreviewConfig,
    ProcessingConfig,
    RasterConfig,
)
from polyraster.core import RenderResult, ShapeRenderer
from polyraster.exceptions import (
    BitmapSaveError,
    InvalidStateError,
    MalformedPathError,
    PathLoadError,
    PolyRasterError,
)
from polyraster.io import BitmapWriter, PathReader

INLINE_OUTPUT = Path("polyraster.png")

# Create the Typer app
app = typer.Typer(
    name="polyraster",
    help="Rasterize straight-line SVG path data into antialiased coverage bitmaps.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyraster[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    source: Annotated[
        Path | None,
        typer.Argument(
            help="Text file with path data, or SVG file whose <path> d attributes are used",
            show_default=False,
        ),
    ] = None,
    path_data: Annotated[
        str | None,
        typer.Option(
            "--path-data",
            "-d",
            help="Path data given inline instead of a source file",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path (default: {name}-raster.png)",
        ),
    ] = None,
    scales: Annotated[
        list[float] | None,
        typer.Option(
            "--scale",
            "-s",
            help="Scale factor to render at; repeat for several bitmaps (default: 1 and 3)",
        ),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option(
            "--raw/--preview",
            help="Write one grayscale PNG per scale instead of a tinted preview",
        ),
    ] = False,
    zoom: Annotated[
        int,
        typer.Option(
            "--zoom",
            "-z",
            help="Preview magnification (nearest neighbour)",
            min=1,
            max=32,
        ),
    ] = 4,
    close_trailing: Annotated[
        bool,
        typer.Option(
            "--close-trailing/--drop-trailing",
            help="Close or drop a final subpath that has no trailing Z",
        ),
    ] = True,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes for row bands (default: sequential)",
            min=1,
        ),
    ] = None,
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
    """Rasterize path data into an antialiased coverage bitmap.

    Only straight-line commands are supported (M, L, H, V, Z and their
    relative forms). Curves must be flattened to lines beforehand.

    Example:
        polyraster logo.svg -s 1 -s 3

    This will create logo-raster.png showing the shape at 1x and 3x.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if (source is None) == (path_data is None):
        print_error(
            "Provide exactly one path source",
            details="Pass a SOURCE file or --path-data, but not both.",
        )
        raise typer.Exit(code=1)

    if source is not None:
        if not source.exists():
            print_error(
                f"Input file not found: {source}",
                details=f"The file '{source}' does not exist or is not accessible.",
            )
            raise typer.Exit(code=1)

        if not source.is_file():
            print_error(
                f"Input path is not a file: {source}",
                details="Please provide a path to a text or SVG file.",
            )
            raise typer.Exit(code=1)

    if scales and any(scale <= 0 for scale in scales):
        print_error(
            f"Invalid scale: {min(scales)}",
            details="Scale factors must be greater than zero.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = PolyRasterSettings(
        parser=ParserConfig(close_trailing_subpath=close_trailing),
        raster=RasterConfig(scales=scales) if scales else RasterConfig(),
        processing=ProcessingConfig(max_workers=workers),
        preview=PreviewConfig(zoom=zoom),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    render_scales = settings.raster.scales

    try:
        if not quiet:
            print_step("Loading path data")

        source_name, source_format, fragments = _load_path_data(source, path_data)

        renderer = ShapeRenderer(settings)
        shape_set = renderer.parse(fragments)

        if not quiet:
            print_source_info(
                source=source_name,
                source_format=source_format,
                shapes=len(shape_set),
                points=shape_set.point_count,
            )

        if len(shape_set) == 0:
            if not quiet:
                console.print("\nNo closed shapes found. Nothing to render.")
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Rendering")
            print_processing_info(workers)

        start_time = time.time()
        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Rendering {len(render_scales)} scales",
                        total=len(render_scales),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    results = renderer.render_shapes(
                        shape_set, progress_callback=update_progress
                    )
            else:
                results = renderer.render_shapes(shape_set)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if verbose:
            print_render_table(
                [
                    (
                        r.scale_x,
                        r.scale_y,
                        len(r.polygon),
                        r.bitmap.width,
                        r.bitmap.height,
                        r.duration_ms,
                    )
                    for r in results
                ]
            )

        if output is None:
            output = BitmapWriter.get_output_path(source) if source else INLINE_OUTPUT

        written = _write_outputs(results, output, raw, settings.preview)

        if not quiet:
            print_success(
                output_paths=[str(p) for p in written],
                total_time_s=time.time() - start_time,
                bitmaps=len(results),
                pixels=sum(r.bitmap.width * r.bitmap.height for r in results),
                avg_time_ms=renderer.stats.avg_render_time_ms,
            )

    except PathLoadError as e:
        print_error(f"Could not load path data: {e.reason}")
        raise typer.Exit(code=1)
    except (MalformedPathError, InvalidStateError) as e:
        print_error("Invalid path data", details=str(e))
        raise typer.Exit(code=1)
    except BitmapSaveError as e:
        print_error(f"Could not save bitmap: {e.reason}")
        raise typer.Exit(code=1)
    except PolyRasterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _load_path_data(
    source: Path | None, path_data: str | None
) -> tuple[str, str, list[str]]:
    """Resolve the path descriptions from a file or the inline option.

    Returns:
        Tuple of (source name, source format, path data fragments)

    Raises:
        PathLoadError: If the source file cannot be read
    """
    if source is None:
        return "inline", "text", [path_data or ""]

    try:
        with PathReader(source) as reader:
            return str(source), reader.format, reader.fragments
    except FileNotFoundError as e:
        raise PathLoadError(str(source), str(e)) from e


def _write_outputs(
    results: list[RenderResult],
    output: Path,
    raw: bool,
    preview: PreviewConfig,
) -> list[Path]:
    """Write either per-scale grayscale PNGs or one tinted preview.

    Returns:
        Paths of the written files

    Raises:
        BitmapSaveError: If a file cannot be written
    """
    if not raw:
        writer = BitmapWriter(output)
        writer.save_preview(
            [r.bitmap for r in results],
            zoom=preview.zoom,
            margin=preview.margin,
            foreground=preview.foreground,
            background=preview.background,
        )
        return [output]

    written = []
    for result in results:
        path = output
        if len(results) > 1:
            path = BitmapWriter.get_scaled_path(output, result.scale_x)
        BitmapWriter(path).save(result.bitmap)
        written.append(path)
    return written


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
