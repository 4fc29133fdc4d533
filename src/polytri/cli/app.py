"""CLI application entry point for polytri.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from polytri import __version__
from polytri.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_header,
    print_input_info,
    print_polygon_errors,
    print_step,
    print_success,
)
from polytri.config import (
    InputConfig,
    LoggingConfig,
    PolytriSettings,
    ProcessingConfig,
    TriangulationConfig,
)
from polytri.core import PolygonProcessor
from polytri.exceptions import InputError, OutputError, PolytriError
from polytri.io import BoundaryReader, TriangulationWriter

app = typer.Typer(
    name="polytri",
    help="Triangulate polygons with holes using hole bridging and ear clipping.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polytri[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def triangulate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to JSON boundary file",
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
    degrees: Annotated[
        bool,
        typer.Option(
            "--degrees",
            help="Input is longitude/latitude; project to Web Mercator meters",
        ),
    ] = False,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Scale factor applied to coordinates",
            min=0.0,
        ),
    ] = 1.0,
    no_verify: Annotated[
        bool,
        typer.Option(
            "--no-verify",
            help="Skip the triangle area check",
        ),
    ] = False,
    no_normalize: Annotated[
        bool,
        typer.Option(
            "--no-normalize",
            help="Keep ring orientation as given (outer must be CCW, holes CW)",
        ),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Maximum relative area deviation",
            min=0.0,
            max=1.0,
        ),
    ] = 1e-6,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: in process)",
            min=1,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Load and summarize the input without triangulating",
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
    """Triangulate every polygon of a boundary file.

    The file holds rings as [x, y] pairs, outer ring first and holes after it.
    Holes are bridged into the outer ring and the result is ear clipped into
    counter-clockwise triangles.

    Example:
        polytri lake.json

    This will create lake-triangles.json next to the input.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if scale <= 0:
        print_error("--scale must be greater than zero")
        raise typer.Exit(code=1)

    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a JSON boundary file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = PolytriSettings(
        input=InputConfig(degrees=degrees, scale=scale),
        triangulation=TriangulationConfig(
            normalize_winding=not no_normalize,
            verify_area=not no_verify,
            area_tolerance=tolerance,
        ),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        if not quiet:
            print_step("Loading boundaries")

        reader = BoundaryReader(input_file, settings.input)
        reader.load()
        polygons = list(reader.iter_polygons())

        if not quiet:
            print_input_info(
                path=str(input_file),
                polygon_count=len(polygons),
                hole_count=reader.hole_count,
                vertex_count=sum(p.vertex_count for p in polygons),
            )

        if dry_run:
            if not quiet:
                _print_dry_run(reader, verbose)
            raise typer.Exit(code=0)

        output_path = output or TriangulationWriter.get_output_path(input_file)
        processor = PolygonProcessor(settings, quiet=quiet)

        if not quiet:
            print_step("Triangulating")

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Triangulating", total=None)

                    def update_progress(completed: int, total: int, *_: object) -> None:
                        progress.update(task_id, completed=completed, total=total)

                    stats = processor.process(
                        input_path=input_file,
                        output_path=output_path,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    input_path=input_file,
                    output_path=output_path,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                partial = processor.processing_logger.stats
                print_cancellation_summary(
                    processed=partial.processed_count,
                    cancelled=partial.cancelled_count,
                )
            raise typer.Exit(code=130) from None

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                triangles=stats.triangles_emitted,
                errors=stats.error_count,
                avg_time_ms=stats.avg_polygon_time_ms,
            )

        if stats.error_count:
            if not quiet:
                print_polygon_errors(stats.errors)
            raise typer.Exit(code=1)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except InputError as e:
        print_error(f"Could not load boundaries: {e}")
        raise typer.Exit(code=1)
    except OutputError as e:
        print_error(f"Could not save triangles: {e}")
        raise typer.Exit(code=1)
    except PolytriError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _print_dry_run(reader: BoundaryReader, verbose: bool) -> None:
    """Print what would be triangulated.

    Args:
        reader: Loaded boundary reader
        verbose: Show per-polygon details
    """
    polygons = list(reader.iter_polygons())
    # Each hole adds two bridge vertices; n vertices give at most n - 2 triangles.
    max_triangles = sum(p.vertex_count + 2 * len(p.holes) - 2 for p in polygons)

    console.print("\n[bold]Analysis[/bold]\n")
    console.print(f"  Polygons              {len(polygons)}")
    console.print(f"  Holes                 {reader.hole_count}")
    console.print(f"  Max triangles         {max_triangles}")

    if verbose:
        console.print("\n[bold]Polygons[/bold]")
        for polygon in polygons[:20]:
            console.print(
                f"  {polygon.name}: {polygon.vertex_count} vertices, "
                f"{len(polygon.holes)} holes, area {polygon.area():.6g}"
            )
        if len(polygons) > 20:
            console.print(f"  ... +{len(polygons) - 20} more")

    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – nothing written")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
