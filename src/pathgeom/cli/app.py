"""CLI application entry point for pathgeom.

This module provides the main CLI interface using Typer.
"""

import time
from collections import Counter
from pathlib import Path
from typing import Annotated

import structlog
import typer

from pathgeom import __version__
from pathgeom.cli.output import (
    SYM_DOT,
    console,
    print_document_info,
    print_error,
    print_header,
    print_shape_summary,
    print_step,
    print_success,
)
from pathgeom.config import (
    ConversionConfig,
    CurveConfig,
    LoggingConfig,
    OuterRingPolicy,
    PathgeomSettings,
    StyleConfig,
)
from pathgeom.core import ShapeDecoder, ShapeEncoder, iter_shapes
from pathgeom.domain import PathShape
from pathgeom.exceptions import DocumentLoadError, DocumentSaveError, PathgeomError
from pathgeom.io import ShapeReader, ShapeWriter, read_geometry, write_geometry
from pathgeom.utils import ConversionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathgeom",
    help="Convert path-command shapes to polygon geometries and back.",
    add_completion=False,
    no_args_is_help=True,
)

LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pathgeom[/bold blue] v{__version__}")
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
    """Convert path-command shapes to polygon geometries and back."""


def _check_input(path: Path) -> None:
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    if not path.is_file():
        print_error(f"Input path is not a file: {path}")
        raise typer.Exit(code=1)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _setup_logging(settings: PathgeomSettings, quiet: bool) -> structlog.stdlib.BoundLogger:
    level = settings.logging.log_level.upper()
    if level not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {settings.logging.log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)
    return configure_logging(
        log_file=settings.logging.log_file,
        console_level=level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )


@app.command()
def decode(
    input_shape: Annotated[
        Path,
        typer.Argument(help="Path to input shape document (JSON)", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}.wkt)"),
    ] = None,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-s",
            help="Points sampled per curve segment",
            min=1,
            max=1000,
        ),
    ] = 20,
    outer_ring: Annotated[
        str,
        typer.Option("--outer-ring", help="Outer ring selection (first|largest)"),
    ] = "largest",
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Decode a shape document into a WKT polygon geometry.

    Curves are tessellated, contours become polygon holes, and grouped
    shapes are merged into a single MultiPolygon.
    """
    _check_input(input_shape)

    try:
        policy = OuterRingPolicy(outer_ring.lower())
    except ValueError:
        print_error(f"Invalid outer ring policy: {outer_ring}", details="Valid values: first, largest")
        raise typer.Exit(code=1)

    settings = PathgeomSettings(
        curve=CurveConfig(curve_samples=samples),
        conversion=ConversionConfig(outer_ring=policy),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = _setup_logging(settings, quiet)
    output_path = output or ShapeWriter.get_output_path(input_shape, ".wkt")

    if not quiet:
        print_header(__version__)
        print_step("Loading shape")

    try:
        shape = ShapeReader(input_shape).load()
        if not quiet:
            print_document_info(str(input_shape), f"{shape.family.value} shape")
            print_step("Decoding")

        conversion_logger = ConversionLogger(logger)
        stats = conversion_logger.stats
        stats.start_time = time.perf_counter()
        geometry = ShapeDecoder.from_settings(settings, conversion_logger).decode(shape)
        write_geometry(output_path, geometry)
        stats.end_time = time.perf_counter()
    except DocumentLoadError as e:
        print_error(f"Could not load shape: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save geometry: {e.reason}")
        raise typer.Exit(code=1)
    except PathgeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            str(output_path),
            f"{geometry.geom_type} {SYM_DOT} {stats.converted_count} converted "
            f"{SYM_DOT} {stats.skipped_count} skipped {SYM_DOT} "
            f"{stats.error_count} failed {SYM_DOT} "
            f"{stats.duration_seconds * 1000:.0f}ms",
        )


@app.command()
def encode(
    input_geometry: Annotated[
        Path,
        typer.Argument(help="Path to input WKT geometry file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}.json)"),
    ] = None,
    no_style: Annotated[
        bool,
        typer.Option("--no-style", help="Do not assign the default style to encoded shapes"),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Encode a WKT geometry into a shape document.

    Collections become groups; polygon holes become contours of one path.
    """
    _check_input(input_geometry)

    settings = PathgeomSettings(
        style=StyleConfig(apply_defaults=not no_style),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet)
    output_path = output or ShapeWriter.get_output_path(input_geometry, ".json")

    if not quiet:
        print_header(__version__)
        print_step("Loading geometry")

    try:
        geometry = read_geometry(input_geometry)
        if not quiet:
            print_document_info(str(input_geometry), geometry.geom_type)
            print_step("Encoding")

        shape = ShapeEncoder.from_settings(settings).encode(geometry)
        ShapeWriter(output_path).save(shape)
    except DocumentLoadError as e:
        print_error(f"Could not load geometry: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save shape: {e.reason}")
        raise typer.Exit(code=1)
    except PathgeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        nodes = sum(1 for _ in iter_shapes(shape, settings.conversion.max_depth))
        print_success(str(output_path), f"{nodes} shape nodes")


@app.command()
def info(
    input_shape: Annotated[
        Path,
        typer.Argument(help="Path to input shape document (JSON)", show_default=False),
    ],
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Summarize a shape document: node counts, vertices and decoded area."""
    _check_input(input_shape)
    _setup_logging(
        PathgeomSettings(logging=LoggingConfig(log_file=log_file, log_level=log_level)),
        quiet=False,
    )

    try:
        shape = ShapeReader(input_shape).load()
        nodes = list(iter_shapes(shape))
        geometry = ShapeDecoder().decode(shape)
    except DocumentLoadError as e:
        print_error(f"Could not load shape: {e.reason}")
        raise typer.Exit(code=1)
    except PathgeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    family_counts = Counter(node.family.value for node in nodes)
    vertex_count = sum(node.vertex_count for node in nodes if isinstance(node, PathShape))

    print_step(str(input_shape))
    print_shape_summary(dict(family_counts), vertex_count, geometry.area, geometry.geom_type)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
