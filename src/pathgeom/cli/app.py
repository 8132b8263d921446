"""CLI application entry point for pathgeom.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathgeom import __version__
from pathgeom.cli.output import (
    console,
    print_error,
    print_failures,
    print_header,
    print_shape_names,
    print_shape_table,
    print_source_info,
    print_step,
    print_success,
)
from pathgeom.config import (
    ExportConfig,
    GeometryConfig,
    LoggingConfig,
    PathGeomSettings,
)
from pathgeom.core import PathCompiler
from pathgeom.domain import ColliderKind
from pathgeom.domain import Path as GeomPath
from pathgeom.exceptions import GeometrySaveError, PathGeomError, ScriptLoadError
from pathgeom.io import GeometryWriter, PathScriptReader
from pathgeom.levels import build_level

# Create the Typer app
app = typer.Typer(
    name="pathgeom",
    help="Compile line/arc drawing paths into fill meshes, wireframes and colliders.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathgeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def compile_paths(
    script: Annotated[
        Path | None,
        typer.Argument(
            help="Path to a JSON path script (default: the built-in level walls)",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-geometry.json next to the script)",
        ),
    ] = None,
    collider: Annotated[
        str,
        typer.Option(
            "--collider",
            "-c",
            help="Collider shape (polyline|trimesh)",
        ),
    ] = "polyline",
    segments: Annotated[
        int,
        typer.Option(
            "--segments",
            "-s",
            help="Line segments per arc when a command gives no count",
            min=1,
            max=720,
        ),
    ] = 10,
    include_z: Annotated[
        bool,
        typer.Option(
            "--include-z",
            help="Write mesh positions as (x, y, 0) triples",
        ),
    ] = False,
    list_shapes: Annotated[
        bool,
        typer.Option(
            "--list-shapes",
            help="List the shapes that would be compiled and exit",
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
    """Compile every shape of a path script into meshes and colliders.

    Each shape is closed, triangulated by ear clipping and exported as a fill
    mesh, a wireframe mesh and a polyline or trimesh collider. A shape that
    fails to triangulate is reported and skipped.

    Example:
        pathgeom level.json --collider trimesh

    This will write level-geometry.json next to level.json.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if script is not None:
        if not script.exists():
            print_error(
                f"Input file not found: {script}",
                details=f"The file '{script}' does not exist or is not accessible.",
            )
            raise typer.Exit(code=1)

        if not script.is_file():
            print_error(
                f"Input path is not a file: {script}",
                details="Please provide a path to a JSON path script.",
            )
            raise typer.Exit(code=1)

    try:
        collider_kind = ColliderKind(collider.lower())
    except ValueError:
        print_error(
            f"Invalid collider: {collider}",
            details="Valid values: polyline, trimesh",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = PathGeomSettings(
        geometry=GeometryConfig(arc_segments=segments),
        export=ExportConfig(collider=collider_kind, include_z=include_z),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    try:
        compiler = PathCompiler(settings, quiet=quiet)

        if not quiet:
            print_step("Loading shapes")
        shapes, source = _load_shapes(script, compiler)

        if not quiet:
            print_source_info(source, len(shapes))

        if list_shapes:
            print_shape_names(list(shapes))
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Compiling")
        result = compiler.compile(shapes)

        if not quiet:
            print_shape_table(result.shapes)
            print_failures(result.stats.failures)

        if output is None and script is not None:
            output = GeometryWriter.get_geometry_path(script)

        if output is not None:
            GeometryWriter(output, settings.export).save(result.shapes)

        if not quiet:
            print_success(result.stats, str(output) if output is not None else None)

        if not result.ok:
            raise typer.Exit(code=1)

    except ScriptLoadError as e:
        print_error(f"Could not load path script: {e.reason}")
        raise typer.Exit(code=1)
    except GeometrySaveError as e:
        print_error(f"Could not save geometry: {e.reason}")
        raise typer.Exit(code=1)
    except PathGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _load_shapes(script: Path | None, compiler: PathCompiler) -> tuple[dict[str, GeomPath], str]:
    """Build the shapes to compile.

    Args:
        script: Path script, or None for the built-in level
        compiler: Compiler whose arc settings the shapes are built with

    Returns:
        Tuple of (paths keyed by shape name, source description)
    """
    if script is None:
        shapes = build_level(
            segments=compiler.config.geometry.arc_segments,
            tessellator=compiler.tessellator,
        )
        return shapes, "built-in level"

    reader = PathScriptReader(script, builder_factory=compiler.new_builder)
    reader.load()
    return reader.build_paths(), str(script)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
