"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathgeom.core.compiler import CompiledShape
from pathgeom.utils import CompileStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathgeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, shape_count: int) -> None:
    """Print where shapes come from.

    Args:
        source: Script path or built-in level description
        shape_count: Number of shapes found
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    plural = "shape" if shape_count == 1 else "shapes"
    console.print(f"  {shape_count} {plural}")


def print_shape_names(names: Sequence[str]) -> None:
    """Print one shape name per line."""
    for name in names:
        console.print(f"  {name}")


def print_shape_table(shapes: Sequence[CompiledShape]) -> None:
    """Print per-shape vertex, triangle and collider counts.

    Args:
        shapes: Compiled shapes to summarize
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Shape", style="bold")
    table.add_column("Vertices", justify="right")
    table.add_column("Triangles", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Collider")

    for shape in shapes:
        geometry = shape.geometry
        table.add_row(
            shape.name,
            str(len(geometry.path)),
            str(len(geometry.triangles)),
            f"{geometry.path.signed_area():.4f}",
            f"{geometry.collider.kind.value} ({len(geometry.collider.indices)})",
        )

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


def print_success(stats: CompileStats, output_path: str | None = None) -> None:
    """Print success message with summary.

    Args:
        stats: Compile statistics
        output_path: Path of the written geometry file, if any
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if stats.failed_count > 0 else "green"
    console.print(
        f"  {stats.compiled_count} shapes {SYM_DOT} {stats.triangle_count} triangles {SYM_DOT} "
        f"[{error_style}]{stats.failed_count} failed[/{error_style}]"
    )

    if stats.avg_shape_time_ms is not None:
        console.print(f"  {stats.avg_shape_time_ms:.2f}ms avg per shape")


def print_failures(failures: Sequence[tuple[str, str]]) -> None:
    """Print shapes that could not be compiled.

    Args:
        failures: (shape name, error message) pairs
    """
    for name, message in failures:
        console.print(f"  [red]{SYM_ERR}[/red] {name}: {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
