"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with aligned result lines and formatted messages.
"""

from rich.console import Console
from rich.text import Text

from shapegeom.domain import Point, PointF
from shapegeom.utils import QueryStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

LABEL_WIDTH = 14


def format_value(value: object) -> str:
    """Format a query result for display.

    Points print as ``(x, y)``, floats without trailing zeros and a missing
    result as ``none``.
    """
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (Point, PointF)):
        return f"({format_value(value.x)}, {format_value(value.y)})"
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]ShapeGeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a query step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_result(label: str, value: object) -> None:
    """Print one labelled result line.

    Args:
        label: Name of the value
        value: Value, formatted with ``format_value``
    """
    # Text keeps brackets in point lists from being read as markup
    line = Text("  ")
    line.append(f"{label:<{LABEL_WIDTH}}")
    line.append(format_value(value), style="bold")
    console.print(line)


def print_points(label: str, points: list) -> None:
    """Print a list of points on one line, or ``none`` if it is empty."""
    if not points:
        print_result(label, None)
        return
    print_result(label, f" {SYM_DOT} ".join(format_value(p) for p in points))


def print_success(stats: QueryStats) -> None:
    """Print the run summary.

    Args:
        stats: Query statistics of the run
    """
    empty_style = "yellow" if stats.empty_count > 0 else "green"
    console.print(
        f"\n[bold green]{SYM_OK} Done[/bold green] {SYM_DOT} {stats.query_count} queries "
        f"{SYM_DOT} [{empty_style}]{stats.empty_count} without result[/{empty_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
