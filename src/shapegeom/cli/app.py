"""CLI application entry point for shapegeom.

This module provides the main CLI interface using Typer. Every command
evaluates one kernel query and prints its result.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from shapegeom import __version__
from shapegeom.cli.output import (
    console,
    print_error,
    print_header,
    print_points,
    print_result,
    print_step,
    print_success,
)
from shapegeom.cli.parsing import parse_points
from shapegeom.config import LoggingConfig, ResizeConfig, ShapeGeomSettings
from shapegeom.core.containment import arc_contains_point, line_contains_point, polygon_contains_point
from shapegeom.core.distance import (
    distance_point_line,
    distance_point_point,
    distance_point_point_fast,
)
from shapegeom.core.lines import calc_circum_circle, intersect_line_segments, intersect_lines
from shapegeom.core.resize import move_rectangle_corner, move_rectangle_edge, transform_mouse_movement
from shapegeom.core.rotation import rotate_point
from shapegeom.domain import Point, PointF, ResizeHandle
from shapegeom.exceptions import InputError, ShapeGeomError
from shapegeom.utils import QueryLogger, configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="shapegeom",
    help="Evaluate 2D geometry queries used by diagram editors.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class Session:
    """State shared by the commands of one invocation."""

    settings: ShapeGeomSettings
    query_logger: QueryLogger
    quiet: bool


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]ShapeGeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print results only",
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
    """Evaluate 2D geometry queries used by diagram editors.

    Points are written as "x,y". Integer coordinates select integer
    arithmetic, decimals select floating point arithmetic.

    Example:
        shapegeom intersect 0,0 10,10 0,10 10,0
    """
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = ShapeGeomSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level.upper(),
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = Session(settings=settings, query_logger=QueryLogger(logger), quiet=quiet)

    if not quiet:
        print_header(__version__)


def _run(
    ctx: typer.Context, command: str, query: Callable[[], object], **arguments: object
) -> None:
    """Evaluate a query and turn errors into a clean exit.

    Args:
        ctx: Typer context carrying the Session
        command: Command name for logging
        query: Callable evaluating and printing the query; returns its result
        arguments: Raw command arguments for logging
    """
    session: Session = ctx.obj
    query_logger = session.query_logger
    query_logger.log_query(command, **arguments)
    try:
        if not session.quiet:
            print_step(command)
        result = query()
        query_logger.log_result(command, result)
    except InputError as e:
        query_logger.log_error(command, e)
        print_error(f"Invalid input: {e.reason}", details=f"Got '{e.text}'")
        raise typer.Exit(code=1)
    except ShapeGeomError as e:
        query_logger.log_error(command, e)
        print_error(str(e))
        raise typer.Exit(code=1)

    stats = query_logger.finish()
    if not session.quiet:
        print_success(stats)


@app.command()
def distance(
    ctx: typer.Context,
    a: Annotated[str, typer.Argument(help="First point", show_default=False)],
    b: Annotated[str, typer.Argument(help="Second point", show_default=False)],
    fast: Annotated[
        bool,
        typer.Option(
            "--fast",
            help="Use the octagonal approximation (integer points only)",
        ),
    ] = False,
) -> None:
    """Distance between two points."""

    def query():
        p1, p2 = parse_points(a, b)
        if fast:
            if not isinstance(p1, Point):
                print_error("--fast needs integer points")
                raise typer.Exit(code=1)
            result = distance_point_point_fast(p1, p2)
        else:
            result = distance_point_point(p1, p2)
        print_result("distance", result)
        return result

    _run(ctx, "distance", query, a=a, b=b, fast=fast)


@app.command("line-distance")
def line_distance(
    ctx: typer.Context,
    p: Annotated[str, typer.Argument(help="Query point", show_default=False)],
    a: Annotated[str, typer.Argument(help="First point of the line", show_default=False)],
    b: Annotated[str, typer.Argument(help="Second point of the line", show_default=False)],
    segment: Annotated[
        bool,
        typer.Option(
            "--segment",
            "-s",
            help="Treat the line as the segment between both points",
        ),
    ] = False,
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum distance of a point on the line (default: line hit tolerance)",
            min=0.0,
        ),
    ] = None,
) -> None:
    """Distance between a point and a line (signed) or segment."""
    session: Session = ctx.obj
    delta = session.settings.geometry.line_hit_delta if tolerance is None else tolerance

    def query():
        point, a1, a2 = parse_points(p, a, b)
        result = distance_point_line(point, a1, a2, segment)
        print_result("distance", result)
        print_result("on line", line_contains_point(a1, a2, segment, point, delta))
        return result

    _run(ctx, "line-distance", query, p=p, a=a, b=b, segment=segment, tolerance=delta)


@app.command()
def intersect(
    ctx: typer.Context,
    a1: Annotated[str, typer.Argument(help="First point of line A", show_default=False)],
    a2: Annotated[str, typer.Argument(help="Second point of line A", show_default=False)],
    b1: Annotated[str, typer.Argument(help="First point of line B", show_default=False)],
    b2: Annotated[str, typer.Argument(help="Second point of line B", show_default=False)],
    segments: Annotated[
        bool,
        typer.Option(
            "--segments",
            "-s",
            help="Intersect the segments instead of the infinite lines",
        ),
    ] = False,
) -> None:
    """Intersection point of two lines or segments."""

    def query():
        points = parse_points(a1, a2, b1, b2)
        if segments:
            result = intersect_line_segments(*points)
        else:
            result = intersect_lines(*points)
        print_result("intersection", result)
        return result

    _run(ctx, "intersect", query, a1=a1, a2=a2, b1=b1, b2=b2, segments=segments)


@app.command()
def contains(
    ctx: typer.Context,
    p: Annotated[str, typer.Argument(help="Query point", show_default=False)],
    vertex: Annotated[
        list[str] | None,
        typer.Option(
            "--vertex",
            help="Polygon vertex (repeat for each vertex, in order)",
        ),
    ] = None,
) -> None:
    """Check whether a polygon contains a point."""
    if not vertex:
        print_error("No polygon given", details="Pass the vertices with --vertex x,y")
        raise typer.Exit(code=1)

    def query():
        point, *polygon = parse_points(p, *vertex)
        result = polygon_contains_point(polygon, point)
        print_result("contains", result)
        return result

    _run(ctx, "contains", query, p=p, vertices=vertex)


@app.command()
def circumcircle(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="First point on the circle", show_default=False)],
    radius_point: Annotated[str, typer.Argument(help="Second point on the circle", show_default=False)],
    end: Annotated[str, typer.Argument(help="Third point on the circle", show_default=False)],
    point: Annotated[
        str | None,
        typer.Option(
            "--point",
            "-p",
            help="Also check whether the arc from start through radius point to end contains this point",
        ),
    ] = None,
) -> None:
    """Circle through three points (the circle of a three-point arc)."""
    session: Session = ctx.obj
    delta = session.settings.geometry.arc_hit_delta

    def query():
        texts = (start, radius_point, end) if point is None else (start, radius_point, end, point)
        s, r, e, *rest = parse_points(*texts)
        result = calc_circum_circle(s, r, e)
        if result is None:
            print_result("circle", None)
        else:
            center, radius = result
            print_result("center", center)
            print_result("radius", radius)
        if rest:
            arc = [PointF(float(q.x), float(q.y)) for q in (s, r, e, *rest)]
            print_result("on arc", arc_contains_point(*arc, delta))
        return result

    _run(ctx, "circumcircle", query, start=start, radius_point=radius_point, end=end, point=point)


@app.command()
def rotate(
    ctx: typer.Context,
    p: Annotated[str, typer.Argument(help="Point to rotate", show_default=False)],
    center: Annotated[
        str,
        typer.Option(
            "--center",
            "-c",
            help="Center of rotation",
        ),
    ] = "0,0",
    angle: Annotated[
        float,
        typer.Option(
            "--angle",
            "-a",
            help="Rotation angle in degrees",
        ),
    ] = 0.0,
) -> None:
    """Rotate a point around a center."""

    def query():
        point, c = parse_points(p, center)
        result = rotate_point(c, angle, point)
        print_result("rotated", result)
        return result

    _run(ctx, "rotate", query, p=p, center=center, angle=angle)


@app.command()
def resize(
    ctx: typer.Context,
    width: Annotated[int, typer.Option("--width", help="Current width", min=0)],
    height: Annotated[int, typer.Option("--height", help="Current height", min=0)],
    handle: Annotated[
        str,
        typer.Option(
            "--handle",
            help="Dragged corner or edge (top-left|top|top-right|right|bottom-right|bottom|bottom-left|left)",
        ),
    ],
    dx: Annotated[int, typer.Option("--dx", help="Horizontal mouse movement")] = 0,
    dy: Annotated[int, typer.Option("--dy", help="Vertical mouse movement")] = 0,
    angle: Annotated[
        int,
        typer.Option(
            "--angle",
            "-a",
            help="Rotation of the shape in tenths of a degree",
        ),
    ] = 0,
    maintain_aspect: Annotated[
        bool,
        typer.Option(
            "--maintain-aspect",
            help="Keep the width/height ratio",
        ),
    ] = False,
    mirrored: Annotated[
        bool,
        typer.Option(
            "--mirrored",
            help="Move the opposite edge as well; the center stays in place",
        ),
    ] = False,
) -> None:
    """Resize a rotated rectangle by dragging a corner or an edge."""
    try:
        resize_handle = ResizeHandle(handle.lower())
    except ValueError:
        print_error(
            f"Invalid handle: {handle}",
            details=f"Valid values: {', '.join(h.value for h in ResizeHandle)}",
        )
        raise typer.Exit(code=1)

    session: Session = ctx.obj
    config = ResizeConfig(
        **session.settings.resize.model_dump(exclude={"maintain_aspect", "mirrored_resize"}),
        maintain_aspect=maintain_aspect,
        mirrored_resize=mirrored,
    )

    def query():
        delta_x, delta_y, sin, cos = transform_mouse_movement(dx, dy, angle)
        move = move_rectangle_corner if resize_handle.is_corner else move_rectangle_edge
        result = move(
            resize_handle,
            width,
            height,
            delta_x,
            delta_y,
            cos,
            sin,
            config.modifiers(),
            center_pos_factor_x=config.center_pos_factor_x,
            center_pos_factor_y=config.center_pos_factor_y,
            div_factor_x=config.align_div_factor_x,
            div_factor_y=config.align_div_factor_y,
        )
        print_result("size", f"{result.width} x {result.height}")
        print_points("center offset", [result.center_offset])
        print_result("exact", result.success)
        return result

    _run(ctx, "resize", query, width=width, height=height, handle=handle, dx=dx, dy=dy, angle=angle)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
