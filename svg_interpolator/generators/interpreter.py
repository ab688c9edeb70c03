"""Walks path commands and turns each one into evenly spaced points."""

import logging
from typing import List, Sequence

from ..core.commands import (
    CubicCurveTo,
    EllipticalArcTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    VerticalLineTo,
)
from ..core.data_models import Point, SamplingConfig
from ..core.error_handling import EmptyPathError, UnsupportedCommandError
from ..geometry.emitter import (
    points_for_arc,
    points_for_bezier,
    points_for_line,
    points_for_quadratic_bezier,
)
from .post_processing import clean_points, recenter_points

logger = logging.getLogger(__name__)


def points_for_command(
    command: PathCommand, current: Point, config: SamplingConfig
) -> List[Point]:
    """Points for a single command drawn from ``current``.

    Raises:
        UnsupportedCommandError: If the command cannot be interpolated
    """
    if isinstance(command, MoveTo):
        return []
    elif isinstance(command, (LineTo, HorizontalLineTo, VerticalLineTo)):
        return points_for_line(current, command.end_point(current), config.spacing)
    elif isinstance(command, CubicCurveTo):
        return points_for_bezier(
            current,
            command.cp1,
            command.cp2,
            command.end_point(current),
            config.resolution,
            config.spacing,
        )
    elif isinstance(command, QuadraticCurveTo):
        return points_for_quadratic_bezier(
            current,
            command.cp,
            command.end_point(current),
            config.resolution,
            config.spacing,
        )
    elif isinstance(command, EllipticalArcTo):
        return points_for_arc(
            current,
            command.rx,
            command.ry,
            command.rotation,
            command.large_arc,
            command.sweep,
            command.end_point(current),
            config.resolution,
            config.spacing,
        )
    raise UnsupportedCommandError(command.code)


def trace_path(commands: Sequence[PathCommand], config: SamplingConfig) -> List[Point]:
    """Concatenate the points of every command in drawing order.

    The current point starts at the first command's end point. Joints shared
    by neighbouring segments appear twice; unsupported commands are logged and
    skipped.

    Raises:
        EmptyPathError: If there are no commands
    """
    if not commands:
        raise EmptyPathError("Cannot interpolate a path with no commands")

    origin = Point(0.0, 0.0)
    current = commands[0].end_point(origin) or origin
    points: List[Point] = []

    for command in commands:
        try:
            emitted = points_for_command(command, current, config)
        except UnsupportedCommandError as e:
            logger.warning(f"{e.message}; skipping")
            emitted = []
        else:
            logger.debug(f"Command {command.code}: {len(emitted)} points")

        points.extend(emitted)
        current = command.end_point(current) or current

    return points


def interpret_path(
    commands: Sequence[PathCommand], config: SamplingConfig
) -> List[Point]:
    """Trace a path, drop points closer than the spacing and recenter."""
    points = clean_points(trace_path(commands, config), config.spacing)
    # A path of moves only has nothing to recenter
    if not points:
        return points
    return recenter_points(points)
