"""Evenly spaced point emission along curves."""

import math
from functools import partial
from typing import Callable, List

from ..core.data_models import Point
from .arc_length import ArcLengthParameterization, LineParameterization
from .curves import point_on_arc, point_on_cubic_bezier, point_on_quadratic_bezier


def emit_points(
    parameterization: Callable[[float], Point], arc_length: float, spacing: float
) -> List[Point]:
    """Emit points at uniform steps of normalized distance.

    ``floor(arc_length / spacing)`` steps are taken, so both ends are always
    included: ``u = 0, 1/steps, ..., 1``. A segment shorter than ``spacing``
    yields only its endpoint.
    """
    steps = math.floor(arc_length / spacing)
    if steps == 0:
        return [parameterization(1.0)]
    return [parameterization(i / steps) for i in range(steps + 1)]


def points_for_line(start: Point, end: Point, spacing: float) -> List[Point]:
    """Points on the straight line from ``start`` to ``end``, ``spacing`` apart."""
    line = LineParameterization(start, end)
    return emit_points(line, line.arc_length, spacing)


def points_for_quadratic_bezier(
    start: Point, cp: Point, end: Point, resolution: int, spacing: float
) -> List[Point]:
    """Points on a quadratic Bézier curve, evenly spaced by arc length."""
    curve = ArcLengthParameterization(
        resolution, partial(point_on_quadratic_bezier, start, cp, end)
    )
    return emit_points(curve, curve.arc_length, spacing)


def points_for_bezier(
    start: Point, cp1: Point, cp2: Point, end: Point, resolution: int, spacing: float
) -> List[Point]:
    """Points on a cubic Bézier curve, evenly spaced by arc length.

    The curve is measured with ``resolution`` polyline steps before the
    points are placed.
    """
    curve = ArcLengthParameterization(
        resolution, partial(point_on_cubic_bezier, start, cp1, cp2, end)
    )
    return emit_points(curve, curve.arc_length, spacing)


def points_for_arc(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
    resolution: int,
    spacing: float,
) -> List[Point]:
    """Points on an SVG elliptical arc, evenly spaced by arc length.

    Returned as plain points; evaluate :func:`point_on_arc` directly for the
    resolved center, radii and angles.
    """
    curve = ArcLengthParameterization(
        resolution,
        partial(point_on_arc, start, rx, ry, rotation, large_arc, sweep, end),
    )
    return [Point(p.x, p.y) for p in emit_points(curve, curve.arc_length, spacing)]
