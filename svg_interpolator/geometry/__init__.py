"""Curve evaluation and arc-length based sampling."""

from .arc_length import (
    ArcLengthApproximation,
    ArcLengthParameterization,
    approximate_arc_length,
)
from .curves import (
    point_on_arc,
    point_on_cubic_bezier,
    point_on_line,
    point_on_quadratic_bezier,
)
from .emitter import (
    emit_points,
    points_for_arc,
    points_for_bezier,
    points_for_line,
    points_for_quadratic_bezier,
)

__all__ = [
    "ArcLengthApproximation",
    "ArcLengthParameterization",
    "approximate_arc_length",
    "point_on_arc",
    "point_on_cubic_bezier",
    "point_on_line",
    "point_on_quadratic_bezier",
    "emit_points",
    "points_for_arc",
    "points_for_bezier",
    "points_for_line",
    "points_for_quadratic_bezier",
]
