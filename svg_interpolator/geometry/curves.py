"""Closed-form point evaluation for the supported curve primitives.

Every evaluator maps ``t`` in [0, 1] to a point. Values outside that range are
accepted but not meaningful.
"""

import math

from ..core.data_models import ArcPoint, Point
from .primitives import angle_between, lerp, mod, to_radians


def point_on_line(p0: Point, p1: Point, t: float) -> Point:
    return Point(lerp(p0.x, p1.x, t), lerp(p0.y, p1.y, t))


def point_on_quadratic_bezier(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    def coordinate(x0: float, x1: float, x2: float) -> float:
        return (1 - t) ** 2 * x0 + 2 * t * (1 - t) * x1 + t**2 * x2

    return Point(coordinate(p0.x, p1.x, p2.x), coordinate(p0.y, p1.y, p2.y))


def point_on_cubic_bezier(
    p0: Point, p1: Point, p2: Point, p3: Point, t: float
) -> Point:
    def coordinate(x0: float, x1: float, x2: float, x3: float) -> float:
        return (
            (1 - t) ** 3 * x0
            + 3 * t * (1 - t) ** 2 * x1
            + 3 * (1 - t) * t**2 * x2
            + t**3 * x3
        )

    return Point(
        coordinate(p0.x, p1.x, p2.x, p3.x), coordinate(p0.y, p1.y, p2.y, p3.y)
    )


def point_on_arc(
    p0: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    p1: Point,
    t: float,
) -> Point:
    """Evaluate an SVG elliptical arc at ``t``.

    Follows the endpoint to center conversion from the SVG implementation
    notes (https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter),
    including the out-of-range radii corrections.

    Args:
        p0: Start point
        rx: X radius
        ry: Y radius
        x_axis_rotation: Rotation of the ellipse's x axis in degrees
        large_arc: SVG large-arc flag
        sweep: SVG sweep flag
        p1: End point
        t: Position along the arc in [0, 1]

    Returns:
        An :class:`ArcPoint` carrying the resolved angles, center and radii.
        Coincident endpoints return ``p0`` itself and a zero radius returns a
        plain point on the straight line between the endpoints.
    """
    rx = abs(rx)
    ry = abs(ry)
    rotation = to_radians(mod(x_axis_rotation, 360))

    # Identical endpoints omit the arc entirely
    if p0.x == p1.x and p0.y == p1.y:
        return p0

    # A zero radius degrades to a straight segment
    if rx == 0 or ry == 0:
        return point_on_line(p0, p1, t)

    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)

    # Step 1: move the midpoint to the origin and undo the rotation
    dx = (p0.x - p1.x) / 2
    dy = (p0.y - p1.y) / 2
    tx = cos_r * dx + sin_r * dy
    ty = -sin_r * dx + cos_r * dy

    # Scale radii up when the ellipse cannot reach both endpoints
    radii_check = tx**2 / rx**2 + ty**2 / ry**2
    if radii_check > 1:
        rx = math.sqrt(radii_check) * rx
        ry = math.sqrt(radii_check) * ry

    # Step 2: center in the transformed frame
    numerator = rx**2 * ry**2 - rx**2 * ty**2 - ry**2 * tx**2
    denominator = rx**2 * ty**2 + ry**2 * tx**2
    radicand = max(numerator / denominator, 0.0)
    coefficient = (1 if large_arc != sweep else -1) * math.sqrt(radicand)
    tcx = coefficient * (rx * ty / ry)
    tcy = coefficient * -(ry * tx / rx)

    # Step 3: center in the original frame
    center = Point(
        cos_r * tcx - sin_r * tcy + (p0.x + p1.x) / 2,
        sin_r * tcx + cos_r * tcy + (p0.y + p1.y) / 2,
    )

    # Step 4: start angle and signed sweep
    start_vector = Point((tx - tcx) / rx, (ty - tcy) / ry)
    start_angle = angle_between(Point(1.0, 0.0), start_vector)

    end_vector = Point((-tx - tcx) / rx, (-ty - tcy) / ry)
    sweep_angle = angle_between(start_vector, end_vector)

    if not sweep and sweep_angle > 0:
        sweep_angle -= 2 * math.pi
    elif sweep and sweep_angle < 0:
        sweep_angle += 2 * math.pi
    # Keep the sign: the sweep stays within (-2pi, 2pi)
    sweep_angle = math.fmod(sweep_angle, 2 * math.pi)

    angle = start_angle + sweep_angle * t
    ex = rx * math.cos(angle)
    ey = ry * math.sin(angle)

    return ArcPoint(
        x=cos_r * ex - sin_r * ey + center.x,
        y=sin_r * ex + cos_r * ey + center.y,
        start_angle=start_angle,
        end_angle=start_angle + sweep_angle,
        angle=angle,
        center=center,
        rx=rx,
        ry=ry,
    )
