"""Small numeric helpers shared by the curve code."""

import math

from ..core.data_models import Point


def distance(p0: Point, p1: Point) -> float:
    return math.hypot(p1.x - p0.x, p1.y - p0.y)


def squared_distance(p0: Point, p1: Point) -> float:
    """Distance without the square root, for threshold comparisons."""
    return (p1.x - p0.x) ** 2 + (p1.y - p0.y) ** 2


def mod(x: float, m: float) -> float:
    """Modulo whose result takes the sign of ``m``."""
    return (x % m + m) % m


def to_radians(angle: float) -> float:
    return angle * (math.pi / 180)


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def angle_between(v0: Point, v1: Point) -> float:
    """Signed angle in radians rotating vector ``v0`` onto ``v1``.

    Positive when the rotation is counter-clockwise in a y-up frame. The cosine
    is clamped so rounding can never leave the domain of ``acos``.
    """
    dot = v0.x * v1.x + v0.y * v1.y
    norm = math.sqrt((v0.x**2 + v0.y**2) * (v1.x**2 + v1.y**2))
    sign = -1 if v0.x * v1.y - v0.y * v1.x < 0 else 1
    return sign * math.acos(clamp(dot / norm, -1.0, 1.0))
