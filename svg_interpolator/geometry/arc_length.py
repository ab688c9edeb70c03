"""Arc-length measurement and re-parameterization of curves.

Sampling a curve at uniform steps of its parameter ``t`` bunches points where
the curve moves slowly. These helpers measure the curve as a polyline and map
a fraction of its length back to the ``t`` that reaches it, so points can be
placed at uniform distances instead.
"""

import bisect
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..core.constants import DEFAULT_RESOLUTION
from ..core.data_models import ArcLengthMapEntry, Point
from .curves import point_on_line
from .primitives import clamp, distance

# A curve with all parameters but ``t`` fixed.
CurveFunction = Callable[[float], Point]


@dataclass(frozen=True)
class ArcLengthApproximation:
    """Result of measuring a curve as a polyline."""

    arc_length: float
    arc_length_map: Tuple[ArcLengthMapEntry, ...]
    approximation_lines: Tuple[Tuple[Point, Point], ...]


def approximate_arc_length(
    resolution: int, curve: CurveFunction
) -> ArcLengthApproximation:
    """Measure ``curve`` by summing ``resolution`` polyline steps.

    The map holds one entry per step, starting at ``t = 0`` and always ending
    with ``t = 1``. ``t`` strictly increases along the map and the cumulative
    length never decreases.

    Args:
        resolution: Number of subdivisions; falls back to the default when falsy
        curve: Function of ``t`` only

    Returns:
        Total length, the ``(t, arc_length)`` map and the measured segments
    """
    resolution = resolution or DEFAULT_RESOLUTION

    total = 0.0
    arc_length_map: List[ArcLengthMapEntry] = []
    lines: List[Tuple[Point, Point]] = []

    previous = curve(0)
    for i in range(resolution):
        t = clamp(i * (1 / resolution), 0, 1)
        current = curve(t)
        total += distance(previous, current)
        lines.append((previous, current))
        arc_length_map.append(ArcLengthMapEntry(t=t, arc_length=total))
        previous = current

    # Last stretch to the endpoint
    current = curve(1)
    lines.append((previous, current))
    total += distance(previous, current)
    arc_length_map.append(ArcLengthMapEntry(t=1, arc_length=total))

    return ArcLengthApproximation(
        arc_length=total,
        arc_length_map=tuple(arc_length_map),
        approximation_lines=tuple(lines),
    )


class ArcLengthParameterization:
    """Curve re-parameterized by normalized distance.

    Calling the instance with ``u`` in [0, 1] returns the point that lies at
    ``u`` times the curve's total length from its start.
    """

    def __init__(self, resolution: int, curve: CurveFunction) -> None:
        self.curve = curve
        self.approximation = approximate_arc_length(resolution, curve)
        self._lengths = [
            entry.arc_length for entry in self.approximation.arc_length_map
        ]

    @property
    def arc_length(self) -> float:
        return self.approximation.arc_length

    def t_for(self, u: float) -> float:
        """Parameter ``t`` that lies at fraction ``u`` of the arc length."""
        u = clamp(u, 0, 1)
        target = u * self.arc_length
        entries = self.approximation.arc_length_map

        # First entry whose cumulative length reaches the target
        index = min(bisect.bisect_left(self._lengths, target), len(entries) - 1)
        entry = entries[index]
        if index > 0:
            previous_t = entries[index - 1].t
            previous_length = entries[index - 1].arc_length
        else:
            previous_t = 0.0
            previous_length = 0.0

        end_diff = entry.arc_length - target
        start_diff = target - previous_length
        span = end_diff + start_diff
        factor = start_diff / span if span else 0.0

        return previous_t + (entry.t - previous_t) * factor

    def __call__(self, u: float) -> Point:
        return self.curve(self.t_for(u))


class LineParameterization:
    """Straight segment, whose parameter already measures distance."""

    def __init__(self, start: Point, end: Point) -> None:
        self.start = start
        self.end = end
        self.arc_length = distance(start, end)

    def __call__(self, u: float) -> Point:
        return point_on_line(self.start, self.end, u)
