"""Data models for sampled geometry."""

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .constants import DEFAULT_RESOLUTION


@dataclass(frozen=True)
class Point:
    """Represents an immutable 2D point."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Calculate distance to another point."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def __add__(self, other: "Point") -> "Point":
        """Add two points."""
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        """Subtract two points."""
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ArcPoint(Point):
    """A point on an elliptical arc with the resolved arc parameters attached.

    Angles are in radians and describe the ellipse before rotation.
    Equality compares the attached parameters too, so an arc point never
    equals a plain :class:`Point` at the same coordinates.
    """

    start_angle: float
    end_angle: float
    angle: float
    center: Point
    rx: float
    ry: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounds of a point set."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class ArcLengthMapEntry:
    """Cumulative arc length reached at parameter ``t``."""

    t: float
    arc_length: float


@dataclass(frozen=True)
class Edge:
    """Undirected segment between two points of a triangulation."""

    p1: Point
    p2: Point

    @property
    def squared_length(self) -> float:
        return (self.p2.x - self.p1.x) ** 2 + (self.p2.y - self.p1.y) ** 2

    def midpoint(self) -> Point:
        return Point(
            self.p1.x + (self.p2.x - self.p1.x) / 2,
            self.p1.y + (self.p2.y - self.p1.y) / 2,
        )


@dataclass(frozen=True)
class SamplingConfig:
    """How finely curves are measured and how far apart points are placed.

    ``resolution`` is the number of polyline subdivisions used to measure a
    curve; higher values give truer spacing at linear cost. ``spacing`` is the
    target distance between emitted points and the minimum distance kept by
    cleaning.
    """

    spacing: float
    resolution: int = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        """Validate sampling parameters."""
        if isinstance(self.resolution, bool) or not isinstance(self.resolution, int):
            raise ValueError(
                f"Resolution must be an integer, got {type(self.resolution).__name__}"
            )
        if self.resolution <= 0:
            raise ValueError("Resolution must be positive")
        if self.spacing <= 0:
            raise ValueError("Spacing must be positive")


@dataclass(frozen=True)
class PointCloud:
    """Ordered sampled points plus the net translation applied so far.

    ``center`` tracks translations only; it is not recomputed from the points.
    """

    points: Tuple[Point, ...] = ()
    center: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points
