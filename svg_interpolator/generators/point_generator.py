"""Point generator: samples path commands into an evenly spaced point cloud."""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, TYPE_CHECKING

from ..core.commands import PathCommand
from ..core.data_models import BoundingBox, Edge, Point, PointCloud, SamplingConfig
from ..core.logging_config import log_performance
from ..geometry.emitter import (
    points_for_arc,
    points_for_bezier,
    points_for_line,
    points_for_quadratic_bezier,
)
from . import post_processing
from .fill import fill_points, tessellate
from .interpreter import interpret_path
from .triangulation import Triangulator, delaunay_triangulate

if TYPE_CHECKING:
    from ..core.config import Config

logger = logging.getLogger(__name__)


class PointGenerator:
    """Generates evenly spaced points marking the boundary and fill of a path.

    Each operation replaces the generator's :class:`PointCloud` with a new
    value and returns the generator, so calls chain::

        points = (
            PointGenerator(resolution=1000, spacing=10)
            .generate(commands)
            .fill_with_points(15, 32)
            .scale(1.0)
            .points
        )

    Operations are not reentrant; run them one at a time on an instance.
    """

    def __init__(
        self,
        resolution: int,
        spacing: float,
        triangulator: Optional[Triangulator] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            resolution: Polyline subdivisions used to measure each curve.
                        Higher values space points more accurately but cost more.
            spacing: Distance between generated points; points closer than
                     this are removed.
            triangulator: Triangulation used by the fill; defaults to Delaunay
        """
        self.config = SamplingConfig(spacing=spacing, resolution=resolution)
        self.triangulator = triangulator or delaunay_triangulate
        self.cloud = PointCloud()

    @classmethod
    def from_config(
        cls, config: "Config", triangulator: Optional[Triangulator] = None
    ) -> "PointGenerator":
        """Create a generator from the ``[sampling]`` configuration section."""
        sampling = config.sampling_config()
        return cls(sampling.resolution, sampling.spacing, triangulator=triangulator)

    @property
    def resolution(self) -> int:
        return self.config.resolution

    @property
    def spacing(self) -> float:
        return self.config.spacing

    @property
    def points(self) -> List[Point]:
        return list(self.cloud.points)

    @property
    def center(self) -> Point:
        return self.cloud.center

    def _replace_points(self, points: Sequence[Point]) -> "PointGenerator":
        self.cloud = replace(self.cloud, points=tuple(points))
        return self

    # Single segments

    def line(self, start: Point, end: Point) -> List[Point]:
        """Points on the line from ``start`` to ``end``, ``spacing`` apart."""
        return points_for_line(start, end, self.spacing)

    def curve(self, start: Point, end: Point, cp1: Point, cp2: Point) -> List[Point]:
        """Points on the cubic Bézier curve, at least ``spacing`` apart."""
        return points_for_bezier(start, cp1, cp2, end, self.resolution, self.spacing)

    def quadratic(self, start: Point, end: Point, cp: Point) -> List[Point]:
        """Points on the quadratic Bézier curve, at least ``spacing`` apart."""
        return points_for_quadratic_bezier(
            start, cp, end, self.resolution, self.spacing
        )

    def arc(
        self,
        start: Point,
        end: Point,
        radii: Point,
        rotation: float,
        large_arc: bool,
        sweep: bool,
    ) -> List[Point]:
        """Points on the SVG elliptical arc, at least ``spacing`` apart."""
        return points_for_arc(
            start,
            radii.x,
            radii.y,
            rotation,
            large_arc,
            sweep,
            end,
            self.resolution,
            self.spacing,
        )

    # Whole cloud

    @log_performance
    def generate(self, commands: Sequence[PathCommand]) -> "PointGenerator":
        """Replace the cloud with the cleaned, recentered points of ``commands``."""
        points = interpret_path(commands, self.config)
        logger.info(f"Generated {len(points)} points from {len(commands)} commands")
        return self._replace_points(points)

    def clean(self, points: Sequence[Point], tolerance: float = 0.0) -> List[Point]:
        """Return ``points`` without those closer than ``spacing - tolerance``."""
        return post_processing.clean_points(points, self.spacing, tolerance)

    def bounding_box(self) -> BoundingBox:
        return post_processing.bounding_box(self.cloud.points)

    def recenter(self) -> "PointGenerator":
        """Shift all points so the bounding box center is at 0,0."""
        return self._replace_points(post_processing.recenter_points(self.cloud.points))

    def scale(self, factor: float) -> "PointGenerator":
        return self._replace_points(
            post_processing.scale_points(self.cloud.points, factor)
        )

    def translate(self, dx: float, dy: float) -> "PointGenerator":
        """Shift all points and the tracked center by ``(dx, dy)``."""
        center = Point(self.cloud.center.x + dx, self.cloud.center.y + dy)
        self.cloud = PointCloud(
            points=tuple(post_processing.translate_points(self.cloud.points, dx, dy)),
            center=center,
        )
        return self

    def tessellate(self, min_length: float, max_length: float) -> List[Edge]:
        """Triangle edges that would tile the shape, limited to the length band."""
        return tessellate(self.cloud.points, min_length, max_length, self.triangulator)

    @log_performance
    def fill_with_points(
        self, min_length: float, max_length: float
    ) -> "PointGenerator":
        """Densify the cloud with midpoints of mid-length triangle edges."""
        before = len(self.cloud)
        points = fill_points(
            self.cloud.points,
            self.spacing,
            min_length,
            max_length,
            self.triangulator,
        )
        logger.info(f"Fill grew the cloud from {before} to {len(points)} points")
        return self._replace_points(points)
