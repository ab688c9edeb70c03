"""Whole-cloud post-processing: spacing cleanup, bounds and transforms.

All functions take a point sequence and return a new list; none mutate their
input.
"""

import logging
from typing import List, Sequence, Set, Tuple

import numpy as np
from scipy.spatial import cKDTree

from ..core.data_models import BoundingBox, Point
from ..core.error_handling import EmptyPointCloudError

logger = logging.getLogger(__name__)


def find_close_pairs(
    points: Sequence[Point], min_distance: float
) -> List[Tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, closer than ``min_distance``.

    Pairs are ordered by ``i`` then ``j``. The strict comparison is made on
    squared distances, so points exactly ``min_distance`` apart are not a pair.
    """
    if len(points) < 2 or min_distance <= 0:
        return []

    threshold = min_distance**2
    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    # Query slightly wide, then apply the exact strict test below
    candidates = cKDTree(coords).query_pairs(
        min_distance * (1 + 1e-9), output_type="ndarray"
    )
    if len(candidates) == 0:
        return []

    candidates = candidates[np.lexsort((candidates[:, 1], candidates[:, 0]))]
    pairs = []
    for i, j in candidates:
        a, b = points[i], points[j]
        if (b.x - a.x) ** 2 + (b.y - a.y) ** 2 < threshold:
            pairs.append((int(i), int(j)))
    return pairs


def clean_points(
    points: Sequence[Point], spacing: float, tolerance: float = 0.0
) -> List[Point]:
    """Drop points closer than ``spacing - tolerance`` to an earlier kept point.

    Close pairs are visited in index order. For each pair where neither point
    has been removed yet, the later point is removed. This greedy pass keeps
    earlier points and is order dependent; it is not a minimum removal.

    Args:
        points: Points in their emitted order
        spacing: Target minimum distance between points
        tolerance: Slack subtracted from ``spacing`` to let more points in

    Returns:
        Surviving points in their original order
    """
    removed: Set[int] = set()
    for i, j in find_close_pairs(points, spacing - tolerance):
        if i in removed or j in removed:
            continue
        removed.add(j)

    if removed:
        logger.debug(
            f"Removed {len(removed)} of {len(points)} points "
            f"closer than {spacing - tolerance}"
        )
    return [p for idx, p in enumerate(points) if idx not in removed]


def bounding_box(points: Sequence[Point]) -> BoundingBox:
    """Bounds of the live point set.

    Raises:
        EmptyPointCloudError: If there are no points
    """
    if not points:
        raise EmptyPointCloudError(
            "Cannot compute the bounding box of an empty point cloud"
        )

    x_coords = [p.x for p in points]
    y_coords = [p.y for p in points]
    x_min, x_max = min(x_coords), max(x_coords)
    y_min, y_max = min(y_coords), max(y_coords)

    return BoundingBox(x=x_min, y=y_min, width=x_max - x_min, height=y_max - y_min)


def recenter_points(points: Sequence[Point]) -> List[Point]:
    """Shift points so the bounding box center sits at the origin.

    This is the center of the bounds, not the centroid of the points.

    Raises:
        EmptyPointCloudError: If there are no points
    """
    bbox = bounding_box(points)
    x_shift = bbox.x + bbox.width / 2
    y_shift = bbox.y + bbox.height / 2
    return [Point(p.x - x_shift, p.y - y_shift) for p in points]


def scale_points(points: Sequence[Point], factor: float) -> List[Point]:
    return [Point(p.x * factor, p.y * factor) for p in points]


def translate_points(points: Sequence[Point], dx: float, dy: float) -> List[Point]:
    return [Point(p.x + dx, p.y + dy) for p in points]
