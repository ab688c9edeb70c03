"""Dot preview of a point cloud rendered with matplotlib."""

import logging
from pathlib import Path
from typing import Sequence, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from ..core.data_models import Point  # noqa: E402
from ..core.error_handling import EmptyPointCloudError  # noqa: E402
from ..generators.post_processing import bounding_box  # noqa: E402

logger = logging.getLogger(__name__)


def render_preview(
    points: Sequence[Point],
    output_path: Union[str, Path],
    dot_radius: float = 2.0,
    dpi: int = 100,
    padding: float = 10.0,
) -> Path:
    """Draw each point as a grey dot on a white PNG.

    The y axis points down, as in SVG.

    Raises:
        EmptyPointCloudError: If there is nothing to draw
    """
    if not points:
        raise EmptyPointCloudError("Cannot render a preview of an empty point cloud")

    output_path = Path(output_path)
    bbox = bounding_box(points)
    width = bbox.width + 2 * padding
    height = bbox.height + 2 * padding

    # Keep the figure a reasonable size whatever the path units are
    scale = 8.0 / max(width, height)
    fig, ax = plt.subplots(figsize=(width * scale, height * scale), dpi=dpi)
    try:
        ax.set_xlim(bbox.x - padding, bbox.x + bbox.width + padding)
        ax.set_ylim(bbox.y + bbox.height + padding, bbox.y - padding)
        ax.set_aspect("equal")
        ax.axis("off")
        fig.patch.set_facecolor("white")

        # Marker size is in points squared; convert the radius from data units
        marker_points = dot_radius * scale * 72
        ax.scatter(
            [p.x for p in points],
            [p.y for p in points],
            s=marker_points**2,
            c="#aaaaaa",
            linewidths=0,
        )
        fig.savefig(output_path, dpi=dpi, facecolor="white")
    finally:
        plt.close(fig)

    logger.info(f"Preview with {len(points)} points saved to {output_path}")
    return output_path
