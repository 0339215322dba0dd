"""Corridor polygons around spanning-tree connections."""

import math
import warnings
from typing import List, Sequence

from shapely.geometry import Polygon

from ..core.config import DEFAULT_DIAGONAL, DEFAULT_QUAD_SEGS, DEFAULT_WIDTH_RATIO
from ..core.errors import DegenerateGeometryWarning
from ..core.geometry_utils import bbox_diagonal, buffer_segment, collection_bounds
from ..core.types import DistanceMetric, Shape
from .graph import ConnectionEdge


def corridor_half_width(
    shapes: Sequence[Shape],
    corridor_factor: float = 1.0,
    width_ratio: float = DEFAULT_WIDTH_RATIO,
    default_diagonal: float = DEFAULT_DIAGONAL,
    distance_metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> float:
    """Corridor half-width scaled to the overall extent of ``shapes``.

    The half-width is ``diagonal * width_ratio * corridor_factor`` where
    ``diagonal`` is the bounding-box diagonal of all shapes. A zero or
    unmeasurable diagonal is replaced by ``default_diagonal`` so corridors
    never collapse to zero width by accident.

    Args:
        shapes: Input shapes
        corridor_factor: Linear width multiplier
        width_ratio: Fraction of the diagonal used at ``corridor_factor=1``
        default_diagonal: Substitute for a zero or non-finite diagonal
        distance_metric: Distance metric (kilometres under ``GEODESIC``)

    Returns:
        Half-width in the metric's units

    Examples:
        >>> a = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> b = Polygon([(2, 3), (3, 3), (3, 4), (2, 4)])
        >>> corridor_half_width([a, b], distance_metric=DistanceMetric.PLANAR)  # diagonal 5
        0.1
    """
    diagonal = bbox_diagonal(collection_bounds(shapes), distance_metric)

    if not math.isfinite(diagonal) or diagonal <= 0:
        warnings.warn(
            f"Bounding-box diagonal is {diagonal}; using default diagonal {default_diagonal}",
            DegenerateGeometryWarning,
            stacklevel=2,
        )
        diagonal = default_diagonal

    return diagonal * width_ratio * corridor_factor


def build_corridors(
    edges: Sequence[ConnectionEdge],
    half_width: float,
    distance_metric: DistanceMetric = DistanceMetric.GEODESIC,
    quad_segs: int = DEFAULT_QUAD_SEGS,
) -> List[Polygon]:
    """Buffer the segment of every edge into a corridor polygon.

    Returns:
        One polygon per edge, in edge order
    """
    return [
        buffer_segment(edge.segment, half_width, distance_metric, quad_segs)
        for edge in edges
    ]


__all__ = ['corridor_half_width', 'build_corridors']
