"""Approximate shortest connection between two shapes."""

import warnings
from typing import Tuple

import numpy as np
from shapely.geometry import LineString

from ..core.distance import pairwise_distances, point_distance
from ..core.errors import DegenerateGeometryWarning, ValidationError
from ..core.geometry_utils import centroid_coord
from ..core.types import DistanceMetric, Shape
from .sampling import sample_boundary


def find_connector(
    shape_a: Shape,
    shape_b: Shape,
    samples_per_ring: int = 24,
    distance_metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> Tuple[LineString, float]:
    """Find an approximate shortest segment joining two shapes.

    Both boundaries are sampled with :func:`sample_boundary` and every pair of
    samples is compared. The first minimum in sampling order wins, so the
    result is deterministic. Accuracy improves with ``samples_per_ring`` at
    quadratic cost; this is not an exact closest-point computation.

    If either shape yields no samples, the centroids of the two shapes are
    connected instead and a :class:`DegenerateGeometryWarning` is emitted.

    Args:
        shape_a: First shape
        shape_b: Second shape
        samples_per_ring: Target number of boundary samples per outer ring
        distance_metric: Distance metric

    Returns:
        Tuple of (segment from shape_a to shape_b, segment length)

    Raises:
        ValidationError: If a shape has neither samples nor a centroid
    """
    samples_a = sample_boundary(shape_a, samples_per_ring)
    samples_b = sample_boundary(shape_b, samples_per_ring)

    if len(samples_a) == 0 or len(samples_b) == 0:
        segment, distance = _centroid_connector(shape_a, shape_b, distance_metric)
        warnings.warn(
            "Boundary sampling produced no points; connecting centroids instead",
            DegenerateGeometryWarning,
            stacklevel=2,
        )
        return segment, distance

    distances = pairwise_distances(samples_a, samples_b, distance_metric)
    # argmin returns the first occurrence in row-major order
    i, j = np.unravel_index(np.argmin(distances), distances.shape)

    segment = LineString([tuple(samples_a[i]), tuple(samples_b[j])])
    return segment, float(distances[i, j])


def _centroid_connector(
    shape_a: Shape,
    shape_b: Shape,
    distance_metric: DistanceMetric,
) -> Tuple[LineString, float]:
    ca = centroid_coord(shape_a)
    cb = centroid_coord(shape_b)
    if ca is None or cb is None:
        raise ValidationError("Cannot connect a shape that has no coordinates")
    return LineString([ca, cb]), point_distance(ca, cb, distance_metric)


__all__ = ['find_connector']
