"""Distance measurement under the supported metrics.

Two metrics are supported. ``GEODESIC`` treats coordinates as
longitude/latitude pairs and returns great-circle distances in kilometres on
a sphere of mean Earth radius. ``PLANAR`` returns Euclidean distances in the
coordinate units. Every distance and buffer width in a single merge uses the
same metric.
"""

from typing import Sequence

import numpy as np

from .types import Coordinate, DistanceMetric


# Mean Earth radius (IUGG), the same sphere used for geodesic buffering.
EARTH_RADIUS_KM = 6371.0088


def haversine_km(lon1, lat1, lon2, lat2) -> np.ndarray:
    """Great-circle distance in kilometres between lon/lat positions.

    Arguments broadcast like numpy arrays, so a column of points against a
    row of points yields the full distance matrix.

    Examples:
        >>> float(haversine_km(0.0, 0.0, 1.0, 0.0))
        111.19508372419141
    """
    lon1, lat1, lon2, lat2 = (np.radians(np.asarray(v, dtype=float)) for v in (lon1, lat1, lon2, lat2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    a = np.clip(a, 0.0, 1.0)
    return 2.0 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))


def pairwise_distances(
    points_a: np.ndarray,
    points_b: np.ndarray,
    metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> np.ndarray:
    """Distance matrix between two point sets.

    Args:
        points_a: Array of shape (N, 2)
        points_b: Array of shape (M, 2)
        metric: Distance metric

    Returns:
        Array of shape (N, M) where entry ``[i, j]`` is the distance from
        ``points_a[i]`` to ``points_b[j]``
    """
    a = np.asarray(points_a, dtype=float).reshape(-1, 2)
    b = np.asarray(points_b, dtype=float).reshape(-1, 2)

    if metric is DistanceMetric.PLANAR:
        diff = a[:, np.newaxis, :] - b[np.newaxis, :, :]
        return np.hypot(diff[..., 0], diff[..., 1])

    return haversine_km(a[:, 0, np.newaxis], a[:, 1, np.newaxis], b[np.newaxis, :, 0], b[np.newaxis, :, 1])


def point_distance(
    p: Coordinate,
    q: Coordinate,
    metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> float:
    """Distance between two coordinate pairs."""
    return float(pairwise_distances([p[:2]], [q[:2]], metric)[0, 0])


def path_length(
    coords: Sequence[Coordinate],
    metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> float:
    """Length of a path through ``coords`` (sum of consecutive distances)."""
    pts = np.asarray(coords, dtype=float)
    if len(pts) < 2:
        return 0.0
    pts = pts[:, :2]

    if metric is DistanceMetric.PLANAR:
        steps = np.diff(pts, axis=0)
        return float(np.hypot(steps[:, 0], steps[:, 1]).sum())

    return float(haversine_km(pts[:-1, 0], pts[:-1, 1], pts[1:, 0], pts[1:, 1]).sum())


__all__ = [
    'EARTH_RADIUS_KM',
    'haversine_km',
    'pairwise_distances',
    'point_distance',
    'path_length',
]
