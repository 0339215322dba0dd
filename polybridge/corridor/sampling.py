"""Boundary sampling for approximate shape-to-shape distances."""

import math

import numpy as np

from ..core.geometry_utils import outer_rings
from ..core.types import Shape


def sample_boundary(geometry: Shape, samples_per_ring: int = 24) -> np.ndarray:
    """Sample candidate points along the outer boundary of a shape.

    For every outer ring, each vertex is emitted (including the closing
    vertex), followed by points that evenly subdivide each edge. With ``m``
    edges in the ring, every edge is split into ``ceil(samples_per_ring / m)``
    intervals, so a ring gets roughly ``samples_per_ring`` points in total and
    never fewer than its own vertices. Holes are not sampled.

    Args:
        geometry: Polygon or MultiPolygon
        samples_per_ring: Target number of samples per outer ring

    Returns:
        Array of shape (K, 2). Empty (0, 2) if the shape has no rings.

    Examples:
        >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> sample_boundary(square, samples_per_ring=8).shape
        (9, 2)
    """
    chunks = []

    for ring in outer_rings(geometry):
        chunks.append(ring)

        edge_count = len(ring) - 1
        if edge_count < 1:
            continue

        divisions = math.ceil(samples_per_ring / edge_count)
        if divisions < 2:
            continue

        t = np.arange(1, divisions, dtype=float) / divisions
        starts = ring[:-1]
        deltas = ring[1:] - starts
        # Edge-major order: all points of edge 0, then edge 1, ...
        inserted = starts[:, np.newaxis, :] + t[np.newaxis, :, np.newaxis] * deltas[:, np.newaxis, :]
        chunks.append(inserted.reshape(-1, 2))

    if not chunks:
        return np.empty((0, 2), dtype=float)
    return np.vstack(chunks)


__all__ = ['sample_boundary']
