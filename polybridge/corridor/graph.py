"""Connection graph construction and minimum spanning tree selection.

The connection graph is complete: every pair of input shapes gets an edge
weighted by the approximate distance from :func:`find_connector`. Kruskal's
algorithm then picks the cheapest set of edges that joins all shapes.

Building the graph costs O(n^2) connector calls, each O(k^2) in the number
of boundary samples, which is fine for a handful to a few dozen shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import List, Sequence

from shapely.geometry import LineString

from ..core.errors import ValidationError
from ..core.spatial_utils import DisjointSet
from ..core.types import DistanceMetric, Shape
from .connector import find_connector


@dataclass(frozen=True)
class ConnectionEdge:
    """Approximate shortest connection between two input shapes.

    Attributes:
        a: Index of the first shape (always less than ``b``)
        b: Index of the second shape
        distance: Approximate distance between the shapes (>= 0)
        segment: Sampled two-point segment from shape ``a`` to shape ``b``
    """

    a: int
    b: int
    distance: float
    segment: LineString

    def __repr__(self) -> str:
        return f"ConnectionEdge(a={self.a}, b={self.b}, distance={self.distance:.6g})"


def build_connection_graph(
    shapes: Sequence[Shape],
    samples_per_ring: int = 24,
    distance_metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> List[ConnectionEdge]:
    """Build the complete connection graph over ``shapes``.

    Args:
        shapes: At least two shapes
        samples_per_ring: Target number of boundary samples per outer ring
        distance_metric: Distance metric

    Returns:
        All ``n * (n - 1) / 2`` edges sorted by ascending distance

    Raises:
        ValidationError: If fewer than two shapes are given
    """
    n = len(shapes)
    if n < 2:
        raise ValidationError(f"A connection graph needs at least two shapes, got {n}")

    edges: List[ConnectionEdge] = []
    for i in range(n):
        for j in range(i + 1, n):
            segment, distance = find_connector(
                shapes[i], shapes[j], samples_per_ring, distance_metric
            )
            edges.append(ConnectionEdge(i, j, distance, segment))

    edges.sort(key=attrgetter('distance'))
    return edges


def minimum_spanning_tree(
    edges: Sequence[ConnectionEdge],
    n: int,
) -> List[ConnectionEdge]:
    """Select a minimum spanning tree with Kruskal's algorithm.

    Edges are scanned in the given order, which must be ascending by
    distance. An edge is accepted when its endpoints are still in different
    components. The scan stops as soon as ``n - 1`` edges are accepted.

    Args:
        edges: Edges sorted by ascending distance
        n: Number of nodes (shapes)

    Returns:
        Accepted edges in acceptance order: ``n - 1`` of them when the edges
        connect all nodes, fewer otherwise

    Examples:
        >>> edges = build_connection_graph(shapes)
        >>> tree = minimum_spanning_tree(edges, len(shapes))
        >>> len(tree) == len(shapes) - 1
        True
    """
    if n < 2:
        return []

    components = DisjointSet(n)
    accepted: List[ConnectionEdge] = []

    for edge in edges:
        if components.union(edge.a, edge.b):
            accepted.append(edge)
            if len(accepted) == n - 1:
                break

    return accepted


__all__ = [
    'ConnectionEdge',
    'build_connection_graph',
    'minimum_spanning_tree',
]
