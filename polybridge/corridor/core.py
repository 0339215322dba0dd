"""Core corridor merge orchestration logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from ..core.config import DEFAULT_SAMPLES_PER_RING, CorridorConfig
from ..core.errors import ValidationError
from ..core.geometry_utils import as_shape, polygon_parts
from ..core.types import DistanceMetric, Shape
from .corridors import build_corridors, corridor_half_width
from .graph import ConnectionEdge, build_connection_graph, minimum_spanning_tree
from .union import union_all


@dataclass(frozen=True)
class MergeDebug:
    """Intermediate results of a merge, for inspection only.

    Attributes:
        pairs: Every pairwise edge, sorted by ascending distance
        mst_edges: Edges selected for the spanning tree
        corridor_polygons: One corridor per spanning-tree edge
    """

    pairs: List[ConnectionEdge] = field(default_factory=list)
    mst_edges: List[ConnectionEdge] = field(default_factory=list)
    corridor_polygons: List[Polygon] = field(default_factory=list)

    @property
    def mst_distance(self) -> float:
        """Total distance of the selected spanning tree."""
        return sum(edge.distance for edge in self.mst_edges)


@dataclass(frozen=True)
class MergeResult:
    """Merged geometry together with its debug record."""

    output: BaseGeometry
    debug: MergeDebug


def merge_with_corridors(
    shapes: Sequence[Any],
    corridor_factor: float = 1.0,
    samples_per_ring: int = DEFAULT_SAMPLES_PER_RING,
    distance_metric: Union[DistanceMetric, str] = DistanceMetric.GEODESIC,
    config: Optional[CorridorConfig] = None,
) -> MergeResult:
    """Merge disjoint shapes into one geometry joined by shortest corridors.

    The boundaries of all shapes are sampled to approximate the shortest
    connection between every pair. A minimum spanning tree over those
    connections picks the cheapest set of links that joins every shape, each
    link is buffered into a corridor, and the shapes and corridors are
    unioned into the output.

    Corridor half-width is 2% of the bounding-box diagonal of all shapes,
    multiplied by ``corridor_factor``.

    Args:
        shapes: Polygons/MultiPolygons, as shapely geometries, GeoJSON geometry
            mappings or GeoJSON Features. They are never modified.
        corridor_factor: Linear corridor width multiplier (values below 1 thin
            the connections, above 1 widen them)
        samples_per_ring: Target number of boundary samples per outer ring
        distance_metric: ``DistanceMetric.GEODESIC`` (lon/lat, kilometres,
            default) or ``DistanceMetric.PLANAR`` (coordinate units). String
            values such as ``"planar"`` are accepted.
        config: Complete configuration. When given, it replaces the keyword
            arguments above.

    Returns:
        MergeResult with the merged geometry and a MergeDebug record. A single
        input shape comes back without any corridor work and with an empty
        debug record. A shapely input is the very same object; a GeoJSON
        mapping or Feature comes back as the equivalent shapely geometry
        (empty rings dropped), since the output is always a shapely object.

    Raises:
        ValidationError: If no shapes are given or a shape is not usable
        ConfigurationError: If a configuration value is invalid
        UnionFailure: If the final union could not be computed

    Examples:
        >>> from shapely.geometry import box
        >>> result = merge_with_corridors(
        ...     [box(0, 0, 1, 1), box(3, 0.2, 4.2, 1.2), box(2, 2.5, 2.8, 3.2)]
        ... )
        >>> result.output.geom_type
        'Polygon'
        >>> len(result.debug.pairs), len(result.debug.mst_edges)
        (3, 2)
    """
    if config is None:
        config = CorridorConfig(
            corridor_factor=corridor_factor,
            samples_per_ring=samples_per_ring,
            distance_metric=distance_metric,
        )

    polygons = validate_shapes(shapes)
    n = len(polygons)

    if n == 1:
        return MergeResult(output=polygons[0], debug=MergeDebug())

    metric = config.distance_metric

    pairs = build_connection_graph(polygons, config.samples_per_ring, metric)
    mst_edges = minimum_spanning_tree(pairs, n)

    half_width = corridor_half_width(
        polygons,
        corridor_factor=config.corridor_factor,
        width_ratio=config.width_ratio,
        default_diagonal=config.default_diagonal,
        distance_metric=metric,
    )
    corridor_polygons = build_corridors(mst_edges, half_width, metric, config.quad_segs)

    output = union_all(list(polygons) + corridor_polygons)

    return MergeResult(
        output=output,
        debug=MergeDebug(
            pairs=pairs,
            mst_edges=mst_edges,
            corridor_polygons=corridor_polygons,
        ),
    )


def validate_shapes(shapes: Sequence[Any]) -> List[Shape]:
    """Check and normalize the input of :func:`merge_with_corridors`.

    Args:
        shapes: Sequence of geometry-like values

    Returns:
        List of Polygon/MultiPolygon geometries in input order

    Raises:
        ValidationError: If the sequence is empty, a value is not polygonal,
            or a shape has no non-empty outer ring at all
    """
    if shapes is None or len(shapes) == 0:
        raise ValidationError("at least one shape is required")

    polygons: List[Shape] = []
    for index, obj in enumerate(shapes):
        try:
            geometry = as_shape(obj)
        except ValidationError as e:
            raise ValidationError(f"Shape {index}: {e}") from e
        if not polygon_parts(geometry):
            raise ValidationError(f"Shape {index} has no rings")
        polygons.append(geometry)

    return polygons


__all__ = [
    'MergeDebug',
    'MergeResult',
    'merge_with_corridors',
    'validate_shapes',
]
