"""Shared measurement helpers for polybridge geometries.

Merging is judged by a handful of scalar metrics: whether the output is a
single connected part, how large it is, and how long the selected spanning
tree is. Centralizing the logic here keeps tests and debug scripts free from
ad-hoc ``geoms`` counting.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .corridor.graph import ConnectionEdge


def count_parts(geometry: BaseGeometry) -> int:
    """Number of non-empty polygon parts in ``geometry``."""
    if geometry is None or geometry.is_empty:
        return 0
    if isinstance(geometry, Polygon):
        return 1
    if isinstance(geometry, MultiPolygon):
        return sum(1 for p in geometry.geoms if not p.is_empty)
    return sum(count_parts(g) for g in getattr(geometry, "geoms", []))


def measure_geometry(geometry: BaseGeometry) -> Dict[str, Optional[float]]:
    """Return core metrics for ``geometry``."""
    return {
        "is_valid": getattr(geometry, "is_valid", False),
        "is_empty": getattr(geometry, "is_empty", True),
        "area": getattr(geometry, "area", None),
        "part_count": count_parts(geometry),
    }


def spanning_tree_distance(edges: Iterable[ConnectionEdge]) -> float:
    """Total distance of ``edges``."""
    return float(sum(edge.distance for edge in edges))


__all__ = [
    "count_parts",
    "measure_geometry",
    "spanning_tree_distance",
]
