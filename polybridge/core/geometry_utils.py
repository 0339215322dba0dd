"""Common geometry manipulation utilities.

This module wraps the shapely operations the corridor algorithm relies on
(normalisation, parts, bounds, centroid, buffering and union) so that the
distance metric is applied consistently everywhere.
"""

import math
from functools import lru_cache
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np
from pyproj import Transformer
from shapely.geometry import LineString, MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry
from shapely.errors import GEOSException
from shapely.ops import transform

from .distance import EARTH_RADIUS_KM, point_distance
from .errors import ValidationError
from .types import Bounds, Coordinate, DistanceMetric, Shape


_SPHERE_RADIUS_M = EARTH_RADIUS_KM * 1000.0
_GEOGRAPHIC = f"+proj=longlat +R={_SPHERE_RADIUS_M} +no_defs"


def as_shape(obj: Any) -> Shape:
    """Normalize input to a shapely Polygon or MultiPolygon.

    Accepts shapely geometries, GeoJSON geometry mappings and GeoJSON
    Features. Mappings are converted with :func:`shapely.geometry.shape`, which
    builds new objects and leaves the caller's data untouched. Shapely
    geometries are immutable and are returned as they are.

    Empty rings in a mapping are dropped before conversion. A polygon whose
    outer ring is empty is dropped along with its holes, so a MultiPolygon
    with an empty ring-group keeps its remaining parts and a Polygon with an
    empty outer ring becomes an empty Polygon.

    Args:
        obj: Geometry-like input

    Returns:
        Polygon or MultiPolygon

    Raises:
        ValidationError: If the value is not polygonal

    Examples:
        >>> as_shape({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]})
        <POLYGON ((0 0, 1 0, 1 1, 0 0))>
    """
    if isinstance(obj, (Polygon, MultiPolygon)):
        return obj

    if isinstance(obj, BaseGeometry):
        raise ValidationError(f"Expected Polygon or MultiPolygon, got {obj.geom_type}")

    if hasattr(obj, 'get') and obj.get('type') == 'Feature':
        obj = obj.get('geometry')

    if not hasattr(obj, 'get') or obj.get('type') not in ('Polygon', 'MultiPolygon'):
        kind = obj.get('type') if hasattr(obj, 'get') else type(obj).__name__
        raise ValidationError(f"Expected Polygon or MultiPolygon, got {kind}")

    geom_type = obj.get('type')
    try:
        coordinates = _drop_empty_rings(geom_type, obj.get('coordinates'))
        if not coordinates:
            return Polygon() if geom_type == 'Polygon' else MultiPolygon()
        return shape({'type': geom_type, 'coordinates': coordinates})
    except (ValueError, TypeError, IndexError, GEOSException) as e:
        raise ValidationError(f"Malformed {geom_type} coordinates: {e}") from e


def _drop_empty_rings(geom_type: str, coordinates: Any) -> list:
    if coordinates is None:
        return []
    if geom_type == 'Polygon':
        return _polygon_rings(coordinates)
    groups = (_polygon_rings(rings) for rings in coordinates)
    return [rings for rings in groups if rings]


def _polygon_rings(rings: Any) -> list:
    # No exterior means no polygon, whatever the holes hold
    if len(rings) == 0 or len(rings[0]) == 0:
        return []
    return [ring for ring in rings if len(ring) > 0]


def polygon_parts(geometry: Shape) -> List[Polygon]:
    """Return the non-empty Polygon parts of a shape.

    Examples:
        >>> multi = MultiPolygon([poly1, poly2])
        >>> len(polygon_parts(multi))
        2
    """
    if isinstance(geometry, Polygon):
        return [] if geometry.is_empty else [geometry]
    if isinstance(geometry, MultiPolygon):
        return [p for p in geometry.geoms if not p.is_empty]
    return []


def outer_rings(geometry: Shape) -> List[np.ndarray]:
    """Exterior ring coordinates (N x 2) for every part of ``geometry``.

    Holes are not included. The closing vertex is kept, matching the GeoJSON
    ring convention.
    """
    rings = []
    for part in polygon_parts(geometry):
        coords = np.asarray(part.exterior.coords, dtype=float)
        if len(coords):
            rings.append(coords[:, :2])
    return rings


def collection_bounds(shapes: Iterable[Shape]) -> Optional[Bounds]:
    """Total bounding box over ``shapes``, or None if they are all empty."""
    boxes = [s.bounds for s in shapes if not s.is_empty]
    if not boxes:
        return None
    arr = np.asarray(boxes, dtype=float)
    return (
        float(arr[:, 0].min()),
        float(arr[:, 1].min()),
        float(arr[:, 2].max()),
        float(arr[:, 3].max()),
    )


def bbox_diagonal(
    bounds: Optional[Bounds],
    metric: DistanceMetric = DistanceMetric.GEODESIC,
) -> float:
    """Distance between the min and max corners of ``bounds``.

    Returns NaN when there are no bounds to measure.
    """
    if bounds is None:
        return math.nan
    minx, miny, maxx, maxy = bounds
    return point_distance((minx, miny), (maxx, maxy), metric)


def centroid_coord(geometry: Shape) -> Optional[Coordinate]:
    """Centroid of ``geometry`` as an (x, y) tuple, or None if it is empty."""
    if geometry.is_empty:
        return None
    c = geometry.centroid
    if c.is_empty:
        return None
    return (c.x, c.y)


def buffer_segment(
    segment: LineString,
    half_width: float,
    metric: DistanceMetric = DistanceMetric.GEODESIC,
    quad_segs: int = 8,
) -> Polygon:
    """Buffer a line symmetrically by ``half_width`` with round caps.

    Under ``PLANAR`` the buffer is computed directly in coordinate units.
    Under ``GEODESIC`` ``half_width`` is in kilometres: the line is projected
    into an azimuthal equidistant projection centred on its midpoint,
    buffered in metres, and projected back to longitude/latitude.

    Args:
        segment: Line to widen
        half_width: Distance from the line to the corridor edge
        metric: Distance metric
        quad_segs: Segments per quarter circle

    Returns:
        Corridor polygon (empty for a zero width)
    """
    if half_width <= 0 or segment.is_empty:
        return Polygon()

    if metric is DistanceMetric.PLANAR:
        return segment.buffer(half_width, quad_segs=quad_segs)

    mid = segment.interpolate(0.5, normalized=True)
    local = (
        f"+proj=aeqd +lat_0={mid.y} +lon_0={mid.x} "
        f"+R={_SPHERE_RADIUS_M} +units=m +no_defs"
    )
    to_local, to_geographic = _local_transformers(local)

    projected = transform(to_local.transform, segment)
    buffered = projected.buffer(half_width * 1000.0, quad_segs=quad_segs)
    return transform(to_geographic.transform, buffered)


@lru_cache(maxsize=128)
def _local_transformers(local: str) -> Tuple[Transformer, Transformer]:
    """Forward and inverse transformers between lon/lat and ``local``."""
    return (
        Transformer.from_crs(_GEOGRAPHIC, local, always_xy=True),
        Transformer.from_crs(local, _GEOGRAPHIC, always_xy=True),
    )


def union_pair(a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
    """Union of two geometries."""
    return a.union(b)


__all__ = [
    'as_shape',
    'polygon_parts',
    'outer_rings',
    'collection_bounds',
    'bbox_diagonal',
    'centroid_coord',
    'buffer_segment',
    'union_pair',
]
