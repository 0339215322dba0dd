"""GeoJSON adapters for corridor merging.

These helpers let callers work with plain GeoJSON dictionaries (for example
the contents of a ``.geojson`` file loaded with :mod:`json`) instead of
shapely objects.
"""

from typing import Any, Dict, List, Mapping, Optional

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from .core.errors import ValidationError
from .core.geometry_utils import as_shape
from .core.types import Shape
from .corridor.core import MergeDebug, merge_with_corridors


_POLYGONAL = ('Polygon', 'MultiPolygon')


def shapes_from_feature_collection(collection: Mapping[str, Any]) -> List[Shape]:
    """Extract the Polygon and MultiPolygon features of a FeatureCollection.

    Features with other geometry types, or without a geometry, are skipped.

    Raises:
        ValidationError: If ``collection`` is not a FeatureCollection
    """
    if not hasattr(collection, 'get') or collection.get('type') != 'FeatureCollection':
        raise ValidationError("Invalid GeoJSON FeatureCollection")

    shapes = []
    for feature in collection.get('features') or []:
        geometry = feature.get('geometry') if hasattr(feature, 'get') else None
        if geometry and geometry.get('type') in _POLYGONAL:
            shapes.append(as_shape(geometry))
    return shapes


def shape_to_feature(
    geometry: BaseGeometry,
    properties: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Wrap a shapely geometry in a GeoJSON Feature dictionary."""
    return {
        'type': 'Feature',
        'properties': dict(properties) if properties else {},
        'geometry': mapping(geometry),
    }


def debug_to_feature_collection(debug: MergeDebug) -> Dict[str, Any]:
    """Render a :class:`MergeDebug` record as a FeatureCollection.

    Every pairwise segment, spanning-tree segment and corridor becomes a
    feature whose ``role`` property is ``"pair"``, ``"mst"`` or
    ``"corridor"`` respectively.
    """
    features = []
    for edge in debug.pairs:
        features.append(shape_to_feature(
            edge.segment, {'role': 'pair', 'a': edge.a, 'b': edge.b, 'distance': edge.distance}
        ))
    for edge in debug.mst_edges:
        features.append(shape_to_feature(
            edge.segment, {'role': 'mst', 'a': edge.a, 'b': edge.b, 'distance': edge.distance}
        ))
    for index, corridor in enumerate(debug.corridor_polygons):
        if corridor.is_empty:
            continue
        features.append(shape_to_feature(corridor, {'role': 'corridor', 'edge': index}))

    return {'type': 'FeatureCollection', 'features': features}


def merge_feature_collection(
    collection: Mapping[str, Any],
    corridor_factor: float = 1.0,
    **options: Any,
) -> Dict[str, Any]:
    """Merge the polygon features of a FeatureCollection.

    Args:
        collection: GeoJSON FeatureCollection
        corridor_factor: Linear corridor width multiplier
        **options: Further keyword arguments for
            :func:`polybridge.merge_with_corridors`

    Returns:
        Dictionary with ``output`` (merged Feature) and ``debug``
        (FeatureCollection from :func:`debug_to_feature_collection`)

    Raises:
        ValidationError: If the collection holds fewer than two polygons

    Examples:
        >>> import json
        >>> with open('parcels.geojson') as f:
        ...     merged = merge_feature_collection(json.load(f), corridor_factor=1.5)
        >>> merged['output']['geometry']['type']
        'Polygon'
    """
    shapes = shapes_from_feature_collection(collection)
    if len(shapes) < 2:
        raise ValidationError("Provide at least two polygons")

    result = merge_with_corridors(shapes, corridor_factor=corridor_factor, **options)
    return {
        'output': shape_to_feature(result.output),
        'debug': debug_to_feature_collection(result.debug),
    }


__all__ = [
    'shapes_from_feature_collection',
    'shape_to_feature',
    'debug_to_feature_collection',
    'merge_feature_collection',
]
