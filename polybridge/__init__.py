"""Polybridge - merge disjoint polygons through shortest corridors.

This library joins scattered polygons into one connected geometry by linking
them with buffered corridors along a minimum spanning tree of approximate
shortest connections, using Shapely.
"""


# Merge functions
from .corridor import (
    merge_with_corridors,
    validate_shapes,
    MergeResult,
    MergeDebug,
)

# Algorithm steps
from .corridor import (
    sample_boundary,
    find_connector,
    ConnectionEdge,
    build_connection_graph,
    minimum_spanning_tree,
    corridor_half_width,
    build_corridors,
    union_all,
)

# GeoJSON adapters
from .geojson import (
    merge_feature_collection,
    shapes_from_feature_collection,
    shape_to_feature,
    debug_to_feature_collection,
)

# Core types and configuration
from .core import (
    DistanceMetric,
    CorridorConfig,
    DisjointSet,
)

# Core exceptions
from .core import (
    PolybridgeError,
    ValidationError,
    ConfigurationError,
    MergeError,
    UnionFailure,
    DegenerateGeometryWarning,
)

__all__ = [

    # Merge
    'merge_with_corridors',
    'validate_shapes',
    'MergeResult',
    'MergeDebug',

    # Algorithm steps
    'sample_boundary',
    'find_connector',
    'ConnectionEdge',
    'build_connection_graph',
    'minimum_spanning_tree',
    'corridor_half_width',
    'build_corridors',
    'union_all',

    # GeoJSON
    'merge_feature_collection',
    'shapes_from_feature_collection',
    'shape_to_feature',
    'debug_to_feature_collection',

    # Core types and configuration
    'DistanceMetric',
    'CorridorConfig',
    'DisjointSet',

    # Core exceptions
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'UnionFailure',
    'DegenerateGeometryWarning',
]
