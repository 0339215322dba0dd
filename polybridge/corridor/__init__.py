"""Merging disjoint shapes through minimum spanning tree corridors.

The pipeline runs in a fixed order:

1. :func:`sample_boundary` samples outer rings
2. :func:`find_connector` finds an approximate shortest segment per pair
3. :func:`build_connection_graph` builds the complete, sorted edge list
4. :func:`minimum_spanning_tree` selects the edges with Kruskal
5. :func:`build_corridors` buffers the selected segments
6. :func:`union_all` folds shapes and corridors into one geometry

:func:`merge_with_corridors` runs all steps.
"""

from .sampling import sample_boundary
from .connector import find_connector
from .graph import ConnectionEdge, build_connection_graph, minimum_spanning_tree
from .corridors import corridor_half_width, build_corridors
from .union import union_all
from .core import MergeDebug, MergeResult, merge_with_corridors, validate_shapes

__all__ = [
    'sample_boundary',
    'find_connector',
    'ConnectionEdge',
    'build_connection_graph',
    'minimum_spanning_tree',
    'corridor_half_width',
    'build_corridors',
    'union_all',
    'MergeDebug',
    'MergeResult',
    'merge_with_corridors',
    'validate_shapes',
]
