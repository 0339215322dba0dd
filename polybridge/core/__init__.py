"""Core types and utilities for polybridge.

This module provides type definitions, enums, exceptions, configuration and
the geometry helpers used throughout the library.
"""

from .types import (
    Shape,
    DistanceMetric,
    coerce_enum,
)

from .errors import (
    PolybridgeError,
    ValidationError,
    ConfigurationError,
    MergeError,
    UnionFailure,
    DegenerateGeometryWarning,
)

from .config import CorridorConfig

from .spatial_utils import DisjointSet

__all__ = [
    # Types
    'Shape',
    'DistanceMetric',
    'coerce_enum',

    # Configuration
    'CorridorConfig',

    # Connectivity
    'DisjointSet',

    # Exceptions and warnings
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'UnionFailure',
    'DegenerateGeometryWarning',
]
