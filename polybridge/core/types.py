"""Type definitions for polybridge operations.

This module defines the enums used for strategy parameters and the shape
aliases shared by the corridor modules.
"""

from enum import Enum
from typing import Tuple, Type, TypeVar, Union

from shapely.geometry import MultiPolygon, Polygon

from .errors import ConfigurationError


Shape = Union[Polygon, MultiPolygon]
Coordinate = Tuple[float, float]
Bounds = Tuple[float, float, float, float]

E = TypeVar('E', bound=Enum)


class DistanceMetric(Enum):
    """How distances and corridor widths are measured.

    Attributes:
        GEODESIC: Coordinates are longitude/latitude; distances are great-circle
            kilometres and corridor widths are buffered in kilometres (default)
        PLANAR: Coordinates are Cartesian; distances and widths use the
            coordinate units directly

    Examples:
        >>> from polybridge import merge_with_corridors, DistanceMetric
        >>> result = merge_with_corridors(shapes, distance_metric=DistanceMetric.PLANAR)
        >>> # String values are accepted as well
        >>> result = merge_with_corridors(shapes, distance_metric='planar')
    """
    GEODESIC = 'geodesic'
    PLANAR = 'planar'


def coerce_enum(value: Union[E, str], enum_cls: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts either an enum member or the member's string value
    (case-insensitive).

    Raises:
        ConfigurationError: If the string matches no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            pass
    choices = ', '.join(repr(member.value) for member in enum_cls)
    raise ConfigurationError(
        f"Unknown {enum_cls.__name__}: {value!r} (expected one of {choices})"
    )


__all__ = [
    'Shape',
    'Coordinate',
    'Bounds',
    'DistanceMetric',
    'coerce_enum',
]
