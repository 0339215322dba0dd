"""Left-fold union of shapes and corridors."""

from typing import Iterable, Optional

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from ..core.errors import UnionFailure
from ..core.geometry_utils import union_pair


def union_all(pieces: Iterable[BaseGeometry]) -> BaseGeometry:
    """Union ``pieces`` one at a time, in order.

    The first piece seeds the accumulator and every following piece is
    unioned into it. The set-theoretic result does not depend on the order,
    but the sequence of unions is fixed so results are reproducible.

    Args:
        pieces: Geometries to union

    Returns:
        Union of all pieces

    Raises:
        UnionFailure: If there was nothing to union or GEOS rejected a union
    """
    accumulated: Optional[BaseGeometry] = None

    for index, piece in enumerate(pieces):
        if accumulated is None:
            accumulated = piece
            continue
        try:
            accumulated = union_pair(accumulated, piece)
        except GEOSException as e:
            raise UnionFailure(f"Union failed at piece {index}: {e}") from e

    if accumulated is None:
        raise UnionFailure("Union failed: no pieces to merge")

    return accumulated


__all__ = ['union_all']
