"""Configuration for corridor merging."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Union

from .errors import ConfigurationError
from .types import DistanceMetric, coerce_enum


DEFAULT_SAMPLES_PER_RING = 24
DEFAULT_WIDTH_RATIO = 0.02
DEFAULT_DIAGONAL = 1.0
DEFAULT_QUAD_SEGS = 8


@dataclass
class CorridorConfig:
    """Settings for :func:`polybridge.merge_with_corridors`.

    Attributes:
        corridor_factor: Scales corridor width linearly. Values below 1 thin the
            connections, values above 1 widen them. ``0`` produces empty corridors.
        samples_per_ring: Target number of boundary samples per outer ring.
        width_ratio: Corridor half-width as a fraction of the bounding-box diagonal.
        default_diagonal: Diagonal used when the measured one is zero or not finite.
        distance_metric: ``DistanceMetric`` (or its string value) for all
            distances and buffer widths.
        quad_segs: Segments per quarter circle for the round corridor caps.
    """

    corridor_factor: float = 1.0
    samples_per_ring: int = DEFAULT_SAMPLES_PER_RING
    width_ratio: float = DEFAULT_WIDTH_RATIO
    default_diagonal: float = DEFAULT_DIAGONAL
    distance_metric: Union[DistanceMetric, str] = DistanceMetric.GEODESIC
    quad_segs: int = DEFAULT_QUAD_SEGS

    def __post_init__(self) -> None:
        self.distance_metric = coerce_enum(self.distance_metric, DistanceMetric)

        if not _is_finite(self.corridor_factor) or self.corridor_factor < 0:
            raise ConfigurationError(
                f"corridor_factor must be a finite number >= 0, got {self.corridor_factor!r}"
            )
        if not _is_finite(self.width_ratio) or self.width_ratio < 0:
            raise ConfigurationError(
                f"width_ratio must be a finite number >= 0, got {self.width_ratio!r}"
            )
        if not _is_finite(self.default_diagonal) or self.default_diagonal <= 0:
            raise ConfigurationError(
                f"default_diagonal must be a finite number > 0, got {self.default_diagonal!r}"
            )
        if isinstance(self.samples_per_ring, bool) or not isinstance(self.samples_per_ring, numbers.Integral) \
                or self.samples_per_ring < 1:
            raise ConfigurationError(
                f"samples_per_ring must be an integer >= 1, got {self.samples_per_ring!r}"
            )
        if isinstance(self.quad_segs, bool) or not isinstance(self.quad_segs, numbers.Integral) or self.quad_segs < 1:
            raise ConfigurationError(
                f"quad_segs must be an integer >= 1, got {self.quad_segs!r}"
            )


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


__all__ = [
    'CorridorConfig',
    'DEFAULT_SAMPLES_PER_RING',
    'DEFAULT_WIDTH_RATIO',
    'DEFAULT_DIAGONAL',
    'DEFAULT_QUAD_SEGS',
]
