"""Exception and warning classes for polybridge."""


class PolybridgeError(Exception):
    """Base class for all polybridge errors."""


class ValidationError(PolybridgeError):
    """Input shapes are missing, not polygonal, or carry no coordinates.

    Examples:
        >>> from polybridge import merge_with_corridors
        >>> merge_with_corridors([])
        Traceback (most recent call last):
        ...
        polybridge.core.errors.ValidationError: at least one shape is required
    """


class ConfigurationError(PolybridgeError):
    """A configuration value or strategy name is not acceptable."""


class MergeError(PolybridgeError):
    """Merging shapes into a single geometry failed."""


class UnionFailure(MergeError):
    """The union fold produced no geometry."""


class DegenerateGeometryWarning(UserWarning):
    """A documented fallback replaced a measurement that could not be made.

    Emitted when a shape yields no boundary samples and its centroid is used
    instead, or when the bounding-box diagonal is zero and the default
    diagonal is substituted.
    """


__all__ = [
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'UnionFailure',
    'DegenerateGeometryWarning',
]
