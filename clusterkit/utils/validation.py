"""Input validation utilities."""

import math
import numbers
from typing import Any, Iterable, List


class InvalidParameterError(ValueError):
    """Raised when clustering is called with arguments it cannot honour."""


def validate_range(value: Any, name: str = 'range') -> float:
    """
    Validate a distance threshold.

    Args:
        value: Threshold supplied by the caller
        name: Parameter name used in error messages

    Returns:
        Threshold as float (``inf`` is allowed)

    Raises:
        InvalidParameterError: If the threshold is not a number, NaN or negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a number, got {type(value).__name__}")

    value = float(value)
    if math.isnan(value):
        raise InvalidParameterError(f"{name} must not be NaN")
    if value < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")
    return value


def validate_min_points(value: Any, name: str = 'min_points') -> int:
    """
    Validate a neighbour count threshold.

    Args:
        value: Count supplied by the caller
        name: Parameter name used in error messages

    Returns:
        Count as int

    Raises:
        InvalidParameterError: If the count is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {type(value).__name__}")

    value = int(value)
    if value < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")
    return value


def validate_space(space: Any) -> None:
    """
    Validate that an object provides the metric space capability.

    Raises:
        InvalidParameterError: If distance or add_connection is missing
    """
    # Imported here to keep utils free of an import cycle with spaces
    from ..spaces.base import MetricSpace

    if not isinstance(space, MetricSpace):
        raise InvalidParameterError(
            f"space must provide distance() and add_connection(), got {type(space).__name__}"
        )


def validate_points(points: Any) -> List[Any]:
    """
    Materialize the points to cluster as a list.

    Args:
        points: Finite iterable of points

    Returns:
        List of points in input order

    Raises:
        InvalidParameterError: If points is not iterable
    """
    if isinstance(points, (str, bytes)) or not isinstance(points, Iterable):
        raise InvalidParameterError(
            f"points must be an iterable of points, got {type(points).__name__}"
        )
    return list(points)
