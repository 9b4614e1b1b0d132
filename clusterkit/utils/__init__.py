"""Utility modules for clusterkit."""

from .logging import get_logger
from .validation import (
    InvalidParameterError,
    validate_range,
    validate_min_points,
    validate_space,
    validate_points
)

__all__ = [
    'get_logger',
    'InvalidParameterError',
    'validate_range',
    'validate_min_points',
    'validate_space',
    'validate_points'
]
