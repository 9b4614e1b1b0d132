"""Base interface for metric spaces."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class MetricSpace(ABC, Generic[T]):
    """
    Abstract base class for the space clustering algorithms run over.

    A space answers the distance between two points and accepts new
    connections. Distances are non-negative floats, or NaN when the two
    points have no relation. Connections are registered symmetrically:
    after ``add_connection(a, b, d)`` both ``distance(a, b)`` and
    ``distance(b, a)`` return ``d``.

    Unweighted spaces report a connected pair as ``0.0`` and an
    unconnected pair as NaN.

    Any object with callable ``distance`` and ``add_connection`` attributes
    passes ``isinstance(obj, MetricSpace)``; subclassing is optional.
    """

    @abstractmethod
    def add_connection(self, a: T, b: T, distance: float = 0.0) -> None:
        """
        Register a connection between two points in both directions.

        Args:
            a: First point
            b: Second point
            distance: Distance between the points
        """
        pass

    @abstractmethod
    def distance(self, a: T, b: T) -> float:
        """
        Get the distance between two distinct points.

        Args:
            a: First point
            b: Second point

        Returns:
            Distance, or NaN if the points are not connected
        """
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is MetricSpace:
            if all(callable(getattr(subclass, attr, None))
                   for attr in ('distance', 'add_connection')):
                return True
        return NotImplemented
