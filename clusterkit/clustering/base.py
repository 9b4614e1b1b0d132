"""Base interface for clustering algorithms."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, TypeVar

import numpy as np

from ..config.constants import UNASSIGNED_LABEL
from ..spaces.base import MetricSpace

T = TypeVar('T')


class Clusterer(ABC):
    """Abstract base class for clustering algorithms."""

    def __init__(self):
        self.n_clusters_: Optional[int] = None
        self.n_noise_: Optional[int] = None
        self.labels_: Optional[np.ndarray] = None

    @abstractmethod
    def cluster(self,
                points: Sequence[T],
                space: MetricSpace[T]) -> List[List[T]]:
        """
        Perform clustering on a sequence of points.

        Args:
            points: Points to cluster, in input order
            space: Metric space answering distances between the points

        Returns:
            List of clusters, each a list of points in discovery order
        """
        pass

    @abstractmethod
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        pass

    def _record_result(self,
                       n_points: int,
                       index_clusters: List[List[int]]) -> None:
        """Store fitted statistics for the last run."""
        labels = np.full(n_points, UNASSIGNED_LABEL, dtype=int)
        for label, indices in enumerate(index_clusters):
            labels[indices] = label

        self.labels_ = labels
        self.n_clusters_ = len(index_clusters)
        self.n_noise_ = int(np.sum(labels == UNASSIGNED_LABEL))

    def prepare_clusters(self,
                         points: Sequence[T],
                         labels: np.ndarray) -> Dict[int, List[T]]:
        """
        Group points by label.

        Args:
            points: Points in input order
            labels: Array of cluster labels, one per point

        Returns:
            Dict mapping cluster labels to lists of points
        """
        clusters = {}

        for point, label in zip(points, labels):
            clusters.setdefault(int(label), []).append(point)

        return clusters
