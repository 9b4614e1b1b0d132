"""Connected components clustering implementation."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, TypeVar

import numpy as np

from ..config.constants import ALGORITHM_CONNECTED_COMPONENTS, UNCLASSIFIED_ID
from ..spaces.base import MetricSpace
from ..utils.logging import get_logger
from ..utils.validation import validate_points, validate_range, validate_space
from .base import Clusterer

T = TypeVar('T')

logger = get_logger(__name__)


@dataclass
class _Context:
    """Working state for a single connected components run."""
    points: List[Any]
    space: MetricSpace
    range: float
    cluster_ids: np.ndarray = field(init=False)
    current_cluster_id: int = 0

    def __post_init__(self):
        self.cluster_ids = np.full(len(self.points), UNCLASSIFIED_ID, dtype=int)


def _create_cluster(index: int, context: _Context) -> List[int]:
    cluster = [index]
    context.current_cluster_id += 1
    cluster_id = context.current_cluster_id
    context.cluster_ids[index] = cluster_id

    # The cluster doubles as the worklist and grows while it is walked
    position = 0
    while position < len(cluster):
        point = context.points[cluster[position]]
        position += 1

        for j, other in enumerate(context.points):
            if context.cluster_ids[j] != UNCLASSIFIED_ID:
                continue

            # NaN never compares <= so unconnected pairs are skipped
            if context.space.distance(point, other) <= context.range:
                cluster.append(j)
                context.cluster_ids[j] = cluster_id

    return cluster


def _cluster_indices(points: List[T],
                     space: MetricSpace[T],
                     threshold: float) -> List[List[int]]:
    context = _Context(points, space, threshold)
    clusters = []

    for i in range(len(points)):
        if context.cluster_ids[i] != UNCLASSIFIED_ID:
            continue
        clusters.append(_create_cluster(i, context))

    logger.debug(f"Connected components: {len(points)} points -> {len(clusters)} clusters "
                 f"(range={threshold})")
    return clusters


def connected_components(points: Sequence[T],
                         space: MetricSpace[T],
                         range: float = math.inf) -> List[List[T]]:
    """
    Cluster points into connected components.

    Two points are connected when their distance is at most ``range``;
    a cluster is every point reachable through such connections. Every
    point ends up in exactly one cluster, isolated points forming
    singletons. Assumes the space is undirected.

    Args:
        points: Points to cluster
        space: Metric space defining the distances
        range: Maximum distance at which points are considered connected.
            The default treats any non-NaN distance as a connection.

    Returns:
        List of clusters in discovery order

    Raises:
        InvalidParameterError: If points, space or range are invalid
    """
    points = validate_points(points)
    validate_space(space)
    range = validate_range(range)

    clusters = _cluster_indices(points, space, range)
    return [[points[i] for i in cluster] for cluster in clusters]


class ConnectedComponentsClusterer(Clusterer):
    """Connected components clustering algorithm."""

    def __init__(self, range: float = math.inf):
        """
        Initialize connected components clusterer.

        Args:
            range: Maximum distance at which points are considered connected
        """
        super().__init__()
        self.range = validate_range(range)

    def cluster(self,
                points: Sequence[T],
                space: MetricSpace[T]) -> List[List[T]]:
        points = validate_points(points)
        validate_space(space)

        clusters = _cluster_indices(points, space, self.range)
        self._record_result(len(points), clusters)

        logger.info(f"Connected components found {self.n_clusters_} clusters "
                    f"in {len(points)} points")
        return [[points[i] for i in cluster] for cluster in clusters]

    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': ALGORITHM_CONNECTED_COMPONENTS,
            'range': self.range,
            'n_clusters': self.n_clusters_
        }
