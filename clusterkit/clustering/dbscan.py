"""DBSCAN clustering implementation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TypeVar

import numpy as np

from ..config.constants import ALGORITHM_DBSCAN, NOISE_ID, UNCLASSIFIED_ID
from ..spaces.base import MetricSpace
from ..utils.logging import get_logger
from ..utils.validation import (
    validate_min_points,
    validate_points,
    validate_range,
    validate_space
)
from .base import Clusterer

T = TypeVar('T')

logger = get_logger(__name__)


@dataclass
class _Context:
    """Working state for a single DBSCAN run."""
    points: List[Any]
    space: MetricSpace
    range: float
    min_points: int
    cluster_ids: np.ndarray = field(init=False)
    current_cluster_id: int = 0

    def __post_init__(self):
        self.cluster_ids = np.full(len(self.points), UNCLASSIFIED_ID, dtype=int)


def _get_seeds(index: int, context: _Context) -> List[int]:
    """Get indices of every other point within range of the point at index."""
    point = context.points[index]
    seeds = []

    for i, other in enumerate(context.points):
        # A point cannot be its own seed
        if i == index:
            continue

        if context.space.distance(point, other) <= context.range:
            seeds.append(i)

    return seeds


def _try_create_cluster(index: int, context: _Context) -> Optional[List[int]]:
    seeds = _get_seeds(index, context)

    # Not a core point. Noise may still be claimed by a later cluster
    if len(seeds) < context.min_points:
        context.cluster_ids[index] = NOISE_ID
        return None

    context.current_cluster_id += 1
    cluster = [index]
    context.cluster_ids[index] = context.current_cluster_id

    _expand_cluster(cluster, seeds, context)
    return cluster


def _expand_cluster(cluster: List[int], seeds: List[int], context: _Context) -> None:
    cluster_id = context.current_cluster_id

    # Seeds is used as a stack for depth first search
    while seeds:
        s = seeds.pop()
        old_id = context.cluster_ids[s]

        if old_id not in (UNCLASSIFIED_ID, NOISE_ID):
            continue

        cluster.append(s)
        context.cluster_ids[s] = cluster_id

        # Noise already failed the core point check
        if old_id == NOISE_ID:
            continue

        child_seeds = _get_seeds(s, context)
        if len(child_seeds) >= context.min_points:
            seeds.extend(child_seeds)


def _cluster_indices(points: List[T],
                     space: MetricSpace[T],
                     threshold: float,
                     min_points: int) -> List[List[int]]:
    context = _Context(points, space, threshold, min_points)
    clusters = []

    for i in range(len(points)):
        if context.cluster_ids[i] != UNCLASSIFIED_ID:
            continue

        cluster = _try_create_cluster(i, context)
        if cluster is not None:
            clusters.append(cluster)

    n_noise = int(np.sum(context.cluster_ids == NOISE_ID))
    logger.debug(f"DBSCAN: {len(points)} points -> {len(clusters)} clusters, "
                 f"{n_noise} noise (range={threshold}, min_points={min_points})")
    return clusters


def dbscan(points: Sequence[T],
           space: MetricSpace[T],
           range: float,
           min_points: int) -> List[List[T]]:
    """
    Cluster points using DBSCAN.

    A point is a core point when at least ``min_points`` other points lie
    within ``range`` of it. Clusters grow depth first from core points;
    points reached from a core point join its cluster but only core points
    extend it further. Noise points are left out of the result.
    Assumes the space is undirected.

    Args:
        points: Points to cluster
        space: Metric space defining the distances
        range: Maximum distance at which a point is a seed of another
        min_points: Number of seeds needed to make a core point

    Returns:
        List of clusters in discovery order

    Raises:
        InvalidParameterError: If points, space, range or min_points are invalid
    """
    points = validate_points(points)
    validate_space(space)
    range = validate_range(range)
    min_points = validate_min_points(min_points)

    clusters = _cluster_indices(points, space, range, min_points)
    return [[points[i] for i in cluster] for cluster in clusters]


class DBSCANClusterer(Clusterer):
    """DBSCAN clustering algorithm."""

    def __init__(self, range: float, min_points: int):
        """
        Initialize DBSCAN clusterer.

        Args:
            range: Maximum distance at which a point is a seed of another
            min_points: Number of seeds needed to make a core point
        """
        super().__init__()
        self.range = validate_range(range)
        self.min_points = validate_min_points(min_points)

    def cluster(self,
                points: Sequence[T],
                space: MetricSpace[T]) -> List[List[T]]:
        points = validate_points(points)
        validate_space(space)

        clusters = _cluster_indices(points, space, self.range, self.min_points)
        self._record_result(len(points), clusters)

        logger.info(f"DBSCAN found {self.n_clusters_} clusters and "
                    f"{self.n_noise_} noise points in {len(points)} points")
        return [[points[i] for i in cluster] for cluster in clusters]

    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': ALGORITHM_DBSCAN,
            'range': self.range,
            'min_points': self.min_points,
            'n_clusters': self.n_clusters_,
            'n_noise': self.n_noise_
        }
