"""OPTICS clustering implementation."""

import heapq
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple, TypeVar

import numpy as np

from ..config.constants import ALGORITHM_OPTICS
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
class OpticsOrdering:
    """
    Reachability ordering produced by OPTICS.

    Attributes:
        order: Point indices in the order they were processed
        reachability: Reachability distance per point index; ``inf`` for
            points never reached from a core point
        core_distances: Core distance per point index; NaN for points
            that are not core points
    """
    order: np.ndarray
    reachability: np.ndarray
    core_distances: np.ndarray

    def __len__(self) -> int:
        return len(self.order)

    def reachability_plot(self) -> np.ndarray:
        """Get reachability values in processing order."""
        return self.reachability[self.order]


@dataclass
class _Context:
    """Working state for a single OPTICS run."""
    points: List[Any]
    space: MetricSpace
    min_points: int
    range: float
    reachability: np.ndarray = field(init=False)
    core_distances: np.ndarray = field(init=False)
    order: List[int] = field(default_factory=list)
    processed: Set[int] = field(default_factory=set)
    queue: List[Tuple[float, int]] = field(default_factory=list)

    def __post_init__(self):
        n_points = len(self.points)
        self.reachability = np.full(n_points, np.inf, dtype=np.float64)
        self.core_distances = np.full(n_points, np.nan, dtype=np.float64)


def _get_neighbors(index: int, context: _Context) -> List[Tuple[int, float]]:
    """Get (index, distance) of every other point within range."""
    point = context.points[index]
    neighbors = []

    for i, other in enumerate(context.points):
        if i == index:
            continue

        distance = context.space.distance(point, other)
        if not math.isnan(distance) and distance <= context.range:
            neighbors.append((i, distance))

    return neighbors


def _core_distance(neighbors: List[Tuple[int, float]], min_points: int) -> float:
    """Distance to the min_points-th nearest neighbour, NaN if there are too few."""
    if len(neighbors) < min_points:
        return math.nan
    if min_points == 0:
        return 0.0

    distances = sorted(distance for _, distance in neighbors)
    return distances[min_points - 1]


def _update(index: int, context: _Context) -> None:
    """Finalize a point and push reachability updates for its neighbours."""
    if index in context.processed:
        return

    context.processed.add(index)
    context.order.append(index)

    neighbors = _get_neighbors(index, context)
    core_distance = _core_distance(neighbors, context.min_points)
    context.core_distances[index] = core_distance

    if math.isnan(core_distance):
        return

    for neighbor, distance in neighbors:
        if neighbor in context.processed:
            continue

        reachability = max(core_distance, distance)
        current = context.reachability[neighbor]

        # Stale queue entries stay behind and are skipped once processed
        if math.isinf(current) or reachability < current:
            context.reachability[neighbor] = reachability
            heapq.heappush(context.queue, (reachability, neighbor))


def _build_ordering(points: List[T],
                    space: MetricSpace[T],
                    min_points: int,
                    threshold: float) -> OpticsOrdering:
    context = _Context(points, space, min_points, threshold)

    for i in range(len(points)):
        if i in context.processed:
            continue

        _update(i, context)
        while context.queue:
            _, index = heapq.heappop(context.queue)
            _update(index, context)

    return OpticsOrdering(
        order=np.array(context.order, dtype=int),
        reachability=context.reachability,
        core_distances=context.core_distances
    )


def _reachability_drop(current: float, following: float) -> float:
    """
    Reachability drop from one ordered point to the next.

    Two consecutive infinite reachabilities count as an infinite drop, so
    for any finite range an unreached point starts a new cluster.
    """
    if math.isinf(current) and math.isinf(following):
        return math.inf
    return current - following


def _extract_index_clusters(ordering: OpticsOrdering, threshold: float) -> List[List[int]]:
    clusters = []
    current_cluster: List[int] = []
    n_ordered = len(ordering.order)

    for position in range(n_ordered):
        index = int(ordering.order[position])
        reachability = float(ordering.reachability[index])

        if position + 1 < n_ordered:
            following = float(ordering.reachability[ordering.order[position + 1]])
        else:
            following = 0.0

        # The drop closes the open cluster before this point is considered
        if _reachability_drop(reachability, following) > threshold:
            if len(current_cluster) > 1:
                clusters.append(current_cluster)
            current_cluster = []

        if reachability < threshold or math.isinf(reachability):
            current_cluster.append(index)

    if len(current_cluster) > 1:
        clusters.append(current_cluster)

    return clusters


def compute_ordering(points: Sequence[T],
                     space: MetricSpace[T],
                     min_points: int,
                     range: float) -> OpticsOrdering:
    """
    Compute the OPTICS reachability ordering of a set of points.

    Args:
        points: Points to order
        space: Metric space defining the distances
        min_points: Number of in-range neighbours needed to make a core point
        range: Neighbourhood radius

    Returns:
        OpticsOrdering over the indices of ``points``

    Raises:
        InvalidParameterError: If points, space, min_points or range are invalid
    """
    points = validate_points(points)
    validate_space(space)
    min_points = validate_min_points(min_points)
    range = validate_range(range)

    return _build_ordering(points, space, min_points, range)


def extract_clusters(ordering: OpticsOrdering, range: float) -> List[List[int]]:
    """
    Split a reachability ordering into clusters of point indices.

    Walking the ordering, a reachability drop larger than ``range`` to the
    next point closes the open cluster. Two consecutive infinite
    reachabilities count as an infinite drop. Each point then joins the open
    cluster if its reachability is below ``range`` or infinite. Clusters
    holding a single point are discarded.

    Args:
        ordering: Result of ``compute_ordering``
        range: Neighbourhood radius used to build the ordering

    Returns:
        List of index clusters in ordering order
    """
    return _extract_index_clusters(ordering, validate_range(range))


def optics(points: Sequence[T],
           space: MetricSpace[T],
           min_points: int,
           range: float) -> List[List[T]]:
    """
    Cluster points using OPTICS.

    Points are ordered by repeatedly expanding the unprocessed point with
    the lowest reachability distance, then the ordering is cut wherever the
    reachability drops by more than ``range``. Points that end up in no
    cluster are left out of the result. Assumes the space is undirected.

    Args:
        points: Points to cluster
        space: Metric space defining the distances
        min_points: Number of in-range neighbours needed to make a core point
        range: Neighbourhood radius

    Returns:
        List of clusters

    Raises:
        InvalidParameterError: If points, space, min_points or range are invalid
    """
    points = validate_points(points)
    validate_space(space)
    min_points = validate_min_points(min_points)
    range = validate_range(range)

    ordering = _build_ordering(points, space, min_points, range)
    clusters = _extract_index_clusters(ordering, range)
    logger.debug(f"OPTICS: {len(points)} points -> {len(clusters)} clusters "
                 f"(min_points={min_points}, range={range})")
    return [[points[i] for i in cluster] for cluster in clusters]


class OPTICSClusterer(Clusterer):
    """OPTICS clustering algorithm."""

    def __init__(self, min_points: int, range: float):
        """
        Initialize OPTICS clusterer.

        Args:
            min_points: Number of in-range neighbours needed to make a core point
            range: Neighbourhood radius
        """
        super().__init__()
        self.min_points = validate_min_points(min_points)
        self.range = validate_range(range)

        self.ordering_: Optional[OpticsOrdering] = None

    def cluster(self,
                points: Sequence[T],
                space: MetricSpace[T]) -> List[List[T]]:
        points = validate_points(points)
        validate_space(space)

        self.ordering_ = _build_ordering(points, space, self.min_points, self.range)
        clusters = _extract_index_clusters(self.ordering_, self.range)
        self._record_result(len(points), clusters)

        n_core = int(np.sum(~np.isnan(self.ordering_.core_distances)))
        logger.info(f"OPTICS found {self.n_clusters_} clusters from {n_core} core points; "
                    f"{self.n_noise_} of {len(points)} points unclustered")
        return [[points[i] for i in cluster] for cluster in clusters]

    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': ALGORITHM_OPTICS,
            'min_points': self.min_points,
            'range': self.range,
            'n_clusters': self.n_clusters_,
            'n_noise': self.n_noise_
        }
