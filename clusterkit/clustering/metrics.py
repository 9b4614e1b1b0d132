"""Clustering metrics over metric spaces."""

from collections import defaultdict, deque
from typing import Any, Dict, List, Sequence, TypeVar

import numpy as np
from sklearn.metrics import silhouette_score

from ..config.constants import UNASSIGNED_LABEL
from ..spaces.base import MetricSpace

T = TypeVar('T')


def distance_matrix(points: Sequence[T], space: MetricSpace[T]) -> np.ndarray:
    """
    Calculate the pairwise distance matrix of a set of points.

    Args:
        points: Points in the space
        space: Metric space defining the distances

    Returns:
        Matrix (n_points, n_points) with a zero diagonal; NaN where the
        space has no relation between two points
    """
    n_points = len(points)
    matrix = np.zeros((n_points, n_points), dtype=np.float64)

    for i in range(n_points):
        for j in range(n_points):
            if i != j:
                matrix[i, j] = space.distance(points[i], points[j])

    return matrix


def labels_from_clusters(points: Sequence[T], clusters: List[List[T]]) -> np.ndarray:
    """
    Convert clusters of points to one label per input point.

    Args:
        points: Points in input order
        clusters: Clusters as returned by a clustering algorithm

    Returns:
        Array of cluster positions; -1 for points in no cluster
    """
    # Repeated points in the input are matched occurrence by occurrence
    positions = defaultdict(deque)
    for index, point in enumerate(points):
        positions[point].append(index)

    labels = np.full(len(points), UNASSIGNED_LABEL, dtype=int)
    for label, cluster in enumerate(clusters):
        for point in cluster:
            labels[positions[point].popleft()] = label

    return labels


def noise_points(points: Sequence[T], clusters: List[List[T]]) -> List[T]:
    """Get the input points that are absent from every cluster."""
    labels = labels_from_clusters(points, clusters)
    return [point for point, label in zip(points, labels) if label == UNASSIGNED_LABEL]


def cluster_cohesion(cluster: Sequence[T], space: MetricSpace[T]) -> float:
    """
    Calculate cluster cohesion (average intra-cluster distance).

    Pairs without a defined distance are ignored.

    Args:
        cluster: Points of one cluster
        space: Metric space defining the distances

    Returns:
        Average cohesion score (lower is better); NaN when no pair is connected
    """
    if len(cluster) < 2:
        return 0.0

    distances = distance_matrix(cluster, space)
    upper_indices = np.triu_indices(len(cluster), k=1)
    pairwise = distances[upper_indices]
    pairwise = pairwise[np.isfinite(pairwise)]

    if len(pairwise) == 0:
        return float('nan')
    return float(np.mean(pairwise))


def evaluate_clustering(points: Sequence[T],
                        clusters: List[List[T]],
                        space: MetricSpace[T]) -> Dict[str, Any]:
    """
    Evaluate clustering quality.

    Args:
        points: Points that were clustered
        clusters: Clusters returned for those points
        space: Metric space defining the distances

    Returns:
        Dictionary of metric scores
    """
    labels = labels_from_clusters(points, clusters)
    n_clusters = len(clusters)
    n_noise = int(np.sum(labels == UNASSIGNED_LABEL))

    metrics = {
        'n_clusters': n_clusters,
        'n_noise': n_noise,
        'cluster_sizes': [len(cluster) for cluster in clusters],
        'cohesion': [cluster_cohesion(cluster, space) for cluster in clusters],
        'silhouette': None
    }

    # Silhouette is only defined for 2..n-1 clusters over finite distances
    clustered_mask = labels != UNASSIGNED_LABEL
    n_clustered = int(np.sum(clustered_mask))
    if 1 < n_clusters < n_clustered:
        clustered_points = [point for point, keep in zip(points, clustered_mask) if keep]
        distances = distance_matrix(clustered_points, space)
        if np.all(np.isfinite(distances)):
            metrics['silhouette'] = float(silhouette_score(
                distances, labels[clustered_mask], metric='precomputed'
            ))

    return metrics
