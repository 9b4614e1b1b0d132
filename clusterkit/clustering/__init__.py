"""Clustering algorithms and utilities."""

from .base import Clusterer
from .connected_components import ConnectedComponentsClusterer, connected_components
from .dbscan import DBSCANClusterer, dbscan
from .optics import (
    OPTICSClusterer,
    OpticsOrdering,
    compute_ordering,
    extract_clusters,
    optics
)
from .metrics import (
    distance_matrix,
    labels_from_clusters,
    noise_points,
    cluster_cohesion,
    evaluate_clustering
)

__all__ = [
    'Clusterer',
    'ConnectedComponentsClusterer',
    'DBSCANClusterer',
    'OPTICSClusterer',
    'OpticsOrdering',
    'connected_components',
    'dbscan',
    'optics',
    'compute_ordering',
    'extract_clusters',
    'distance_matrix',
    'labels_from_clusters',
    'noise_points',
    'cluster_cohesion',
    'evaluate_clustering'
]
