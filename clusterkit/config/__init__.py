"""Configuration module for clusterkit."""

from .thresholds import (
    ConnectedComponentsThresholds,
    DBSCANThresholds,
    OPTICSThresholds,
    ClusteringConfig
)

from .constants import (
    # Algorithms
    ALGORITHM_CONNECTED_COMPONENTS,
    ALGORITHM_DBSCAN,
    ALGORITHM_OPTICS,
    SUPPORTED_ALGORITHMS,
    # Classification ids
    UNCLASSIFIED_ID,
    NOISE_ID,
    UNASSIGNED_LABEL
)

__all__ = [
    # Thresholds
    'ConnectedComponentsThresholds',
    'DBSCANThresholds',
    'OPTICSThresholds',
    'ClusteringConfig',
    # Constants
    'ALGORITHM_CONNECTED_COMPONENTS',
    'ALGORITHM_DBSCAN',
    'ALGORITHM_OPTICS',
    'SUPPORTED_ALGORITHMS',
    'UNCLASSIFIED_ID',
    'NOISE_ID',
    'UNASSIGNED_LABEL'
]
