"""Shared constants for clusterkit."""

# Clustering algorithms
ALGORITHM_CONNECTED_COMPONENTS = 'connected_components'
ALGORITHM_DBSCAN = 'dbscan'
ALGORITHM_OPTICS = 'optics'

SUPPORTED_ALGORITHMS = [
    ALGORITHM_CONNECTED_COMPONENTS,
    ALGORITHM_DBSCAN,
    ALGORITHM_OPTICS
]

# Per-point classification ids
UNCLASSIFIED_ID = 0
NOISE_ID = -1

# Label given to points absent from every returned cluster
UNASSIGNED_LABEL = -1
