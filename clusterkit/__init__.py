"""Connected components, DBSCAN and OPTICS over pluggable metric spaces."""

from .clustering import (
    Clusterer,
    ConnectedComponentsClusterer,
    DBSCANClusterer,
    OPTICSClusterer,
    OpticsOrdering,
    compute_ordering,
    connected_components,
    dbscan,
    evaluate_clustering,
    extract_clusters,
    optics
)
from .config import ClusteringConfig
from .factories import clusterer_from_config, get_clusterer, register_clusterer
from .spaces import (
    AdjacencyMatrixSpace,
    GraphSpace,
    MatrixCell,
    MatrixSpace,
    MetricSpace,
    Node,
    SparseMatrixSpace
)
from .utils.validation import InvalidParameterError

__version__ = '1.0.0'

__all__ = [
    'Clusterer',
    'ConnectedComponentsClusterer',
    'DBSCANClusterer',
    'OPTICSClusterer',
    'OpticsOrdering',
    'compute_ordering',
    'connected_components',
    'dbscan',
    'evaluate_clustering',
    'extract_clusters',
    'optics',
    'ClusteringConfig',
    'clusterer_from_config',
    'get_clusterer',
    'register_clusterer',
    'AdjacencyMatrixSpace',
    'GraphSpace',
    'MatrixCell',
    'MatrixSpace',
    'MetricSpace',
    'Node',
    'SparseMatrixSpace',
    'InvalidParameterError'
]
