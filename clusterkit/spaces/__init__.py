"""Metric spaces the clustering algorithms run over."""

from .base import MetricSpace
from .graph import Node, GraphSpace
from .matrix import (
    MatrixCell,
    MatrixSpace,
    AdjacencyMatrixSpace,
    SparseMatrixSpace
)

__all__ = [
    'MetricSpace',
    'Node',
    'GraphSpace',
    'MatrixCell',
    'MatrixSpace',
    'AdjacencyMatrixSpace',
    'SparseMatrixSpace'
]
