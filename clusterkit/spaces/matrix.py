"""Matrix-backed metric spaces."""

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

import numpy as np
from scipy.spatial.distance import cdist

from ..utils.validation import InvalidParameterError
from .base import MetricSpace


@dataclass(frozen=True)
class MatrixCell:
    """A point in a matrix space, identified by its row/column index."""
    value: int


class _IndexedMatrixSpace(MetricSpace[MatrixCell]):
    """Shared bounds checking for square matrix spaces."""

    _matrix: np.ndarray

    @property
    def size(self) -> int:
        return self._matrix.shape[0]

    def cells(self) -> List[MatrixCell]:
        """Get one cell per matrix row, in index order."""
        return [MatrixCell(i) for i in range(self.size)]

    def _check_cells(self, *cells: MatrixCell) -> None:
        for cell in cells:
            if not 0 <= cell.value < self.size:
                raise InvalidParameterError(
                    f"Cell index {cell.value} outside matrix of size {self.size}"
                )


class MatrixSpace(_IndexedMatrixSpace):
    """
    Dense weighted matrix space.

    Unregistered pairs hold NaN. Build from an existing distance matrix
    with ``from_distances`` or from feature vectors with ``from_vectors``.
    """

    def __init__(self, size: int):
        if size < 0:
            raise InvalidParameterError(f"Matrix size must be non-negative, got {size}")
        self._matrix = np.full((size, size), np.nan, dtype=np.float64)

    @classmethod
    def from_distances(cls, distances: Union[np.ndarray, list]) -> 'MatrixSpace':
        """
        Create a space from a square distance matrix.

        Args:
            distances: Array of shape (n, n); NaN entries mean "not connected"

        Returns:
            MatrixSpace holding a copy of the matrix

        Raises:
            InvalidParameterError: If the matrix is not square
        """
        matrix = np.array(distances, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidParameterError(
                f"Expected square 2D distance matrix, got shape {matrix.shape}"
            )

        space = cls(matrix.shape[0])
        space._matrix = matrix
        return space

    @classmethod
    def from_vectors(cls,
                     vectors: Union[np.ndarray, list],
                     metric: str = 'euclidean') -> 'MatrixSpace':
        """
        Create a fully connected space from feature vectors.

        Args:
            vectors: Feature matrix (n_samples, n_features)
            metric: Any metric accepted by scipy's cdist

        Returns:
            MatrixSpace whose cell i is row i of ``vectors``
        """
        vectors = np.asarray(vectors, dtype=np.float64)
        if vectors.ndim != 2:
            raise InvalidParameterError(
                f"Expected 2D array, got {vectors.ndim}D array with shape {vectors.shape}"
            )

        return cls.from_distances(cdist(vectors, vectors, metric=metric))

    def to_array(self) -> np.ndarray:
        """Get a copy of the underlying distance matrix."""
        return self._matrix.copy()

    def add_connection(self, a: MatrixCell, b: MatrixCell, distance: float = 0.0) -> None:
        self._check_cells(a, b)
        self._matrix[a.value, b.value] = distance
        self._matrix[b.value, a.value] = distance

    def distance(self, a: MatrixCell, b: MatrixCell) -> float:
        self._check_cells(a, b)
        return float(self._matrix[a.value, b.value])


class AdjacencyMatrixSpace(_IndexedMatrixSpace):
    """Unweighted matrix space: connected pairs are 0.0 apart, others NaN."""

    def __init__(self, size: int):
        if size < 0:
            raise InvalidParameterError(f"Matrix size must be non-negative, got {size}")
        self._matrix = np.zeros((size, size), dtype=bool)

    def add_connection(self, a: MatrixCell, b: MatrixCell, distance: float = 0.0) -> None:
        """Connect two cells. The distance is ignored."""
        self._check_cells(a, b)
        self._matrix[a.value, b.value] = True
        self._matrix[b.value, a.value] = True

    def is_connected(self, a: MatrixCell, b: MatrixCell) -> bool:
        self._check_cells(a, b)
        return bool(self._matrix[a.value, b.value])

    def distance(self, a: MatrixCell, b: MatrixCell) -> float:
        self._check_cells(a, b)
        return 0.0 if self._matrix[a.value, b.value] else math.nan


class SparseMatrixSpace(MetricSpace[MatrixCell]):
    """Weighted space storing only registered pairs."""

    def __init__(self):
        self._connections: Dict[Tuple[MatrixCell, MatrixCell], float] = {}

    def add_connection(self, a: MatrixCell, b: MatrixCell, distance: float = 0.0) -> None:
        if (a, b) in self._connections:
            raise InvalidParameterError(f"Connection {a} - {b} already registered")

        self._connections[(a, b)] = distance
        self._connections[(b, a)] = distance

    def distance(self, a: MatrixCell, b: MatrixCell) -> float:
        return self._connections.get((a, b), math.nan)

    def __len__(self) -> int:
        # Self connections are stored once, all others twice
        loops = sum(1 for a, b in self._connections if a == b)
        return loops + (len(self._connections) - loops) // 2
