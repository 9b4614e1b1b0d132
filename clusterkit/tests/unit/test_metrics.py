"""Unit tests for clustering metrics."""

import math

import numpy as np
import pytest

from clusterkit.clustering.dbscan import dbscan
from clusterkit.clustering.metrics import (
    cluster_cohesion,
    distance_matrix,
    evaluate_clustering,
    labels_from_clusters,
    noise_points
)
from clusterkit.spaces import GraphSpace, MatrixSpace, Node


class TestDistanceMatrix:
    """Test cases for distance_matrix."""

    def test_matches_space(self):
        """Test that matrix entries mirror the space."""
        a, b, c = points = [Node('a'), Node('b'), Node('c')]
        space = GraphSpace()
        space.add_connection(a, b, 2.0)

        matrix = distance_matrix(points, space)

        assert matrix.shape == (3, 3)
        assert np.all(np.diag(matrix) == 0)
        assert matrix[0, 1] == matrix[1, 0] == 2.0
        assert math.isnan(matrix[0, 2])


class TestLabels:
    """Test cases for labels_from_clusters and noise_points."""

    def test_labels_follow_cluster_positions(self):
        """Test labels and noise from a cluster list."""
        points = ['a', 'b', 'c', 'd']
        clusters = [['c', 'a'], ['d']]

        assert labels_from_clusters(points, clusters).tolist() == [0, -1, 0, 1]
        assert noise_points(points, clusters) == ['b']

    def test_repeated_points_matched_per_occurrence(self):
        """Test that equal points are labelled once each."""
        points = ['a', 'a', 'b']
        clusters = [['a'], ['a', 'b']]

        assert labels_from_clusters(points, clusters).tolist() == [0, 1, 1]


class TestEvaluateClustering:
    """Test cases for cohesion and evaluate_clustering."""

    def setup_method(self):
        """Set up test fixtures."""
        square = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
        self.vectors = np.vstack([square, square + [10, 10], [[40, 40]]])
        self.space = MatrixSpace.from_vectors(self.vectors)
        self.points = self.space.cells()

    def test_cluster_cohesion(self):
        """Test mean pairwise distance inside a cluster."""
        cohesion = cluster_cohesion(self.points[:4], self.space)

        assert cohesion == pytest.approx((4 + 2 * np.sqrt(2)) / 6)

    def test_cohesion_of_singleton_is_zero(self):
        """Test cohesion of a single point."""
        assert cluster_cohesion(self.points[:1], self.space) == 0.0

    def test_cohesion_without_connections_is_nan(self):
        """Test cohesion when no pair is connected."""
        points = [Node('a'), Node('b')]

        assert math.isnan(cluster_cohesion(points, GraphSpace()))

    def test_evaluate_dbscan_result(self):
        """Test evaluation metrics for a DBSCAN result."""
        clusters = dbscan(self.points, self.space, range=1.5, min_points=2)

        metrics = evaluate_clustering(self.points, clusters, self.space)

        assert metrics['n_clusters'] == 2
        assert metrics['n_noise'] == 1
        assert metrics['cluster_sizes'] == [4, 4]
        assert len(metrics['cohesion']) == 2
        assert 0.5 < metrics['silhouette'] <= 1

    def test_silhouette_undefined_for_single_cluster(self):
        """Test that silhouette needs two clusters."""
        metrics = evaluate_clustering(self.points, [self.points[:4]], self.space)

        assert metrics['silhouette'] is None

    def test_silhouette_skipped_for_disconnected_space(self):
        """Test that silhouette needs finite distances."""
        a, b, c, d = points = [Node(label) for label in 'abcd']
        space = GraphSpace()
        space.add_connection(a, b, 1)
        space.add_connection(c, d, 1)

        metrics = evaluate_clustering(points, [[a, b], [c, d]], space)

        assert metrics['silhouette'] is None


if __name__ == '__main__':
    pytest.main([__file__])
