"""Unit tests for DBSCAN clusterer."""

import numpy as np
import pytest
from sklearn.cluster import DBSCAN as SklearnDBSCAN

from clusterkit.clustering.dbscan import DBSCANClusterer, dbscan
from clusterkit.spaces import GraphSpace, MatrixCell, MatrixSpace, Node, SparseMatrixSpace
from clusterkit.utils.validation import InvalidParameterError


def _star(space, points):
    """Connect a to b, c and d."""
    a, b, c, d = points
    space.add_connection(a, b, 6)
    space.add_connection(a, c, 4)
    space.add_connection(a, d, 4)
    return space


def _blobs():
    """Three unit squares far apart plus one outlier."""
    square = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
    return np.vstack([
        square,
        square + [10, 0],
        square + [0, 20],
        [[50, 50]],
    ])


class TestDBSCAN:
    """Test cases for dbscan."""

    def setup_method(self):
        """Set up test fixtures."""
        self.points = [Node(label) for label in 'abcd']
        self.space = _star(GraphSpace(), self.points)

    def test_min_points_2(self):
        """Test that the far leaf is left out with min_points=2."""
        clusters = dbscan(self.points, self.space, range=5, min_points=2)

        a, b, c, d = self.points
        assert len(clusters) == 1
        assert len(clusters[0]) == 3
        assert set(clusters[0]) == {a, c, d}
        assert b not in clusters[0]

    def test_min_points_3(self):
        """Test that no cluster forms without a core point."""
        clusters = dbscan(self.points, self.space, range=5, min_points=3)

        assert clusters == []

    def test_sparse_matrix_space(self):
        """Test the star scenario on a sparse matrix space."""
        points = [MatrixCell(i) for i in range(4)]
        space = _star(SparseMatrixSpace(), points)

        clusters = dbscan(points, space, range=5, min_points=2)

        assert [set(cluster) for cluster in clusters] == [
            {MatrixCell(0), MatrixCell(2), MatrixCell(3)}
        ]

    def test_depth_first_discovery_order(self):
        """Test that seeds are expanded last in, first out."""
        clusters = dbscan(self.points, self.space, range=5, min_points=2)

        a, b, c, d = self.points
        # Seeds are pushed c, d and popped last in first out
        assert clusters[0] == [a, d, c]

    def test_noise_reclassified_into_cluster(self):
        """Test that a point marked noise can later join a cluster."""
        hub, leaf, x, y = Node('hub'), Node('leaf'), Node('x'), Node('y')
        space = GraphSpace()
        for other in (leaf, x, y):
            space.add_connection(hub, other, 1)

        # The leaf is visited first and marked noise before hub claims it
        clusters = dbscan([leaf, hub, x, y], space, range=2, min_points=2)

        assert len(clusters) == 1
        assert clusters[0][0] is hub
        assert set(clusters[0]) == {hub, leaf, x, y}

    def test_border_point_does_not_expand(self):
        """Test that neighbours of a border point are not pulled in."""
        a, b, c, d, e = points = [Node(label) for label in 'abcde']
        space = GraphSpace()
        space.add_connection(a, b, 1)
        space.add_connection(a, c, 1)
        space.add_connection(a, e, 1)
        # d hangs off border point b
        space.add_connection(b, d, 1)

        clusters = dbscan(points, space, range=1, min_points=3)

        assert [set(cluster) for cluster in clusters] == [{a, b, c, e}]

    def test_min_points_zero_makes_every_point_core(self):
        """Test that isolated points form singleton clusters with min_points=0."""
        a, b = points = [Node('a'), Node('b')]

        clusters = dbscan(points, GraphSpace(), range=1, min_points=0)

        assert clusters == [[a], [b]]

    def test_matches_sklearn_on_separated_blobs(self):
        """Test agreement with sklearn DBSCAN on vector data."""
        vectors = _blobs()
        space = MatrixSpace.from_vectors(vectors)
        points = space.cells()

        clusters = dbscan(points, space, range=1.5, min_points=2)

        # sklearn counts the point itself towards min_samples
        labels = SklearnDBSCAN(eps=1.5, min_samples=3).fit_predict(vectors)
        expected = {
            frozenset(np.where(labels == label)[0].tolist())
            for label in set(labels) - {-1}
        }
        assert {frozenset(cell.value for cell in cluster) for cluster in clusters} == expected

    def test_noise_absent_from_result(self):
        """Test that the outlier is not in any cluster."""
        space = MatrixSpace.from_vectors(_blobs())
        points = space.cells()

        clusters = dbscan(points, space, range=1.5, min_points=2)

        clustered = {cell for cluster in clusters for cell in cluster}
        assert MatrixCell(12) not in clustered
        assert len(clustered) == 12

    def test_increasing_range_only_merges(self):
        """Test that a wider range merges clusters without splitting any."""
        space = MatrixSpace.from_vectors(_blobs())
        points = space.cells()

        narrow = dbscan(points, space, range=1.5, min_points=2)
        # The first two squares are 9 apart, the third is 19 away
        wide = dbscan(points, space, range=10, min_points=2)

        wide_sets = [set(cluster) for cluster in wide]
        for cluster in narrow:
            assert any(set(cluster) <= wide_cluster for wide_cluster in wide_sets)
        assert len(narrow) == 3
        assert len(wide) == 2

    def test_permutation_invariance(self):
        """Test that reversing the input yields the same clusters."""
        space = MatrixSpace.from_vectors(_blobs())
        points = space.cells()

        forward = dbscan(points, space, range=1.5, min_points=2)
        backward = dbscan(list(reversed(points)), space, range=1.5, min_points=2)

        assert {frozenset(c) for c in forward} == {frozenset(c) for c in backward}

    def test_deterministic(self):
        """Test that repeated runs return identical lists."""
        space = MatrixSpace.from_vectors(_blobs())
        points = space.cells()

        first = dbscan(points, space, range=1.5, min_points=2)
        second = dbscan(points, space, range=1.5, min_points=2)

        assert first == second

    def test_empty_points(self):
        """Test clustering an empty point list."""
        assert dbscan([], GraphSpace(), range=1, min_points=1) == []

    @pytest.mark.parametrize('range_, min_points', [
        (-1.0, 2),
        (float('nan'), 2),
        ('5', 2),
        (5, -1),
        (5, 2.5),
        (5, True),
    ])
    def test_invalid_parameters(self, range_, min_points):
        """Test parameter validation."""
        with pytest.raises(InvalidParameterError):
            dbscan(self.points, self.space, range=range_, min_points=min_points)

    def test_invalid_space(self):
        """Test that an object without distance is rejected."""
        with pytest.raises(InvalidParameterError):
            dbscan(self.points, object(), range=5, min_points=2)


class TestDBSCANClusterer:
    """Test cases for DBSCANClusterer."""

    def setup_method(self):
        """Set up test fixtures."""
        self.space = MatrixSpace.from_vectors(_blobs())
        self.points = self.space.cells()

    def test_cluster_records_statistics(self):
        """Test fitted labels and counts."""
        clusterer = DBSCANClusterer(range=1.5, min_points=2)
        clusters = clusterer.cluster(self.points, self.space)

        assert len(clusters) == 3
        assert clusterer.n_clusters_ == 3
        assert clusterer.n_noise_ == 1
        assert clusterer.labels_[12] == -1
        assert clusterer.labels_.tolist()[:4] == [0, 0, 0, 0]

    def test_get_params(self):
        """Test getting clusterer parameters."""
        clusterer = DBSCANClusterer(range=1.5, min_points=2)
        clusterer.cluster(self.points, self.space)

        params = clusterer.get_params()

        assert params['algorithm'] == 'dbscan'
        assert params['range'] == 1.5
        assert params['min_points'] == 2
        assert params['n_clusters'] == 3
        assert params['n_noise'] == 1

    def test_invalid_min_points_rejected(self):
        """Test validation at construction time."""
        with pytest.raises(InvalidParameterError):
            DBSCANClusterer(range=1.0, min_points=-3)


if __name__ == '__main__':
    pytest.main([__file__])
