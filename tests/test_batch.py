"""
Tests for Batch Evaluation
"""

import numpy as np
import pytest

from benchmark_functions import (
    evaluate_batch,
    in_bounds_batch,
    Rastrigin,
    Rosenbrock,
    Sphere,
    ChankongHaimes,
)


class TestEvaluateBatch:
    """Test evaluation over rows of a 2-D array."""

    def test_single_objective_shape(self):
        """Test one scalar per row for single-objective functions."""
        points = np.random.uniform(-5, 5, size=(8, 3))
        values = evaluate_batch(Rastrigin, points)
        assert values.shape == (8,)

    def test_matches_rows(self):
        """Test batch values equal per-row evaluation."""
        points = np.random.uniform(-5, 5, size=(5, 4))
        values = evaluate_batch(Rosenbrock, points)
        for x, value in zip(points, values):
            assert value == Rosenbrock.f(x)

    def test_multi_objective_shape(self):
        """Test one objective vector per row for multi-objective functions."""
        points = [[0.0, 0.0], [1.0, 1.0]]
        values = evaluate_batch(ChankongHaimes, points)
        np.testing.assert_array_equal(values, [[5.0, -1.0], [3.0, 9.0]])

    def test_single_point(self):
        """Test a 1-D vector is treated as a batch of one."""
        values = evaluate_batch(Sphere, [1.0, 2.0])
        np.testing.assert_array_equal(values, [5.0])

    def test_empty_batch(self):
        """Test empty arrays give empty results."""
        assert evaluate_batch(Sphere, np.empty((0, 3))).shape == (0,)
        assert evaluate_batch(ChankongHaimes, np.empty((0, 2))).shape == (0, 2)

    def test_empty_list(self):
        """Test an empty list is an empty batch, not one empty vector."""
        assert evaluate_batch(Sphere, []).shape == (0,)
        assert evaluate_batch(ChankongHaimes, []).shape == (0, 2)

    def test_rejects_3d(self):
        """Test arrays with more than two axes are rejected."""
        with pytest.raises(ValueError):
            evaluate_batch(Sphere, np.zeros((2, 2, 2)))


class TestInBoundsBatch:
    """Test bounds masks over rows of a 2-D array."""

    def test_mask(self):
        """Test inclusive bounds per row."""
        points = [[0.0, 0.0], [5.12, -5.12], [6.0, 0.0]]
        np.testing.assert_array_equal(in_bounds_batch(Rastrigin, points), [True, True, False])

    def test_unbounded(self):
        """Test unbounded functions accept every row."""
        assert in_bounds_batch(Sphere, [[1e9, -1e9], [np.inf, 0.0]]).all()

    def test_no_declared_domain(self):
        """Test a function without a domain accepts every row."""
        mask = in_bounds_batch(ChankongHaimes, [[0.0, 0.0], [100.0, -100.0]])
        np.testing.assert_array_equal(mask, [True, True])

    def test_empty_list(self):
        """Test an empty list gives an empty mask."""
        assert in_bounds_batch(Rastrigin, []).shape == (0,)
        assert in_bounds_batch(ChankongHaimes, []).shape == (0,)
