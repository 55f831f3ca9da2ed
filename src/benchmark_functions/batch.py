"""
Batch Evaluation

Evaluates a function over many input vectors (rows of a 2-D array).
Every evaluation is pure, so callers may split a batch across workers
without coordination.
"""

from typing import Any

import numpy as np


def _as_points(points: Any) -> np.ndarray:
    points = np.asarray(points, dtype=np.float64)
    if points.ndim == 1 and points.size == 0:
        # An empty list is an empty batch, not one empty vector
        return points.reshape(0, 0)
    points = np.atleast_2d(points)
    if points.ndim != 2:
        raise ValueError(f"Expected a 2-D array of points, got shape {points.shape}")
    return points


def evaluate_batch(function, points: Any) -> np.ndarray:
    """
    Evaluate function on each row of points.

    Returns:
        Shape (n_points,) for single-objective functions,
        (n_points, n_objectives) for multi-objective ones
    """
    points = _as_points(points)
    values = [function.f(x) for x in points]
    if not values:
        n_objectives = getattr(function, 'N_OBJECTIVES', None)
        return np.empty((0,) if n_objectives is None else (0, n_objectives))
    return np.asarray(values, dtype=np.float64)


def in_bounds_batch(function, points: Any) -> np.ndarray:
    """
    Boolean mask of rows lying in the function's domain.

    A function that declares no domain places no restriction on its
    input, so every row is reported in bounds.
    """
    points = _as_points(points)
    if not hasattr(function, 'in_bounds'):
        return np.ones(len(points), dtype=bool)
    return np.array([function.in_bounds(x) for x in points], dtype=bool)
