"""
Multi-Objective Benchmark Functions
"""

import numpy as np

from ..traits import (
    BenchmarkFunction,
    Constrained,
    FixedDimensional,
    MultiObjective,
)


class ChankongHaimes(BenchmarkFunction, FixedDimensional, Constrained, MultiObjective):
    """
    Chankong and Haimes function (2D, constrained, two objectives).

    f_0(x) = 2 + (x_0 - 2)^2 - (x_1 - 1)^2
    f_1(x) = 9*x_0 - (x_1 - 1)^2
    s.t. g_0(x) = x_0^2 + x_1^2 - 225 <= 0
         g_1(x) = x_0 - 3*x_1 + 10 <= 0

    No box bounds are declared for the canonical problem.
    """
    NAME = "chankong_haimes"
    D = 2
    N_OBJECTIVES = 2
    NH = 0
    NG = 2

    @classmethod
    def f(cls, x) -> np.ndarray:
        cls.check_input(x)
        x = np.asarray(x, dtype=np.float64)
        return np.array([
            2.0 + (x[0] - 2.0) ** 2 - (x[1] - 1.0) ** 2,
            9.0 * x[0] - (x[1] - 1.0) ** 2
        ])

    @classmethod
    def equality_constraints(cls, x) -> np.ndarray:
        cls.check_input(x)
        return np.zeros(cls.NH)

    @classmethod
    def inequality_constraints(cls, x) -> np.ndarray:
        cls.check_input(x)
        x = np.asarray(x, dtype=np.float64)
        return np.array([
            x[0] ** 2 + x[1] ** 2 - 225.0,
            x[0] - 3.0 * x[1] + 10.0
        ])
