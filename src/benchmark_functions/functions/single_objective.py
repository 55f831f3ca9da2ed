"""
Single-Objective Benchmark Functions

All functions are N-dimensional and unconstrained. Formulas follow
https://en.wikipedia.org/wiki/Test_functions_for_optimization and
http://benchmarkfcns.xyz, with x 0-indexed and n = len(x).

Evaluation does no length check: an empty input yields 0.0 or nan as
the formula dictates, without numpy warnings.
"""

import math

import numpy as np

from ..traits import (
    BenchmarkFunction,
    Bounded,
    NDimensional,
    SingleObjective,
    Unbounded,
    Unconstrained,
)


def _as_vector(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64).reshape(-1)


class Sphere(BenchmarkFunction, NDimensional, Unconstrained, Unbounded, SingleObjective):
    """
    Sphere function - simplest convex function.

    f(x) = sum(x_i^2)
    Global minimum: f(0, ..., 0) = 0

    Uses the canonical positive sum. Variants that accumulate -x_i^2
    share the minimum value and minimizer at the origin but are concave
    and unbounded below; this is not one of them.
    """
    NAME = "sphere"
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        return float(np.sum(x ** 2))

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Rastrigin(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Rastrigin function - highly multimodal.

    f(x) = A*n + sum(x_i^2 - A*cos(2*pi*x_i)),  A = 10
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "rastrigin"
    BOUNDS = (-5.12, 5.12)
    MINIMUM = 0.0

    A = 10.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        n = x.size
        return float(cls.A * n + np.sum(x ** 2 - cls.A * np.cos(2.0 * np.pi * x)))

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Rosenbrock(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Rosenbrock function - banana-shaped valley.

    f(x) = sum_{i=0}^{n-2} 100*(x_{i+1} - x_i^2)^2 + (1 - x_i)^2
    Global minimum: f(1, ..., 1) = 0
    """
    NAME = "rosenbrock"
    BOUNDS = (-5.0, 10.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.ones(n)


class Ackley(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Ackley function - nearly flat outer region with a deep hole at the center.

    f(x) = -20*exp(-0.2*sqrt(0.5*sum(x_i^2))) - exp(sum(cos(2*pi*x_i))/n) + e + 20
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "ackley"
    BOUNDS = (-5.0, 5.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        n = x.size
        square_sum = np.sum(x ** 2)
        cosine_sum = np.sum(np.cos(2.0 * np.pi * x))
        with np.errstate(divide='ignore', invalid='ignore'):
            cosine_mean = np.float64(cosine_sum) / n
        fx = -20.0 * np.exp(-0.2 * np.sqrt(0.5 * square_sum))
        fx -= np.exp(cosine_mean)
        return float(fx + np.e + 20.0)

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Matyas(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Matyas function, generalized to n dimensions.

    f(x) = 0.26*sum(x_i^2) - 0.48*prod(x_i)
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "matyas"
    BOUNDS = (-10.0, 10.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        return float(0.26 * np.sum(x ** 2) - 0.48 * np.prod(x))

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Griewank(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Griewank function - many regularly distributed local minima.

    f(x) = 1 + sum(x_i^2)/4000 - prod(cos(x_i/sqrt(i))),  i = 1..n
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "griewank"
    BOUNDS = (-600.0, 600.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        i = np.arange(1, x.size + 1)
        cosine_prod = np.prod(np.cos(x / np.sqrt(i)))
        return float(1.0 + np.sum(x ** 2) / 4000.0 - cosine_prod)

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Ridge(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Ridge function.

    f(x) = -1 + x_0 + d*(sum_{i=1}^{n-1} x_i^2)^alpha,  d = 1, alpha = 0
    Global minimum: f(-5, 0, ..., 0) = -5

    With alpha = 0 the power term is constant 1 (0^0 = 1), so the
    minimum sits on the lower bound of x_0. Empty input has no x_0 and
    evaluates to nan.
    """
    NAME = "ridge"
    BOUNDS = (-5.0, 5.0)
    MINIMUM = -5.0

    D_COEF = 1.0
    ALPHA = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        if x.size == 0:
            return math.nan
        square_sum = np.sum(x[1:] ** 2)
        return float(-1.0 + x[0] + cls.D_COEF * square_sum ** cls.ALPHA)

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        v = np.zeros(n)
        v[0] = cls.BOUNDS[0]
        return v


class Zakharov(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Zakharov function.

    f(x) = sum(x_i^2) + s^2 + s^4,  s = sum(0.5*i*x_i),  i = 0..n-1
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "zakharov"
    BOUNDS = (-5.0, 10.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        s = np.sum(0.5 * np.arange(x.size) * x)
        return float(np.sum(x ** 2) + s ** 2 + s ** 4)

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)


class Salomon(BenchmarkFunction, NDimensional, Unconstrained, Bounded, SingleObjective):
    """
    Salomon function.

    f(x) = 1 - cos(2*pi*r) + 0.1*r,  r = sqrt(sum(x_i^2))
    Global minimum: f(0, ..., 0) = 0
    """
    NAME = "salomon"
    BOUNDS = (-100.0, 100.0)
    MINIMUM = 0.0

    @classmethod
    def f(cls, x) -> float:
        x = _as_vector(x)
        r = np.sqrt(np.sum(x ** 2))
        return float(1.0 - np.cos(2.0 * np.pi * r) + 0.1 * r)

    @classmethod
    def minimizer(cls, n: int) -> np.ndarray:
        cls.check_dimension(n)
        return np.zeros(n)
