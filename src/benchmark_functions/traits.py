"""
Capability Traits

Each benchmark function composes one trait per axis:

- Objective arity:   SingleObjective | MultiObjective
- Boundedness:       Bounded | Unbounded (constrained problems may omit both)
- Constraints:       Constrained | Unconstrained
- Dimensionality:    FixedDimensional | NDimensional

Traits are independent mixins holding class-level constants and
classmethods. Functions are stateless, so every operation can be called
on the class itself (Sphere.f(x)) or on an instance.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

import numpy as np

from .contract import (
    ConstraintSpec,
    DimensionalitySpec,
    DomainSpec,
    FunctionContract,
    MinimumRecord,
)
from .errors import DimensionalityError
from .verification import VerificationConfig, check_minimizer


# =============================================================================
# Objective arity
# =============================================================================

class SingleObjective(ABC):
    """Function returning one scalar with a known global minimum."""

    MINIMUM: float

    @classmethod
    @abstractmethod
    def f(cls, x: Sequence[float]) -> float:
        """Evaluate the objective."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def minimizer(cls, n: int) -> np.ndarray:
        """Return the input of length n attaining MINIMUM."""
        raise NotImplementedError

    @classmethod
    def check_minimizer(cls, d: int, config: Optional[VerificationConfig] = None) -> float:
        """
        Verify that f(minimizer(d)) reproduces MINIMUM.

        Raises:
            MinimizerVerificationError: If the values differ
        """
        return check_minimizer(cls, d, config)


class MultiObjective(ABC):
    """Function returning one scalar per objective."""

    N_OBJECTIVES: int

    @classmethod
    @abstractmethod
    def f(cls, x: Sequence[float]) -> np.ndarray:
        """Evaluate all objectives."""
        raise NotImplementedError


# =============================================================================
# Boundedness
# =============================================================================

class Bounded:
    """Canonical problem restricts every coordinate to BOUNDS (inclusive)."""

    BOUNDS: Tuple[float, float]

    @classmethod
    def domain(cls) -> DomainSpec:
        return DomainSpec(*cls.BOUNDS)

    @classmethod
    def in_bounds(cls, x: Sequence[float]) -> bool:
        return cls.domain().contains(x)


class Unbounded:
    """Canonical problem has no box restriction."""

    BOUNDS: Tuple[float, float] = (float('inf'), float('inf'))

    @classmethod
    def domain(cls) -> DomainSpec:
        return DomainSpec.unbounded()

    @classmethod
    def in_bounds(cls, x: Sequence[float]) -> bool:
        return True


# =============================================================================
# Constraints
# =============================================================================

class Constrained(ABC):
    """
    Problem with constraints h_j(x) = 0 (NH of them) and g_i(x) <= 0 (NG).

    Constraint functions return signed values: an equality is satisfied
    at 0, an inequality at any value <= 0.
    """

    CONSTRAINED = True
    NH: int
    NG: int

    @classmethod
    @abstractmethod
    def equality_constraints(cls, x: Sequence[float]) -> np.ndarray:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def inequality_constraints(cls, x: Sequence[float]) -> np.ndarray:
        raise NotImplementedError

    @classmethod
    def h(cls, x: Sequence[float]) -> np.ndarray:
        return cls.equality_constraints(x)

    @classmethod
    def g(cls, x: Sequence[float]) -> np.ndarray:
        return cls.inequality_constraints(x)

    @classmethod
    def constraint_violation(cls, x: Sequence[float]) -> np.ndarray:
        """Non-negative violation of each constraint, equalities first."""
        return np.concatenate([
            np.abs(np.asarray(cls.equality_constraints(x), dtype=np.float64)),
            np.maximum(0.0, np.asarray(cls.inequality_constraints(x), dtype=np.float64))
        ])

    @classmethod
    def is_feasible(cls, x: Sequence[float], tol: float = 0.0) -> bool:
        """Check if a point satisfies every constraint within tol."""
        violation = cls.constraint_violation(x)
        return bool(np.all(violation <= tol))


class Unconstrained:
    CONSTRAINED = False


# =============================================================================
# Dimensionality
# =============================================================================

class FixedDimensional:
    """Function defined only for inputs of length D."""

    D: int

    @classmethod
    def check_input(cls, x: Sequence[float]):
        if len(x) != cls.D:
            raise DimensionalityError(len(x), cls.D, getattr(cls, 'NAME', cls.__name__))

    @classmethod
    def check_dimension(cls, n: int):
        if n != cls.D:
            raise DimensionalityError(n, cls.D, getattr(cls, 'NAME', cls.__name__))


class NDimensional:
    """Function accepting any positive input length. D = None is the sentinel."""

    D: Optional[int] = None

    @classmethod
    def check_dimension(cls, n: int):
        if n < 1:
            raise DimensionalityError(n, "N (any positive length)", getattr(cls, 'NAME', cls.__name__))


# =============================================================================
# Base
# =============================================================================

_AXES = (
    ("objective", SingleObjective, MultiObjective),
    ("boundedness", Bounded, Unbounded),
    ("constraints", Constrained, Unconstrained),
    ("dimensionality", FixedDimensional, NDimensional),
)


class BenchmarkFunction:
    """
    Base class of every catalogue function.

    Subclasses compose traits from each axis. Composing both traits of
    one axis is rejected when the class is defined.
    """

    NAME: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for axis, left, right in _AXES:
            if issubclass(cls, left) and issubclass(cls, right):
                raise TypeError(
                    f"{cls.__name__} composes both {left.__name__} and "
                    f"{right.__name__} on the {axis} axis"
                )
        if issubclass(cls, Bounded) and hasattr(cls, 'BOUNDS'):
            # Fails on lower > upper
            DomainSpec(*cls.BOUNDS)
        if not cls.NAME:
            cls.NAME = cls.__name__.lower()

    @classmethod
    def describe(cls) -> FunctionContract:
        """Collect the function's contract from its traits."""
        if issubclass(cls, FixedDimensional):
            dimensionality = DimensionalitySpec(cls.D)
        else:
            dimensionality = DimensionalitySpec(None)

        domain = None
        if issubclass(cls, (Bounded, Unbounded)):
            domain = cls.domain()

        constraints = None
        if issubclass(cls, Constrained):
            constraints = ConstraintSpec(n_eq=cls.NH, n_ineq=cls.NG)

        if issubclass(cls, SingleObjective):
            return FunctionContract(
                name=cls.NAME,
                objective="single",
                dimensionality=dimensionality,
                domain=domain,
                constraints=constraints,
                minimum=MinimumRecord(cls.MINIMUM, cls.minimizer),
                n_objectives=1
            )

        return FunctionContract(
            name=cls.NAME,
            objective="multi",
            dimensionality=dimensionality,
            domain=domain,
            constraints=constraints,
            minimum=None,
            n_objectives=cls.N_OBJECTIVES
        )
