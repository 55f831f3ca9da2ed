"""
Function Contract Records

Immutable metadata describing what a benchmark function promises:
- Domain: closed interval per coordinate, or unrestricted
- Dimensionality: fixed length D, or any positive length
- Constraints: number of equality h_j(x) = 0 and inequality g_i(x) <= 0
- Minimum: known global minimum and its minimizer generator

A FunctionContract composes these records for one function so that
harness code can query a function without knowing its concrete type.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import hashlib
import json

import numpy as np


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """Canonical JSON serialization with sorted keys."""
    return json.dumps(obj, sort_keys=True, separators=(',', ':') if indent is None else None, indent=indent)


def canonical_hash(obj: Any) -> str:
    """Compute SHA-256 hash of canonical JSON."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()


@dataclass(frozen=True)
class DomainSpec:
    """
    Admissible input region, applied to every coordinate.

    Attributes:
        lower: Lower bound (inclusive)
        upper: Upper bound (inclusive)
        bounded: False for an unrestricted domain. The numeric fields of
            an unbounded spec hold the (inf, inf) sentinel and are not a
            usable interval.
    """
    lower: float
    upper: float
    bounded: bool = True

    def __post_init__(self):
        if self.bounded and not self.lower <= self.upper:
            raise ValueError(f"Lower bound must be <= upper bound: ({self.lower}, {self.upper})")

    @classmethod
    def unbounded(cls) -> 'DomainSpec':
        return cls(float('inf'), float('inf'), bounded=False)

    @property
    def width(self) -> float:
        if not self.bounded:
            return float('inf')
        return self.upper - self.lower

    def contains(self, x) -> bool:
        """Check if every coordinate of x lies in [lower, upper]."""
        if not self.bounded:
            return True
        x = np.asarray(x, dtype=np.float64)
        return bool(np.all((x >= self.lower) & (x <= self.upper)))

    def to_canonical(self) -> Dict[str, Any]:
        if not self.bounded:
            return {"bounded": False}
        return {
            "bounded": True,
            "lower": self.lower,
            "upper": self.upper
        }


@dataclass(frozen=True)
class DimensionalitySpec:
    """Required input length; None means any positive length."""
    dimension: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.dimension is not None

    def accepts(self, n: int) -> bool:
        if self.dimension is None:
            return n >= 1
        return n == self.dimension

    def to_canonical(self) -> Dict[str, Any]:
        return {"fixed": self.is_fixed, "dimension": self.dimension}


@dataclass(frozen=True)
class ConstraintSpec:
    """
    Constraint counts.

    Attributes:
        n_eq: Number of equality constraints h_j(x) = 0
        n_ineq: Number of inequality constraints g_i(x) <= 0
    """
    n_eq: int
    n_ineq: int

    @property
    def total(self) -> int:
        return self.n_eq + self.n_ineq

    def to_canonical(self) -> Dict[str, Any]:
        return {"n_eq": self.n_eq, "n_ineq": self.n_ineq}


@dataclass(frozen=True)
class MinimumRecord:
    """Known global minimum and the generator of its minimizer."""
    value: float
    minimizer: Callable[[int], np.ndarray] = field(compare=False, repr=False)

    def to_canonical(self) -> Dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class FunctionContract:
    """
    Complete contract of one benchmark function.

    Attributes:
        name: Registry name
        objective: "single" or "multi"
        dimensionality: Required input length
        domain: Admissible region (None when the problem declares none)
        constraints: Constraint counts (None when unconstrained)
        minimum: Known minimum (None for multi-objective functions)
        n_objectives: Length of the objective vector
    """
    name: str
    objective: str
    dimensionality: DimensionalitySpec
    domain: Optional[DomainSpec] = None
    constraints: Optional[ConstraintSpec] = None
    minimum: Optional[MinimumRecord] = None
    n_objectives: int = 1

    @property
    def is_single_objective(self) -> bool:
        return self.objective == "single"

    @property
    def is_bounded(self) -> bool:
        return self.domain is not None and self.domain.bounded

    @property
    def is_constrained(self) -> bool:
        return self.constraints is not None

    @property
    def is_fixed_dimensional(self) -> bool:
        return self.dimensionality.is_fixed

    def to_canonical(self) -> Dict[str, Any]:
        """Convert to canonical form for hashing/serialization."""
        return {
            "name": self.name,
            "objective": self.objective,
            "n_objectives": self.n_objectives,
            "dimensionality": self.dimensionality.to_canonical(),
            "domain": self.domain.to_canonical() if self.domain else None,
            "constraints": self.constraints.to_canonical() if self.constraints else None,
            "minimum": self.minimum.to_canonical() if self.minimum else None
        }

    def fingerprint(self) -> str:
        """Canonical hash of the contract."""
        return canonical_hash(self.to_canonical())
