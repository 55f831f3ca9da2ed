"""
Benchmark Functions - Canonical Test Functions for Optimization Algorithms

Each function composes independent capability traits:
- SingleObjective / MultiObjective
- Bounded / Unbounded
- Constrained / Unconstrained
- FixedDimensional / NDimensional

and declares a checkable contract: bounds, known minimum, minimizer,
dimensionality and constraints. Harness code can rely on the contract
without knowing the concrete function.

Key Features:
- Stateless, pure evaluation (safe to call from any thread)
- Name-based lookup and capability filtering via the registry
- Minimizer verification with documented floating-point tolerance
"""

import logging

from .errors import DimensionalityError, MinimizerVerificationError
from .contract import (
    DomainSpec,
    DimensionalitySpec,
    ConstraintSpec,
    MinimumRecord,
    FunctionContract,
    canonical_dumps,
    canonical_hash,
)
from .traits import (
    BenchmarkFunction,
    SingleObjective,
    MultiObjective,
    Bounded,
    Unbounded,
    Constrained,
    Unconstrained,
    FixedDimensional,
    NDimensional,
)
from .verification import (
    VerificationConfig,
    VerificationResult,
    check_minimizer,
    verify_function,
    verify_catalogue,
    LOW_D,
    HIGH_D,
)
from .functions import (
    Sphere,
    Rastrigin,
    Rosenbrock,
    Ackley,
    Matyas,
    Griewank,
    Ridge,
    Zakharov,
    Salomon,
    ChankongHaimes,
)
from .registry import (
    FUNCTION_REGISTRY,
    register_function,
    get_function,
    get_all_functions,
    list_functions,
)
from .batch import evaluate_batch, in_bounds_batch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DimensionalityError",
    "MinimizerVerificationError",
    # Contract
    "DomainSpec",
    "DimensionalitySpec",
    "ConstraintSpec",
    "MinimumRecord",
    "FunctionContract",
    "canonical_dumps",
    "canonical_hash",
    # Traits
    "BenchmarkFunction",
    "SingleObjective",
    "MultiObjective",
    "Bounded",
    "Unbounded",
    "Constrained",
    "Unconstrained",
    "FixedDimensional",
    "NDimensional",
    # Verification
    "VerificationConfig",
    "VerificationResult",
    "check_minimizer",
    "verify_function",
    "verify_catalogue",
    "LOW_D",
    "HIGH_D",
    # Catalogue
    "Sphere",
    "Rastrigin",
    "Rosenbrock",
    "Ackley",
    "Matyas",
    "Griewank",
    "Ridge",
    "Zakharov",
    "Salomon",
    "ChankongHaimes",
    # Registry
    "FUNCTION_REGISTRY",
    "register_function",
    "get_function",
    "get_all_functions",
    "list_functions",
    # Batch
    "evaluate_batch",
    "in_bounds_batch",
]
