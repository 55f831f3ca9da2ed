"""
Minimizer Verification

Checks that a single-objective function reproduces its declared minimum
at its declared minimizer. Comparison is tolerance-based by default:
transcendental formulas (Ackley, Rastrigin, Griewank, Salomon) are not
guaranteed to cancel exactly on every platform. Exact comparison is
available through VerificationConfig(exact=True).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import logging
import math

from .errors import MinimizerVerificationError


logger = logging.getLogger(__name__)

# Representative low- and high-dimensional cases
LOW_D = 2
HIGH_D = 137


@dataclass
class VerificationConfig:
    """Configuration for minimizer verification."""
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12
    dimensions: Tuple[int, ...] = (LOW_D, HIGH_D)
    exact: bool = False

    def matches(self, value: float, expected: float) -> bool:
        if self.exact:
            return value == expected
        return math.isclose(value, expected, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


DEFAULT_CONFIG = VerificationConfig()


@dataclass
class VerificationResult:
    """Outcome of verifying one function at one dimensionality."""
    name: str
    dimension: int
    value: float
    expected: float
    passed: bool
    in_bounds: bool

    def to_canonical(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dimension": self.dimension,
            "value": self.value,
            "expected": self.expected,
            "passed": self.passed,
            "in_bounds": self.in_bounds
        }


def _name(function) -> str:
    return getattr(function, 'NAME', None) or function.__name__


def _evaluate_minimizer(function, d: int, config: VerificationConfig):
    """Return (minimizer, value, passed) for dimensionality d."""
    x = function.minimizer(d)
    value = function.f(x)
    logger.debug("%s: f(minimizer(%d)) = %r", _name(function), d, value)
    return x, value, config.matches(value, function.MINIMUM)


def check_minimizer(function, d: int, config: Optional[VerificationConfig] = None) -> float:
    """
    Evaluate function at its minimizer of dimensionality d.

    Args:
        function: A SingleObjective implementer
        d: Requested dimensionality
        config: Comparison settings (default: DEFAULT_CONFIG)

    Returns:
        The value f(minimizer(d))

    Raises:
        MinimizerVerificationError: If the value does not match MINIMUM
    """
    config = config or DEFAULT_CONFIG
    _, value, passed = _evaluate_minimizer(function, d, config)
    if not passed:
        raise MinimizerVerificationError(_name(function), d, value, function.MINIMUM)
    return value


def verify_function(function, config: Optional[VerificationConfig] = None) -> List[VerificationResult]:
    """
    Verify a function at every configured dimensionality.

    Fixed-dimensional functions are verified at their own D only.
    Mismatches are recorded, not raised.
    """
    config = config or DEFAULT_CONFIG
    fixed = getattr(function, 'D', None)
    dimensions = config.dimensions if fixed is None else (fixed,)

    results = []
    for d in dimensions:
        x, value, passed = _evaluate_minimizer(function, d, config)
        if not passed:
            logger.warning(
                "%s: minimizer check failed at d=%d (got %r, expected %r)",
                _name(function), d, value, function.MINIMUM
            )
        results.append(VerificationResult(
            name=_name(function),
            dimension=d,
            value=value,
            expected=function.MINIMUM,
            passed=passed,
            in_bounds=function.in_bounds(x) if hasattr(function, 'in_bounds') else True
        ))
    return results


def verify_catalogue(config: Optional[VerificationConfig] = None) -> List[VerificationResult]:
    """Verify every registered single-objective function."""
    from .registry import list_functions

    results = []
    for function in list_functions(single_objective=True):
        results.extend(verify_function(function, config))

    n_failed = sum(1 for r in results if not r.passed)
    logger.info("Verified %d cases, %d failed", len(results), n_failed)
    return results
