"""
Function Registry

Lookup of catalogue functions by name, and filtering on the capability
axes. Every catalogue function is registered on import.
"""

from typing import Dict, List, Optional
import logging

from .functions import (
    Ackley,
    ChankongHaimes,
    Griewank,
    Matyas,
    Rastrigin,
    Ridge,
    Rosenbrock,
    Salomon,
    Sphere,
    Zakharov,
)
from .traits import Bounded, Constrained, FixedDimensional, SingleObjective


logger = logging.getLogger(__name__)

FUNCTION_REGISTRY: Dict[str, type] = {}


def _normalize(name: str) -> str:
    return name.strip().lower().replace('-', '_')


def register_function(function: type) -> type:
    """Register a function class under its NAME. Usable as a decorator."""
    FUNCTION_REGISTRY[function.NAME] = function
    logger.debug("Registered benchmark function %s", function.NAME)
    return function


def get_function(name: str) -> type:
    """
    Get a function by registry name or class name (case-insensitive).

    Raises:
        ValueError: If no function matches
    """
    key = _normalize(name)
    if key in FUNCTION_REGISTRY:
        return FUNCTION_REGISTRY[key]
    for function in FUNCTION_REGISTRY.values():
        if function.__name__.lower() == key:
            return function
    raise ValueError(f"Unknown function: {name}. Available: {list(FUNCTION_REGISTRY.keys())}")


def get_all_functions() -> List[type]:
    """Get all registered functions."""
    return list(FUNCTION_REGISTRY.values())


def list_functions(
    single_objective: Optional[bool] = None,
    bounded: Optional[bool] = None,
    constrained: Optional[bool] = None,
    fixed_dimension: Optional[bool] = None
) -> List[type]:
    """
    Get registered functions filtered by capability.

    Each filter left as None is not applied.
    """
    filters = [
        (single_objective, SingleObjective),
        (bounded, Bounded),
        (constrained, Constrained),
        (fixed_dimension, FixedDimensional),
    ]
    selected = []
    for function in FUNCTION_REGISTRY.values():
        if all(wanted is None or issubclass(function, trait) == wanted
               for wanted, trait in filters):
            selected.append(function)
    return selected


def _register_all():
    """Register all catalogue functions."""
    functions = [
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
    ]

    for function in functions:
        register_function(function)


# Auto-register on import
_register_all()
