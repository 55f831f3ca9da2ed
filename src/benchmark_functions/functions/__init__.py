"""
Function Catalogue

Single-objective: Sphere, Rastrigin, Rosenbrock, Ackley, Matyas,
Griewank, Ridge, Zakharov, Salomon.
Multi-objective: ChankongHaimes.
"""

from .single_objective import (
    Sphere,
    Rastrigin,
    Rosenbrock,
    Ackley,
    Matyas,
    Griewank,
    Ridge,
    Zakharov,
    Salomon,
)
from .multi_objective import ChankongHaimes

__all__ = [
    'Sphere',
    'Rastrigin',
    'Rosenbrock',
    'Ackley',
    'Matyas',
    'Griewank',
    'Ridge',
    'Zakharov',
    'Salomon',
    'ChankongHaimes',
]
