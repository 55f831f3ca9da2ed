"""
Error Types

Two faults exist in the catalogue:
- DimensionalityError: input length does not match a function's
  dimensionality (fixed-dimensional evaluation, minimizer generation)
- MinimizerVerificationError: the claimed minimizer does not reproduce
  the claimed minimum (verification only, never raised by evaluation)
"""


class DimensionalityError(ValueError):
    """Input vector length is not admissible for the function."""

    def __init__(self, size: int, expected, name: str = None):
        self.size = size
        self.expected = expected
        self.name = name
        target = f"function {name}" if name else "a function"
        super().__init__(
            f"A vector with size {size} was used with {target} "
            f"of dimensionality {expected}."
        )


class MinimizerVerificationError(AssertionError):
    """f(minimizer(d)) does not equal the declared minimum."""

    def __init__(self, name: str, dimension: int, value: float, expected: float):
        self.name = name
        self.dimension = dimension
        self.value = value
        self.expected = expected
        super().__init__(
            f"{name}: f(minimizer({dimension})) = {value!r}, "
            f"expected minimum {expected!r}"
        )
