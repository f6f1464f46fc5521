"""Exception types raised by the numerical core and its consumers.

Domain violations subclass ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working. Numerical failures of
iterative algorithms subclass ``ArithmeticError``.
"""

from __future__ import annotations


class MathError(ArithmeticError):
    """Base class for failures of an iterative numerical algorithm."""


class ConvergenceError(MathError):
    """Raised when a recurrence produces an infinite or NaN intermediate."""


class MaxCountExceededError(MathError):
    """Raised when the iteration budget is exhausted before convergence.

    Attributes:
        max_iterations (int): Iteration limit that was reached.
        x (float): Evaluation point of the failed computation.
    """

    def __init__(self, max_iterations: int, x: float) -> None:
        self.max_iterations = max_iterations
        self.x = x
        super().__init__(
            f"Maximum number of iterations ({max_iterations}) exceeded "
            f"for evaluation point {x!r}"
        )


class OutOfRangeError(ValueError):
    """Raised when an argument lies outside a closed interval ``[lo, hi]``."""

    def __init__(self, value: float, lo: float, hi: float) -> None:
        self.value = value
        self.lo = lo
        self.hi = hi
        super().__init__(f"{value!r} out of [{lo!r}, {hi!r}] range")


class NumberIsTooSmallError(ValueError):
    """Raised when an argument is below its lower bound.

    Attributes:
        value (float): Offending argument.
        minimum (float): Lower bound.
        bound_is_allowed (bool): Whether ``value == minimum`` is acceptable.
    """

    def __init__(self, value: float, minimum: float, bound_is_allowed: bool) -> None:
        self.value = value
        self.minimum = minimum
        self.bound_is_allowed = bound_is_allowed
        op = ">=" if bound_is_allowed else ">"
        super().__init__(f"{value!r} is smaller than the minimum ({op} {minimum!r})")


class NotStrictlyPositiveError(NumberIsTooSmallError):
    """Raised when a distribution parameter must be strictly positive."""

    def __init__(self, value: float, name: str = "value") -> None:
        super().__init__(value, 0.0, False)
        self.name = name
        self.args = (f"{name} must be strictly positive, got {value!r}",)
