"""Generic numerical primitives with no special-function knowledge."""

from .continued_fraction import (
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITERATIONS,
    ContinuedFraction,
)

__all__ = ["ContinuedFraction", "DEFAULT_EPSILON", "DEFAULT_MAX_ITERATIONS"]
