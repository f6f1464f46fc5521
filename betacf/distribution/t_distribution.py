"""Student's t-distribution.

The CDF is expressed through the regularized incomplete Beta function::

    F(x) = 1 - 0.5 * I_{n / (n + x^2)}(n / 2, 1 / 2)    for x > 0

and by symmetry ``F(-x) = 1 - F(x)``.

References:
    http://en.wikipedia.org/wiki/Student's_t-distribution
    http://mathworld.wolfram.com/Studentst-Distribution.html
"""

from __future__ import annotations

import math

import numpy as np

from ..exceptions import NotStrictlyPositiveError
from ..special.beta import regularized_beta
from ..special.gamma import log_gamma
from .real_distribution import RealDistribution

DEFAULT_INVERSE_ABSOLUTE_ACCURACY = 1e-9


class TDistribution(RealDistribution):
    """Student's t-distribution with ``degrees_of_freedom`` degrees of freedom.

    Args:
        degrees_of_freedom (float): Degrees of freedom, strictly positive.
        inverse_cum_accuracy (float): Absolute accuracy of quantile estimates.
        rng (numpy.random.Generator | None): Generator used for sampling.

    Raises:
        NotStrictlyPositiveError: If ``degrees_of_freedom <= 0``.
    """

    def __init__(
        self,
        degrees_of_freedom: float,
        inverse_cum_accuracy: float = DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
        rng: np.random.Generator | None = None,
    ) -> None:
        super().__init__(rng)
        if not degrees_of_freedom > 0:
            raise NotStrictlyPositiveError(degrees_of_freedom, "degrees_of_freedom")

        self._degrees_of_freedom = float(degrees_of_freedom)
        self._solver_absolute_accuracy = float(inverse_cum_accuracy)

        n = self._degrees_of_freedom
        n_plus_1_over_2 = (n + 1.0) / 2.0
        self._factor = (
            log_gamma(n_plus_1_over_2)
            - 0.5 * (math.log(math.pi) + math.log(n))
            - log_gamma(n / 2.0)
        )

    @property
    def degrees_of_freedom(self) -> float:
        return self._degrees_of_freedom

    @property
    def solver_absolute_accuracy(self) -> float:
        return self._solver_absolute_accuracy

    def density(self, x: float) -> float:
        return math.exp(self.log_density(x))

    def log_density(self, x: float) -> float:
        n = self._degrees_of_freedom
        n_plus_1_over_2 = (n + 1.0) / 2.0
        return self._factor - n_plus_1_over_2 * math.log1p(x * x / n)

    def cumulative_probability(self, x: float) -> float:
        """Return ``P(T <= x)``.

        ``x == 0`` returns exactly ``0.5`` without touching the Beta
        function.
        """
        if x == 0:
            return 0.5

        n = self._degrees_of_freedom
        t = regularized_beta(n / (n + (x * x)), 0.5 * n, 0.5)
        if x < 0.0:
            return 0.5 * t
        return 1.0 - 0.5 * t

    @property
    def numerical_mean(self) -> float:
        """``0`` for ``df > 1``, otherwise undefined (NaN)."""
        if self._degrees_of_freedom > 1:
            return 0.0
        return math.nan

    @property
    def numerical_variance(self) -> float:
        """``df / (df - 2)`` for ``df > 2``, ``inf`` for ``1 < df <= 2``, else NaN."""
        df = self._degrees_of_freedom
        if df > 2:
            return df / (df - 2)
        if 1 < df <= 2:
            return math.inf
        return math.nan

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    @property
    def is_support_lower_bound_inclusive(self) -> bool:
        return False

    @property
    def is_support_upper_bound_inclusive(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"TDistribution(degrees_of_freedom={self._degrees_of_freedom!r})"
