"""Base class for continuous distributions on the real line."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

import numpy as np
from scipy.optimize import brentq

from ..exceptions import NotStrictlyPositiveError, OutOfRangeError

logger = logging.getLogger(__name__)

DEFAULT_SOLVER_ABSOLUTE_ACCURACY = 1e-6


class RealDistribution(ABC):
    """Continuous distribution with a CDF-based quantile solver and sampler.

    Subclasses supply the density, the CDF, the first two moments and the
    support bounds. Quantiles are found by bracketing the root of
    ``cdf(x) - p`` and refining it with Brent's method; sampling uses
    inversion, so a subclass gets both for free.

    Args:
        rng (numpy.random.Generator | None): Generator used by ``sample``.
            A fresh ``numpy.random.default_rng()`` is created when omitted.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def density(self, x: float) -> float:
        """Return the probability density function evaluated at ``x``."""

    @abstractmethod
    def cumulative_probability(self, x: float) -> float:
        """Return ``P(X <= x)``."""

    @property
    @abstractmethod
    def numerical_mean(self) -> float:
        """Mean of the distribution, NaN when undefined."""

    @property
    @abstractmethod
    def numerical_variance(self) -> float:
        """Variance of the distribution, NaN when undefined."""

    @property
    @abstractmethod
    def support_lower_bound(self) -> float:
        ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> float:
        ...

    @property
    def is_support_connected(self) -> bool:
        return True

    @property
    def solver_absolute_accuracy(self) -> float:
        return DEFAULT_SOLVER_ABSOLUTE_ACCURACY

    def probability(self, x: float) -> float:
        """Return ``P(X = x)``, which is zero for a continuous distribution."""
        return 0.0

    def log_density(self, x: float) -> float:
        with np.errstate(divide="ignore"):
            return float(np.log(self.density(x)))

    def probability_between(self, x0: float, x1: float) -> float:
        """Return ``P(x0 < X <= x1)``.

        Raises:
            ValueError: If ``x0 > x1``.
        """
        if x0 > x1:
            raise ValueError(
                f"Lower endpoint ({x0!r}) must be less than or equal to "
                f"upper endpoint ({x1!r})"
            )
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> float:
        """Return the smallest ``x`` such that ``P(X <= x) >= p``.

        The search interval is derived from the one-sided Chebyshev
        inequality when the mean and variance are finite, and grown by
        doubling otherwise.

        Args:
            p (float): Cumulative probability in ``[0, 1]``.

        Returns:
            float: The ``p``-quantile. ``p = 0`` and ``p = 1`` map to the
            support bounds.

        Raises:
            OutOfRangeError: If ``p`` is outside ``[0, 1]``.
        """
        if math.isnan(p) or p < 0.0 or p > 1.0:
            raise OutOfRangeError(p, 0, 1)

        lower_bound = self.support_lower_bound
        if p == 0.0:
            return lower_bound
        upper_bound = self.support_upper_bound
        if p == 1.0:
            return upper_bound

        mu = self.numerical_mean
        var = self.numerical_variance
        sig = math.sqrt(var) if var >= 0 else math.nan
        chebyshev_applies = math.isfinite(mu) and math.isfinite(sig)

        if math.isinf(lower_bound):
            if chebyshev_applies:
                lower_bound = mu - sig * math.sqrt((1.0 - p) / p)
            else:
                lower_bound = -1.0
                while self.cumulative_probability(lower_bound) >= p:
                    lower_bound *= 2.0

        if math.isinf(upper_bound):
            if chebyshev_applies:
                upper_bound = mu + sig * math.sqrt(p / (1.0 - p))
            else:
                upper_bound = 1.0
                while self.cumulative_probability(upper_bound) < p:
                    upper_bound *= 2.0

        logger.debug(
            "Solving for %r-quantile in [%r, %r]", p, lower_bound, upper_bound
        )
        return float(
            brentq(
                lambda x: self.cumulative_probability(x) - p,
                lower_bound,
                upper_bound,
                xtol=self.solver_absolute_accuracy,
            )
        )

    def reseed_random_generator(self, seed: int | None) -> None:
        """Replace the sampling generator with one seeded by ``seed``."""
        self._rng = np.random.default_rng(seed)

    def sample(self, size: int | None = None):
        """Draw random values by inversion.

        Args:
            size (int | None): Number of values; a single float is returned
                when omitted.

        Returns:
            float | numpy.ndarray: One value, or an array of ``size`` values.

        Raises:
            NotStrictlyPositiveError: If ``size`` is not positive.
        """
        if size is None:
            return self.inverse_cumulative_probability(float(self._rng.random()))
        if size <= 0:
            raise NotStrictlyPositiveError(size, "size")
        uniforms = self._rng.random(size)
        return np.array([self.inverse_cumulative_probability(float(u)) for u in uniforms])
