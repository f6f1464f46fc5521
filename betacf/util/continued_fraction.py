"""Generic evaluation of continued fractions.

A continued fraction is described by two coefficient callables ``a(n, x)`` and
``b(n, x)``::

    a0 + b1 / (a1 + b2 / (a2 + b3 / (a3 + ...)))

The evaluator has no knowledge of what the coefficients mean; special
functions bind them per call (see ``betacf.special.beta.regularized_beta``).

References:
    I. J. Thompson, A. R. Barnett, "Coulomb and Bessel Functions of Complex
    Arguments and Order", J. Comput. Phys. 64 (1986), p. 490, section 18 ff.
    http://mathworld.wolfram.com/ContinuedFraction.html
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from ..exceptions import ConvergenceError, MaxCountExceededError, NotStrictlyPositiveError

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-9
DEFAULT_MAX_ITERATIONS = 1_000_000

Coefficient = Callable[[int, float], float]


class ContinuedFraction:
    """Continued fraction defined by injected ``a`` and ``b`` coefficients.

    Args:
        a (Callable[[int, float], float]): ``a(n, x)``; ``a(0, x)`` is the
            leading term and must be finite.
        b (Callable[[int, float], float]): ``b(n, x)`` for ``n >= 1``.
    """

    def __init__(self, a: Coefficient, b: Coefficient) -> None:
        self._a = a
        self._b = b

    def evaluate(
        self,
        x: float,
        epsilon: float = DEFAULT_EPSILON,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> float:
        """Evaluate the continued fraction at ``x``.

        Uses the modified Lentz algorithm. Zero denominators are not replaced
        by a tiny value; they propagate as IEEE infinities or NaN and are
        reported as divergence.

        Args:
            x (float): Evaluation point.
            epsilon (float): Stop once ``|delta_n - 1| < epsilon``, where
                ``delta_n`` is the ratio of successive convergents.
            max_iterations (int): Upper bound on the number of convergents.

        Returns:
            float: Value of the continued fraction at ``x``.

        Raises:
            ConvergenceError: If a convergent becomes infinite or NaN.
            MaxCountExceededError: If ``max_iterations`` is reached first.
            NotStrictlyPositiveError: If ``epsilon <= 0`` or
                ``max_iterations < 1``.
        """
        if not epsilon > 0:
            raise NotStrictlyPositiveError(epsilon, "epsilon")
        if max_iterations < 1:
            raise NotStrictlyPositiveError(max_iterations, "max_iterations")

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            h_prev = np.float64(self._a(0, x))
            n = 1
            d_prev = np.float64(0.0)
            c_prev = h_prev
            h_n = h_prev

            while n < max_iterations:
                a_n = np.float64(self._a(n, x))
                b_n = np.float64(self._b(n, x))

                d_n = a_n + b_n * d_prev
                c_n = a_n + b_n / c_prev

                d_n = 1.0 / d_n
                delta_n = c_n * d_n
                h_n = h_prev * delta_n

                if np.isinf(h_n):
                    logger.debug("Continued fraction diverged at n=%d, x=%r", n, x)
                    raise ConvergenceError(
                        f"Continued fraction diverged to infinity for value {x!r}"
                    )
                if np.isnan(h_n):
                    logger.debug("Continued fraction produced NaN at n=%d, x=%r", n, x)
                    raise ConvergenceError(
                        f"Continued fraction diverged to NaN for value {x!r}"
                    )

                if abs(delta_n - 1.0) < epsilon:
                    break

                d_prev = d_n
                c_prev = c_n
                h_prev = h_n
                n += 1

        if n >= max_iterations:
            logger.debug(
                "Continued fraction did not converge within %d iterations at x=%r",
                max_iterations,
                x,
            )
            raise MaxCountExceededError(max_iterations, x)

        return float(h_n)
