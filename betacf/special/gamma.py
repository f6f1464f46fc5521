"""Log-Gamma provider used by the Beta function suite.

The Beta routines treat these functions as trusted black boxes; their accuracy
bounds the accuracy of ``log_beta`` and ``regularized_beta``. Values come from
``scipy.special``.
"""

from __future__ import annotations

import math

from scipy import special as sc

from ..exceptions import OutOfRangeError


def log_gamma(x: float) -> float:
    """Return ``log(Gamma(x))`` for ``x > 0``; NaN otherwise."""
    if math.isnan(x) or x <= 0.0:
        return math.nan
    return float(sc.gammaln(x))


def log_gamma1p(x: float) -> float:
    """Return ``log(Gamma(1 + x))`` for ``-0.5 <= x <= 1.5``.

    Raises:
        OutOfRangeError: If ``x`` lies outside ``[-0.5, 1.5]``.
    """
    if x < -0.5 or x > 1.5:
        raise OutOfRangeError(x, -0.5, 1.5)
    return float(sc.gammaln(1.0 + x))


def gamma(x: float) -> float:
    """Return ``Gamma(x)``."""
    return float(sc.gamma(x))
