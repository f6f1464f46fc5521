"""
Special functions used by the distribution layer.

Modules:
    gamma:
        Log-Gamma provider (``log_gamma``, ``log_gamma1p``, ``gamma``) backed
        by ``scipy.special``. Treated as a trusted black box by ``beta``.

    beta:
        ``log_beta`` and the regularized incomplete Beta function
        ``regularized_beta``, with the NSWC log-Gamma difference helpers
        they are built on.

Design Principle:
    Every function is a pure function of its numeric arguments. Top-level
    entry points return NaN outside their domain; internal helpers raise.
"""

from .beta import DEFAULT_EPSILON, DELTA, HALF_LOG_TWO_PI, log_beta, regularized_beta
from .gamma import gamma, log_gamma, log_gamma1p

__all__ = [
    "DEFAULT_EPSILON",
    "DELTA",
    "HALF_LOG_TWO_PI",
    "log_beta",
    "regularized_beta",
    "gamma",
    "log_gamma",
    "log_gamma1p",
]
