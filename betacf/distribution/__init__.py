"""
Probability distributions built on the Beta function suite.

Modules:
    real_distribution:
        Abstract base providing quantiles (bracketing plus Brent's method)
        and inversion sampling on top of a subclass's CDF.

    t_distribution:
        Student's t-distribution; its CDF is a single call to
        ``regularized_beta``.
"""

from .real_distribution import RealDistribution
from .t_distribution import DEFAULT_INVERSE_ABSOLUTE_ACCURACY, TDistribution

__all__ = ["RealDistribution", "TDistribution", "DEFAULT_INVERSE_ABSOLUTE_ACCURACY"]
