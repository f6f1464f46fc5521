"""
A Python package for Beta-family special functions and Student's t.

Evaluates continued fractions with the modified Lentz algorithm and uses them,
together with the Didonato & Morris log-Gamma difference routines, to compute
log B(p, q) and the regularized incomplete Beta function to double precision.

Modules:
    - util.continued_fraction: Generic continued-fraction evaluator.
    - special: log-Gamma provider, log_beta and regularized_beta.
    - distribution: Student's t-distribution built on regularized_beta.
    - reporting: pandas tables of quantiles and Beta function values.
    - plotting: Density and CDF figures.
"""

__version__ = "1.0.0"

from .distribution import RealDistribution, TDistribution
from .exceptions import (
    ConvergenceError,
    MathError,
    MaxCountExceededError,
    NotStrictlyPositiveError,
    NumberIsTooSmallError,
    OutOfRangeError,
)
from .plotting import plot_t_distribution
from .reporting import beta_table, save_table_to_csv, t_table
from .special import gamma, log_beta, log_gamma, log_gamma1p, regularized_beta
from .util import ContinuedFraction

__all__ = [
    # Numerical primitives
    "ContinuedFraction",
    # Special functions
    "log_beta",
    "regularized_beta",
    "gamma",
    "log_gamma",
    "log_gamma1p",
    # Distributions
    "RealDistribution",
    "TDistribution",
    # Tables and figures
    "t_table",
    "beta_table",
    "save_table_to_csv",
    "plot_t_distribution",
    # Exceptions
    "MathError",
    "ConvergenceError",
    "MaxCountExceededError",
    "OutOfRangeError",
    "NumberIsTooSmallError",
    "NotStrictlyPositiveError",
]
