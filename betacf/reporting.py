"""Tabulate special-function and t-distribution values as pandas tables.

This module is the boundary between the numerical core and tabular
artifacts: it builds DataFrames of quantiles and Beta function values and
writes them to CSV.
"""

from __future__ import annotations

import math
import os
import warnings
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import pandas as pd

from .distribution.t_distribution import TDistribution
from .special.beta import log_beta, regularized_beta

DEFAULT_PROBABILITIES: Tuple[float, ...] = (0.90, 0.95, 0.975, 0.99, 0.995)
DEFAULT_DEGREES_OF_FREEDOM: Tuple[float, ...] = (1, 2, 3, 4, 5, 10, 20, 30, 60, 120)


@dataclass(frozen=True)
class TableColumns:
    """Standardized column labels shared by the table builders.

    Attributes:
        df: Degrees of freedom of a t-distribution row.
        x: Upper integration limit of the incomplete Beta function.
        a: First Beta shape parameter.
        b: Second Beta shape parameter.
        regularized_beta: ``I_x(a, b)``.
        log_beta: ``log B(a, b)``; independent of ``x``.
    """

    df: str = "Degrees of Freedom"
    x: str = "x"
    a: str = "a"
    b: str = "b"
    regularized_beta: str = "I_x(a, b)"
    log_beta: str = "log B(a, b)"


COLUMNS = TableColumns()


def probability_column(p: float) -> str:
    """Return the t-table column label for cumulative probability ``p``."""
    return f"p = {p:g}"


def t_table(
    dfs: Sequence[float] = DEFAULT_DEGREES_OF_FREEDOM,
    probabilities: Sequence[float] = DEFAULT_PROBABILITIES,
) -> pd.DataFrame:
    """Build a table of Student's t quantiles.

    Args:
        dfs (Sequence[float]): Degrees of freedom, one row each.
        probabilities (Sequence[float]): Cumulative probabilities in
            ``[0, 1]``, one column each.

    Returns:
        pandas.DataFrame: Column ``Degrees of Freedom`` followed by one
        ``p = ...`` column per probability holding the quantile.

    Raises:
        ValueError: If either sequence is empty or a probability lies outside
            ``[0, 1]``.

    Note:
        Probabilities of exactly 0 or 1 produce infinite quantiles and trigger
        a ``UserWarning``.
    """
    if len(dfs) == 0 or len(probabilities) == 0:
        raise ValueError("Both degrees of freedom and probabilities are required.")
    for p in probabilities:
        if math.isnan(p) or p < 0.0 or p > 1.0:
            raise ValueError(f"Probabilities must lie in [0, 1], got {p!r}")
    if any(p in (0.0, 1.0) for p in probabilities):
        warnings.warn(
            "Probabilities of 0 or 1 map to infinite t quantiles.",
            UserWarning,
            stacklevel=2,
        )

    rows = []
    for df in dfs:
        dist = TDistribution(df)
        row = {COLUMNS.df: float(df)}
        for p in probabilities:
            row[probability_column(p)] = dist.inverse_cumulative_probability(p)
        rows.append(row)

    columns = [COLUMNS.df] + [probability_column(p) for p in probabilities]
    return pd.DataFrame(rows, columns=columns)


def beta_table(
    xs: Iterable[float], params: Iterable[Tuple[float, float]]
) -> pd.DataFrame:
    """Build a long table of ``I_x(a, b)`` and ``log B(a, b)`` values.

    Args:
        xs (Iterable[float]): Evaluation points.
        params (Iterable[tuple[float, float]]): ``(a, b)`` shape pairs.

    Returns:
        pandas.DataFrame: One row per ``(a, b, x)`` combination. Out-of-domain
        combinations hold NaN rather than raising.
    """
    xs = list(xs)
    rows = []
    for a, b in params:
        lb = log_beta(a, b)
        for x in xs:
            rows.append(
                {
                    COLUMNS.a: float(a),
                    COLUMNS.b: float(b),
                    COLUMNS.x: float(x),
                    COLUMNS.regularized_beta: regularized_beta(x, a, b),
                    COLUMNS.log_beta: lb,
                }
            )
    return pd.DataFrame(
        rows,
        columns=[
            COLUMNS.a,
            COLUMNS.b,
            COLUMNS.x,
            COLUMNS.regularized_beta,
            COLUMNS.log_beta,
        ],
    )


def save_table_to_csv(table: pd.DataFrame, path: str) -> str:
    """Write ``table`` to ``path`` as CSV, creating parent directories.

    Returns:
        str: The path written.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    table.to_csv(path, index=False)
    print(f"Saved table to {path}")
    return path
