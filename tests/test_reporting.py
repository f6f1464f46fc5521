"""Tests for quantile and Beta function tables."""

import math
import os

import numpy as np
import pandas as pd
import pytest
from scipy import special as sc
from scipy import stats

from betacf.reporting import (
    COLUMNS,
    beta_table,
    probability_column,
    save_table_to_csv,
    t_table,
)


def test_t_table_matches_reference_quantiles():
    table = t_table([1, 5, 30], [0.95, 0.975])
    assert list(table.columns) == [COLUMNS.df, "p = 0.95", "p = 0.975"]
    assert len(table) == 3
    for _, row in table.iterrows():
        df = row[COLUMNS.df]
        for p in (0.95, 0.975):
            assert math.isclose(row[probability_column(p)], stats.t.ppf(p, df), rel_tol=1e-7)


def test_t_table_default_layout():
    table = t_table()
    assert len(table) == 10
    assert table.shape[1] == 6


def test_t_table_warns_on_infinite_quantiles():
    with pytest.warns(UserWarning, match="infinite"):
        table = t_table([4], [0.5, 1.0])
    assert table[probability_column(1.0)].iloc[0] == math.inf


@pytest.mark.parametrize("probabilities", [[1.5], [-0.2], [math.nan]])
def test_t_table_rejects_invalid_probabilities(probabilities):
    with pytest.raises(ValueError):
        t_table([4], probabilities)


def test_t_table_rejects_empty_inputs():
    with pytest.raises(ValueError):
        t_table([], [0.5])
    with pytest.raises(ValueError):
        t_table([3], [])


def test_beta_table_values():
    table = beta_table([0.0, 0.5, 1.0], [(2.0, 3.0), (0.5, 0.5)])
    assert len(table) == 6
    rows = table[(table[COLUMNS.a] == 2.0) & (table[COLUMNS.x] == 0.5)]
    assert math.isclose(rows[COLUMNS.regularized_beta].iloc[0], sc.betainc(2.0, 3.0, 0.5), rel_tol=1e-12)
    assert math.isclose(rows[COLUMNS.log_beta].iloc[0], sc.betaln(2.0, 3.0), rel_tol=1e-12)
    edges = table[table[COLUMNS.x].isin([0.0, 1.0])][COLUMNS.regularized_beta]
    assert set(edges) == {0.0, 1.0}


def test_beta_table_out_of_domain_is_nan():
    table = beta_table([1.5], [(1.0, 1.0)])
    assert np.isnan(table[COLUMNS.regularized_beta].iloc[0])


def test_save_table_to_csv(tmp_path):
    table = t_table([10], [0.9])
    path = save_table_to_csv(table, str(tmp_path / "nested" / "t.csv"))
    assert os.path.exists(path)
    loaded = pd.read_csv(path)
    assert list(loaded.columns) == list(table.columns)
    assert np.isclose(loaded[probability_column(0.9)].iloc[0], table[probability_column(0.9)].iloc[0])


def test_table_and_figure_helpers_are_exported_from_package():
    import betacf
    from betacf.plotting import plot_t_distribution

    assert betacf.t_table is t_table
    assert betacf.beta_table is beta_table
    assert betacf.save_table_to_csv is save_table_to_csv
    assert betacf.plot_t_distribution is plot_t_distribution
    for name in ("t_table", "beta_table", "save_table_to_csv", "plot_t_distribution"):
        assert name in betacf.__all__
