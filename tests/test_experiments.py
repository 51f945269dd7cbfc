"""Tests for transvax.experiments — input sweeps."""

import numpy as np

from transvax.experiments import grid_sweep, pivot_for_plot


def test_grid_sweep_rows_and_columns():
    t = np.linspace(0.0, 2.0, 101)
    df = grid_sweep([10, 0], [1.0, 0.0], t=t)
    assert len(df) == 4
    assert list(df["a0"]) == [0.0, 0.0, 10.0, 10.0]
    assert list(df["r0_v"]) == [0.0, 1.0, 0.0, 1.0]
    for col in ("traditional_peak_percent", "transmissible_reduction_percent", "summary_time"):
        assert col in df.columns


def test_no_vaccine_row_has_no_reduction():
    t = np.linspace(0.0, 2.0, 101)
    df = grid_sweep([0], [0.0], t=t)
    assert df.loc[0, "traditional_reduction_percent"] == 0
    assert df.loc[0, "traditional_peak_percent"] == 0


def test_pivot_for_plot():
    t = np.linspace(0.0, 2.0, 101)
    df = grid_sweep([0, 20], [0.0, 2.0], t=t)
    X, Y, Z = pivot_for_plot(df, x="a0", y="r0_v", value="transmissible_peak_percent")
    assert X.shape == Y.shape == Z.shape == (2, 2)
    assert Z[0, 0] == 0
    assert Z[0, 1] == 20
