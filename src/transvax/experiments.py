"""
===========================================================
experiments.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================

Description:
    Parameter sweeps over the two user inputs: grid search over
    (a0_percent, r0_v), tidy results as a DataFrame, and a pivot
    helper for heatmaps/contours drawn elsewhere.

Example Usage:
    from transvax.experiments import grid_sweep, pivot_for_plot
    df = grid_sweep(a0_values=range(0, 101, 5), r0_v_values=[0, 1, 2])
    X, Y, Z = pivot_for_plot(df, x='a0', y='r0_v',
                             value='transmissible_reduction_percent')
-----------------------------------------------------------
License: MIT
===========================================================
"""

import numpy as np
import pandas as pd

from .scenarios import simulate


def _summarize_one(a0_percent, r0_v, t=None, summary_time=None):
    """Run one simulation request and return a flat dict of metrics"""
    result = simulate(a0_percent, r0_v, summary_time=summary_time, t=t)
    rec = {"a0": float(a0_percent), "r0_v": float(r0_v)}
    rec.update(result.metrics.to_dict())
    return rec


def grid_sweep(a0_values, r0_v_values, t: np.ndarray = None, summary_time: float = None) -> pd.DataFrame:
    """
    Evaluate the model across a grid of (a0, r0_v) inputs. Returns a tidy
    pandas DataFrame with one row per input combination.
    """
    records = []
    for a in a0_values:
        for r in r0_v_values:
            records.append(_summarize_one(float(a), float(r), t=t, summary_time=summary_time))
    df = pd.DataFrame.from_records(records)
    return df.sort_values(["a0", "r0_v"]).reset_index(drop=True)


def pivot_for_plot(df: pd.DataFrame, x: str, y: str, value: str):
    """Pivot a DataFrame to 2D arrays for plotting (heatmaps/contour)
    Return X_grid, Y_grid, Z_values
    """
    sub = df[[x, y, value]].drop_duplicates()
    x_vals = np.sort(sub[x].unique())
    y_vals = np.sort(sub[y].unique())
    Z = np.empty((len(y_vals), len(x_vals)), dtype=float)  # rows: y, cols: x
    for i, gy in enumerate(y_vals):
        row = sub[sub[y] == gy].sort_values(x)
        Z[i, :] = row[value].to_numpy()
    X, Y = np.meshgrid(x_vals, y_vals)
    return X, Y, Z
