"""
===========================================================
metrics.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================

Description:
    Comparison statistics derived from scenario trajectories:
    peak vaccinated %, vaccinated % at a chosen time, and the
    % reduction in cumulative infections against the
    pathogen-only baseline.

Notes:
    - Percentages use Python's round(), i.e. half-to-even
      (12.5 -> 12, 13.5 -> 14).
    - Values are reported raw: a reduction can be negative and
      nothing is clamped to [0, 100].
-----------------------------------------------------------
License: MIT
===========================================================
"""

from typing import Dict, NamedTuple

import numpy as np
import pandas as pd

from .model import Trajectory
from .parameters import COMPARTMENTS, Scenario

# elapsed time (years) used for the "one-year vaccinated %" statistic
SUMMARY_TIME = 1.0


class VaccineMetrics(NamedTuple):
    traditional_peak_percent: int
    transmissible_peak_percent: int
    traditional_summary_percent: int
    transmissible_summary_percent: int
    traditional_reduction_percent: int
    transmissible_reduction_percent: int
    summary_time: float

    def to_dict(self) -> Dict[str, float]:
        return self._asdict()


def round_percent(fraction: float) -> int:
    """fraction -> whole percent, half-to-even"""
    return int(round(float(fraction) * 100))


def _series(traj: Trajectory, column: str) -> np.ndarray:
    if column == 'vaccinated':
        return traj.vaccinated
    if column == 'population':
        return traj.population
    if column not in COMPARTMENTS:
        raise KeyError(f"Unknown column '{column}'. Available: {COMPARTMENTS + ('vaccinated', 'population')}")
    return getattr(traj, column)


def grid_index(t: np.ndarray, time: float) -> int:
    """Index of the grid point nearest to time (ties go to the earlier point)"""
    t = np.asarray(t, dtype=float)
    slack = 0.5 * float(np.min(np.diff(t))) if len(t) > 1 else 0.0
    if time < t[0] - slack or time > t[-1] + slack:
        raise ValueError(f"time {time} outside the simulated grid [{t[0]}, {t[-1]}]")
    return int(np.argmin(np.abs(t - time)))


def value_at_time(traj: Trajectory, column: str, time: float) -> float:
    """Value of a compartment (or 'vaccinated' / 'population') at elapsed time"""
    return float(_series(traj, column)[grid_index(traj.t, time)])


def peak_vaccinated_percent(traj: Trajectory) -> int:
    return round_percent(np.max(traj.vaccinated))


def vaccinated_percent_at(traj: Trajectory, time: float = SUMMARY_TIME) -> int:
    return round_percent(value_at_time(traj, 'vaccinated', time))


def outbreak_reduction_percent(traj: Trajectory, baseline: Trajectory) -> int:
    """% reduction of final cumulative infections relative to baseline"""
    c_base = float(baseline.C[-1])
    if not c_base > 0:
        raise ValueError("baseline cumulative infections must be positive")
    return round_percent(1.0 - float(traj.C[-1]) / c_base)


def compute_metrics(trajectories: Dict[Scenario, Trajectory],
                    summary_time: float = SUMMARY_TIME) -> VaccineMetrics:
    """Derive the comparison statistics from the five scenario trajectories"""
    missing = [sc.value for sc in Scenario if sc not in trajectories]
    if missing:
        raise KeyError(f"Missing trajectories for scenarios: {missing}")

    trad = trajectories[Scenario.TRADITIONAL]
    trans = trajectories[Scenario.TRANSMISSIBLE]
    baseline = trajectories[Scenario.PATHOGEN_ONLY]

    return VaccineMetrics(
        traditional_peak_percent=peak_vaccinated_percent(trad),
        transmissible_peak_percent=peak_vaccinated_percent(trans),
        traditional_summary_percent=vaccinated_percent_at(trad, summary_time),
        transmissible_summary_percent=vaccinated_percent_at(trans, summary_time),
        traditional_reduction_percent=outbreak_reduction_percent(
            trajectories[Scenario.TRADITIONAL_PATHOGEN], baseline),
        transmissible_reduction_percent=outbreak_reduction_percent(
            trajectories[Scenario.TRANSMISSIBLE_PATHOGEN], baseline),
        summary_time=float(summary_time),
    )


def metrics_table(trajectories: Dict[Scenario, Trajectory]) -> pd.DataFrame:
    """Tidy per-scenario summary, one row per scenario"""
    records = []
    for sc, traj in trajectories.items():
        peak_idx = int(np.argmax(traj.Ip))
        records.append({
            'scenario': sc.value,
            'peak_vaccinated': float(np.max(traj.vaccinated)),
            'final_vaccinated': float(traj.vaccinated[-1]),
            'peak_prevalence': float(traj.Ip[peak_idx]),
            'peak_time': float(traj.t[peak_idx]),
            'cumulative_infections': float(traj.C[-1]),
        })
    return pd.DataFrame.from_records(records)
