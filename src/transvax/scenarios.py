"""
===============================================================================
scenarios.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===============================================================================
Scenario runner

Runs the five fixed scenarios for one pair of user inputs:
    1. traditional vaccine only
    2. transmissible vaccine only
    3. traditional vaccine + pathogen
    4. transmissible vaccine + pathogen
    5. pathogen only (baseline)

Example Usage:
    from transvax.scenarios import simulate
    result = simulate(a0_percent=10, r0_v=2.0)
    result.metrics.transmissible_reduction_percent

Notes:
    - simulate() is pure: no caching between calls.
    - Either all five scenarios succeed or the call raises.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, NamedTuple

import numpy as np

from .exceptions import IntegrationError
from .metrics import VaccineMetrics, compute_metrics
from .model import DEFAULT_METHOD, Trajectory, integrate
from .parameters import Scenario, ScenarioSpec, build_scenario, time_grid, validate_inputs


class SimulationResult(NamedTuple):
    """Five trajectories plus the comparison metrics for one request"""
    a0_percent: float
    r0_v: float
    trajectories: Dict[Scenario, Trajectory]
    metrics: VaccineMetrics


def build_scenarios(a0_percent: float, r0_v: float, t: np.ndarray = None) -> Dict[Scenario, ScenarioSpec]:
    """Build all five scenario specs from one snapshot of the inputs"""
    a0_percent, r0_v = float(a0_percent), float(r0_v)
    validate_inputs(a0_percent, r0_v)
    if t is None:
        t = time_grid()
    return {sc: build_scenario(sc, a0_percent, r0_v, t=t) for sc in Scenario}


def run_scenario(spec: ScenarioSpec, method: str = DEFAULT_METHOD) -> Trajectory:
    """Integrate one scenario, tagging any failure with its name"""
    try:
        return integrate(spec.y0, spec.t, spec.params, method=method)
    except IntegrationError as e:
        if e.scenario is not None:
            raise
        raise IntegrationError(str(e), scenario=spec.name) from e


def run_scenarios(a0_percent: float,
                  r0_v: float,
                  t: np.ndarray = None,
                  method: str = DEFAULT_METHOD,
                  parallel_workers: int = 1) -> Dict[Scenario, Trajectory]:
    """Run the five scenarios on a shared time grid.

    Parameters:
    a0_percent: float. Percent of the population vaccinated at t=0 (0-100)
    r0_v: float. Vaccine R0 (0-5)
    t: np.ndarray, optional. Shared output grid; defaults to two years, daily
    method: str. solve_ivp method
    parallel_workers: int. >1 integrates scenarios on a thread pool

    Returns:
    trajectories: dict mapping Scenario -> Trajectory, in Scenario order
    """
    specs = build_scenarios(a0_percent, r0_v, t=t)

    if parallel_workers > 1:
        with ThreadPoolExecutor(max_workers=parallel_workers) as pool:
            futures = {sc: pool.submit(run_scenario, spec, method) for sc, spec in specs.items()}
            # result() re-raises the first failure; nothing partial is returned
            return {sc: fut.result() for sc, fut in futures.items()}

    return {sc: run_scenario(spec, method) for sc, spec in specs.items()}


def simulate(a0_percent: float,
             r0_v: float,
             summary_time: float = None,
             t: np.ndarray = None,
             method: str = DEFAULT_METHOD,
             parallel_workers: int = 1) -> SimulationResult:
    """Run every scenario for (a0_percent, r0_v) and derive the metrics"""
    trajectories = run_scenarios(a0_percent, r0_v, t=t, method=method,
                                 parallel_workers=parallel_workers)
    kwargs = {} if summary_time is None else {'summary_time': summary_time}
    metrics = compute_metrics(trajectories, **kwargs)
    return SimulationResult(
        a0_percent=float(a0_percent),
        r0_v=float(r0_v),
        trajectories=trajectories,
        metrics=metrics,
    )
