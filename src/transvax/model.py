"""
===============================================================================
model.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===============================================================================
Transmissible Vaccine / Pathogen Compartment Model

Deterministic ODE model of a self-disseminating vaccine competing with a
pathogen in a closed population with demographic turnover. Compartments:
- Susceptible (S) to both vaccine and pathogen
- Iv: carrying and transmitting the vaccine
- V: vaccinated, no longer transmitting
- Ip: infected with the pathogen
- R: recovered from the pathogen, temporarily immune
- C: cumulative pathogen infections (accumulator, not part of the population)

Births equal deaths, so S + Iv + V + Ip + R is conserved.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

import warnings
from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd
from scipy.integrate import solve_ivp

from .exceptions import IntegrationError
from .parameters import (
    COMPARTMENTS,
    TransmissibleVaccineParameters,
    initial_conditions,
    time_grid,
)

DEFAULT_METHOD = 'RK45'
DEFAULT_RTOL = 1e-8
DEFAULT_ATOL = 1e-10


def derivatives(t: float, y: np.ndarray, params: TransmissibleVaccineParameters) -> np.ndarray:
    """Calculate derivatives [dS, dIv, dV, dIp, dR, dC].

    Pure function of the state; the solver may pass transient values
    outside [0, 1] and these are used as-is.
    """
    S, Iv, V, Ip, R, C = y
    N = S + Iv + V + Ip + R

    b = params.b
    m = b   # births replace deaths
    beta_v = params.beta_v
    gamma_v = params.gamma_v
    beta_p = params.beta_p
    gamma_p = params.gamma_p
    omega_p = params.omega_p

    new_infections = beta_p * S * Ip

    dS = -b * S + m * N - beta_v * S * Iv - new_infections + omega_p * R
    dIv = -b * Iv + beta_v * (S + R) * Iv - gamma_v * Iv
    dV = -b * V + gamma_v * Iv
    dIp = -b * Ip + new_infections - gamma_p * Ip
    dR = -b * R + gamma_p * Ip - omega_p * R - beta_v * R * Iv
    dC = new_infections

    return np.array([dS, dIv, dV, dIp, dR, dC])


@dataclass(frozen=True)
class Trajectory:
    """Time series of every compartment on a fixed output grid.

    Arrays are made read-only on construction.
    """
    t: np.ndarray
    S: np.ndarray
    Iv: np.ndarray
    V: np.ndarray
    Ip: np.ndarray
    R: np.ndarray
    C: np.ndarray

    def __post_init__(self):
        for name in ('t',) + COMPARTMENTS:
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    @classmethod
    def from_solution(cls, t: np.ndarray, y: np.ndarray) -> 'Trajectory':
        """Build from a solver output array with shape (6, len(t))"""
        return cls(t, *y)

    @property
    def vaccinated(self) -> np.ndarray:
        """Iv + V: everyone carrying vaccine-derived protection"""
        return self.Iv + self.V

    @property
    def population(self) -> np.ndarray:
        return self.S + self.Iv + self.V + self.Ip + self.R

    def __len__(self) -> int:
        return len(self.t)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to pandas DataFrame, one row per grid time"""
        data = {'time': self.t}
        for name in COMPARTMENTS:
            data[name] = getattr(self, name)
        return pd.DataFrame(data)


def integrate(y0: np.ndarray,
              t: np.ndarray,
              params: TransmissibleVaccineParameters,
              method: str = DEFAULT_METHOD,
              rtol: float = DEFAULT_RTOL,
              atol: float = DEFAULT_ATOL) -> Trajectory:
    """Integrate the model and sample it exactly on the grid t.

    Parameters:
    y0: array-like. Initial state [S, Iv, V, Ip, R, C]
    t: np.ndarray. Strictly increasing output times (years)
    params: TransmissibleVaccineParameters
    method: str, default='RK45'. ODE solver method (RK45, RK23, DOP853, Radau, BDF, LSODA)
    rtol, atol: float. Solver tolerances

    Returns:
    trajectory: Trajectory with one sample per entry of t

    Raises:
    IntegrationError if the solver fails or produces non-finite values
    """
    y0 = np.asarray(y0, dtype=float)
    t = np.asarray(t, dtype=float)

    if y0.shape != (len(COMPARTMENTS),):
        raise ValueError(f"initial state must have {len(COMPARTMENTS)} entries, got shape {y0.shape}")
    if t.ndim != 1 or len(t) < 2 or np.any(np.diff(t) <= 0):
        raise ValueError("time grid must be a strictly increasing 1-D array with at least 2 points")
    if np.any(y0 < 0):
        warnings.warn(f"Initial state has negative compartments: {y0}")

    try:
        solution = solve_ivp(
            fun=derivatives,
            t_span=(t[0], t[-1]),
            y0=y0,
            method=method,
            t_eval=t,
            args=(params,),
            rtol=rtol,
            atol=atol,
        )
    except (ArithmeticError, ValueError) as e:
        raise IntegrationError(f"ODE solver raised: {e}") from e

    if not solution.success:
        raise IntegrationError(f"ODE solver failed: {solution.message}")
    if solution.y.shape != (len(COMPARTMENTS), len(t)) or not np.array_equal(solution.t, t):
        raise IntegrationError("ODE solver did not return the requested time grid")
    if not np.all(np.isfinite(solution.y)):
        raise IntegrationError("ODE solver produced non-finite values")

    return Trajectory.from_solution(solution.t, solution.y)


class TransmissibleVaccineModel:
    """Class wrapper around the rate equations and the integrator.

    Parameters:
    params : TransmissibleVaccineParameters
        Parameter object containing all model parameters
    method : str
        solve_ivp method used by simulate()
    """

    def __init__(self, params: TransmissibleVaccineParameters,
                 method: str = DEFAULT_METHOD,
                 rtol: float = DEFAULT_RTOL,
                 atol: float = DEFAULT_ATOL):
        self.params = params
        self.method = method
        self.rtol = rtol
        self.atol = atol
        self.compartments = list(COMPARTMENTS)

        # store simulation results
        self.results = None

    def derivatives(self, t: float, y: np.ndarray) -> np.ndarray:
        return derivatives(t, y, self.params)

    def simulate(self, a0: float = 0.0, Ip0: float = 0.0, t: np.ndarray = None) -> Trajectory:
        """Run the simulation from S=1-a0, Iv=a0, Ip=Ip0.

        Parameters:
        a0: float. Initial vaccinated fraction
        Ip0: float. Initial pathogen fraction
        t: np.ndarray, optional. Output grid; defaults to two years, daily
        """
        if t is None:
            t = time_grid()
        self.results = integrate(initial_conditions(a0, Ip0), t, self.params,
                                 method=self.method, rtol=self.rtol, atol=self.atol)
        return self.results

    def calculate_r0(self) -> Dict[str, float]:
        """Basic reproduction numbers recovered from the transmission rates

        R0 = beta / (gamma + b) for both the vaccine and the pathogen
        """
        p = self.params
        return {
            'vaccine': p.beta_v / (p.gamma_v + p.b),
            'pathogen': p.beta_p / (p.gamma_p + p.b),
        }

    def print_summary(self):
        """Print summary of simulation results."""
        if self.results is None:
            raise ValueError("Must run simulate() before printing summary")

        res = self.results
        peak_idx = int(np.argmax(res.Ip))
        print("TRANSMISSIBLE VACCINE SIMULATION RESULTS:")
        print(f"Simulation time: {res.t[-1]:.1f} years")
        print(f"\n--- VACCINE ---")
        print(f"Peak vaccinated (Iv+V): {np.max(res.vaccinated) * 100:.1f}%")
        print(f"Final vaccinated (Iv+V): {res.vaccinated[-1] * 100:.1f}%")
        print(f"\n--- PATHOGEN ---")
        print(f"Peak prevalence: {res.Ip[peak_idx] * 100:.2f}%")
        print(f"Peak time: {res.t[peak_idx] * 365:.0f} days")
        print(f"Cumulative infections: {res.C[-1]:.4f}")

    def __repr__(self) -> str:
        r0 = self.calculate_r0()
        return (
            f"TransmissibleVaccineModel(\n"
            f"  βv={self.params.beta_v:.4f} (vaccine transmission rate)\n"
            f"  βp={self.params.beta_p:.4f} (pathogen transmission rate)\n"
            f"  R₀v={r0['vaccine']:.4f}\n"
            f"  R₀p={r0['pathogen']:.4f}\n"
            f")"
        )


if __name__ == "__main__":
    from .parameters import create_transmissible_parameters

    params = create_transmissible_parameters(R0_v=2.0)
    params.print_summary()

    print("\nRunning simulation...")
    model = TransmissibleVaccineModel(params)
    model.simulate(a0=0.10, Ip0=0.01)
    model.print_summary()
