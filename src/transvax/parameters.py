"""
===============================================================================
parameters.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===============================================================================
Model Parameters for the Transmissible Vaccine / Pathogen Model

Holds the epidemiological constants shared by every scenario, the parameter
dataclass with its derived rates, and the builder that turns the two user
inputs (initial vaccination percent, vaccine R0) into one of the five fixed
scenarios.

All rates are per year. State vectors are ordered [S, Iv, V, Ip, R, C] and
expressed as fractions of the initial population.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

import enum
import math
from dataclasses import dataclass
from typing import Dict, NamedTuple

import numpy as np

from .exceptions import InvalidInputError

COMPARTMENTS = ('S', 'Iv', 'V', 'Ip', 'R', 'C')

# ==================== Fixed constants ============================================
HOST_LIFESPAN = 1.0                 # years
VACCINE_INFECTIOUS_PERIOD = 14 / 365    # years (two weeks)
PATHOGEN_INFECTIOUS_PERIOD = 21 / 365   # years (three weeks)
PATHOGEN_IMMUNITY_PERIOD = 0.25     # years (three months)
PATHOGEN_R0 = 5.0
PATHOGEN_SEED = 0.01                # initial Ip in pathogen scenarios

# ==================== User input bounds ==========================================
A0_PERCENT_RANGE = (0.0, 100.0)
R0_V_RANGE = (0.0, 5.0)

# ==================== Time grid ==================================================
T_MAX = 2.0         # years
DT = 1 / 365        # daily output


@dataclass(frozen=True)
class TransmissibleVaccineParameters:
    """
    Parameter set for the vaccine / pathogen compartment model.

    Periods are in years, reproduction numbers are dimensionless.
    Derived rates (b, gamma_v, beta_v, gamma_p, beta_p, omega_p) are
    computed in __post_init__ and are not constructor arguments.
    """

    D_life: float = HOST_LIFESPAN           # average host lifespan
    D_inf_v: float = VACCINE_INFECTIOUS_PERIOD
    R0_v: float = 0.0                       # vaccine basic reproduction number
    D_inf_p: float = PATHOGEN_INFECTIOUS_PERIOD
    D_imm_p: float = PATHOGEN_IMMUNITY_PERIOD
    R0_p: float = PATHOGEN_R0               # pathogen basic reproduction number

    def __post_init__(self):
        """Validate constants and calculate derived rates"""
        for name in ('D_life', 'D_inf_v', 'D_inf_p', 'D_imm_p'):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive period, got {value}")
        for name in ('R0_v', 'R0_p'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {value}")

        # frozen dataclass: derived values go through object.__setattr__
        b = 1.0 / self.D_life
        gamma_v = 1.0 / self.D_inf_v
        gamma_p = 1.0 / self.D_inf_p
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'gamma_v', gamma_v)
        object.__setattr__(self, 'beta_v', self.R0_v * (gamma_v + b))
        object.__setattr__(self, 'gamma_p', gamma_p)
        object.__setattr__(self, 'beta_p', self.R0_p * (gamma_p + b))
        object.__setattr__(self, 'omega_p', 1.0 / self.D_imm_p)

    @property
    def transmissible(self) -> bool:
        return self.R0_v > 0

    def to_dict(self) -> Dict[str, float]:
        """Convert parameters to dictionary for easy inspection."""
        return {
            'D_life': self.D_life,
            'D_inf_v': self.D_inf_v,
            'R0_v': self.R0_v,
            'D_inf_p': self.D_inf_p,
            'D_imm_p': self.D_imm_p,
            'R0_p': self.R0_p,
            'b': self.b,
            'gamma_v': self.gamma_v,
            'beta_v': self.beta_v,
            'gamma_p': self.gamma_p,
            'beta_p': self.beta_p,
            'omega_p': self.omega_p,
        }

    def print_summary(self):
        """Print parameter summary for documentation."""
        print("TRANSMISSIBLE VACCINE MODEL PARAMETERS:")
        print("\n--- DEMOGRAPHY ---")
        print(f"Host lifespan: {self.D_life:.2f} years")
        print(f"Birth/death rate (b): {self.b:.3f} per year")

        print("\n--- VACCINE ---")
        print(f"R₀ (vaccine): {self.R0_v:.2f}")
        print(f"Infectious period: {self.D_inf_v * 365:.1f} days")
        print(f"Transmission rate (βv): {self.beta_v:.3f} per year")

        print("\n--- PATHOGEN ---")
        print(f"R₀ (pathogen): {self.R0_p:.2f}")
        print(f"Infectious period: {self.D_inf_p * 365:.1f} days")
        print(f"Immunity period: {self.D_imm_p * 365:.1f} days")
        print(f"Transmission rate (βp): {self.beta_p:.3f} per year")


class Scenario(enum.Enum):
    """The five fixed scenarios compared by the model"""

    TRADITIONAL = 'traditional'
    TRANSMISSIBLE = 'transmissible'
    TRADITIONAL_PATHOGEN = 'traditional_pathogen'
    TRANSMISSIBLE_PATHOGEN = 'transmissible_pathogen'
    PATHOGEN_ONLY = 'pathogen_only'

    @property
    def uses_transmissible_vaccine(self) -> bool:
        return self in (Scenario.TRANSMISSIBLE, Scenario.TRANSMISSIBLE_PATHOGEN)

    @property
    def seeds_pathogen(self) -> bool:
        return self in (
            Scenario.TRADITIONAL_PATHOGEN,
            Scenario.TRANSMISSIBLE_PATHOGEN,
            Scenario.PATHOGEN_ONLY,
        )

    @property
    def seeds_vaccine(self) -> bool:
        return self is not Scenario.PATHOGEN_ONLY


class ScenarioSpec(NamedTuple):
    """Everything needed to integrate one scenario"""
    scenario: Scenario
    params: TransmissibleVaccineParameters
    y0: np.ndarray
    t: np.ndarray

    @property
    def name(self) -> str:
        return self.scenario.value


def validate_inputs(a0_percent: float, r0_v: float):
    """Reject user inputs outside the slider ranges.

    Values are never clamped: an out-of-range or non-finite input raises
    InvalidInputError.
    """
    lo, hi = A0_PERCENT_RANGE
    if not math.isfinite(a0_percent) or not lo <= a0_percent <= hi:
        raise InvalidInputError(
            f"initial vaccination a0 must be within [{lo:g}, {hi:g}] percent, got {a0_percent}")
    lo, hi = R0_V_RANGE
    if not math.isfinite(r0_v) or not lo <= r0_v <= hi:
        raise InvalidInputError(
            f"vaccine R0 must be within [{lo:g}, {hi:g}], got {r0_v}")


def build_parameters(R0_v: float = 0.0) -> TransmissibleVaccineParameters:
    """Build the shared parameter set; only the vaccine R0 varies by scenario"""
    return TransmissibleVaccineParameters(R0_v=float(R0_v))


def initial_conditions(a0: float, Ip0: float = 0.0) -> np.ndarray:
    """Initial state [S, Iv, V, Ip, R, C] for vaccinated fraction a0.

    Parameters:
    a0: float. Fraction (not percent) of the population holding the vaccine at t=0
    Ip0: float. Fraction infected with the pathogen at t=0

    The pathogen seed is added on top of S + Iv = 1, so pathogen scenarios
    start with a total population of 1 + Ip0.
    """
    return np.array([1.0 - a0, a0, 0.0, Ip0, 0.0, 0.0], dtype=float)


def time_grid(t_max: float = T_MAX, dt: float = DT) -> np.ndarray:
    """Evenly spaced output times from 0 to t_max inclusive"""
    if t_max <= 0 or dt <= 0:
        raise InvalidInputError("t_max and dt must be positive")
    n_steps = int(round(t_max / dt))
    return np.linspace(0.0, n_steps * dt, n_steps + 1)


def build_scenario(scenario: Scenario,
                   a0_percent: float,
                   r0_v: float,
                   t: np.ndarray = None) -> ScenarioSpec:
    """Build parameters, initial state and time grid for one fixed scenario.

    Parameters:
    scenario: Scenario. Which of the five scenarios to build
    a0_percent: float. Percent of the population vaccinated at t=0 (0-100)
    r0_v: float. Vaccine R0 used by the transmissible scenarios
    t: np.ndarray, optional. Output grid; defaults to two years, daily

    Returns:
    spec: ScenarioSpec
    """
    validate_inputs(a0_percent, r0_v)
    scenario = Scenario(scenario)

    R0_v = r0_v if scenario.uses_transmissible_vaccine else 0.0
    a0 = a0_percent / 100.0 if scenario.seeds_vaccine else 0.0
    Ip0 = PATHOGEN_SEED if scenario.seeds_pathogen else 0.0

    if t is None:
        t = time_grid()

    return ScenarioSpec(
        scenario=scenario,
        params=build_parameters(R0_v),
        y0=initial_conditions(a0, Ip0),
        t=np.asarray(t, dtype=float),
    )


def create_default_parameters():
    """Traditional (non-transmissible) vaccine parameter set"""
    return build_parameters(R0_v=0.0)


def create_transmissible_parameters(R0_v: float = 2.0):
    """Transmissible vaccine parameter set"""
    return build_parameters(R0_v=R0_v)


if __name__ == "__main__":
    params = create_transmissible_parameters()
    params.print_summary()

    print("\nParameter dictionary:")
    import pprint
    pprint.pprint(params.to_dict())
