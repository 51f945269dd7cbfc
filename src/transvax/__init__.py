from .exceptions import IntegrationError, InvalidInputError, TransVaxError
from .parameters import Scenario, TransmissibleVaccineParameters, build_scenario
from .model import Trajectory, TransmissibleVaccineModel, derivatives, integrate
from .metrics import VaccineMetrics, compute_metrics, value_at_time
from .scenarios import SimulationResult, run_scenarios, simulate

__version__ = "0.1.0"
