"""Tests for transvax.parameters — parameter set, input validation, scenario builder."""

import math

import numpy as np
import pytest

from transvax.exceptions import InvalidInputError
from transvax.parameters import (
    PATHOGEN_SEED,
    Scenario,
    TransmissibleVaccineParameters,
    build_parameters,
    build_scenario,
    initial_conditions,
    time_grid,
    validate_inputs,
)


# ── Parameter set ─────────────────────────────────────────────────────

class TestParameters:
    def test_fixed_constants(self):
        p = build_parameters()
        assert p.D_life == 1.0
        assert p.D_inf_v == pytest.approx(14 / 365)
        assert p.D_inf_p == pytest.approx(21 / 365)
        assert p.D_imm_p == 0.25
        assert p.R0_p == 5.0
        assert p.R0_v == 0.0

    def test_derived_rates(self):
        p = build_parameters(R0_v=2.0)
        assert p.b == pytest.approx(1.0)
        assert p.gamma_v == pytest.approx(365 / 14)
        assert p.beta_v == pytest.approx(2.0 * (365 / 14 + 1.0))
        assert p.gamma_p == pytest.approx(365 / 21)
        assert p.beta_p == pytest.approx(5.0 * (365 / 21 + 1.0))
        assert p.omega_p == pytest.approx(4.0)

    def test_traditional_vaccine_has_no_transmission(self):
        p = build_parameters(R0_v=0.0)
        assert p.beta_v == 0.0
        assert not p.transmissible

    def test_frozen(self):
        p = build_parameters()
        with pytest.raises(AttributeError):
            p.R0_v = 3.0

    @pytest.mark.parametrize("field", ["D_life", "D_inf_v", "D_inf_p", "D_imm_p"])
    def test_zero_period_rejected(self, field):
        with pytest.raises(InvalidInputError):
            TransmissibleVaccineParameters(**{field: 0.0})

    def test_negative_r0_rejected(self):
        with pytest.raises(InvalidInputError):
            TransmissibleVaccineParameters(R0_v=-0.5)

    def test_to_dict_contains_derived(self):
        d = build_parameters(R0_v=1.0).to_dict()
        for key in ("b", "gamma_v", "beta_v", "gamma_p", "beta_p", "omega_p"):
            assert key in d


# ── Input validation ──────────────────────────────────────────────────

class TestValidateInputs:
    @pytest.mark.parametrize("a0, r0_v", [(0, 0), (100, 5), (35, 2.25)])
    def test_accepts_range(self, a0, r0_v):
        validate_inputs(a0, r0_v)

    @pytest.mark.parametrize("a0, r0_v", [
        (-5, 1.0), (105, 1.0), (10, -0.25), (10, 5.25),
        (math.nan, 1.0), (10, math.inf),
    ])
    def test_rejects_out_of_range(self, a0, r0_v):
        with pytest.raises(InvalidInputError):
            validate_inputs(a0, r0_v)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_inputs(150, 1.0)


# ── Time grid and initial state ───────────────────────────────────────

class TestTimeGrid:
    def test_default_grid(self):
        t = time_grid()
        assert len(t) == 731
        assert t[0] == 0.0
        assert t[-1] == pytest.approx(2.0)
        assert t[365] == pytest.approx(1.0)
        np.testing.assert_allclose(np.diff(t), 1 / 365)

    def test_invalid_step(self):
        with pytest.raises(InvalidInputError):
            time_grid(dt=0.0)


class TestInitialConditions:
    def test_vaccine_only(self):
        np.testing.assert_allclose(initial_conditions(0.2), [0.8, 0.2, 0, 0, 0, 0])

    def test_pathogen_seed(self):
        y0 = initial_conditions(0.1, 0.01)
        assert y0[3] == 0.01
        assert y0[5] == 0.0


# ── Scenario builder ──────────────────────────────────────────────────

class TestBuildScenario:
    def test_traditional(self):
        spec = build_scenario(Scenario.TRADITIONAL, 10, 3.0)
        assert spec.params.R0_v == 0.0
        np.testing.assert_allclose(spec.y0, [0.9, 0.1, 0, 0, 0, 0])

    def test_transmissible(self):
        spec = build_scenario(Scenario.TRANSMISSIBLE, 10, 3.0)
        assert spec.params.R0_v == 3.0
        assert spec.y0[3] == 0.0

    def test_traditional_pathogen(self):
        spec = build_scenario(Scenario.TRADITIONAL_PATHOGEN, 10, 3.0)
        assert spec.params.R0_v == 0.0
        assert spec.y0[1] == pytest.approx(0.1)
        assert spec.y0[3] == PATHOGEN_SEED

    def test_transmissible_pathogen(self):
        spec = build_scenario(Scenario.TRANSMISSIBLE_PATHOGEN, 10, 3.0)
        assert spec.params.R0_v == 3.0
        assert spec.y0[3] == PATHOGEN_SEED

    def test_pathogen_only_ignores_vaccine_inputs(self):
        spec = build_scenario(Scenario.PATHOGEN_ONLY, 60, 4.0)
        assert spec.params.R0_v == 0.0
        np.testing.assert_allclose(spec.y0, [1.0, 0, 0, PATHOGEN_SEED, 0, 0])

    def test_accepts_scenario_name(self):
        spec = build_scenario("pathogen_only", 10, 1.0)
        assert spec.scenario is Scenario.PATHOGEN_ONLY
        assert spec.name == "pathogen_only"

    def test_rejects_invalid_inputs(self):
        with pytest.raises(InvalidInputError):
            build_scenario(Scenario.TRADITIONAL, 120, 1.0)
