"""
Tests for rolling and forging calculators.
"""

from math import log, sqrt

import pytest

from processcalc.calculator import calculate_forging, calculate_rolling
from processcalc.enums import DieType
from processcalc.exceptions import InvalidParameterError, MaterialNotFoundError
from processcalc.io.models import ForgingParameters, RollingParameters, RollingResults


class TestRolling:
    """Flat rolling, single pass."""

    def test_returns_results_record(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert isinstance(result, RollingResults)

    def test_accepts_parameter_record(self, rolling_params):
        result = calculate_rolling(RollingParameters(**rolling_params))
        assert result.rolling_force > 0

    def test_geometry(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert result.reduction_ratio == pytest.approx(20.0)
        assert result.true_strain == pytest.approx(log(10 / 8))
        assert result.contact_length == pytest.approx(sqrt(150 * 2))

    def test_flow_stress_power_law(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert result.average_flow_stress == pytest.approx(530 * log(1.25) ** 0.26)

    def test_force_and_pressure_consistent(self, rolling_params):
        """Roll pressure is force over contact area, i.e. the flow stress."""
        result = calculate_rolling(rolling_params)
        assert result.rolling_force == pytest.approx(
            result.average_flow_stress * 100 * result.contact_length
        )
        assert result.roll_pressure == pytest.approx(result.average_flow_stress)

    def test_torque_uses_half_contact_length(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert result.torque == pytest.approx(result.rolling_force * result.contact_length / 2 / 1000)

    def test_power_in_kilowatts(self, rolling_params):
        result = calculate_rolling(rolling_params)
        # 60 m/min on a 300mm roll
        omega = 60 * 1000 / (3.141592653589793 * 300) * 2 * 3.141592653589793 / 60
        assert result.rolling_power == pytest.approx(result.torque * omega / 1000)

    def test_exit_velocity_and_slip(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert result.exit_velocity == pytest.approx(75.0)
        assert result.forward_slip == pytest.approx(25.0)

    def test_separating_force_below_rolling_force(self, rolling_params):
        result = calculate_rolling(rolling_params)
        assert 0 < result.separating_force < result.rolling_force

    def test_temperature_is_optional(self, rolling_params):
        params = {k: v for k, v in rolling_params.items() if k != "temperature"}
        assert calculate_rolling(params).rolling_force == pytest.approx(
            calculate_rolling(rolling_params).rolling_force
        )

    @pytest.mark.parametrize("material", ["steel-low-carbon", "steel-medium-carbon", "aluminum-6061", "copper"])
    @pytest.mark.parametrize("final", [1.0, 5.0, 9.9])
    def test_force_and_power_positive(self, rolling_params, material, final):
        result = calculate_rolling({**rolling_params, "material": material, "final_thickness": final})
        assert result.rolling_force > 0
        assert result.rolling_power > 0

    def test_harder_material_needs_more_force(self, rolling_params):
        soft = calculate_rolling({**rolling_params, "material": "aluminum-6061"})
        hard = calculate_rolling({**rolling_params, "material": "steel-medium-carbon"})
        assert hard.rolling_force > soft.rolling_force

    def test_unknown_material(self, rolling_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_rolling({**rolling_params, "material": "unobtainium"})

    def test_material_checked_before_geometry(self, rolling_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_rolling({**rolling_params, "material": "nope", "width": 0})

    @pytest.mark.parametrize("override", [
        {"final_thickness": 10.0},
        {"final_thickness": 12.0},
        {"final_thickness": 0.0},
        {"width": 0.0},
        {"width": -5.0},
        {"roll_diameter": 0.0},
        {"rolling_speed": 0.0},
        {"friction_coefficient": -0.1},
    ])
    def test_invalid_geometry_raises(self, rolling_params, override):
        with pytest.raises(InvalidParameterError):
            calculate_rolling({**rolling_params, **override})

    def test_final_not_less_than_initial_message(self, rolling_params):
        with pytest.raises(InvalidParameterError, match="greater than final thickness") as exc_info:
            calculate_rolling({**rolling_params, "final_thickness": 10.0})
        assert exc_info.value.field == "final_thickness"

    def test_result_is_frozen(self, rolling_params):
        result = calculate_rolling(rolling_params)
        with pytest.raises(Exception):
            result.rolling_force = 0


class TestForging:
    """Open-die upsetting."""

    def test_geometry(self, forging_params):
        result = calculate_forging(forging_params)
        assert result.reduction_ratio == pytest.approx(40.0)
        assert result.true_strain == pytest.approx(log(100 / 60))

    def test_force_formula_flat_dies(self, forging_params):
        result = calculate_forging(forging_params)
        area = 3.141592653589793 * 25 ** 2
        friction_factor = 1 + 0.3 * 50 / (3 * 60)
        assert result.forging_force == pytest.approx(result.average_flow_stress * area * friction_factor * 1000)

    def test_grooved_dies_lower_friction(self, forging_params):
        flat = calculate_forging(forging_params)
        grooved = calculate_forging({**forging_params, "die_type": "grooved"})
        assert grooved.forging_force < flat.forging_force
        ratio = (1 + 0.3 * 50 / 240) / (1 + 0.3 * 50 / 180)
        assert grooved.forging_force / flat.forging_force == pytest.approx(ratio)

    def test_die_type_case_insensitive(self, forging_params):
        params = ForgingParameters(**{**forging_params, "die_type": "GROOVED"})
        assert params.die_type is DieType.GROOVED

    def test_work_and_power(self, forging_params):
        result = calculate_forging(forging_params)
        assert result.work_done == pytest.approx(result.forging_force * 40 / 1000)
        assert result.forging_power == result.work_done

    def test_fixed_efficiency(self, forging_params):
        assert calculate_forging(forging_params).efficiency == 0.85

    def test_zero_friction_is_allowed(self, forging_params):
        result = calculate_forging({**forging_params, "friction_coefficient": 0})
        area = 3.141592653589793 * 25 ** 2
        assert result.forging_force == pytest.approx(result.average_flow_stress * area * 1000)

    def test_unknown_material(self, forging_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_forging({**forging_params, "material": "steel-mild"})

    @pytest.mark.parametrize("override", [
        {"final_height": 100.0},
        {"final_height": 120.0},
        {"diameter": 0.0},
        {"diameter": -1.0},
    ])
    def test_invalid_geometry_raises(self, forging_params, override):
        with pytest.raises(InvalidParameterError):
            calculate_forging({**forging_params, **override})
