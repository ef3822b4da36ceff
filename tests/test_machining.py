"""
Tests for turning, milling and drilling calculators and Taylor tool life.
"""

import pytest

from processcalc.calculator import (
    calculate_drilling,
    calculate_milling,
    calculate_turning,
    round_half_up,
    taylor_tool_life,
)
from processcalc.enums import ToolMaterial
from processcalc.exceptions import InvalidParameterError, MaterialNotFoundError


class TestTaylorToolLife:
    """T = (C / V) ** (1 / n)."""

    def test_at_constant_speed_life_is_one_minute(self):
        # C for carbide at machinability 100 is 200 m/min
        assert taylor_tool_life(200, ToolMaterial.CARBIDE, 100) == pytest.approx(1.0)

    def test_halving_speed(self):
        # n = 0.2 -> halving V multiplies T by 2**5
        assert taylor_tool_life(100, ToolMaterial.CARBIDE, 100) == pytest.approx(32.0)

    def test_machinability_scales_constant(self):
        assert taylor_tool_life(15, "hss", 50) == pytest.approx(1.0)

    def test_constant_factor(self):
        assert taylor_tool_life(160, ToolMaterial.CARBIDE, 100, 0.8) == pytest.approx(1.0)

    def test_slower_is_longer(self):
        tool = ToolMaterial.CERAMIC
        assert taylor_tool_life(100, tool, 70) > taylor_tool_life(200, tool, 70)


class TestTurning:
    """Single longitudinal turning pass."""

    def test_kinematics(self, turning_params):
        result = calculate_turning(turning_params)
        assert result.spindle_speed == 955
        assert result.material_removal_rate == pytest.approx(6.0)
        assert result.machining_time == pytest.approx(0.52)

    def test_force_and_power(self, turning_params):
        result = calculate_turning(turning_params)
        assert result.cutting_force == 440
        assert result.cutting_power == pytest.approx(1.1)

    def test_surface_roughness(self, turning_params):
        result = calculate_turning({**turning_params, "feed_rate": 0.8})
        assert result.surface_roughness == pytest.approx(0.1)

    def test_tool_life_and_cost(self, turning_params):
        result = calculate_turning(turning_params)
        expected_life = taylor_tool_life(150, ToolMaterial.CARBIDE, 70)
        assert result.tool_life == round_half_up(expected_life)
        assert result.cost_per_part > 0

    def test_low_tool_life_recommendation(self, turning_params):
        result = calculate_turning(turning_params)
        assert result.recommendations == (
            "Tool life is low - consider using coolant or reducing cutting parameters",
        )

    def test_speed_recommendations(self, turning_params):
        fast = calculate_turning({**turning_params, "cutting_speed": 200})
        slow = calculate_turning({**turning_params, "cutting_speed": 100})
        assert fast.recommendations[0] == "Consider reducing cutting speed to extend tool life"
        assert slow.recommendations[0] == "Cutting speed can be increased for higher productivity"

    def test_coolant_recommendation_for_hard_to_machine(self, turning_params):
        result = calculate_turning({
            **turning_params, "material": "stainless-304", "coolant": False, "cutting_speed": 100,
        })
        assert result.recommendations[-1] == "Use coolant to improve tool life and surface finish"

    def test_high_feed_and_power(self, turning_params):
        result = calculate_turning({**turning_params, "feed_rate": 0.8, "depth_of_cut": 6})
        assert "High feed rate may cause poor surface finish" in result.recommendations
        assert "High power consumption - check machine capability" in result.recommendations

    def test_tool_material_case_insensitive(self, turning_params):
        result = calculate_turning({**turning_params, "tool_material": "Carbide"})
        assert result.spindle_speed == 955

    def test_unknown_tool_material(self, turning_params):
        with pytest.raises(ValueError):
            calculate_turning({**turning_params, "tool_material": "obsidian"})

    def test_zero_diameter_raises(self, turning_params):
        with pytest.raises(InvalidParameterError):
            calculate_turning({**turning_params, "diameter": 0})

    @pytest.mark.parametrize("field", ["length", "cutting_speed", "feed_rate", "depth_of_cut"])
    def test_non_positive_raises(self, turning_params, field):
        with pytest.raises(InvalidParameterError):
            calculate_turning({**turning_params, field: -1})

    def test_unknown_material(self, turning_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_turning({**turning_params, "material": "brass-360"})


class TestMilling:
    """Face milling."""

    def test_kinematics(self, milling_params):
        result = calculate_milling(milling_params)
        assert result.cutting_speed == pytest.approx(314.2)
        assert result.feed_per_tooth == pytest.approx(0.1)
        assert result.material_removal_rate == pytest.approx(40.0)

    def test_passes_step_over(self, milling_params):
        # ceil(100 / 16) = 7 passes at 2000 mm/min
        result = calculate_milling(milling_params)
        assert result.machining_time == pytest.approx(0.35)

    def test_cutting_force(self, milling_params):
        result = calculate_milling(milling_params)
        assert result.cutting_force == pytest.approx(2630, abs=1)
        assert result.cutting_power > 0

    def test_feed_per_tooth_recommendations(self, milling_params):
        heavy = calculate_milling({**milling_params, "feed_rate": 8000})
        light = calculate_milling({**milling_params, "feed_rate": 500})
        assert heavy.recommendations[0] == "Feed per tooth is high - may cause tool breakage"
        assert light.recommendations[0] == "Feed per tooth is low - may cause work hardening"

    def test_few_teeth_and_deep_cut(self, milling_params):
        result = calculate_milling({**milling_params, "number_of_teeth": 2, "feed_rate": 1000, "depth": 12})
        assert "Consider using end mill with more teeth for better surface finish" in result.recommendations
        assert "Deep cuts may cause chatter - consider multiple passes" in result.recommendations

    def test_zero_teeth_raises(self, milling_params):
        with pytest.raises(InvalidParameterError, match="at least 1"):
            calculate_milling({**milling_params, "number_of_teeth": 0})

    @pytest.mark.parametrize("field", ["width", "length", "depth", "cutter_diameter", "spindle_speed", "feed_rate"])
    def test_non_positive_raises(self, milling_params, field):
        with pytest.raises(InvalidParameterError):
            calculate_milling({**milling_params, field: 0})

    def test_unknown_material(self, milling_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_milling({**milling_params, "material": "aluminum-1100"})


class TestDrilling:
    """Twist drilling."""

    def test_kinematics(self, drilling_params):
        result = calculate_drilling(drilling_params)
        assert result.cutting_speed == pytest.approx(22.6)
        assert result.material_removal_rate == pytest.approx(0.11)
        assert result.drilling_time == pytest.approx(0.148)

    def test_thrust_torque_power(self, drilling_params):
        result = calculate_drilling(drilling_params)
        assert result.thrust_force == 18
        assert result.torque == pytest.approx(6.635, abs=0.01)
        assert result.power == pytest.approx(0.63)

    def test_tool_life_in_holes(self, drilling_params):
        result = calculate_drilling(drilling_params)
        assert result.tool_life == 58

    def test_coolant_multiplies_life(self, drilling_params):
        wet = calculate_drilling(drilling_params)
        dry = calculate_drilling({**drilling_params, "coolant": False})
        assert wet.tool_life == pytest.approx(dry.tool_life * 1.5, abs=1)

    def test_fallback_recommendation(self, drilling_params):
        result = calculate_drilling(drilling_params)
        assert result.recommendations == ("Drilling parameters are appropriate for this application",)

    def test_deep_hole_and_high_feed(self, drilling_params):
        result = calculate_drilling({**drilling_params, "hole_depth": 60, "feed_rate": 1.0})
        assert result.recommendations[:2] == (
            "Feed rate is high for this hole diameter - may cause drill breakage",
            "Deep hole drilling - use peck drilling cycle and coolant",
        )

    def test_large_drill_high_thrust(self, drilling_params):
        result = calculate_drilling({**drilling_params, "hole_diameter": 80, "drill_speed": 100})
        assert "High thrust force - ensure adequate workholding" in result.recommendations

    @pytest.mark.parametrize("field", ["hole_diameter", "hole_depth", "drill_speed", "feed_rate"])
    def test_non_positive_raises(self, drilling_params, field):
        with pytest.raises(InvalidParameterError):
            calculate_drilling({**drilling_params, field: 0})

    def test_unknown_material(self, drilling_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_drilling({**drilling_params, "material": "nope"})
