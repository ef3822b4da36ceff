"""
Tests for punching, shearing and clearance selection.
"""

from math import atan, degrees, pi, radians, sin

import pytest

from processcalc.calculator import (
    calculate_punching,
    calculate_shearing,
    classify_cut_quality,
    optimize_clearance,
    round_half_up,
)
from processcalc.enums import CutQuality
from processcalc.exceptions import InvalidParameterError, MaterialNotFoundError


class TestClassifyCutQuality:
    """Nested, inclusive clearance-ratio bands."""

    @pytest.mark.parametrize("ratio,expected", [
        (1.0, CutQuality.EXCELLENT),
        (0.8, CutQuality.EXCELLENT),
        (1.2, CutQuality.EXCELLENT),
        (0.7, CutQuality.GOOD),
        (1.5, CutQuality.GOOD),
        (0.4, CutQuality.FAIR),
        (2.0, CutQuality.FAIR),
        (0.39, CutQuality.POOR),
        (2.01, CutQuality.POOR),
        (0.0, CutQuality.POOR),
    ])
    def test_bands(self, ratio, expected):
        assert classify_cut_quality(ratio) is expected


class TestPunching:
    """Round-hole punching."""

    def test_forces(self, punching_params):
        result = calculate_punching(punching_params)
        shear_area = pi * 10 * 2
        assert result.punching_force == pytest.approx(290 * shear_area)
        assert result.stripping_force == pytest.approx(result.punching_force * (0.08 + 0.2 * 0.02))
        assert result.total_force == pytest.approx(result.punching_force + result.stripping_force)
        assert result.shear_stress == pytest.approx(290)

    def test_energy_and_power(self, punching_params):
        result = calculate_punching(punching_params)
        assert result.punching_energy == pytest.approx(result.punching_force * 4 / 1000)
        assert result.punching_power == pytest.approx(result.punching_energy * 100 / 60)

    def test_optimal_clearance_is_excellent(self, punching_params):
        result = calculate_punching(punching_params)
        assert result.clearance_value == pytest.approx(0.1)
        assert result.cut_quality is CutQuality.EXCELLENT
        assert result.recommendations == ("Parameters are within optimal range",)

    @pytest.mark.parametrize("clearance,expected", [
        (5, CutQuality.EXCELLENT),
        (3.5, CutQuality.GOOD),
        (10, CutQuality.FAIR),
        (15, CutQuality.POOR),
        (0, CutQuality.POOR),
    ])
    def test_quality_follows_clearance(self, punching_params, clearance, expected):
        result = calculate_punching({**punching_params, "clearance": clearance})
        assert result.cut_quality is expected

    def test_quality_is_always_a_known_class(self, punching_params):
        for clearance in range(0, 51, 5):
            result = calculate_punching({**punching_params, "clearance": clearance})
            assert result.cut_quality in set(CutQuality)

    def test_tool_wear(self, punching_params):
        result = calculate_punching(punching_params)
        # ratio 1.0, lubricated, 100 strokes/min
        expected_wear = 126 / 100 * 1.0 * 1.0 * 0.7 * 2.5
        assert result.tool_wear_rate == pytest.approx(expected_wear)
        assert result.expected_tool_life == round_half_up(250 / expected_wear * 1000)
        assert isinstance(result.expected_tool_life, int)

    def test_lubrication_extends_tool_life(self, punching_params):
        wet = calculate_punching(punching_params)
        dry = calculate_punching({**punching_params, "lubrication": False})
        assert dry.expected_tool_life < wet.expected_tool_life
        assert "Use lubrication to reduce friction and improve tool life" in dry.recommendations

    def test_temperature_derates_shear_strength(self, punching_params):
        hot = calculate_punching({**punching_params, "temperature": 120})
        cold = calculate_punching(punching_params)
        assert hot.punching_force == pytest.approx(cold.punching_force * 0.8)
        assert "High temperature may affect material properties - consider cooling" in hot.recommendations

    def test_just_below_zero_strength_temperature(self, punching_params):
        result = calculate_punching({**punching_params, "temperature": 515})
        assert result.punching_force > 0
        assert result.punching_energy > 0

    @pytest.mark.parametrize("temperature", [520, 1100])
    def test_zero_strength_temperature_raises(self, punching_params, temperature):
        with pytest.raises(InvalidParameterError, match="must be below 520") as exc_info:
            calculate_punching({**punching_params, "temperature": temperature})
        assert exc_info.value.field == "temperature"

    def test_recommendations_in_rule_order(self, punching_params):
        result = calculate_punching({
            **punching_params, "clearance": 2, "punch_speed": 300, "lubrication": False,
        })
        assert result.recommendations == (
            "Increase clearance to improve cut quality and reduce tool wear",
            "Consider reducing punch speed to extend tool life",
            "Use lubrication to reduce friction and improve tool life",
        )

    def test_large_clearance_recommendation(self, punching_params):
        result = calculate_punching({**punching_params, "clearance": 10})
        assert result.recommendations[0] == "Reduce clearance to minimize burr formation"

    def test_punch_equal_to_hole_is_allowed(self, punching_params):
        result = calculate_punching({**punching_params, "punch_diameter": 10.0})
        assert result.punching_force > 0

    def test_punch_larger_than_hole(self, punching_params):
        with pytest.raises(InvalidParameterError, match="Punch diameter must be less than hole diameter"):
            calculate_punching({**punching_params, "punch_diameter": 10.5})

    @pytest.mark.parametrize("override", [
        {"clearance": -1},
        {"clearance": 51},
        {"thickness": 0},
        {"hole_diameter": 0},
        {"punch_speed": 0},
    ])
    def test_invalid_parameters(self, punching_params, override):
        with pytest.raises(InvalidParameterError):
            calculate_punching({**punching_params, **override})

    def test_unknown_material(self, punching_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_punching({**punching_params, "material": "steel-low-carbon"})

    def test_camel_case_input(self):
        result = calculate_punching({
            "material": "aluminum-6061", "thickness": 1.5, "holeDiameter": 6,
            "punchDiameter": 5.85, "clearance": 5, "punchSpeed": 60,
            "temperature": 20, "lubrication": True,
        })
        assert result.punching_force == pytest.approx(207 * pi * 6 * 1.5)


class TestShearing:
    """Guillotine shearing with a raked blade."""

    def test_force(self, shearing_params):
        result = calculate_shearing(shearing_params)
        angle_factor = 1 / sin(radians(4))
        clearance_factor = 1 + 0.08 * 0.3
        assert result.shearing_force == pytest.approx(290 * 3000 * angle_factor * clearance_factor)

    def test_hold_down(self, shearing_params):
        result = calculate_shearing(shearing_params)
        assert result.hold_down_pressure == pytest.approx(500000 / (1000 * 13))
        assert result.total_force == pytest.approx(result.shearing_force + 500000)

    def test_energy_power_and_wear(self, shearing_params):
        result = calculate_shearing(shearing_params)
        stroke = 3 / sin(radians(4))
        assert result.shearing_energy == pytest.approx(result.shearing_force * stroke / 1000)
        assert result.shearing_power == pytest.approx(result.shearing_energy * 50 / 60)
        assert result.blade_wear == pytest.approx(126 / 200 * 50 / 100 * 15)

    def test_cut_angle_and_distortion(self, shearing_params):
        result = calculate_shearing(shearing_params)
        assert result.cut_angle == pytest.approx(degrees(atan(0.08)))
        assert result.distortion == pytest.approx(result.shearing_force / (440 * 1000) * 3)

    def test_optimized_fallback(self, shearing_params):
        assert calculate_shearing(shearing_params).recommendations == ("Shearing parameters are optimized",)

    def test_steeper_blade_lowers_force(self, shearing_params):
        shallow = calculate_shearing({**shearing_params, "blade_angle": 2})
        steep = calculate_shearing({**shearing_params, "blade_angle": 8})
        assert steep.shearing_force < shallow.shearing_force

    def test_recommendations(self, shearing_params):
        result = calculate_shearing({
            **shearing_params, "blade_angle": 1, "clearance": 2, "hold_down_force": 0,
        })
        assert result.recommendations == (
            "Increase blade angle to reduce shearing force",
            "Increase clearance to reduce blade wear",
            "Increase hold-down force to prevent material movement",
        )

    def test_upper_bound_recommendations(self, shearing_params):
        result = calculate_shearing({**shearing_params, "blade_angle": 7, "clearance": 20})
        assert result.recommendations == (
            "Reduce blade angle to improve cut quality",
            "Reduce clearance to minimize burr formation",
        )

    @pytest.mark.parametrize("override", [
        {"blade_angle": 0},
        {"blade_angle": 10.5},
        {"clearance": 31},
        {"clearance": -1},
        {"hold_down_force": -1},
        {"thickness": 0},
        {"shear_length": 0},
    ])
    def test_invalid_parameters(self, shearing_params, override):
        with pytest.raises(InvalidParameterError):
            calculate_shearing({**shearing_params, **override})

    def test_blade_angle_upper_limit_inclusive(self, shearing_params):
        assert calculate_shearing({**shearing_params, "blade_angle": 10}).shearing_force > 0

    def test_unknown_material(self, shearing_params):
        with pytest.raises(MaterialNotFoundError):
            calculate_shearing({**shearing_params, "material": "unknown"})


class TestOptimizeClearance:
    """Die clearance recommendation."""

    def test_known_material(self):
        rec = optimize_clearance("steel-mild", 2.0)
        optimal = 2.0 * (0.04 + 126 / 5000)
        assert rec.optimal == pytest.approx(optimal)
        assert rec.minimum == pytest.approx(optimal * 0.8)
        assert rec.maximum == pytest.approx(optimal * 1.2)
        assert rec.percentage == pytest.approx(optimal / 2.0 * 100)

    def test_window_ordering(self):
        rec = optimize_clearance("stainless-304", 1.0)
        assert 0 < rec.minimum < rec.optimal < rec.maximum

    def test_harder_material_more_clearance(self):
        soft = optimize_clearance("copper-c110", 2.0)
        hard = optimize_clearance("stainless-304", 2.0)
        assert hard.percentage > soft.percentage

    def test_unknown_material_returns_none(self):
        assert optimize_clearance("unobtainium", 2.0) is None

    def test_non_positive_thickness_raises(self):
        with pytest.raises(InvalidParameterError):
            optimize_clearance("steel-mild", 0)
