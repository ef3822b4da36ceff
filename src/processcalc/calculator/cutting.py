"""
Sheet metal cutting - punching, shearing and die clearance selection.

Units: thickness and lengths in mm, strengths in MPa, forces in N, energy in
J, power in W. Punch and shear speeds are strokes per minute.
"""

import logging
from math import atan, degrees, pi, radians, sin
from typing import Mapping, Optional, Union

from ..enums import CutQuality
from ..exceptions import InvalidParameterError
from ..io.models import (
    ClearanceRecommendation,
    PunchingParameters,
    PunchingResults,
    ShearingParameters,
    ShearingResults,
)
from ..materials import CUTTING_MATERIALS
from .constants import (
    CLEARANCE_BASE_FRACTION,
    CLEARANCE_HARDNESS_DIVISOR,
    CLEARANCE_WINDOW_HIGH,
    CLEARANCE_WINDOW_LOW,
    CUT_QUALITY_EXCELLENT_RANGE,
    CUT_QUALITY_FAIR_RANGE,
    CUT_QUALITY_GOOD_RANGE,
    PUNCHING_ALLOWED_WEAR_UM,
    PUNCHING_BREAKTHROUGH_MM,
    PUNCHING_CLEARANCE_MAX_PERCENT,
    PUNCHING_OPTIMAL_CLEARANCE_FRACTION,
    PUNCHING_SPEED_HIGH_PER_MIN,
    PUNCHING_STRIPPING_BASE,
    PUNCHING_STRIPPING_SLOPE,
    PUNCHING_TEMP_DERATE_PER_C,
    PUNCHING_TEMPERATURE_HIGH_C,
    PUNCHING_WEAR_LUBRICATION_FACTOR,
    PUNCHING_WEAR_SCALE,
    PUNCHING_WEAR_SPEED_EXPONENT,
    SHEARING_BLADE_ANGLE_HIGH_DEG,
    SHEARING_BLADE_ANGLE_LOW_DEG,
    SHEARING_BLADE_ANGLE_MAX_DEG,
    SHEARING_CLEARANCE_FACTOR_SLOPE,
    SHEARING_CLEARANCE_HIGH_PERCENT,
    SHEARING_CLEARANCE_LOW_PERCENT,
    SHEARING_CLEARANCE_MAX_PERCENT,
    SHEARING_HOLD_DOWN_MARGIN_MM,
    SHEARING_HOLD_DOWN_PRESSURE_LOW_MPA,
    SHEARING_WEAR_SCALE,
)
from .shared import (
    Check,
    coerce_params,
    derated_strength,
    generate_recommendations,
    require_between,
    require_non_negative,
    require_positive,
    round_half_up,
    validate_material,
)

logger = logging.getLogger(__name__)


def classify_cut_quality(clearance_ratio: float) -> CutQuality:
    """
    Grade a punched edge from the clearance ratio.

    The ratio is actual clearance over the 5%-of-thickness optimum. Bands are
    nested and inclusive, so the first band containing the ratio wins.
    """
    for quality, (low, high) in (
        (CutQuality.EXCELLENT, CUT_QUALITY_EXCELLENT_RANGE),
        (CutQuality.GOOD, CUT_QUALITY_GOOD_RANGE),
        (CutQuality.FAIR, CUT_QUALITY_FAIR_RANGE),
    ):
        if low <= clearance_ratio <= high:
            return quality
    return CutQuality.POOR


def calculate_punching(params: Union[PunchingParameters, Mapping]) -> PunchingResults:
    """
    Calculate punching force, energy, edge quality and tool wear.

    Args:
        params: PunchingParameters or an equivalent mapping

    Returns:
        PunchingResults (unrounded except expected_tool_life)

    Raises:
        MaterialNotFoundError: If the material is not a cutting material
        InvalidParameterError: If thickness, diameters or speed are not
            positive, the punch is larger than the hole, clearance is
            outside 0-50%, or the temperature is at or above 520°C
    """
    p = coerce_params(PunchingParameters, params)
    material = validate_material(CUTTING_MATERIALS, p.material, "cutting")

    require_positive(p.thickness, "thickness", "Thickness")
    require_positive(p.hole_diameter, "hole_diameter", "Hole diameter")
    require_positive(p.punch_diameter, "punch_diameter", "Punch diameter")
    require_positive(p.punch_speed, "punch_speed", "Punch speed")
    require_between(p.clearance, 0, PUNCHING_CLEARANCE_MAX_PERCENT, "clearance", "Clearance", "%")
    if p.punch_diameter > p.hole_diameter:
        raise InvalidParameterError(
            "Punch diameter must be less than hole diameter", field="punch_diameter"
        )

    shear_strength = derated_strength(
        material.shear_strength, p.temperature, PUNCHING_TEMP_DERATE_PER_C
    )
    clearance_value = p.clearance / 100 * p.thickness

    shear_area = pi * p.hole_diameter * p.thickness
    punching_force = shear_strength * shear_area

    stripping_factor = PUNCHING_STRIPPING_BASE + (p.thickness / p.hole_diameter) * PUNCHING_STRIPPING_SLOPE
    stripping_force = punching_force * stripping_factor
    total_force = punching_force + stripping_force

    stroke = p.thickness + PUNCHING_BREAKTHROUGH_MM
    punching_energy = punching_force * stroke / 1000  # N·mm -> J
    punching_power = punching_energy * p.punch_speed / 60
    shear_stress = punching_force / shear_area

    clearance_ratio = clearance_value / (p.thickness * PUNCHING_OPTIMAL_CLEARANCE_FRACTION)
    cut_quality = classify_cut_quality(clearance_ratio)

    tool_wear_rate = (
        material.hardness / 100
        * (p.punch_speed / 100) ** PUNCHING_WEAR_SPEED_EXPONENT
        * (abs(1 - clearance_ratio) + 1)
        * (PUNCHING_WEAR_LUBRICATION_FACTOR if p.lubrication else 1.0)
        * PUNCHING_WEAR_SCALE
    )
    expected_tool_life = round_half_up(PUNCHING_ALLOWED_WEAR_UM / tool_wear_rate * 1000)

    low, high = CUT_QUALITY_EXCELLENT_RANGE
    recommendations = generate_recommendations([
        Check(clearance_ratio < low,
              "Increase clearance to improve cut quality and reduce tool wear"),
        Check(clearance_ratio > high,
              "Reduce clearance to minimize burr formation"),
        Check(p.punch_speed > PUNCHING_SPEED_HIGH_PER_MIN,
              "Consider reducing punch speed to extend tool life"),
        Check(not p.lubrication,
              "Use lubrication to reduce friction and improve tool life"),
        Check(p.temperature > PUNCHING_TEMPERATURE_HIGH_C,
              "High temperature may affect material properties - consider cooling"),
    ], fallback="Parameters are within optimal range")

    logger.debug(
        f"Punching {p.material}: F={punching_force:.0f}N, quality={cut_quality.value}, "
        f"life={expected_tool_life} holes"
    )

    return PunchingResults(
        punching_force=punching_force,
        stripping_force=stripping_force,
        total_force=total_force,
        punching_energy=punching_energy,
        punching_power=punching_power,
        shear_stress=shear_stress,
        clearance_value=clearance_value,
        cut_quality=cut_quality,
        tool_wear_rate=tool_wear_rate,
        expected_tool_life=expected_tool_life,
        recommendations=recommendations,
    )


def calculate_shearing(params: Union[ShearingParameters, Mapping]) -> ShearingResults:
    """
    Calculate guillotine shearing force, energy and blade wear.

    A raked blade spreads the cut along the stroke, so force scales with
    1 / sin(blade angle) and the stroke with the same factor.

    Raises:
        MaterialNotFoundError: If the material is not a cutting material
        InvalidParameterError: If thickness, length or speed are not
            positive, blade angle is outside (0, 10] degrees, clearance is
            outside 0-30%, or the hold-down force is negative
    """
    p = coerce_params(ShearingParameters, params)
    material = validate_material(CUTTING_MATERIALS, p.material, "cutting")

    require_positive(p.thickness, "thickness", "Thickness")
    require_positive(p.shear_length, "shear_length", "Shear length")
    require_positive(p.shear_speed, "shear_speed", "Shear speed")
    require_positive(p.blade_angle, "blade_angle", "Blade angle")
    require_between(p.blade_angle, 0, SHEARING_BLADE_ANGLE_MAX_DEG, "blade_angle", "Blade angle", "°")
    require_between(p.clearance, 0, SHEARING_CLEARANCE_MAX_PERCENT, "clearance", "Clearance", "%")
    require_non_negative(p.hold_down_force, "hold_down_force", "Hold-down force")

    angle_factor = 1 / sin(radians(p.blade_angle))
    clearance_value = p.clearance / 100 * p.thickness
    clearance_factor = 1 + (clearance_value / p.thickness) * SHEARING_CLEARANCE_FACTOR_SLOPE

    shear_area = p.shear_length * p.thickness
    shearing_force = material.shear_strength * shear_area * angle_factor * clearance_factor

    hold_down_area = p.shear_length * (p.thickness + SHEARING_HOLD_DOWN_MARGIN_MM)
    hold_down_pressure = p.hold_down_force / hold_down_area
    total_force = shearing_force + p.hold_down_force

    stroke = p.thickness * angle_factor
    shearing_energy = shearing_force * stroke / 1000  # J
    shearing_power = shearing_energy * p.shear_speed / 60

    blade_wear = material.hardness / 200 * p.shear_speed / 100 * SHEARING_WEAR_SCALE
    cut_angle = degrees(atan(clearance_value / p.thickness))
    distortion = shearing_force / (material.tensile_strength * 1000) * p.thickness

    recommendations = generate_recommendations([
        Check(p.blade_angle < SHEARING_BLADE_ANGLE_LOW_DEG,
              "Increase blade angle to reduce shearing force"),
        Check(p.blade_angle > SHEARING_BLADE_ANGLE_HIGH_DEG,
              "Reduce blade angle to improve cut quality"),
        Check(p.clearance < SHEARING_CLEARANCE_LOW_PERCENT,
              "Increase clearance to reduce blade wear"),
        Check(p.clearance > SHEARING_CLEARANCE_HIGH_PERCENT,
              "Reduce clearance to minimize burr formation"),
        Check(hold_down_pressure < SHEARING_HOLD_DOWN_PRESSURE_LOW_MPA,
              "Increase hold-down force to prevent material movement"),
    ], fallback="Shearing parameters are optimized")

    logger.debug(f"Shearing {p.material}: F={shearing_force:.0f}N over {p.shear_length}mm")

    return ShearingResults(
        shearing_force=shearing_force,
        hold_down_pressure=hold_down_pressure,
        total_force=total_force,
        shearing_energy=shearing_energy,
        shearing_power=shearing_power,
        blade_wear=blade_wear,
        cut_angle=cut_angle,
        distortion=distortion,
        recommendations=recommendations,
    )


def optimize_clearance(material: str, thickness: float) -> Optional[ClearanceRecommendation]:
    """
    Recommend a punching die clearance for a sheet.

    Harder materials need more clearance:
        optimal = t * (0.04 + HB / 5000), window 0.8x .. 1.2x

    Returns:
        ClearanceRecommendation (mm, plus percent of thickness), or None if
        the material is not in the cutting registry
    """
    mat = CUTTING_MATERIALS.get(material)
    if mat is None:
        return None
    require_positive(thickness, "thickness", "Thickness")

    optimal = thickness * (CLEARANCE_BASE_FRACTION + mat.hardness / CLEARANCE_HARDNESS_DIVISOR)
    return ClearanceRecommendation(
        optimal=optimal,
        minimum=optimal * CLEARANCE_WINDOW_LOW,
        maximum=optimal * CLEARANCE_WINDOW_HIGH,
        percentage=optimal / thickness * 100,
    )
