"""
Wire drawing and extrusion calculations.

Both processes pull or push material through a conical die, so they share
the drawing material registry (yield strength, flow stress coefficient,
per-pass reduction limit, die friction).

Reported values are rounded to display precision, matching what a process
sheet would show.
"""

import logging
from math import cos, log, pi, radians, sin, tan
from typing import Mapping, Union

from ..enums import ExtrusionType
from ..io.models import (
    ExtrusionParameters,
    ExtrusionResults,
    WireDrawingParameters,
    WireDrawingResults,
)
from ..materials import DRAWING_MATERIALS
from .constants import (
    DRAWING_DIE_ANGLE_MAX_DEG,
    DRAWING_DIE_ANGLE_MIN_DEG,
    DRAWING_DIE_STRESS_UTS_FACTOR,
    DRAWING_EFFICIENCY_CAP_PERCENT,
    DRAWING_EFFICIENCY_LOW_PERCENT,
    DRAWING_LUBRICATED_FRICTION_FACTOR,
    DRAWING_SPEED_HIGH_M_PER_MIN,
    DRAWING_TEMP_DERATE_PER_C,
    EXTRUSION_DIE_ANGLE_MAX_DEG,
    EXTRUSION_EFFICIENCY_CAP_PERCENT,
    EXTRUSION_EFFICIENCY_LOW_PERCENT,
    EXTRUSION_FRICTION_DRY,
    EXTRUSION_FRICTION_LUBRICATED,
    EXTRUSION_HOT_TEMPERATURE_C,
    EXTRUSION_PRESSURE_HIGH_MPA,
    EXTRUSION_RATIO_HIGH,
    EXTRUSION_SPEED_HIGH_MM_PER_MIN,
    EXTRUSION_TEMP_DERATE_PER_C,
    EXTRUSION_TYPE_MULTIPLIER,
    EXTRUSION_WARM_TEMPERATURE_C,
)
from .shared import (
    Check,
    coerce_params,
    derated_strength,
    generate_recommendations,
    require_at_least,
    require_less_than,
    require_positive,
    round_half_up,
    validate_material,
)

logger = logging.getLogger(__name__)


def _circle_area(diameter: float) -> float:
    return pi * (diameter / 2) ** 2


def calculate_wire_drawing(params: Union[WireDrawingParameters, Mapping]) -> WireDrawingResults:
    """
    Calculate drawing stress, force and power for round wire.

    Drawing stress (Siebel form with die friction):
        sigma_d = Y' * (1 + mu / tan(a/2)) * ln(Ai / Af)

    where Y' is yield strength derated by 0.1% per °C above 20°C and mu is
    the die friction, halved when lubricated.

    Args:
        params: WireDrawingParameters or an equivalent mapping

    Returns:
        WireDrawingResults rounded to display precision

    Raises:
        MaterialNotFoundError: If the material is not a drawing material
        InvalidParameterError: If diameters are not 0 < df < di, speed is not
            positive, die angle is outside (0, 180), passes < 1, or the
            temperature is at or above 1020°C (zero derated yield strength)
    """
    p = coerce_params(WireDrawingParameters, params)
    material = validate_material(DRAWING_MATERIALS, p.material, "drawing")

    require_positive(p.final_diameter, "final_diameter", "Final diameter")
    require_less_than(
        p.final_diameter, p.initial_diameter, "final_diameter",
        "Final diameter must be less than initial diameter",
    )
    require_positive(p.drawing_speed, "drawing_speed", "Drawing speed")
    require_positive(p.die_angle, "die_angle", "Die angle")
    require_less_than(p.die_angle, 180, "die_angle", "Die angle must be less than 180°")
    require_at_least(p.number_of_passes, 1, "number_of_passes", "Number of passes")

    initial_area = _circle_area(p.initial_diameter)
    final_area = _circle_area(p.final_diameter)
    area_ratio = initial_area / final_area

    reduction_ratio = (initial_area - final_area) / initial_area * 100
    reduction_per_pass = reduction_ratio / p.number_of_passes
    true_strain = log(area_ratio)

    yield_strength = derated_strength(material.yield_strength, p.temperature, DRAWING_TEMP_DERATE_PER_C)

    angle = radians(p.die_angle)
    angle_factor = (1 + sin(angle)) / (1 + cos(angle))
    friction = material.friction_coefficient
    if p.lubrication:
        friction *= DRAWING_LUBRICATED_FRICTION_FACTOR

    drawing_stress = yield_strength * (1 + friction / tan(angle / 2)) * log(area_ratio)
    drawing_force = drawing_stress * final_area * 1000
    drawing_power = drawing_force * p.drawing_speed / 60000  # kW
    die_stress = drawing_stress * angle_factor
    work_done = drawing_force * (p.initial_diameter - p.final_diameter) / 1000  # kJ

    ideal_work = yield_strength * final_area * true_strain / 1000
    efficiency = min(ideal_work / work_done * 100, DRAWING_EFFICIENCY_CAP_PERCENT)

    recommendations = generate_recommendations([
        Check(reduction_per_pass > material.reduction_limit,
              f"Reduction per pass ({reduction_per_pass:.1f}%) exceeds material limit "
              f"({material.reduction_limit:g}%) - increase number of passes"),
        Check(p.die_angle < DRAWING_DIE_ANGLE_MIN_DEG,
              "Die angle is very small - may cause excessive drawing force"),
        Check(p.die_angle > DRAWING_DIE_ANGLE_MAX_DEG,
              "Die angle is large - may cause surface defects"),
        Check(not p.lubrication,
              "Use lubrication to reduce drawing force and improve surface quality"),
        Check(die_stress > material.ultimate_strength * DRAWING_DIE_STRESS_UTS_FACTOR,
              "Die stress is high - consider using harder die material"),
        Check(efficiency < DRAWING_EFFICIENCY_LOW_PERCENT,
              "Low efficiency - optimize die angle and lubrication"),
        Check(p.drawing_speed > DRAWING_SPEED_HIGH_M_PER_MIN,
              "High drawing speed may cause heating - monitor temperature"),
    ], fallback="Drawing parameters are well optimized for this material")

    logger.debug(
        f"Wire drawing {p.material}: {p.initial_diameter}->{p.final_diameter}mm "
        f"in {p.number_of_passes} pass(es), F={drawing_force:.0f}N"
    )

    return WireDrawingResults(
        reduction_ratio=round_half_up(reduction_ratio, 2),
        reduction_per_pass=round_half_up(reduction_per_pass, 2),
        true_strain=round_half_up(true_strain, 3),
        drawing_force=round_half_up(drawing_force),
        drawing_stress=round_half_up(drawing_stress, 1),
        drawing_power=round_half_up(drawing_power, 2),
        die_stress=round_half_up(die_stress, 1),
        work_done=round_half_up(work_done, 2),
        efficiency=round_half_up(efficiency, 1),
        recommendations=recommendations,
    )


def calculate_extrusion(params: Union[ExtrusionParameters, Mapping]) -> ExtrusionResults:
    """
    Calculate extrusion pressure, force and power through a conical die.

        p = sigma' * ln(R) * (1 + 2a/3) * (1 + f ln(R)) * m

    sigma' is the flow stress coefficient derated by 0.2% per °C above 20°C,
    a the die angle in radians, f the container friction (0.05 lubricated,
    0.15 dry) and m the arrangement multiplier (indirect 0.8).

    Raises:
        MaterialNotFoundError: If the material is not a drawing material
        InvalidParameterError: If the extruded diameter is not smaller than
            the billet, or any dimension, the speed or the die angle is not
            positive, or the temperature is at or above 520°C (zero
            derated flow stress)
    """
    p = coerce_params(ExtrusionParameters, params)
    material = validate_material(DRAWING_MATERIALS, p.material, "drawing")

    require_positive(p.extruded_diameter, "extruded_diameter", "Extruded diameter")
    require_less_than(
        p.extruded_diameter, p.billet_diameter, "extruded_diameter",
        "Extruded diameter must be less than billet diameter",
    )
    require_positive(p.billet_length, "billet_length", "Billet length")
    require_positive(p.extrusion_speed, "extrusion_speed", "Extrusion speed")
    require_positive(p.die_angle, "die_angle", "Die angle")

    billet_area = _circle_area(p.billet_diameter)
    extrusion_ratio = billet_area / _circle_area(p.extruded_diameter)
    log_ratio = log(extrusion_ratio)

    flow_stress = derated_strength(
        material.flow_stress_coefficient, p.temperature, EXTRUSION_TEMP_DERATE_PER_C
    )

    angle_factor = 1 + 2 * radians(p.die_angle) / 3
    friction = EXTRUSION_FRICTION_LUBRICATED if p.lubrication else EXTRUSION_FRICTION_DRY
    friction_effect = 1 + friction * log_ratio

    extrusion_pressure = (
        flow_stress * log_ratio * angle_factor * friction_effect
        * EXTRUSION_TYPE_MULTIPLIER[p.extrusion_type]
    )
    extrusion_force = extrusion_pressure * billet_area * 1000
    extrusion_power = extrusion_force * p.extrusion_speed / 60_000_000  # kW
    extrusion_time = p.billet_length / p.extrusion_speed                # min
    material_flow = p.extrusion_speed * extrusion_ratio                 # mm/min
    work_done = extrusion_force * p.billet_length / 1_000_000           # kJ

    ideal_work = flow_stress * billet_area * log_ratio / 1000
    efficiency = min(ideal_work / work_done * 100, EXTRUSION_EFFICIENCY_CAP_PERCENT)

    recommendations = generate_recommendations([
        Check(extrusion_ratio > EXTRUSION_RATIO_HIGH,
              "Very high extrusion ratio - consider multiple-stage extrusion"),
        Check(p.temperature < EXTRUSION_HOT_TEMPERATURE_C and "Steel" in material.name,
              "Consider hot extrusion for steel materials to reduce force"),
        Check(p.die_angle > EXTRUSION_DIE_ANGLE_MAX_DEG,
              "Die angle is very large - may cause material flow issues"),
        Check(extrusion_pressure > EXTRUSION_PRESSURE_HIGH_MPA,
              "High extrusion pressure - ensure press capability"),
        Check(not p.lubrication and p.extrusion_type is ExtrusionType.DIRECT,
              "Use lubrication for direct extrusion to reduce friction"),
        Check(efficiency < EXTRUSION_EFFICIENCY_LOW_PERCENT,
              "Low efficiency - optimize temperature and die design"),
        Check(p.extrusion_speed > EXTRUSION_SPEED_HIGH_MM_PER_MIN
              and p.temperature < EXTRUSION_WARM_TEMPERATURE_C,
              "High speed with low temperature may cause defects"),
    ], fallback="Extrusion parameters are optimized for this process")

    logger.debug(
        f"Extrusion {p.material} ({p.extrusion_type.value}): R={extrusion_ratio:.2f}, "
        f"p={extrusion_pressure:.1f}MPa"
    )

    return ExtrusionResults(
        extrusion_ratio=round_half_up(extrusion_ratio, 2),
        extrusion_force=round_half_up(extrusion_force),
        extrusion_pressure=round_half_up(extrusion_pressure, 1),
        extrusion_power=round_half_up(extrusion_power, 2),
        extrusion_time=round_half_up(extrusion_time, 2),
        material_flow=round_half_up(material_flow, 1),
        work_done=round_half_up(work_done, 2),
        efficiency=round_half_up(efficiency, 1),
        recommendations=recommendations,
    )
