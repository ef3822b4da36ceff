"""
Machining calculations - turning, milling and drilling.

Tool life follows Taylor's equation V * T^n = C, solved for T:

    T = (C / V) ** (1 / n)

n depends on the tool material; C is scaled by the workpiece
machinability rating (0-100). Cost per part adds machine and labour time to
the tool cost amortized over tool life.

Units: diameters, feeds and depths in mm; cutting speeds in m/min; spindle
speeds in RPM; forces in N; power in kW; time in min.
"""

import logging
from math import ceil, pi, sin
from typing import Mapping, Union

from ..enums import ToolMaterial
from ..io.models import (
    DrillingParameters,
    DrillingResults,
    MillingParameters,
    MillingResults,
    TurningParameters,
    TurningResults,
)
from ..materials import MACHINING_MATERIALS
from .constants import (
    DRILL_BASE_LIFE_HOLES,
    DRILLING_COOLANT_LIFE_FACTOR,
    DRILLING_COOLANT_MACHINABILITY,
    DRILLING_DEPTH_RATIO_MAX,
    DRILLING_FEED_FRACTION_MAX,
    DRILLING_MACHINE_COST_PER_MIN,
    DRILLING_THRUST_FACTOR,
    DRILLING_THRUST_HIGH_N,
    DRILLING_TOOL_COST_FACTOR,
    DRILLING_TOOL_LIFE_LOW_HOLES,
    DRILLING_TORQUE_FACTOR,
    LABOR_COST_PER_MIN,
    MILLING_DEPTH_FRACTION_MAX,
    MILLING_FEED_PER_TOOTH_HIGH_MM,
    MILLING_FEED_PER_TOOTH_LOW_MM,
    MILLING_MACHINE_COST_PER_MIN,
    MILLING_MIN_TEETH,
    MILLING_ROUGHNESS_DIVISOR,
    MILLING_SPECIFIC_FORCE_FACTOR,
    MILLING_STEPOVER_FRACTION,
    MILLING_TAYLOR_FACTOR,
    MILLING_TOOL_COST_FACTOR,
    MILLING_TOOL_LIFE_LOW_MIN,
    SPEED_HIGH_FACTOR,
    SPEED_LOW_FACTOR,
    TAYLOR_CONSTANT,
    TAYLOR_EXPONENT,
    TOOL_COST,
    TURNING_COOLANT_MACHINABILITY,
    TURNING_FEED_HIGH_MM_PER_REV,
    TURNING_MACHINE_COST_PER_MIN,
    TURNING_NOSE_RADIUS_MM,
    TURNING_POWER_HIGH_KW,
    TURNING_SPECIFIC_FORCE_FACTOR,
    TURNING_TOOL_LIFE_LOW_MIN,
)
from .shared import (
    Check,
    coerce_params,
    generate_recommendations,
    require_at_least,
    require_positive,
    round_half_up,
    validate_material,
)

logger = logging.getLogger(__name__)


def taylor_tool_life(
    cutting_speed: float,
    tool: ToolMaterial,
    machinability: float,
    constant_factor: float = 1.0,
) -> float:
    """
    Tool life in minutes from Taylor's equation.

    Args:
        cutting_speed: Surface speed V, m/min
        tool: Tool material (selects n and base C)
        machinability: Workpiece machinability rating, 0-100
        constant_factor: Extra scaling on C (milling uses 0.8)

    Returns:
        Tool life T, minutes
    """
    tool = ToolMaterial(tool)
    constant = TAYLOR_CONSTANT[tool] * machinability / 100 * constant_factor
    return (constant / cutting_speed) ** (1 / TAYLOR_EXPONENT[tool])


def _cost(machining_time: float, machine_rate: float, tool_cost: float, tool_life: float) -> float:
    """Machine and labour time plus tool cost pro-rated over tool life."""
    return machining_time * (machine_rate + LABOR_COST_PER_MIN) + tool_cost * machining_time / tool_life


def calculate_turning(params: Union[TurningParameters, Mapping]) -> TurningResults:
    """
    Calculate spindle speed, cutting force, power, tool life and cost for
    a single longitudinal turning pass.

    Specific cutting force is taken as 2.5x tensile strength; theoretical
    roughness Ra = f² / (8 r) with a 0.8mm nose radius.

    Args:
        params: TurningParameters or an equivalent mapping

    Returns:
        TurningResults rounded to display precision

    Raises:
        MaterialNotFoundError: If the material is not a machining material
        InvalidParameterError: If diameter, length, speed, feed or depth of
            cut is not positive
    """
    p = coerce_params(TurningParameters, params)
    material = validate_material(MACHINING_MATERIALS, p.material, "machining")

    require_positive(p.diameter, "diameter", "Diameter")
    require_positive(p.length, "length", "Length")
    require_positive(p.cutting_speed, "cutting_speed", "Cutting speed")
    require_positive(p.feed_rate, "feed_rate", "Feed rate")
    require_positive(p.depth_of_cut, "depth_of_cut", "Depth of cut")

    spindle_speed = p.cutting_speed * 1000 / (pi * p.diameter)
    material_removal_rate = p.cutting_speed * p.feed_rate * p.depth_of_cut / 10  # cm³/min

    specific_force = material.tensile_strength * TURNING_SPECIFIC_FORCE_FACTOR
    cutting_force = specific_force * p.feed_rate * p.depth_of_cut
    cutting_power = cutting_force * p.cutting_speed / 60000

    machining_time = p.length / (p.feed_rate * spindle_speed)
    surface_roughness = p.feed_rate ** 2 / (8 * TURNING_NOSE_RADIUS_MM)

    tool_life = taylor_tool_life(p.cutting_speed, p.tool_material, material.machinability_rating)
    cost_per_part = _cost(machining_time, TURNING_MACHINE_COST_PER_MIN, TOOL_COST[p.tool_material], tool_life)

    recommended = material.recommended_speed.for_tool(p.tool_material)
    recommendations = generate_recommendations([
        Check(p.cutting_speed > recommended * SPEED_HIGH_FACTOR,
              "Consider reducing cutting speed to extend tool life"),
        Check(p.cutting_speed < recommended * SPEED_LOW_FACTOR,
              "Cutting speed can be increased for higher productivity"),
        Check(p.feed_rate > TURNING_FEED_HIGH_MM_PER_REV,
              "High feed rate may cause poor surface finish"),
        Check(tool_life < TURNING_TOOL_LIFE_LOW_MIN,
              "Tool life is low - consider using coolant or reducing cutting parameters"),
        Check(cutting_power > TURNING_POWER_HIGH_KW,
              "High power consumption - check machine capability"),
        Check(not p.coolant and material.machinability_rating < TURNING_COOLANT_MACHINABILITY,
              "Use coolant to improve tool life and surface finish"),
    ], fallback="Turning parameters are optimized for this material")

    logger.debug(
        f"Turning {p.material} with {p.tool_material.value}: N={spindle_speed:.0f}rpm, "
        f"F={cutting_force:.0f}N, T={tool_life:.1f}min"
    )

    return TurningResults(
        spindle_speed=round_half_up(spindle_speed),
        material_removal_rate=round_half_up(material_removal_rate, 2),
        cutting_force=round_half_up(cutting_force),
        cutting_power=round_half_up(cutting_power, 2),
        machining_time=round_half_up(machining_time, 2),
        surface_roughness=round_half_up(surface_roughness, 2),
        tool_life=round_half_up(tool_life),
        cost_per_part=round_half_up(cost_per_part, 2),
        recommendations=recommendations,
    )


def calculate_milling(params: Union[MillingParameters, Mapping]) -> MillingResults:
    """
    Calculate cutting speed, chip load, power, tool life and cost for
    face/slot milling.

    Average chip thickness is approximated as fz * sin(45°); the number of
    passes steps over at 80% of the cutter diameter.

    Raises:
        MaterialNotFoundError: If the material is not a machining material
        InvalidParameterError: If any dimension, the spindle speed or the
            feed rate is not positive, or the cutter has no teeth
    """
    p = coerce_params(MillingParameters, params)
    material = validate_material(MACHINING_MATERIALS, p.material, "machining")

    require_positive(p.width, "width", "Width")
    require_positive(p.length, "length", "Length")
    require_positive(p.depth, "depth", "Depth")
    require_positive(p.cutter_diameter, "cutter_diameter", "Cutter diameter")
    require_at_least(p.number_of_teeth, 1, "number_of_teeth", "Number of teeth")
    require_positive(p.spindle_speed, "spindle_speed", "Spindle speed")
    require_positive(p.feed_rate, "feed_rate", "Feed rate")

    cutting_speed = pi * p.cutter_diameter * p.spindle_speed / 1000
    feed_per_tooth = p.feed_rate / (p.spindle_speed * p.number_of_teeth)
    material_removal_rate = p.width * p.depth * p.feed_rate / 1000  # cm³/min

    specific_force = material.tensile_strength * MILLING_SPECIFIC_FORCE_FACTOR
    chip_thickness = feed_per_tooth * sin(pi / 4)
    cutting_force = specific_force * p.width * chip_thickness * p.number_of_teeth
    cutting_power = cutting_force * cutting_speed / 60000

    passes = ceil(p.length / (p.cutter_diameter * MILLING_STEPOVER_FRACTION))
    machining_time = p.length * passes / p.feed_rate
    surface_roughness = feed_per_tooth ** 2 / MILLING_ROUGHNESS_DIVISOR

    tool_life = taylor_tool_life(
        cutting_speed, p.tool_material, material.machinability_rating, MILLING_TAYLOR_FACTOR
    )
    tool_cost = TOOL_COST[p.tool_material] * MILLING_TOOL_COST_FACTOR
    cost_per_part = _cost(machining_time, MILLING_MACHINE_COST_PER_MIN, tool_cost, tool_life)

    recommended = material.recommended_speed.for_tool(p.tool_material)
    recommendations = generate_recommendations([
        Check(feed_per_tooth > MILLING_FEED_PER_TOOTH_HIGH_MM,
              "Feed per tooth is high - may cause tool breakage"),
        Check(feed_per_tooth < MILLING_FEED_PER_TOOTH_LOW_MM,
              "Feed per tooth is low - may cause work hardening"),
        Check(cutting_speed > recommended * SPEED_HIGH_FACTOR,
              "Consider reducing spindle speed to extend tool life"),
        Check(p.number_of_teeth < MILLING_MIN_TEETH,
              "Consider using end mill with more teeth for better surface finish"),
        Check(tool_life < MILLING_TOOL_LIFE_LOW_MIN,
              "Tool life is low - optimize cutting parameters"),
        Check(p.depth > p.cutter_diameter * MILLING_DEPTH_FRACTION_MAX,
              "Deep cuts may cause chatter - consider multiple passes"),
    ], fallback="Milling parameters are well optimized")

    logger.debug(
        f"Milling {p.material}: V={cutting_speed:.1f}m/min, fz={feed_per_tooth:.3f}mm, "
        f"{passes} pass(es)"
    )

    return MillingResults(
        cutting_speed=round_half_up(cutting_speed, 1),
        feed_per_tooth=round_half_up(feed_per_tooth, 3),
        material_removal_rate=round_half_up(material_removal_rate, 2),
        cutting_force=round_half_up(cutting_force),
        cutting_power=round_half_up(cutting_power, 2),
        machining_time=round_half_up(machining_time, 2),
        surface_roughness=round_half_up(surface_roughness, 2),
        tool_life=round_half_up(tool_life),
        cost_per_part=round_half_up(cost_per_part, 2),
        recommendations=recommendations,
    )


def calculate_drilling(params: Union[DrillingParameters, Mapping]) -> DrillingResults:
    """
    Calculate thrust, torque, power, drill life and cost per hole.

    Drill life is counted in holes rather than minutes: base life for the
    tool material scaled by machinability, by recommended/actual speed and
    by 1.5 when coolant is used.

    Raises:
        MaterialNotFoundError: If the material is not a machining material
        InvalidParameterError: If diameter, depth, speed or feed is not
            positive
    """
    p = coerce_params(DrillingParameters, params)
    material = validate_material(MACHINING_MATERIALS, p.material, "machining")

    require_positive(p.hole_diameter, "hole_diameter", "Hole diameter")
    require_positive(p.hole_depth, "hole_depth", "Hole depth")
    require_positive(p.drill_speed, "drill_speed", "Drill speed")
    require_positive(p.feed_rate, "feed_rate", "Feed rate")

    cutting_speed = pi * p.hole_diameter * p.drill_speed / 1000
    hole_area = pi * (p.hole_diameter / 2) ** 2
    material_removal_rate = hole_area * p.feed_rate * p.drill_speed / 60000  # cm³/s

    thrust_force = material.tensile_strength * DRILLING_THRUST_FACTOR * hole_area / 1000
    torque = material.tensile_strength * DRILLING_TORQUE_FACTOR * (p.hole_diameter / 2) ** 2 * pi / 1000
    drilling_time = p.hole_depth / (p.feed_rate * p.drill_speed)
    power = torque * p.drill_speed * 2 * pi / 60000

    recommended = material.recommended_speed.for_tool(p.tool_material)
    tool_life = (
        DRILL_BASE_LIFE_HOLES[p.tool_material]
        * material.machinability_rating / 100
        * recommended / cutting_speed
        * (DRILLING_COOLANT_LIFE_FACTOR if p.coolant else 1.0)
    )
    tool_cost = TOOL_COST[p.tool_material] * DRILLING_TOOL_COST_FACTOR
    cost_per_hole = drilling_time * (DRILLING_MACHINE_COST_PER_MIN + LABOR_COST_PER_MIN) + tool_cost / tool_life

    recommendations = generate_recommendations([
        Check(p.feed_rate > p.hole_diameter * DRILLING_FEED_FRACTION_MAX,
              "Feed rate is high for this hole diameter - may cause drill breakage"),
        Check(cutting_speed > recommended * SPEED_HIGH_FACTOR,
              "Drill speed is high - consider reducing to extend tool life"),
        Check(p.hole_depth > p.hole_diameter * DRILLING_DEPTH_RATIO_MAX,
              "Deep hole drilling - use peck drilling cycle and coolant"),
        Check(not p.coolant and material.machinability_rating < DRILLING_COOLANT_MACHINABILITY,
              "Use coolant for better chip evacuation and tool life"),
        Check(tool_life < DRILLING_TOOL_LIFE_LOW_HOLES,
              "Tool life is very low - check drill condition and parameters"),
        Check(thrust_force > DRILLING_THRUST_HIGH_N,
              "High thrust force - ensure adequate workholding"),
    ], fallback="Drilling parameters are appropriate for this application")

    logger.debug(
        f"Drilling {p.material} d={p.hole_diameter}mm: thrust={thrust_force:.0f}N, "
        f"life={tool_life:.0f} holes"
    )

    return DrillingResults(
        cutting_speed=round_half_up(cutting_speed, 1),
        material_removal_rate=round_half_up(material_removal_rate, 2),
        thrust_force=round_half_up(thrust_force),
        torque=round_half_up(torque, 2),
        drilling_time=round_half_up(drilling_time, 3),
        tool_life=round_half_up(tool_life),
        power=round_half_up(power, 2),
        cost_per_hole=round_half_up(cost_per_hole, 3),
        recommendations=recommendations,
    )
