"""
Bulk forming calculations - flat rolling and open-die forging.

Both use the power-law flow stress of the forming material registry:

    sigma = K * eps^n,  eps = ln(h0 / h1)

Units: lengths in mm, stresses in MPa (= N/mm²), forces in N.
"""

import logging
from math import log, pi, sin, sqrt
from typing import Mapping, Union

from ..io.models import ForgingParameters, ForgingResults, RollingParameters, RollingResults
from ..materials import FORMING_MATERIALS
from .constants import FORGING_EFFICIENCY, FORGING_FRICTION_DIVISOR
from .shared import (
    coerce_params,
    flow_stress,
    require_less_than,
    require_non_negative,
    require_positive,
    validate_material,
)

logger = logging.getLogger(__name__)


def calculate_rolling(params: Union[RollingParameters, Mapping]) -> RollingResults:
    """
    Calculate force, torque and power for a single flat rolling pass.

    Contact length is the projected arc l = sqrt(R * dh). The torque per roll
    takes the resultant force acting at half the contact length.

    Args:
        params: RollingParameters or an equivalent mapping

    Returns:
        RollingResults (unrounded)

    Raises:
        MaterialNotFoundError: If the material is not a forming material
        InvalidParameterError: If thicknesses are not 0 < h1 < h0, or width,
            roll diameter or speed is not positive, or friction is negative
    """
    p = coerce_params(RollingParameters, params)
    material = validate_material(FORMING_MATERIALS, p.material, "forming")

    require_positive(p.final_thickness, "final_thickness", "Final thickness")
    require_less_than(
        p.final_thickness, p.initial_thickness, "final_thickness",
        "Initial thickness must be greater than final thickness",
    )
    require_positive(p.width, "width", "Width")
    require_positive(p.roll_diameter, "roll_diameter", "Roll diameter")
    require_positive(p.rolling_speed, "rolling_speed", "Rolling speed")
    require_non_negative(p.friction_coefficient, "friction_coefficient", "Friction coefficient")

    reduction = p.initial_thickness - p.final_thickness
    reduction_ratio = reduction / p.initial_thickness * 100
    true_strain = log(p.initial_thickness / p.final_thickness)

    roll_radius = p.roll_diameter / 2
    contact_length = sqrt(roll_radius * reduction)
    contact_angle = sqrt(reduction / roll_radius)  # rad

    average_flow_stress = flow_stress(
        material.flow_stress_coefficient, true_strain, material.strain_hardening_exponent
    )
    rolling_force = average_flow_stress * p.width * contact_length

    # Surface speed m/min -> roll RPM -> rad/s
    roll_rpm = p.rolling_speed * 1000 / (pi * p.roll_diameter)
    angular_velocity = roll_rpm * 2 * pi / 60

    torque = rolling_force * contact_length / 2 / 1000  # N·mm -> N·m
    rolling_power = torque * angular_velocity / 1000    # W -> kW

    separating_force = rolling_force * sin(contact_angle)
    roll_pressure = rolling_force / (p.width * contact_length)
    exit_velocity = p.rolling_speed * p.initial_thickness / p.final_thickness
    forward_slip = (exit_velocity - p.rolling_speed) / p.rolling_speed * 100

    logger.debug(
        f"Rolling {p.material}: {p.initial_thickness}->{p.final_thickness}mm, "
        f"F={rolling_force:.0f}N, P={rolling_power:.2f}kW"
    )

    return RollingResults(
        reduction_ratio=reduction_ratio,
        true_strain=true_strain,
        contact_length=contact_length,
        average_flow_stress=average_flow_stress,
        rolling_force=rolling_force,
        rolling_power=rolling_power,
        torque=torque,
        separating_force=separating_force,
        roll_pressure=roll_pressure,
        exit_velocity=exit_velocity,
        forward_slip=forward_slip,
    )


def calculate_forging(params: Union[ForgingParameters, Mapping]) -> ForgingResults:
    """
    Calculate upsetting force and work for a cylindrical billet.

    Friction factor (slab method approximation):
        flat dies:    1 + mu * d / (3 * h1)
        grooved dies: 1 + mu * d / (4 * h1)

    Power equals work done per one-second stroke.

    Raises:
        MaterialNotFoundError: If the material is not a forming material
        InvalidParameterError: If heights are not 0 < h1 < h0, diameter is
            not positive or friction is negative
    """
    p = coerce_params(ForgingParameters, params)
    material = validate_material(FORMING_MATERIALS, p.material, "forming")

    require_positive(p.final_height, "final_height", "Final height")
    require_less_than(
        p.final_height, p.initial_height, "final_height",
        "Initial height must be greater than final height",
    )
    require_positive(p.diameter, "diameter", "Diameter")
    require_non_negative(p.friction_coefficient, "friction_coefficient", "Friction coefficient")

    reduction = p.initial_height - p.final_height
    reduction_ratio = reduction / p.initial_height * 100
    true_strain = log(p.initial_height / p.final_height)

    average_flow_stress = flow_stress(
        material.flow_stress_coefficient, true_strain, material.strain_hardening_exponent
    )

    area = pi * (p.diameter / 2) ** 2
    friction_factor = 1 + p.friction_coefficient * p.diameter / (
        FORGING_FRICTION_DIVISOR[p.die_type] * p.final_height
    )

    forging_force = average_flow_stress * area * friction_factor * 1000
    work_done = forging_force * reduction / 1000  # kJ
    forging_power = work_done

    logger.debug(f"Forging {p.material} ({p.die_type.value} dies): F={forging_force:.0f}N")

    return ForgingResults(
        reduction_ratio=reduction_ratio,
        true_strain=true_strain,
        average_flow_stress=average_flow_stress,
        forging_force=forging_force,
        forging_power=forging_power,
        work_done=work_done,
        efficiency=FORGING_EFFICIENCY,
    )
