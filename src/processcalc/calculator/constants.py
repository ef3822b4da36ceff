"""
Process constants for forming, cutting and machining calculations.

This module centralizes the numerical constants used by the calculators,
the recommendation rules and the input validation layer.

MODIFICATION GUIDELINES:
- Always include units in constant names (_MM, _DEG, _PERCENT, _PER_MIN)
- Recommendation thresholds live here, not inline in the calculators
- Empirical factors are approximate (Kalpakjian & Schmid, Manufacturing
  Engineering & Technology); treat results as planning estimates

Constants are grouped by category:
- General: ambient conditions and unit scaling
- Forming: rolling, forging
- Drawing and extrusion
- Sheet cutting: punching, shearing
- Machining: Taylor tool life, costing, recommendation thresholds
- Typical process windows (validation warnings)
- Form defaults (applied by callers, never by the calculators)
"""

from types import MappingProxyType
from typing import Dict, Mapping

from ..enums import DieType, ExtrusionType, Process, ToolMaterial

# =============================================================================
# General
# =============================================================================

AMBIENT_TEMPERATURE_C: float = 20.0

# Practical input limits (outside these a value is almost certainly a typo)
MIN_TEMPERATURE_C: float = -273.0
MAX_TEMPERATURE_C: float = 3000.0
MIN_THICKNESS_MM: float = 0.001
MAX_THICKNESS_MM: float = 1000.0

# =============================================================================
# Forming
# =============================================================================

# Upsetting friction factor: 1 + mu * d / (k * h)
FORGING_FRICTION_DIVISOR: Mapping[DieType, float] = MappingProxyType({
    DieType.FLAT: 3.0,
    DieType.GROOVED: 4.0,
})

FORGING_EFFICIENCY: float = 0.85  # Typical press efficiency

# =============================================================================
# Wire drawing
# =============================================================================

# Yield strength derating per °C above ambient
DRAWING_TEMP_DERATE_PER_C: float = 0.001
DRAWING_LUBRICATED_FRICTION_FACTOR: float = 0.5
DRAWING_EFFICIENCY_CAP_PERCENT: float = 95.0

DRAWING_DIE_ANGLE_MIN_DEG: float = 6.0    # Below: excessive drawing force
DRAWING_DIE_ANGLE_MAX_DEG: float = 20.0   # Above: surface defects
DRAWING_DIE_STRESS_UTS_FACTOR: float = 3.0
DRAWING_EFFICIENCY_LOW_PERCENT: float = 70.0
DRAWING_SPEED_HIGH_M_PER_MIN: float = 100.0

# =============================================================================
# Extrusion
# =============================================================================

EXTRUSION_TEMP_DERATE_PER_C: float = 0.002
EXTRUSION_FRICTION_LUBRICATED: float = 0.05
EXTRUSION_FRICTION_DRY: float = 0.15
EXTRUSION_TYPE_MULTIPLIER: Mapping[ExtrusionType, float] = MappingProxyType({
    ExtrusionType.DIRECT: 1.0,
    ExtrusionType.INDIRECT: 0.8,  # No billet/container friction
})
EXTRUSION_EFFICIENCY_CAP_PERCENT: float = 90.0

EXTRUSION_RATIO_HIGH: float = 50.0
EXTRUSION_HOT_TEMPERATURE_C: float = 200.0
EXTRUSION_DIE_ANGLE_MAX_DEG: float = 90.0
EXTRUSION_PRESSURE_HIGH_MPA: float = 1000.0
EXTRUSION_EFFICIENCY_LOW_PERCENT: float = 60.0
EXTRUSION_SPEED_HIGH_MM_PER_MIN: float = 50.0
EXTRUSION_WARM_TEMPERATURE_C: float = 300.0

# =============================================================================
# Sheet cutting
# =============================================================================

PUNCHING_TEMP_DERATE_PER_C: float = 0.002
PUNCHING_BREAKTHROUGH_MM: float = 2.0        # Extra stroke past thickness
PUNCHING_STRIPPING_BASE: float = 0.08
PUNCHING_STRIPPING_SLOPE: float = 0.02       # Per unit thickness/diameter
PUNCHING_OPTIMAL_CLEARANCE_FRACTION: float = 0.05  # 5% of thickness

# Cut quality bands on clearance ratio (clearance / optimal clearance)
CUT_QUALITY_EXCELLENT_RANGE = (0.8, 1.2)
CUT_QUALITY_GOOD_RANGE = (0.6, 1.5)
CUT_QUALITY_FAIR_RANGE = (0.4, 2.0)

PUNCHING_WEAR_SPEED_EXPONENT: float = 0.3
PUNCHING_WEAR_LUBRICATION_FACTOR: float = 0.7
PUNCHING_WEAR_SCALE: float = 2.5             # µm per 1000 holes
PUNCHING_ALLOWED_WEAR_UM: float = 250.0      # Regrind limit

PUNCHING_SPEED_HIGH_PER_MIN: float = 200.0
PUNCHING_TEMPERATURE_HIGH_C: float = 50.0
PUNCHING_CLEARANCE_MAX_PERCENT: float = 50.0

SHEARING_CLEARANCE_FACTOR_SLOPE: float = 0.3
SHEARING_HOLD_DOWN_MARGIN_MM: float = 10.0   # Pad width beyond thickness
SHEARING_WEAR_SCALE: float = 15.0            # µm per m of cut

SHEARING_BLADE_ANGLE_LOW_DEG: float = 2.0
SHEARING_BLADE_ANGLE_HIGH_DEG: float = 6.0
SHEARING_BLADE_ANGLE_MAX_DEG: float = 10.0
SHEARING_CLEARANCE_LOW_PERCENT: float = 5.0
SHEARING_CLEARANCE_HIGH_PERCENT: float = 15.0
SHEARING_CLEARANCE_MAX_PERCENT: float = 30.0
SHEARING_HOLD_DOWN_PRESSURE_LOW_MPA: float = 10.0

# Optimal clearance = t * (base + HB / divisor)
CLEARANCE_BASE_FRACTION: float = 0.04
CLEARANCE_HARDNESS_DIVISOR: float = 5000.0
CLEARANCE_WINDOW_LOW: float = 0.8
CLEARANCE_WINDOW_HIGH: float = 1.2

# =============================================================================
# Machining - Taylor tool life V * T^n = C
# =============================================================================

TAYLOR_EXPONENT: Mapping[ToolMaterial, float] = MappingProxyType({
    ToolMaterial.HSS: 0.125,
    ToolMaterial.CARBIDE: 0.2,
    ToolMaterial.CERAMIC: 0.3,
    ToolMaterial.DIAMOND: 0.4,
})

# C at machinability 100, m/min
TAYLOR_CONSTANT: Mapping[ToolMaterial, float] = MappingProxyType({
    ToolMaterial.HSS: 30.0,
    ToolMaterial.CARBIDE: 200.0,
    ToolMaterial.CERAMIC: 500.0,
    ToolMaterial.DIAMOND: 1000.0,
})

TOOL_COST: Mapping[ToolMaterial, float] = MappingProxyType({
    ToolMaterial.HSS: 5.0,
    ToolMaterial.CARBIDE: 25.0,
    ToolMaterial.CERAMIC: 50.0,
    ToolMaterial.DIAMOND: 200.0,
})

# Drill life in holes at machinability 100 and recommended speed
DRILL_BASE_LIFE_HOLES: Mapping[ToolMaterial, float] = MappingProxyType({
    ToolMaterial.HSS: 50.0,
    ToolMaterial.CARBIDE: 200.0,
    ToolMaterial.CERAMIC: 500.0,
    ToolMaterial.DIAMOND: 1000.0,
})

# Specific cutting force as a multiple of tensile strength
TURNING_SPECIFIC_FORCE_FACTOR: float = 2.5
MILLING_SPECIFIC_FORCE_FACTOR: float = 3.0
DRILLING_THRUST_FACTOR: float = 0.8
DRILLING_TORQUE_FACTOR: float = 0.3

TURNING_NOSE_RADIUS_MM: float = 0.8
MILLING_ROUGHNESS_DIVISOR: float = 6.4
MILLING_STEPOVER_FRACTION: float = 0.8       # Of cutter diameter
MILLING_TAYLOR_FACTOR: float = 0.8
MILLING_TOOL_COST_FACTOR: float = 1.5
DRILLING_TOOL_COST_FACTOR: float = 0.5
DRILLING_COOLANT_LIFE_FACTOR: float = 1.5

# Shop rates, $/min
LABOR_COST_PER_MIN: float = 0.8
TURNING_MACHINE_COST_PER_MIN: float = 1.5
MILLING_MACHINE_COST_PER_MIN: float = 2.0
DRILLING_MACHINE_COST_PER_MIN: float = 1.2

# Recommendation thresholds
SPEED_HIGH_FACTOR: float = 1.2               # x recommended speed
SPEED_LOW_FACTOR: float = 0.8
TURNING_FEED_HIGH_MM_PER_REV: float = 0.5
TURNING_TOOL_LIFE_LOW_MIN: float = 30.0
TURNING_POWER_HIGH_KW: float = 10.0
TURNING_COOLANT_MACHINABILITY: float = 60.0
MILLING_FEED_PER_TOOTH_HIGH_MM: float = 0.3
MILLING_FEED_PER_TOOTH_LOW_MM: float = 0.05
MILLING_MIN_TEETH: int = 3
MILLING_TOOL_LIFE_LOW_MIN: float = 60.0
MILLING_DEPTH_FRACTION_MAX: float = 0.5      # Of cutter diameter
DRILLING_FEED_FRACTION_MAX: float = 0.1      # Of drill diameter
DRILLING_DEPTH_RATIO_MAX: float = 5.0        # Depth / diameter
DRILLING_COOLANT_MACHINABILITY: float = 70.0
DRILLING_TOOL_LIFE_LOW_HOLES: float = 20.0
DRILLING_THRUST_HIGH_N: float = 1000.0

# =============================================================================
# Typical process windows (validation warnings only)
# =============================================================================

ROLLING_REDUCTION_MIN_PERCENT: float = 5.0
ROLLING_REDUCTION_MAX_PERCENT: float = 90.0
ROLLING_TYPICAL_FRICTION: float = 0.15
DRAWING_REDUCTION_MIN_PERCENT: float = 10.0
DRAWING_REDUCTION_MAX_PERCENT: float = 50.0
DRAWING_TYPICAL_DIE_ANGLE_DEG: float = 15.0
EXTRUSION_RATIO_MIN: float = 2.0
EXTRUSION_RATIO_MAX: float = 100.0

# =============================================================================
# Form defaults
# =============================================================================

# Substituted by the validation layer for fields the user left blank.
# Calculators never apply these.
FORM_DEFAULTS: Mapping[Process, Dict[str, object]] = MappingProxyType({
    Process.ROLLING: {
        "friction_coefficient": 0.3,
        "temperature": AMBIENT_TEMPERATURE_C,
    },
    Process.FORGING: {
        "friction_coefficient": 0.3,
        "temperature": AMBIENT_TEMPERATURE_C,
        "die_type": DieType.FLAT.value,
    },
    Process.WIRE_DRAWING: {
        "number_of_passes": 1,
        "die_angle": 8.0,
        "temperature": AMBIENT_TEMPERATURE_C,
        "lubrication": False,
    },
    Process.EXTRUSION: {
        "extrusion_type": ExtrusionType.DIRECT.value,
        "die_angle": 45.0,
        "temperature": 400.0,
        "lubrication": False,
    },
    Process.PUNCHING: {
        "clearance": 6.0,
        "punch_speed": 100.0,
        "temperature": AMBIENT_TEMPERATURE_C,
        "lubrication": True,
    },
    Process.SHEARING: {
        "blade_angle": 3.0,
        "clearance": 8.0,
        "shear_speed": 50.0,
        "hold_down_force": 5000.0,
    },
    Process.TURNING: {
        "tool_material": ToolMaterial.CARBIDE.value,
        "coolant": True,
    },
    Process.MILLING: {
        "tool_material": ToolMaterial.CARBIDE.value,
    },
    Process.DRILLING: {
        "tool_material": ToolMaterial.HSS.value,
        "coolant": True,
    },
})
