"""
Parameter and result records for every process.

All records are frozen Pydantic models. Fields are snake_case in Python;
input also accepts the camelCase spelling used by JSON clients
(``initialThickness`` populates ``initial_thickness``).

Parameter records carry no numeric defaults: optional inputs (friction,
temperature, passes...) are resolved by the caller, see
``calculator.validation`` for the form-level defaults.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..enums import CutQuality, DieType, ExtrusionType, ToolMaterial


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _lower(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


# ============================================================================
# Parameter records
# ============================================================================

class RollingParameters(_Record):
    """Flat rolling pass."""
    material: str
    initial_thickness: float    # mm
    final_thickness: float      # mm
    width: float                # mm
    roll_diameter: float        # mm
    rolling_speed: float        # m/min
    friction_coefficient: float
    temperature: Optional[float] = None  # °C, informational (cold rolling model)


class ForgingParameters(_Record):
    """Open-die upsetting of a cylindrical billet."""
    material: str
    initial_height: float       # mm
    final_height: float         # mm
    diameter: float             # mm
    friction_coefficient: float
    die_type: DieType
    temperature: Optional[float] = None  # °C, informational

    @field_validator('die_type', mode='before')
    @classmethod
    def normalize_die_type(cls, v):
        return _lower(v)


class WireDrawingParameters(_Record):
    material: str
    initial_diameter: float     # mm
    final_diameter: float       # mm
    drawing_speed: float        # m/min
    die_angle: float            # degrees, included half-angle
    number_of_passes: int
    lubrication: bool
    temperature: float          # °C


class ExtrusionParameters(_Record):
    material: str
    billet_diameter: float      # mm
    extruded_diameter: float    # mm
    billet_length: float        # mm
    extrusion_speed: float      # mm/min
    die_angle: float            # degrees
    temperature: float          # °C
    extrusion_type: ExtrusionType
    lubrication: bool

    @field_validator('extrusion_type', mode='before')
    @classmethod
    def normalize_extrusion_type(cls, v):
        return _lower(v)


class PunchingParameters(_Record):
    material: str
    thickness: float            # mm
    hole_diameter: float        # mm
    punch_diameter: float       # mm
    clearance: float            # % of thickness
    punch_speed: float          # strokes/min
    temperature: float          # °C
    lubrication: bool


class ShearingParameters(_Record):
    material: str
    thickness: float            # mm
    shear_length: float         # mm
    blade_angle: float          # degrees (rake)
    clearance: float            # % of thickness
    shear_speed: float          # strokes/min
    hold_down_force: float      # N


class TurningParameters(_Record):
    material: str
    diameter: float             # mm
    length: float               # mm
    cutting_speed: float        # m/min
    feed_rate: float            # mm/rev
    depth_of_cut: float         # mm
    tool_material: ToolMaterial
    coolant: bool

    @field_validator('tool_material', mode='before')
    @classmethod
    def normalize_tool_material(cls, v):
        return _lower(v)


class MillingParameters(_Record):
    material: str
    width: float                # mm, width of cut
    length: float               # mm
    depth: float                # mm, axial depth of cut
    cutter_diameter: float      # mm
    number_of_teeth: int
    spindle_speed: float        # RPM
    feed_rate: float            # mm/min (table feed)
    tool_material: ToolMaterial

    @field_validator('tool_material', mode='before')
    @classmethod
    def normalize_tool_material(cls, v):
        return _lower(v)


class DrillingParameters(_Record):
    material: str
    hole_diameter: float        # mm
    hole_depth: float           # mm
    drill_speed: float          # RPM
    feed_rate: float            # mm/rev
    tool_material: ToolMaterial
    coolant: bool

    @field_validator('tool_material', mode='before')
    @classmethod
    def normalize_tool_material(cls, v):
        return _lower(v)


# ============================================================================
# Result records
# ============================================================================

class RollingResults(_Record):
    reduction_ratio: float          # %
    true_strain: float
    contact_length: float           # mm
    average_flow_stress: float      # MPa
    rolling_force: float            # N
    rolling_power: float            # kW
    torque: float                   # N·m, per roll
    separating_force: float         # N
    roll_pressure: float            # MPa
    exit_velocity: float            # m/min
    forward_slip: float             # %


class ForgingResults(_Record):
    reduction_ratio: float          # %
    true_strain: float
    average_flow_stress: float      # MPa
    forging_force: float            # N
    forging_power: float            # kW, one-second stroke
    work_done: float                # kJ
    efficiency: float               # fraction


class WireDrawingResults(_Record):
    reduction_ratio: float          # % area
    reduction_per_pass: float       # %
    true_strain: float
    drawing_force: float            # N
    drawing_stress: float           # MPa
    drawing_power: float            # kW
    die_stress: float               # MPa
    work_done: float                # kJ
    efficiency: float               # %
    recommendations: Tuple[str, ...]


class ExtrusionResults(_Record):
    extrusion_ratio: float
    extrusion_force: float          # N
    extrusion_pressure: float       # MPa
    extrusion_power: float          # kW
    extrusion_time: float           # min
    material_flow: float            # mm/min
    work_done: float                # kJ
    efficiency: float               # %
    recommendations: Tuple[str, ...]


class PunchingResults(_Record):
    punching_force: float           # N
    stripping_force: float          # N
    total_force: float              # N
    punching_energy: float          # J
    punching_power: float           # W
    shear_stress: float             # MPa
    clearance_value: float          # mm
    cut_quality: CutQuality
    tool_wear_rate: float           # µm per 1000 holes
    expected_tool_life: int         # holes
    recommendations: Tuple[str, ...]


class ShearingResults(_Record):
    shearing_force: float           # N
    hold_down_pressure: float       # MPa
    total_force: float              # N
    shearing_energy: float          # J
    shearing_power: float           # W
    blade_wear: float               # µm per m of cut
    cut_angle: float                # degrees
    distortion: float               # mm
    recommendations: Tuple[str, ...]


class ClearanceRecommendation(_Record):
    optimal: float                  # mm
    minimum: float                  # mm
    maximum: float                  # mm
    percentage: float               # % of thickness


class TurningResults(_Record):
    spindle_speed: float            # RPM
    material_removal_rate: float    # cm³/min
    cutting_force: float            # N
    cutting_power: float            # kW
    machining_time: float           # min
    surface_roughness: float        # Ra, µm
    tool_life: float                # min
    cost_per_part: float            # $
    recommendations: Tuple[str, ...]


class MillingResults(_Record):
    cutting_speed: float            # m/min
    feed_per_tooth: float           # mm
    material_removal_rate: float    # cm³/min
    cutting_force: float            # N
    cutting_power: float            # kW
    machining_time: float           # min
    surface_roughness: float        # Ra, µm
    tool_life: float                # min
    cost_per_part: float            # $
    recommendations: Tuple[str, ...]


class DrillingResults(_Record):
    cutting_speed: float            # m/min
    material_removal_rate: float    # cm³/s
    thrust_force: float             # N
    torque: float                   # N·m
    drilling_time: float            # min
    tool_life: float                # holes
    power: float                    # kW, spindle
    cost_per_hole: float            # $
    recommendations: Tuple[str, ...]
