"""
Process calculators - forming, cutting, drawing and machining.

Every calculator takes a parameter record (or an equivalent mapping with
snake_case or camelCase keys) and returns a frozen result record including
rule-based recommendations.

Example:
    >>> from processcalc.calculator import calculate_rolling
    >>> result = calculate_rolling({
    ...     "material": "steel-low-carbon",
    ...     "initial_thickness": 10, "final_thickness": 8, "width": 100,
    ...     "roll_diameter": 300, "rolling_speed": 60, "friction_coefficient": 0.3,
    ... })
    >>> round(result.reduction_ratio)
    20
"""

from .shared import (
    # Recommendation rules
    Check,
    generate_recommendations,

    # Shared physics
    flow_stress,
    temperature_factor,
    max_working_temperature,
    derated_strength,
    round_half_up,
)

from .forming import (
    calculate_rolling,
    calculate_forging,
)

from .cutting import (
    calculate_punching,
    calculate_shearing,
    optimize_clearance,
    classify_cut_quality,
)

from .drawing import (
    calculate_wire_drawing,
    calculate_extrusion,
)

from .machining import (
    calculate_turning,
    calculate_milling,
    calculate_drilling,
    taylor_tool_life,
)

from .registry import (
    # Dispatch by process name
    ProcessSpec,
    PROCESSES,
    get_process,
    run,
)

from .validation import (
    # Form validation
    validate_inputs,
    parse_inputs,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    # Output formatters
    to_json,
    to_markdown,
    to_summary,
)

from ..enums import (
    # Type-safe enums
    Process,
    DieType,
    ExtrusionType,
    ToolMaterial,
    CutQuality,
)

# Convenience imports
from ..materials import validate_material


__all__ = [
    # Enums
    "Process",
    "DieType",
    "ExtrusionType",
    "ToolMaterial",
    "CutQuality",

    # Shared
    "Check",
    "generate_recommendations",
    "validate_material",
    "flow_stress",
    "temperature_factor",
    "max_working_temperature",
    "derated_strength",
    "round_half_up",

    # Forming
    "calculate_rolling",
    "calculate_forging",

    # Cutting
    "calculate_punching",
    "calculate_shearing",
    "optimize_clearance",
    "classify_cut_quality",

    # Drawing
    "calculate_wire_drawing",
    "calculate_extrusion",

    # Machining
    "calculate_turning",
    "calculate_milling",
    "calculate_drilling",
    "taylor_tool_life",

    # Registry
    "ProcessSpec",
    "PROCESSES",
    "get_process",
    "run",

    # Validation
    "validate_inputs",
    "parse_inputs",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
