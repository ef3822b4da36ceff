"""
Input validation for process forms.

Turns raw form fields (strings, numbers, booleans; camelCase or snake_case
keys) into a fully-resolved parameter record:

    validate_inputs(process, fields) -> ValidationResult(valid, messages, params)

Steps:
1. Substitute form defaults for blank optional fields (reported as INFO)
2. Parse and range-check each field (ERROR)
3. Cross-field rules such as final < initial thickness (ERROR)
4. Typical process windows such as rolling reduction 5-90% (WARNING)
5. Build the parameter record when there are no errors

The calculators repeat the hard numeric checks, so a record built by hand
is still guarded; this layer adds friendly messages, defaults and warnings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_snake

from ..enums import DieType, ExtrusionType, Process, ToolMaterial
from ..exceptions import InvalidParameterError
from .constants import (
    DRAWING_REDUCTION_MAX_PERCENT,
    DRAWING_REDUCTION_MIN_PERCENT,
    DRAWING_TEMP_DERATE_PER_C,
    EXTRUSION_RATIO_MAX,
    EXTRUSION_RATIO_MIN,
    EXTRUSION_TEMP_DERATE_PER_C,
    FORM_DEFAULTS,
    MAX_TEMPERATURE_C,
    MAX_THICKNESS_MM,
    MIN_TEMPERATURE_C,
    MIN_THICKNESS_MM,
    PUNCHING_CLEARANCE_MAX_PERCENT,
    PUNCHING_TEMP_DERATE_PER_C,
    ROLLING_REDUCTION_MAX_PERCENT,
    ROLLING_REDUCTION_MIN_PERCENT,
    SHEARING_BLADE_ANGLE_MAX_DEG,
    SHEARING_CLEARANCE_MAX_PERCENT,
)
from .registry import get_process
from .shared import max_working_temperature


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    field: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)
    params: Optional[BaseModel] = None  # Set only when valid

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


# ============================================================================
# Field rules
# ============================================================================

@dataclass(frozen=True)
class FieldRule:
    """How one form field is parsed and range-checked."""
    name: str
    label: str
    kind: str = "number"            # number | integer | boolean | choice
    check: Optional[str] = None     # positive | non_negative
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    unit: str = ""
    choices: Tuple[str, ...] = ()


def _positive(name: str, label: str, maximum: Optional[float] = None, unit: str = "") -> FieldRule:
    return FieldRule(name, label, check="positive", maximum=maximum, unit=unit)


_TEMPERATURE = FieldRule(
    "temperature", "Temperature", minimum=MIN_TEMPERATURE_C, maximum=MAX_TEMPERATURE_C, unit="°C"
)
_LUBRICATION = FieldRule("lubrication", "Lubrication", kind="boolean")
_COOLANT = FieldRule("coolant", "Coolant", kind="boolean")
_TOOL = FieldRule("tool_material", "Tool material", kind="choice",
                  choices=tuple(t.value for t in ToolMaterial))

FIELD_RULES: Dict[Process, Tuple[FieldRule, ...]] = {
    Process.ROLLING: (
        _positive("initial_thickness", "Initial thickness"),
        _positive("final_thickness", "Final thickness"),
        _positive("width", "Width"),
        _positive("roll_diameter", "Roll diameter"),
        _positive("rolling_speed", "Rolling speed"),
        FieldRule("friction_coefficient", "Friction coefficient", check="non_negative"),
        _TEMPERATURE,
    ),
    Process.FORGING: (
        _positive("initial_height", "Initial height"),
        _positive("final_height", "Final height"),
        _positive("diameter", "Diameter"),
        FieldRule("friction_coefficient", "Friction coefficient", check="non_negative"),
        FieldRule("die_type", "Die type", kind="choice", choices=tuple(d.value for d in DieType)),
        _TEMPERATURE,
    ),
    Process.WIRE_DRAWING: (
        _positive("initial_diameter", "Initial diameter"),
        _positive("final_diameter", "Final diameter"),
        _positive("drawing_speed", "Drawing speed"),
        _positive("die_angle", "Die angle", maximum=90, unit="°"),
        FieldRule("number_of_passes", "Number of passes", kind="integer", minimum=1),
        _LUBRICATION,
        _TEMPERATURE,
    ),
    Process.EXTRUSION: (
        _positive("billet_diameter", "Billet diameter"),
        _positive("extruded_diameter", "Extruded diameter"),
        _positive("billet_length", "Billet length"),
        _positive("extrusion_speed", "Extrusion speed"),
        _positive("die_angle", "Die angle", maximum=180, unit="°"),
        FieldRule("extrusion_type", "Extrusion type", kind="choice",
                  choices=tuple(e.value for e in ExtrusionType)),
        _LUBRICATION,
        _TEMPERATURE,
    ),
    Process.PUNCHING: (
        _positive("thickness", "Thickness"),
        _positive("hole_diameter", "Hole diameter"),
        _positive("punch_diameter", "Punch diameter"),
        FieldRule("clearance", "Clearance", check="non_negative",
                  maximum=PUNCHING_CLEARANCE_MAX_PERCENT, unit="%"),
        _positive("punch_speed", "Punch speed"),
        _LUBRICATION,
        _TEMPERATURE,
    ),
    Process.SHEARING: (
        _positive("thickness", "Thickness"),
        _positive("shear_length", "Shear length"),
        _positive("blade_angle", "Blade angle", maximum=SHEARING_BLADE_ANGLE_MAX_DEG, unit="°"),
        FieldRule("clearance", "Clearance", check="non_negative",
                  maximum=SHEARING_CLEARANCE_MAX_PERCENT, unit="%"),
        _positive("shear_speed", "Shear speed"),
        FieldRule("hold_down_force", "Hold-down force", check="non_negative"),
    ),
    Process.TURNING: (
        _positive("diameter", "Diameter"),
        _positive("length", "Length"),
        _positive("cutting_speed", "Cutting speed"),
        _positive("feed_rate", "Feed rate"),
        _positive("depth_of_cut", "Depth of cut"),
        _TOOL,
        _COOLANT,
    ),
    Process.MILLING: (
        _positive("width", "Width"),
        _positive("length", "Length"),
        _positive("depth", "Depth"),
        _positive("cutter_diameter", "Cutter diameter"),
        FieldRule("number_of_teeth", "Number of teeth", kind="integer", minimum=1),
        _positive("spindle_speed", "Spindle speed"),
        _positive("feed_rate", "Feed rate"),
        _TOOL,
    ),
    Process.DRILLING: (
        _positive("hole_diameter", "Hole diameter"),
        _positive("hole_depth", "Hole depth"),
        _positive("drill_speed", "Drill speed"),
        _positive("feed_rate", "Feed rate"),
        _TOOL,
        _COOLANT,
    ),
}

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _normalize_keys(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """camelCase -> snake_case; 'materialId' is accepted for 'material'."""
    normalized = {}
    for key, value in fields.items():
        name = to_snake(key)
        if name == "material_id":
            name = "material"
        normalized[name] = value
    return normalized


def _parse_field(rule: FieldRule, raw: Any) -> Tuple[Any, Optional[ValidationMessage]]:
    """Parse one raw value. Returns (value, error message or None)."""
    code_base = rule.name.upper()

    if rule.kind == "boolean":
        if isinstance(raw, bool):
            return raw, None
        text = str(raw).strip().lower()
        if text in _TRUE_STRINGS:
            return True, None
        if text in _FALSE_STRINGS:
            return False, None
        return None, ValidationMessage(
            Severity.ERROR, f"{code_base}_INVALID", f"{rule.label} must be true or false", rule.name
        )

    if rule.kind == "choice":
        value = raw.value if isinstance(raw, Enum) else str(raw).strip().lower()
        if value not in rule.choices:
            return None, ValidationMessage(
                Severity.ERROR, f"{code_base}_INVALID",
                f"{rule.label} must be one of: {', '.join(rule.choices)}", rule.name,
                suggestion=f"Got '{raw}'",
            )
        return value, None

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None, ValidationMessage(
            Severity.ERROR, f"{code_base}_NOT_A_NUMBER", f"{rule.label} must be a number", rule.name
        )
    if value != value or value in (float("inf"), float("-inf")):
        return None, ValidationMessage(
            Severity.ERROR, f"{code_base}_NOT_A_NUMBER", f"{rule.label} must be a finite number", rule.name
        )
    if rule.kind == "integer":
        if value != int(value):
            return None, ValidationMessage(
                Severity.ERROR, f"{code_base}_NOT_AN_INTEGER", f"{rule.label} must be a whole number", rule.name
            )
        value = int(value)

    error = _check_range(rule, value)
    return (None, error) if error else (value, None)


def _check_range(rule: FieldRule, value: float) -> Optional[ValidationMessage]:
    code_base = rule.name.upper()
    if rule.check == "positive" and value <= 0:
        return ValidationMessage(
            Severity.ERROR, f"{code_base}_NOT_POSITIVE", f"{rule.label} must be greater than 0", rule.name
        )
    if rule.check == "non_negative" and value < 0:
        return ValidationMessage(
            Severity.ERROR, f"{code_base}_NEGATIVE", f"{rule.label} cannot be negative", rule.name
        )
    if rule.maximum is not None and value > rule.maximum:
        low = rule.minimum if rule.minimum is not None else 0
        return ValidationMessage(
            Severity.ERROR, f"{code_base}_OUT_OF_RANGE",
            f"{rule.label} must be between {low:g} and {rule.maximum:g}{rule.unit}", rule.name
        )
    if rule.minimum is not None and value < rule.minimum:
        if rule.maximum is not None:
            message = f"{rule.label} must be between {rule.minimum:g} and {rule.maximum:g}{rule.unit}"
        else:
            message = f"{rule.label} must be at least {rule.minimum:g}"
        return ValidationMessage(Severity.ERROR, f"{code_base}_OUT_OF_RANGE", message, rule.name)
    return None


# ============================================================================
# Cross-field and process-window rules
# ============================================================================

def _require_smaller(values: Dict[str, Any], small: str, large: str, message: str,
                     allow_equal: bool = False) -> List[ValidationMessage]:
    a, b = values.get(small), values.get(large)
    if a is None or b is None:
        return []
    if a < b or (allow_equal and a == b):
        return []
    return [ValidationMessage(Severity.ERROR, f"{small.upper()}_TOO_LARGE", message, small)]


def _thickness_warnings(values: Dict[str, Any], name: str) -> List[ValidationMessage]:
    thickness = values.get(name)
    if thickness is None:
        return []
    if thickness < MIN_THICKNESS_MM:
        return [ValidationMessage(
            Severity.WARNING, "THICKNESS_VERY_SMALL",
            f"Thickness {thickness:g}mm is below {MIN_THICKNESS_MM:g}mm", name,
            suggestion="Check the units - thickness is in millimetres",
        )]
    if thickness > MAX_THICKNESS_MM:
        return [ValidationMessage(
            Severity.WARNING, "THICKNESS_VERY_LARGE",
            f"Thickness {thickness:g}mm exceeds {MAX_THICKNESS_MM:g}mm", name,
            suggestion="Check the units - thickness is in millimetres",
        )]
    return []


def _temperature_limit(values: Dict[str, Any], derate_per_c: float) -> List[ValidationMessage]:
    temperature = values.get("temperature")
    limit = max_working_temperature(derate_per_c)
    if temperature is None or temperature < limit:
        return []
    return [ValidationMessage(
        Severity.ERROR, "TEMPERATURE_TOO_HIGH",
        f"Temperature {temperature:g}°C must be below {limit:g}°C for this process", "temperature",
        suggestion="The linear strength model reaches zero strength at this temperature",
    )]


def _validate_rolling(values: Dict[str, Any]) -> List[ValidationMessage]:
    messages = _require_smaller(
        values, "final_thickness", "initial_thickness",
        "Final thickness must be less than initial thickness",
    )
    messages.extend(_thickness_warnings(values, "initial_thickness"))
    if messages or values.get("final_thickness") is None or values.get("initial_thickness") is None:
        return messages

    reduction = (values["initial_thickness"] - values["final_thickness"]) / values["initial_thickness"] * 100
    if reduction < ROLLING_REDUCTION_MIN_PERCENT:
        messages.append(ValidationMessage(
            Severity.WARNING, "ROLLING_REDUCTION_LOW",
            f"Reduction {reduction:.1f}% is below the typical {ROLLING_REDUCTION_MIN_PERCENT:g}% minimum",
            "final_thickness",
            suggestion="Very light passes mostly work the surface",
        ))
    elif reduction > ROLLING_REDUCTION_MAX_PERCENT:
        messages.append(ValidationMessage(
            Severity.WARNING, "ROLLING_REDUCTION_HIGH",
            f"Reduction {reduction:.1f}% exceeds the typical {ROLLING_REDUCTION_MAX_PERCENT:g}% maximum",
            "final_thickness",
            suggestion="Split the reduction over several passes",
        ))
    return messages


def _validate_forging(values: Dict[str, Any]) -> List[ValidationMessage]:
    return _require_smaller(
        values, "final_height", "initial_height",
        "Final height must be less than initial height",
    )


def _validate_wire_drawing(values: Dict[str, Any]) -> List[ValidationMessage]:
    messages = _require_smaller(
        values, "final_diameter", "initial_diameter",
        "Final diameter must be less than initial diameter",
    )
    messages.extend(_temperature_limit(values, DRAWING_TEMP_DERATE_PER_C))
    di, df, passes = values.get("initial_diameter"), values.get("final_diameter"), values.get("number_of_passes")
    if messages or di is None or df is None or not passes:
        return messages

    per_pass = (1 - (df / di) ** 2) * 100 / passes
    if per_pass < DRAWING_REDUCTION_MIN_PERCENT:
        messages.append(ValidationMessage(
            Severity.WARNING, "DRAWING_REDUCTION_LOW",
            f"Area reduction per pass {per_pass:.1f}% is below the typical {DRAWING_REDUCTION_MIN_PERCENT:g}%",
            "number_of_passes",
            suggestion="Use fewer passes",
        ))
    elif per_pass > DRAWING_REDUCTION_MAX_PERCENT:
        messages.append(ValidationMessage(
            Severity.WARNING, "DRAWING_REDUCTION_HIGH",
            f"Area reduction per pass {per_pass:.1f}% exceeds the typical {DRAWING_REDUCTION_MAX_PERCENT:g}%",
            "number_of_passes",
            suggestion="Increase the number of passes",
        ))
    return messages


def _validate_extrusion(values: Dict[str, Any]) -> List[ValidationMessage]:
    messages = _require_smaller(
        values, "extruded_diameter", "billet_diameter",
        "Extruded diameter must be less than billet diameter",
    )
    messages.extend(_temperature_limit(values, EXTRUSION_TEMP_DERATE_PER_C))
    db, de = values.get("billet_diameter"), values.get("extruded_diameter")
    if messages or db is None or de is None:
        return messages

    ratio = (db / de) ** 2
    if not EXTRUSION_RATIO_MIN <= ratio <= EXTRUSION_RATIO_MAX:
        messages.append(ValidationMessage(
            Severity.WARNING, "EXTRUSION_RATIO_ATYPICAL",
            f"Extrusion ratio {ratio:.1f} is outside the typical range "
            f"{EXTRUSION_RATIO_MIN:g}-{EXTRUSION_RATIO_MAX:g}",
            "extruded_diameter",
        ))
    return messages


def _validate_punching(values: Dict[str, Any]) -> List[ValidationMessage]:
    messages = _require_smaller(
        values, "punch_diameter", "hole_diameter",
        "Punch diameter must be less than hole diameter", allow_equal=True,
    )
    messages.extend(_temperature_limit(values, PUNCHING_TEMP_DERATE_PER_C))
    messages.extend(_thickness_warnings(values, "thickness"))
    return messages


def _validate_shearing(values: Dict[str, Any]) -> List[ValidationMessage]:
    return _thickness_warnings(values, "thickness")


_CROSS_FIELD = {
    Process.ROLLING: _validate_rolling,
    Process.FORGING: _validate_forging,
    Process.WIRE_DRAWING: _validate_wire_drawing,
    Process.EXTRUSION: _validate_extrusion,
    Process.PUNCHING: _validate_punching,
    Process.SHEARING: _validate_shearing,
}


# ============================================================================
# Entry points
# ============================================================================

def validate_inputs(process: Union[Process, str], fields: Mapping[str, Any]) -> ValidationResult:
    """
    Validate raw form fields for a process.

    Args:
        process: Process enum or name ('rolling', 'wire-drawing', ...)
        fields: Raw field values; blank strings and None count as missing

    Returns:
        ValidationResult; .params holds the parameter record when valid

    Raises:
        ValueError: If the process name is unknown
    """
    spec = get_process(process)
    raw = _normalize_keys(fields)
    messages: List[ValidationMessage] = []

    # Material
    material = raw.get("material")
    if _is_blank(material):
        messages.append(ValidationMessage(
            Severity.ERROR, "MATERIAL_REQUIRED", "Material is required", "material"
        ))
        material = None
    elif material not in spec.materials:
        messages.append(ValidationMessage(
            Severity.ERROR, "MATERIAL_NOT_FOUND", f"Material not found: '{material}'", "material",
            suggestion=f"Available {spec.family} materials: {', '.join(spec.materials)}",
        ))
        material = None

    # Defaults, then per-field parsing
    defaults = FORM_DEFAULTS.get(spec.process, {})
    values: Dict[str, Any] = {}
    for rule in FIELD_RULES[spec.process]:
        value = raw.get(rule.name)
        if _is_blank(value):
            if rule.name not in defaults:
                messages.append(ValidationMessage(
                    Severity.ERROR, f"{rule.name.upper()}_REQUIRED", f"{rule.label} is required", rule.name
                ))
                continue
            value = defaults[rule.name]
            messages.append(ValidationMessage(
                Severity.INFO, "DEFAULT_APPLIED", f"{rule.label} not set, using default {value}", rule.name
            ))
        parsed, error = _parse_field(rule, value)
        if error:
            messages.append(error)
        else:
            values[rule.name] = parsed

    cross_field = _CROSS_FIELD.get(spec.process)
    if cross_field:
        messages.extend(cross_field(values))

    has_errors = any(m.severity == Severity.ERROR for m in messages)
    if has_errors:
        return ValidationResult(valid=False, messages=messages)

    try:
        params = spec.parameters.model_validate({"material": material, **values})
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            messages.append(ValidationMessage(Severity.ERROR, "INVALID_VALUE", f"{loc}: {err['msg']}", loc))
        return ValidationResult(valid=False, messages=messages)

    return ValidationResult(valid=True, messages=messages, params=params)


def parse_inputs(process: Union[Process, str], fields: Mapping[str, Any]) -> BaseModel:
    """
    Validate raw form fields and return the parameter record.

    Raises:
        InvalidParameterError: With all error messages joined, if invalid
    """
    result = validate_inputs(process, fields)
    if not result.valid:
        errors = result.errors
        raise InvalidParameterError(
            "; ".join(m.message for m in errors),
            field=errors[0].field if errors else None,
        )
    return result.params
