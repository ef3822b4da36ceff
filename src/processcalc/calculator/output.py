"""Output formatters for process results.

Converts typed result records to JSON, Markdown and a plain-text summary.
Uses Pydantic's model_dump(mode='json') so enums (cut quality, tool
material...) serialize as their string values.
"""

import json
from typing import Dict, Optional, Tuple, TYPE_CHECKING, Union

from pydantic import BaseModel

from ..enums import Process
from ..io.schema import SCHEMA_VERSION
from .registry import get_process

if TYPE_CHECKING:
    from .validation import ValidationResult


# Display label and unit per result field. Fields missing here fall back to
# their name with underscores replaced.
FIELD_UNITS: Dict[str, Tuple[str, str]] = {
    "reduction_ratio": ("Reduction", "%"),
    "reduction_per_pass": ("Reduction per pass", "%"),
    "true_strain": ("True strain", ""),
    "contact_length": ("Contact length", "mm"),
    "average_flow_stress": ("Average flow stress", "MPa"),
    "rolling_force": ("Rolling force", "N"),
    "rolling_power": ("Rolling power", "kW"),
    "torque": ("Torque", "N·m"),
    "separating_force": ("Separating force", "N"),
    "roll_pressure": ("Roll pressure", "MPa"),
    "exit_velocity": ("Exit velocity", "m/min"),
    "forward_slip": ("Forward slip", "%"),
    "forging_force": ("Forging force", "N"),
    "forging_power": ("Forging power", "kW"),
    "work_done": ("Work done", "kJ"),
    "efficiency": ("Efficiency", ""),
    "drawing_force": ("Drawing force", "N"),
    "drawing_stress": ("Drawing stress", "MPa"),
    "drawing_power": ("Drawing power", "kW"),
    "die_stress": ("Die stress", "MPa"),
    "extrusion_ratio": ("Extrusion ratio", ""),
    "extrusion_force": ("Extrusion force", "N"),
    "extrusion_pressure": ("Extrusion pressure", "MPa"),
    "extrusion_power": ("Extrusion power", "kW"),
    "extrusion_time": ("Extrusion time", "min"),
    "material_flow": ("Material flow", "mm/min"),
    "punching_force": ("Punching force", "N"),
    "stripping_force": ("Stripping force", "N"),
    "total_force": ("Total force", "N"),
    "punching_energy": ("Punching energy", "J"),
    "punching_power": ("Punching power", "W"),
    "shear_stress": ("Shear stress", "MPa"),
    "clearance_value": ("Clearance", "mm"),
    "cut_quality": ("Cut quality", ""),
    "tool_wear_rate": ("Tool wear", "µm/1000 holes"),
    "expected_tool_life": ("Expected tool life", "holes"),
    "shearing_force": ("Shearing force", "N"),
    "hold_down_pressure": ("Hold-down pressure", "MPa"),
    "shearing_energy": ("Shearing energy", "J"),
    "shearing_power": ("Shearing power", "W"),
    "blade_wear": ("Blade wear", "µm/m"),
    "cut_angle": ("Cut angle", "°"),
    "distortion": ("Distortion", "mm"),
    "spindle_speed": ("Spindle speed", "RPM"),
    "cutting_speed": ("Cutting speed", "m/min"),
    "feed_per_tooth": ("Feed per tooth", "mm"),
    "cutting_force": ("Cutting force", "N"),
    "cutting_power": ("Cutting power", "kW"),
    "machining_time": ("Machining time", "min"),
    "surface_roughness": ("Surface roughness Ra", "µm"),
    "cost_per_part": ("Cost per part", "$"),
    "thrust_force": ("Thrust force", "N"),
    "drilling_time": ("Drilling time", "min"),
    "power": ("Power", "kW"),
    "cost_per_hole": ("Cost per hole", "$"),
}

# tool_life is minutes for turning and milling but holes for drilling
_TOOL_LIFE_UNIT = {Process.DRILLING: "holes"}
# material_removal_rate is cm³/min except drilling
_MRR_UNIT = {Process.DRILLING: "cm³/s"}


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _label(process: Process, name: str) -> Tuple[str, str]:
    if name == "tool_life":
        return "Tool life", _TOOL_LIFE_UNIT.get(process, "min")
    if name == "material_removal_rate":
        return "Material removal rate", _MRR_UNIT.get(process, "cm³/min")
    return FIELD_UNITS.get(name, (name.replace("_", " ").capitalize(), ""))


def _format_value(value) -> str:
    if not isinstance(value, float):
        return str(value)
    if abs(value) >= 1000:
        return f"{value:,.0f}"
    if abs(value) >= 1:
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{value:.4g}"


def to_json(
    process: Union[Process, str],
    result: BaseModel,
    params: Optional[BaseModel] = None,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert a result record to a JSON document.

    Args:
        process: Process enum or name
        result: Result record from a calculator
        params: Optional parameter record that produced the result
        validation: Optional validation result to include
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema_version, process, parameters and results
    """
    spec = get_process(process)
    data = {
        "schema_version": SCHEMA_VERSION,
        "process": spec.process.value,
        "parameters": _model_to_dict(params) if params is not None else None,
        "results": _model_to_dict(result),
    }

    if validation:
        data["validation"] = {
            "valid": validation.valid,
            "messages": [
                {
                    "severity": m.severity.value,
                    "code": m.code,
                    "message": m.message,
                    "field": m.field,
                    "suggestion": m.suggestion,
                }
                for m in validation.messages
            ],
        }

    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_markdown(
    process: Union[Process, str],
    result: BaseModel,
    params: Optional[BaseModel] = None,
    validation: Optional["ValidationResult"] = None,
) -> str:
    """Convert a result record to a Markdown process sheet."""
    spec = get_process(process)
    results = _model_to_dict(result)
    recommendations = results.pop("recommendations", [])

    md = f"# {spec.title} Calculation\n\n"

    if params is not None:
        inputs = _model_to_dict(params)
        md += "## Inputs\n\n"
        md += "| Parameter | Value |\n"
        md += "|-----------|-------|\n"
        for name, value in inputs.items():
            if value is None:
                continue
            md += f"| {name.replace('_', ' ').capitalize()} | {value} |\n"
        md += "\n"

    md += "## Results\n\n"
    md += "| Quantity | Value | Unit |\n"
    md += "|----------|-------|------|\n"
    for name, value in results.items():
        label, unit = _label(spec.process, name)
        md += f"| {label} | {_format_value(value)} | {unit} |\n"
    md += "\n"

    if recommendations:
        md += "## Recommendations\n\n"
        for rec in recommendations:
            md += f"- {rec}\n"
        md += "\n"

    if validation:
        md += "## Validation\n\n"
        if validation.valid:
            md += "**Status:** ✅ Inputs are valid\n\n"
        else:
            md += "**Status:** ❌ Inputs have errors\n\n"
        for heading, group in (("Errors", validation.errors), ("Warnings", validation.warnings)):
            if group:
                md += f"### {heading}\n\n"
                for msg in group:
                    md += f"- **{msg.code}**: {msg.message}\n"
                    if msg.suggestion:
                        md += f"  - *Suggestion*: {msg.suggestion}\n"
                md += "\n"
        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "---\n"
    md += "*Generated by ProcessCalc*\n"
    return md


def to_summary(
    process: Union[Process, str],
    result: BaseModel,
    params: Optional[BaseModel] = None,
) -> str:
    """Convert a result record to a formatted text summary.

    Returns:
        Multi-line summary: header, material, aligned results, recommendations
    """
    spec = get_process(process)
    results = _model_to_dict(result)
    recommendations = results.pop("recommendations", [])

    lines = [f"═══ {spec.title} ═══"]
    if params is not None:
        lines.append(f"Material: {params.material}")
    lines.append("")

    rows = [(_label(spec.process, name), value) for name, value in results.items()]
    width = max(len(label) for (label, _), _ in rows) + 1
    for (label, unit), value in rows:
        text = _format_value(value)
        lines.append(f"  {label + ':':<{width}} {text} {unit}".rstrip())

    if recommendations:
        lines.extend(["", "Recommendations:"])
        lines.extend(f"  - {rec}" for rec in recommendations)

    return "\n".join(lines)
