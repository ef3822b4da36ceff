"""
ProcessCalc - manufacturing process calculation engine.

Forces, power, stresses, tool life, edge quality and recommendations for
rolling, forging, wire drawing, extrusion, punching, shearing, turning,
milling and drilling.

Example:
    >>> from processcalc.calculator import calculate_punching
    >>> result = calculate_punching({
    ...     "material": "steel-mild", "thickness": 2, "hole_diameter": 10,
    ...     "punch_diameter": 9.8, "clearance": 5, "punch_speed": 100,
    ...     "temperature": 20, "lubrication": True,
    ... })
    >>> result.cut_quality.value
    'Excellent'

Note: All imports are lazy-loaded. Importing ``processcalc`` alone does not
import Pydantic; the first attribute access loads the submodule it needs.
"""

from importlib import import_module

__version__ = "1.0.0"

# Define which names come from which submodule

_ENUMS = {"Process", "DieType", "ExtrusionType", "ToolMaterial", "CutQuality"}

_EXCEPTIONS = {
    "ProcessCalcError",
    "MaterialNotFoundError",
    "InvalidParameterError",
    "UnitConversionError",
}

_MATERIALS = {
    "FORMING_MATERIALS",
    "CUTTING_MATERIALS",
    "DRAWING_MATERIALS",
    "MACHINING_MATERIALS",
    "REGISTRIES",
    "validate_material",
    "list_materials",
}

_UNITS = {
    "convert_length",
    "convert_force",
    "convert_pressure",
    "convert_power",
    "convert_temperature",
    "convert_units",
}

_CALCULATOR = {
    "calculate_rolling",
    "calculate_forging",
    "calculate_wire_drawing",
    "calculate_extrusion",
    "calculate_punching",
    "calculate_shearing",
    "optimize_clearance",
    "calculate_turning",
    "calculate_milling",
    "calculate_drilling",
    "generate_recommendations",
    "validate_inputs",
    "parse_inputs",
    "run",
    "Severity",
    "ValidationResult",
}

_IO = {
    "CalculationRecord",
    "Project",
    "ExportData",
    "make_record",
    "save_export_json",
    "load_export_json",
    "export_to_tsv",
}

# Cache for lazy-loaded modules
_modules = {}

_GROUPS = (
    (_ENUMS, "enums"),
    (_EXCEPTIONS, "exceptions"),
    (_MATERIALS, "materials"),
    (_UNITS, "units"),
    (_CALCULATOR, "calculator"),
    (_IO, "io"),
)


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    for names, module_name in _GROUPS:
        if name in names:
            if module_name not in _modules:
                _modules[module_name] = import_module(f".{module_name}", __name__)
            return getattr(_modules[module_name], name)

    raise AttributeError(f"module 'processcalc' has no attribute {name!r}")


__all__ = ["__version__", *sorted(_ENUMS | _EXCEPTIONS | _MATERIALS | _UNITS | _CALCULATOR | _IO)]
