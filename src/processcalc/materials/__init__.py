"""
Material property registries.

Four independent registries, one per process family. Keys are unique within a
registry but not across them: 'aluminum-6061' in the forming registry and in
the cutting registry are separate records with different property sets.

Example:
    >>> from processcalc.materials import FORMING_MATERIALS, validate_material
    >>> steel = validate_material(FORMING_MATERIALS, 'steel-low-carbon')
    >>> steel.flow_stress_coefficient
    530
"""

from .base import validate_material, list_materials
from .forming import FormingMaterial, FORMING_MATERIALS
from .cutting import CuttingMaterial, CUTTING_MATERIALS
from .drawing import DrawingMaterial, DRAWING_MATERIALS
from .machining import MachiningMaterial, RecommendedSpeeds, MACHINING_MATERIALS

# Registry lookup by family name (CLI, bridge)
REGISTRIES = {
    "forming": FORMING_MATERIALS,
    "cutting": CUTTING_MATERIALS,
    "drawing": DRAWING_MATERIALS,
    "machining": MACHINING_MATERIALS,
}

__all__ = [
    "validate_material",
    "list_materials",
    "REGISTRIES",
    "FormingMaterial",
    "FORMING_MATERIALS",
    "CuttingMaterial",
    "CUTTING_MATERIALS",
    "DrawingMaterial",
    "DRAWING_MATERIALS",
    "MachiningMaterial",
    "RecommendedSpeeds",
    "MACHINING_MATERIALS",
]
