"""Wire drawing and extrusion materials."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DrawingMaterial:
    name: str
    yield_strength: float           # MPa
    ultimate_strength: float        # MPa
    reduction_limit: float          # Max area reduction per pass, %
    friction_coefficient: float     # Die/wire, dry
    work_hardening_exponent: float  # n
    flow_stress_coefficient: float  # K, MPa


DRAWING_MATERIALS: Mapping[str, DrawingMaterial] = MappingProxyType({
    "steel-low-carbon": DrawingMaterial(
        name="Steel (Low Carbon)",
        yield_strength=250, ultimate_strength=400, reduction_limit=25,
        friction_coefficient=0.1, work_hardening_exponent=0.26,
        flow_stress_coefficient=530,
    ),
    "aluminum-1100": DrawingMaterial(
        name="Aluminum 1100",
        yield_strength=90, ultimate_strength=130, reduction_limit=35,
        friction_coefficient=0.08, work_hardening_exponent=0.2,
        flow_stress_coefficient=180,
    ),
    "copper-c110": DrawingMaterial(
        name="Copper C110",
        yield_strength=70, ultimate_strength=220, reduction_limit=40,
        friction_coefficient=0.05, work_hardening_exponent=0.54,
        flow_stress_coefficient=315,
    ),
    "stainless-304": DrawingMaterial(
        name="Stainless Steel 304",
        yield_strength=290, ultimate_strength=620, reduction_limit=20,
        friction_coefficient=0.12, work_hardening_exponent=0.45,
        flow_stress_coefficient=1275,
    ),
})
