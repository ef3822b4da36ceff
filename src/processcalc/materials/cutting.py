"""Sheet cutting materials (punching, shearing)."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CuttingMaterial:
    name: str
    shear_strength: float           # MPa
    tensile_strength: float         # MPa
    hardness: float                 # Brinell, HB
    density: float                  # kg/m³
    thermal_conductivity: float     # W/(m·K)
    specific_heat: float            # J/(kg·K)
    work_hardening_exponent: float
    friction_coefficient: float


CUTTING_MATERIALS: Mapping[str, CuttingMaterial] = MappingProxyType({
    "steel-mild": CuttingMaterial(
        name="Mild Steel (AISI 1018)",
        shear_strength=290, tensile_strength=440, hardness=126, density=7850,
        thermal_conductivity=51.9, specific_heat=486,
        work_hardening_exponent=0.15, friction_coefficient=0.6,
    ),
    "steel-medium": CuttingMaterial(
        name="Medium Carbon Steel (AISI 1045)",
        shear_strength=380, tensile_strength=625, hardness=170, density=7850,
        thermal_conductivity=49.8, specific_heat=486,
        work_hardening_exponent=0.12, friction_coefficient=0.65,
    ),
    "stainless-304": CuttingMaterial(
        name="Stainless Steel 304",
        shear_strength=515, tensile_strength=620, hardness=201, density=8000,
        thermal_conductivity=16.2, specific_heat=500,
        work_hardening_exponent=0.45, friction_coefficient=0.7,
    ),
    "aluminum-6061": CuttingMaterial(
        name="Aluminum 6061-T6",
        shear_strength=207, tensile_strength=310, hardness=95, density=2700,
        thermal_conductivity=167, specific_heat=896,
        work_hardening_exponent=0.05, friction_coefficient=0.4,
    ),
    "copper-c110": CuttingMaterial(
        name="Copper C110",
        shear_strength=220, tensile_strength=220, hardness=40, density=8960,
        thermal_conductivity=391, specific_heat=385,
        work_hardening_exponent=0.54, friction_coefficient=0.3,
    ),
    "brass-360": CuttingMaterial(
        name="Brass 360",
        shear_strength=230, tensile_strength=340, hardness=70, density=8500,
        thermal_conductivity=115, specific_heat=380,
        work_hardening_exponent=0.35, friction_coefficient=0.35,
    ),
})
