"""Bulk forming materials (rolling, forging)."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class FormingMaterial:
    """Properties used by rolling and forging.

    Flow stress follows the power law sigma = K * eps^n.
    """
    name: str
    density: float                    # kg/m³
    yield_strength: float             # MPa
    ultimate_strength: float          # MPa
    youngs_modulus: float             # GPa
    poisson_ratio: float
    thermal_conductivity: float       # W/(m·K)
    specific_heat: float              # J/(kg·K)
    flow_stress_coefficient: float    # K, MPa
    strain_hardening_exponent: float  # n


FORMING_MATERIALS: Mapping[str, FormingMaterial] = MappingProxyType({
    "steel-low-carbon": FormingMaterial(
        name="Steel (Low Carbon)",
        density=7850, yield_strength=250, ultimate_strength=400,
        youngs_modulus=200, poisson_ratio=0.3,
        thermal_conductivity=50, specific_heat=460,
        flow_stress_coefficient=530, strain_hardening_exponent=0.26,
    ),
    "steel-medium-carbon": FormingMaterial(
        name="Steel (Medium Carbon)",
        density=7850, yield_strength=350, ultimate_strength=550,
        youngs_modulus=200, poisson_ratio=0.3,
        thermal_conductivity=48, specific_heat=460,
        flow_stress_coefficient=700, strain_hardening_exponent=0.23,
    ),
    "aluminum-6061": FormingMaterial(
        name="Aluminum 6061",
        density=2700, yield_strength=276, ultimate_strength=310,
        youngs_modulus=69, poisson_ratio=0.33,
        thermal_conductivity=167, specific_heat=896,
        flow_stress_coefficient=350, strain_hardening_exponent=0.2,
    ),
    "copper": FormingMaterial(
        name="Copper",
        density=8960, yield_strength=70, ultimate_strength=220,
        youngs_modulus=110, poisson_ratio=0.34,
        thermal_conductivity=401, specific_heat=385,
        flow_stress_coefficient=315, strain_hardening_exponent=0.54,
    ),
})
