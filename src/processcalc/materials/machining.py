"""Machining materials (turning, milling, drilling)."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from ..enums import ToolMaterial


@dataclass(frozen=True)
class RecommendedSpeeds:
    """Recommended cutting speed per tool material, m/min"""
    hss: float
    carbide: float
    ceramic: float
    diamond: float

    def for_tool(self, tool: Union[ToolMaterial, str]) -> float:
        """Recommended speed for a tool material (enum or its value)."""
        return getattr(self, ToolMaterial(tool).value)


@dataclass(frozen=True)
class MachiningMaterial:
    name: str
    hardness: float                 # Brinell, HB
    tensile_strength: float         # MPa
    thermal_conductivity: float     # W/(m·K)
    specific_heat: float            # J/(kg·K)
    density: float                  # kg/m³
    machinability_rating: float     # 0-100, relative to free-cutting steel
    recommended_speed: RecommendedSpeeds


MACHINING_MATERIALS: Mapping[str, MachiningMaterial] = MappingProxyType({
    "steel-mild": MachiningMaterial(
        name="Mild Steel (AISI 1018)",
        hardness=126, tensile_strength=440, thermal_conductivity=51.9,
        specific_heat=486, density=7850, machinability_rating=70,
        recommended_speed=RecommendedSpeeds(hss=25, carbide=150, ceramic=300, diamond=500),
    ),
    "steel-medium": MachiningMaterial(
        name="Medium Carbon Steel (AISI 1045)",
        hardness=170, tensile_strength=625, thermal_conductivity=49.8,
        specific_heat=486, density=7850, machinability_rating=55,
        recommended_speed=RecommendedSpeeds(hss=20, carbide=120, ceramic=250, diamond=400),
    ),
    "stainless-304": MachiningMaterial(
        name="Stainless Steel 304",
        hardness=201, tensile_strength=620, thermal_conductivity=16.2,
        specific_heat=500, density=8000, machinability_rating=45,
        recommended_speed=RecommendedSpeeds(hss=15, carbide=100, ceramic=200, diamond=350),
    ),
    "aluminum-6061": MachiningMaterial(
        name="Aluminum 6061-T6",
        hardness=95, tensile_strength=310, thermal_conductivity=167,
        specific_heat=896, density=2700, machinability_rating=90,
        recommended_speed=RecommendedSpeeds(hss=100, carbide=400, ceramic=800, diamond=1200),
    ),
    "copper-c110": MachiningMaterial(
        name="Copper C110",
        hardness=40, tensile_strength=220, thermal_conductivity=391,
        specific_heat=385, density=8960, machinability_rating=85,
        recommended_speed=RecommendedSpeeds(hss=80, carbide=300, ceramic=600, diamond=1000),
    ),
    "titanium-ti6al4v": MachiningMaterial(
        name="Titanium Ti-6Al-4V",
        hardness=334, tensile_strength=1170, thermal_conductivity=6.7,
        specific_heat=526, density=4430, machinability_rating=25,
        recommended_speed=RecommendedSpeeds(hss=8, carbide=60, ceramic=150, diamond=250),
    ),
})
