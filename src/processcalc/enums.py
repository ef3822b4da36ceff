"""Type-safe enums for process calculations."""

from enum import Enum


class Process(Enum):
    """Supported manufacturing processes"""
    ROLLING = "rolling"
    FORGING = "forging"
    WIRE_DRAWING = "wire-drawing"
    EXTRUSION = "extrusion"
    PUNCHING = "punching"
    SHEARING = "shearing"
    TURNING = "turning"
    MILLING = "milling"
    DRILLING = "drilling"

    @classmethod
    def _missing_(cls, value):
        # Accept "wire_drawing", "Wire Drawing" and the short form "drawing"
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-").replace(" ", "-")
            if key == "drawing":
                key = "wire-drawing"
            for member in cls:
                if member.value == key:
                    return member
        return None


class DieType(Enum):
    """Forging die geometry"""
    FLAT = "flat"
    GROOVED = "grooved"  # Closed impression, lower friction multiplier


class ExtrusionType(Enum):
    """Extrusion arrangement"""
    DIRECT = "direct"      # Billet moves relative to container wall
    INDIRECT = "indirect"  # Die moves, no container friction


class ToolMaterial(Enum):
    """Cutting tool material"""
    HSS = "hss"
    CARBIDE = "carbide"
    CERAMIC = "ceramic"
    DIAMOND = "diamond"


class CutQuality(Enum):
    """Punched edge quality class, derived from the clearance ratio"""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
