"""
Exception hierarchy for manufacturing process calculations.

Calculator functions either return a complete result or raise one of these.
Only the outer surfaces (JSON bridge, CLI) catch them and convert them into
error payloads or exit codes.
"""

from typing import Optional


class ProcessCalcError(Exception):
    """Base class for all processcalc errors."""


class MaterialNotFoundError(ProcessCalcError, LookupError):
    """Material key is not present in the registry for the process family."""

    def __init__(self, material: str, registry: Optional[str] = None):
        self.material = material
        self.registry = registry
        super().__init__(f"Material not found: '{material}'")


class InvalidParameterError(ProcessCalcError, ValueError):
    """A numeric precondition on the process parameters is violated."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class UnitConversionError(ProcessCalcError, ValueError):
    """Unit is unknown or belongs to a different quantity."""
