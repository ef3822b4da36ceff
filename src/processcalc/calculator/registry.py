"""
Process registry - one entry per supported process.

Maps each Process to its parameter and result records, its calculator and
the material registry it draws from. Used by the validation layer, the JSON
bridge and the CLI to dispatch by process name.
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple, Type, Union

from pydantic import BaseModel

from ..enums import Process
from ..io import models
from ..materials import CUTTING_MATERIALS, DRAWING_MATERIALS, FORMING_MATERIALS, MACHINING_MATERIALS
from .cutting import calculate_punching, calculate_shearing
from .drawing import calculate_extrusion, calculate_wire_drawing
from .forming import calculate_forging, calculate_rolling
from .machining import calculate_drilling, calculate_milling, calculate_turning


class ProcessSpec(NamedTuple):
    process: Process
    title: str
    parameters: Type[BaseModel]
    results: Type[BaseModel]
    calculate: Callable[[Any], BaseModel]
    materials: Mapping[str, Any]
    family: str  # Material registry name


PROCESSES: Mapping[Process, ProcessSpec] = MappingProxyType({
    Process.ROLLING: ProcessSpec(
        Process.ROLLING, "Flat Rolling",
        models.RollingParameters, models.RollingResults,
        calculate_rolling, FORMING_MATERIALS, "forming",
    ),
    Process.FORGING: ProcessSpec(
        Process.FORGING, "Open-Die Forging",
        models.ForgingParameters, models.ForgingResults,
        calculate_forging, FORMING_MATERIALS, "forming",
    ),
    Process.WIRE_DRAWING: ProcessSpec(
        Process.WIRE_DRAWING, "Wire Drawing",
        models.WireDrawingParameters, models.WireDrawingResults,
        calculate_wire_drawing, DRAWING_MATERIALS, "drawing",
    ),
    Process.EXTRUSION: ProcessSpec(
        Process.EXTRUSION, "Extrusion",
        models.ExtrusionParameters, models.ExtrusionResults,
        calculate_extrusion, DRAWING_MATERIALS, "drawing",
    ),
    Process.PUNCHING: ProcessSpec(
        Process.PUNCHING, "Punching",
        models.PunchingParameters, models.PunchingResults,
        calculate_punching, CUTTING_MATERIALS, "cutting",
    ),
    Process.SHEARING: ProcessSpec(
        Process.SHEARING, "Shearing",
        models.ShearingParameters, models.ShearingResults,
        calculate_shearing, CUTTING_MATERIALS, "cutting",
    ),
    Process.TURNING: ProcessSpec(
        Process.TURNING, "Turning",
        models.TurningParameters, models.TurningResults,
        calculate_turning, MACHINING_MATERIALS, "machining",
    ),
    Process.MILLING: ProcessSpec(
        Process.MILLING, "Milling",
        models.MillingParameters, models.MillingResults,
        calculate_milling, MACHINING_MATERIALS, "machining",
    ),
    Process.DRILLING: ProcessSpec(
        Process.DRILLING, "Drilling",
        models.DrillingParameters, models.DrillingResults,
        calculate_drilling, MACHINING_MATERIALS, "machining",
    ),
})


def get_process(process: Union[Process, str]) -> ProcessSpec:
    """Look up a process by enum or name ('rolling', 'wire-drawing', ...).

    Raises:
        ValueError: If the name is not a supported process
    """
    try:
        return PROCESSES[Process(process)]
    except ValueError:
        names = ", ".join(p.value for p in Process)
        raise ValueError(f"Unknown process: {process!r} (expected one of: {names})") from None


def run(process: Union[Process, str], params: Union[BaseModel, Mapping]) -> BaseModel:
    """Run the calculator for a process on a parameter record or mapping."""
    return get_process(process).calculate(params)
