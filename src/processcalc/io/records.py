"""
Calculation records, projects and the export bundle.

These are the persisted shapes: a CalculationRecord stores one calculator
run (inputs and outputs as plain JSON values), a Project groups records,
and ExportData bundles everything for a JSON export file.

Files use camelCase keys (``projectId``, ``createdAt``, ``exportDate``);
Python code uses the snake_case field names.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..enums import Process
from .schema import SCHEMA_VERSION


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return uuid.uuid4().hex


class _Persisted(BaseModel):
    model_config = ConfigDict(
        extra='ignore',
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CalculationRecord(_Persisted):
    """One saved calculator run."""
    id: str = Field(default_factory=_new_id)
    name: str
    process: str                      # Process value, e.g. "wire-drawing"
    material: str
    timestamp: str = Field(default_factory=_now)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    results: Dict[str, Any] = Field(default_factory=dict)
    project_id: Optional[str] = None
    notes: Optional[str] = None


class Project(_Persisted):
    """A named group of calculations."""
    id: str = Field(default_factory=_new_id)
    name: str
    description: str = ""
    created_at: str = Field(default_factory=_now)
    calculations: List[CalculationRecord] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class ExportData(_Persisted):
    """Everything written to, or read from, a JSON export file."""
    calculations: List[CalculationRecord] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)
    export_date: str = Field(default_factory=_now)
    version: str = SCHEMA_VERSION


def make_record(
    process: Union[Process, str],
    params: BaseModel,
    result: BaseModel,
    name: Optional[str] = None,
    project_id: Optional[str] = None,
    notes: Optional[str] = None,
) -> CalculationRecord:
    """
    Build a CalculationRecord from a parameter record and its result.

    Args:
        process: Process enum or name
        params: Parameter record (must have a ``material`` field)
        result: Result record returned by the calculator
        name: Display name (default: "<Process> - <material>")

    Returns:
        CalculationRecord with JSON-compatible parameters and results
    """
    process = Process(process)
    material = params.material
    if name is None:
        name = f"{process.value.replace('-', ' ').title()} - {material}"
    return CalculationRecord(
        name=name,
        process=process.value,
        material=material,
        parameters=params.model_dump(mode='json'),
        results=result.model_dump(mode='json'),
        project_id=project_id,
        notes=notes,
    )
