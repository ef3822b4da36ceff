"""
ProcessCalc IO - records, export bundle and file formats.

Example:
    >>> from processcalc.calculator import calculate_punching
    >>> from processcalc.io import ExportData, make_record, save_export_json
    >>>
    >>> result = calculate_punching(params)
    >>> record = make_record("punching", params, result)
    >>> save_export_json(ExportData(calculations=[record]), "export.json")
"""

from .models import (
    # Parameter records
    RollingParameters,
    ForgingParameters,
    WireDrawingParameters,
    ExtrusionParameters,
    PunchingParameters,
    ShearingParameters,
    TurningParameters,
    MillingParameters,
    DrillingParameters,

    # Result records
    RollingResults,
    ForgingResults,
    WireDrawingResults,
    ExtrusionResults,
    PunchingResults,
    ShearingResults,
    ClearanceRecommendation,
    TurningResults,
    MillingResults,
    DrillingResults,
)

from .records import (
    CalculationRecord,
    Project,
    ExportData,
    make_record,
)

from .loaders import (
    save_export_json,
    load_export_json,
    export_to_tsv,
    escape_tsv,
)

from .schema import SCHEMA_VERSION

__all__ = [
    # Parameter records
    "RollingParameters",
    "ForgingParameters",
    "WireDrawingParameters",
    "ExtrusionParameters",
    "PunchingParameters",
    "ShearingParameters",
    "TurningParameters",
    "MillingParameters",
    "DrillingParameters",

    # Result records
    "RollingResults",
    "ForgingResults",
    "WireDrawingResults",
    "ExtrusionResults",
    "PunchingResults",
    "ShearingResults",
    "ClearanceRecommendation",
    "TurningResults",
    "MillingResults",
    "DrillingResults",

    # Records and export
    "CalculationRecord",
    "Project",
    "ExportData",
    "make_record",
    "save_export_json",
    "load_export_json",
    "export_to_tsv",
    "escape_tsv",

    # Schema
    "SCHEMA_VERSION",
]
