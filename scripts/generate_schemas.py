#!/usr/bin/env python3
"""
Generate JSON Schemas from Pydantic models.

One schema per process parameter and result record, plus the export bundle
and the enum definitions. Front ends generate their types from these.

Usage:
    python scripts/generate_schemas.py
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import __version__ as PYDANTIC_VERSION

from processcalc.calculator.registry import PROCESSES
from processcalc.enums import CutQuality, DieType, ExtrusionType, Process, ToolMaterial
from processcalc.io.records import ExportData
from processcalc.io.schema import SCHEMA_VERSION

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def get_model_schema(model_class) -> dict:
    """Get JSON schema from a Pydantic model.

    Uses by_alias=False to use field names (not aliases) in the schema.
    This ensures the schema matches what model_dump() produces by default.
    """
    return model_class.model_json_schema(by_alias=False)


def _write(schema: dict, path: Path) -> None:
    with open(path, "w") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    print(f"  Generated: {path}")


def main():
    output_dir = Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")
    print(f"  Pydantic version: {PYDANTIC_VERSION}")

    for process, spec in PROCESSES.items():
        for kind, model in (("parameters", spec.parameters), ("results", spec.results)):
            schema = get_model_schema(model)
            schema["$schema"] = SCHEMA_DIALECT
            schema["$id"] = f"processcalc/{process.value}-{kind}-v{SCHEMA_VERSION}.json"
            _write(schema, output_dir / f"{process.value}-{kind}-v{SCHEMA_VERSION}.json")

    # Export bundle files use camelCase keys
    export_schema = ExportData.model_json_schema(by_alias=True)
    export_schema["$schema"] = SCHEMA_DIALECT
    export_schema["title"] = "ExportData"
    export_schema["description"] = "Calculation export bundle (JSON export/import)"
    _write(export_schema, output_dir / f"export-data-v{SCHEMA_VERSION}.json")

    enums_schema = {
        "$schema": SCHEMA_DIALECT,
        "$id": f"processcalc/enums-v{SCHEMA_VERSION}.json",
        "title": "ProcessCalcEnums",
        "description": "Enum definitions for processcalc types",
        "definitions": {
            "Process": {
                "type": "string",
                "enum": [e.value for e in Process],
                "description": "Supported manufacturing process"
            },
            "DieType": {
                "type": "string",
                "enum": [e.value for e in DieType],
                "description": "Forging die type"
            },
            "ExtrusionType": {
                "type": "string",
                "enum": [e.value for e in ExtrusionType],
                "description": "Extrusion arrangement"
            },
            "ToolMaterial": {
                "type": "string",
                "enum": [e.value for e in ToolMaterial],
                "description": "Cutting tool material"
            },
            "CutQuality": {
                "type": "string",
                "enum": [e.value for e in CutQuality],
                "description": "Punched edge quality class"
            },
        }
    }
    _write(enums_schema, output_dir / f"enums-v{SCHEMA_VERSION}.json")

    print(f"\nAll schemas written to: {output_dir}/")


if __name__ == "__main__":
    main()
