"""
Export and import of calculation data.

- save_export_json / load_export_json: full ExportData bundle as JSON
- export_to_tsv: one row per calculation, one column per parameter and
  result key, safe to open in a spreadsheet
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

from .records import CalculationRecord, ExportData

logger = logging.getLogger(__name__)

# Leading characters a spreadsheet would treat as a formula or control
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r", "\n")

_BASE_COLUMNS = ("id", "name", "process", "material", "timestamp", "project_id")


def save_export_json(data: ExportData, filepath: Union[str, Path]) -> Path:
    """
    Save an export bundle to a JSON file (camelCase keys).

    Args:
        data: ExportData bundle
        filepath: Path to write

    Returns:
        The path written
    """
    filepath = Path(filepath)
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(data.model_dump_json(by_alias=True, indent=2))
    logger.info(
        f"Exported {len(data.calculations)} calculation(s) and "
        f"{len(data.projects)} project(s) to {filepath}"
    )
    return filepath


def load_export_json(filepath: Union[str, Path]) -> ExportData:
    """
    Load an export bundle from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file is not valid JSON
        ValidationError: If the JSON does not have the export shape
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Export file not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON file: {filepath}") from e

    return ExportData.model_validate(data)


def escape_tsv(value: Any) -> str:
    """Render one TSV cell, neutralizing formulas and escaping separators."""
    text = "" if value is None else str(value)

    if text.startswith(_FORMULA_PREFIXES):
        text = "'" + text

    return (
        text.replace("\\", "\\\\")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def tsv_columns(calculations: Iterable[CalculationRecord]) -> List[str]:
    """Sorted union of base columns and param_* / result_* keys."""
    columns = set(_BASE_COLUMNS)
    for calc in calculations:
        columns.update(f"param_{key}" for key in calc.parameters)
        columns.update(f"result_{key}" for key in calc.results)
    return sorted(columns)


def _cell(calc: CalculationRecord, column: str) -> Any:
    if column.startswith("param_"):
        return calc.parameters.get(column[len("param_"):])
    if column.startswith("result_"):
        return calc.results.get(column[len("result_"):])
    return getattr(calc, column)


def export_to_tsv(calculations: List[CalculationRecord], filepath: Union[str, Path]) -> Path:
    """
    Write calculations as tab-separated values.

    Raises:
        ValueError: If there are no calculations to export
    """
    if not calculations:
        raise ValueError("No calculations to export")

    columns = tsv_columns(calculations)
    lines = ["\t".join(columns)]
    for calc in calculations:
        lines.append("\t".join(escape_tsv(_cell(calc, column)) for column in columns))

    filepath = Path(filepath)
    with open(filepath, 'w', encoding='utf-8', newline='') as f:
        f.write("\n".join(lines))
    logger.info(f"Exported {len(calculations)} calculation(s) to {filepath}")
    return filepath
