"""
JSON bridge for UI clients.

Provides a single entry point taking and returning JSON strings, so a
browser front end (Pyodide) or any other process can drive every
calculator without importing Python types.

Usage:
    from processcalc.calculator.bridge import calculate
    output = json.loads(calculate(json.dumps({
        "process": "rolling",
        "parameters": {"material": "steel-low-carbon", "initialThickness": "10", ...},
    })))

Raw form values go through the validation layer first, so blank fields get
their defaults and bad fields come back as messages instead of exceptions.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing_extensions import TypedDict

from ..exceptions import InvalidParameterError, MaterialNotFoundError
from .output import to_markdown, to_summary
from .registry import get_process
from .validation import validate_inputs

logger = logging.getLogger(__name__)


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to clients."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "FINAL_THICKNESS_TOO_LARGE"
    message: str
    field: Optional[str]
    suggestion: Optional[str]


# ============================================================================
# Input / Output Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """Everything a client sends for one calculation."""
    model_config = ConfigDict(extra='ignore')

    process: str
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('process', mode='before')
    @classmethod
    def normalize_process(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class CalculatorOutput(BaseModel):
    """Output from calculate()."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None
    error_type: Optional[str] = None  # invalid_json | invalid_input | unknown_process |
                                      # validation | material_not_found | invalid_parameter | internal
    process: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)

    # Resolved inputs and results (JSON-compatible dicts)
    parameters: Optional[Dict[str, Any]] = None
    results: Optional[Dict[str, Any]] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculations from a client.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure. Never raises.
    """
    process_name = None
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)
        process_name = inputs.process

        try:
            spec = get_process(inputs.process)
        except ValueError as e:
            return _failure(str(e), "unknown_process", process_name)
        process_name = spec.process.value

        validation = validate_inputs(spec.process, inputs.parameters)
        messages = [
            {
                'severity': m.severity.value,
                'code': m.code,
                'message': m.message,
                'field': m.field,
                'suggestion': m.suggestion,
            }
            for m in validation.messages
        ]

        if not validation.valid:
            codes = {m.code for m in validation.errors}
            return CalculatorOutput(
                success=False,
                error="; ".join(m.message for m in validation.errors),
                error_type="material_not_found" if "MATERIAL_NOT_FOUND" in codes else "validation",
                process=process_name,
                valid=False,
                messages=messages,
            ).model_dump_json()

        params = validation.params
        result = spec.calculate(params)

        output = CalculatorOutput(
            success=True,
            process=process_name,
            valid=True,
            messages=messages,
            parameters=params.model_dump(mode='json'),
            results=result.model_dump(mode='json'),
            summary=to_summary(spec.process, result, params),
            markdown=to_markdown(spec.process, result, params, validation),
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}",
            error_type="invalid_json",
        ).model_dump_json()

    except MaterialNotFoundError as e:
        return _failure(str(e), "material_not_found", process_name)

    except InvalidParameterError as e:
        return _failure(str(e), "invalid_parameter", process_name)

    except ValidationError as e:
        return _failure(str(e), "invalid_input", process_name)

    except Exception as e:
        logger.exception("Unexpected error in calculate()")
        return _failure(str(e), "internal", process_name)


def _failure(error: str, error_type: str, process: Optional[str]) -> str:
    return CalculatorOutput(
        success=False,
        error=error,
        error_type=error_type,
        process=process,
        valid=False,
    ).model_dump_json()
