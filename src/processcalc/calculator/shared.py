"""
Helpers shared by every process calculator.

- Check / generate_recommendations: rule-based advice as data
- coerce_params: accept a parameter record or a plain mapping
- require_* guards: numeric preconditions raising InvalidParameterError
- power-law flow stress and the temperature derating used by several processes
- round_half_up: display rounding with halves rounded up
"""

from math import floor
from typing import Iterable, List, Mapping, NamedTuple, Tuple, Type, TypeVar, Union

from pydantic import BaseModel

from ..exceptions import InvalidParameterError
from ..materials import validate_material
from .constants import AMBIENT_TEMPERATURE_C

P = TypeVar("P", bound=BaseModel)

__all__ = [
    "Check",
    "generate_recommendations",
    "validate_material",
    "coerce_params",
    "require_positive",
    "require_non_negative",
    "require_at_least",
    "require_less_than",
    "require_between",
    "flow_stress",
    "temperature_factor",
    "max_working_temperature",
    "derated_strength",
    "round_half_up",
]


class Check(NamedTuple):
    """A recommendation rule: message is emitted when condition holds."""
    condition: bool
    message: str


def generate_recommendations(checks: Iterable[Union[Check, Tuple[bool, str]]], fallback: str) -> Tuple[str, ...]:
    """
    Collect the messages of all triggered checks.

    Args:
        checks: Ordered (condition, message) pairs
        fallback: Message returned alone when no check triggers

    Returns:
        Triggered messages in input order, or (fallback,)
    """
    triggered = [message for condition, message in checks if condition]
    if not triggered:
        triggered.append(fallback)
    return tuple(triggered)


def coerce_params(model: Type[P], params: Union[P, Mapping]) -> P:
    """Return params as a model instance, validating mappings first."""
    if isinstance(params, model):
        return params
    return model.model_validate(params)


def require_positive(value: float, field: str, label: str) -> None:
    if not value > 0:
        raise InvalidParameterError(f"{label} must be greater than 0", field=field)


def require_non_negative(value: float, field: str, label: str) -> None:
    if value < 0:
        raise InvalidParameterError(f"{label} cannot be negative", field=field)


def require_at_least(value: float, minimum: float, field: str, label: str) -> None:
    if value < minimum:
        raise InvalidParameterError(f"{label} must be at least {minimum:g}", field=field)


def require_less_than(smaller: float, larger: float, field: str, message: str) -> None:
    if not smaller < larger:
        raise InvalidParameterError(message, field=field)


def require_between(value: float, low: float, high: float, field: str, label: str, unit: str = "") -> None:
    """Require low <= value <= high."""
    if not low <= value <= high:
        raise InvalidParameterError(
            f"{label} must be between {low:g} and {high:g}{unit}", field=field
        )


def flow_stress(strength_coefficient: float, strain: float, exponent: float) -> float:
    """Power-law flow stress sigma = K * eps^n, MPa."""
    return strength_coefficient * strain ** exponent


def temperature_factor(temperature_c: float, derate_per_c: float) -> float:
    """Linear strength derating relative to ambient: 1 - (T - 20) * k."""
    return 1.0 - (temperature_c - AMBIENT_TEMPERATURE_C) * derate_per_c


def max_working_temperature(derate_per_c: float) -> float:
    """Temperature at which the linear derating reaches zero strength, °C."""
    return AMBIENT_TEMPERATURE_C + 1.0 / derate_per_c


def derated_strength(strength: float, temperature_c: float, derate_per_c: float) -> float:
    """
    Apply temperature_factor to a material strength.

    Raises:
        InvalidParameterError: If the derated strength is not positive, i.e.
            the temperature is at or above max_working_temperature
    """
    derated = strength * temperature_factor(temperature_c, derate_per_c)
    if not derated > 0:
        raise InvalidParameterError(
            f"Temperature {temperature_c:g}°C must be below "
            f"{max_working_temperature(derate_per_c):g}°C for this process",
            field="temperature",
        )
    return derated


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round to ndigits with halves rounded towards +infinity.

    The builtin round() rounds halves to even; results here follow the
    usual display convention instead, so 2.5 -> 3 and -2.5 -> -2.
    Returns an int when ndigits is 0.
    """
    if ndigits == 0:
        return int(floor(value + 0.5))
    scale = 10 ** ndigits
    return floor(value * scale + 0.5) / scale
