"""
Unit conversion helpers.

Scalar conversions for the quantities that appear in process inputs and
results. Length, force, power and pressure are linear, so each is a table of
factors to the base unit (mm, N, W, Pa). Temperature has offsets and is
converted through Celsius.

Example:
    >>> convert_length(1000, 'mm', 'm')
    1.0
    >>> convert_force(2, 'kN', 'N')
    2000.0
"""

from types import MappingProxyType
from typing import Mapping

from .exceptions import UnitConversionError

# Factors to base unit (mm)
LENGTH_UNITS: Mapping[str, float] = MappingProxyType({
    'mm': 1.0,
    'cm': 10.0,
    'm': 1000.0,
    'in': 25.4,
    'ft': 304.8,
})

# Factors to base unit (N)
FORCE_UNITS: Mapping[str, float] = MappingProxyType({
    'N': 1.0,
    'kN': 1e3,
    'MN': 1e6,
    'lbf': 4.448,
    'kip': 4448.0,
})

# Factors to base unit (W)
POWER_UNITS: Mapping[str, float] = MappingProxyType({
    'W': 1.0,
    'kW': 1e3,
    'MW': 1e6,
    'hp': 745.7,  # Mechanical horsepower
})

# Factors to base unit (Pa)
PRESSURE_UNITS: Mapping[str, float] = MappingProxyType({
    'Pa': 1.0,
    'kPa': 1e3,
    'MPa': 1e6,
    'GPa': 1e9,
    'psi': 6894.76,
    'ksi': 6.89476e6,
})

# Spellings accepted for each temperature scale
_TEMPERATURE_ALIASES = {
    'C': 'C', '°C': 'C', 'degC': 'C', 'celsius': 'C',
    'F': 'F', '°F': 'F', 'degF': 'F', 'fahrenheit': 'F',
    'K': 'K', 'kelvin': 'K',
}

ABSOLUTE_ZERO_C = -273.15


def _convert_linear(value: float, from_unit: str, to_unit: str,
                    table: Mapping[str, float], quantity: str) -> float:
    if from_unit not in table or to_unit not in table:
        raise UnitConversionError(
            f"Invalid {quantity} unit: expected one of {', '.join(table)}, "
            f"got '{from_unit}' -> '{to_unit}'"
        )
    return value * table[from_unit] / table[to_unit]


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length between mm, cm, m, in and ft."""
    return _convert_linear(value, from_unit, to_unit, LENGTH_UNITS, 'length')


def convert_force(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a force between N, kN, MN, lbf and kip."""
    return _convert_linear(value, from_unit, to_unit, FORCE_UNITS, 'force')


def convert_power(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a power between W, kW, MW and hp."""
    return _convert_linear(value, from_unit, to_unit, POWER_UNITS, 'power')


def convert_pressure(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a pressure or stress between Pa, kPa, MPa, GPa, psi and ksi."""
    return _convert_linear(value, from_unit, to_unit, PRESSURE_UNITS, 'pressure')


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature between Celsius, Fahrenheit and Kelvin.

    Args:
        value: Temperature in from_unit
        from_unit: 'C', 'F' or 'K' (degree-sign spellings accepted)
        to_unit: 'C', 'F' or 'K'

    Returns:
        Temperature in to_unit

    Raises:
        UnitConversionError: If either unit is not a temperature scale
    """
    try:
        src = _TEMPERATURE_ALIASES[from_unit]
        dst = _TEMPERATURE_ALIASES[to_unit]
    except KeyError:
        raise UnitConversionError(
            f"Invalid temperature unit: '{from_unit}' -> '{to_unit}'"
        ) from None

    if src == 'F':
        celsius = (value - 32.0) * 5.0 / 9.0
    elif src == 'K':
        celsius = value + ABSOLUTE_ZERO_C
    else:
        celsius = value

    if dst == 'F':
        return celsius * 9.0 / 5.0 + 32.0
    if dst == 'K':
        return celsius - ABSOLUTE_ZERO_C
    return celsius


_LINEAR_TABLES = (
    (LENGTH_UNITS, 'length'),
    (FORCE_UNITS, 'force'),
    (POWER_UNITS, 'power'),
    (PRESSURE_UNITS, 'pressure'),
)


def convert_units(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert between any two units of the same quantity.

    The quantity is inferred from from_unit. Mixing quantities (e.g. 'mm' to
    'N') raises UnitConversionError.
    """
    if from_unit in _TEMPERATURE_ALIASES:
        return convert_temperature(value, from_unit, to_unit)
    for table, quantity in _LINEAR_TABLES:
        if from_unit in table:
            return _convert_linear(value, from_unit, to_unit, table, quantity)
    raise UnitConversionError(f"Unknown unit: '{from_unit}'")
