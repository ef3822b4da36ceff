"""
Tests for unit conversion.
"""

import pytest

from processcalc.exceptions import UnitConversionError
from processcalc.units import (
    convert_force,
    convert_length,
    convert_power,
    convert_pressure,
    convert_temperature,
    convert_units,
)


class TestLinearConversions:
    """Length, force, power and pressure."""

    def test_length(self):
        assert convert_length(1000, "mm", "m") == 1
        assert convert_length(2, "in", "mm") == pytest.approx(50.8)
        assert convert_length(1, "ft", "in") == pytest.approx(12)

    def test_force(self):
        assert convert_force(2, "kN", "N") == 2000
        assert convert_force(10, "lbf", "N") == pytest.approx(44.48)
        assert convert_force(1, "kip", "lbf") == pytest.approx(1000)

    def test_power(self):
        assert convert_power(2, "kW", "W") == 2000
        assert convert_power(1, "hp", "W") == pytest.approx(745.7)

    def test_pressure(self):
        assert convert_pressure(1, "MPa", "kPa") == 1000
        assert convert_pressure(1, "ksi", "psi") == pytest.approx(1000)
        assert convert_pressure(1, "GPa", "MPa") == pytest.approx(1000)

    def test_same_unit_is_identity(self):
        assert convert_length(3.5, "cm", "cm") == 3.5

    @pytest.mark.parametrize("func,bad", [
        (convert_length, ("mm", "furlong")),
        (convert_length, ("parsec", "mm")),
        (convert_force, ("N", "kg")),
        (convert_power, ("W", "BTU")),
        (convert_pressure, ("Pa", "bar")),
    ])
    def test_unknown_unit_raises(self, func, bad):
        with pytest.raises(UnitConversionError):
            func(1, *bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            convert_length(1, "mm", "N")


class TestTemperature:
    """Temperature goes through Celsius."""

    def test_celsius_to_fahrenheit(self):
        assert convert_temperature(100, "C", "F") == pytest.approx(212)

    def test_fahrenheit_to_kelvin(self):
        assert convert_temperature(32, "°F", "K") == pytest.approx(273.15)

    def test_kelvin_to_celsius(self):
        assert convert_temperature(0, "K", "°C") == pytest.approx(-273.15)

    def test_unknown_scale_raises(self):
        with pytest.raises(UnitConversionError):
            convert_temperature(1, "C", "R")


class TestConvertUnits:
    """Quantity inferred from the source unit."""

    def test_infers_length(self):
        assert convert_units(25.4, "mm", "in") == pytest.approx(1)

    def test_infers_temperature(self):
        assert convert_units(20, "°C", "K") == pytest.approx(293.15)

    def test_mixed_quantities_raise(self):
        with pytest.raises(UnitConversionError):
            convert_units(1, "mm", "N")

    def test_unknown_source_raises(self):
        with pytest.raises(UnitConversionError, match="Unknown unit"):
            convert_units(1, "stone", "kg")
