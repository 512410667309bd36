# File: building_shell_generator/config/units.py

"""
Unit management and conversion functionality for the Building Shell Generator.

All geometry is computed in the host's internal linear unit (decimal feet,
as used by Revit). Callers supply dimensions in a display unit, millimeters
by default, and convert them here before any geometric computation.
"""

from enum import Enum
from typing import Callable, Dict, Union


class DisplayUnits(Enum):
    """
    Enumeration of supported display units.
    Using an enum provides type safety and autocompletion support.
    """
    MILLIMETERS = "millimeters"
    METERS = "meters"
    FEET = "feet"
    INCHES = "inches"


# Short aliases accepted wherever a unit string is parsed
_UNIT_ALIASES: Dict[str, DisplayUnits] = {
    "mm": DisplayUnits.MILLIMETERS,
    "m": DisplayUnits.METERS,
    "ft": DisplayUnits.FEET,
    "in": DisplayUnits.INCHES,
}

# Current project display units setting
_PROJECT_UNITS = DisplayUnits.MILLIMETERS

# Conversion factors to internal units (feet)
_CONVERSION_TO_INTERNAL: Dict[DisplayUnits, float] = {
    DisplayUnits.MILLIMETERS: 1 / 304.8,
    DisplayUnits.METERS: 1 / 0.3048,
    DisplayUnits.FEET: 1.0,
    DisplayUnits.INCHES: 1 / 12.0,
}

# Conversion factors from internal units (feet)
_CONVERSION_FROM_INTERNAL: Dict[DisplayUnits, float] = {
    DisplayUnits.MILLIMETERS: 304.8,
    DisplayUnits.METERS: 0.3048,
    DisplayUnits.FEET: 1.0,
    DisplayUnits.INCHES: 12.0,
}


def parse_units(units: Union[DisplayUnits, str]) -> DisplayUnits:
    """
    Normalize a unit given as enum or string.

    Args:
        units: A DisplayUnits value, an enum value string ("millimeters")
            or a short alias ("mm")

    Returns:
        The matching DisplayUnits member

    Raises:
        ValueError: If the units are not supported
    """
    if isinstance(units, DisplayUnits):
        return units

    if isinstance(units, str):
        key = units.strip().lower()
        if key in _UNIT_ALIASES:
            return _UNIT_ALIASES[key]
        try:
            return DisplayUnits(key)
        except ValueError:
            raise ValueError(f"Unsupported unit string: {units}")

    raise ValueError(f"Units must be DisplayUnits enum or string, got {type(units)}")


def get_project_units() -> DisplayUnits:
    """
    Returns the current project display units setting.

    Returns:
        DisplayUnits enum representing the current project units
    """
    return _PROJECT_UNITS


def set_project_units(units: Union[DisplayUnits, str]) -> None:
    """
    Sets the project display units.

    Args:
        units: Either a DisplayUnits enum value or a unit string

    Raises:
        ValueError: If the provided units are not supported
    """
    global _PROJECT_UNITS
    _PROJECT_UNITS = parse_units(units)


def conversion_factor(units: Union[DisplayUnits, str]) -> float:
    """Scalar that converts a value in `units` to internal units."""
    return _CONVERSION_TO_INTERNAL[parse_units(units)]


def convert_to_internal(value: float, current_units: Union[DisplayUnits, str]) -> float:
    """
    Converts a value from the specified display units to internal units.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (DisplayUnits enum or string)

    Returns:
        The value converted to internal units (feet)

    Raises:
        ValueError: If the provided units are not supported
    """
    return value * conversion_factor(current_units)


def convert_from_internal(value: float, target_units: Union[DisplayUnits, str]) -> float:
    """
    Converts a value from internal units to the specified display units.

    Args:
        value: The numeric value in internal units (feet)
        target_units: The units to convert to (DisplayUnits enum or string)

    Returns:
        The converted value in the target units

    Raises:
        ValueError: If the provided units are not supported
    """
    return value * _CONVERSION_FROM_INTERNAL[parse_units(target_units)]


def to_internal_converter(units: Union[DisplayUnits, str]) -> Callable[[float], float]:
    """Return a one-argument function converting `units` to internal units."""
    factor = conversion_factor(units)

    def _convert(value: float) -> float:
        return value * factor

    return _convert
