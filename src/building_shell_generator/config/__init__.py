# File: building_shell_generator/config/__init__.py

"""
Configuration package for the Building Shell Generator.
Provides a unified interface to:
- Display unit management and conversion to internal units
- Shell parameters (dimensions, level names, family types, feature flags)
"""

from building_shell_generator.config.units import (
    DisplayUnits,
    parse_units,
    get_project_units,
    set_project_units,
    conversion_factor,
    convert_to_internal,
    convert_from_internal,
    to_internal_converter,
)

from building_shell_generator.config.shell import (
    ShellParameters,
    level_name,
    DOOR_CATEGORY,
    WINDOW_CATEGORY,
    ROOF_CATEGORY,
)


def get_system_info() -> dict:
    """
    Returns an overview of the current configuration.
    Useful for debugging and validation.
    """
    current_units = get_project_units()
    return {
        "project_units": current_units.value,
        "to_internal_factor": conversion_factor(current_units),
        "default_shell": ShellParameters(units=current_units).to_dict(),
    }


# When any module in the config package is run directly
if __name__ == "__main__":
    import json

    print("Current System Configuration:")
    print(json.dumps(get_system_info(), indent=2))
