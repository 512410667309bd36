# File: building_shell_generator/core/__init__.py
"""
Core abstractions for the building shell generator.

- errors: exception hierarchy shared by geometry, host and command layers
- shell_plan: pure planning step producing a ShellPlan
- json_schemas: JSON serialization of ShellPlan

Only the errors are re-exported here; the geometry package imports them,
so importing shell_plan from this module would be circular.
"""

from .errors import (
    ShellGeneratorError,
    GeometryError,
    InvalidDimension,
    DegenerateProfile,
    HostLookupError,
    LevelNotFound,
    FamilyTypeNotFound,
    HostOperationError,
)

__all__ = [
    "ShellGeneratorError",
    "GeometryError",
    "InvalidDimension",
    "DegenerateProfile",
    "HostLookupError",
    "LevelNotFound",
    "FamilyTypeNotFound",
    "HostOperationError",
]
