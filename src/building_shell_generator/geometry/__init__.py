# File: building_shell_generator/geometry/__init__.py
"""
Host-free geometry core.

Every function here is a pure computation over value inputs in internal
units; nothing touches a host document.
"""

from .primitives import Point3D, Line3D, midpoint
from .outline import generate_outline, outline_segments, bounding_box, WALL_NAMES
from .roof import GableProfile, RoofExtrusion, compute_gable_profile, compute_roof_extrusion
from .openings import OpeningType, OpeningPlacement, opening_location, plan_openings

__all__ = [
    "Point3D",
    "Line3D",
    "midpoint",
    "generate_outline",
    "outline_segments",
    "bounding_box",
    "WALL_NAMES",
    "GableProfile",
    "RoofExtrusion",
    "compute_gable_profile",
    "compute_roof_extrusion",
    "OpeningType",
    "OpeningPlacement",
    "opening_location",
    "plan_openings",
]
