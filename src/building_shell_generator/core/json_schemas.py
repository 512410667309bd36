# File: building_shell_generator/core/json_schemas.py
"""
JSON serialization for shell plans.

A ShellPlan is serialized as a JSON string so it can be inspected, cached,
returned by the HTTP API, or handed from a planning process to the process
running inside the host application.

Usage:
    from building_shell_generator.core.json_schemas import (
        serialize_shell_plan, deserialize_shell_plan, validate_shell_plan
    )

    json_str = serialize_shell_plan(plan)
    plan = deserialize_shell_plan(json_str)
"""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from building_shell_generator.core.shell_plan import ShellPlan
from building_shell_generator.geometry.openings import OpeningPlacement, OpeningType
from building_shell_generator.geometry.primitives import Line3D, Point3D
from building_shell_generator.geometry.roof import GableProfile, RoofExtrusion


# =============================================================================
# Custom JSON Encoder
# =============================================================================

class ShellJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for shell geometry data classes."""

    def default(self, obj):
        if hasattr(obj, '__dataclass_fields__'):
            return asdict(obj)
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


# =============================================================================
# Serialization Functions
# =============================================================================

def shell_plan_to_dict(plan: ShellPlan) -> Dict[str, Any]:
    """Convert a ShellPlan to plain JSON-compatible data."""
    return json.loads(json.dumps(asdict(plan), cls=ShellJSONEncoder))


def serialize_shell_plan(plan: ShellPlan) -> str:
    """Serialize ShellPlan to JSON string."""
    return json.dumps(asdict(plan), cls=ShellJSONEncoder, indent=2)


def _line(data: Dict[str, Any]) -> Line3D:
    return Line3D(start=Point3D(**data['start']), end=Point3D(**data['end']))


def shell_plan_from_dict(data: Dict[str, Any]) -> ShellPlan:
    """Rebuild a ShellPlan from the output of shell_plan_to_dict."""
    openings = [
        OpeningPlacement(
            opening_type=OpeningType(o['opening_type']),
            wall_index=o['wall_index'],
            location=Point3D(**o['location']),
            sill_height=o.get('sill_height'),
        )
        for o in data.get('openings', [])
    ]

    roof_profile = None
    if data.get('roof_profile'):
        r = data['roof_profile']
        roof_profile = GableProfile(
            corner1=Point3D(**r['corner1']),
            corner2=Point3D(**r['corner2']),
            ridge=Point3D(**r['ridge']),
            slope_angle=r['slope_angle'],
            elevation_correction=r['elevation_correction'],
        )

    roof_extrusion = None
    if data.get('roof_extrusion'):
        e = data['roof_extrusion']
        roof_extrusion = RoofExtrusion(
            direction=tuple(e['direction']),
            start=e['start'],
            end=e['end'],
        )

    return ShellPlan(
        outline=[Point3D(**p) for p in data['outline']],
        walls=[_line(w) for w in data['walls']],
        openings=openings,
        roof_profile=roof_profile,
        roof_extrusion=roof_extrusion,
        metadata=data.get('metadata', {}),
    )


def deserialize_shell_plan(json_str: str) -> ShellPlan:
    """Deserialize JSON string to ShellPlan."""
    return shell_plan_from_dict(json.loads(json_str))


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_shell_plan(data: Union[str, Dict, ShellPlan]) -> Tuple[bool, List[str]]:
    """
    Validate shell plan structure.

    Args:
        data: JSON string, dict, or ShellPlan object

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    try:
        if isinstance(data, str):
            data = json.loads(data)

        if isinstance(data, ShellPlan):
            data = shell_plan_to_dict(data)

        # Required fields
        for field in ('outline', 'walls'):
            if field not in data:
                errors.append(f"Missing required field: {field}")

        outline = data.get('outline', [])
        if outline:
            if len(outline) != 5:
                errors.append(f"outline must have 5 points, got {len(outline)}")
            elif outline[0] != outline[-1]:
                errors.append("outline is not closed")

        if 'walls' in data and len(data['walls']) != 4:
            errors.append(f"walls must have 4 entries, got {len(data['walls'])}")

        for i, opening in enumerate(data.get('openings', [])):
            if opening.get('opening_type') not in ('door', 'window'):
                errors.append(f"Opening {i} has invalid opening_type")
            if 'location' not in opening:
                errors.append(f"Opening {i} missing location")

        if bool(data.get('roof_profile')) != bool(data.get('roof_extrusion')):
            errors.append("roof_profile and roof_extrusion must be given together")

    except json.JSONDecodeError as e:
        errors.append(f"Invalid JSON: {str(e)}")
    except Exception as e:
        errors.append(f"Validation error: {str(e)}")

    return len(errors) == 0, errors
