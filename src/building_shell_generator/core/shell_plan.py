# File: building_shell_generator/core/shell_plan.py

"""
Pure planning step of the shell command.

Turns ShellParameters plus the few numbers read from the host (level
elevation, wall and roof thickness) into a ShellPlan holding every point
the host needs. Nothing here touches the host document, so a plan can be
built, inspected and serialized before any transaction is opened.

Usage:
    from building_shell_generator.config import ShellParameters
    from building_shell_generator.core.shell_plan import build_shell_plan

    plan = build_shell_plan(
        ShellParameters(), top_level_elevation=13.12,
        wall_thickness=0.656, roof_thickness=1.312,
    )
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from building_shell_generator.config.shell import ShellParameters
from building_shell_generator.config.units import to_internal_converter
from building_shell_generator.core.errors import InvalidDimension
from building_shell_generator.geometry.openings import OpeningPlacement, plan_openings
from building_shell_generator.geometry.outline import generate_outline, outline_segments
from building_shell_generator.geometry.primitives import Line3D, Point3D
from building_shell_generator.geometry.roof import (
    GableProfile,
    RoofExtrusion,
    compute_gable_profile,
    compute_roof_extrusion,
)

logger = logging.getLogger(__name__)

# The gable is drawn over the east wall, which runs along Y
EAVE_WALL_INDEX = 1
# The roof extrudes over the south wall's length
RUN_WALL_INDEX = 0


@dataclass(frozen=True)
class ShellPlan:
    """
    Every piece of geometry needed to build one shell.

    Attributes:
        outline: Closed footprint, five points
        walls: Four wall centerlines in outline order
        openings: Door and window placements (empty when disabled)
        roof_profile: Gable profile (None when the roof is disabled)
        roof_extrusion: Roof extents (None when the roof is disabled)
        metadata: Source parameters and host facts the plan was built from
    """
    outline: List[Point3D]
    walls: List[Line3D]
    openings: List[OpeningPlacement] = field(default_factory=list)
    roof_profile: Optional[GableProfile] = None
    roof_extrusion: Optional[RoofExtrusion] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_roof(self) -> bool:
        return self.roof_profile is not None


def _check_thickness(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidDimension(name, value)


def build_shell_plan(
    params: ShellParameters,
    top_level_elevation: Optional[float] = None,
    wall_thickness: float = 0.0,
    roof_thickness: float = 0.0,
) -> ShellPlan:
    """
    Compute the full shell geometry.

    Args:
        params: Shell dimensions (display units) and feature flags
        top_level_elevation: Elevation of the top level in internal units;
            required when the roof is enabled
        wall_thickness: Wall type thickness in internal units
        roof_thickness: Roof type thickness in internal units

    Returns:
        ShellPlan

    Raises:
        InvalidDimension: For non-positive footprint dimensions, negative
            thicknesses or sill height, a non-finite roof height, or a
            missing or non-finite top level elevation when the roof is enabled
        DegenerateProfile: If the eave wall has zero length
    """
    _check_thickness("wall_thickness", wall_thickness)
    _check_thickness("roof_thickness", roof_thickness)

    to_internal = to_internal_converter(params.units)

    outline = generate_outline(params.length, params.width, to_internal)
    walls = outline_segments(outline)

    openings: List[OpeningPlacement] = []
    if params.include_openings:
        openings = plan_openings(walls, to_internal(params.sill_height))

    roof_profile = None
    roof_extrusion = None
    if params.include_roof:
        if top_level_elevation is None or not math.isfinite(top_level_elevation):
            raise InvalidDimension("top_level_elevation", top_level_elevation)
        half_thickness = wall_thickness / 2
        eave_line = walls[EAVE_WALL_INDEX]
        roof_profile = compute_gable_profile(
            eave_line,
            half_thickness,
            to_internal(params.roof_height),
            roof_thickness,
            top_level_elevation,
        )
        roof_extrusion = compute_roof_extrusion(
            eave_line, half_thickness, walls[RUN_WALL_INDEX].length
        )

    plan = ShellPlan(
        outline=outline,
        walls=walls,
        openings=openings,
        roof_profile=roof_profile,
        roof_extrusion=roof_extrusion,
        metadata={
            "units": params.units.value,
            "length": params.length,
            "width": params.width,
            "wall_thickness": wall_thickness,
            "roof_thickness": roof_thickness,
            "top_level_elevation": top_level_elevation,
            "include_openings": params.include_openings,
            "include_roof": params.include_roof,
        },
    )

    logger.info(
        "Planned shell: %d walls, %d openings, roof=%s",
        len(plan.walls), len(plan.openings), plan.has_roof,
    )
    return plan
