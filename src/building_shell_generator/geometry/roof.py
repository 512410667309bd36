# File: building_shell_generator/geometry/roof.py

"""Gable roof profile and extrusion geometry.

The roof is a symmetric gable drawn as a profile over one wall of the
footprint (the eave line) and extruded perpendicular to that wall across
the whole footprint. All values are in internal units (feet).

Profile (looking along the extrusion direction):

                  ridge
                 /     \\
                /       \\
         corner1 ------- corner2
           |<- eave line ->|
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from building_shell_generator.core.errors import DegenerateProfile, InvalidDimension
from building_shell_generator.geometry.primitives import Line3D, Point3D, midpoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GableProfile:
    """
    End-on cross-section of a gable roof.

    Attributes:
        corner1: Eave corner at the start of the eave line
        corner2: Eave corner at the end of the eave line
        ridge: Peak point above the midpoint of the eave corners
        slope_angle: Roof pitch in radians
        elevation_correction: Vertical offset applied to the eave corners so
            that the underside of the roof sits on the wall top
    """
    corner1: Point3D
    corner2: Point3D
    ridge: Point3D
    slope_angle: float
    elevation_correction: float

    def profile_lines(self) -> Tuple[Line3D, Line3D]:
        """The two sloped roof edges, eave to ridge."""
        return (Line3D(self.corner1, self.ridge), Line3D(self.ridge, self.corner2))


@dataclass(frozen=True)
class RoofExtrusion:
    """
    Extents of the extruded roof measured from the profile plane.

    Attributes:
        direction: Horizontal unit vector the roof extrudes along
        start: Offset of the first roof end (negative means overhang behind
            the profile plane)
        end: Offset of the second roof end
    """
    direction: Tuple[float, float, float]
    start: float
    end: float

    @property
    def depth(self) -> float:
        return self.end - self.start


def compute_gable_profile(
    eave_line: Line3D,
    half_thickness: float,
    roof_height: float,
    roof_thickness_along_slope: float,
    level_elevation: float,
) -> GableProfile:
    """
    Compute the eave corners and ridge point of a symmetric gable.

    Args:
        eave_line: Wall centerline the roof profile is drawn over
        half_thickness: Half the wall thickness; eave overhang on both sides
        roof_height: Vertical rise from eave to ridge
        roof_thickness_along_slope: Roof material thickness measured
            perpendicular to the slope
        level_elevation: Elevation of the level the roof rests on

    Returns:
        GableProfile with corner1, corner2 and ridge

    Raises:
        DegenerateProfile: If the eave line has zero length
        InvalidDimension: If a numeric input is not finite
    """
    for name, value in (
        ("half_thickness", half_thickness),
        ("roof_height", roof_height),
        ("roof_thickness_along_slope", roof_thickness_along_slope),
        ("level_elevation", level_elevation),
    ):
        if not math.isfinite(value):
            raise InvalidDimension(name, value)

    span = eave_line.length
    if span == 0:
        raise DegenerateProfile(
            f"Eave line has zero length at {eave_line.start.to_tuple()}",
            {"eave_start": eave_line.start.to_tuple()},
        )
    if roof_height <= 0:
        logger.warning("Roof height %.4f is not positive; roof will be flat or inverted", roof_height)

    slope_angle = math.atan2(roof_height, span / 2)
    elevation_correction = roof_thickness_along_slope / math.cos(slope_angle)

    start = eave_line.start
    end = eave_line.end
    corner1 = Point3D(
        start.x,
        start.y - half_thickness,
        start.z + level_elevation + elevation_correction,
    )
    corner2 = Point3D(
        end.x,
        end.y + half_thickness,
        end.z + level_elevation + elevation_correction,
    )
    ridge = midpoint(corner1, corner2).translated(dz=roof_height)

    logger.debug(
        "Gable profile: span=%.4f slope=%.2f deg correction=%.4f",
        span, math.degrees(slope_angle), elevation_correction,
    )
    return GableProfile(
        corner1=corner1,
        corner2=corner2,
        ridge=ridge,
        slope_angle=slope_angle,
        elevation_correction=elevation_correction,
    )


def compute_roof_extrusion(
    eave_line: Line3D,
    half_thickness: float,
    run_length: float,
) -> RoofExtrusion:
    """
    Compute how far the gable profile is extruded across the footprint.

    The extrusion direction is the horizontal perpendicular of the eave line
    that points toward the origin (the footprint center). The roof overhangs
    the outer wall faces by ``half_thickness`` at both ends.

    Args:
        eave_line: Wall centerline the profile is drawn over
        half_thickness: Half the wall thickness
        run_length: Distance between the two gable walls

    Raises:
        DegenerateProfile: If the eave line has zero horizontal length
        InvalidDimension: If run_length is not positive
    """
    if not math.isfinite(run_length) or run_length <= 0:
        raise InvalidDimension("run_length", run_length)

    ex = eave_line.end.x - eave_line.start.x
    ey = eave_line.end.y - eave_line.start.y
    horizontal = math.hypot(ex, ey)
    if horizontal == 0:
        raise DegenerateProfile("Eave line has no horizontal extent")

    # Left-hand normal, flipped if it points away from the footprint center
    nx, ny = -ey / horizontal, ex / horizontal
    mid = eave_line.midpoint
    if nx * -mid.x + ny * -mid.y < 0:
        nx, ny = -nx, -ny

    return RoofExtrusion(
        direction=(nx, ny, 0.0),
        start=-half_thickness,
        end=run_length + half_thickness,
    )
