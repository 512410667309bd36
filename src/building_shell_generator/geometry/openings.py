# File: building_shell_generator/geometry/openings.py

"""Door and window placement on the shell walls.

One door goes in the first wall and one window in each remaining wall,
each centered on its wall's centerline.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from building_shell_generator.core.errors import InvalidDimension
from building_shell_generator.geometry.primitives import Line3D, Point3D, midpoint


class OpeningType(Enum):
    """Types of wall openings."""
    DOOR = "door"
    WINDOW = "window"


@dataclass(frozen=True)
class OpeningPlacement:
    """
    Where one family instance is inserted.

    Attributes:
        opening_type: Door or window
        wall_index: Index of the host wall in outline order
        location: Insertion point on the wall centerline
        sill_height: Sill height in internal units (windows only)
    """
    opening_type: OpeningType
    wall_index: int
    location: Point3D
    sill_height: Optional[float] = None


def opening_location(wall: Line3D) -> Point3D:
    """Insertion point for an opening hosted by ``wall``."""
    return midpoint(wall.start, wall.end)


def plan_openings(
    walls: Sequence[Line3D],
    sill_height: float,
    door_wall_index: int = 0,
) -> List[OpeningPlacement]:
    """
    Place a door in one wall and a window in every other wall.

    Args:
        walls: The four wall centerlines in outline order
        sill_height: Window sill height in internal units
        door_wall_index: Which wall receives the door

    Returns:
        Placements ordered by wall index

    Raises:
        InvalidDimension: If there are fewer than four walls, the sill height
            is negative, or the door wall index is out of range
    """
    if len(walls) < 4:
        raise InvalidDimension("wall_count", len(walls))
    if not math.isfinite(sill_height) or sill_height < 0:
        raise InvalidDimension("sill_height", sill_height)
    if not 0 <= door_wall_index < len(walls):
        raise InvalidDimension("door_wall_index", door_wall_index)

    placements = []
    for index, wall in enumerate(walls):
        if index == door_wall_index:
            placements.append(
                OpeningPlacement(OpeningType.DOOR, index, opening_location(wall))
            )
        else:
            placements.append(
                OpeningPlacement(OpeningType.WINDOW, index, opening_location(wall), sill_height)
            )
    return placements
