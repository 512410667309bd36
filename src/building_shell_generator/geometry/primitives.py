# File: building_shell_generator/geometry/primitives.py

"""Immutable point and line values used by the geometry core.

All coordinates are in internal units (feet).
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point3D:
    """3D point representation."""
    x: float
    y: float
    z: float

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float, float]) -> "Point3D":
        return cls(x=float(t[0]), y=float(t[1]), z=float(t[2]))

    def translated(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Point3D":
        return Point3D(self.x + dx, self.y + dy, self.z + dz)

    def distance_to(self, other: "Point3D") -> float:
        return math.sqrt(
            (other.x - self.x) ** 2
            + (other.y - self.y) ** 2
            + (other.z - self.z) ** 2
        )


def midpoint(line_start: Point3D, line_end: Point3D) -> Point3D:
    """Component-wise average of two points."""
    return Point3D(
        (line_start.x + line_end.x) / 2,
        (line_start.y + line_end.y) / 2,
        (line_start.z + line_end.z) / 2,
    )


@dataclass(frozen=True)
class Line3D:
    """Bounded line segment between two points."""
    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point3D:
        return midpoint(self.start, self.end)

    def direction(self) -> Tuple[float, float, float]:
        """Unit vector from start to end; (0, 0, 0) for a zero-length line."""
        length = self.length
        if length == 0:
            return (0.0, 0.0, 0.0)
        return (
            (self.end.x - self.start.x) / length,
            (self.end.y - self.start.y) / length,
            (self.end.z - self.start.z) / length,
        )
