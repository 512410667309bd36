# File: building_shell_generator/geometry/outline.py

"""Rectangular footprint generation.

The outline is a closed, counter-clockwise rectangle centered on the origin
in the XY plane. Consecutive points differ in exactly one axis, so each pair
of neighbours is one axis-aligned wall centerline:

    3 (-dx, dy) ---- 2 (dx, dy)
        |                |
    0/4 (-dx,-dy) -- 1 (dx,-dy)
"""

import logging
import math
import numbers
from typing import Callable, List, Sequence, Union

from building_shell_generator.core.errors import InvalidDimension
from building_shell_generator.geometry.primitives import Line3D, Point3D

logger = logging.getLogger(__name__)

UnitConverter = Union[float, Callable[[float], float]]

# Outline wall order; index matches outline_segments()
WALL_NAMES = ("south", "east", "north", "west")


def _convert(value: float, converter: UnitConverter) -> float:
    if callable(converter):
        return float(converter(value))
    return float(value) * float(converter)


def _check_positive(name: str, value: float) -> None:
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise InvalidDimension(name, value)


def generate_outline(
    length: float,
    width: float,
    length_unit_to_internal: UnitConverter = 1.0,
) -> List[Point3D]:
    """
    Generate the five ordered corner points of a closed rectangle.

    Args:
        length: Extent along X in display units
        width: Extent along Y in display units
        length_unit_to_internal: Scale factor, or function, converting the
            display unit to internal units

    Returns:
        [(-dx,-dy,0), (dx,-dy,0), (dx,dy,0), (-dx,dy,0), (-dx,-dy,0)]

    Raises:
        InvalidDimension: If length or width is non-positive or not finite
    """
    _check_positive("length", length)
    _check_positive("width", width)

    internal_length = _convert(length, length_unit_to_internal)
    internal_width = _convert(width, length_unit_to_internal)
    # A bad converter must not yield a zero-area footprint
    _check_positive("length", internal_length)
    _check_positive("width", internal_width)

    dx = internal_length / 2
    dy = internal_width / 2

    points = [
        Point3D(-dx, -dy, 0.0),
        Point3D(dx, -dy, 0.0),
        Point3D(dx, dy, 0.0),
        Point3D(-dx, dy, 0.0),
        Point3D(-dx, -dy, 0.0),
    ]
    logger.debug("Outline %.4f x %.4f (internal units)", internal_length, internal_width)
    return points


def outline_segments(points: Sequence[Point3D]) -> List[Line3D]:
    """
    Split a closed outline into its wall centerlines.

    Args:
        points: Closed outline, first point repeated as last

    Returns:
        One Line3D per consecutive pair of points, in outline order

    Raises:
        InvalidDimension: If the outline is not closed or has fewer than 4 points
    """
    if len(points) < 4:
        raise InvalidDimension("outline_points", len(points))
    if points[0] != points[-1]:
        raise InvalidDimension("outline_closure", (points[0], points[-1]))

    return [Line3D(points[i], points[i + 1]) for i in range(len(points) - 1)]


def bounding_box(points: Sequence[Point3D]):
    """Return (min_x, min_y, max_x, max_y) of the given points."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
