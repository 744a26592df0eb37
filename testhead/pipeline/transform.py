"""
Coordinate Pipeline

Moves test points from pick-and-place space into testhead space:

1. scale: mil -> inch
2. offset: recentre the point set so its centroid sits on the fixture anchor
3. rotate (optional): turn the board about the origin
4. offset again, because rotating about the origin moves the centroid

All points share one centroid per offset step.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..errors import EmptyInputError
from ..placement.records import Rotation, TestPoint
from ..fixture.profiles import FixtureProfile, TESTHEAD_STANDARD

logger = logging.getLogger(__name__)


def scale(points: List[TestPoint], divisor: float = 1000.0) -> List[TestPoint]:
    """Divide every coordinate by divisor, in place."""
    logger.debug(f"Scaling {len(points)} points by 1/{divisor}")
    for pt in points:
        pt.x = pt.x / divisor
        pt.y = pt.y / divisor
    return points


def midpoint(points: Sequence[TestPoint]) -> Tuple[float, float]:
    """
    Arithmetic mean of all point positions.

    Raises:
        EmptyInputError: If there are no points
    """
    if not points:
        raise EmptyInputError()

    n = len(points)
    mid_x = sum(pt.x for pt in points) / n
    mid_y = sum(pt.y for pt in points) / n
    logger.debug(f"Midpoint: ({mid_x}, {mid_y})")
    return (mid_x, mid_y)


def offset(points: List[TestPoint],
           anchor: Tuple[float, float] = (3.5, 3.0)) -> List[TestPoint]:
    """Translate points in place so their midpoint lands on anchor."""
    mid_x, mid_y = midpoint(points)
    dx = anchor[0] - mid_x
    dy = anchor[1] - mid_y

    logger.debug(f"Offsetting by ({dx}, {dy}) onto anchor {anchor}")
    for pt in points:
        pt.x = pt.x + dx
        pt.y = pt.y + dy
    return points


def rotate_90(x: float, y: float) -> Tuple[float, float]:
    return (y, -x)


def rotate_180(x: float, y: float) -> Tuple[float, float]:
    return (-x, -y)


def vertical_flip(x: float, y: float) -> Tuple[float, float]:
    # Used for the 270 setting. Existing fixtures were drilled with this
    # mapping, so it must not become a true 270 degree turn.
    return (x, -y)


ROTATIONS: Dict[Rotation, Callable[[float, float], Tuple[float, float]]] = {
    Rotation.R90: rotate_90,
    Rotation.R180: rotate_180,
    Rotation.R270: vertical_flip,
}


def rotate(points: Sequence[TestPoint], rotation: Rotation) -> List[TestPoint]:
    """
    Rotate points about the origin.

    Returns:
        New point objects; the input points are left untouched
    """
    rotation = Rotation(rotation)
    transform = ROTATIONS[rotation]
    logger.info(f"Rotating {len(points)} points by {rotation.value} degrees")

    rotated = []
    for pt in points:
        x, y = transform(pt.x, pt.y)
        rotated.append(replace(pt, x=x, y=y))
    return rotated


class CoordinatePipeline:
    """Applies the testhead coordinate transforms in their fixed order."""

    def __init__(self, profile: Optional[FixtureProfile] = None):
        self.profile = profile or TESTHEAD_STANDARD

    def scale(self, points: List[TestPoint]) -> List[TestPoint]:
        return scale(points, self.profile.scale_divisor)

    def offset(self, points: List[TestPoint]) -> List[TestPoint]:
        return offset(points, self.profile.anchor)

    def place(self, points: List[TestPoint],
              rotation: Optional[Rotation] = None) -> List[TestPoint]:
        """Centre already-scaled points on the anchor, rotating first if asked."""
        points = self.offset(points)
        if rotation is not None:
            points = rotate(points, rotation)
            points = self.offset(points)
        return points

    def normalize(self, points: List[TestPoint],
                  rotation: Optional[Rotation] = None) -> List[TestPoint]:
        """Scale, centre and optionally rotate a raw point set."""
        return self.place(self.scale(points), rotation)
