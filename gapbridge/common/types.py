"""Common types and data structures for gapbridge"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    """Axes of traversal out of a surface (UPWARD is increasing y)"""
    RIGHTWARD = "rightward"
    LEFTWARD = "leftward"
    UPWARD = "upward"
    DOWNWARD = "downward"


class ZoneKind(Enum):
    """Kinds of compiled warp zones"""
    HORIZONTAL = "horizontal"          # boundary on x, range over y
    VERTICAL = "vertical"              # boundary on y, range over x
    HORIZONTAL_GAP = "horizontal_gap"
    VERTICAL_GAP = "vertical_gap"

    @property
    def isHorizontal(self) -> bool:
        """True when the zone boundary is an x coordinate"""
        return self in (ZoneKind.HORIZONTAL, ZoneKind.HORIZONTAL_GAP)

    @property
    def isGap(self) -> bool:
        """True for teleport (anchor) zones"""
        return self in (ZoneKind.HORIZONTAL_GAP, ZoneKind.VERTICAL_GAP)


def coordinate_round(value: float) -> int:
    """
    Round a coordinate half away from zero

    Args:
        value: Raw coordinate

    Returns:
        Nearest integer, ties rounded away from zero
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Point:
    """2D pointer coordinates in the shared surface space"""
    x: float
    y: float

    def rounded(self) -> "Point":
        """Return the point snapped to the nearest integer coordinates"""
        return Point(x=coordinate_round(self.x), y=coordinate_round(self.y))


@dataclass(frozen=True)
class Surface:
    """Axis-aligned display rectangle"""
    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        """Horizontal extent"""
        return self.right - self.left

    @property
    def height(self) -> float:
        """Vertical extent"""
        return self.top - self.bottom

    def isValid(self) -> bool:
        """Check the rectangle has positive width and height"""
        # Written as comparisons so NaN edges are rejected too
        return self.left < self.right and self.bottom < self.top

    def contains(self, point: Point) -> bool:
        """Check if point lies strictly inside the rectangle"""
        return self.left < point.x < self.right and self.bottom < point.y < self.top


@dataclass(frozen=True)
class EdgeZone:
    """
    Continuous crossing strip between two line-of-sight neighbors

    The strip covers [lo, hi) along the range axis at the fixed perpendicular
    coordinate `boundary`. Crossing it lands one unit past `target`.
    """
    kind: ZoneKind
    lo: float
    hi: float
    boundary: float
    target: float


@dataclass(frozen=True)
class GapZone:
    """
    Teleport strip covering [lo, hi] at `boundary`

    Crossing it relocates the pointer to the fixed `anchor` computed when
    the topology was compiled.
    """
    kind: ZoneKind
    lo: float
    hi: float
    boundary: float
    anchor: Point


Zone = Union[EdgeZone, GapZone]
