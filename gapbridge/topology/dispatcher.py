"""
Warp dispatcher: pointer position to relocation target.

Zones are scanned in compilation order and the first match wins. A compiled
layout normally yields at most one match; where an EdgeZone and a GapZone
share an end coordinate the EdgeZone, emitted first, takes precedence.
"""

from __future__ import annotations

from typing import Iterable, Optional

from gapbridge.common.settings import settings
from gapbridge.common.types import EdgeZone, GapZone, Point, Zone

__all__ = [
    "warp_dispatch",
    "edgeZone_match",
    "gapZone_match",
]


def _coordinates_split(zone: Zone, point: Point) -> tuple[float, float]:
    """Return (in-range coordinate, boundary-axis coordinate) for zone."""
    if zone.kind.isHorizontal:
        return point.y, point.x
    return point.x, point.y


def edgeZone_match(zone: EdgeZone, point: Point) -> Optional[Point]:
    """
    Test an EdgeZone against an integer point.

    Args:
        zone: EdgeZone covering [lo, hi).
        point: Rounded pointer position.

    Returns:
        Point one step past the zone target, or None.
    """
    along, across = _coordinates_split(zone, point)
    if not (zone.lo <= along < zone.hi and across == zone.boundary):
        return None

    step: int = settings.ZONE_EXIT_STEP if zone.target > zone.boundary else -settings.ZONE_EXIT_STEP
    landing: float = zone.target + step
    if zone.kind.isHorizontal:
        return Point(x=landing, y=point.y)
    return Point(x=point.x, y=landing)


def gapZone_match(zone: GapZone, point: Point) -> Optional[Point]:
    """
    Test a GapZone against an integer point.

    Args:
        zone: GapZone covering [lo, hi].
        point: Rounded pointer position.

    Returns:
        The zone anchor, or None.
    """
    along, across = _coordinates_split(zone, point)
    if zone.lo <= along <= zone.hi and across == zone.boundary:
        return zone.anchor
    return None


def warp_dispatch(zones: Iterable[Zone], point: Point) -> Optional[Point]:
    """
    Resolve the relocation target for a pointer sample.

    Args:
        zones: Compiled zone collection.
        point: Pointer position; rounded half away from zero before matching.

    Returns:
        Target point of the first matching zone, or None for no relocation.
    """
    rounded: Point = point.rounded()
    for zone in zones:
        if isinstance(zone, GapZone):
            target = gapZone_match(zone, rounded)
        else:
            target = edgeZone_match(zone, rounded)
        if target is not None:
            return target
    return None
