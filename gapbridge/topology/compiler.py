"""
Topology compiler: surface layout to warp zones.

For every surface and every direction of travel the compiler finds the
line-of-sight neighbors, emits an EdgeZone for each neighbor that is not
exactly flush, and emits a GapZone for each stretch of the exit edge that
faces nothing but still has something reachable beyond it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from gapbridge.common.settings import settings
from gapbridge.common.types import EdgeZone, GapZone, Point, Surface, Zone
from gapbridge.topology.traversal import TRAVERSALS, Traversal

logger = logging.getLogger(__name__)

__all__ = [
    "zones_compile",
    "surfacesValid_filter",
    "candidates_select",
    "edgeZones_build",
    "gapProfile_fold",
    "degeneratePairs_drop",
    "unreachableExtremes_trim",
    "gapAnchor_resolve",
    "anchorRoom_check",
    "gapZones_build",
]


def zones_compile(
    surfaces: Iterable[Surface],
    flush_tolerance: float = 0,
    pixel_inset: float = 0,
) -> tuple[Zone, ...]:
    """
    Compile a surface layout into an ordered zone collection.

    Args:
        surfaces:
            Display rectangles; the order only affects zone order.
        flush_tolerance:
            Largest entry/exit edge distance still treated as touching.
        pixel_inset:
            0 for continuous coordinates. 1 when surfaces are half-open pixel
            rectangles, so boundaries, targets and anchors land on pixels
            the pointer can actually occupy.

    Returns:
        Zones grouped by surface, then by direction (rightward, leftward,
        upward, downward), EdgeZones before GapZones within a direction.
    """
    valid: list[Surface] = surfacesValid_filter(surfaces)
    zones: list[Zone] = []

    for surface in valid:
        for traversal in TRAVERSALS:
            candidates: list[Surface] = candidates_select(surface, valid, traversal)
            if not candidates:
                continue
            zones.extend(
                edgeZones_build(surface, candidates, traversal, flush_tolerance, pixel_inset)
            )
            zones.extend(gapZones_build(surface, candidates, valid, traversal, pixel_inset))

    logger.debug(f"Compiled {len(zones)} zone(s) from {len(valid)} surface(s)")
    return tuple(zones)


def surfacesValid_filter(surfaces: Iterable[Surface]) -> list[Surface]:
    """
    Drop malformed rectangles.

    Args:
        surfaces: Raw rectangles from the host.

    Returns:
        Rectangles with positive width and height, in input order.
    """
    valid: list[Surface] = []
    for surface in surfaces:
        if surface.isValid():
            valid.append(surface)
        else:
            logger.warning(f"Skipping malformed surface {surface}")
    return valid


def candidates_select(
    surface: Surface,
    surfaces: Sequence[Surface],
    traversal: Traversal,
) -> list[Surface]:
    """
    Find line-of-sight neighbors of surface in one direction.

    A surface is ahead when its entry edge is at or beyond the exit edge and
    its perpendicular span overlaps. It is occluded when another surface that
    is ahead sits between the two and overlaps it perpendicularly.

    Args:
        surface: Source surface.
        surfaces: All valid surfaces.
        traversal: Direction of travel.

    Returns:
        Visible neighbors sorted by perpendicular low bound.
    """
    ahead: list[Surface] = [
        other
        for other in surfaces
        if traversal.isAhead(surface, other) and traversal.spans_overlap(surface, other)
    ]
    visible: list[Surface] = [
        other
        for other in ahead
        if not any(
            traversal.isAhead(blocker, other) and traversal.spans_overlap(blocker, other)
            for blocker in ahead
        )
    ]
    return sorted(visible, key=traversal.span_lo)


def edgeZones_build(
    surface: Surface,
    candidates: Sequence[Surface],
    traversal: Traversal,
    flush_tolerance: float = 0,
    pixel_inset: float = 0,
) -> list[EdgeZone]:
    """
    Emit one EdgeZone per neighbor that is not flush with surface.

    Args:
        surface: Source surface.
        candidates: Visible neighbors.
        traversal: Direction of travel.
        flush_tolerance: Largest distance treated as touching.
        pixel_inset: Offset of a high edge from its last reachable pixel.

    Returns:
        EdgeZones in candidate order.
    """
    zones: list[EdgeZone] = []
    for other in candidates:
        # Native motion already crosses a touching boundary
        if traversal.distance(surface, other) <= flush_tolerance:
            continue
        zones.append(
            EdgeZone(
                kind=traversal.edge_kind,
                lo=max(traversal.span_lo(surface), traversal.span_lo(other)),
                hi=min(traversal.span_hi(surface), traversal.span_hi(other)),
                boundary=traversal.exitReach_get(surface, pixel_inset),
                target=traversal.entryReach_get(other, pixel_inset),
            )
        )
    return zones


def gapProfile_fold(
    surface: Surface,
    candidates: Sequence[Surface],
    traversal: Traversal,
) -> list[float]:
    """
    Fold neighbor spans into the alternating boundary list of surface's edge.

    Consecutive pairs of the result delimit the stretches of the exit edge
    that face no neighbor.

    Args:
        surface: Source surface.
        candidates: Visible neighbors sorted by perpendicular low bound.
        traversal: Direction of travel.

    Returns:
        Boundary list of even length; empty when one neighbor covers the
        whole edge.
    """
    low: float = traversal.span_lo(surface)
    high: float = traversal.span_hi(surface)
    profile: list[float] = [low, high]

    for other in candidates:
        other_low: float = traversal.span_lo(other)
        other_high: float = traversal.span_hi(other)
        if other_low < low and other_high > high:
            return []
        if other_low < low:
            profile[0] = other_high
        elif other_high > high:
            profile[-1] = other_low
        else:
            profile[-1:-1] = [other_low, other_high]

    return profile


def degeneratePairs_drop(profile: Sequence[float]) -> list[tuple[float, float]]:
    """
    Pair up a boundary list and drop zero-width pairs.

    Args:
        profile: Boundary list from gapProfile_fold.

    Returns:
        (lo, hi) pairs with lo != hi.
    """
    pairs = zip(profile[0::2], profile[1::2])
    return [(lo, hi) for lo, hi in pairs if lo != hi]


def unreachableExtremes_trim(
    pairs: list[tuple[float, float]],
    surface: Surface,
    surfaces: Sequence[Surface],
    traversal: Traversal,
) -> list[tuple[float, float]]:
    """
    Drop outer pairs that have nothing beyond surface to bridge to.

    Args:
        pairs: Uncovered stretches from degeneratePairs_drop.
        surface: Source surface.
        surfaces: All valid surfaces.
        traversal: Direction of travel.

    Returns:
        Remaining pairs.
    """
    if pairs:
        first_lo: float = pairs[0][0]
        if not any(
            traversal.span_hi(other) <= first_lo and traversal.extendsBeyond(surface, other)
            for other in surfaces
        ):
            pairs = pairs[1:]

    if pairs:
        last_hi: float = pairs[-1][1]
        if not any(
            traversal.span_lo(other) >= last_hi and traversal.extendsBeyond(surface, other)
            for other in surfaces
        ):
            pairs = pairs[:-1]

    return pairs


def gapAnchor_resolve(
    lo: float,
    hi: float,
    surface: Surface,
    candidates: Sequence[Surface],
    traversal: Traversal,
    pixel_inset: float = 0,
) -> Optional[Point]:
    """
    Pick the fixed landing point for one uncovered stretch.

    The anchor lies just below lo along the edge when lo closes a covered
    span, otherwise just above hi, and one inset past the entry edge of the
    first neighbor that strictly contains that point. With a pixel inset both
    coordinates stay off the neighbor's outermost pixels, where its own
    zones would send the pointer straight on.

    Args:
        lo: Low end of the stretch.
        hi: High end of the stretch.
        surface: Source surface.
        candidates: Visible neighbors sorted by perpendicular low bound.
        traversal: Direction of travel.
        pixel_inset: Offset of a high edge from its last reachable pixel.

    Returns:
        Anchor point, or None when no neighbor contains it.
    """
    inset: int = settings.ANCHOR_INSET
    if lo > traversal.span_lo(surface):
        along: float = lo - inset - pixel_inset
    else:
        along = hi + inset

    for other in candidates:
        anchor: Point = traversal.point_make(
            traversal.entryReach_get(other, pixel_inset) + traversal.sign * inset,
            along,
        )
        if other.contains(anchor):
            return anchor
    return None


def anchorRoom_check(surface: Surface, pixel_inset: float = 0) -> bool:
    """
    Check surface is large enough to hold a gap anchor strictly inside.

    Args:
        surface: Candidate neighbor.
        pixel_inset: Offset of a high edge from its last reachable pixel.

    Returns:
        True when both extents exceed the anchor inset plus the pixel inset.
    """
    room: float = settings.ANCHOR_INSET + pixel_inset
    return surface.width > room and surface.height > room


def gapZones_build(
    surface: Surface,
    candidates: Sequence[Surface],
    surfaces: Sequence[Surface],
    traversal: Traversal,
    pixel_inset: float = 0,
) -> list[GapZone]:
    """
    Emit GapZones for the reachable uncovered stretches of surface's edge.

    A stretch whose neighbors are all large enough always resolves an
    anchor; failing to do so is a compiler fault and raises. Stretches next
    to a neighbor too thin to hold an anchor are skipped.

    Args:
        surface: Source surface.
        candidates: Visible neighbors sorted by perpendicular low bound.
        surfaces: All valid surfaces.
        traversal: Direction of travel.
        pixel_inset: Offset of a high edge from its last reachable pixel.

    Returns:
        GapZones in ascending perpendicular order.

    Raises:
        AssertionError: If no anchor resolves although every neighbor has room.
    """
    profile: list[float] = gapProfile_fold(surface, candidates, traversal)
    pairs = degeneratePairs_drop(profile)
    pairs = unreachableExtremes_trim(pairs, surface, surfaces, traversal)

    zones: list[GapZone] = []
    for lo, hi in pairs:
        anchor: Optional[Point] = gapAnchor_resolve(
            lo, hi, surface, candidates, traversal, pixel_inset
        )
        if anchor is None:
            if all(anchorRoom_check(other, pixel_inset) for other in candidates):
                raise AssertionError(
                    f"No anchor for {traversal.direction.value} gap [{lo}, {hi}] of {surface}"
                )
            logger.debug(
                f"Neighbor too thin to anchor {traversal.direction.value} gap "
                f"[{lo}, {hi}] of {surface}"
            )
            continue
        zones.append(
            GapZone(
                kind=traversal.gap_kind,
                lo=lo,
                # The pixel at hi belongs to the next neighbor or lies off the edge
                hi=hi - pixel_inset,
                boundary=traversal.exitReach_get(surface, pixel_inset),
                anchor=anchor,
            )
        )
    return zones
