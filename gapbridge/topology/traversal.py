"""
Directional accessors for the topology compiler.

Each Traversal describes one direction of travel out of a surface in terms of
two abstract axes: the traversal axis (the one the pointer moves along when
it leaves the surface) and the perpendicular axis (the one the exit edge
spans). The compiler is written once against these accessors and run for
all four directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from gapbridge.common.types import Direction, Point, Surface, ZoneKind

__all__ = [
    "Traversal",
    "RIGHTWARD",
    "LEFTWARD",
    "UPWARD",
    "DOWNWARD",
    "TRAVERSALS",
]


@dataclass(frozen=True)
class Traversal:
    """
    Axis accessors for one direction of travel.

    Attributes:
        direction:
            Direction this traversal describes.
        edge_kind:
            Kind given to EdgeZones emitted in this direction.
        gap_kind:
            Kind given to GapZones emitted in this direction.
        sign:
            +1 when travel increases the traversal coordinate, -1 otherwise.
        exit_edge:
            Traversal coordinate of the edge a surface is left through.
        entry_edge:
            Traversal coordinate of the edge a surface is entered through.
        span_lo:
            Low perpendicular bound of a surface.
        span_hi:
            High perpendicular bound of a surface.
        point_make:
            Build a Point from (traversal coordinate, perpendicular coordinate).
    """

    direction: Direction
    edge_kind: ZoneKind
    gap_kind: ZoneKind
    sign: int
    exit_edge: Callable[[Surface], float]
    entry_edge: Callable[[Surface], float]
    span_lo: Callable[[Surface], float]
    span_hi: Callable[[Surface], float]
    point_make: Callable[[float, float], Point]

    def distance(self, source: Surface, other: Surface) -> float:
        """
        Signed gap from source's exit edge to other's entry edge.

        Args:
            source: Surface being left.
            other: Surface being entered.

        Returns:
            Non-negative when other lies at or beyond source in this direction.
        """
        return self.sign * (self.entry_edge(other) - self.exit_edge(source))

    def exitReach_get(self, surface: Surface, pixel_inset: float = 0) -> float:
        """
        Last traversal coordinate the pointer can occupy on surface's exit edge.

        On a pixel grid the high edge of a half-open rectangle is one past the
        last pixel, so it is reached at `edge - pixel_inset`.

        Args:
            surface: Surface being left.
            pixel_inset: 0 for continuous coordinates, 1 for pixel indices.

        Returns:
            Reachable exit coordinate.
        """
        edge: float = self.exit_edge(surface)
        return edge - pixel_inset if self.sign > 0 else edge

    def entryReach_get(self, surface: Surface, pixel_inset: float = 0) -> float:
        """Reachable traversal coordinate of surface's entry edge."""
        edge: float = self.entry_edge(surface)
        return edge - pixel_inset if self.sign < 0 else edge

    def isAhead(self, source: Surface, other: Surface) -> bool:
        """Check other lies at or beyond source's exit edge."""
        return self.distance(source, other) >= 0

    def extendsBeyond(self, source: Surface, other: Surface) -> bool:
        """Check other reaches past source's exit edge."""
        return self.sign * (self.exit_edge(other) - self.exit_edge(source)) > 0

    def spans_overlap(self, first: Surface, second: Surface) -> bool:
        """Check the perpendicular spans share a positive-length stretch."""
        return (
            self.span_lo(first) < self.span_hi(second)
            and self.span_lo(second) < self.span_hi(first)
        )


RIGHTWARD = Traversal(
    direction=Direction.RIGHTWARD,
    edge_kind=ZoneKind.HORIZONTAL,
    gap_kind=ZoneKind.HORIZONTAL_GAP,
    sign=1,
    exit_edge=lambda s: s.right,
    entry_edge=lambda s: s.left,
    span_lo=lambda s: s.bottom,
    span_hi=lambda s: s.top,
    point_make=lambda along, across: Point(x=along, y=across),
)

LEFTWARD = Traversal(
    direction=Direction.LEFTWARD,
    edge_kind=ZoneKind.HORIZONTAL,
    gap_kind=ZoneKind.HORIZONTAL_GAP,
    sign=-1,
    exit_edge=lambda s: s.left,
    entry_edge=lambda s: s.right,
    span_lo=lambda s: s.bottom,
    span_hi=lambda s: s.top,
    point_make=lambda along, across: Point(x=along, y=across),
)

UPWARD = Traversal(
    direction=Direction.UPWARD,
    edge_kind=ZoneKind.VERTICAL,
    gap_kind=ZoneKind.VERTICAL_GAP,
    sign=1,
    exit_edge=lambda s: s.top,
    entry_edge=lambda s: s.bottom,
    span_lo=lambda s: s.left,
    span_hi=lambda s: s.right,
    point_make=lambda along, across: Point(x=across, y=along),
)

DOWNWARD = Traversal(
    direction=Direction.DOWNWARD,
    edge_kind=ZoneKind.VERTICAL,
    gap_kind=ZoneKind.VERTICAL_GAP,
    sign=-1,
    exit_edge=lambda s: s.bottom,
    entry_edge=lambda s: s.top,
    span_lo=lambda s: s.left,
    span_hi=lambda s: s.right,
    point_make=lambda along, across: Point(x=across, y=along),
)

TRAVERSALS: tuple[Traversal, ...] = (RIGHTWARD, LEFTWARD, UPWARD, DOWNWARD)
