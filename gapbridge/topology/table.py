"""Atomically swappable holder for the compiled topology"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Sequence

from gapbridge.common.types import Point, Surface, Zone
from gapbridge.topology.compiler import zones_compile
from gapbridge.topology.dispatcher import warp_dispatch

logger = logging.getLogger(__name__)

__all__ = ["Topology", "ZoneTable"]


@dataclass(frozen=True)
class Topology:
    """Raw surface list together with the zones compiled from it"""

    surfaces: tuple[Surface, ...] = ()
    zones: tuple[Zone, ...] = ()

    @property
    def isBridging(self) -> bool:
        """True when at least one zone exists and the pointer must be sampled"""
        return bool(self.zones)


class ZoneTable:
    """
    Owner of the current Topology.

    Readers take one reference via topology_get() and keep using it, so a
    dispatch never sees a half-replaced zone collection.
    """

    def __init__(self) -> None:
        """Start with an empty topology (no bridging)"""
        self._lock = threading.Lock()
        self._topology: Topology = Topology()

    def topology_get(self) -> Topology:
        """
        Get the current topology

        Returns:
            Immutable Topology snapshot
        """
        with self._lock:
            return self._topology

    def surfacesChanged_check(self, surfaces: Sequence[Surface]) -> bool:
        """
        Compare a raw surface list against the one last compiled

        Args:
            surfaces: Freshly enumerated surfaces

        Returns:
            True when the list differs (order included)
        """
        return tuple(surfaces) != self.topology_get().surfaces

    def topology_replace(
        self,
        surfaces: Sequence[Surface],
        flush_tolerance: float = 0,
        pixel_inset: float = 0,
    ) -> Topology:
        """
        Compile surfaces and swap the result in as one unit

        Args:
            surfaces: New raw surface list
            flush_tolerance: Passed through to the compiler
            pixel_inset: Passed through to the compiler

        Returns:
            The newly installed Topology
        """
        topology = Topology(
            surfaces=tuple(surfaces),
            zones=zones_compile(surfaces, flush_tolerance, pixel_inset),
        )
        with self._lock:
            self._topology = topology
        logger.info(
            f"Topology replaced: {len(topology.surfaces)} surface(s), "
            f"{len(topology.zones)} zone(s)"
        )
        return topology

    def warp_dispatch(self, point: Point) -> Optional[Point]:
        """
        Dispatch a pointer sample against the current zones

        Args:
            point: Pointer position

        Returns:
            Relocation target, or None
        """
        return warp_dispatch(self.topology_get().zones, point)
