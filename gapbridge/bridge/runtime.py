"""
Bridge polling-loop orchestration layer.

This module drives the topology compiler and the warp dispatcher from a
single-threaded loop. It owns no display specifics; surface enumeration,
pointer sampling and pointer relocation come in through explicit protocol
contracts so the loop can run against X11 or against test doubles.

Per iteration:
1. Re-enumerate surfaces when the layout check interval has elapsed and
   recompile zones if the raw rectangle list changed.
2. While zones exist, sample the pointer, dispatch, and relocate on a match.
3. Return how long to sleep before the next iteration.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from gapbridge.common.settings import settings
from gapbridge.common.types import Point, Surface
from gapbridge.topology.table import Topology, ZoneTable

logger = logging.getLogger(__name__)

__all__ = [
    "SurfaceSourceProtocol",
    "PointerSourceProtocol",
    "PointerRelocatorProtocol",
    "BridgeRuntime",
]


class SurfaceSourceProtocol(Protocol):
    """Surface enumeration contract."""

    def surfaces_enumerate(self) -> list[Surface]:
        """Return current display rectangles in a stable order."""
        ...


class PointerSourceProtocol(Protocol):
    """Pointer sampling contract."""

    def position_query(self) -> Point:
        """Return the current pointer position."""
        ...

    def positionLast_set(self, position: Point) -> None:
        """Record a position the pointer was warped to."""
        ...

    def pollInterval_get(self) -> float:
        """Return seconds until the next sample."""
        ...


class PointerRelocatorProtocol(Protocol):
    """Pointer relocation contract."""

    def cursorPosition_set(self, point: Point) -> None:
        """Move the pointer to an absolute position."""
        ...


class BridgeRuntime:
    """Single-threaded loop tying surfaces, zones and the pointer together"""

    def __init__(
        self,
        surface_source: SurfaceSourceProtocol,
        pointer_source: PointerSourceProtocol,
        relocator: PointerRelocatorProtocol,
        zone_table: Optional[ZoneTable] = None,
        check_interval_seconds: float = 3.0,
        flush_tolerance: float = 0,
        pixel_inset: float = 0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize bridge runtime

        Args:
            surface_source: Display rectangle enumerator
            pointer_source: Pointer sampler
            relocator: Pointer relocation primitive
            zone_table: Zone table to own; a fresh one when None
            check_interval_seconds: Seconds between layout checks
            flush_tolerance: Passed through to the compiler
            pixel_inset: Passed through to the compiler
            clock: Monotonic time source
            sleep: Sleep function
        """
        self._surface_source = surface_source
        self._pointer_source = pointer_source
        self._relocator = relocator
        self._zone_table: ZoneTable = zone_table if zone_table is not None else ZoneTable()
        self._check_interval: float = check_interval_seconds
        self._flush_tolerance: float = flush_tolerance
        self._pixel_inset: float = pixel_inset
        self._clock = clock
        self._sleep = sleep
        self._next_check_time: Optional[float] = None
        self._bridging: bool = False

    @property
    def zone_table(self) -> ZoneTable:
        """Zone table owned by this runtime"""
        return self._zone_table

    @property
    def isBridging(self) -> bool:
        """True while zones exist and the pointer is being sampled"""
        return self._bridging

    def surfaces_check(self) -> bool:
        """
        Re-enumerate surfaces and recompile zones on change

        Returns:
            True when the layout changed and zones were replaced
        """
        surfaces: list[Surface] = self._surface_source.surfaces_enumerate()
        if not self._zone_table.surfacesChanged_check(surfaces):
            return False

        topology: Topology = self._zone_table.topology_replace(
            surfaces, self._flush_tolerance, self._pixel_inset
        )
        self.bridgingState_update(topology)
        return True

    def bridgingState_update(self, topology: Topology) -> None:
        """
        Start or stop pointer sampling to follow the zone count

        Args:
            topology: Newly installed topology
        """
        if topology.isBridging and not self._bridging:
            logger.info(f"Bridging enabled ({len(topology.zones)} zone(s))")
        elif not topology.isBridging and self._bridging:
            logger.info("Bridging disabled: layout has no warp zones")
        elif not topology.isBridging:
            logger.debug("Layout has no warp zones, pointer sampling stays off")
        self._bridging = topology.isBridging

    def pointer_process(self) -> Optional[Point]:
        """
        Sample the pointer, dispatch, and relocate on a match

        Returns:
            Point the pointer was moved to, or None
        """
        position: Point = self._pointer_source.position_query()
        target: Optional[Point] = self._zone_table.warp_dispatch(position)
        if target is None:
            return None

        logger.debug(f"Warp ({position.x}, {position.y}) -> ({target.x}, {target.y})")
        self._relocator.cursorPosition_set(target)
        self._pointer_source.positionLast_set(target)
        return target

    def iteration_run(self, now: float) -> float:
        """
        Execute one loop iteration

        Args:
            now: Current monotonic time

        Returns:
            Seconds to sleep before the next iteration
        """
        if self._next_check_time is None or now >= self._next_check_time:
            self.surfaces_check()
            self._next_check_time = now + self._check_interval

        if not self._bridging:
            return max(self._next_check_time - now, settings.MIN_POLL_INTERVAL_SEC)

        self.pointer_process()
        interval: float = self._pointer_source.pollInterval_get()
        return max(min(interval, self._next_check_time - now), settings.MIN_POLL_INTERVAL_SEC)

    def run(self, iterations: Optional[int] = None) -> None:
        """
        Run the loop

        Args:
            iterations: Stop after this many iterations; None runs forever
        """
        logger.info("Bridge runtime started")
        count: int = 0
        while iterations is None or count < iterations:
            delay: float = self.iteration_run(self._clock())
            count += 1
            self._sleep(delay)
