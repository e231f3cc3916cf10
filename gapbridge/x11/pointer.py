"""X11 pointer sampling with adaptive poll cadence"""

from typing import Optional, Protocol

from gapbridge.common.settings import settings
from gapbridge.common.types import Point


class PointerQueryProtocol(Protocol):
    """Anything that can report the pointer position"""

    def pointerPosition_query(self) -> Point:
        """Return the current pointer position."""
        ...


class PointerSampler:
    """Samples the pointer and picks the next poll interval

    While the pointer moves it is polled at the active interval so boundary
    crossings are caught quickly; once it stops the idle interval is used.
    """

    def __init__(
        self,
        display_manager: PointerQueryProtocol,
        active_interval_ms: int = 10,
        idle_interval_ms: int = 100,
    ) -> None:
        """
        Initialize pointer sampler

        Args:
            display_manager: Pointer position source
            active_interval_ms: Poll interval while the pointer moves
            idle_interval_ms: Poll interval while the pointer is still
        """
        self._display_manager: PointerQueryProtocol = display_manager
        self._active_interval: float = max(
            active_interval_ms / settings.POLL_INTERVAL_DIVISOR, settings.MIN_POLL_INTERVAL_SEC
        )
        self._idle_interval: float = max(
            idle_interval_ms / settings.POLL_INTERVAL_DIVISOR, settings.MIN_POLL_INTERVAL_SEC
        )
        self._last_position: Optional[Point] = None
        self._moving: bool = False

    def position_query(self) -> Point:
        """
        Query current pointer position and update the movement state

        Returns:
            Current pointer position
        """
        position = self._display_manager.pointerPosition_query()
        self._moving = self._last_position is not None and position != self._last_position
        self._last_position = position
        return position

    def positionLast_set(self, position: Point) -> None:
        """
        Record a position the pointer was moved to programmatically

        Args:
            position: Position just warped to
        """
        self._last_position = position

    def positionLast_get(self) -> Optional[Point]:
        """Get last sampled or warped position"""
        return self._last_position

    @property
    def isMoving(self) -> bool:
        """True when the last sample differed from the one before it"""
        return self._moving

    def pollInterval_get(self) -> float:
        """
        Get seconds to wait before the next sample

        Returns:
            Active interval while moving, idle interval otherwise
        """
        return self._active_interval if self._moving else self._idle_interval
