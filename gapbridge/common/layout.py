"""Static surface layout used instead of live display enumeration"""

from typing import Iterable

from gapbridge.common.types import Surface


class StaticLayout:
    """Surface source backed by a fixed list (from config.yml or tests)"""

    def __init__(self, surfaces: Iterable[Surface]) -> None:
        """
        Initialize static layout

        Args:
            surfaces: Rectangles in the order they should be reported
        """
        self._surfaces: tuple[Surface, ...] = tuple(surfaces)

    def surfaces_enumerate(self) -> list[Surface]:
        """
        Report the configured surfaces

        Returns:
            Copy of the configured surface list
        """
        return list(self._surfaces)
