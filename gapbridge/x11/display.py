"""X11 display connection, surface enumeration and pointer relocation"""

import logging
from typing import Optional

from Xlib import display as xdisplay
from Xlib.display import Display

from gapbridge.common.types import Point, Surface, coordinate_round

logger = logging.getLogger(__name__)


class DisplayManager:
    """Manages X11 display connection, monitor geometry and the pointer"""

    def __init__(self, display_name: Optional[str] = None) -> None:
        """
        Initialize display manager

        Args:
            display_name: X11 display name (e.g., ':0'), None for default
        """
        self._display: Optional[Display] = None
        self._display_name: Optional[str] = display_name

    def connection_establish(self) -> None:
        """Establish connection to X11 display"""
        self._display = xdisplay.Display(self._display_name)
        logger.debug(f"Connected to X11 display {self._display.get_display_name()}")

    def connection_close(self) -> None:
        """Close X11 display connection"""
        if self._display is not None:
            self._display.close()
            self._display = None

    def display_get(self) -> Display:
        """
        Get X11 display object

        Returns:
            X11 Display object

        Raises:
            RuntimeError: If not connected to display
        """
        if self._display is None:
            raise RuntimeError("Not connected to X11 display")
        return self._display

    def __enter__(self) -> "DisplayManager":
        """Context manager entry"""
        self.connection_establish()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit"""
        self.connection_close()

    @staticmethod
    def surface_fromPixels(x: int, y: int, width: int, height: int) -> Surface:
        """
        Convert an X11 pixel rectangle to a Surface

        The rectangle is half-open: it covers columns x .. x+width-1, so two
        monitors that touch natively share an edge value. Compile with
        settings.PIXEL_INSET to keep zones on reachable pixels.

        Args:
            x: Left pixel column
            y: Top pixel row (X11 y grows downward)
            width: Width in pixels
            height: Height in pixels

        Returns:
            Surface with half-open pixel edges
        """
        return Surface(left=x, bottom=y, right=x + width, top=y + height)

    def surfaces_enumerate(self) -> list[Surface]:
        """
        Enumerate active monitors via RandR

        Falls back to the root window geometry when RandR is unavailable
        or reports no active CRTC.

        Returns:
            Surfaces in CRTC order

        Raises:
            RuntimeError: If not connected to display
        """
        display = self.display_get()
        root = display.screen().root
        surfaces: list[Surface] = []

        if display.has_extension("RANDR"):
            resources = root.xrandr_get_screen_resources()
            for crtc in resources.crtcs:
                info = display.xrandr_get_crtc_info(crtc, resources.config_timestamp)
                # Disabled CRTCs report mode 0 and an empty rectangle
                if info.mode == 0 or info.width == 0 or info.height == 0:
                    continue
                surfaces.append(self.surface_fromPixels(info.x, info.y, info.width, info.height))
        else:
            logger.warning("RANDR extension not available, using root window geometry")

        if not surfaces:
            geom = root.get_geometry()
            surfaces.append(self.surface_fromPixels(0, 0, geom.width, geom.height))

        return surfaces

    def pointerPosition_query(self) -> Point:
        """
        Query current pointer position in root window coordinates

        Returns:
            Current pointer position

        Raises:
            RuntimeError: If not connected to display
        """
        root = self.display_get().screen().root
        pointer_data = root.query_pointer()
        return Point(x=pointer_data.root_x, y=pointer_data.root_y)

    def cursorPosition_set(self, point: Point) -> None:
        """
        Move cursor to absolute position

        Args:
            point: Target position, rounded to whole pixels

        Raises:
            RuntimeError: If not connected to display
        """
        display = self.display_get()
        root = display.screen().root
        root.warp_pointer(coordinate_round(point.x), coordinate_round(point.y))
        display.sync()
