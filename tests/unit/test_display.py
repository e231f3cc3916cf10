"""Unit tests for X11 DisplayManager"""

import pytest
from unittest.mock import MagicMock, Mock, patch
from gapbridge.common.types import Point, Surface
from gapbridge.x11.display import DisplayManager


def _crtc_info(x, y, width, height, mode=1):
    return Mock(x=x, y=y, width=width, height=height, mode=mode)


class TestDisplayManager:
    """Test DisplayManager against a mocked Xlib display"""

    @pytest.fixture
    def mock_display(self):
        """Create mock Xlib Display"""
        display = MagicMock()
        display.get_display_name.return_value = ":0"
        return display

    @pytest.fixture
    def manager(self, mock_display):
        """Create connected DisplayManager"""
        with patch("gapbridge.x11.display.xdisplay.Display", return_value=mock_display):
            manager = DisplayManager(":0")
            manager.connection_establish()
        return manager

    def test_not_connected_raises(self):
        """Test operations need a connection"""
        manager = DisplayManager()
        with pytest.raises(RuntimeError, match="Not connected to X11 display"):
            manager.display_get()
        with pytest.raises(RuntimeError):
            manager.surfaces_enumerate()

    def test_context_manager(self, mock_display):
        """Test context manager opens and closes the connection"""
        with patch("gapbridge.x11.display.xdisplay.Display", return_value=mock_display) as ctor:
            with DisplayManager(":1") as manager:
                assert manager.display_get() is mock_display
            ctor.assert_called_once_with(":1")
        mock_display.close.assert_called_once()
        with pytest.raises(RuntimeError):
            manager.display_get()

    def test_surface_from_pixels(self):
        """Test pixel rectangles map to half-open edges"""
        assert DisplayManager.surface_fromPixels(1920, 0, 1280, 1024) == Surface(
            left=1920, bottom=0, right=3200, top=1024
        )

    def test_surfaces_enumerate_randr(self, manager, mock_display):
        """Test active CRTCs become surfaces in CRTC order"""
        mock_display.has_extension.return_value = True
        root = mock_display.screen.return_value.root
        root.xrandr_get_screen_resources.return_value = Mock(
            crtcs=[11, 12, 13], config_timestamp=42
        )
        mock_display.xrandr_get_crtc_info.side_effect = [
            _crtc_info(0, 0, 1920, 1080),
            _crtc_info(0, 0, 0, 0, mode=0),
            _crtc_info(2000, 200, 1280, 1024),
        ]

        surfaces = manager.surfaces_enumerate()

        assert surfaces == [
            Surface(left=0, bottom=0, right=1920, top=1080),
            Surface(left=2000, bottom=200, right=3280, top=1224),
        ]
        mock_display.xrandr_get_crtc_info.assert_any_call(11, 42)

    def test_surfaces_enumerate_without_randr(self, manager, mock_display, caplog):
        """Test root window geometry is used without RandR"""
        mock_display.has_extension.return_value = False
        root = mock_display.screen.return_value.root
        root.get_geometry.return_value = Mock(width=1920, height=1080)

        assert manager.surfaces_enumerate() == [Surface(left=0, bottom=0, right=1920, top=1080)]
        assert "RANDR extension not available" in caplog.text

    def test_surfaces_enumerate_no_active_crtc(self, manager, mock_display):
        """Test root geometry is used when every CRTC is disabled"""
        mock_display.has_extension.return_value = True
        root = mock_display.screen.return_value.root
        root.xrandr_get_screen_resources.return_value = Mock(crtcs=[11], config_timestamp=0)
        mock_display.xrandr_get_crtc_info.return_value = _crtc_info(0, 0, 0, 0, mode=0)
        root.get_geometry.return_value = Mock(width=800, height=600)

        assert manager.surfaces_enumerate() == [Surface(left=0, bottom=0, right=800, top=600)]

    def test_pointer_position_query(self, manager, mock_display):
        """Test pointer position comes from the root window"""
        root = mock_display.screen.return_value.root
        root.query_pointer.return_value = Mock(root_x=640, root_y=480)
        assert manager.pointerPosition_query() == Point(x=640, y=480)

    def test_cursor_position_set(self, manager, mock_display):
        """Test warping rounds to whole pixels and flushes"""
        root = mock_display.screen.return_value.root
        manager.cursorPosition_set(Point(x=150.5, y=28.4))
        root.warp_pointer.assert_called_once_with(151, 28)
        mock_display.sync.assert_called_once()
