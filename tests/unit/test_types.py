"""Unit tests for common types (Point, Surface, ZoneKind)"""

import math

import pytest

from gapbridge.common.types import Point, Surface, ZoneKind, coordinate_round


class TestPoint:
    """Test Point dataclass"""

    def test_creation(self):
        """Test Point creation"""
        point = Point(x=100, y=200)
        assert point.x == 100
        assert point.y == 200

    def test_immutable(self):
        """Test Point is immutable"""
        point = Point(x=100, y=200)
        with pytest.raises(AttributeError):
            point.x = 300

    def test_rounded_nearest(self):
        """Test rounding to nearest integer"""
        assert Point(x=99.6, y=75.2).rounded() == Point(x=100, y=75)

    def test_rounded_ties_away_from_zero(self):
        """Test .5 rounds away from zero on both signs"""
        assert Point(x=2.5, y=-2.5).rounded() == Point(x=3, y=-3)
        assert Point(x=0.5, y=-0.5).rounded() == Point(x=1, y=-1)

    def test_rounded_returns_ints(self):
        """Test rounded coordinates are ints"""
        rounded = Point(x=10.4, y=-3.7).rounded()
        assert isinstance(rounded.x, int)
        assert isinstance(rounded.y, int)


class TestCoordinateRound:
    """Test coordinate_round helper"""

    def test_integer_passthrough(self):
        """Test whole numbers are unchanged"""
        assert coordinate_round(42) == 42
        assert coordinate_round(-7.0) == -7

    def test_below_half(self):
        """Test values below .5 round toward zero"""
        assert coordinate_round(1.49) == 1
        assert coordinate_round(-1.49) == -1


class TestSurface:
    """Test Surface dataclass"""

    def test_dimensions(self):
        """Test width and height"""
        surface = Surface(left=10, bottom=20, right=110, top=70)
        assert surface.width == 100
        assert surface.height == 50

    def test_valid(self):
        """Test positive extents are valid"""
        assert Surface(left=0, bottom=0, right=1, top=1).isValid() is True

    @pytest.mark.parametrize(
        "surface",
        [
            Surface(left=0, bottom=0, right=0, top=100),
            Surface(left=0, bottom=0, right=100, top=0),
            Surface(left=100, bottom=0, right=0, top=100),
            Surface(left=0, bottom=100, right=100, top=0),
            Surface(left=math.nan, bottom=0, right=100, top=100),
        ],
    )
    def test_invalid(self, surface):
        """Test empty, inverted and NaN rectangles are invalid"""
        assert surface.isValid() is False

    def test_contains_is_strict(self):
        """Test contains() excludes the boundary"""
        surface = Surface(left=0, bottom=0, right=100, top=100)
        assert surface.contains(Point(x=50, y=50)) is True
        assert surface.contains(Point(x=1, y=99)) is True
        assert surface.contains(Point(x=0, y=50)) is False
        assert surface.contains(Point(x=50, y=100)) is False
        assert surface.contains(Point(x=150, y=50)) is False

    def test_hashable(self):
        """Test equal surfaces compare and hash equal"""
        first = Surface(left=0, bottom=0, right=100, top=100)
        second = Surface(left=0, bottom=0, right=100, top=100)
        assert first == second
        assert len({first, second}) == 1


class TestZoneKind:
    """Test ZoneKind helpers"""

    def test_horizontal_kinds(self):
        """Test horizontal kinds have their boundary on x"""
        assert ZoneKind.HORIZONTAL.isHorizontal is True
        assert ZoneKind.HORIZONTAL_GAP.isHorizontal is True
        assert ZoneKind.VERTICAL.isHorizontal is False
        assert ZoneKind.VERTICAL_GAP.isHorizontal is False

    def test_gap_kinds(self):
        """Test gap kinds are flagged"""
        assert ZoneKind.HORIZONTAL_GAP.isGap is True
        assert ZoneKind.VERTICAL_GAP.isGap is True
        assert ZoneKind.HORIZONTAL.isGap is False
        assert ZoneKind.VERTICAL.isGap is False
