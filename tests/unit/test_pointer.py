"""Unit tests for pointer sampling cadence"""

import pytest
from unittest.mock import Mock
from gapbridge.common.types import Point
from gapbridge.x11.pointer import PointerSampler


class TestPointerSampler:
    """Test PointerSampler"""

    @pytest.fixture
    def mock_display_manager(self):
        """Create mock DisplayManager"""
        return Mock()

    @pytest.fixture
    def sampler(self, mock_display_manager):
        """Create PointerSampler with mocked display"""
        return PointerSampler(
            display_manager=mock_display_manager, active_interval_ms=10, idle_interval_ms=100
        )

    def test_position_query_delegates(self, sampler, mock_display_manager):
        """Test position comes from the display manager"""
        mock_display_manager.pointerPosition_query.return_value = Point(x=10, y=20)
        assert sampler.position_query() == Point(x=10, y=20)
        assert sampler.positionLast_get() == Point(x=10, y=20)

    def test_first_sample_is_idle(self, sampler, mock_display_manager):
        """Test the first sample has nothing to compare against"""
        mock_display_manager.pointerPosition_query.return_value = Point(x=10, y=20)
        sampler.position_query()
        assert sampler.isMoving is False
        assert sampler.pollInterval_get() == pytest.approx(0.1)

    def test_movement_switches_to_active(self, sampler, mock_display_manager):
        """Test a changed position selects the active interval"""
        mock_display_manager.pointerPosition_query.side_effect = [
            Point(x=10, y=20),
            Point(x=15, y=20),
        ]
        sampler.position_query()
        sampler.position_query()
        assert sampler.isMoving is True
        assert sampler.pollInterval_get() == pytest.approx(0.01)

    def test_stopping_returns_to_idle(self, sampler, mock_display_manager):
        """Test an unchanged position selects the idle interval again"""
        mock_display_manager.pointerPosition_query.side_effect = [
            Point(x=10, y=20),
            Point(x=15, y=20),
            Point(x=15, y=20),
        ]
        for _ in range(3):
            sampler.position_query()
        assert sampler.isMoving is False
        assert sampler.pollInterval_get() == pytest.approx(0.1)

    def test_warp_is_not_movement(self, sampler, mock_display_manager):
        """Test a recorded warp target is the baseline for the next sample"""
        mock_display_manager.pointerPosition_query.side_effect = [
            Point(x=100, y=50),
            Point(x=151, y=29),
        ]
        sampler.position_query()
        sampler.positionLast_set(Point(x=151, y=29))
        sampler.position_query()
        assert sampler.isMoving is False

    def test_interval_floor(self, mock_display_manager):
        """Test intervals never drop below the runtime floor"""
        sampler = PointerSampler(mock_display_manager, active_interval_ms=1, idle_interval_ms=1)
        assert sampler.pollInterval_get() == pytest.approx(0.005)
