"""Pytest configuration and shared fixtures for gapbridge tests

This module provides common fixtures and test utilities used across
unit tests.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from gapbridge.common.config import Config, ConfigLoader
from gapbridge.common.settings import settings
from gapbridge.common.types import Surface


@pytest.fixture
def sample_config() -> Config:
    """Load sample configuration for testing

    Returns:
        Config object parsed from the repository config.yml
    """
    config_path = Path(__file__).parent.parent / "config.yml"
    if not config_path.exists():
        pytest.skip("config.yml not found - required for this test")
    return ConfigLoader.config_load(config_path)


@pytest.fixture
def reset_settings() -> Generator[None, None, None]:
    """Reset settings singleton between tests

    This fixture ensures each test gets a fresh Settings instance.
    """
    settings._initialized = False
    settings._config = None
    yield
    settings._initialized = False
    settings._config = None


@pytest.fixture
def gapped_layout() -> list[Surface]:
    """Surface A with two neighbors to its right leaving an uncovered middle

    A spans y 0..100; B covers y -50..30 and C covers y 70..170, both
    starting at x=150. The stretch y 30..70 of A's right edge faces nothing.
    """
    return [
        Surface(left=0, bottom=0, right=100, top=100),
        Surface(left=150, bottom=-50, right=250, top=30),
        Surface(left=150, bottom=70, right=250, top=170),
    ]


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)
