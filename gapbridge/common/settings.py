"""Application settings singleton - single source of truth for configuration

This module provides a singleton Settings class that consolidates:
1. Geometry constants shared by the compiler and the dispatcher
2. Runtime tuning constants (poll interval conversion and floors)
3. Runtime configuration from config.yml

Usage:
    from gapbridge.common.settings import settings

    # Initialize once at startup with loaded config
    config = ConfigLoader.config_load()
    settings.initialize(config)

    # Use anywhere in the application
    anchor_x = surface.left + settings.ANCHOR_INSET
"""

from typing import Optional

from gapbridge.common.config import Config


class Settings:
    """Singleton settings manager combining config.yml and geometry constants

    Compiled zone tables are not stored here; they are owned by
    a ZoneTable instance that the host passes around explicitly.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._config: Optional[Config] = None

    def initialize(self, config: Config) -> None:
        """
        Initialize with loaded configuration

        Args:
            config: Loaded application configuration
        """
        self._config = config

    # =========================================================================
    # Geometry Constants
    # =========================================================================

    ZONE_EXIT_STEP: int = 1
    """Units past an EdgeZone target where the pointer lands

    Landing exactly on the neighbor's edge would put the pointer on that
    neighbor's own return zone and bounce it straight back.
    """

    ANCHOR_INSET: int = 1
    """Units inside a neighbor's near edge where GapZone anchors are placed

    Also the offset of the anchor from a covered span end along the edge.
    """

    PIXEL_INSET: int = 1
    """Offset between the high edge of an X11 monitor rectangle and its last pixel

    Monitor rectangles are half-open (`right = x + width`), so touching monitors
    share an edge value while the pointer stops one pixel short of it.
    """

    # =========================================================================
    # Runtime Constants
    # =========================================================================

    POLL_INTERVAL_DIVISOR: float = 1000.0
    """Convert *_poll_interval_ms from config to seconds for time.sleep()"""

    MIN_POLL_INTERVAL_SEC: float = 0.005
    """Lower bound on any sleep in the runtime loop"""

    # =========================================================================
    # Runtime Configuration Access
    # =========================================================================

    @property
    def config(self) -> Config:
        """
        Get loaded configuration object

        Returns:
            Loaded Config

        Raises:
            RuntimeError: If initialize() has not been called
        """
        if self._config is None:
            raise RuntimeError("Settings not initialized. Call settings.initialize(config) first.")
        return self._config


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from gapbridge.common.settings import settings
"""
