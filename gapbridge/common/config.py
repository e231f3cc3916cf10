"""Configuration file loading and management"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from gapbridge.common.types import Surface

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class DisplayConfig:
    """Display and topology settings"""
    name: Optional[str] = None
    flush_tolerance: float = 0
    check_interval_seconds: float = 3.0


@dataclass
class PointerConfig:
    """Pointer sampling cadence"""
    active_poll_interval_ms: int = 10
    idle_poll_interval_ms: int = 100


@dataclass
class LayoutConfig:
    """Static surface layout; empty means enumerate surfaces from X11"""
    surfaces: List[Surface] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging configuration settings"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class Config:
    """Complete application configuration"""
    display: DisplayConfig
    pointer: PointerConfig
    layout: LayoutConfig
    logging: LoggingConfig


class ConfigLoader:
    """Loads and parses configuration from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "config.yml",
        "~/.config/gapbridge/config.yml",
        "/etc/gapbridge/config.yml",
    ]

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find configuration file in standard locations

        Returns:
            Path to config file, or None if not found
        """
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the document is not a mapping
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def surface_parse(entry: Any) -> Surface:
        """
        Parse one static surface entry

        Args:
            entry: Mapping with left, bottom, right and top keys

        Returns:
            Parsed Surface (not validated; the compiler skips malformed ones)

        Raises:
            ValueError: If entry is not a mapping
            KeyError: If an edge is missing
        """
        if not isinstance(entry, dict):
            raise ValueError(f"Surface entry must be a mapping, got {entry!r}")
        return Surface(
            left=float(entry["left"]),
            bottom=float(entry["bottom"]),
            right=float(entry["right"]),
            top=float(entry["top"]),
        )

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> Config:
        """
        Parse configuration dictionary into Config object

        Every section and key is optional; missing values take the
        dataclass defaults.

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed Config object

        Raises:
            ValueError: If a section or surface entry has the wrong shape
            KeyError: If a surface entry misses an edge
        """
        display_data = data.get("display") or {}
        display_defaults = DisplayConfig()
        display = DisplayConfig(
            name=display_data.get("name"),
            flush_tolerance=display_data.get("flush_tolerance", display_defaults.flush_tolerance),
            check_interval_seconds=display_data.get(
                "check_interval_seconds", display_defaults.check_interval_seconds
            ),
        )

        pointer_data = data.get("pointer") or {}
        pointer_defaults = PointerConfig()
        pointer = PointerConfig(
            active_poll_interval_ms=pointer_data.get(
                "active_poll_interval_ms", pointer_defaults.active_poll_interval_ms
            ),
            idle_poll_interval_ms=pointer_data.get(
                "idle_poll_interval_ms", pointer_defaults.idle_poll_interval_ms
            ),
        )

        layout_data = data.get("layout") or {}
        surfaces_data = layout_data.get("surfaces") or []
        if not isinstance(surfaces_data, list):
            raise ValueError("layout.surfaces must be a list")
        layout = LayoutConfig(
            surfaces=[ConfigLoader.surface_parse(entry) for entry in surfaces_data]
        )

        logging_data = data.get("logging") or {}
        logging_defaults = LoggingConfig()
        logging = LoggingConfig(
            level=logging_data.get("level", logging_defaults.level),
            file=logging_data.get("file"),
            format=logging_data.get("format", logging_defaults.format),
        )

        if display.check_interval_seconds <= 0:
            raise ValueError("display.check_interval_seconds must be positive")
        if pointer.active_poll_interval_ms <= 0 or pointer.idle_poll_interval_ms <= 0:
            raise ValueError("pointer poll intervals must be positive")

        return Config(
            display=display,
            pointer=pointer,
            layout=layout,
            logging=logging,
        )

    @staticmethod
    def configDefault_get() -> Config:
        """
        Build a configuration with every default applied

        Returns:
            Default Config object
        """
        return ConfigLoader.config_parse({})

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> Config:
        """
        Load configuration from file

        Args:
            file_path: Optional path to config file. If None, searches standard locations.

        Returns:
            Parsed Config object

        Raises:
            FileNotFoundError: If config file not found
            ValueError: If config file is invalid
        """
        if file_path is None:
            file_path = ConfigLoader.configFile_find()
            if file_path is None:
                raise FileNotFoundError(
                    f"Config file not found in standard locations: "
                    f"{ConfigLoader.DEFAULT_CONFIG_PATHS}"
                )

        data = ConfigLoader.yaml_load(file_path)
        return ConfigLoader.config_parse(data)

    @staticmethod
    def configWithOverrides_load(
        file_path: Optional[Path] = None,
        **overrides: Any
    ) -> Config:
        """
        Load configuration and apply command-line overrides

        Args:
            file_path: Optional path to config file
            **overrides: Key-value pairs to override config values

        Returns:
            Config object with overrides applied

        Example:
            config = ConfigLoader.configWithOverrides_load(
                display=":1",
                flush_tolerance=0
            )
        """
        config = ConfigLoader.config_load(file_path)
        ConfigLoader.overrides_apply(config, **overrides)
        return config

    @staticmethod
    def overrides_apply(config: Config, **overrides: Any) -> Config:
        """
        Apply command-line overrides in place

        Args:
            config: Config to modify
            **overrides: Override values; None means "not given"

        Returns:
            The same Config object
        """
        if overrides.get("display") is not None:
            config.display.name = overrides["display"]
        if overrides.get("flush_tolerance") is not None:
            config.display.flush_tolerance = overrides["flush_tolerance"]
        if overrides.get("check_interval_seconds") is not None:
            config.display.check_interval_seconds = overrides["check_interval_seconds"]
        if overrides.get("log_level") is not None:
            config.logging.level = overrides["log_level"]
        return config
