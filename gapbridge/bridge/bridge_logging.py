"""
Bridge logging configuration.

Every record carries the running version next to its timestamp, so logs
collected from several machines can be matched to a build.
"""

from __future__ import annotations

import logging

from gapbridge import __version__
from gapbridge.common.config import LoggingConfig

__all__ = ["logging_setup"]

# Xlib reports protocol chatter at DEBUG through its own loggers
NOISY_LOGGERS: tuple[str, ...] = ("Xlib",)


def logging_setup(logging_config: LoggingConfig) -> None:
    """
    Install root handlers for the bridge process.

    Args:
        logging_config:
            Logging section of the effective configuration. `level` names a
            logging level, `file` optionally adds a file handler next to
            stderr, and `format` gets the version tag after `%(asctime)s`.

    Raises:
        ValueError: If the level is not a logging level name.
    """
    numeric_level = logging.getLevelName(logging_config.level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {logging_config.level}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.file:
        handlers.append(logging.FileHandler(logging_config.file))

    logging.basicConfig(
        level=numeric_level,
        format=logging_config.format.replace(
            "%(asctime)s", f"%(asctime)s [v{__version__}]"
        ),
        handlers=handlers,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.INFO))
