"""gapbridge main entry point"""

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from gapbridge import __version__
from gapbridge.bridge.bridge_logging import logging_setup
from gapbridge.bridge.runtime import BridgeRuntime
from gapbridge.common.config import Config, ConfigLoader
from gapbridge.common.layout import StaticLayout
from gapbridge.common.settings import settings
from gapbridge.common.types import GapZone, Surface, Zone
from gapbridge.topology.compiler import zones_compile
from gapbridge.x11.display import DisplayManager
from gapbridge.x11.pointer import PointerSampler

logger = logging.getLogger(__name__)


def config_resolve(args: argparse.Namespace) -> Config:
    """
    Load configuration and apply CLI overrides

    An explicit --config must exist; otherwise the standard locations are
    searched and defaults are used when none is found.

    Args:
        args: Parsed CLI args

    Returns:
        Effective configuration

    Raises:
        FileNotFoundError: If --config points to a missing file
    """
    config_path: Optional[Path] = Path(args.config) if getattr(args, "config", None) else None
    overrides = {
        "display": getattr(args, "display", None),
        "flush_tolerance": getattr(args, "flush_tolerance", None),
        "check_interval_seconds": getattr(args, "check_interval", None),
        "log_level": getattr(args, "log_level", None),
    }

    if config_path is None and ConfigLoader.configFile_find() is None:
        logger.debug("No config file found, using defaults")
        return ConfigLoader.overrides_apply(ConfigLoader.configDefault_get(), **overrides)

    return ConfigLoader.configWithOverrides_load(config_path, **overrides)


def zonesReport_format(surfaces: Iterable[Surface], zones: Iterable[Zone]) -> list[str]:
    """
    Render surfaces and zones as human-readable lines

    Args:
        surfaces: Surfaces the zones were compiled from
        zones: Compiled zones

    Returns:
        One line per surface and per zone
    """
    lines: list[str] = []
    for index, surface in enumerate(surfaces):
        lines.append(
            f"surface {index}: left={surface.left} bottom={surface.bottom} "
            f"right={surface.right} top={surface.top}"
        )

    zone_list = list(zones)
    if not zone_list:
        lines.append("no warp zones (bridging disabled)")
    for zone in zone_list:
        if isinstance(zone, GapZone):
            lines.append(
                f"{zone.kind.value}: [{zone.lo}, {zone.hi}] at {zone.boundary} "
                f"-> anchor ({zone.anchor.x}, {zone.anchor.y})"
            )
        else:
            lines.append(
                f"{zone.kind.value}: [{zone.lo}, {zone.hi}) at {zone.boundary} "
                f"-> {zone.target}"
            )
    return lines


def zones_show(config: Config) -> None:
    """
    Print the zones compiled for the configured or live layout

    Args:
        config: Effective configuration
    """
    if config.layout.surfaces:
        surfaces: list[Surface] = list(config.layout.surfaces)
    else:
        with DisplayManager(config.display.name) as display_manager:
            surfaces = display_manager.surfaces_enumerate()

    zones = zones_compile(surfaces, config.display.flush_tolerance, settings.PIXEL_INSET)
    for line in zonesReport_format(surfaces, zones):
        print(line)


def bridge_run(args: argparse.Namespace) -> None:
    """
    Run gapbridge

    Args:
        args: Parsed command line arguments
    """
    config = config_resolve(args)
    logging_setup(config.logging)
    settings.initialize(config)
    logger.info(f"gapbridge {__version__} starting")

    if getattr(args, "show_zones", False):
        zones_show(config)
        return

    with DisplayManager(config.display.name) as display_manager:
        surface_source = (
            StaticLayout(config.layout.surfaces) if config.layout.surfaces else display_manager
        )
        if config.layout.surfaces:
            logger.info(f"Using static layout with {len(config.layout.surfaces)} surface(s)")

        sampler = PointerSampler(
            display_manager,
            active_interval_ms=config.pointer.active_poll_interval_ms,
            idle_interval_ms=config.pointer.idle_poll_interval_ms,
        )
        runtime = BridgeRuntime(
            surface_source=surface_source,
            pointer_source=sampler,
            relocator=display_manager,
            check_interval_seconds=config.display.check_interval_seconds,
            flush_tolerance=config.display.flush_tolerance,
            pixel_inset=settings.PIXEL_INSET,
        )
        try:
            runtime.run()
        finally:
            logger.info("Bridge runtime stopped")
