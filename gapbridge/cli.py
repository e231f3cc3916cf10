"""gapbridge command-line interface"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from gapbridge import __version__


def arguments_parse(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments

    Args:
        argv: Argument list; None reads sys.argv.

    Returns:
        Parsed CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="gapbridge",
        description="Warp the pointer across gaps and misaligned edges between monitors",
    )

    parser.add_argument("--version", action="version", version=f"gapbridge {__version__}")

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: search standard locations)",
    )

    parser.add_argument(
        "--display", type=str, default=None, help="X11 display name (overrides config)"
    )

    parser.add_argument(
        "--check-interval",
        type=float,
        default=None,
        dest="check_interval",
        help="Seconds between monitor layout checks (overrides config)",
    )

    parser.add_argument(
        "--flush-tolerance",
        type=float,
        default=None,
        dest="flush_tolerance",
        help="Largest edge distance treated as touching (overrides config)",
    )

    parser.add_argument(
        "--show-zones",
        action="store_true",
        dest="show_zones",
        help="Print the compiled warp zones for the current layout and exit",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (overrides config)"
    )

    parser.add_argument(
        "--info", action="store_true", help="Enable info logging (overrides config)"
    )

    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (overrides config)"
    )

    parser.add_argument(
        "--error", action="store_true", help="Enable error logging (overrides config)"
    )

    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging (overrides config)"
    )

    return parser.parse_args(argv)


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Most restrictive selected log level or None.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """
    Main entry point for the gapbridge command

    Args:
        argv: Argument list; None reads sys.argv.
    """
    args = arguments_parse(argv)
    args.log_level = logLevelOverride_get(args)

    try:
        from gapbridge.bridge.main import bridge_run

        bridge_run(args)
        sys.exit(0)

    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
