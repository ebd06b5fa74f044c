"""TermDash CLI - main entry point."""

import argparse
import logging
import sys

from . import __version__
from .app import DashboardApp
from .config import VIEW_NAMES, RunConfig
from .exceptions import ConfigurationError, TerminalError
from .terminal import TerminalRunner

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Log warnings by default, everything with --verbose. A log file keeps records off the live screen."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termdash",
        description="Terminal dashboard with keyboard navigation between four views",
    )
    parser.add_argument(
        "--view",
        choices=VIEW_NAMES,
        default="dashboard",
        help="View shown at start-up (default: dashboard)",
    )
    parser.add_argument(
        "--refresh-rate",
        type=float,
        default=10.0,
        metavar="FPS",
        help="Maximum redraws per second (default: 10)",
    )
    parser.add_argument(
        "--no-alt-screen",
        action="store_true",
        help="Draw in the normal screen buffer instead of the alternate screen",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print a single frame to stdout and exit",
    )
    parser.add_argument("--width", type=int, help="Frame width for --once")
    parser.add_argument("--height", type=int, help="Frame height for --once")
    parser.add_argument("--log-file", metavar="PATH", help="Write log records to PATH")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", "-V", action="version", version=f"termdash {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the TermDash CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    config = RunConfig(
        initial_view=args.view,
        refresh_per_second=args.refresh_rate,
        alt_screen=not args.no_alt_screen,
    )

    try:
        app = DashboardApp.from_config(config)
        runner = TerminalRunner(app, config)

        if args.once:
            size = runner.console.size
            width = size.width if args.width is None else args.width
            height = size.height if args.height is None else args.height
            sys.stdout.write(runner.snapshot(width, height))
            return 0

        runner.run()
        return 0
    except ConfigurationError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except TerminalError as e:
        print(f"Error running application: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n❌ Operation cancelled", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Application crashed: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
