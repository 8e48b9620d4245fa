"""Main entry point for the portal library viewer."""

import argparse
import logging
import sys
from pathlib import Path

from portallib.app import PortalLibraryApp
from portallib.config import ConfigManager

LOG_FILENAME = "portallib.log"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="portallib", description="Browse the shared VRChat world library."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to config.json (default: ./config.json)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Log file (default: {LOG_FILENAME} next to the config file)",
    )
    return parser.parse_args(argv)


def resolve_log_path(config_path: Path, log_file: Path | None = None) -> Path:
    """Pick the log file location.

    Args:
        config_path: Path of the config file
        log_file: Explicit log file, if given

    Returns:
        ``log_file`` when given, otherwise portallib.log beside the config file
    """
    if log_file is not None:
        return log_file
    return config_path.parent / LOG_FILENAME


def configure_logging(log_path: Path) -> None:
    """Send logs to a file only, so the TUI isn't overwritten."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the portal library viewer."""
    args = parse_args(argv)
    log_path = resolve_log_path(args.config, args.log_file)
    configure_logging(log_path)

    try:
        logger.info("Starting portal library viewer")
        app = PortalLibraryApp(config_manager=ConfigManager(args.config))
        app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\nAn error occurred: {e}", file=sys.stderr)
        print(f"Please check {log_path} for more details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
