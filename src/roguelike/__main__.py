from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_gui, run_headless
from .config import Settings
from .exceptions import ConfigError
from .logging_config import configure_logging
from .rendering.terminal import parse_keys

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="roguelike",
        description="Two rooms, one corridor, arrow keys to move, Escape to quit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument("--headless", action="store_true", help="Run without a window, reading keys from --keys")
    parser.add_argument(
        "--keys",
        default="",
        help="Comma separated key script for headless mode, e.g. RIGHT,RIGHT,ESCAPE",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = Settings.load(args.config)
    except ConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        return 1

    if args.headless:
        return run_headless(settings, parse_keys(args.keys))
    return run_gui(settings)


if __name__ == "__main__":
    sys.exit(main())
