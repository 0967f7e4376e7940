from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from screenpad_sync import __version__
from screenpad_sync.config import ConfigError, default_config
from screenpad_sync.controller import Controller
from screenpad_sync.logs import configure_logging
from screenpad_sync.preflight import StartupError, preflight

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="screenpad-sync",
        description="Keep the ScreenPad backlight in step with the main display backlight.",
    )
    ap.add_argument("--version", action="version", version=__version__)
    return ap


def main(argv: list[str] | None = None) -> None:
    _build_parser().parse_args(argv)
    configure_logging()

    try:
        cfg = default_config()
        ranges = preflight(cfg)
    except (ConfigError, StartupError) as e:
        logger.error("%s", e)
        sys.exit(1)

    ctl = Controller(cfg, ranges)
    try:
        asyncio.run(ctl.run())
    except KeyboardInterrupt:
        logger.info("Shutting down")
