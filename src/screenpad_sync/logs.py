from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Send the package's log records to stderr with a timestamp prefix.

    Calling it again replaces the handler installed by the previous call.
    """

    global _handler

    log = logging.getLogger("screenpad_sync")
    if _handler is not None:
        log.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    log.addHandler(_handler)
    log.setLevel(level)
    return log
