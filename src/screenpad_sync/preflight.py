from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from screenpad_sync.config import SyncConfig
from screenpad_sync.system.backlight import Backlight, BacklightError, BacklightIO, SysfsIO

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Fatal problem with the backlight files, detected before the sync loop."""


@dataclass(frozen=True)
class Ranges:
    source: int
    target: int


def _require_access(path: Path, mode: int, what: str) -> None:
    if not os.access(path, mode):
        raise StartupError(f"Cannot {what}: {path}")


def check_paths(cfg: SyncConfig) -> None:
    src, dst = cfg.source, cfg.target

    for path in (src.brightness, src.max_brightness, dst.max_brightness, dst.brightness):
        if not path.exists():
            raise StartupError(f"File not found: {path}")

    _require_access(src.brightness, os.R_OK, f"read {src.name} brightness")
    _require_access(src.max_brightness, os.R_OK, f"read {src.name} max_brightness")
    _require_access(dst.max_brightness, os.R_OK, f"read {dst.name} max_brightness")
    _require_access(dst.brightness, os.W_OK, f"write to {dst.name} brightness")


def read_range(bl: Backlight, io: BacklightIO) -> int:
    try:
        value = io.read_int(bl.max_brightness)
    except BacklightError as e:
        raise StartupError(f"{bl.name} max_brightness invalid: {e}") from e
    if value <= 0:
        raise StartupError(f"{bl.name} max_brightness invalid: {value} ({bl.max_brightness})")
    return value


def preflight(cfg: SyncConfig, io: BacklightIO | None = None) -> Ranges:
    """Validate both endpoints once and return their fixed ranges."""

    io = io or SysfsIO()
    check_paths(cfg)
    ranges = Ranges(source=read_range(cfg.source, io), target=read_range(cfg.target, io))
    logger.info(
        "Syncing %s (max %d) -> %s (max %d)",
        cfg.source.name,
        ranges.source,
        cfg.target.name,
        ranges.target,
    )
    return ranges
