from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from screenpad_sync.config import SyncConfig
from screenpad_sync.preflight import Ranges
from screenpad_sync.scaling import scale
from screenpad_sync.system.backlight import BacklightError, BacklightIO, SysfsIO

logger = logging.getLogger(__name__)


@dataclass
class SyncState:
    # None until the initial sync has happened.
    last_observed: int | None = None


@dataclass
class Controller:
    cfg: SyncConfig
    ranges: Ranges
    io: BacklightIO = field(default_factory=SysfsIO)

    def __post_init__(self) -> None:
        self.state = SyncState()

    def push(self, source_value: int) -> bool:
        """Write the scaled value to the target. Failures are logged, not raised."""

        value = scale(source_value, self.ranges.source, self.ranges.target)
        try:
            self.io.write_int(self.cfg.target.brightness, value)
        except BacklightError as e:
            logger.error("Failed to write %d: %s", value, e)
            return False
        logger.debug(
            "%s %d -> %s %d", self.cfg.source.name, source_value, self.cfg.target.name, value
        )
        return True

    def step(self) -> bool:
        """Poll the source once. Returns True if a write was attempted."""

        try:
            current = self.io.read_int(self.cfg.source.brightness)
        except BacklightError as e:
            logger.error("Failed to read %s brightness: %s", self.cfg.source.name, e)
            return False

        if current == self.state.last_observed:
            return False

        self.push(current)
        self.state.last_observed = current
        return True

    async def run(self) -> None:
        self.step()
        while True:
            await asyncio.sleep(self.cfg.poll_interval)
            self.step()
