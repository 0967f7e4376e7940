from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from screenpad_sync.system.backlight import Backlight

SOURCE_SYSFS = Path("/sys/class/backlight/intel_backlight")
TARGET_SYSFS = Path("/sys/class/backlight/asus_screenpad")

# Seconds between polls of the source brightness.
POLL_INTERVAL = 0.1


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SyncConfig:
    source: Backlight
    target: Backlight
    poll_interval: float = POLL_INTERVAL


def default_config() -> SyncConfig:
    cfg = SyncConfig(
        source=Backlight.from_sysfs(SOURCE_SYSFS),
        target=Backlight.from_sysfs(TARGET_SYSFS),
        poll_interval=POLL_INTERVAL,
    )
    validate(cfg)
    return cfg


def validate(cfg: SyncConfig) -> None:
    if not cfg.poll_interval > 0:
        raise ConfigError(f"poll_interval must be > 0: {cfg.poll_interval}")

    if cfg.source.brightness == cfg.target.brightness:
        raise ConfigError(f"source and target share a brightness file: {cfg.source.brightness}")
