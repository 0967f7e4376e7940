from __future__ import annotations

from pathlib import Path

import pytest

from screenpad_sync.config import (
    POLL_INTERVAL,
    ConfigError,
    SyncConfig,
    default_config,
    validate,
)
from screenpad_sync.system.backlight import Backlight


def test_default_config() -> None:
    cfg = default_config()
    assert cfg.source.brightness == Path("/sys/class/backlight/intel_backlight/brightness")
    assert cfg.target.max_brightness == Path("/sys/class/backlight/asus_screenpad/max_brightness")
    assert 0 < cfg.poll_interval < 1
    assert cfg.poll_interval == POLL_INTERVAL


def test_rejects_non_positive_interval(tmp_path: Path) -> None:
    cfg = SyncConfig(
        source=Backlight.from_sysfs(tmp_path / "a"),
        target=Backlight.from_sysfs(tmp_path / "b"),
        poll_interval=0,
    )
    with pytest.raises(ConfigError):
        validate(cfg)


def test_rejects_same_endpoint(tmp_path: Path) -> None:
    bl = Backlight.from_sysfs(tmp_path)
    with pytest.raises(ConfigError):
        validate(SyncConfig(source=bl, target=bl))
