from __future__ import annotations

from pathlib import Path

import pytest

from screenpad_sync.config import SyncConfig
from screenpad_sync.system.backlight import Backlight


def make_backlight(root: Path, name: str, brightness: str, max_brightness: str) -> Backlight:
    d = root / name
    d.mkdir()
    (d / "brightness").write_text(brightness + "\n", encoding="utf-8")
    (d / "max_brightness").write_text(max_brightness + "\n", encoding="utf-8")
    return Backlight.from_sysfs(d)


@pytest.fixture
def sysfs(tmp_path: Path) -> SyncConfig:
    """A fake intel_backlight / asus_screenpad pair under tmp_path."""

    return SyncConfig(
        source=make_backlight(tmp_path, "intel_backlight", "468", "937"),
        target=make_backlight(tmp_path, "asus_screenpad", "0", "255"),
        poll_interval=0.01,
    )
