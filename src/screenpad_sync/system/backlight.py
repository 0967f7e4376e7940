from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

_LEVEL_RE = re.compile(r"[0-9]+")


class BacklightError(RuntimeError):
    pass


@dataclass(frozen=True)
class Backlight:
    brightness: Path
    max_brightness: Path

    @classmethod
    def from_sysfs(cls, sysfs_dir: str | Path) -> Backlight:
        d = Path(sysfs_dir)
        return cls(brightness=d / "brightness", max_brightness=d / "max_brightness")

    @property
    def name(self) -> str:
        return self.brightness.parent.name


def parse_level(text: str) -> int:
    """Parse a sysfs brightness value: plain base-10 digits, no sign."""

    raw = text.strip()
    if not _LEVEL_RE.fullmatch(raw):
        raise ValueError(f"not a non-negative integer: {raw!r}")
    return int(raw)


class BacklightIO(Protocol):
    def read_int(self, path: Path) -> int: ...

    def write_int(self, path: Path, value: int) -> None: ...


class SysfsIO:
    """File-backed BacklightIO. Opens and closes the file on every call."""

    def read_int(self, path: Path) -> int:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise BacklightError(f"cannot read {path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise BacklightError(f"{path}: undecodable value: {e.object[:16]!r}") from e
        try:
            return parse_level(text)
        except ValueError as e:
            raise BacklightError(f"{path}: {e}") from e

    def write_int(self, path: Path, value: int) -> None:
        try:
            Path(path).write_text(str(int(value)), encoding="utf-8")
        except OSError as e:
            raise BacklightError(f"cannot write {path}: {e.strerror or e}") from e
