"""Grid display settings persisted in an INI file."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

SECTION = "Display"

WIDTH_RANGE = (320, 1920)
HEIGHT_RANGE = (240, 1080)
ROWS_RANGE = (1, 8)
COLUMNS_RANGE = (1, 8)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


@dataclass(frozen=True)
class DisplaySettings:
    """Size of a camera cell and the shape of the camera grid."""

    camera_width: int = 640
    camera_height: int = 480
    grid_rows: int = 2
    grid_columns: int = 2

    def clamped(self) -> DisplaySettings:
        """Return these settings limited to the ranges the editor allows."""
        return DisplaySettings(
            _clamp(self.camera_width, WIDTH_RANGE),
            _clamp(self.camera_height, HEIGHT_RANGE),
            _clamp(self.grid_rows, ROWS_RANGE),
            _clamp(self.grid_columns, COLUMNS_RANGE),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "CameraWidth": self.camera_width,
            "CameraHeight": self.camera_height,
            "GridRows": self.grid_rows,
            "GridColumns": self.grid_columns,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DisplaySettings:
        """Read settings by key; missing keys take the defaults."""
        defaults = cls()
        return cls(
            int(data.get("CameraWidth", defaults.camera_width)),
            int(data.get("CameraHeight", defaults.camera_height)),
            int(data.get("GridRows", defaults.grid_rows)),
            int(data.get("GridColumns", defaults.grid_columns)),
        )


class SettingsStore:
    """Loads and saves display settings in the Display section of an INI file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        if self.path.exists():
            parser.read(self.path, encoding="utf-8")
        return parser

    def load(self) -> DisplaySettings:
        """Return the stored settings, or the defaults when none are stored."""
        parser = self._parser()
        if not parser.has_section(SECTION):
            return DisplaySettings()
        return DisplaySettings.from_dict(dict(parser[SECTION])).clamped()

    def save(self, settings: DisplaySettings) -> DisplaySettings:
        """Store the settings, keeping other sections, and return what was stored."""
        stored = settings.clamped()
        parser = self._parser()
        parser[SECTION] = {key: str(value) for key, value in stored.to_dict().items()}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as handle:
            parser.write(handle)
        return stored