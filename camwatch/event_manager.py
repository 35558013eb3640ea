"""Storage of detection events and their cropped images."""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

import imageio.v2 as iio
import numpy as np

from camwatch.detection_event import DetectionEvent, EventType

log = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.json"


def event_filename(track_id: int, event_type: EventType, now: datetime | None = None) -> str:
    """Return the image file name for an event captured at ``now``."""
    moment = now or datetime.now()
    return f"{track_id}_{moment:%H%M%S}_{event_type.value}.jpg"


class EventManager:
    """Collects detection events and stores their images on disk."""

    def __init__(
        self,
        base_directory: str | os.PathLike[str] = "events",
        periodic_capture_interval: int = 30,
    ) -> None:
        self.base_directory = Path(base_directory)
        self.periodic_capture_interval = periodic_capture_interval
        self._events: list[DetectionEvent] = []
        self._lock = threading.RLock()

    def add_event(self, event: DetectionEvent) -> None:
        with self._lock:
            self._events.append(event)

    def events(self) -> list[DetectionEvent]:
        with self._lock:
            return list(self._events)

    def events_by_camera(self, camera_id: int) -> list[DetectionEvent]:
        with self._lock:
            return [event for event in self._events if event.camera_id == camera_id]

    def events_in_range(self, start: datetime, end: datetime) -> list[DetectionEvent]:
        """Return the events whose timestamp lies in [start, end]."""
        with self._lock:
            return [event for event in self._events if start <= event.timestamp <= end]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def event_directory(
        self, camera_name: str, region_name: str, now: datetime | None = None
    ) -> Path:
        """Create and return base/camera/region/YYYY-MM-DD."""
        moment = now or datetime.now()
        directory = (
            self.base_directory
            / camera_name.replace(" ", "_")
            / region_name.replace(" ", "_")
            / moment.strftime("%Y-%m-%d")
        )
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def save_event_image(
        self,
        image: Any,
        camera_name: str,
        region_name: str,
        track_id: int,
        event_type: EventType,
        now: datetime | None = None,
    ) -> str:
        """Write a cropped image for an event and return its path."""
        if image is None or np.asarray(image).size == 0:
            raise ValueError("cannot save an empty event image")
        moment = now or datetime.now()
        directory = self.event_directory(camera_name, region_name, moment)
        path = directory / event_filename(track_id, event_type, moment)
        iio.imwrite(path, np.asarray(image))
        return str(path)

    def save_metadata(self, directory: str | os.PathLike[str]) -> Path:
        """Write the events whose images lie in ``directory`` to its metadata file."""
        directory_text = str(directory)
        with self._lock:
            selected = [
                event.to_dict() for event in self._events if directory_text in event.image_path
            ]
        path = Path(directory) / METADATA_FILENAME
        path.write_text(json.dumps({"events": selected}, indent=4), encoding="utf-8")
        return path

    def load_from_directory(self) -> int:
        """Load events from every metadata file below the base directory.

        Returns the number of events loaded; unreadable files are skipped.
        """
        if not self.base_directory.is_dir():
            raise FileNotFoundError(f"events directory not found: {self.base_directory}")
        loaded = 0
        with self._lock:
            for path in sorted(self.base_directory.rglob(METADATA_FILENAME)):
                if not path.is_file():
                    continue
                try:
                    data = json.loads(path.read_text(encoding="utf-8"))
                except (OSError, ValueError) as exc:
                    log.error("Cannot read %s: %s", path, exc)
                    continue
                if not isinstance(data, dict):
                    log.error("Invalid JSON: %s", path)
                    continue
                items = data.get("events")
                if not isinstance(items, list):
                    items = []
                try:
                    for item in items:
                        if not isinstance(item, dict):
                            continue
                        self._events.append(DetectionEvent.from_dict(item))
                        loaded += 1
                except (KeyError, ValueError, TypeError) as exc:
                    log.error("Error loading %s: %s", path, exc)
                    continue
                log.info("Loaded %d events from: %s", len(items), path)
        log.info("Total events loaded: %d", loaded)
        return loaded