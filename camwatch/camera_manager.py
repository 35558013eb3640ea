"""A registry of cameras with JSON persistence."""

from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any

from camwatch.camera_source import CameraSource, CameraType, Opener

log = logging.getLogger(__name__)


class CameraManager:
    """Holds the configured cameras and hands out their ids."""

    def __init__(self, opener: Opener | None = None) -> None:
        self._opener = opener
        self._cameras: list[CameraSource] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def add_camera(self, name: str, camera_type: CameraType, source: str) -> int:
        """Register a camera and return its new id."""
        with self._lock:
            camera_id = self._next_id
            self._next_id += 1
            self._cameras.append(CameraSource(camera_id, name, camera_type, source, self._opener))
        log.info("Camera added: ID=%d, Name=%r", camera_id, name)
        return camera_id

    def _require(self, id: int) -> CameraSource:
        camera = self.get_camera(id)
        if camera is None:
            raise KeyError(f"camera not found: ID={id}")
        return camera

    def remove_camera(self, id: int) -> None:
        with self._lock:
            camera = self._require(id)
            camera.close()
            self._cameras.remove(camera)
        log.info("Camera removed: ID=%d", id)

    def update_camera(self, id: int, name: str, source: str) -> None:
        with self._lock:
            camera = self._require(id)
            camera.name = name
            camera.set_source(source)
        log.info("Camera updated: ID=%d", id)

    def get_camera(self, id: int) -> CameraSource | None:
        with self._lock:
            return next((cam for cam in self._cameras if cam.id == id), None)

    def cameras(self) -> tuple[CameraSource, ...]:
        with self._lock:
            return tuple(self._cameras)

    def open_camera(self, id: int) -> None:
        with self._lock:
            self._require(id).open()

    def close_camera(self, id: int) -> None:
        with self._lock:
            camera = self.get_camera(id)
            if camera is not None:
                camera.close()

    def close_all(self) -> None:
        with self._lock:
            for camera in self._cameras:
                camera.close()
        log.info("All cameras closed.")

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            return {
                "next_id": self._next_id,
                "cameras": [camera.to_dict() for camera in self._cameras],
            }

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the configuration to a JSON file."""
        data = self.to_dict()
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=4)
        log.info("Configuration saved to: %s", path)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the cameras with those stored in a JSON file."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"configuration in {path} is not a JSON object")
        loaded = [CameraSource.from_dict(item, self._opener) for item in data.get("cameras", [])]
        with self._lock:
            for camera in self._cameras:
                camera.close()
            self._cameras = loaded
            if "next_id" in data:
                self._next_id = int(data["next_id"])
        log.info("Configuration loaded from: %s (%d camera(s))", path, len(loaded))