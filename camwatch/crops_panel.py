"""The list of recent cropped detections shown beside the camera grid."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

Notifier = Callable[[Any, str], Any]
Clock = Callable[[], datetime]

DEFAULT_MAX_CROPS = 100


def _percent(confidence: float) -> str:
    return f"{confidence * 100.0:.1f}"


@dataclass(frozen=True)
class CropItem:
    """A cropped detection with the details shown next to it."""

    crop_image: Any
    camera_id: str
    class_name: str
    timestamp: datetime
    track_id: int
    confidence: float

    def info_text(self) -> str:
        """Return the rich-text description shown under the crop."""
        return (
            f"<b>Camera:</b> {self.camera_id}<br>"
            f"<b>Class:</b> {self.class_name}<br>"
            f"<b>Track ID:</b> {self.track_id}<br>"
            f"<b>Confidence:</b> {_percent(self.confidence)}%<br>"
            f"<b>Time:</b> {self.timestamp:%H:%M:%S}"
        )


def crop_caption(item: CropItem) -> str:
    """Caption sent along with the cropped image."""
    return (
        f"[CROP] Camera: {item.camera_id} | Class: {item.class_name} | "
        f"ID: {item.track_id} | Conf: {_percent(item.confidence)}%"
    )


def full_frame_caption(item: CropItem) -> str:
    """Caption sent along with the full frame."""
    return (
        f"[FULL FRAME] Camera: {item.camera_id} | Class: {item.class_name} | "
        f"ID: {item.track_id} | Time: {item.timestamp:%H:%M:%S}"
    )


class CropsPanel:
    """Keeps the most recent crops, newest first, up to a maximum count.

    When a notifier is given, each crop is sent to it, followed shortly
    after by the full frame.
    """

    full_frame_delay = 0.1

    def __init__(
        self,
        max_crops: int = DEFAULT_MAX_CROPS,
        notifier: Optional[Notifier] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._max_crops = max(1, max_crops)
        self._notifier = notifier
        self._clock: Clock = clock or datetime.now
        self._items: deque[CropItem] = deque()

    @property
    def max_crops(self) -> int:
        return self._max_crops

    def _trim(self) -> None:
        while len(self._items) > self._max_crops:
            self._items.pop()

    def add_crop(
        self,
        crop_image: Any,
        full_frame_image: Any,
        camera_id: str,
        class_name: str,
        track_id: int,
        confidence: float,
    ) -> CropItem:
        """Record a crop at the top of the list and return it."""
        item = CropItem(crop_image, camera_id, class_name, self._clock(), track_id, confidence)
        self._items.appendleft(item)
        self._trim()
        if self._notifier is not None:
            self._notify(item, full_frame_image)
        return item

    def _notify(self, item: CropItem, full_frame_image: Any) -> None:
        notifier = self._notifier
        assert notifier is not None
        notifier(item.crop_image, crop_caption(item))
        caption = full_frame_caption(item)
        if self.full_frame_delay <= 0:
            notifier(full_frame_image, caption)
            return
        timer = threading.Timer(self.full_frame_delay, notifier, args=(full_frame_image, caption))
        timer.daemon = True
        timer.start()

    def clear(self) -> None:
        self._items.clear()

    def set_max_crops(self, max_crops: int) -> None:
        """Change the limit (at least one), dropping the oldest crops beyond it."""
        self._max_crops = max(1, max_crops)
        self._trim()

    def items(self) -> tuple[CropItem, ...]:
        """Return the crops, newest first."""
        return tuple(self._items)

    def count_text(self) -> str:
        return f"Count: {len(self._items)}"

    def __len__(self) -> int:
        return len(self._items)