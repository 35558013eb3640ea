"""Detection events: an object entering, staying in or leaving a region."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class EventType(enum.Enum):
    """Why an event was captured."""

    FIRST_ENTRY = "ENTRY"
    PERIODIC = "PERIODIC"
    EXIT = "EXIT"


def event_type_from_string(text: str) -> EventType:
    """Parse an event type label; unknown labels mean a first entry."""
    if text == "FIRST_ENTRY":
        return EventType.FIRST_ENTRY
    try:
        return EventType(text)
    except ValueError:
        return EventType.FIRST_ENTRY


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box in pixel coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass
class DetectionEvent:
    """A tracked object observed in a named region of a camera."""

    track_id: int = 0
    camera_id: int = 0
    camera_name: str = ""
    region_name: str = ""
    object_class: str = ""
    confidence: float = 0.0
    event_type: EventType = EventType.FIRST_ENTRY
    bbox: BoundingBox = field(default_factory=BoundingBox)
    image_path: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    frame_number: int = 0
    thumbnail: Any = field(default=None, compare=False, repr=False)

    def event_type_label(self) -> str:
        return self.event_type.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "track_id": self.track_id,
            "camera_id": self.camera_id,
            "camera_name": self.camera_name,
            "region_name": self.region_name,
            "object_class": self.object_class,
            "confidence": self.confidence,
            "event_type": self.event_type_label(),
            "timestamp": self.timestamp.strftime(TIMESTAMP_FORMAT),
            "frame_number": self.frame_number,
            "image_path": self.image_path,
            "bbox": self.bbox.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DetectionEvent:
        """Build an event from a dictionary; missing keys keep their defaults."""
        event = cls()
        if "track_id" in data:
            event.track_id = int(data["track_id"])
        if "camera_id" in data:
            event.camera_id = int(data["camera_id"])
        if "camera_name" in data:
            event.camera_name = str(data["camera_name"])
        if "region_name" in data:
            event.region_name = str(data["region_name"])
        if "object_class" in data:
            event.object_class = str(data["object_class"])
        if "confidence" in data:
            event.confidence = float(data["confidence"])
        if "event_type" in data:
            event.event_type = event_type_from_string(str(data["event_type"]))
        if "timestamp" in data:
            event.timestamp = datetime.strptime(str(data["timestamp"]), TIMESTAMP_FORMAT)
        if "frame_number" in data:
            event.frame_number = int(data["frame_number"])
        if "image_path" in data:
            event.image_path = str(data["image_path"])
        if "bbox" in data:
            box = data["bbox"]
            event.bbox = BoundingBox(
                int(box["x"]), int(box["y"]), int(box["width"]), int(box["height"])
            )
        return event