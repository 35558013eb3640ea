from datetime import datetime

import imageio.v2 as iio
import numpy as np
import pytest

from camwatch.detection_event import BoundingBox, DetectionEvent, EventType
from camwatch.event_manager import EventManager, event_filename

MOMENT = datetime(2024, 1, 2, 12, 34, 56)


def _event(camera_id=1, timestamp=MOMENT, image_path="") -> DetectionEvent:
    return DetectionEvent(
        track_id=5,
        camera_id=camera_id,
        camera_name="Cam",
        region_name="Zone",
        object_class="car",
        confidence=0.5,
        event_type=EventType.EXIT,
        bbox=BoundingBox(1, 2, 3, 4),
        image_path=image_path,
        timestamp=timestamp,
    )


def test_event_filename():
    assert event_filename(7, EventType.FIRST_ENTRY, MOMENT) == "7_123456_ENTRY.jpg"
    assert event_filename(7, EventType.PERIODIC, MOMENT).endswith("_PERIODIC.jpg")
    assert event_filename(9, EventType.EXIT, MOMENT).startswith("9_")


def test_defaults():
    manager = EventManager()
    assert str(manager.base_directory) == "events"
    assert manager.periodic_capture_interval == 30


def test_add_and_filter_by_camera():
    manager = EventManager()
    manager.add_event(_event(camera_id=1))
    manager.add_event(_event(camera_id=2))
    manager.add_event(_event(camera_id=1))
    assert len(manager) == 3
    assert [e.camera_id for e in manager.events_by_camera(1)] == [1, 1]
    assert manager.events_by_camera(3) == []


def test_events_returns_copy():
    manager = EventManager()
    manager.add_event(_event())
    manager.events().clear()
    assert len(manager) == 1


def test_time_range_is_inclusive():
    manager = EventManager()
    early = datetime(2024, 1, 1)
    late = datetime(2024, 1, 3)
    for stamp in (early, MOMENT, late):
        manager.add_event(_event(timestamp=stamp))
    assert [e.timestamp for e in manager.events_in_range(early, MOMENT)] == [early, MOMENT]
    assert manager.events_in_range(datetime(2025, 1, 1), datetime(2025, 2, 1)) == []


def test_clear():
    manager = EventManager()
    manager.add_event(_event())
    manager.clear()
    assert len(manager) == 0


def test_event_directory_layout(tmp_path):
    manager = EventManager(tmp_path)
    directory = manager.event_directory("Front Door", "Main Gate", MOMENT)
    assert directory.is_dir()
    assert directory.relative_to(tmp_path).parts == ("Front_Door", "Main_Gate", "2024-01-02")


def test_save_event_image(tmp_path):
    manager = EventManager(tmp_path)
    image = np.full((20, 30, 3), 128, dtype=np.uint8)
    path = manager.save_event_image(image, "Cam A", "Zone", 7, EventType.FIRST_ENTRY, MOMENT)
    assert path.endswith(event_filename(7, EventType.FIRST_ENTRY, MOMENT))
    assert iio.imread(path).shape == (20, 30, 3)


def test_save_empty_image_raises(tmp_path):
    manager = EventManager(tmp_path)
    with pytest.raises(ValueError):
        manager.save_event_image(np.zeros((0, 0, 3)), "Cam", "Zone", 1, EventType.EXIT)


def test_metadata_round_trip(tmp_path):
    manager = EventManager(tmp_path)
    directory = manager.event_directory("Cam", "Zone", MOMENT)
    inside = _event(image_path=str(directory / "a.jpg"))
    outside = _event(image_path=str(tmp_path / "other" / "b.jpg"))
    manager.add_event(inside)
    manager.add_event(outside)
    path = manager.save_metadata(directory)
    assert path.name == "metadata.json"

    reloaded = EventManager(tmp_path)
    assert reloaded.load_from_directory() == 1
    assert reloaded.events() == [inside]


def test_load_skips_invalid_json(tmp_path):
    bad = tmp_path / "x" / "metadata.json"
    bad.parent.mkdir()
    bad.write_text("{not json", encoding="utf-8")
    manager = EventManager(tmp_path)
    assert manager.load_from_directory() == 0
    assert len(manager) == 0


def test_load_missing_directory(tmp_path):
    manager = EventManager(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        manager.load_from_directory()