"""Browsing stored detection events: filtering, paging and thumbnail text."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

import imageio.v2 as iio
import numpy as np

from camwatch.detection_event import DetectionEvent

log = logging.getLogger(__name__)

ALL_CAMERAS = -1
ALL_CAMERAS_LABEL = "All Cameras"
EVENTS_PER_PAGE = 50
THUMBNAIL_WIDTH = 160
MIN_COLUMNS = 3
MAX_COLUMNS = 10


def filter_events(
    events: Iterable[DetectionEvent],
    camera_id: int | None,
    start: datetime,
    end: datetime,
) -> list[DetectionEvent]:
    """Return the events of one camera (or of all, for None or -1) within [start, end]."""
    every_camera = camera_id is None or camera_id == ALL_CAMERAS
    return [
        event
        for event in events
        if (every_camera or event.camera_id == camera_id) and start <= event.timestamp <= end
    ]


def camera_choices(events: Sequence[DetectionEvent]) -> list[tuple[str, int]]:
    """Return (label, camera id) choices: all cameras, then each camera by ascending id.

    A camera is labelled with the name carried by its first event.
    """
    names: dict[int, str] = {}
    for event in events:
        names.setdefault(event.camera_id, event.camera_name)
    return [(ALL_CAMERAS_LABEL, ALL_CAMERAS)] + [
        (names[camera_id], camera_id) for camera_id in sorted(names)
    ]


def optimal_columns(width: int) -> int:
    """Return how many thumbnails fit across ``width`` pixels, between 3 and 10."""
    return max(MIN_COLUMNS, min(MAX_COLUMNS, width // THUMBNAIL_WIDTH))


def grid_positions(count: int, columns: int) -> list[tuple[int, int]]:
    """Return the (row, col) of each of ``count`` thumbnails laid out row by row."""
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")
    return [divmod(index, columns) for index in range(count)]


def _percent(confidence: float) -> int:
    return int(confidence * 100)


def thumbnail_caption(event: DetectionEvent) -> str:
    """Return the rich text shown under an event thumbnail."""
    return (
        f"<b>{event.camera_name}</b><br>{event.region_name}<br>{event.object_class}"
        f"<br><small>{event.timestamp:%m/%d %H:%M:%S}</small>"
    )


def thumbnail_tooltip(event: DetectionEvent) -> str:
    """Return the detailed tooltip of an event thumbnail."""
    return (
        f"<b>Track ID:</b> {event.track_id}<br>"
        f"<b>Camera:</b> {event.camera_name}<br>"
        f"<b>Region:</b> {event.region_name}<br>"
        f"<b>Class:</b> {event.object_class}<br>"
        f"<b>Confidence:</b> {_percent(event.confidence)}%<br>"
        f"<b>Event Type:</b> {event.event_type_label()}<br>"
        f"<b>Time:</b> {event.timestamp:%Y-%m-%d %H:%M:%S}"
    )


def event_details(event: DetectionEvent) -> str:
    """Return the one-line description shown under a full-size event image."""
    return (
        f"<b>Track ID:</b> {event.track_id} | <b>Class:</b> {event.object_class} | "
        f"<b>Confidence:</b> {_percent(event.confidence)}% | "
        f"<b>Type:</b> {event.event_type_label()} | "
        f"<b>Time:</b> {event.timestamp:%Y-%m-%d %H:%M:%S}"
    )


def load_image(path: str | os.PathLike[str]) -> Any | None:
    """Read an event image as an RGB array; None when there is none to read."""
    if not os.fspath(path):
        return None
    try:
        image = np.asarray(iio.imread(path))
    except (OSError, ValueError) as exc:
        log.warning("Cannot load event image %s: %s", path, exc)
        return None
    if image.size == 0:
        return None
    return image


class EventPager:
    """Splits a list of events into pages and tracks the current one."""

    def __init__(self, events: Iterable[DetectionEvent], per_page: int = EVENTS_PER_PAGE) -> None:
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")
        self.events = list(events)
        self.per_page = per_page
        self.page = 0

    def page_count(self) -> int:
        """Return the number of pages; an empty list still has one page."""
        if not self.events:
            return 1
        return -(-len(self.events) // self.per_page)

    def _bounds(self) -> tuple[int, int]:
        start = self.page * self.per_page
        return start, min(start + self.per_page, len(self.events))

    def page_events(self) -> list[DetectionEvent]:
        start, end = self._bounds()
        return self.events[start:end]

    def go_to(self, page: int) -> None:
        """Move to a page, counted from 0."""
        if not 0 <= page < self.page_count():
            raise IndexError(f"page {page} out of range 0..{self.page_count() - 1}")
        self.page = page

    def next(self) -> bool:
        """Move to the next page; return whether there was one."""
        if not self.has_next():
            return False
        self.page += 1
        return True

    def previous(self) -> bool:
        """Move to the previous page; return whether there was one."""
        if not self.has_previous():
            return False
        self.page -= 1
        return True

    def has_next(self) -> bool:
        return self.page < self.page_count() - 1

    def has_previous(self) -> bool:
        return self.page > 0

    def status_text(self) -> str:
        if not self.events:
            return "Total Events: 0"
        start, end = self._bounds()
        return (
            f"Showing {start + 1}-{end} of {len(self.events)} events "
            f"(Page {self.page + 1}/{self.page_count()})"
        )

    def page_label(self) -> str:
        return f"Page {self.page + 1} / {self.page_count()}"