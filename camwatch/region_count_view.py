"""Tabular view of how many unique objects have entered each region."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

MAX_IDS_DISPLAY = 20
UPDATE_INTERVAL_MS = 500
NO_IDS_TEXT = "(none)"

COLOR_NONE = "#999999"
COLOR_LOW = "#5cb85c"
COLOR_MEDIUM = "#f0ad4e"
COLOR_HIGH = "#d9534f"


def format_ids(ids: Iterable[int], limit: int = MAX_IDS_DISPLAY) -> str:
    """Return the ids in ascending order, comma separated, showing at most ``limit``."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    ordered = sorted(set(ids))
    if not ordered:
        return NO_IDS_TEXT
    text = ", ".join(str(track_id) for track_id in ordered[:limit])
    remaining = len(ordered) - limit
    if remaining > 0:
        text += f" ... (+{remaining} more)"
    return text


def count_color(count: int) -> str:
    """Return the colour used to show a region count."""
    if count == 0:
        return COLOR_NONE
    if count < 5:
        return COLOR_LOW
    if count < 10:
        return COLOR_MEDIUM
    return COLOR_HIGH


@dataclass(frozen=True)
class RegionCountRow:
    """One row of the table: a region, its count and the ids counted there."""

    region_name: str
    count: int
    ids: tuple[int, ...] = ()

    @property
    def ids_text(self) -> str:
        return format_ids(self.ids)

    @property
    def color(self) -> str:
        return count_color(self.count)


def build_rows(
    data: Mapping[str, tuple[int, Iterable[int]]],
) -> list[RegionCountRow]:
    """Turn region name -> (count, ids) into rows ordered by region name."""
    return [
        RegionCountRow(name, int(count), tuple(sorted(set(ids))))
        for name, (count, ids) in sorted(data.items())
    ]


def status_text(rows: Sequence[RegionCountRow]) -> str:
    """Return the summary line shown under the table."""
    total = sum(row.count for row in rows)
    return f"Total Regions: {len(rows)} | Total Objects Counted: {total}"


def export_filename(now: datetime | None = None) -> str:
    """Return the suggested file name for exporting the counts."""
    moment = now or datetime.now()
    return f"region_count_{moment:%Y%m%d_%H%M%S}.json"