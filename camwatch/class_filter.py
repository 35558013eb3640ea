"""Selection of which detected object classes are counted."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Iterable

log = logging.getLogger(__name__)


class ClassFilter:
    """A thread-safe set of selected class ids; empty means count all."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._selected: frozenset[int] = frozenset()

    def select(self, class_ids: Iterable[int]) -> None:
        selected = frozenset(class_ids)
        with self._lock:
            self._selected = selected
        if selected:
            log.info("ClassFilter: Counting %d selected class(es)", len(selected))
        else:
            log.info("ClassFilter: Count ALL classes mode enabled")

    def selected_classes(self) -> frozenset[int]:
        with self._lock:
            return self._selected

    def should_count(self, class_id: int) -> bool:
        with self._lock:
            return not self._selected or class_id in self._selected

    def is_count_all(self) -> bool:
        with self._lock:
            return not self._selected

    def selected_count(self) -> int:
        with self._lock:
            return len(self._selected)

    def clear(self) -> None:
        with self._lock:
            self._selected = frozenset()
        log.info("ClassFilter: Selection cleared - counting all classes")


@functools.lru_cache(maxsize=None)
def default_class_filter() -> ClassFilter:
    """Return the filter shared by the whole application."""
    return ClassFilter()