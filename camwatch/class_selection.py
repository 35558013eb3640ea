"""Choosing which model classes are counted."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

NONE_SELECTED_TEXT = "⚠️  No classes selected - Will count ALL classes"


class ClassSelection:
    """Checked state of each model class, with a search filter.

    Class ids are the positions of the names. Changes take effect on apply().
    """

    def __init__(
        self,
        class_names: Sequence[str],
        current_selection: Iterable[int] = (),
    ) -> None:
        self.class_names = tuple(class_names)
        current = frozenset(current_selection)
        self._selected = current
        self._count_all = not current
        self._checked = {i for i in current if 0 <= i < len(self.class_names)}
        self._visible = set(range(len(self.class_names)))

    def _check_id(self, class_id: int) -> None:
        if not 0 <= class_id < len(self.class_names):
            raise KeyError(f"unknown class id: {class_id}")

    def filter(self, search_text: str) -> None:
        """Show only the classes whose name contains the text, ignoring case."""
        needle = search_text.casefold()
        self._visible = {
            i for i, name in enumerate(self.class_names) if needle in name.casefold()
        }

    def visible_ids(self) -> list[int]:
        return sorted(self._visible)

    def set_checked(self, class_id: int, checked: bool) -> None:
        self._check_id(class_id)
        if checked:
            self._checked.add(class_id)
        else:
            self._checked.discard(class_id)

    def select_visible(self) -> None:
        self._checked |= self._visible

    def deselect_visible(self) -> None:
        self._checked -= self._visible

    def checked_ids(self) -> frozenset[int]:
        return frozenset(self._checked)

    def status(self) -> tuple[str, str]:
        """Return the status text and its colour for the current checks."""
        count = len(self._checked)
        total = len(self.class_names)
        if count == 0:
            return NONE_SELECTED_TEXT, "orange"
        if count == total:
            return f"✅ All {count} classes selected", "green"
        return f"✅ {count} of {total} classes selected", "blue"

    @property
    def selected(self) -> frozenset[int]:
        """The classes chosen at the last apply, or the initial selection."""
        return self._selected

    def apply(self) -> str:
        """Commit the checked classes and return the confirmation message."""
        self._selected = frozenset(self._checked)
        self._count_all = not self._selected
        if self._count_all:
            return "No classes selected. Will count ALL classes by default."
        return f"Selected {len(self._selected)} class(es) to count."

    def is_count_all(self) -> bool:
        return self._count_all