"""A fixed grid of camera cells, filled in row-major order."""

from __future__ import annotations

from typing import Any


class GridFullError(Exception):
    """Raised when a camera is added to a grid with no free cell."""


class CameraGrid:
    """Places camera widgets in the first free cell of a rows x cols grid."""

    PLACEHOLDER_TEXT = "Camera Stopped"

    def __init__(self, rows: int = 2, cols: int = 2) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must have at least one row and column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: dict[tuple[int, int], tuple[int, Any]] = {}
        self._positions: dict[int, tuple[int, int]] = {}

    def _next_free_cell(self) -> tuple[int, int] | None:
        return next(
            (
                (row, col)
                for row in range(self.rows)
                for col in range(self.cols)
                if (row, col) not in self._cells
            ),
            None,
        )

    def add_camera(self, widget: Any, camera_id: int) -> tuple[int, int]:
        """Put a widget in the next free cell and return its (row, col)."""
        if widget is None:
            raise ValueError("cannot add a missing camera widget")
        if camera_id in self._positions:
            raise ValueError(f"camera {camera_id} is already in the grid")
        position = self._next_free_cell()
        if position is None:
            raise GridFullError(f"grid is full ({self.capacity()} cameras)")
        self._cells[position] = (camera_id, widget)
        self._positions[camera_id] = position
        return position

    def remove_camera(self, camera_id: int) -> Any:
        """Free the cell of a camera and return its widget."""
        try:
            position = self._positions.pop(camera_id)
        except KeyError:
            raise KeyError(f"camera {camera_id} is not in the grid") from None
        _, widget = self._cells.pop(position)
        return widget

    def get_camera(self, camera_id: int) -> Any | None:
        position = self._positions.get(camera_id)
        if position is None:
            return None
        return self._cells[position][1]

    def position_of(self, camera_id: int) -> tuple[int, int] | None:
        return self._positions.get(camera_id)

    def is_full(self) -> bool:
        return len(self._positions) >= self.capacity()

    def is_empty(self) -> bool:
        return not self._positions

    def capacity(self) -> int:
        return self.rows * self.cols

    def __len__(self) -> int:
        return len(self._positions)

    def camera_ids(self) -> list[int]:
        """Return the ids of the cameras in the grid, in ascending order."""
        return sorted(self._positions)

    def clear(self) -> None:
        for camera_id in self.camera_ids():
            self.remove_camera(camera_id)