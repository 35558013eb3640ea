import pytest

from camwatch.camera_grid import CameraGrid, GridFullError


def test_new_grid_is_empty_with_four_cells():
    grid = CameraGrid()
    assert grid.is_empty()
    assert not grid.is_full()
    assert grid.capacity() == 4
    assert len(grid) == 0


def test_cells_fill_in_row_major_order():
    grid = CameraGrid()
    positions = [grid.add_camera(object(), camera_id) for camera_id in (10, 20, 30, 40)]
    assert positions == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert grid.is_full()
    assert len(grid) == grid.capacity()


def test_full_grid_raises():
    grid = CameraGrid(1, 1)
    grid.add_camera("a", 1)
    with pytest.raises(GridFullError):
        grid.add_camera("b", 2)
    assert grid.camera_ids() == [1]


def test_duplicate_id_rejected():
    grid = CameraGrid()
    grid.add_camera("a", 5)
    with pytest.raises(ValueError):
        grid.add_camera("b", 5)
    assert grid.get_camera(5) == "a"


def test_missing_widget_rejected():
    grid = CameraGrid()
    with pytest.raises(ValueError):
        grid.add_camera(None, 1)
    assert grid.is_empty()


def test_remove_frees_cell_for_next_camera():
    grid = CameraGrid()
    widgets = {camera_id: object() for camera_id in (1, 2, 3)}
    for camera_id, widget in widgets.items():
        grid.add_camera(widget, camera_id)
    freed = grid.position_of(2)
    assert grid.remove_camera(2) is widgets[2]
    assert grid.get_camera(2) is None
    assert grid.position_of(2) is None
    assert grid.add_camera(object(), 9) == freed


def test_remove_unknown_raises_key_error():
    grid = CameraGrid()
    with pytest.raises(KeyError):
        grid.remove_camera(42)


def test_get_camera_returns_added_widget():
    grid = CameraGrid()
    widget = object()
    grid.add_camera(widget, 3)
    assert grid.get_camera(3) is widget
    assert grid.get_camera(4) is None


def test_camera_ids_sorted():
    grid = CameraGrid()
    for camera_id in (7, 2, 5):
        grid.add_camera(str(camera_id), camera_id)
    assert grid.camera_ids() == [2, 5, 7]


def test_clear_empties_grid():
    grid = CameraGrid()
    for camera_id in (1, 2, 3, 4):
        grid.add_camera(camera_id, camera_id)
    grid.clear()
    assert grid.is_empty()
    assert grid.camera_ids() == []
    assert grid.add_camera("x", 1) == (0, 0)


@pytest.mark.parametrize("rows,cols", [(0, 2), (2, 0), (-1, 1)])
def test_invalid_shape_rejected(rows, cols):
    with pytest.raises(ValueError):
        CameraGrid(rows, cols)


def test_custom_shape_capacity():
    grid = CameraGrid(3, 2)
    assert grid.capacity() == 6
    for camera_id in range(6):
        grid.add_camera(camera_id, camera_id)
    assert grid.position_of(5) == (2, 1)
    assert grid.is_full()