import pytest

from camwatch.display_settings import DisplaySettings, SettingsStore


def test_defaults():
    settings = DisplaySettings()
    assert (settings.camera_width, settings.camera_height) == (640, 480)
    assert (settings.grid_rows, settings.grid_columns) == (2, 2)


def test_clamped_limits():
    low = DisplaySettings(100, 100, 0, 0).clamped()
    assert low == DisplaySettings(320, 240, 1, 1)
    high = DisplaySettings(5000, 5000, 20, 20).clamped()
    assert high == DisplaySettings(1920, 1080, 8, 8)


def test_clamped_keeps_valid_values():
    settings = DisplaySettings(800, 600, 3, 4)
    assert settings.clamped() == settings


def test_dict_round_trip():
    settings = DisplaySettings(800, 600, 3, 4)
    assert DisplaySettings.from_dict(settings.to_dict()) == settings


def test_from_dict_missing_keys_use_defaults():
    assert DisplaySettings.from_dict({"GridRows": "3"}) == DisplaySettings(grid_rows=3)


def test_from_dict_invalid_value():
    with pytest.raises(ValueError):
        DisplaySettings.from_dict({"CameraWidth": "wide"})


def test_load_without_file_gives_defaults(tmp_path):
    assert SettingsStore(tmp_path / "settings.ini").load() == DisplaySettings()


def test_save_and_load(tmp_path):
    store = SettingsStore(tmp_path / "settings.ini")
    settings = DisplaySettings(1024, 768, 3, 3)
    assert store.save(settings) == settings
    assert SettingsStore(tmp_path / "settings.ini").load() == settings
    text = (tmp_path / "settings.ini").read_text(encoding="utf-8")
    assert "[Display]" in text
    assert "CameraWidth" in text


def test_save_clamps(tmp_path):
    store = SettingsStore(tmp_path / "settings.ini")
    stored = store.save(DisplaySettings(10, 10, 99, 99))
    assert stored == DisplaySettings(10, 10, 99, 99).clamped()
    assert store.load() == stored


def test_save_keeps_other_sections(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[Other]\nKey = value\n", encoding="utf-8")
    SettingsStore(path).save(DisplaySettings())
    text = path.read_text(encoding="utf-8")
    assert "[Other]" in text
    assert SettingsStore(path).load() == DisplaySettings()