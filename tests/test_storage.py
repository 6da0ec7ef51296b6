"""
Unit tests for the JSON settings store
Tests recovery from missing, corrupt and malformed files
"""

import json
import logging
import pytest

from minefield.config import GameConfig, Settings
from minefield.storage import SettingsStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "settings.json"


def test_missing_file_gives_defaults(data_file):
    store = SettingsStore(str(data_file))

    assert store.load_settings() == Settings()
    assert store.load_best_times() == {}


def test_corrupt_json_recovers(data_file, caplog):
    data_file.write_text("{not json")

    with caplog.at_level(logging.WARNING):
        store = SettingsStore(str(data_file))

    assert store.load_best_times() == {}
    assert store.load_settings() == Settings()
    assert "Could not read settings" in caplog.text


def test_non_object_root(data_file):
    data_file.write_text("[1, 2, 3]")
    assert SettingsStore(str(data_file)).data == {}


def test_wrongly_typed_values_fall_back(data_file):
    data_file.write_text(json.dumps({
        "difficulty": "impossible",
        "sound": "yes",
        "safe_first": 0,
        "flood_fill": False,
        "custom": "9x9",
    }))

    settings = SettingsStore(str(data_file)).load_settings()

    assert settings.difficulty == "beginner"
    assert settings.sound_enabled is False
    assert settings.safe_first is True
    assert settings.flood_fill is False
    assert settings.custom == GameConfig(9, 9, 10)


def test_malformed_best_times_dropped(data_file):
    data_file.write_text(json.dumps({
        "best_times": {"9x9_10": 55, "16x16_40": "fast", "30x16_99": -1, "4x4_1": True},
    }))

    assert SettingsStore(str(data_file)).load_best_times() == {"9x9_10": 55}


def test_best_times_not_a_mapping(data_file):
    data_file.write_text(json.dumps({"best_times": [55]}))
    assert SettingsStore(str(data_file)).load_best_times() == {}


def test_settings_saved_and_reloaded(data_file):
    settings = Settings(difficulty="custom", sound_enabled=True, safe_first=False,
                        flood_fill=False, custom=GameConfig(20, 10, 30))
    SettingsStore(str(data_file)).save_settings(settings)

    assert SettingsStore(str(data_file)).load_settings() == settings
    assert json.loads(data_file.read_text())["custom"] == {"w": 20, "h": 10, "m": 30}


def test_stored_custom_is_clamped(data_file):
    data_file.write_text(json.dumps({"difficulty": "custom", "custom": {"w": 100, "h": 1, "m": 999}}))

    settings = SettingsStore(str(data_file)).load_settings()

    assert settings.custom == GameConfig(60, 4, 239)


def test_save_creates_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "settings.json"
    store = SettingsStore(str(path))
    store.set("sound", True)

    assert json.loads(path.read_text()) == {"sound": True}


def test_unwritable_location_is_logged(tmp_path, caplog):
    # A directory in place of the file makes both read and write fail
    store = SettingsStore(str(tmp_path))

    with caplog.at_level(logging.WARNING):
        store.save_best_times({"9x9_10": 10})

    assert store.get("best_times") == {"9x9_10": 10}
    assert "Could not save settings" in caplog.text
