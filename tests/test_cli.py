"""
Tests for the command-line launcher
"""

import pytest
from unittest.mock import patch

from desktop.cli import build_settings, parse_args
from minefield.config import GameConfig, Settings
from minefield.storage import SettingsStore


def test_defaults_keep_stored_settings():
    stored = Settings(difficulty='expert', sound_enabled=True)
    settings = build_settings(parse_args([]), stored)

    assert settings.difficulty == 'expert'
    assert settings.sound_enabled is True
    assert settings.safe_first is True


def test_difficulty_override():
    settings = build_settings(parse_args(['--difficulty', 'intermediate']), Settings())
    assert settings.game_config() == GameConfig(16, 16, 40)


def test_custom_dimensions_are_clamped():
    args = parse_args(['--width', '80', '--height', '3', '--mines', '999'])
    settings = build_settings(args, Settings())

    assert settings.difficulty == 'custom'
    assert settings.custom == GameConfig(60, 4, 239)


def test_partial_custom_dimensions_use_stored_values():
    stored = Settings(custom=GameConfig(20, 10, 30))
    settings = build_settings(parse_args(['--mines', '5']), stored)

    assert settings.custom == GameConfig(20, 10, 5)


def test_toggle_flags():
    args = parse_args(['--no-safe-first', '--no-flood-fill', '--sound'])
    settings = build_settings(args, Settings())

    assert settings.safe_first is False
    assert settings.flood_fill is False
    assert settings.sound_enabled is True


def test_invalid_difficulty_rejected():
    with pytest.raises(SystemExit):
        parse_args(['--difficulty', 'nightmare'])


def test_main_launches_gui_with_saved_settings(tmp_path):
    pytest.importorskip('tkinter')
    from desktop.cli import main

    path = str(tmp_path / "settings.json")
    with patch('desktop.gui.MinesweeperGUI') as gui:
        main(['--data-file', path, '--difficulty', 'expert'])

    controller = gui.call_args[0][0]
    assert controller.session.config == GameConfig(30, 16, 99)
    gui.return_value.run.assert_called_once()
    assert SettingsStore(path).load_settings().difficulty == 'expert'
