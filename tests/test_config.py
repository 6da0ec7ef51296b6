"""
Unit tests for difficulty presets and custom board clamping
"""

import pytest
from minefield.config import (
    DIFFICULTIES, GameConfig, Settings, clamp_custom, difficulty_of, resolve_config,
)


def test_difficulty_presets():
    assert DIFFICULTIES['beginner'] == (9, 9, 10)
    assert DIFFICULTIES['intermediate'] == (16, 16, 40)
    assert DIFFICULTIES['expert'] == (30, 16, 99)


def test_config_key():
    assert GameConfig(30, 16, 99).key == "30x16_99"


@pytest.mark.parametrize("given,expected", [
    ((9, 9, 10), (9, 9, 10)),
    ((2, 2, 1), (4, 4, 1)),
    ((100, 100, 10), (60, 40, 10)),
    ((4, 4, 50), (4, 4, 15)),
    ((10, 10, 0), (10, 10, 1)),
    ((10, 10, -5), (10, 10, 1)),
    ((60, 40, 5000), (60, 40, 2399)),
])
def test_clamp_custom(given, expected):
    config = clamp_custom(*given)
    assert (config.width, config.height, config.mines) == expected


def test_clamp_custom_parses_text():
    assert clamp_custom("12", "8", "20") == GameConfig(12, 8, 20)


@pytest.mark.parametrize("bad", [None, "", "abc"])
def test_clamp_custom_defaults_on_bad_input(bad):
    assert clamp_custom(bad, bad, bad) == GameConfig(9, 9, 10)


def test_resolve_presets():
    assert resolve_config('expert') == GameConfig(30, 16, 99)
    assert resolve_config('unknown') == GameConfig(9, 9, 10)


def test_resolve_custom_is_clamped():
    assert resolve_config('custom', GameConfig(3, 50, 1)) == GameConfig(4, 40, 1)
    assert resolve_config('custom') == GameConfig(9, 9, 10)


def test_difficulty_of():
    assert difficulty_of(GameConfig(16, 16, 40)) == 'intermediate'
    assert difficulty_of(GameConfig(16, 16, 41)) == 'custom'


def test_settings_defaults():
    settings = Settings()

    assert settings.difficulty == 'beginner'
    assert settings.sound_enabled is False
    assert settings.safe_first is True
    assert settings.flood_fill is True
    assert settings.game_config() == GameConfig(9, 9, 10)
