"""
Minesweeper Core - Configuration
Difficulty presets, custom board clamping and player settings
"""

from dataclasses import dataclass, field
from typing import Optional

from .best_times import config_key


# Difficulty presets (width, height, mines)
DIFFICULTIES = {
    'beginner': (9, 9, 10),
    'intermediate': (16, 16, 40),
    'expert': (30, 16, 99),
}
CUSTOM = 'custom'
DEFAULT_DIFFICULTY = 'beginner'

WIDTH_RANGE = (4, 60)
HEIGHT_RANGE = (4, 40)
DEFAULT_CUSTOM = (9, 9, 10)


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions and mine count for one game"""
    width: int
    height: int
    mines: int

    @property
    def key(self) -> str:
        """Best-time key, e.g. '9x9_10'"""
        return config_key(self.width, self.height, self.mines)

    def as_dict(self):
        return {'w': self.width, 'h': self.height, 'm': self.mines}


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _to_int(value, default: int) -> int:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def clamp_custom(width, height, mines) -> GameConfig:
    """Clamp user-entered custom dimensions into the playable range"""
    w = clamp(_to_int(width, DEFAULT_CUSTOM[0]), *WIDTH_RANGE)
    h = clamp(_to_int(height, DEFAULT_CUSTOM[1]), *HEIGHT_RANGE)
    max_mines = max(1, w * h - 1)
    m = clamp(_to_int(mines, DEFAULT_CUSTOM[2]), 1, max_mines)
    return GameConfig(w, h, m)


def resolve_config(difficulty: str, custom: Optional[GameConfig] = None) -> GameConfig:
    """Map a difficulty name to a config; unknown names fall back to beginner"""
    if difficulty == CUSTOM:
        if custom is None:
            return clamp_custom(*DEFAULT_CUSTOM)
        return clamp_custom(custom.width, custom.height, custom.mines)
    return GameConfig(*DIFFICULTIES.get(difficulty, DIFFICULTIES[DEFAULT_DIFFICULTY]))


def difficulty_of(config: GameConfig) -> str:
    """Name of the preset matching config, or 'custom'"""
    for name, params in DIFFICULTIES.items():
        if params == (config.width, config.height, config.mines):
            return name
    return CUSTOM


@dataclass
class Settings:
    """Player preferences persisted between runs"""
    difficulty: str = DEFAULT_DIFFICULTY
    sound_enabled: bool = False
    safe_first: bool = True
    flood_fill: bool = True
    custom: GameConfig = field(default_factory=lambda: GameConfig(*DEFAULT_CUSTOM))

    def game_config(self) -> GameConfig:
        return resolve_config(self.difficulty, self.custom)
