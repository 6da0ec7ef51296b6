"""
Minesweeper Core - Settings Store
JSON key-value file holding preferences and best times
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from .config import CUSTOM, DIFFICULTIES, DEFAULT_DIFFICULTY, GameConfig, Settings, clamp_custom

logger = logging.getLogger(__name__)

KEY_DIFFICULTY = 'difficulty'
KEY_BEST_TIMES = 'best_times'
KEY_SOUND = 'sound'
KEY_SAFE_FIRST = 'safe_first'
KEY_FLOOD_FILL = 'flood_fill'
KEY_CUSTOM = 'custom'


def default_data_file() -> str:
    return os.path.join(os.path.expanduser("~"), ".minesweeper", "settings.json")


class SettingsStore:
    """Persists settings to a JSON file; unreadable content falls back to defaults"""

    def __init__(self, data_file: Optional[str] = None):
        self.data_file = data_file or default_data_file()
        self.data: Dict[str, Any] = self._load_data()

    def _load_data(self) -> Dict[str, Any]:
        """Load data from file, or an empty mapping if missing or corrupt"""
        if not os.path.exists(self.data_file):
            return {}
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", self.data_file, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self.data_file)
            return {}
        return data

    def _save_data(self):
        try:
            directory = os.path.dirname(self.data_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self.data_file, e)

    def get(self, key: str, default=None):
        return self.data.get(key, default)

    def set(self, key: str, value):
        self.data[key] = value
        self._save_data()

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.data.get(key, default)
        if isinstance(value, bool):
            return value
        logger.warning("Ignoring non-boolean value for %r: %r", key, value)
        return default

    def load_best_times(self) -> Dict[str, int]:
        raw = self.data.get(KEY_BEST_TIMES, {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed best times: %r", raw)
            return {}
        records = {}
        for key, value in raw.items():
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                records[str(key)] = value
            else:
                logger.warning("Dropping malformed best time %r=%r", key, value)
        return records

    def save_best_times(self, records: Dict[str, int]):
        self.set(KEY_BEST_TIMES, dict(records))

    def load_settings(self) -> Settings:
        difficulty = self.data.get(KEY_DIFFICULTY, DEFAULT_DIFFICULTY)
        if difficulty != CUSTOM and difficulty not in DIFFICULTIES:
            difficulty = DEFAULT_DIFFICULTY

        custom = Settings().custom
        raw_custom = self.data.get(KEY_CUSTOM)
        if isinstance(raw_custom, dict):
            custom = clamp_custom(raw_custom.get('w'), raw_custom.get('h'), raw_custom.get('m'))

        return Settings(
            difficulty=difficulty,
            sound_enabled=self._get_bool(KEY_SOUND, False),
            safe_first=self._get_bool(KEY_SAFE_FIRST, True),
            flood_fill=self._get_bool(KEY_FLOOD_FILL, True),
            custom=custom,
        )

    def save_settings(self, settings: Settings):
        self.data.update({
            KEY_DIFFICULTY: settings.difficulty,
            KEY_SOUND: settings.sound_enabled,
            KEY_SAFE_FIRST: settings.safe_first,
            KEY_FLOOD_FILL: settings.flood_fill,
            KEY_CUSTOM: settings.custom.as_dict(),
        })
        self._save_data()

    def save_custom(self, config: GameConfig):
        self.set(KEY_CUSTOM, config.as_dict())
