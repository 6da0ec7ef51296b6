"""
Minesweeper game-logic package
"""

from .grid import Cell, Grid, create_grid, neighbors_of
from .placement import place_mines, compute_counts
from .timer import GameTimer
from .best_times import BestTimeTracker, config_key, record_if_best
from .config import DIFFICULTIES, GameConfig, Settings, clamp_custom, resolve_config
from .storage import SettingsStore
from .session import GameSession, GameState
from .engine import RevealResult, ChordResult, reveal, toggle_flag, chord, check_win
from .commands import GameController, Intent, Cue

__all__ = [
    'Cell', 'Grid', 'create_grid', 'neighbors_of',
    'place_mines', 'compute_counts',
    'GameTimer',
    'BestTimeTracker', 'config_key', 'record_if_best',
    'DIFFICULTIES', 'GameConfig', 'Settings', 'clamp_custom', 'resolve_config',
    'SettingsStore',
    'GameSession', 'GameState',
    'RevealResult', 'ChordResult', 'reveal', 'toggle_flag', 'chord', 'check_win',
    'GameController', 'Intent', 'Cue',
]
