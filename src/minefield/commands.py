"""
Minesweeper Command Layer
Applies player intents (reveal, flag, chord, reset) to the live game session
"""

import logging
from collections import namedtuple
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from . import engine
from .best_times import BestTimeTracker
from .config import CUSTOM, DEFAULT_DIFFICULTY, DIFFICULTIES, GameConfig, Settings, clamp_custom
from .session import GameSession, GameState

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Discrete player actions"""
    REVEAL = "reveal"
    FLAG = "flag"
    CHORD = "chord"
    RESET = "reset"


Cue = namedtuple('Cue', ['frequency', 'duration'])

CUE_FLAG = Cue(600, 0.04)
CUE_UNFLAG = Cue(400, 0.04)
CUE_CHORD_MISS = Cue(300, 0.02)
CUE_WIN = Cue(1200, 0.08)
CUE_LOSS = Cue(220, 0.2)

# Visible cell codes used by board_array()
HIDDEN = -3
FLAG = -2
MINE = -1


def reveal_cue(count: int) -> Cue:
    return Cue(880 + count * 60, 0.03)


class GameController:
    """
    Owns the live session and turns intents into engine calls.

    The session is replaced wholesale on reset. Settings changes go through the
    store (when one is given) so they survive restarts.
    """

    def __init__(self, store=None, settings: Optional[Settings] = None, rng=None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Args:
            store: SettingsStore used for preferences and best times, or None
            settings: initial settings; loaded from the store when omitted
            rng: random source with a shuffle() method, for mine placement
            clock: seconds clock for the game timer
        """
        self.store = store
        if settings is None:
            settings = store.load_settings() if store is not None else Settings()
        self.settings = settings
        self.rng = rng
        self.clock = clock
        self.best_times = BestTimeTracker(store)
        self.action_history: List[Dict[str, Any]] = []
        self._cues: List[Cue] = []
        self.session: GameSession = self._create_session(settings.game_config())

    def _create_session(self, config: GameConfig) -> GameSession:
        return GameSession(
            config,
            safe_first=self.settings.safe_first,
            flood_fill=self.settings.flood_fill,
            rng=self.rng,
            clock=self.clock,
            best_times=self.best_times,
        )

    def new_game(self, config: Optional[GameConfig] = None) -> GameSession:
        """Replace the live session with a fresh one"""
        if config is None:
            config = self.settings.game_config()
        self.session = self._create_session(config)
        self.action_history.clear()
        self._cues.clear()
        logger.debug("New game %s", config.key)
        return self.session

    @property
    def best_time(self) -> Optional[int]:
        return self.best_times.best(self.session.config.key)

    def dispatch(self, intent: Intent, x: Optional[int] = None, y: Optional[int] = None) -> Dict[str, Any]:
        """
        Apply one intent to the live session.

        Returns a dict describing the outcome: success, changed, hit_mine, the
        revealed coordinates, whether a new record was set, and the game state.
        """
        if intent == Intent.RESET:
            self.new_game()
            return self._outcome(intent, None, success=True, changed=True)

        if x is None or y is None or self.session.cell(x, y) is None:
            return self._outcome(intent, (x, y), success=False,
                                 error=f'Invalid coordinates: ({x}, {y})')

        cell = self.session.cell(x, y)
        state_before = self.session.state
        changed = False
        hit_mine = False
        revealed = set()

        if intent == Intent.REVEAL:
            result = engine.reveal(self.session, cell)
            hit_mine, revealed = result.hit_mine, result.newly_revealed
            changed = bool(revealed)
            if changed and not hit_mine:
                self._cue(reveal_cue(cell.count))
        elif intent == Intent.FLAG:
            changed = engine.toggle_flag(self.session, cell)
            if changed:
                self._cue(CUE_FLAG if cell.flagged else CUE_UNFLAG)
        elif intent == Intent.CHORD:
            result = engine.chord(self.session, cell)
            hit_mine, revealed = result.hit_mine, result.newly_revealed
            changed = bool(revealed)
            if cell.revealed and not result.satisfied and not self.session.ended:
                self._cue(CUE_CHORD_MISS)

        finished = self.session.ended and state_before != self.session.state
        if finished:
            self._cue(CUE_WIN if self.session.won else CUE_LOSS)

        outcome = self._outcome(intent, (x, y), success=True, changed=changed,
                                hit_mine=hit_mine, revealed=revealed,
                                new_record=finished and self.session.new_record)
        self.action_history.append({
            'intent': intent.value,
            'coordinates': (x, y),
            'changed': changed,
            'game_state_before': state_before.value,
            'game_state_after': self.session.state.value,
        })
        logger.debug("%s at (%s, %s): changed=%s state=%s", intent.value, x, y, changed,
                     self.session.state.value)
        return outcome

    def _outcome(self, intent, coordinates, success, changed=False, hit_mine=False,
                 revealed=(), new_record=False, error=None) -> Dict[str, Any]:
        outcome = {
            'success': success,
            'intent': intent.value,
            'coordinates': coordinates,
            'changed': changed,
            'hit_mine': hit_mine,
            'revealed': sorted(c.position for c in revealed),
            'new_record': new_record,
            'state': self.session.state.value,
        }
        if error:
            outcome['error'] = error
        return outcome

    def _cue(self, cue: Cue):
        if self.settings.sound_enabled:
            self._cues.append(cue)

    def pop_cues(self) -> List[Cue]:
        """Return and clear the sound cues queued since the last call"""
        cues, self._cues = self._cues, []
        return cues

    # Settings

    def _save_settings(self):
        if self.store is not None:
            self.store.save_settings(self.settings)

    def set_difficulty(self, difficulty: str, custom: Optional[GameConfig] = None) -> GameSession:
        """Switch difficulty, persist it and start a new game"""
        if difficulty == CUSTOM:
            if custom is not None:
                self.settings.custom = clamp_custom(custom.width, custom.height, custom.mines)
        elif difficulty not in DIFFICULTIES:
            difficulty = DEFAULT_DIFFICULTY
        self.settings.difficulty = difficulty
        self._save_settings()
        return self.new_game()

    def set_sound_enabled(self, enabled: bool):
        self.settings.sound_enabled = enabled
        self._save_settings()

    def set_safe_first(self, enabled: bool):
        self.settings.safe_first = enabled
        if not self.session.started:
            self.session.safe_first = enabled
        self._save_settings()

    def set_flood_fill(self, enabled: bool):
        self.settings.flood_fill = enabled
        if not self.session.started:
            self.session.flood_fill = enabled
        self._save_settings()

    # Views

    def get_game_state(self) -> Dict[str, Any]:
        """Summary of the live session"""
        session = self.session
        return {
            'board_size': (session.width, session.height),
            'total_mines': session.mine_count,
            'config_key': session.config.key,
            'game_state': session.state.value,
            'mines_placed': session.started,
            'cells_revealed': session.revealed_count,
            'flags_used': session.flags_placed,
            'remaining_mines': session.remaining_mines(),
            'elapsed_seconds': session.elapsed_seconds,
            'best_time': self.best_time,
            'new_record': session.new_record,
            'action_count': len(self.action_history),
            'is_game_over': session.ended,
            'is_won': session.state == GameState.WON,
            'is_lost': session.state == GameState.LOST,
        }

    def board_array(self) -> np.ndarray:
        """
        Visible board as an int8 array of shape (height, width).

        -3 hidden, -2 flagged, -1 revealed mine, 0-8 revealed numbers.
        """
        grid = self.session.grid
        board = np.full((grid.height, grid.width), HIDDEN, dtype=np.int8)
        for cell in grid:
            if cell.revealed:
                board[cell.y, cell.x] = MINE if cell.mine else cell.count
            elif cell.flagged:
                board[cell.y, cell.x] = FLAG
        return board

    def get_action_history(self) -> List[Dict[str, Any]]:
        return self.action_history.copy()
