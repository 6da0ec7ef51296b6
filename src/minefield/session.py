"""
Minesweeper Core - Game Session
Aggregates the grid, counters, timer and terminal state of one game
"""

from enum import Enum
from typing import Callable, Optional

from .best_times import BestTimeTracker
from .config import GameConfig
from .grid import Cell, Grid, create_grid
from .timer import GameTimer


class GameState(Enum):
    """Enumeration for different game states"""
    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    State of a single game, passed explicitly to every engine operation.

    Mines are not placed until the first effective reveal. ``mine_count`` starts
    at the configured value and is lowered to the number actually placed when the
    board is too small to fit them all.
    """

    def __init__(self, config: GameConfig, safe_first: bool = True, flood_fill: bool = True,
                 rng=None, clock: Optional[Callable[[], float]] = None,
                 best_times: Optional[BestTimeTracker] = None):
        if config.width < 1 or config.height < 1:
            raise ValueError(f"Invalid board size {config.width}x{config.height}")
        if not 0 <= config.mines < config.width * config.height:
            raise ValueError(
                f"Mine count {config.mines} must be below {config.width * config.height} cells")

        self.config = config
        self.grid: Grid = create_grid(config.width, config.height)
        self.mine_count = config.mines
        self.safe_first = safe_first
        self.flood_fill = flood_fill
        self.rng = rng
        self.timer = GameTimer(clock) if clock is not None else GameTimer()
        self.best_times = best_times

        self.state = GameState.READY
        self.flags_placed = 0
        self.revealed_count = 0
        self.clicked_mine: Optional[Cell] = None
        self.new_record = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def started(self) -> bool:
        """True once mines have been placed"""
        return self.state != GameState.READY

    @property
    def ended(self) -> bool:
        return self.state in (GameState.WON, GameState.LOST)

    @property
    def won(self) -> bool:
        return self.state == GameState.WON

    @property
    def lost(self) -> bool:
        return self.state == GameState.LOST

    @property
    def elapsed_seconds(self) -> int:
        return self.timer.elapsed

    @property
    def non_mine_count(self) -> int:
        return self.width * self.height - self.mine_count

    def remaining_mines(self) -> int:
        """Mines left to flag, never negative"""
        return max(0, self.mine_count - self.flags_placed)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return self.grid.cell(x, y)
