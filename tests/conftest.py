"""
Shared fixtures: deterministic random source, fake clock and hand-built boards
"""

import pytest

from minefield.config import GameConfig
from minefield.placement import compute_counts
from minefield.session import GameSession, GameState


class NoShuffle:
    """Random source that leaves eligible positions in row-major order"""

    def shuffle(self, seq):
        pass


class FakeClock:
    """Manually advanced seconds clock"""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def session_with_mines(width, height, mines, clock=None, flood_fill=True, best_times=None):
    """Build a started session with mines at the given (x, y) positions"""
    session = GameSession(GameConfig(width, height, len(mines)), flood_fill=flood_fill,
                          clock=clock, best_times=best_times)
    for x, y in mines:
        session.grid.cells[y][x].mine = True
    compute_counts(session.grid)
    session.state = GameState.PLAYING
    session.timer.start()
    return session


@pytest.fixture
def no_shuffle():
    return NoShuffle()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_session():
    return session_with_mines
