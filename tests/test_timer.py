"""
Test script to verify timer functionality
"""

import pytest
from minefield.config import GameConfig
from minefield.engine import reveal
from minefield.session import GameSession, GameState
from minefield.timer import GameTimer


def test_timer_initial_state(clock):
    timer = GameTimer(clock)

    assert timer.elapsed == 0
    assert not timer.started
    assert not timer.running


def test_timer_counts_whole_seconds(clock):
    timer = GameTimer(clock)
    timer.start()
    clock.advance(2.9)

    assert timer.running
    assert timer.elapsed == 2


def test_stop_freezes_elapsed(clock):
    timer = GameTimer(clock)
    timer.start()
    clock.advance(5)
    timer.stop()
    clock.advance(100)

    assert timer.elapsed == 5
    assert not timer.running


def test_timer_never_restarts(clock):
    timer = GameTimer(clock)
    timer.start()
    clock.advance(3)
    timer.stop()
    clock.advance(10)
    timer.start()

    assert timer.elapsed == 3
    assert not timer.running


def test_second_start_keeps_origin(clock):
    timer = GameTimer(clock)
    timer.start()
    clock.advance(4)
    timer.start()
    clock.advance(1)

    assert timer.elapsed == 5


def test_default_clock():
    timer = GameTimer()
    timer.start()
    assert timer.elapsed >= 0


def test_timer_starts_on_first_reveal(clock, no_shuffle):
    session = GameSession(GameConfig(9, 9, 10), flood_fill=False, rng=no_shuffle, clock=clock)
    clock.advance(30)
    assert session.elapsed_seconds == 0

    reveal(session, session.cell(4, 4))
    clock.advance(3)

    assert session.state == GameState.PLAYING
    assert session.elapsed_seconds == 3


@pytest.mark.parametrize("width,height,mines", [
    (9, 9, 10),    # Beginner
    (16, 16, 40),  # Intermediate
    (30, 16, 99),  # Expert
])
def test_timer_stops_on_loss(clock, width, height, mines):
    session = GameSession(GameConfig(width, height, mines), flood_fill=False, clock=clock)
    reveal(session, session.cell(width // 2, height // 2))
    mine = next(c for c in session.grid if c.mine and not c.revealed)
    clock.advance(8)
    reveal(session, mine)
    clock.advance(8)

    assert session.state == GameState.LOST
    assert session.elapsed_seconds == 8
