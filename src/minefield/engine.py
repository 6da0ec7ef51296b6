"""
Minesweeper Core - Reveal Engine
Reveal with flood-fill, chord reveal, flag toggling and win/loss detection
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Set

from .grid import Cell, neighbors_of
from .placement import place_mines
from .session import GameSession, GameState

logger = logging.getLogger(__name__)


@dataclass
class RevealResult:
    """Outcome of a reveal: whether a mine was hit and which cells opened"""
    hit_mine: bool = False
    newly_revealed: Set[Cell] = field(default_factory=set)


@dataclass
class ChordResult(RevealResult):
    """Outcome of a chord; satisfied is False when the flag count did not match"""
    satisfied: bool = False


def reveal(session: GameSession, cell: Cell) -> RevealResult:
    """
    Reveal a cell and handle game logic.

    No effect when the game has ended or the cell is revealed or flagged. The
    first effective reveal places the mines and starts the timer before anything
    is opened.
    """
    result = RevealResult()
    if session.ended or cell.revealed or cell.flagged:
        return result

    if not session.started:
        session.mine_count = place_mines(session.grid, session.mine_count, cell,
                                         session.safe_first, session.rng)
        _drop_excess_flags(session)
        session.state = GameState.PLAYING
        session.timer.start()

    cell.revealed = True
    session.revealed_count += 1
    result.newly_revealed.add(cell)

    if cell.mine:
        result.hit_mine = True
        session.clicked_mine = cell
        _end_game(session, won=False)
        return result

    if cell.count == 0 and session.flood_fill:
        _flood_fill(session, cell, result.newly_revealed)

    check_win(session)
    return result


def _drop_excess_flags(session: GameSession):
    """Clear flags on safe cells while more flags stand than mines were placed"""
    for cell in session.grid:
        if session.flags_placed <= session.mine_count:
            break
        if cell.flagged and not cell.mine:
            cell.flagged = False
            session.flags_placed -= 1


def _flood_fill(session: GameSession, origin: Cell, revealed: Set[Cell]):
    """Breadth-first expansion over connected zero-count cells"""
    queue = deque([origin])
    seen = {origin}
    while queue:
        current = queue.popleft()
        for n in neighbors_of(session.grid, current.x, current.y):
            if n.revealed or n.flagged or n.mine:
                continue
            n.revealed = True
            session.revealed_count += 1
            revealed.add(n)
            if n.count == 0 and n not in seen:
                seen.add(n)
                queue.append(n)


def check_win(session: GameSession) -> bool:
    """End the game as won once every non-mine cell is revealed"""
    if session.ended:
        return False
    if session.revealed_count >= session.non_mine_count:
        _end_game(session, won=True)
        return True
    return False


def _end_game(session: GameSession, won: bool):
    session.state = GameState.WON if won else GameState.LOST
    session.timer.stop()
    elapsed = session.timer.elapsed

    if won:
        logger.info("Game won on %s in %ds", session.config.key, elapsed)
        if session.best_times is not None:
            session.new_record = session.best_times.record(session.config.key, elapsed)
    else:
        logger.info("Game lost on %s after %ds", session.config.key, elapsed)
        _reveal_all_mines(session)


def _reveal_all_mines(session: GameSession):
    """Show every mine; these reveals do not count towards revealed_count"""
    for cell in session.grid:
        if cell.mine:
            cell.revealed = True


def toggle_flag(session: GameSession, cell: Cell) -> bool:
    """
    Toggle flag on a cell; returns True if the cell changed.

    Unflagging is always allowed. Flagging is refused once flags_placed has
    reached the mine count.
    """
    if session.ended or cell.revealed:
        return False

    if cell.flagged:
        cell.flagged = False
        session.flags_placed -= 1
        return True

    if session.flags_placed < session.mine_count:
        cell.flagged = True
        session.flags_placed += 1
        return True
    return False


def chord(session: GameSession, cell: Cell) -> ChordResult:
    """Reveal all unflagged neighbours of a number whose flag count is satisfied"""
    result = ChordResult()
    if session.ended or not cell.revealed or cell.mine:
        return result

    neighbors = neighbors_of(session.grid, cell.x, cell.y)
    flagged = sum(1 for n in neighbors if n.flagged)
    if flagged != cell.count:
        return result

    result.satisfied = True
    for n in neighbors:
        if n.revealed or n.flagged:
            continue
        step = reveal(session, n)
        result.newly_revealed |= step.newly_revealed
        if step.hit_mine:
            result.hit_mine = True
        if session.ended:
            break
    return result
