"""
Minesweeper Core - Mine Placement
Deferred, shuffle-based mine assignment with optional safe first click
"""

import logging
import random
from typing import Optional

from .grid import Cell, Grid, neighbors_of

logger = logging.getLogger(__name__)


def place_mines(grid: Grid, mine_count: int, exclude_cell: Optional[Cell] = None,
                safe_first: bool = True, rng=None) -> int:
    """
    Place mines on the grid and compute neighbour counts.

    When ``safe_first`` is set, ``exclude_cell`` and its neighbours are kept free
    of mines. Eligible positions are shuffled with ``rng.shuffle`` (the ``random``
    module by default) and the first ``mine_count`` of them are mined, so the
    layout is a uniform subset drawn without replacement.

    Returns the number of mines actually placed, which is lower than
    ``mine_count`` when fewer eligible cells exist.
    """
    if rng is None:
        rng = random

    excluded = set()
    if safe_first and exclude_cell is not None:
        excluded.add(exclude_cell.position)
        excluded.update(n.position for n in neighbors_of(grid, exclude_cell.x, exclude_cell.y))

    spots = [cell.position for cell in grid if cell.position not in excluded]
    rng.shuffle(spots)

    placed = min(mine_count, len(spots))
    if placed < mine_count:
        logger.warning("Only %d eligible cells for %d mines on a %dx%d grid",
                       len(spots), mine_count, grid.width, grid.height)

    for x, y in spots[:placed]:
        grid.cells[y][x].mine = True

    compute_counts(grid)
    return placed


def compute_counts(grid: Grid):
    """Set count on every non-mine cell to its number of mined neighbours"""
    for cell in grid:
        if cell.mine:
            continue
        cell.count = sum(1 for n in neighbors_of(grid, cell.x, cell.y) if n.mine)
