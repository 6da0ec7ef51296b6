"""
Minesweeper Core - Grid Model
Rectangular matrix of cells with mine/flag/reveal/count state
"""

from typing import Iterator, List, Optional


# Canonical neighbour order: row-major over dy, then dx
NEIGHBOR_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


class Cell:
    """Represents a single cell on the minesweeper grid"""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.mine = False
        self.revealed = False
        self.flagged = False
        self.count = 0

    @property
    def position(self):
        return (self.x, self.y)

    def __repr__(self):
        flags = ''.join(name for name, on in (('M', self.mine), ('R', self.revealed), ('F', self.flagged)) if on)
        return f"Cell({self.x}, {self.y}, count={self.count}{', ' + flags if flags else ''})"


class Grid:
    """A width x height arrangement of cells, stored row-major as cells[y][x]"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[Cell(x, y) for x in range(width)] for y in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at (x, y), or None when outside the grid"""
        if self.in_bounds(x, y):
            return self.cells[y][x]
        return None

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __len__(self):
        return self.width * self.height


def create_grid(width: int, height: int) -> Grid:
    """Build a grid of hidden, unflagged, mine-free cells"""
    return Grid(width, height)


def neighbors_of(grid: Grid, x: int, y: int) -> List[Cell]:
    """Return the up-to-8 cells around (x, y) in canonical order"""
    result = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny):
            result.append(grid.cells[ny][nx])
    return result
