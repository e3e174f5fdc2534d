import math
import random
from typing import Iterator, List, Tuple

from gridmaze.core.cell import Cell
from gridmaze.core.errors import InvalidDimensionError, IndexOutOfRangeError, NotAdjacentError

class Grid:
    # Direction bits (shared with Cell)
    TOP    = Cell.TOP
    RIGHT  = Cell.RIGHT
    BOTTOM = Cell.BOTTOM
    LEFT   = Cell.LEFT
    ALL_WALLS = Cell.ALL_WALLS

    # Direction Helpers
    DR = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    DC = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('rows', 'cols', 'cells', 'rng', 'event_writer', 'generated')

    def __init__(self, rows, cols, rng=None, event_writer=None):
        self.rows = self._dimension("rows", rows)
        self.cols = self._dimension("cols", cols)
        self.rng = self._make_rng(rng)
        self.event_writer = event_writer
        self.generated = False

        # Row-major, index = row * cols + col
        self.cells: List[Cell] = [
            Cell(r, c) for r in range(self.rows) for c in range(self.cols)
        ]

        if self.event_writer is not None:
            self.event_writer.write_header(self.rows, self.cols)

    @staticmethod
    def _dimension(name, value) -> int:
        try:
            floored = math.floor(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidDimensionError(f"{name} must be a finite number, got {value!r}") from None
        if floored < 1:
            raise InvalidDimensionError(f"{name} must be >= 1, got {value!r}")
        return int(floored)

    @staticmethod
    def _make_rng(rng) -> random.Random:
        if rng is None:
            return random.Random()
        if isinstance(rng, int):
            return random.Random(rng)
        return rng

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def index(self, row: int, col: int) -> int:
        # Unchecked; callers range-check first.
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        if self.in_bounds(row, col):
            return self.cells[row * self.cols + col]
        raise IndexOutOfRangeError(f"Coordinate ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def random_cell(self) -> Cell:
        row = self.rng.randrange(self.rows)
        col = self.rng.randrange(self.cols)
        return self.cells[self.index(row, col)]

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    def remove_wall(self, a: Cell, b: Cell):
        """
        Removes the wall shared by two adjacent cells, on both sides.
        Direction is decided purely from the row/col deltas.
        """
        dr = b.row - a.row
        dc = b.col - a.col

        if dr == -1 and dc == 0:
            dir_bit = self.TOP
        elif dr == 1 and dc == 0:
            dir_bit = self.BOTTOM
        elif dr == 0 and dc == 1:
            dir_bit = self.RIGHT
        elif dr == 0 and dc == -1:
            dir_bit = self.LEFT
        else:
            raise NotAdjacentError(f"Cells {a.id} and {b.id} are not adjacent")

        a.walls &= ~dir_bit
        b.walls &= ~self.OPPOSITE[dir_bit]

        if self.event_writer is not None:
            self.event_writer.log_carve(a.row, a.col, dir_bit)

    def carve(self, row: int, col: int, dir_bit: int):
        """
        Removes the wall between (row, col) and its neighbor in 'dir_bit'.
        Carving into the void outside the grid does nothing.
        """
        nr, nc = row + self.DR[dir_bit], col + self.DC[dir_bit]
        if not self.in_bounds(nr, nc):
            return
        self.remove_wall(self.cell_at(row, col), self.cells[self.index(nr, nc)])

    def is_open(self, a: Cell, b: Cell) -> bool:
        for nbr in self.open_neighbors(a):
            if nbr is b:
                return True
        return False

    def set_visited(self, cell: Cell, visited: bool = True):
        cell.visited = visited
        if visited and self.event_writer is not None:
            self.event_writer.log_visit(cell.row, cell.col)

    def is_visited(self, cell: Cell) -> bool:
        return cell.visited

    def neighbors(self, cell: Cell) -> Iterator[Tuple[Cell, int]]:
        """
        Yields (neighbor, direction_to_neighbor) for all in-grid neighbors,
        top, right, bottom, left. Does NOT check walls.
        """
        row, col = cell.row, cell.col
        if row > 0:
            yield (self.cells[self.index(row - 1, col)], self.TOP)
        if col < self.cols - 1:
            yield (self.cells[self.index(row, col + 1)], self.RIGHT)
        if row < self.rows - 1:
            yield (self.cells[self.index(row + 1, col)], self.BOTTOM)
        if col > 0:
            yield (self.cells[self.index(row, col - 1)], self.LEFT)

    def open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """
        Yields neighbors that are NOT blocked by a wall.
        """
        for nbr, dir_bit in self.neighbors(cell):
            if not (cell.walls & dir_bit):
                yield nbr
