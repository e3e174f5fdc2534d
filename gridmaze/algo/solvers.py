import heapq
import logging
from abc import ABC, abstractmethod
from array import array
from collections import deque
from itertools import count
from typing import Iterator, List, Tuple
from gridmaze.core.grid import Grid

logger = logging.getLogger(__name__)

INF = float("inf")

class Solver(ABC):
    """
    Base class for path finders over a carved Grid.

    Solvers never write to the cells: all search state lives in dense
    per-run arrays indexed like grid.cells, allocated again by every run().
    Running twice on the same grid therefore gives the same result.
    """
    def __init__(self, grid: Grid, event_writer=None):
        self.grid = grid
        self.event_writer = event_writer
        self.path: List[Tuple[int, int]] = []
        self.reset()

    def reset(self):
        n = len(self.grid)
        self.path = []
        self.visited_count = 0
        self.seen = bytearray(n)
        self.parents = array('i', [-1] * n)

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def run_all(self, start: Tuple[int, int] = None, end: Tuple[int, int] = None) -> List[Tuple[int, int]]:
        """Runs to completion between two coordinates (default: grid start/end)."""
        if start is None:
            start = self.grid.start.pos
        if end is None:
            end = self.grid.end.pos
        for _ in self.run(start, end):
            pass
        return self.path

    def is_scanned(self, row: int, col: int) -> bool:
        return bool(self.seen[self.grid.index(row, col)])

    def _mark_seen(self, idx: int):
        if not self.seen[idx]:
            self.seen[idx] = 1
            self.visited_count += 1
            if self.event_writer is not None:
                cell = self.grid.cells[idx]
                self.event_writer.log_solver_scan(cell.row, cell.col)

    def reconstruct_path(self, start_idx: int, end_idx: int):
        """
        Walks parent links back from end and reverses them.
        Leaves self.path empty unless the chain really ends at start.
        """
        chain = [end_idx]
        curr = end_idx
        while curr != start_idx:
            curr = self.parents[curr]
            if curr == -1:
                return
            chain.append(curr)
        chain.reverse()

        cells = self.grid.cells
        self.path = [cells[i].pos for i in chain]
        if self.event_writer is not None:
            for row, col in self.path:
                self.event_writer.log_path_add(row, col)

class BFS(Solver):
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        self.reset()
        grid = self.grid
        start_idx = grid.index(*grid.cell_at(*start).pos)
        end_idx = grid.index(*grid.cell_at(*end).pos)

        queue = deque([start_idx])
        self._mark_seen(start_idx)

        while queue:
            idx = queue.popleft()
            if idx == end_idx:
                break

            for nbr in grid.open_neighbors(grid.cells[idx]):
                n_idx = grid.index(nbr.row, nbr.col)
                if not self.seen[n_idx]:
                    self._mark_seen(n_idx)
                    self.parents[n_idx] = idx
                    queue.append(n_idx)

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        self.reconstruct_path(start_idx, end_idx)
        yield "Solved" if self.path else "Unreachable"

class AStar(Solver):
    """
    Best-first search on unit edge weights with a Manhattan heuristic.

    The frontier is a heap of (priority, insertion_order, distance, index)
    entries. Equal priorities come out first-in-first-out. An improved
    cell is pushed again and the older entry is skipped when popped, so a
    cell is logically in the frontier at most once.
    """
    def reset(self):
        super().reset()
        n = len(self.grid)
        self.distance = array('d', [INF] * n)
        self.settled = bytearray(n)

    def heuristic(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        self.reset()
        grid = self.grid
        start_cell = grid.cell_at(*start)
        end_cell = grid.cell_at(*end)
        start_idx = grid.index(*start_cell.pos)
        end_idx = grid.index(*end_cell.pos)

        order = count()
        open_set = []
        self.distance[start_idx] = 0
        heapq.heappush(open_set, (self.heuristic(start, end), next(order), 0, start_idx))
        self._mark_seen(start_idx)

        expanded = 0
        while open_set:
            _, _, g, idx = heapq.heappop(open_set)
            if self.settled[idx] or g > self.distance[idx]:
                continue # stale entry

            if idx == end_idx:
                break

            self.settled[idx] = 1

            for nbr in grid.open_neighbors(grid.cells[idx]):
                n_idx = grid.index(nbr.row, nbr.col)
                new_g = g + 1
                if new_g < self.distance[n_idx]:
                    self.distance[n_idx] = new_g
                    self.parents[n_idx] = idx
                    priority = new_g + self.heuristic(nbr.pos, end)
                    heapq.heappush(open_set, (priority, next(order), new_g, n_idx))
                    self._mark_seen(n_idx)

            expanded += 1
            if expanded % 100 == 0:
                yield f"Visited: {self.visited_count}"

        if self.distance[end_idx] != INF:
            self.reconstruct_path(start_idx, end_idx)

        logger.debug("%s: path of %d cells, %d scanned", type(self).__name__, len(self.path), self.visited_count)
        yield "Solved" if self.path else "Unreachable"

class Dijkstra(AStar):
    """ Uniform-cost search: A* with h(n) = 0. """
    def heuristic(self, a, b):
        return 0
