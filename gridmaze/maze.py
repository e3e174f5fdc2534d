"""
Library entry points: build a grid, carve it once, solve it.

    grid = new_grid(20, 20, rng=random.Random(7))
    generate(grid)
    path = solve(grid)   # [(0, 0), ..., (19, 19)], or [] if unreachable
"""
from typing import List, Tuple

from gridmaze.core.grid import Grid
from gridmaze.algo.dfs import RecursiveBacktracker
from gridmaze.algo.prim import PrimsAlgorithm
from gridmaze.algo.solvers import BFS, AStar, Dijkstra

GENERATORS = {
    "dfs": RecursiveBacktracker,
    "prim": PrimsAlgorithm,
}

SOLVERS = {
    "dijkstra": Dijkstra,
    "astar": AStar,
    "bfs": BFS,
}

def new_grid(rows, cols, rng=None, event_writer=None) -> Grid:
    """
    rows/cols are floored to integers; anything below 1 raises
    InvalidDimensionError. rng may be a random.Random or an int seed.
    """
    return Grid(rows, cols, rng=rng, event_writer=event_writer)

def generate(grid: Grid, algo: str = "dfs") -> Grid:
    """Carves a perfect maze into grid in place. A grid can only be generated once."""
    try:
        cls = GENERATORS[algo]
    except KeyError:
        raise ValueError(f"Unknown generator {algo!r}, choose from {sorted(GENERATORS)}") from None
    return cls(grid).run_all()

def solve(grid: Grid, algo: str = "dijkstra") -> List[Tuple[int, int]]:
    """Shortest path from grid.start to grid.end as (row, col) pairs."""
    try:
        cls = SOLVERS[algo]
    except KeyError:
        raise ValueError(f"Unknown solver {algo!r}, choose from {sorted(SOLVERS)}") from None
    return cls(grid, event_writer=grid.event_writer).run_all()
