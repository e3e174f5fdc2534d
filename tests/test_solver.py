import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.core.grid import Grid
from gridmaze.core.events import EventLog
from gridmaze.algo.dfs import RecursiveBacktracker
from gridmaze.algo.prim import PrimsAlgorithm
from gridmaze.algo.solvers import BFS, AStar, Dijkstra

class TestSolvers(unittest.TestCase):
    def create_simple_maze(self):
        # 5x5 maze, single corridor
        grid = Grid(5, 5)
        # (0,0) -> (1,0) -> (2,0) -> (2,1) -> (2,2) -> (2,3) -> (2,4) -> (3,4) -> (4,4)
        grid.carve(0, 0, Grid.BOTTOM)
        grid.carve(1, 0, Grid.BOTTOM)
        grid.carve(2, 0, Grid.RIGHT)
        grid.carve(2, 1, Grid.RIGHT)
        grid.carve(2, 2, Grid.RIGHT)
        grid.carve(2, 3, Grid.RIGHT)
        grid.carve(2, 4, Grid.BOTTOM)
        grid.carve(3, 4, Grid.BOTTOM)
        return grid

    def create_loop_maze(self):
        # 3x3 ring around the center plus a shortcut through it
        grid = Grid(3, 3)
        for r, c, d in [(0, 0, Grid.RIGHT), (0, 1, Grid.RIGHT), (0, 2, Grid.BOTTOM), (1, 2, Grid.BOTTOM),
                        (0, 0, Grid.BOTTOM), (1, 0, Grid.BOTTOM), (2, 0, Grid.RIGHT), (2, 1, Grid.RIGHT),
                        (1, 0, Grid.RIGHT), (1, 1, Grid.BOTTOM)]:
            grid.carve(r, c, d)
        return grid

    def generated(self, rows, cols, seed, gen=RecursiveBacktracker):
        grid = Grid(rows, cols, rng=random.Random(seed))
        gen(grid).run_all()
        return grid

    def assert_valid_path(self, grid, path):
        for (r1, c1), (r2, c2) in zip(path, path[1:]):
            self.assertTrue(grid.is_open(grid.cell_at(r1, c1), grid.cell_at(r2, c2)),
                            f"step {(r1, c1)} -> {(r2, c2)} crosses a wall")

    def test_corridor(self):
        expected = [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 4), (4, 4)]
        for cls in (BFS, AStar, Dijkstra):
            grid = self.create_simple_maze()
            solver = cls(grid)
            for _ in solver.run((0, 0), (4, 4)): pass
            self.assertEqual(solver.path, expected, cls.__name__)

    def test_shortest_path_with_loops(self):
        # Several routes exist, all of them 4 steps long
        for cls in (BFS, AStar, Dijkstra):
            grid = self.create_loop_maze()
            path = cls(grid).run_all()
            self.assertEqual(len(path), 5, cls.__name__)
            self.assertEqual(path[0], (0, 0))
            self.assertEqual(path[-1], (2, 2))
            self.assert_valid_path(grid, path)

    def test_generated_mazes_match_tree_distance(self):
        for gen in (RecursiveBacktracker, PrimsAlgorithm):
            for rows, cols in [(2, 2), (1, 12), (12, 1), (9, 14), (30, 30)]:
                for seed in range(3):
                    grid = self.generated(rows, cols, seed, gen)
                    reference = BFS(grid).run_all()
                    # A tree has exactly one simple path, so every solver must agree
                    for cls in (Dijkstra, AStar):
                        path = cls(grid).run_all()
                        self.assertEqual(path, reference)
                    self.assertEqual(reference[0], grid.start.pos)
                    self.assertEqual(reference[-1], grid.end.pos)
                    self.assert_valid_path(grid, reference)

    def test_two_by_two(self):
        for seed in range(10):
            grid = self.generated(2, 2, seed)
            path = Dijkstra(grid).run_all()
            self.assertEqual(len(path), 3)

    def test_single_cell(self):
        grid = Grid(1, 1)
        for cls in (BFS, AStar, Dijkstra):
            self.assertEqual(cls(grid).run_all(), [(0, 0)])

    def test_no_path(self):
        grid = Grid(5, 5) # All walls
        for cls in (BFS, AStar, Dijkstra):
            solver = cls(grid)
            statuses = list(solver.run((0, 0), (4, 4)))
            self.assertEqual(solver.path, [])
            self.assertEqual(statuses[-1], "Unreachable")

    def test_resolve_is_idempotent(self):
        grid = self.generated(15, 15, seed=4)
        solver = Dijkstra(grid)
        first = list(solver.run_all())
        scanned = solver.visited_count
        second = solver.run_all()
        self.assertEqual(first, second)
        self.assertEqual(solver.visited_count, scanned)
        # A fresh solver on the same grid agrees too
        self.assertEqual(Dijkstra(grid).run_all(), first)

    def test_solver_leaves_cells_untouched(self):
        grid = self.generated(10, 10, seed=8)
        before = [(c.walls, c.visited) for c in grid]
        AStar(grid).run_all()
        Dijkstra(grid).run_all()
        self.assertEqual([(c.walls, c.visited) for c in grid], before)

    def test_custom_endpoints(self):
        grid = self.create_simple_maze()
        path = Dijkstra(grid).run_all((2, 4), (0, 0))
        self.assertEqual(path[0], (2, 4))
        self.assertEqual(path[-1], (0, 0))
        self.assertEqual(len(path), 7)

        with self.assertRaises(IndexError):
            Dijkstra(grid).run_all((0, 0), (5, 5))

    def test_events_are_logged(self):
        log = EventLog()
        grid = Grid(6, 6, rng=2, event_writer=log)
        RecursiveBacktracker(grid).run_all()
        log.clear()

        solver = Dijkstra(grid, event_writer=log)
        path = solver.run_all()
        counts = log.counts()
        self.assertEqual(counts["path_add"], len(path))
        self.assertEqual(counts["solver_scan"], solver.visited_count)

    def test_astar_scans_no_more_than_dijkstra(self):
        grid = self.generated(40, 40, seed=11)
        d = Dijkstra(grid)
        d.run_all()
        a = AStar(grid)
        a.run_all()
        self.assertEqual(a.path, d.path)
        self.assertLessEqual(a.visited_count, d.visited_count)

if __name__ == '__main__':
    unittest.main()
