import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.maze import new_grid, generate, solve
from gridmaze.core.analysis import MazeAnalyzer
from gridmaze.core.errors import InvalidDimensionError, AlreadyGeneratedError

class TestMazeApi(unittest.TestCase):
    def test_generate_then_solve(self):
        grid = new_grid(20, 20, rng=random.Random(2024))
        self.assertIs(generate(grid), grid)
        self.assertTrue(MazeAnalyzer.is_perfect(grid))

        path = solve(grid)
        self.assertEqual(path[0], (0, 0))
        self.assertEqual(path[-1], (19, 19))
        self.assertEqual(path, solve(grid, "bfs"))
        self.assertEqual(path, solve(grid, "astar"))

    def test_prim_generation(self):
        grid = generate(new_grid(12, 8, rng=3), algo="prim")
        self.assertTrue(MazeAnalyzer.is_perfect(grid))
        self.assertEqual(solve(grid)[-1], (11, 7))

    def test_solve_twice_same_path(self):
        grid = generate(new_grid(10, 10, rng=5))
        self.assertEqual(solve(grid), solve(grid))

    def test_one_by_one(self):
        grid = generate(new_grid(1, 1, rng=0))
        self.assertEqual(solve(grid), [(0, 0)])

    def test_solve_before_generate_is_unreachable(self):
        grid = new_grid(3, 3, rng=0)
        self.assertEqual(solve(grid), [])

    def test_invalid_dimension(self):
        with self.assertRaises(InvalidDimensionError):
            new_grid(0, 3)

    def test_generate_twice(self):
        grid = generate(new_grid(4, 4, rng=1))
        with self.assertRaises(AlreadyGeneratedError):
            generate(grid)

    def test_unknown_algorithms(self):
        grid = new_grid(2, 2, rng=1)
        with self.assertRaises(ValueError):
            generate(grid, "kruskal")
        self.assertFalse(grid.generated)
        with self.assertRaises(ValueError):
            solve(grid, "dfs")

    def test_same_seed_same_maze(self):
        a = generate(new_grid(9, 9, rng=random.Random(77)))
        b = generate(new_grid(9, 9, rng=random.Random(77)))
        self.assertEqual([c.walls for c in a], [c.walls for c in b])
        self.assertEqual(solve(a), solve(b))

if __name__ == '__main__':
    unittest.main()
