from collections import deque
from typing import List, Tuple

from gridmaze.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def count_open_connections(grid: Grid) -> int:
        """
        Counts open walls between pairs of cells. Each connection is counted
        once, from the cell above or to the left of it.
        """
        count = 0
        for cell in grid:
            if cell.row < grid.rows - 1 and not cell.has_wall(Grid.BOTTOM):
                count += 1
            if cell.col < grid.cols - 1 and not cell.has_wall(Grid.RIGHT):
                count += 1
        return count

    @staticmethod
    def reachable_count(grid: Grid) -> int:
        seen = bytearray(len(grid))
        seen[0] = 1
        queue = deque([grid.start])
        count = 1
        while queue:
            cell = queue.popleft()
            for nbr in grid.open_neighbors(cell):
                idx = grid.index(nbr.row, nbr.col)
                if not seen[idx]:
                    seen[idx] = 1
                    count += 1
                    queue.append(nbr)
        return count

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return MazeAnalyzer.reachable_count(grid) == len(grid)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # Connected with exactly n-1 edges <=> spanning tree
        return (MazeAnalyzer.count_open_connections(grid) == len(grid) - 1
                and MazeAnalyzer.is_connected(grid))

    @staticmethod
    def symmetry_violations(grid: Grid) -> List[Tuple[str, str]]:
        """
        Returns (cell_id, neighbor_id) pairs where one side of a shared wall
        is open and the other is not.
        """
        bad = []
        for cell in grid:
            for nbr, dir_bit in grid.neighbors(cell):
                if cell.has_wall(dir_bit) != nbr.has_wall(Grid.OPPOSITE[dir_bit]):
                    bad.append((cell.id, nbr.id))
        return bad

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 3+ exits
        corridors = 0 # 2 exits

        for cell in grid:
            exits = sum(1 for _ in grid.open_neighbors(cell))
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: intersections += 1

        total = len(grid)
        return {
            "cells": total,
            "open_connections": MazeAnalyzer.count_open_connections(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
