import logging
from typing import Iterator, List, Set
from gridmaze.core.cell import Cell
from gridmaze.algo.base import Generator

logger = logging.getLogger(__name__)

class PrimsAlgorithm(Generator):
    """
    Randomized Prim: grow the tree by attaching a random frontier cell
    to one of its visited neighbors.
    """
    def carve(self) -> Iterator[str]:
        grid = self.grid

        first = grid.random_cell()
        grid.set_visited(first)

        # Frontier cells kept in a list for random choice, set for O(1) lookup
        frontier_set: Set[str] = set()
        frontier_list: List[Cell] = []

        def add_frontier(cell: Cell):
            for nbr, _ in grid.neighbors(cell):
                if not nbr.visited and nbr.id not in frontier_set:
                    frontier_set.add(nbr.id)
                    frontier_list.append(nbr)

        add_frontier(first)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = self.rng.randrange(len(frontier_list))
            current = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.discard(current.id)

            # Every frontier cell touches at least one visited cell
            visited_nbrs = [nbr for nbr, _ in grid.neighbors(current) if nbr.visited]
            target = self.rng.choice(visited_nbrs)

            grid.remove_wall(current, target)
            grid.set_visited(current)
            self.step_count += 1

            add_frontier(current)

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"

        logger.debug("Prim carved %d passages from %s", self.step_count, first.id)
        yield "Done"
