import logging
from typing import Iterator, List
from gridmaze.core.cell import Cell
from gridmaze.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    def carve(self) -> Iterator[str]:
        grid = self.grid

        # Start from a random cell
        first = grid.random_cell()
        grid.set_visited(first)

        stack: List[Cell] = [first]

        while stack:
            current = stack.pop()

            neighbors = [nbr for nbr, _ in grid.neighbors(current) if not nbr.visited]

            if neighbors:
                # Keep current for backtracking
                stack.append(current)

                chosen = self.rng.choice(neighbors)
                grid.remove_wall(current, chosen)
                grid.set_visited(chosen)

                stack.append(chosen)
                self.step_count += 1

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            elif self.step_count % 100 == 0:
                yield f"Backtracking... Stack: {len(stack)}"

        logger.debug("DFS carved %d passages from %s", self.step_count, first.id)
        yield "Done"
