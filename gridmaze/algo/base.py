from abc import ABC, abstractmethod
from typing import Iterator
from gridmaze.core.grid import Grid
from gridmaze.core.errors import AlreadyGeneratedError

class Generator(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.rng = grid.rng
        self.step_count = 0

    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        Raises AlreadyGeneratedError (on first next()) if the grid was carved before.
        """
        if self.grid.generated:
            raise AlreadyGeneratedError(
                f"{self.grid.rows}x{self.grid.cols} grid is already generated; create a new Grid"
            )
        self.grid.generated = True
        yield from self.carve()

    @abstractmethod
    def carve(self) -> Iterator[str]:
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid
