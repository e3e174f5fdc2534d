from typing import Iterable, Tuple
from gridmaze.core.grid import Grid

def render_text(grid: Grid, path: Iterable[Tuple[int, int]] = None) -> str:
    """
    Draws the maze with '+', '---' and '|'. Cells on the path show a '*'.
    """
    on_path = set(path or ())
    lines = ["+" + "---+" * grid.cols]

    for r in range(grid.rows):
        mid = ["|" if grid.cells[grid.index(r, 0)].has_wall(Grid.LEFT) else " "]
        low = ["+"]
        for c in range(grid.cols):
            cell = grid.cells[grid.index(r, c)]
            mid.append(" * " if (r, c) in on_path else "   ")
            mid.append("|" if cell.has_wall(Grid.RIGHT) else " ")
            low.append("---" if cell.has_wall(Grid.BOTTOM) else "   ")
            low.append("+")
        lines.append("".join(mid))
        lines.append("".join(low))

    return "\n".join(lines)
