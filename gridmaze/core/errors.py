class MazeError(Exception):
    """
    Base class for all maze-related errors.
    """
    pass


class InvalidDimensionError(MazeError, ValueError):
    """
    Raised when rows or cols is not a positive, finite number.
    """
    pass


class IndexOutOfRangeError(MazeError, IndexError):
    """
    Raised when a (row, col) query falls outside the grid.
    """
    pass


class NotAdjacentError(MazeError, ValueError):
    """
    Raised when a wall is removed between two cells that do not share one.
    """
    pass


class AlreadyGeneratedError(MazeError, RuntimeError):
    """
    Raised when a generator runs on a grid that was already carved.
    A Grid is single-use: build a new one to get another maze.
    """
    pass
