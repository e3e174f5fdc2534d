class Cell:
    # Wall bits
    TOP    = 0b0001
    RIGHT  = 0b0010
    BOTTOM = 0b0100
    LEFT   = 0b1000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    __slots__ = ('row', 'col', 'walls', 'visited')

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.walls = self.ALL_WALLS
        self.visited = False

    @property
    def id(self) -> str:
        return f"{self.row}-{self.col}"

    @property
    def pos(self):
        return (self.row, self.col)

    def has_wall(self, dir_bit: int) -> bool:
        return (self.walls & dir_bit) != 0

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, walls={self.walls:04b})"
