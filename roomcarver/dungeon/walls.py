from .grid import Grid
from .tiles import EMPTY, WALL


def add_walls_around_floors(grid: Grid) -> int:
    """Turn every EMPTY cell orthogonally next to a FLOOR into a WALL.

    One pass only: walls are a single tile thick and a floor touching only
    diagonally leaves the cell EMPTY. Returns the number of walls placed.
    """
    placed = 0
    for x, y, cell in grid.iter_cells():
        if cell != EMPTY:
            continue
        if grid.floor_neighbors(x, y):
            grid.set(x, y, WALL)
            placed += 1
    return placed
