from typing import List, NamedTuple, Tuple

from .grid import Grid
from .rooms import Room
from .tiles import EMPTY, FLOOR

_CARVABLE = (EMPTY, FLOOR)


class Corridor(NamedTuple):
    start: Tuple[int, int]
    end: Tuple[int, int]
    horizontal_first: bool

    @property
    def bend(self) -> Tuple[int, int]:
        (x1, y1), (x2, y2) = self.start, self.end
        return (x2, y1) if self.horizontal_first else (x1, y2)


def _carve_cell(grid: Grid, x: int, y: int) -> int:
    if not grid.in_bounds(x, y):
        return 0
    if grid[x][y] not in _CARVABLE:
        return 0
    grid.set(x, y, FLOOR)
    return 1


def carve_horizontal_tunnel(grid: Grid, x1: int, x2: int, y: int) -> int:
    """Floor every cell on row ``y`` between x1 and x2 inclusive; off-grid cells are skipped."""
    return sum(_carve_cell(grid, x, y) for x in range(min(x1, x2), max(x1, x2) + 1))


def carve_vertical_tunnel(grid: Grid, y1: int, y2: int, x: int) -> int:
    """Floor every cell on column ``x`` between y1 and y2 inclusive; off-grid cells are skipped."""
    return sum(_carve_cell(grid, x, y) for y in range(min(y1, y2), max(y1, y2) + 1))


def carve_corridor(grid: Grid, a: Tuple[int, int], b: Tuple[int, int], horizontal_first: bool) -> Corridor:
    """Single-bend L path from ``a`` to ``b``."""
    (ax, ay), (bx, by) = a, b
    if horizontal_first:
        carve_horizontal_tunnel(grid, ax, bx, ay)
        carve_vertical_tunnel(grid, ay, by, bx)
    else:
        carve_vertical_tunnel(grid, ay, by, ax)
        carve_horizontal_tunnel(grid, ax, bx, by)
    return Corridor(a, b, horizontal_first)


def connect_rooms(grid: Grid, rooms: List[Room], rng) -> List[Corridor]:
    """Join each room to the one accepted just before it.

    Pairs follow acceptance order, not any spatial sort. The bend direction
    is a fresh ``rng.random()`` coin flip per pair, drawn from the same
    ``random.Random`` that placed the rooms.
    """
    corridors = []
    for i in range(1, len(rooms)):
        prev_center = rooms[i - 1].center
        cur_center = rooms[i].center
        horizontal_first = rng.random() < 0.5
        corridors.append(carve_corridor(grid, prev_center, cur_center, horizontal_first))
    return corridors
