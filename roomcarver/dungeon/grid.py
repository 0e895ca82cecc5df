from typing import Iterator, List, Tuple

from .tiles import EMPTY, FLOOR, Cell

NEIGHBORS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Grid:
    """Fixed-size 2D store of cell states, addressed column-major as ``grid[x][y]``.

    Origin is the bottom-left corner; ``y`` grows upward. Dimensions never
    change after construction; a new run allocates a new Grid. ``get``, ``set``
    and column lookup raise IndexError outside the grid instead of wrapping
    negative indexes around.
    """

    __slots__ = ("_width", "_height", "_cells")

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._cells: List[List[Cell]] = [[EMPTY for _ in range(height)] for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def __getitem__(self, x: int) -> List[Cell]:
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} outside grid of width {self._width}")
        return self._cells[x]

    def __len__(self) -> int:
        return self._width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x: int, y: int) -> None:
        # Negative indexes would wrap to the far edge of the list
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self._width}x{self._height} grid")

    def get(self, x: int, y: int) -> Cell:
        """Cell at ``(x, y)``; raises IndexError when out of bounds."""
        self._check(x, y)
        return self._cells[x][y]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self._check(x, y)
        self._cells[x][y] = cell

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for x in range(self._width):
            column = self._cells[x]
            for y in range(self._height):
                yield x, y, column[y]

    def count(self, cell: Cell) -> int:
        return sum(column.count(cell) for column in self._cells)

    def floor_neighbors(self, x: int, y: int) -> int:
        """Number of in-bounds orthogonal neighbours that are FLOOR."""
        n = 0
        for dx, dy in NEIGHBORS_4:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny) and self._cells[nx][ny] == FLOOR:
                n += 1
        return n

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        # Hashable copy for equality checks between runs
        return tuple(tuple(int(c) for c in column) for column in self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self):
        return f"Grid(width={self._width}, height={self._height})"
