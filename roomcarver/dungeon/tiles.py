# Cell states centralized for modular imports
from enum import IntEnum


class Cell(IntEnum):
    EMPTY = 0
    FLOOR = 1
    WALL = 2


EMPTY = Cell.EMPTY
FLOOR = Cell.FLOOR
WALL = Cell.WALL

# Single-character glyphs used by text renderers
GLYPHS = {EMPTY: " ", FLOOR: ".", WALL: "#"}


def cell_name(cell: Cell) -> str:
    if cell == FLOOR:
        return "floor"
    if cell == WALL:
        return "wall"
    return "empty"


__all__ = ["Cell", "EMPTY", "FLOOR", "WALL", "GLYPHS", "cell_name"]
