from typing import List

from colorama import Fore, Style

from ..dungeon.grid import Grid
from ..dungeon.tiles import FLOOR, GLYPHS, WALL

_COLORS = {FLOOR: Fore.YELLOW, WALL: Fore.BLUE + Style.BRIGHT}


def render_lines(grid: Grid, color: bool = False) -> List[str]:
    lines = []
    for y in range(grid.height - 1, -1, -1):
        parts = []
        for x in range(grid.width):
            cell = grid[x][y]
            glyph = GLYPHS[cell]
            if color and cell in _COLORS:
                glyph = f"{_COLORS[cell]}{glyph}{Style.RESET_ALL}"
            parts.append(glyph)
        lines.append("".join(parts))
    return lines


def render_text(grid: Grid, color: bool = False) -> str:
    """Whole grid as text, north at the top."""
    return "\n".join(render_lines(grid, color=color))
