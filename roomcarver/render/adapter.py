"""Presentation adapters that turn a finished grid into drawable tiles.

The generator only knows the ``render`` / ``release`` / ``has_artifacts``
surface; how tiles are allocated or pooled is left to the adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from ..dungeon.grid import Grid
from ..dungeon.tiles import FLOOR, WALL, Cell
from ..logging_utils import get_logger

log = get_logger("roomcarver.render")


class PresentationAdapter:
    """Base adapter: renders nothing and holds no artifacts."""

    def render(self, grid: Grid, rooms=None) -> None:
        pass

    def release(self) -> None:
        pass

    @property
    def has_artifacts(self) -> bool:
        return False


@dataclass
class Tile:
    x: int
    y: int
    cell: Cell
    asset: Any
    parent: Optional[str] = None
    destroyed: bool = False

    def destroy(self):
        self.destroyed = True


class TileAdapter(PresentationAdapter):
    """Spawns one Tile per FLOOR/WALL cell using the configured assets.

    Without both assets nothing is drawn: a warning is logged and the layout
    stays valid for anyone reading ``grid`` directly.
    """

    def __init__(self, floor_asset=None, wall_asset=None, parent: Optional[str] = None):
        self.floor_asset = floor_asset
        self.wall_asset = wall_asset
        self.parent = parent
        self.created_tiles: List[Tile] = []
        self._size = (0, 0)

    @property
    def has_artifacts(self) -> bool:
        return bool(self.created_tiles)

    def render(self, grid: Grid, rooms=None) -> None:
        if self.floor_asset is None or self.wall_asset is None:
            log.warn(
                event="render_skipped",
                reason="assets_missing",
                floor_asset=self.floor_asset is not None,
                wall_asset=self.wall_asset is not None,
            )
            return
        assets = {FLOOR: self.floor_asset, WALL: self.wall_asset}
        for x, y, cell in grid.iter_cells():
            asset = assets.get(cell)
            if asset is not None:
                self.created_tiles.append(Tile(x, y, cell, asset, self.parent))
        self._size = grid.size
        log.debug(event="render_done", tiles=len(self.created_tiles), parent=self.parent)

    def release(self) -> None:
        for tile in self.created_tiles:
            tile.destroy()
        self.created_tiles.clear()
        self._size = (0, 0)

    def rows(self, blank: str = " ") -> List[str]:
        """Drawn tiles as text rows, top row first (y grows upward)."""
        width, height = self._size
        canvas = [[blank] * width for _ in range(height)]
        for tile in self.created_tiles:
            canvas[height - 1 - tile.y][tile.x] = str(tile.asset)
        return ["".join(row) for row in canvas]
