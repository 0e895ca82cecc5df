"""Public dungeon package interface."""

from .config import DungeonConfigError, GeneratorConfig
from .generator import DungeonGenerator, DungeonLayout, generate_layout, resolve_seed
from .grid import Grid
from .rooms import Room, place_rooms
from .tiles import EMPTY, FLOOR, GLYPHS, WALL, Cell, cell_name
from .tunnels import Corridor, carve_horizontal_tunnel, carve_vertical_tunnel, connect_rooms
from .walls import add_walls_around_floors

__all__ = [
    "Cell",
    "Corridor",
    "DungeonConfigError",
    "DungeonGenerator",
    "DungeonLayout",
    "EMPTY",
    "FLOOR",
    "GLYPHS",
    "GeneratorConfig",
    "Grid",
    "Room",
    "WALL",
    "add_walls_around_floors",
    "carve_horizontal_tunnel",
    "carve_vertical_tunnel",
    "cell_name",
    "connect_rooms",
    "generate_layout",
    "place_rooms",
    "resolve_seed",
]
