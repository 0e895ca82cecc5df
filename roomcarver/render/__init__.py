from .adapter import PresentationAdapter, Tile, TileAdapter
from .text import render_lines, render_text

__all__ = ["PresentationAdapter", "Tile", "TileAdapter", "render_lines", "render_text"]
