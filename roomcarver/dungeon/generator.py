"""Dungeon layout generation: seed resolution, phase pipeline and the controller.

Phases run in a fixed order on a freshly allocated grid:
    * Room placement (rejection sampling with 1-tile padding).
    * Corridor carving between consecutive rooms.
    * Wall synthesis around every floor cell.

``generate_layout`` is the pure part: config + RNG in, finished layout out.
``DungeonGenerator`` wraps it with the Generate / Clear lifecycle a UI button
or CLI drives, and hands each finished grid to a presentation adapter.
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .config import GeneratorConfig
from .grid import Grid
from .metrics import init_metrics
from .rooms import Room, place_rooms
from .tiles import EMPTY, FLOOR, WALL
from .tunnels import Corridor, connect_rooms
from .walls import add_walls_around_floors

log = get_logger("roomcarver.dungeon")


class DungeonLayout(NamedTuple):
    grid: Grid
    rooms: List[Room]
    corridors: List[Corridor]
    seed: int
    metrics: Dict[str, Any]


def resolve_seed(seed: Optional[int]) -> Tuple[int, random.Random]:
    """Return ``(seed_used, rng)``. Zero/None draws a seed from the clock."""
    if not seed:
        seed = time.time_ns() & 0x7FFFFFFF or 1
    return seed, random.Random(seed)


def generate_layout(config: GeneratorConfig, rng: random.Random, seed: int = 0) -> DungeonLayout:
    config.validate()
    metrics = init_metrics()
    phase_times = {}
    start = time.perf_counter()

    def _phase(label, fn, *a, **k):
        ps = time.perf_counter()
        r = fn(*a, **k)
        phase_times[label] = (time.perf_counter() - ps) * 1000
        return r

    grid = Grid(config.width, config.height)
    placement = _phase("place_rooms", place_rooms, grid, config, rng)
    corridors = _phase("connect_rooms", connect_rooms, grid, placement.rooms, rng)
    _phase("add_walls", add_walls_around_floors, grid)

    metrics["rooms"] = len(placement.rooms)
    metrics["room_attempts"] = placement.attempts
    metrics["rooms_rejected_overlap"] = placement.rejected_overlap
    metrics["rooms_skipped_oversize"] = placement.skipped_oversize
    metrics["corridors"] = len(corridors)
    metrics["tiles_floor"] = grid.count(FLOOR)
    metrics["tiles_wall"] = grid.count(WALL)
    metrics["tiles_empty"] = grid.count(EMPTY)
    metrics["runtime_ms"] = (time.perf_counter() - start) * 1000
    metrics["phase_ms"] = phase_times
    return DungeonLayout(grid, placement.rooms, corridors, seed, metrics)


class DungeonGenerator:
    """Owns the current layout and drives the presentation adapter.

    Callers must not invoke ``generate`` re-entrantly; one run completes
    before the next starts.
    """

    def __init__(self, config: GeneratorConfig | None = None, adapter=None):
        self.config = config or GeneratorConfig()
        self.adapter = adapter
        self.layout: Optional[DungeonLayout] = None

    @property
    def grid(self) -> Optional[Grid]:
        return self.layout.grid if self.layout else None

    @property
    def rooms(self) -> List[Room]:
        return list(self.layout.rooms) if self.layout else []

    @property
    def last_seed(self) -> Optional[int]:
        return self.layout.seed if self.layout else None

    @property
    def metrics(self) -> Dict[str, Any]:
        return self.layout.metrics if self.layout else {}

    def start(self) -> Optional[DungeonLayout]:
        """Generate once if the config asks for it (generate-on-start)."""
        if self.config.auto_generate:
            return self.generate()
        return None

    def generate(self) -> DungeonLayout:
        self.config.validate()
        self.clear()
        seed, rng = resolve_seed(self.config.seed)
        layout = generate_layout(self.config, rng, seed)
        self.layout = layout
        log.info(
            event="dungeon_generated",
            seed=seed,
            width=self.config.width,
            height=self.config.height,
            rooms=layout.metrics["rooms"],
            corridors=layout.metrics["corridors"],
            runtime_ms=round(layout.metrics["runtime_ms"], 2),
        )
        if self.adapter is not None:
            self.adapter.render(layout.grid, layout.rooms)
        return layout

    def clear(self) -> None:
        if self.adapter is not None and self.adapter.has_artifacts:
            self.adapter.release()
