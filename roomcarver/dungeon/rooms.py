from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

from ..logging_utils import get_logger
from .config import GeneratorConfig
from .grid import Grid
from .tiles import FLOOR

log = get_logger("roomcarver.dungeon")


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    @property
    def x_max(self) -> int:
        return self.x + self.w

    @property
    def y_max(self) -> int:
        return self.y + self.h

    def cells(self) -> Iterator[Tuple[int, int]]:
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def padded(self, pad: int = 1) -> "Room":
        return Room(self.x - pad, self.y - pad, self.w + 2 * pad, self.h + 2 * pad)

    def overlaps(self, other: "Room") -> bool:
        # Half-open rectangles: touching edges do not overlap
        return self.x < other.x_max and other.x < self.x_max and self.y < other.y_max and other.y < self.y_max


class PlacementResult(NamedTuple):
    rooms: List[Room]
    attempts: int
    rejected_overlap: int
    skipped_oversize: int


def place_rooms(grid: Grid, config: GeneratorConfig, rng) -> PlacementResult:
    """Scatter up to ``config.max_rooms`` rooms with a fixed number of attempts.

    Each attempt draws a size, then a bottom-left origin inside a 1-tile
    border. A candidate that comes within one tile of an accepted room is
    dropped with no retry, so dense settings under-fill. When a drawn size
    leaves no valid origin the attempt is skipped instead of clamped.

    ``rng`` is the run's own ``random.Random``; draws per attempt are
    ``randint`` (w), ``randint`` (h), ``randrange`` (x), ``randrange`` (y).
    """
    rooms: List[Room] = []
    rejected = 0
    skipped = 0
    for _ in range(config.max_rooms):
        w = rng.randint(config.min_room_size, config.max_room_size)
        h = rng.randint(config.min_room_size, config.max_room_size)
        x_stop = grid.width - w - 1
        y_stop = grid.height - h - 1
        if x_stop <= 1 or y_stop <= 1:
            skipped += 1
            log.debug(event="room_attempt_skipped", w=w, h=h, width=grid.width, height=grid.height)
            continue
        x = rng.randrange(1, x_stop)
        y = rng.randrange(1, y_stop)
        candidate = Room(x, y, w, h)
        if _room_overlaps(candidate, rooms):
            rejected += 1
            continue
        rooms.append(candidate)
        for ix, iy in candidate.cells():
            grid.set(ix, iy, FLOOR)
    return PlacementResult(rooms, config.max_rooms, rejected, skipped)


def _room_overlaps(room: Room, existing: List[Room]) -> bool:
    for r in existing:
        if r.padded(1).overlaps(room):
            return True
    return False
