from __future__ import annotations

from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'rooms': 0,
        'room_attempts': 0,
        'rooms_rejected_overlap': 0,
        'rooms_skipped_oversize': 0,
        'corridors': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'tiles_empty': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
