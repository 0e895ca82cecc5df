"""Event logger for dungeon runs.

Every line is one event: ``level=... ts=... event=... <fields> logger=...``.
The generator logs ``dungeon_generated`` with the seed and room counts,
placement logs ``room_attempt_skipped`` at debug, and the tile adapter
warns ``render_skipped`` when an asset is missing. The ``seed=`` field of a
``dungeon_generated`` line is enough to replay that map.

Environment:
    ROOMCARVER_LOG_LEVEL   debug | info | warn | error (default info)
    ROOMCARVER_LOG_JSON    1/true/yes/on to emit one JSON object per line

Fields whose value is None are left out. Text values have spaces replaced
with ``_`` so every field stays a single token.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("ROOMCARVER_LOG_LEVEL", "info").lower(), LEVELS["info"])
JSON_MODE = os.getenv("ROOMCARVER_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _token(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def format_event(level: str, fields: dict) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if JSON_MODE:
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}"]
    return " ".join(head + [f"{k}={_token(v)}" for k, v in present.items()])


class EventLogger:
    """Named emitter; level and output mode are read on every call."""

    def __init__(self, name: str):
        self.name = name

    def emit(self, level: str, **fields):
        if LEVELS[level] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(format_event(level, fields), file=stream)

    def debug(self, **fields):
        self.emit("debug", **fields)

    def info(self, **fields):
        self.emit("info", **fields)

    def warn(self, **fields):
        self.emit("warn", **fields)

    def error(self, **fields):
        self.emit("error", **fields)


_LOGGERS: dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = EventLogger(name)
    return _LOGGERS[name]


log = get_logger("roomcarver")
