import dataclasses
import os
from dataclasses import dataclass
from typing import Mapping, Optional


class DungeonConfigError(ValueError):
    """Raised when generator settings cannot describe any map at all."""


_TRUE = {"1", "true", "yes", "on"}

# env var -> (field, parser)
_ENV_FIELDS = {
    "DUNGEON_WIDTH": ("width", int),
    "DUNGEON_HEIGHT": ("height", int),
    "DUNGEON_MAX_ROOMS": ("max_rooms", int),
    "DUNGEON_MIN_ROOM_SIZE": ("min_room_size", int),
    "DUNGEON_MAX_ROOM_SIZE": ("max_room_size", int),
    "DUNGEON_SEED": ("seed", int),
    "DUNGEON_AUTO_GENERATE": ("auto_generate", lambda v: v.strip().lower() in _TRUE),
}


@dataclass
class GeneratorConfig:
    width: int = 80
    height: int = 50
    max_rooms: int = 12
    min_room_size: int = 4
    max_room_size: int = 10
    seed: Optional[int] = 0  # 0/None => time-derived seed
    auto_generate: bool = True

    def validate(self) -> "GeneratorConfig":
        """Reject settings no run could use. Rooms too big for the map are allowed."""
        if self.width <= 0 or self.height <= 0:
            raise DungeonConfigError(f"map size must be positive, got {self.width}x{self.height}")
        if self.max_rooms < 0:
            raise DungeonConfigError(f"max_rooms must be >= 0, got {self.max_rooms}")
        if self.min_room_size <= 0 or self.max_room_size <= 0:
            raise DungeonConfigError("room sizes must be positive")
        if self.min_room_size > self.max_room_size:
            raise DungeonConfigError(
                f"min_room_size ({self.min_room_size}) exceeds max_room_size ({self.max_room_size})"
            )
        return self

    def replace(self, **overrides) -> "GeneratorConfig":
        return dataclasses.replace(self, **overrides)

    @property
    def deterministic(self) -> bool:
        return bool(self.seed)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        env = os.environ if environ is None else environ
        return cls.from_mapping({k: env[k] for k in _ENV_FIELDS if k in env})

    @classmethod
    def from_mapping(cls, values: Mapping[str, object], base: Optional["GeneratorConfig"] = None) -> "GeneratorConfig":
        """Build a config from ``DUNGEON_*`` keys (env vars or Flask app.config)."""
        overrides = {}
        for key, (field, parse) in _ENV_FIELDS.items():
            if key not in values:
                continue
            raw = values[key]
            try:
                if isinstance(raw, str):
                    overrides[field] = parse(raw)
                elif field == "auto_generate":
                    overrides[field] = bool(raw)
                else:
                    overrides[field] = int(raw)
            except (TypeError, ValueError) as exc:
                raise DungeonConfigError(f"invalid value for {key}: {raw!r}") from exc
        return (base or cls()).replace(**overrides)


__all__ = ["GeneratorConfig", "DungeonConfigError"]
