import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from roomcarver import create_app  # noqa: E402
from roomcarver.dungeon import GeneratorConfig  # noqa: E402

DUNGEON_ENV_KEYS = (
    "DUNGEON_WIDTH",
    "DUNGEON_HEIGHT",
    "DUNGEON_MAX_ROOMS",
    "DUNGEON_MIN_ROOM_SIZE",
    "DUNGEON_MAX_ROOM_SIZE",
    "DUNGEON_SEED",
    "DUNGEON_AUTO_GENERATE",
)


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation time guardrails")


@pytest.fixture(autouse=True)
def _isolate_dungeon_env(monkeypatch):
    """Keep DUNGEON_* from the developer's shell out of config defaults."""
    for key in DUNGEON_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def small_config():
    return GeneratorConfig(width=40, height=30, max_rooms=10, min_room_size=3, max_room_size=7, seed=1234)


@pytest.fixture()
def test_app():
    app = create_app(
        {
            "TESTING": True,
            "DUNGEON_WIDTH": 30,
            "DUNGEON_HEIGHT": 20,
            "DUNGEON_MAX_ROOMS": 6,
            "DUNGEON_MIN_ROOM_SIZE": 3,
            "DUNGEON_MAX_ROOM_SIZE": 6,
            "DUNGEON_SEED": 42,
        }
    )
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def generator(test_app):
    return test_app.extensions["dungeon"]["generator"]
