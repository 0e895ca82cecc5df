"""
project: roomcarver
module: __init__.py
License: MIT

Flask application factory for the dungeon viewer.

The web layer is the "UI button" controller: it owns one DungeonGenerator
per app, wired to a glyph-based TileAdapter, and exposes Generate / Clear.
Configuration comes from environment variables (optionally via a local
``.env``) and can be overridden through ``app.config`` keys of the same name.
"""

import os
import threading

from dotenv import load_dotenv
from flask import Flask

from roomcarver.dungeon import DungeonGenerator, GeneratorConfig
from roomcarver.dungeon.tiles import FLOOR, GLYPHS, WALL
from roomcarver.render import TileAdapter

__version__ = "0.1.0"

EXTENSION_KEY = "dungeon"


def create_app(config_overrides=None):
    """Return a configured Flask app with a ready dungeon controller."""
    # Load .env if present so DUNGEON_* can be supplied without exporting shell variables.
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        TEMPLATES_AUTO_RELOAD=True,
    )
    if config_overrides:
        app.config.update(config_overrides)

    gen_config = GeneratorConfig.from_mapping(app.config, base=GeneratorConfig.from_env())
    gen_config.validate()
    adapter = TileAdapter(floor_asset=GLYPHS[FLOOR], wall_asset=GLYPHS[WALL], parent="dungeon-view")
    generator = DungeonGenerator(gen_config, adapter)
    app.extensions[EXTENSION_KEY] = {
        "generator": generator,
        "lock": threading.Lock(),
    }
    generator.start()

    from roomcarver.routes.dungeon_ui import bp_dungeon

    app.register_blueprint(bp_dungeon)
    return app
