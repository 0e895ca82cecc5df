"""roomcarver CLI entry point.

Provides subcommands for printing a generated dungeon to the terminal and for
running the web viewer with its Generate / Clear buttons. Accepts
configuration via flags and DUNGEON_* environment variables, with optional
.env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    roomcarver dungeon generator

    Print a procedurally generated room-and-corridor dungeon, or run the web
    viewer. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DUNGEON_WIDTH, DUNGEON_HEIGHT            Map size in tiles (default: 80x50)
          DUNGEON_MAX_ROOMS                        Placement attempts (default: 12)
          DUNGEON_MIN_ROOM_SIZE, DUNGEON_MAX_ROOM_SIZE  Room side bounds (default: 4..10)
          DUNGEON_SEED                             0 = new map every run (default: 0)

        Examples:
          # Print a random dungeon
          python run.py generate

          # Reproduce a map
          python run.py generate --seed 42 --width 40 --height 25

          # Run the web viewer on localhost
          python run.py serve --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="roomcarver",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"roomcarver {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one dungeon and print it as text (north at the top)",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Map width in tiles")
    gen_parser.add_argument("--height", type=int, default=None, help="Map height in tiles")
    gen_parser.add_argument("--max-rooms", dest="max_rooms", type=int, default=None, help="Room placement attempts")
    gen_parser.add_argument("--min-size", dest="min_room_size", type=int, default=None, help="Minimum room side")
    gen_parser.add_argument("--max-size", dest="max_room_size", type=int, default=None, help="Maximum room side")
    gen_parser.add_argument("--seed", type=int, default=None, help="Deterministic seed (0 = random)")
    gen_parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable coloured output")
    gen_parser.add_argument("--rooms", dest="list_rooms", action="store_true", help="List placed rooms after the map")
    gen_parser.set_defaults(command="generate")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the web viewer",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask development server with Generate / Clear buttons",
    )
    serve_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    serve_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    serve_parser.set_defaults(command="serve")

    args = parser.parse_args(argv)
    # If no subcommand provided, default to generate (keeping global flags such as --env-file)
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def _build_config(args):
    from roomcarver.dungeon import GeneratorConfig

    config = GeneratorConfig.from_env()
    overrides = {
        field: getattr(args, field)
        for field in ("width", "height", "max_rooms", "min_room_size", "max_room_size", "seed")
        if getattr(args, field, None) is not None
    }
    return config.replace(auto_generate=False, **overrides)


def _cmd_generate(args) -> int:
    from roomcarver.dungeon import DungeonConfigError, DungeonGenerator
    from roomcarver.render import render_text

    color = not args.no_color and sys.stdout.isatty()
    if color:
        _color_init()  # pragma: no cover - terminal dependent
    try:
        config = _build_config(args).validate()
    except DungeonConfigError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    layout = DungeonGenerator(config).generate()
    print(render_text(layout.grid, color=color))
    summary = (
        f"seed={layout.seed} size={config.width}x{config.height} rooms={len(layout.rooms)} "
        f"corridors={len(layout.corridors)} runtime_ms={layout.metrics['runtime_ms']:.2f}"
    )
    print(f"{Fore.CYAN}{summary}{Style.RESET_ALL}" if color else summary)
    if args.list_rooms:
        for i, room in enumerate(layout.rooms):
            print(f"  room {i}: x={room.x} y={room.y} w={room.w} h={room.h} center={room.center}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, else the default one when present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from roomcarver.logging_utils import log

    mode = (getattr(args, "command", None) or "generate").lower()
    log.debug(event="startup", mode=mode, version=__version__)

    if mode == "serve":
        from roomcarver.server import start_server

        host = args.host or os.getenv("HOST", "127.0.0.1")
        port = int(args.port or os.getenv("PORT", "5000"))
        debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")
        log.info(event="listen", host=host, port=port, debug=debug)
        start_server(host=host, port=port, debug=debug)
        return 0
    return _cmd_generate(args)


def main_cli():
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    main_cli()
