"""
project: roomcarver
module: dungeon_ui.py
License: MIT

Dungeon viewer routes: the map page with Generate / Clear buttons and a
plain-text map endpoint.
"""

from flask import Blueprint, Response, abort, current_app, redirect, render_template, request, url_for

from roomcarver.dungeon import DungeonConfigError

bp_dungeon = Blueprint("dungeon", __name__)


def _controller():
    ext = current_app.extensions["dungeon"]
    return ext["generator"], ext["lock"]


def _parse_seed(raw):
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return False


@bp_dungeon.route("/")
def index():
    return redirect(url_for("dungeon.view"))


@bp_dungeon.route("/dungeon")
def view():
    generator, lock = _controller()
    with lock:
        rows = generator.adapter.rows()
        rooms = generator.rooms
        seed = generator.last_seed
        metrics = dict(generator.metrics)
    return render_template(
        "dungeon.html",
        rows=rows,
        rooms=rooms,
        seed=seed,
        metrics=metrics,
        gen_config=generator.config,
    )


@bp_dungeon.route("/dungeon/generate", methods=["POST"])
def generate():
    """Regenerate with the current config; an optional ``seed`` field replaces the configured seed."""
    generator, lock = _controller()
    seed = _parse_seed(request.form.get("seed"))
    if seed is False:
        abort(400, description="seed must be an integer")
    with lock:
        if seed is not None:
            generator.config = generator.config.replace(seed=seed)
        try:
            generator.generate()
        except DungeonConfigError as exc:
            abort(400, description=str(exc))
    return redirect(url_for("dungeon.view"))


@bp_dungeon.route("/dungeon/clear", methods=["POST"])
def clear():
    generator, lock = _controller()
    with lock:
        generator.clear()
    return redirect(url_for("dungeon.view"))


@bp_dungeon.route("/dungeon/map.txt")
def map_text():
    generator, lock = _controller()
    with lock:
        body = "\n".join(generator.adapter.rows())
    return Response(body + "\n" if body else "", mimetype="text/plain")
