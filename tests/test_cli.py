import importlib
import os
import sys

import pytest

# run.py is imported as a module; the web server entry point is patched so
# nothing actually listens.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def _map_and_summary(out):
    lines = [line for line in out.split("\n") if not line.startswith("level=")]
    summary = [line for line in lines if line.startswith("seed=")]
    return lines, summary


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "roomcarver" in out
    assert run_module.__version__ in out


def test_default_command_is_generate(run_module):
    assert run_module.parse_args([]).command == "generate"
    ns = run_module.parse_args(["--env-file", "x.env"])
    assert ns.command == "generate" and ns.env_file == "x.env"


def test_generate_prints_map_and_summary(run_module, capsys):
    code = run_module.main(["generate", "--seed", "42", "--width", "30", "--height", "20", "--no-color"])
    assert code == 0
    lines, summary = _map_and_summary(capsys.readouterr().out)
    assert summary and "seed=42" in summary[0] and "size=30x20" in summary[0]
    map_lines = lines[: lines.index(summary[0])]
    assert len(map_lines) == 20
    assert all(len(line) == 30 for line in map_lines)


def test_generate_is_repeatable_with_seed(run_module, capsys):
    argv = ["generate", "--seed", "5", "--width", "24", "--height", "16", "--no-color", "--rooms"]
    run_module.main(argv)
    first = _map_and_summary(capsys.readouterr().out)[0]
    run_module.main(argv)
    second = _map_and_summary(capsys.readouterr().out)[0]
    strip = [line for line in first if "runtime_ms" not in line]
    assert strip == [line for line in second if "runtime_ms" not in line]
    assert any(line.startswith("  room 0:") for line in first)


def test_generate_invalid_config_exit_code(run_module, capsys):
    code = run_module.main(["generate", "--min-size", "6", "--max-size", "3", "--no-color"])
    assert code == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_env_file_supplies_dungeon_settings(run_module, tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("DUNGEON_WIDTH=15\nDUNGEON_HEIGHT=9\nDUNGEON_SEED=3\n")
    try:
        code = run_module.main(["--env-file", str(env_file), "generate", "--no-color"])
    finally:
        for key in ("DUNGEON_WIDTH", "DUNGEON_HEIGHT", "DUNGEON_SEED"):
            os.environ.pop(key, None)
    assert code == 0
    _, summary = _map_and_summary(capsys.readouterr().out)
    assert "seed=3 size=15x9" in summary[0]


def test_serve_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    import roomcarver.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    monkeypatch.setenv("PORT", "5555")
    assert run_module.main(["serve", "--host", "127.0.0.1", "--debug"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": True}
