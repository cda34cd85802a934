import importlib
import sys

import pytest

# We import run.py as a module and exercise parse_args + main with a patched
# game loop so no terminal is needed.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "aMAZEing" in out


def test_default_command_is_play(run_module):
    ns = run_module.parse_args([])
    assert ns.command == "play"
    assert ns.seed_pos is None


def test_bare_seed_means_play(run_module):
    ns = run_module.parse_args(["1234"])
    assert ns.command == "play"
    assert ns.seed_pos == 1234


def test_global_options_before_default_command(run_module):
    ns = run_module.parse_args(["--log-level", "debug", "--width", "9"])
    assert ns.command == "play"
    assert ns.log_level == "debug"
    assert ns.width == 9


def test_show_prints_maze(run_module, capsys):
    status = run_module.main(["show", "42", "--width", "21", "--height", "11", "--no-color"])
    assert status == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 12
    assert lines[-1].startswith("[42] you are the @")
    assert all(len(row) == 21 for row in lines[:11])


def test_show_is_reproducible(run_module, capsys):
    run_module.main(["show", "--seed", "5", "--width", "15", "--height", "9"])
    first = capsys.readouterr().out
    run_module.main(["show", "5", "--width", "15", "--height", "9"])
    assert capsys.readouterr().out == first


def test_env_configures_dimensions(run_module, monkeypatch, capsys):
    monkeypatch.setenv("AMAZE_WIDTH", "9")
    monkeypatch.setenv("AMAZE_HEIGHT", "7")
    monkeypatch.setenv("AMAZE_SEED", "3")
    assert run_module.main(["show"]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 8
    assert lines[-1].startswith("[3]")


def test_cli_flags_beat_env(run_module, monkeypatch, capsys):
    monkeypatch.setenv("AMAZE_WIDTH", "9")
    assert run_module.main(["show", "1", "--width", "5", "--height", "5"]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines[0]) == 5


def test_env_file_argument(run_module, tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("AMAZE_WIDTH=11\nAMAZE_HEIGHT=5\n")
    assert run_module.main(["--env-file", str(env_file), "show", "8"]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 6
    assert len(lines[0]) == 11


@pytest.mark.parametrize(
    "argv",
    [
        ["show", "--width", "4"],
        ["show", "--height", "1"],
        ["show", "--width", "-5"],
        ["show", "--seed", "-1"],
    ],
)
def test_config_errors_exit_nonzero(run_module, capsys, argv):
    assert run_module.main(argv) == run_module.EXIT_CONFIG_ERROR
    assert "[ERROR]" in capsys.readouterr().err


def test_bad_env_value_is_config_error(run_module, monkeypatch, capsys):
    monkeypatch.setenv("AMAZE_HEIGHT", "tall")
    assert run_module.main(["show"]) == run_module.EXIT_CONFIG_ERROR
    assert "AMAZE_HEIGHT" in capsys.readouterr().err


def test_play_runs_game_loop(run_module, monkeypatch, capsys):
    calls = {}

    def fake_run_game(maze, read_key, write, color=False):
        calls["seed"] = maze.seed
        calls["color"] = color
        return 0

    import amaze.game as game_mod

    monkeypatch.setattr(game_mod, "run_game", fake_run_game)
    assert run_module.main(["play", "77", "--width", "11", "--height", "7"]) == 0
    assert calls == {"seed": 77, "color": False}
    assert "using seed 77" in capsys.readouterr().out


def test_play_input_failure_exits_one(run_module, monkeypatch, capsys):
    def fake_run_game(maze, read_key, write, color=False):
        raise EOFError("input closed")

    import amaze.game as game_mod

    monkeypatch.setattr(game_mod, "run_game", fake_run_game)
    assert run_module.main(["5"]) == run_module.EXIT_INPUT_FAILED
    assert "could not read a command" in capsys.readouterr().err


def test_tui_mode_dispatches(run_module, monkeypatch):
    called = {}

    def fake_run_tui(maze):
        called["seed"] = maze.seed
        return 0

    import amaze.tui as tui_mod

    monkeypatch.setattr(tui_mod, "run_tui", fake_run_tui)
    assert run_module.main(["tui", "--seed", "12", "--width", "9", "--height", "9"]) == 0
    assert called["seed"] == 12
