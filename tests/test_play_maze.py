import pytest

pytest.importorskip("arcade")

from hex_maze import play_maze  # noqa: E402


def test_log_level_flag_is_case_insensitive():
    assert play_maze.parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    assert play_maze.parse_args([]).log_level is None


def test_unknown_log_level_flag_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        play_maze.main(["--log-level", "chatty"])
    assert excinfo.value.code == 2


def test_unknown_log_level_from_environment_exits_cleanly(monkeypatch):
    monkeypatch.setenv("HEX_MAZE_LOG_LEVEL", "chatty")
    with pytest.raises(SystemExit) as excinfo:
        play_maze.main([])
    assert "chatty" in str(excinfo.value.code)
