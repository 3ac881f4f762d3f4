import pytest

from minishell.pathsearch import find_cmd_path, get_path


def _make_file(directory, name, mode):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


@pytest.fixture
def dirs(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    _make_file(first, "tool", 0o644)
    _make_file(second, "tool", 0o755)
    _make_file(first, "both", 0o755)
    _make_file(second, "both", 0o755)
    return first, second


def test_first_executable_wins(dirs):
    first, second = dirs
    assert find_cmd_path("both", [str(first), str(second)]) == f"{first}/both"
    assert find_cmd_path("both", [str(second), str(first)]) == f"{second}/both"


def test_non_executable_is_skipped(dirs):
    first, second = dirs
    assert find_cmd_path("tool", [str(first), str(second)]) == f"{second}/tool"


def test_missing_command(dirs):
    first, second = dirs
    assert find_cmd_path("absent", [str(first), str(second)]) is None


@pytest.mark.parametrize("cmd", [None, ""])
def test_empty_command(dirs, cmd):
    assert find_cmd_path(cmd, [str(d) for d in dirs]) is None


def test_get_path_uses_path_entry(dirs):
    first, second = dirs
    envp = ["HOME=/home/user", f"PATH={first}:{second}"]
    assert get_path("tool", envp) == f"{second}/tool"


def test_get_path_ignores_empty_segments(dirs):
    first, second = dirs
    envp = [f"PATH=::{second}::"]
    assert get_path("both", envp) == f"{second}/both"


def test_get_path_last_path_entry_wins(dirs):
    first, second = dirs
    envp = [f"PATH={first}", f"PATH={second}"]
    assert get_path("both", envp) == f"{second}/both"


def test_get_path_without_path_reports(capsys):
    assert get_path("ls", ["HOME=/home/user"]) is None
    err = capsys.readouterr().err
    assert "Command not found" in err
    assert "ls" in err