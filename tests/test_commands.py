import os

import pytest

from pipeline_redirect.commands import (
    Command,
    PipexError,
    build_commands,
    check_argv,
    check_path,
    resolve_command,
    search_paths,
)


def _make_exec(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def bins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_exec(first, "tool")
    _make_exec(second, "tool")
    _make_exec(second, "other")
    plain = second / "plain"
    plain.write_text("data")
    plain.chmod(0o644)
    return first, second


def test_check_argv_accepts_non_empty():
    assert check_argv(["prog", "in", "cat", "wc", "out"]) is True


def test_check_argv_rejects_empty_middle():
    assert check_argv(["prog", "in", "", "wc", "out"]) is False


def test_check_argv_ignores_last():
    assert check_argv(["prog", "in", "cat", "wc", ""]) is True


def test_search_paths_splits_and_drops_empty():
    assert search_paths({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_search_paths_missing():
    with pytest.raises(PipexError):
        search_paths({"HOME": "/home"})


def test_search_paths_empty_value():
    assert search_paths({"PATH": ""}) == []


def test_check_path_found(bins):
    first, _ = bins
    assert check_path("tool", str(first)) == f"{first}/tool"


def test_check_path_not_executable(bins):
    _, second = bins
    assert check_path("plain", str(second)) is None


def test_check_path_missing(bins):
    first, _ = bins
    assert check_path("other", str(first)) is None


def test_resolve_command_first_match_wins(bins):
    first, second = bins
    assert resolve_command("tool", [str(first), str(second)]) == f"{first}/tool"
    assert resolve_command("tool", [str(second), str(first)]) == f"{second}/tool"


def test_resolve_command_searches_later_dirs(bins):
    first, second = bins
    assert resolve_command("other", [str(first), str(second)]) == f"{second}/other"


def test_resolve_command_none(bins):
    first, second = bins
    assert resolve_command("absent", [str(first), str(second)]) is None


def test_build_commands(bins):
    first, second = bins
    env = {"PATH": f"{first}:{second}"}
    argv = ["prog", "in", "tool  -x  y", "other", "out"]
    assert build_commands(argv, env) == [
        Command(("tool", "-x", "y"), f"{first}/tool"),
        Command(("other",), f"{second}/other"),
    ]


def test_build_commands_here_doc_skips_limiter(bins):
    first, second = bins
    env = {"PATH": f"{first}:{second}"}
    argv = ["prog", "here_doc", "tool", "other", "tool", "out"]
    result = build_commands(argv, env)
    assert [c.args[0] for c in result] == ["other", "tool"]


def test_build_commands_unknown_command(bins):
    first, _ = bins
    with pytest.raises(PipexError):
        build_commands(["prog", "in", "tool", "absent", "out"], {"PATH": str(first)})


def test_build_commands_blank_command(bins):
    first, _ = bins
    with pytest.raises(PipexError):
        build_commands(["prog", "in", "   ", "tool", "out"], {"PATH": str(first)})


def test_build_commands_no_path(bins):
    with pytest.raises(PipexError):
        build_commands(["prog", "in", "tool", "out"], {})


def test_build_commands_too_few_arguments():
    with pytest.raises(PipexError):
        build_commands(["prog", "in"], {"PATH": os.defpath})