import os

import pytest

from rush.builtin import execute_builtin
from rush.errors import BuiltinArityError, ChangeDirectoryError, ExitUsageError
from rush.registry import PathRegistry


@pytest.fixture
def registry():
    return PathRegistry(["/bin"])


def test_non_builtin_falls_through(registry):
    assert execute_builtin(["ls", "-l"], registry) is False
    assert execute_builtin([], registry) is False


def test_names_are_case_sensitive(registry):
    assert execute_builtin(["EXIT"], registry) is False
    assert execute_builtin(["Cd", "/"], registry) is False


def test_exit_without_arguments(registry):
    with pytest.raises(SystemExit) as exc_info:
        execute_builtin(["exit"], registry)
    assert exc_info.value.code == 0


def test_exit_with_arguments_is_usage_error(registry):
    with pytest.raises(ExitUsageError):
        execute_builtin(["exit", "extra"], registry)


def test_cd_changes_directory(registry, tmp_path, monkeypatch):
    monkeypatch.chdir("/")
    assert execute_builtin(["cd", str(tmp_path)], registry) is True
    assert os.getcwd() == os.path.realpath(tmp_path)


@pytest.mark.parametrize("tokens", [["cd"], ["cd", "a", "b"]])
def test_cd_arity(registry, tokens):
    with pytest.raises(BuiltinArityError):
        execute_builtin(tokens, registry)


def test_cd_failure_leaves_directory_unchanged(registry, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ChangeDirectoryError):
        execute_builtin(["cd", "/nonexistent"], registry)
    assert os.getcwd() == os.path.realpath(tmp_path)


def test_cd_into_a_file(registry, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "file").write_text("")
    with pytest.raises(ChangeDirectoryError):
        execute_builtin(["cd", "file"], registry)


def test_path_replaces_registry(registry):
    assert execute_builtin(["path", "/a", "/b"], registry) is True
    assert registry.directories == ["/a", "/b"]


def test_path_without_arguments_empties_registry(registry):
    execute_builtin(["path"], registry)
    assert registry.directories == []


def test_cd_with_nul_byte_is_usage_error(registry, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ChangeDirectoryError):
        execute_builtin(["cd", "a\x00b"], registry)
    assert os.getcwd() == os.path.realpath(tmp_path)
