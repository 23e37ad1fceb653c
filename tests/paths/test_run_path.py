# topmark:header:start
#
#   project      : Aconitum
#   file         : test_run_path.py
#   file_relpath : tests/paths/test_run_path.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for `PATH` key lookup and local binary path building."""

from __future__ import annotations

import os
from pathlib import Path

from aconitum.paths.path_key import path_key
from aconitum.paths.run_path import LOCAL_BIN_DIR, npm_run_path, npm_run_path_env


def test_path_key() -> None:
    assert path_key({"PATH": "/bin"}, "linux") == "PATH"
    assert path_key({"Path": "a", "PATH": "b"}, "win32") == "PATH"
    assert path_key({"path": "a"}, "win32") == "path"
    assert path_key({}, "win32") == "Path"


def test_run_path_prepends_local_bins(tmp_path: Path) -> None:
    cwd = tmp_path / "a" / "b"
    result = npm_run_path(cwd=cwd, path="/usr/bin", add_exec_path=False)
    parts = result.split(os.pathsep)
    assert parts[0] == os.path.join(str(cwd), LOCAL_BIN_DIR)
    assert parts[1] == os.path.join(str(tmp_path / "a"), LOCAL_BIN_DIR)
    assert parts[-1] == "/usr/bin"


def test_run_path_adds_the_interpreter_directory(tmp_path: Path) -> None:
    exec_path = tmp_path / "bin" / "python"
    result = npm_run_path(cwd=tmp_path, path="/usr/bin", prefer_local=False, exec_path=exec_path)
    assert result == os.pathsep.join([str(tmp_path / "bin"), "/usr/bin"])


def test_run_path_does_not_repeat_directories(tmp_path: Path) -> None:
    local = os.path.join(str(tmp_path), LOCAL_BIN_DIR)
    result = npm_run_path(cwd=tmp_path, path=local, add_exec_path=False)
    assert result.split(os.pathsep).count(local) == 1


def test_run_path_keeps_empty_paths(tmp_path: Path) -> None:
    exec_path = tmp_path / "bin" / "python"
    result = npm_run_path(cwd=tmp_path, path="", prefer_local=False, exec_path=exec_path)
    assert result == str(tmp_path / "bin")


def test_run_path_env_returns_a_copy(tmp_path: Path) -> None:
    env = {"PATH": "/usr/bin", "OTHER": "1"}
    new_env = npm_run_path_env(env, cwd=tmp_path, add_exec_path=False)
    assert env["PATH"] == "/usr/bin"
    assert new_env["OTHER"] == "1"
    assert new_env["PATH"].startswith(os.path.join(str(tmp_path), LOCAL_BIN_DIR))
    assert new_env["PATH"].endswith("/usr/bin")
