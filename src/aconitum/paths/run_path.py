# topmark:header:start
#
#   project      : Aconitum
#   file         : run_path.py
#   file_relpath : src/aconitum/paths/run_path.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Build a ``PATH`` that prefers locally installed ``node_modules/.bin`` executables."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from aconitum.config.logging import get_logger
from aconitum.paths.path_key import path_key
from aconitum.paths.traverse import PathInput, to_path, traverse_path_up

logger = get_logger(__name__)

LOCAL_BIN_DIR = os.path.join("node_modules", ".bin")


def npm_run_path(
    *,
    cwd: PathInput | None = None,
    path: str | None = None,
    prefer_local: bool = True,
    exec_path: PathInput | None = None,
    add_exec_path: bool = True,
) -> str:
    """Return ``path`` with local binary directories prepended.

    Args:
        cwd (PathInput | None): Directory to start from, the working directory by default.
        path (str | None): The search path to extend, ``$PATH`` by default.
        prefer_local (bool): Prepend ``node_modules/.bin`` of ``cwd`` and every parent.
        exec_path (PathInput | None): Interpreter whose directory is prepended,
            ``sys.executable`` by default.
        add_exec_path (bool): Prepend the directory of ``exec_path``.

    Returns:
        str: The extended search path. Directories already in ``path`` are not repeated.
    """
    if path is None:
        path = os.environ.get(path_key())
    cwd_path = os.path.abspath(to_path(cwd if cwd is not None else os.getcwd()))
    path_parts = path.split(os.pathsep) if path is not None else []
    result: list[str] = []

    if prefer_local:
        for directory in traverse_path_up(cwd_path):
            part = os.path.join(directory, LOCAL_BIN_DIR)
            if part not in path_parts:
                result.append(part)

    if add_exec_path:
        executable = to_path(exec_path if exec_path is not None else sys.executable)
        part = os.path.dirname(os.path.abspath(os.path.join(cwd_path, executable)))
        if part not in path_parts:
            result.append(part)

    logger.trace("prepending %d directories to PATH", len(result))
    if path is None:
        return os.pathsep.join(result)
    if path in ("", os.pathsep):
        return os.pathsep.join(result) + path
    return os.pathsep.join([*result, path])


def npm_run_path_env(
    env: Mapping[str, str] | None = None,
    *,
    cwd: PathInput | None = None,
    prefer_local: bool = True,
    exec_path: PathInput | None = None,
    add_exec_path: bool = True,
) -> dict[str, str]:
    """Return a copy of ``env`` whose ``PATH`` went through `npm_run_path`."""
    new_env = dict(os.environ if env is None else env)
    key = path_key(new_env)
    new_env[key] = npm_run_path(
        cwd=cwd,
        path=new_env.get(key),
        prefer_local=prefer_local,
        exec_path=exec_path,
        add_exec_path=add_exec_path,
    )
    return new_env
