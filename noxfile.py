# topmark:header:start
#
#   project      : Aconitum
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Nox sessions for Aconitum.

Sessions:
  - `qa`: pytest on every supported Python, without the slow property tests.
  - `property_test`: only the ``hypothesis_slow`` tests.
  - `cli_smoke`: run a few `aconitum` commands from a non-editable install.
  - `lint` / `lint_fixall`: ruff check, optionally fixing.
  - `format_check` / `format`: ruff format.

`nox` alone runs `lint` and `format_check`.
"""

from __future__ import annotations

import nox

# Keep in sync with the classifiers in pyproject.toml.
PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running hypothesis tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def cli_smoke(session: nox.Session) -> None:
    """Exercise the installed console script."""
    session.install(".")
    session.run("aconitum", "version")
    session.run("aconitum", "width", "古池や")
    session.run("aconitum", "pretty-ms", "1337000000")
    session.run("aconitum", "git-url", "git@github.com:owner/repo.git", "--to", "https")
    session.run("aconitum", "config", "dump", "--defaults")


@nox.session
def lint(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:  # noqa: A001
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")
