# topmark:header:start
#
#   project      : PlayFrame
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Nox sessions for PlayFrame (uv-backed virtualenvs).

``nox`` alone runs ``lint`` and ``format_check``. ``nox -s qa`` runs pytest
and pyright once per Python listed in the ``pyproject.toml`` classifiers;
``nox -s property_test`` runs the long hypothesis searches.
"""

from __future__ import annotations

import pathlib
import re
import sys

import nox

ROOT: pathlib.Path = pathlib.Path(__file__).parent
CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
DEV_EXTRAS: str = ".[test,dev]"

_CLASSIFIER_RE = re.compile(r'"Programming Language :: Python :: (\d+)\.(\d+)"')


def get_supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions named in the pyproject classifiers.

    Read with a regex so the noxfile imports without any TOML parser; falls
    back to the running interpreter when nothing matches.
    """
    try:
        text: str = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    except OSError:
        return [CURRENT_PYTHON_VERSION]
    found: set[tuple[int, int]] = {(int(a), int(b)) for a, b in _CLASSIFIER_RE.findall(text)}
    return [f"{a}.{b}" for a, b in sorted(found)] or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


def _ruff(session: nox.Session, *args: str) -> None:
    session.install("-e", DEV_EXTRAS)
    session.run("ruff", *args, ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (without slow properties) and pyright."""
    session.install("-e", DEV_EXTRAS)
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint."""
    _ruff(session, "check")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Ruff lint with autofix."""
    _ruff(session, "check", "--fix")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail on unformatted files."""
    _ruff(session, "format", "--check")


@nox.session
def format(session: nox.Session) -> None:
    """Apply ruff formatting."""
    _ruff(session, "format")


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the ``hypothesis_slow`` properties (injector, analyzer)."""
    session.install("-e", DEV_EXTRAS)
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist and wheel, then validate them with twine."""
    session.install("build", "twine")
    session.run("python", "-m", "build")
    session.run("twine", "check", *sorted(str(p) for p in (ROOT / "dist").glob("*")))
