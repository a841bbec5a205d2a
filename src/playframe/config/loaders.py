# topmark:header:start
#
#   project      : PlayFrame
#   file         : loaders.py
#   file_relpath : src/playframe/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading PlayFrame configuration from:
- the packaged default TOML template,
- runtime defaults defined in code, and
- on-disk TOML files (`playframe.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from playframe.config.keys import Toml
from playframe.config.logging import get_logger
from playframe.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)
from playframe.core.errors import ConfigError

if TYPE_CHECKING:
    from playframe.config.logging import PlayframeLogger

TomlTable = dict[str, Any]

logger: PlayframeLogger = get_logger(__name__)

HEADER_END_LINE: str = "# topmark:header:end"


def load_default_config_template_toml_text() -> str:
    """Return the bundled, annotated default configuration as TOML text.

    The leading file header block is stripped so the output starts at the
    template content.

    Returns:
        The TOML document text of ``playframe-default.toml``.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    toml_text: str = resource.read_text(encoding="utf-8")
    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == HEADER_END_LINE:
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def load_defaults_dict() -> TomlTable:
    """Return PlayFrame's **runtime defaults** as a Python dict.

    This function performs no I/O: the defaults live in code so PlayFrame keeps
    working when the packaged template is unavailable. Keep it aligned with
    ``playframe-default.toml``.

    Returns:
        A new TOML-table-compatible dict; callers may mutate it.
    """
    return {
        Toml.SECTION_LAYOUT: {
            Toml.KEY_WIDTH_RATIO: 0.92,
            Toml.KEY_HEIGHT_RATIO: 0.88,
            Toml.KEY_MIN_SIZE: 320,
            Toml.KEY_CANVAS_FALLBACK_WIDTH: 800,
            Toml.KEY_CANVAS_FALLBACK_HEIGHT: 600,
            Toml.KEY_RESIZE_DELAY_MS: 50,
            Toml.KEY_ROOT_SELECTORS: [
                "#game-container",
                ".game-area",
                ".game-root",
                ".game",
                ".stage",
            ],
            Toml.KEY_CONTAINER_SELECTORS: [".game-area", "#game-container", ".container"],
        },
        Toml.SECTION_BRIDGE: {
            Toml.KEY_TARGET_ORIGIN: "*",
            Toml.KEY_CONFIRM_DEFAULT: True,
        },
        Toml.SECTION_SCORE: {
            Toml.KEY_CORRECT_LABELS: ["正确", "correct"],
            Toml.KEY_WRONG_LABELS: ["错误", "wrong"],
            Toml.KEY_PROGRESS_LABELS: ["进度", "progress"],
            Toml.KEY_PROGRESS_MAX: 10,
        },
        Toml.SECTION_EXPORT: {
            Toml.KEY_DEFAULT_TITLE: "game",
        },
    }


def parse_toml_text(text: str, *, source: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text: TOML document text.
        source: Human-readable origin used in error messages.

    Returns:
        The parsed top-level table.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    For ``pyproject.toml`` only the ``[tool.playframe]`` table is returned
    (empty when absent).

    Args:
        path: Path to a TOML document.

    Returns:
        The PlayFrame-relevant TOML content.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    data: TomlTable = parse_toml_text(text, source=str(path))
    if path.name == PYPROJECT_TOML_NAME:
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        section: Any = tool.get(Toml.SECTION_TOOL_PLAYFRAME, {}) if isinstance(tool, dict) else {}
        data = cast("TomlTable", section) if isinstance(section, dict) else {}
    logger.debug("Loaded config from %s: sections=%s", path, sorted(data))
    return data


def discover_config_files(start: Path | None = None) -> list[Path]:
    """Return project config files found in ``start`` (defaults to the CWD).

    ``pyproject.toml`` is listed before ``playframe.toml`` so the dedicated
    file wins when both are present.

    Args:
        start: Directory to look in.

    Returns:
        Existing config file paths in merge order.
    """
    base: Path = start or Path.cwd()
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, LOCAL_TOML_CONFIG_NAME):
        candidate: Path = base / name
        if candidate.is_file():
            found.append(candidate)
    logger.trace("Discovered config files in %s: %s", base, found)
    return found


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(data)  # pyright: ignore[reportUnknownMemberType]
