# topmark:header:start
#
#   project      : PlayFrame
#   file         : constants.py
#   file_relpath : src/playframe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PLAYFRAME_VERSION: str = get_version("playframe")

# Name of the bundled default config inside the package `playframe.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "playframe.config"
DEFAULT_TOML_CONFIG_NAME: str = "playframe-default.toml"

# Project-local config discovered in the working directory:
LOCAL_TOML_CONFIG_NAME: str = "playframe.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Insertion markers; matched literally (generated games are often fragments).
HEAD_CLOSE_MARKER: str = "</head>"
HEAD_OPEN_MARKER: str = "<head>"
BODY_OPEN_MARKER: str = "<body>"

# Bumped whenever the injected script or style changes shape.
ENHANCEMENT_BUNDLE_VERSION: str = "3"
