# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Configuration and logging for PlayFrame.

Submodules:
    * `playframe.config.logging`: TRACE-aware logger class and colored formatter.
    * `playframe.config.model`: immutable `Config` and its `MutableConfig` builder.
    * `playframe.config.loaders`: TOML discovery and parsing (``tomlkit``).

Nothing is re-exported here. `playframe.config.logging` is imported by nearly
every module and must not import the rest of the package.
"""

from __future__ import annotations
