# topmark:header:start
#
#   project      : PlayFrame
#   file         : __main__.py
#   file_relpath : src/playframe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Module entry point for running PlayFrame via ``python -m playframe``.

Delegates to :func:`playframe.cli.main.cli`, so the module interface and the
``playframe`` console script share a single entry point.

Examples:
    Analyze a generated game::

        python -m playframe analyze game.html
"""

from __future__ import annotations

from playframe.cli.main import cli

if __name__ == "__main__":
    cli()
