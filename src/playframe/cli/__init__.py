# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Command-line interface of PlayFrame (Click based)."""
