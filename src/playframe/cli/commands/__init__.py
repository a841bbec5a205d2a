# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame subcommands."""
