# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Core, frontend-agnostic primitives shared across PlayFrame.

This package holds the library-level exception hierarchy and the output format
vocabulary. It must not depend on Click or on console rendering.
"""

from __future__ import annotations
