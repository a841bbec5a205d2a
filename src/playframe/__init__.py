# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame package.

PlayFrame embeds untrusted, generated HTML mini-games in a host. It inspects
the raw markup for quality problems, injects a layout-adaptive messaging
bundle before the document reaches the sandboxed frame, and translates the
messages the frame emits back into host notifications and score state.
"""

from __future__ import annotations
