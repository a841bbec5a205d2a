# topmark:header:start
#
#   project      : PlayFrame
#   file         : bundle.py
#   file_relpath : src/playframe/enhance/bundle.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""The enhancement bundle injected into every game document.

The bundle is a fixed pair of textual fragments, a ``<script>`` and a
``<style>`` element, rendered from configuration and never derived from the
game document. When the sandboxed frame executes it, the script:

* installs the dialog capability: ``alert`` and ``confirm`` become
  fire-and-forget protocol messages to the parent frame, and ``confirm``
  answers with a fixed default instead of blocking;
* defines ``sendGameStatus(status, data)``;
* defines and schedules the adaptive layout routine (resize, orientation
  change, load, a one-shot timer after ``DOMContentLoaded`` and a
  ``ResizeObserver`` on ``<body>``);
* watches ``<body>`` mutations and reports the text of the first element
  whose class or id contains ``score`` as a ``score-update`` status.

The stylesheet keeps the full-viewport background on the root document,
constrains the known game containers to the viewport and lets canvases scale
with their container while keeping their aspect ratio.

`playframe.enhance.layout` mirrors the layout routine in Python.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from string import Template
from typing import TYPE_CHECKING

from playframe.config.logging import get_logger
from playframe.config.model import BridgeConfig, LayoutConfig
from playframe.constants import ENHANCEMENT_BUNDLE_VERSION
from playframe.protocol.messages import MessageType, StatusKind

if TYPE_CHECKING:
    from playframe.config.logging import PlayframeLogger
    from playframe.config.model import Config

logger: PlayframeLogger = get_logger(__name__)


@dataclass(frozen=True)
class BridgeCapabilities:
    """Dialog capability handed to the isolated context at construction time.

    Attributes:
        target_origin: ``postMessage`` recipient policy; ``"*"`` by default.
        confirm_default: Value the overridden ``confirm()`` returns; no real
            confirmation round-trip takes place.
    """

    target_origin: str = "*"
    confirm_default: bool = True

    @classmethod
    def from_config(cls, bridge: BridgeConfig) -> BridgeCapabilities:
        """Build capabilities from the ``[bridge]`` config section."""
        return cls(target_origin=bridge.target_origin, confirm_default=bridge.confirm_default)


_SCRIPT_TEMPLATE = Template(
    """<script>
(function () {
  var capability = {
    post: function (message) { window.parent.postMessage(message, ${target_origin}); },
    confirmDefault: ${confirm_default}
  };

  function installDialogs(cap) {
    window.alert = function (msg) {
      cap.post({ type: ${type_alert}, message: String(msg) });
    };
    window.confirm = function (msg) {
      cap.post({ type: ${type_confirm}, message: String(msg) });
      return cap.confirmDefault;
    };
  }
  installDialogs(capability);

  window.sendGameStatus = function (status, data) {
    capability.post({ type: ${type_status}, status: status, data: data });
  };

  var ROOT_SELECTORS = ${root_selectors};

  function pickGameRoot() {
    var preferred = document.querySelector(ROOT_SELECTORS.join(', '));
    if (preferred) return preferred;
    if (!document.body) return null;
    var nodes = document.body.querySelectorAll('*');
    var best = null;
    var bestArea = 0;
    for (var j = 0; j < nodes.length; j++) {
      var el = nodes[j];
      if (!el.offsetWidth || !el.offsetHeight) continue;
      if (el.tagName === 'SCRIPT' || el.tagName === 'STYLE') continue;
      if (getComputedStyle(el).position === 'fixed') continue;
      var area = el.offsetWidth * el.offsetHeight;
      if (area > bestArea) { bestArea = area; best = el; }
    }
    return best || document.body.firstElementChild;
  }

  function dimension(value, fallback) {
    var n = Number(value);
    return (value !== null && value !== '' && isFinite(n) && n > 0) ? n : fallback;
  }

  function handleResize() {
    var root = pickGameRoot();
    if (!root) return;
    var vw = Math.max(${min_size}, Math.floor(window.innerWidth * ${width_ratio}));
    var vh = Math.max(${min_size}, Math.floor(window.innerHeight * ${height_ratio}));

    root.style.maxWidth = vw + 'px';
    root.style.maxHeight = vh + 'px';
    root.style.margin = '0 auto';
    root.style.display = 'block';
    root.style.removeProperty('transform');

    var canvas = root.tagName === 'CANVAS' ? root : root.querySelector('canvas');
    if (canvas) {
      try {
        var cw = dimension(canvas.getAttribute('width'), ${canvas_width});
        var ch = dimension(canvas.getAttribute('height'), ${canvas_height});
        var ratio = cw / ch;
        var targetWidth = Math.min(vw, Math.round(vh * ratio));
        var targetHeight = Math.round(targetWidth / ratio);
        canvas.style.width = targetWidth + 'px';
        canvas.style.height = targetHeight + 'px';
        canvas.style.display = 'block';
        canvas.style.margin = '0 auto';
      } catch (e) { /* layout degradation must not break the game */ }
    } else {
      var rw = root.scrollWidth || root.clientWidth || ${canvas_width};
      var rh = root.scrollHeight || root.clientHeight || ${canvas_height};
      var r = rw / (rh || 1);
      root.style.width = Math.min(vw, Math.round(vh * r)) + 'px';
    }
  }

  window.addEventListener('resize', handleResize);
  window.addEventListener('orientationchange', handleResize);
  window.addEventListener('load', handleResize);

  document.addEventListener('DOMContentLoaded', function () {
    var observer = new MutationObserver(function () {
      var scoreElement = document.querySelector('[class*="score"], [id*="score"]');
      if (scoreElement) {
        window.sendGameStatus(${status_score}, { score: scoreElement.textContent });
      }
    });
    observer.observe(document.body, { childList: true, subtree: true, characterData: true });
    setTimeout(handleResize, ${resize_delay_ms});
    if (typeof ResizeObserver !== 'undefined') {
      new ResizeObserver(function () { handleResize(); }).observe(document.body);
    }
  });
})();
</script>"""
)

_STYLE_TEMPLATE = Template(
    """<style>
html, body {
  margin: 0;
  padding: 0;
  min-height: 100vh;
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
}
${container_selectors} {
  max-width: 100% !important;
  max-height: 100vh !important;
  margin: 0 auto !important;
}
canvas {
  max-width: 100% !important;
  height: auto !important;
}
</style>"""
)


def _js(value: object) -> str:
    """Return ``value`` as a JavaScript literal that is safe inside ``<script>``."""
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


@dataclass(frozen=True)
class EnhancementBundle:
    """A versioned ``(script, style)`` pair of static fragments.

    Attributes:
        script: The complete ``<script>`` element.
        style: The complete ``<style>`` element.
        version: Bundle format version.
    """

    script: str
    style: str
    version: str = ENHANCEMENT_BUNDLE_VERSION

    @property
    def text(self) -> str:
        """Return the literal text spliced into documents."""
        return f"\n{self.script}\n{self.style}\n"

    @classmethod
    def render(
        cls,
        capabilities: BridgeCapabilities | None = None,
        layout: LayoutConfig | None = None,
    ) -> EnhancementBundle:
        """Render the bundle for the given capability and layout settings.

        Args:
            capabilities: Dialog capability; defaults to wildcard origin and an
                affirmative confirm.
            layout: Layout settings; defaults to the built-in values.

        Returns:
            The rendered bundle.
        """
        cap: BridgeCapabilities = capabilities or BridgeCapabilities()
        lay: LayoutConfig = layout or LayoutConfig()
        script: str = _SCRIPT_TEMPLATE.substitute(
            target_origin=_js(cap.target_origin),
            confirm_default=_js(cap.confirm_default),
            type_alert=_js(MessageType.ALERT.value),
            type_confirm=_js(MessageType.CONFIRM.value),
            type_status=_js(MessageType.STATUS.value),
            status_score=_js(StatusKind.SCORE_UPDATE.value),
            root_selectors=_js(list(lay.root_selectors)),
            min_size=lay.min_size,
            width_ratio=_js(lay.width_ratio),
            height_ratio=_js(lay.height_ratio),
            canvas_width=lay.canvas_fallback_width,
            canvas_height=lay.canvas_fallback_height,
            resize_delay_ms=lay.resize_delay_ms,
        )
        style: str = _STYLE_TEMPLATE.substitute(
            container_selectors=", ".join(lay.container_selectors),
        )
        logger.trace("Rendered enhancement bundle v%s", ENHANCEMENT_BUNDLE_VERSION)
        return cls(script=script, style=style)

    @classmethod
    def from_config(cls, config: Config) -> EnhancementBundle:
        """Render the bundle from a frozen `Config`."""
        return cls.render(BridgeCapabilities.from_config(config.bridge), config.layout)


@lru_cache(maxsize=1)
def default_bundle() -> EnhancementBundle:
    """Return the bundle rendered with built-in settings."""
    return EnhancementBundle.render()
