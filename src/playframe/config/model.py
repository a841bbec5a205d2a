# topmark:header:start
#
#   project      : PlayFrame
#   file         : model.py
#   file_relpath : src/playframe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Configuration model for PlayFrame.

`MutableConfig` is the builder used while layering configuration sources
(runtime defaults, discovered project files, explicit ``--config`` files).
`freeze()` validates the merged values and returns an immutable `Config`
whose sections are consumed by the analyzer, injector, layout model, bridge
and exporter.

Unknown sections and keys are not fatal: they are recorded as warnings on the
config's diagnostic log so frontends can surface them. Ill-typed or
out-of-range values raise `ConfigError`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from playframe.config.keys import Toml
from playframe.config.loaders import load_defaults_dict, load_toml_dict
from playframe.config.logging import get_logger
from playframe.core.errors import ConfigError
from playframe.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from playframe.config.loaders import TomlTable
    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)

# Expected value kind per known key; drives merge validation.
_SCHEMA: dict[str, dict[str, str]] = {
    Toml.SECTION_LAYOUT: {
        Toml.KEY_WIDTH_RATIO: "ratio",
        Toml.KEY_HEIGHT_RATIO: "ratio",
        Toml.KEY_MIN_SIZE: "positive_int",
        Toml.KEY_CANVAS_FALLBACK_WIDTH: "positive_int",
        Toml.KEY_CANVAS_FALLBACK_HEIGHT: "positive_int",
        Toml.KEY_RESIZE_DELAY_MS: "non_negative_int",
        Toml.KEY_ROOT_SELECTORS: "str_list",
        Toml.KEY_CONTAINER_SELECTORS: "str_list",
    },
    Toml.SECTION_BRIDGE: {
        Toml.KEY_TARGET_ORIGIN: "str",
        Toml.KEY_CONFIRM_DEFAULT: "bool",
    },
    Toml.SECTION_SCORE: {
        Toml.KEY_CORRECT_LABELS: "str_list",
        Toml.KEY_WRONG_LABELS: "str_list",
        Toml.KEY_PROGRESS_LABELS: "str_list",
        Toml.KEY_PROGRESS_MAX: "non_negative_int",
    },
    Toml.SECTION_EXPORT: {
        Toml.KEY_DEFAULT_TITLE: "str",
    },
}


def _check_value(kind: str, value: Any, where: str) -> Any:
    """Validate ``value`` against ``kind`` and return its normalized form.

    Raises:
        ConfigError: If the value has the wrong type or is out of range.
    """
    if kind == "ratio":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{where}: expected a number, got {type(value).__name__}")
        if not 0 < value <= 1:
            raise ConfigError(f"{where}: expected a ratio in (0, 1], got {value}")
        return float(value)
    if kind in ("positive_int", "non_negative_int"):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{where}: expected an integer, got {type(value).__name__}")
        if value < 0 or (kind == "positive_int" and value == 0):
            raise ConfigError(f"{where}: value out of range: {value}")
        return value
    if kind == "bool":
        if not isinstance(value, bool):
            raise ConfigError(f"{where}: expected true/false, got {type(value).__name__}")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise ConfigError(f"{where}: expected a string, got {type(value).__name__}")
        return value
    if kind == "str_list":
        items: list[Any] = cast("list[Any]", value) if isinstance(value, list) else []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in items):
            raise ConfigError(f"{where}: expected a list of strings")
        if not items:
            raise ConfigError(f"{where}: list must not be empty")
        return [str(v) for v in items]
    raise ConfigError(f"{where}: unsupported value kind {kind!r}")  # pragma: no cover


@dataclass(frozen=True)
class LayoutConfig:
    """Settings of the adaptive layout routine and the injected stylesheet."""

    width_ratio: float = 0.92
    height_ratio: float = 0.88
    min_size: int = 320
    canvas_fallback_width: int = 800
    canvas_fallback_height: int = 600
    resize_delay_ms: int = 50
    root_selectors: tuple[str, ...] = (
        "#game-container",
        ".game-area",
        ".game-root",
        ".game",
        ".stage",
    )
    container_selectors: tuple[str, ...] = (".game-area", "#game-container", ".container")


@dataclass(frozen=True)
class BridgeConfig:
    """Settings of the dialog capability handed to the isolated context."""

    target_origin: str = "*"
    confirm_default: bool = True


@dataclass(frozen=True)
class ScoreConfig:
    """Locale labels recognized by the score parser."""

    correct_labels: tuple[str, ...] = ("正确", "correct")
    wrong_labels: tuple[str, ...] = ("错误", "wrong")
    progress_labels: tuple[str, ...] = ("进度", "progress")
    progress_max: int = 10


@dataclass(frozen=True)
class ExportConfig:
    """Settings of the raw-HTML exporter."""

    default_title: str = "game"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration for PlayFrame.

    Attributes:
        layout: Adaptive layout settings.
        bridge: Message bridge capability settings.
        score: Score parser labels.
        export: Export settings.
        config_files: Identifiers of the sources merged into this snapshot.
        diagnostics: Warnings collected while merging (e.g. unknown keys).
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    bridge: BridgeConfig = field(default_factory=BridgeConfig)
    score: ScoreConfig = field(default_factory=ScoreConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    config_files: tuple[str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def thaw(self) -> MutableConfig:
        """Return a mutable builder initialized from this snapshot."""
        draft = MutableConfig(values=self.to_toml_dict(), config_files=list(self.config_files))
        draft.diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        return draft

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict."""
        layout: LayoutConfig = self.layout
        return {
            Toml.SECTION_LAYOUT: {
                Toml.KEY_WIDTH_RATIO: layout.width_ratio,
                Toml.KEY_HEIGHT_RATIO: layout.height_ratio,
                Toml.KEY_MIN_SIZE: layout.min_size,
                Toml.KEY_CANVAS_FALLBACK_WIDTH: layout.canvas_fallback_width,
                Toml.KEY_CANVAS_FALLBACK_HEIGHT: layout.canvas_fallback_height,
                Toml.KEY_RESIZE_DELAY_MS: layout.resize_delay_ms,
                Toml.KEY_ROOT_SELECTORS: list(layout.root_selectors),
                Toml.KEY_CONTAINER_SELECTORS: list(layout.container_selectors),
            },
            Toml.SECTION_BRIDGE: {
                Toml.KEY_TARGET_ORIGIN: self.bridge.target_origin,
                Toml.KEY_CONFIRM_DEFAULT: self.bridge.confirm_default,
            },
            Toml.SECTION_SCORE: {
                Toml.KEY_CORRECT_LABELS: list(self.score.correct_labels),
                Toml.KEY_WRONG_LABELS: list(self.score.wrong_labels),
                Toml.KEY_PROGRESS_LABELS: list(self.score.progress_labels),
                Toml.KEY_PROGRESS_MAX: self.score.progress_max,
            },
            Toml.SECTION_EXPORT: {
                Toml.KEY_DEFAULT_TITLE: self.export.default_title,
            },
        }


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Values are kept as a nested ``{section: {key: value}}`` dict seeded from
    the runtime defaults; every merged source is validated key by key.

    Attributes:
        values: Validated configuration values by section.
        config_files: Identifiers of merged sources, in merge order.
        diagnostics: Warnings collected while merging.
    """

    values: TomlTable = field(default_factory=load_defaults_dict)
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls(config_files=["<defaults>"])

    @classmethod
    def load_merged(
        cls,
        *,
        discovered: Iterable[Path] = (),
        extra: Iterable[Path] = (),
    ) -> MutableConfig:
        """Build a draft from defaults, then discovered files, then extra files.

        Later sources override earlier ones key by key.

        Args:
            discovered: Project files found by `discover_config_files`.
            extra: Explicit config files (e.g. from ``--config``).

        Returns:
            The merged draft.

        Raises:
            ConfigError: If a source cannot be read or holds ill-typed values.
        """
        draft: MutableConfig = cls.from_defaults()
        for path in [*discovered, *extra]:
            draft.merge_dict(load_toml_dict(path), source=str(path))
        return draft

    def merge_dict(self, data: Mapping[str, Any], *, source: str) -> MutableConfig:
        """Merge a parsed TOML table into this draft (last wins).

        Args:
            data: Parsed TOML content.
            source: Identifier recorded in ``config_files`` and messages.

        Returns:
            This draft, to allow chaining.

        Raises:
            ConfigError: If a known key carries an ill-typed or out-of-range value.
        """
        self.config_files.append(source)
        for section, table in data.items():
            schema: dict[str, str] | None = _SCHEMA.get(section)
            if schema is None:
                self.diagnostics.add_warning(f"{source}: unknown section [{section}] ignored")
                continue
            if not isinstance(table, dict):
                raise ConfigError(f"{source}: [{section}] must be a table")
            for key, value in cast("dict[str, Any]", table).items():
                kind: str | None = schema.get(key)
                if kind is None:
                    self.diagnostics.add_warning(
                        f"{source}: unknown key '{key}' in [{section}] ignored"
                    )
                    continue
                checked: Any = _check_value(kind, value, f"{source}: [{section}].{key}")
                self.values[section][key] = checked
                logger.trace("config %s: [%s].%s = %r", source, section, key, checked)
        return self

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`."""
        v: TomlTable = copy.deepcopy(self.values)
        layout: dict[str, Any] = v[Toml.SECTION_LAYOUT]
        bridge: dict[str, Any] = v[Toml.SECTION_BRIDGE]
        score: dict[str, Any] = v[Toml.SECTION_SCORE]
        export: dict[str, Any] = v[Toml.SECTION_EXPORT]
        return Config(
            layout=LayoutConfig(
                width_ratio=layout[Toml.KEY_WIDTH_RATIO],
                height_ratio=layout[Toml.KEY_HEIGHT_RATIO],
                min_size=layout[Toml.KEY_MIN_SIZE],
                canvas_fallback_width=layout[Toml.KEY_CANVAS_FALLBACK_WIDTH],
                canvas_fallback_height=layout[Toml.KEY_CANVAS_FALLBACK_HEIGHT],
                resize_delay_ms=layout[Toml.KEY_RESIZE_DELAY_MS],
                root_selectors=tuple(layout[Toml.KEY_ROOT_SELECTORS]),
                container_selectors=tuple(layout[Toml.KEY_CONTAINER_SELECTORS]),
            ),
            bridge=BridgeConfig(
                target_origin=bridge[Toml.KEY_TARGET_ORIGIN],
                confirm_default=bridge[Toml.KEY_CONFIRM_DEFAULT],
            ),
            score=ScoreConfig(
                correct_labels=tuple(score[Toml.KEY_CORRECT_LABELS]),
                wrong_labels=tuple(score[Toml.KEY_WRONG_LABELS]),
                progress_labels=tuple(score[Toml.KEY_PROGRESS_LABELS]),
                progress_max=score[Toml.KEY_PROGRESS_MAX],
            ),
            export=ExportConfig(default_title=export[Toml.KEY_DEFAULT_TITLE]),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )
