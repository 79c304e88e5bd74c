# topmark:header:start
#
#   project      : ObjTree
#   file         : model.py
#   file_relpath : src/objtree/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options model for ObjTree (mutable builder and frozen snapshot).

Design:
    * `MutableTreeOptions` is a tri-state builder: ``None`` (or a missing
      per-section key) means "inherit". Several builders can be layered with
      `MutableTreeOptions.merge_with` (last wins, key by key), e.g.
      defaults → config file → CLI flags.
    * `TreeOptions` is the fully-resolved, immutable runtime view consumed by
      the renderer. Every field holds a concrete value; no ``None`` branching.
    * `resolve_options` accepts whatever a caller has at hand (nothing, a
      mapping, a builder or a resolved snapshot) and returns a `TreeOptions`.

Sections are merged independently and shallowly: overriding
``string.max_length`` keeps the default ``string.quotes``.

Resolution never raises. Unknown keys and invalid values are logged at WARNING
and recorded in `TreeOptions.diagnostics`; the default (or previously merged)
value is kept.

Example:
    ```python
    from objtree.config.model import resolve_options

    options = resolve_options({"string": {"maxLength": 10}, "show_root": True})
    assert options.string.max_length == 10
    assert options.string.quotes.value == "double"
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, TypeAlias

from objtree.config.getters import check_bool, check_color, check_enum, check_limit, check_str
from objtree.config.keys import Keys, normalize_key
from objtree.config.logging import get_logger
from objtree.config.sections import (
    DEFAULT_COLORS,
    DEFAULT_CONNECTOR_COLOR,
    DEFAULT_INDENT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SHOW_ROOT,
    ArrayOptions,
    ConnectorChars,
    DateOptions,
    MapOptions,
    ObjectOptions,
    SetOptions,
    StringOptions,
)
from objtree.config.types import DateFormat, QuoteStyle
from objtree.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from objtree.rendering.colors import ColorName

if TYPE_CHECKING:
    from collections.abc import Callable

    from objtree.config.logging import ObjtreeLogger
    from objtree.config.types import Limit, TomlTable

logger: ObjtreeLogger = get_logger(__name__)

# Section name -> frozen section type. Order is the TOML export order.
_SECTION_TYPES: Final[Mapping[str, type[Any]]] = MappingProxyType(
    {
        Keys.SECTION_CHARS: ConnectorChars,
        Keys.SECTION_STRING: StringOptions,
        Keys.SECTION_ARRAY: ArrayOptions,
        Keys.SECTION_OBJECT: ObjectOptions,
        Keys.SECTION_SET: SetOptions,
        Keys.SECTION_MAP: MapOptions,
        Keys.SECTION_DATE: DateOptions,
    }
)

# Section name -> key -> checked getter.
_SECTION_CHECKS: Final[Mapping[str, Mapping[str, Callable[..., Any]]]] = MappingProxyType(
    {
        Keys.SECTION_CHARS: {
            Keys.KEY_TEE: check_str,
            Keys.KEY_ELL: check_str,
            Keys.KEY_PIPE: check_str,
        },
        Keys.SECTION_STRING: {
            Keys.KEY_MAX_LENGTH: check_limit,
            Keys.KEY_QUOTES: partial(check_enum, enum_cls=QuoteStyle),
        },
        Keys.SECTION_ARRAY: {
            Keys.KEY_MAX_ITEMS: check_limit,
            Keys.KEY_SHOW_LENGTH: check_bool,
        },
        Keys.SECTION_OBJECT: {
            Keys.KEY_MAX_KEYS: check_limit,
            Keys.KEY_SORT_KEYS: check_bool,
        },
        Keys.SECTION_SET: {
            Keys.KEY_MAX_ITEMS: check_limit,
            Keys.KEY_SHOW_SIZE: check_bool,
        },
        Keys.SECTION_MAP: {
            Keys.KEY_MAX_ITEMS: check_limit,
            Keys.KEY_SHOW_SIZE: check_bool,
            Keys.KEY_DIVIDER: check_str,
        },
        Keys.SECTION_DATE: {
            Keys.KEY_FORMAT: partial(check_enum, enum_cls=DateFormat),
        },
    }
)


def _section_to_dict(section: object) -> dict[str, Any]:
    return {f.name: getattr(section, f.name) for f in fields(section)}  # type: ignore[arg-type]


def _toml_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True, slots=True)
class TreeOptions:
    """Immutable, fully-resolved rendering options.

    Attributes:
        chars (ConnectorChars): Connector glyphs.
        indent (str): Padding appended after each ancestor column.
        connector_color (ColorName): Color of the connector glyphs.
        max_depth (Limit): Deepest rendered level (root is 0, its children are 1).
        show_root (bool): Whether the root value gets a line of its own.
        colors (Mapping[str, ColorName]): Color per value category.
        string (StringOptions): String truncation and quoting.
        array (ArrayOptions): Sequence limits and labels.
        object (ObjectOptions): Plain dict / instance limits and key sorting.
        set (SetOptions): Set limits and labels.
        map (MapOptions): Mapping limits, labels and divider.
        date (DateOptions): Date rendering mode.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while resolving.
        sources (tuple[str, ...]): Where the options were loaded from (config files).
    """

    chars: ConnectorChars = field(default_factory=ConnectorChars)
    indent: str = DEFAULT_INDENT
    connector_color: ColorName = DEFAULT_CONNECTOR_COLOR
    max_depth: Limit = DEFAULT_MAX_DEPTH
    show_root: bool = DEFAULT_SHOW_ROOT
    colors: Mapping[str, ColorName] = field(default_factory=lambda: DEFAULT_COLORS)
    string: StringOptions = field(default_factory=StringOptions)
    array: ArrayOptions = field(default_factory=ArrayOptions)
    object: ObjectOptions = field(default_factory=ObjectOptions)
    set: SetOptions = field(default_factory=SetOptions)
    map: MapOptions = field(default_factory=MapOptions)
    date: DateOptions = field(default_factory=DateOptions)
    diagnostics: tuple[Diagnostic, ...] = ()
    sources: tuple[str, ...] = ()

    def color_for(self, category: str) -> ColorName:
        """Return the configured color for a value category."""
        return self.colors.get(category, DEFAULT_COLORS.get(category, ColorName.WHITE))

    def to_toml_dict(self) -> TomlTable:
        """Convert these options into a TOML-serializable dict.

        Top-level scalars come first so the result dumps as a valid document.
        Enum members are exported by value; unbounded limits stay ``inf``.

        Returns:
            TomlTable: The TOML-serializable dict representing the options.
        """
        table: TomlTable = {
            Keys.KEY_INDENT: self.indent,
            Keys.KEY_CONNECTOR_COLOR: self.connector_color.value,
            Keys.KEY_MAX_DEPTH: self.max_depth,
            Keys.KEY_SHOW_ROOT: self.show_root,
            Keys.SECTION_CHARS: _section_to_dict(self.chars),
            Keys.SECTION_COLORS: {k: v.value for k, v in self.colors.items()},
        }
        for name in _SECTION_TYPES:
            if name == Keys.SECTION_CHARS:
                continue
            section: dict[str, Any] = _section_to_dict(getattr(self, name))
            table[name] = {k: _toml_value(v) for k, v in section.items()}
        return table

    def thaw(self) -> MutableTreeOptions:
        """Return a mutable builder initialized from this snapshot.

        Symmetry:
            Mirrors `MutableTreeOptions.freeze`. Prefer thaw→edit→freeze rather
            than rebuilding options by hand.

        Returns:
            MutableTreeOptions: A builder with every field explicitly set.
        """
        return MutableTreeOptions(
            indent=self.indent,
            connector_color=self.connector_color,
            max_depth=self.max_depth,
            show_root=self.show_root,
            sections={name: _section_to_dict(getattr(self, name)) for name in _SECTION_TYPES},
            colors=dict(self.colors),
            sources=list(self.sources),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


@dataclass
class MutableTreeOptions:
    """Mutable builder for `TreeOptions`, suitable for loading and layering.

    Attributes:
        indent (str | None): See `TreeOptions`. `None` means "inherit".
        connector_color (ColorName | None): See `TreeOptions`. `None` means "inherit".
        max_depth (Limit | None): See `TreeOptions`. `None` means "inherit".
        show_root (bool | None): See `TreeOptions`. `None` means "inherit".
        sections (dict[str, dict[str, Any]]): Validated per-section overrides,
            keyed by section name then option key. Missing keys inherit.
        colors (dict[str, ColorName]): Per-category color overrides.
        sources (list[str]): Provenance of the merged layers.
        diagnostics (DiagnosticLog): Warnings collected while parsing.
    """

    indent: str | None = None
    connector_color: ColorName | None = None
    max_depth: Limit | None = None
    show_root: bool | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=lambda: {})
    colors: dict[str, ColorName] = field(default_factory=lambda: {})
    sources: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableTreeOptions:
        """Return a builder holding the built-in defaults explicitly."""
        return TreeOptions().thaw()

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any] | None,
        *,
        source: str | None = None,
    ) -> MutableTreeOptions:
        """Create a builder from a Python mapping or a parsed TOML table.

        Keys may be snake_case or camelCase. A section may also be given as a
        section instance (e.g. ``{"string": StringOptions(max_length=10)}``).

        Args:
            data (Mapping[str, Any] | None): Partial options.
            source (str | None): Provenance recorded in `sources` (e.g. a file path).

        Returns:
            MutableTreeOptions: Parsed builder; rejected entries are recorded
            in its diagnostics.
        """
        draft = cls()
        if source is not None:
            draft.sources.append(source)
        if not data:
            return draft

        for raw_key, raw_value in data.items():
            key: str = normalize_key(str(raw_key))
            if key == Keys.KEY_INDENT:
                draft.indent = check_str(raw_value, where=key, diagnostics=draft.diagnostics)
            elif key == Keys.KEY_CONNECTOR_COLOR:
                draft.connector_color = check_color(
                    raw_value, where=key, diagnostics=draft.diagnostics
                )
            elif key == Keys.KEY_MAX_DEPTH:
                draft.max_depth = check_limit(raw_value, where=key, diagnostics=draft.diagnostics)
            elif key == Keys.KEY_SHOW_ROOT:
                draft.show_root = check_bool(raw_value, where=key, diagnostics=draft.diagnostics)
            elif key == Keys.SECTION_COLORS:
                draft._apply_colors(raw_value)
            elif key in _SECTION_TYPES:
                draft._apply_section(key, raw_value)
            else:
                draft._ignore(f"Ignoring unknown option {raw_key!r}")

        logger.debug(
            "Parsed options from %s: %d override(s), %d diagnostic(s)",
            source or "mapping",
            len(data),
            len(draft.diagnostics),
        )
        return draft

    def _ignore(self, message: str) -> None:
        logger.warning(message)
        self.diagnostics.add_warning(message)

    def _apply_colors(self, raw: object) -> None:
        if not isinstance(raw, Mapping):
            self._ignore(
                f"Ignoring section {Keys.SECTION_COLORS!r}: expected a table, "
                f"got {type(raw).__name__}"
            )
            return
        for raw_category, raw_color in raw.items():
            category: str = normalize_key(str(raw_category))
            if category not in DEFAULT_COLORS:
                self._ignore(f"Ignoring unknown color category {raw_category!r}")
                continue
            color: ColorName | None = check_color(
                raw_color,
                where=f"{Keys.SECTION_COLORS}.{category}",
                diagnostics=self.diagnostics,
            )
            if color is not None:
                self.colors[category] = color

    def _apply_section(self, name: str, raw: object) -> None:
        if is_dataclass(raw) and isinstance(raw, _SECTION_TYPES[name]):
            raw = _section_to_dict(raw)
        if not isinstance(raw, Mapping):
            self._ignore(f"Ignoring section {name!r}: expected a table, got {type(raw).__name__}")
            return

        checks: Mapping[str, Callable[..., Any]] = _SECTION_CHECKS[name]
        overrides: dict[str, Any] = self.sections.setdefault(name, {})
        for raw_key, raw_value in raw.items():
            key: str = normalize_key(str(raw_key))
            check: Callable[..., Any] | None = checks.get(key)
            if check is None:
                self._ignore(f"Ignoring unknown option '{name}.{raw_key}'")
                continue
            value: Any = check(raw_value, where=f"{name}.{key}", diagnostics=self.diagnostics)
            if value is not None:
                overrides[key] = value

    def merge_with(self, other: MutableTreeOptions) -> MutableTreeOptions:
        """Return a new builder where values from ``other`` override this one.

        ``None`` fields and missing section keys in ``other`` do not override
        explicit values in ``self``. Diagnostics and sources are concatenated.

        Args:
            other (MutableTreeOptions): The builder whose values take precedence.

        Returns:
            MutableTreeOptions: Merged builder.
        """

        def pick(*, current: Any, override: Any) -> Any:
            return override if override is not None else current

        sections: dict[str, dict[str, Any]] = {}
        for name in _SECTION_TYPES:
            merged: dict[str, Any] = {
                **self.sections.get(name, {}),
                **other.sections.get(name, {}),
            }
            if merged:
                sections[name] = merged

        return MutableTreeOptions(
            indent=pick(current=self.indent, override=other.indent),
            connector_color=pick(current=self.connector_color, override=other.connector_color),
            max_depth=pick(current=self.max_depth, override=other.max_depth),
            show_root=pick(current=self.show_root, override=other.show_root),
            sections=sections,
            colors={**self.colors, **other.colors},
            sources=self.sources + other.sources,
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )

    def freeze(self) -> TreeOptions:
        """Resolve unset fields against the built-in defaults.

        Returns:
            TreeOptions: Immutable, fully-resolved options.
        """

        def section(name: str) -> Any:
            return _SECTION_TYPES[name](**self.sections.get(name, {}))

        return TreeOptions(
            chars=section(Keys.SECTION_CHARS),
            indent=DEFAULT_INDENT if self.indent is None else self.indent,
            connector_color=(
                DEFAULT_CONNECTOR_COLOR if self.connector_color is None else self.connector_color
            ),
            max_depth=DEFAULT_MAX_DEPTH if self.max_depth is None else self.max_depth,
            show_root=DEFAULT_SHOW_ROOT if self.show_root is None else self.show_root,
            colors=MappingProxyType({**DEFAULT_COLORS, **self.colors}),
            string=section(Keys.SECTION_STRING),
            array=section(Keys.SECTION_ARRAY),
            object=section(Keys.SECTION_OBJECT),
            set=section(Keys.SECTION_SET),
            map=section(Keys.SECTION_MAP),
            date=section(Keys.SECTION_DATE),
            diagnostics=tuple(self.diagnostics),
            sources=tuple(self.sources),
        )


OptionsLike: TypeAlias = "TreeOptions | MutableTreeOptions | Mapping[str, Any] | None"


def resolve_options(options: OptionsLike = None) -> TreeOptions:
    """Resolve partial options into a fully-populated `TreeOptions`.

    Args:
        options (OptionsLike): ``None`` (all defaults), a mapping of partial
            options, a `MutableTreeOptions` builder, or a resolved `TreeOptions`
            (returned unchanged).

    Returns:
        TreeOptions: Resolved options. Never raises; problems are recorded in
        `TreeOptions.diagnostics`.
    """
    if options is None:
        return TreeOptions()
    if isinstance(options, TreeOptions):
        return options
    if isinstance(options, MutableTreeOptions):
        return options.freeze()
    if isinstance(options, Mapping):
        return MutableTreeOptions.from_mapping(options).freeze()

    message: str = f"Ignoring options of type {type(options).__name__}: expected a mapping"
    logger.warning(message)
    return TreeOptions(diagnostics=(Diagnostic(DiagnosticLevel.WARNING, message),))
