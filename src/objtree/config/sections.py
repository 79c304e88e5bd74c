# topmark:header:start
#
#   project      : ObjTree
#   file         : sections.py
#   file_relpath : src/objtree/config/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved option sections and their built-in defaults.

Each section is an immutable dataclass whose field defaults *are* the built-in
defaults. `objtree.config.model.MutableTreeOptions.freeze` fills a section by
applying the caller's per-key overrides on top of a default instance, so
supplying one key never erases its siblings.

TOML mapping:

    [string]
    max_length = 80
    quotes = "double"

    [array]
    max_items = inf
    show_length = true
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from objtree.config.keys import Categories
from objtree.config.types import UNBOUNDED, DateFormat, QuoteStyle
from objtree.rendering.colors import ColorName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from objtree.config.types import Limit


@dataclass(frozen=True, slots=True)
class ConnectorChars:
    """Glyphs used to draw tree connectors.

    Attributes:
        tee (str): Connector for a node that has later siblings.
        ell (str): Connector for the last node at its level.
        pipe (str): Vertical continuation drawn for ancestors with later siblings.
    """

    tee: str = "├─"
    ell: str = "└─"
    pipe: str = "│"


@dataclass(frozen=True, slots=True)
class StringOptions:
    """String rendering: truncation length and quote style."""

    max_length: Limit = 80
    quotes: QuoteStyle = QuoteStyle.DOUBLE


@dataclass(frozen=True, slots=True)
class ArrayOptions:
    """Sequence rendering: item limit and whether the label shows the length."""

    max_items: Limit = UNBOUNDED
    show_length: bool = True


@dataclass(frozen=True, slots=True)
class ObjectOptions:
    """Plain dict and instance rendering: key limit and key sorting.

    ``sort_keys`` only applies to plain dicts; instance fields keep their
    definition order.
    """

    max_keys: Limit = UNBOUNDED
    sort_keys: bool = True


@dataclass(frozen=True, slots=True)
class SetOptions:
    """Set rendering: item limit and whether the label shows the size."""

    max_items: Limit = UNBOUNDED
    show_size: bool = True


@dataclass(frozen=True, slots=True)
class MapOptions:
    """Mapping rendering: item limit, size label and key/value divider."""

    max_items: Limit = UNBOUNDED
    show_size: bool = True
    divider: str = " → "


@dataclass(frozen=True, slots=True)
class DateOptions:
    """Date rendering mode."""

    format: DateFormat = DateFormat.NONE


DEFAULT_INDENT: Final[str] = "  "
DEFAULT_CONNECTOR_COLOR: Final[ColorName] = ColorName.GRAY
DEFAULT_MAX_DEPTH: Final[Limit] = UNBOUNDED
DEFAULT_SHOW_ROOT: Final[bool] = False

DEFAULT_COLORS: Final[Mapping[str, ColorName]] = MappingProxyType(
    {
        Categories.STRING: ColorName.GREEN,
        Categories.NUMBER: ColorName.CYAN,
        Categories.BOOLEAN: ColorName.YELLOW,
        Categories.NULL: ColorName.RED,
        Categories.UNDEFINED: ColorName.GRAY,
        Categories.BIGINT: ColorName.CYAN,
        Categories.SYMBOL: ColorName.MAGENTA,
        Categories.FUNCTION: ColorName.GRAY,
        Categories.CLASS: ColorName.CYAN,
        Categories.DATE: ColorName.MAGENTA,
        Categories.REGEXP: ColorName.RED,
        Categories.ARRAY: ColorName.YELLOW,
        Categories.OBJECT: ColorName.CYAN,
        Categories.SET: ColorName.GREEN,
        Categories.MAP: ColorName.BLUE,
        Categories.INSTANCE: ColorName.CYAN,
        Categories.TRUNCATED: ColorName.GRAY,
        Categories.CIRCULAR: ColorName.RED,
    }
)
