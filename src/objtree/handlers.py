# topmark:header:start
#
#   project      : ObjTree
#   file         : handlers.py
#   file_relpath : src/objtree/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-dispatch classifier turning any value into a `RenderNode`.

The chain is an ordered tuple of `Handler` entries; `classify` walks it and the
first handler whose predicate matches formats the value. More specific types
come first (``bool`` before numbers, ``Enum`` members before both, strings
before sequences, exact ``dict`` last). A value no handler accepts renders as
``Unknown``.

Formatters return an uncolored node; `classify` colors the header with the
color configured for the handler's category.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import numbers
import re
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from itertools import islice
from typing import TYPE_CHECKING, NamedTuple

from objtree.config.keys import Categories
from objtree.config.logging import get_logger
from objtree.config.types import DateFormat
from objtree.constants import ELLIPSIS, UNKNOWN_TEXT
from objtree.core.sentinels import UNDEFINED
from objtree.introspection import callable_name, has_field_storage, own_fields, type_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from objtree.config.logging import ObjtreeLogger
    from objtree.config.model import TreeOptions
    from objtree.config.types import Limit
    from objtree.rendering.colors import Colorizer

logger: ObjtreeLogger = get_logger(__name__)

#: Integers outside this range render as big integers (``123…n``).
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


@dataclass(frozen=True, slots=True)
class ChildEntry:
    """One child of a rendered node.

    Attributes:
        key (str): Label shown before the child's header.
        value (object): The child value (a reference into the caller's data).
        divider (str | None): Separator between key and header; None means the
            walker's default (``": "``).
    """

    key: str
    value: object
    divider: str | None = None


@dataclass(frozen=True, slots=True)
class RenderNode:
    """Header text plus ordered children produced for one value."""

    header: str
    children: tuple[ChildEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class TruncationMarker:
    """Stands for the entries a container limit left out."""

    remaining: int

    def __str__(self) -> str:
        return f"+{self.remaining} more"


class Handler(NamedTuple):
    """A classifier entry: category name, predicate and formatter."""

    category: str
    matches: Callable[[object], bool]
    format: Callable[[object, TreeOptions], RenderNode]


def _clamp(entries: Iterable[ChildEntry], size: int, limit: Limit) -> tuple[ChildEntry, ...]:
    """Keep at most ``limit`` entries; append a marker for the rest."""
    shown: int = size if limit >= size else int(limit)
    children: list[ChildEntry] = list(islice(entries, shown))
    if shown < size:
        children.append(ChildEntry(ELLIPSIS, TruncationMarker(size - shown)))
    return tuple(children)


def _is_nan(value: object) -> bool:
    try:
        return bool(value != value)  # noqa: PLR0124
    except (TypeError, ValueError, ArithmeticError):
        return False


# --- predicates ---


def _is_null(value: object) -> bool:
    return value is None


def _is_undefined(value: object) -> bool:
    return value is UNDEFINED


def _is_symbol(value: object) -> bool:
    return isinstance(value, Enum)


def _is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def _is_bigint(value: object) -> bool:
    return isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Number)


def _is_string(value: object) -> bool:
    return isinstance(value, _TEXT_TYPES)


def _is_date(value: object) -> bool:
    return isinstance(value, (date, time))


def _is_regexp(value: object) -> bool:
    return isinstance(value, re.Pattern)


def _is_array(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _is_set(value: object) -> bool:
    return isinstance(value, Set)


def _is_map(value: object) -> bool:
    return isinstance(value, Mapping) and type(value) is not dict


def _is_function(value: object) -> bool:
    if isinstance(value, type):
        return False
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return True
    return callable(value) and not has_field_storage(value)


def _is_class(value: object) -> bool:
    return isinstance(value, type)


def _is_instance(value: object) -> bool:
    return type(value) is not dict and has_field_storage(value)


def _is_object(value: object) -> bool:
    return type(value) is dict


# --- formatters ---


def _format_null(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode("None")


def _format_undefined(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode("undefined")


def _format_symbol(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, Enum)
    name: str | None = value.name
    return RenderNode(f"{type(value).__name__}.{name}" if name is not None else str(value))


def _format_scalar(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode(str(value))


def _format_bigint(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode(f"{value}n")


def _format_number(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode("NaN" if _is_nan(value) else str(value))


def _format_string(value: object, options: TreeOptions) -> RenderNode:
    prefix: str = ""
    if isinstance(value, str):
        body: str = value
    else:
        assert isinstance(value, (bytes, bytearray))
        prefix = "b"
        body = repr(bytes(value))[2:-1]

    max_length: Limit = options.string.max_length
    if len(body) > max_length:
        body = body[: max(int(max_length) - 1, 0)] + ELLIPSIS
    return RenderNode(prefix + options.string.quotes.wrap(body))


def _format_date(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, (date, time))
    label: str = "Time" if isinstance(value, time) else "Date"
    date_format: DateFormat = options.date.format
    if date_format is DateFormat.ISO:
        return RenderNode(f"{label}({value.isoformat()})")
    if date_format is DateFormat.LOCALE:
        if isinstance(value, datetime):
            text: str = value.strftime("%c")
        elif isinstance(value, date):
            text = value.strftime("%x")
        else:
            text = value.strftime("%X")
        return RenderNode(f"{label}({text})")
    return RenderNode(f"{label}()")


def _format_regexp(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode(repr(value))


def _format_array(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, Sequence)
    size: int = len(value)
    entries: Iterable[ChildEntry] = (
        ChildEntry(str(index), item) for index, item in enumerate(value)
    )
    header: str = f"Array({size})" if options.array.show_length else "Array"
    return RenderNode(header, _clamp(entries, size, options.array.max_items))


def _format_set(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, Set)
    size: int = len(value)
    entries: Iterable[ChildEntry] = (
        ChildEntry(str(index), item) for index, item in enumerate(value)
    )
    header: str = f"Set({size})" if options.set.show_size else "Set"
    return RenderNode(header, _clamp(entries, size, options.set.max_items))


def _format_map(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, Mapping)
    size: int = len(value)
    divider: str = options.map.divider
    entries: Iterable[ChildEntry] = (
        ChildEntry(str(key), item, divider) for key, item in value.items()
    )
    header: str = f"Map({size})" if options.map.show_size else "Map"
    return RenderNode(header, _clamp(entries, size, options.map.max_items))


def _format_function(value: object, options: TreeOptions) -> RenderNode:
    return RenderNode(f"Function({callable_name(value) or 'anonymous'})")


def _format_class(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, type)
    return RenderNode(f"Class({type_name(value) or 'anonymous'})")


def _format_instance(value: object, options: TreeOptions) -> RenderNode:
    fields: list[tuple[str, object]] = own_fields(value)
    entries: Iterable[ChildEntry] = (ChildEntry(name, item) for name, item in fields)
    header: str = f"{type_name(type(value)) or 'Object'}{{}}"
    return RenderNode(header, _clamp(entries, len(fields), options.object.max_keys))


def _format_object(value: object, options: TreeOptions) -> RenderNode:
    assert isinstance(value, dict)
    items: list[tuple[str, object]] = [(str(key), item) for key, item in value.items()]
    if options.object.sort_keys:
        items.sort(key=lambda pair: pair[0])
    entries: Iterable[ChildEntry] = (ChildEntry(key, item) for key, item in items)
    return RenderNode("Object{}", _clamp(entries, len(items), options.object.max_keys))


HANDLERS: tuple[Handler, ...] = (
    Handler(Categories.NULL, _is_null, _format_null),
    Handler(Categories.UNDEFINED, _is_undefined, _format_undefined),
    Handler(Categories.SYMBOL, _is_symbol, _format_symbol),
    Handler(Categories.BOOLEAN, _is_boolean, _format_scalar),
    Handler(Categories.BIGINT, _is_bigint, _format_bigint),
    Handler(Categories.NUMBER, _is_number, _format_number),
    Handler(Categories.STRING, _is_string, _format_string),
    Handler(Categories.DATE, _is_date, _format_date),
    Handler(Categories.REGEXP, _is_regexp, _format_regexp),
    Handler(Categories.ARRAY, _is_array, _format_array),
    Handler(Categories.SET, _is_set, _format_set),
    Handler(Categories.MAP, _is_map, _format_map),
    Handler(Categories.FUNCTION, _is_function, _format_function),
    Handler(Categories.CLASS, _is_class, _format_class),
    Handler(Categories.INSTANCE, _is_instance, _format_instance),
    Handler(Categories.OBJECT, _is_object, _format_object),
)


def find_handler(value: object) -> Handler | None:
    """Return the first handler accepting ``value``, or None."""
    for handler in HANDLERS:
        if handler.matches(value):
            return handler
    return None


def classify(value: object, options: TreeOptions, colorizer: Colorizer) -> RenderNode:
    """Turn ``value`` into a colored `RenderNode`.

    Args:
        value (object): Any value.
        options (TreeOptions): Resolved options.
        colorizer (Colorizer): Applied to the header with the category color.

    Returns:
        RenderNode: The node; ``Unknown`` (uncolored) if no handler matches.
    """
    handler: Handler | None = find_handler(value)
    if handler is None:
        logger.debug("No handler for value of type %s", type(value).__name__)
        return RenderNode(UNKNOWN_TEXT)
    node: RenderNode = handler.format(value, options)
    return dataclasses.replace(
        node, header=colorizer(node.header, options.color_for(handler.category))
    )
