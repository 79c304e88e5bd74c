# topmark:header:start
#
#   project      : ObjTree
#   file         : test_handlers.py
#   file_relpath : tests/tree/test_handlers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the type-dispatch classifier (`objtree.handlers`)."""

from __future__ import annotations

import functools
import math
import operator
import re
from collections import OrderedDict, deque
from datetime import date, datetime, time
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

from objtree.config.keys import Categories
from objtree.config.model import TreeOptions, resolve_options
from objtree.core.sentinels import UNDEFINED
from objtree.handlers import (
    ChildEntry,
    RenderNode,
    TruncationMarker,
    classify,
    find_handler,
)
from objtree.rendering.colors import PlainColorizer
from tests.conftest import TagColorizer, parametrize


class Color(Enum):
    """Plain enum."""

    RED = 1


class Level(IntEnum):
    """Int-valued enum; must not be treated as a number."""

    HIGH = 3


class Person:
    """Instance with ``__dict__`` fields."""

    def __init__(self, name: str) -> None:
        self.name = name

    def hello(self) -> str:
        """Return a greeting."""
        return f"hi {self.name}"


class Point:
    """Instance with slots only."""

    __slots__ = ("x", "y")

    def __init__(self, x: int) -> None:
        self.x = x


class Secret:
    """Instance with a private slot."""

    __slots__ = ("__token",)

    def __init__(self) -> None:
        self.__token = "t"


class Adder:
    """Callable object with (empty) slots; renders as an instance."""

    __slots__ = ()

    def __call__(self, a: int, b: int) -> int:
        return a + b


def named_function() -> None:
    """Do nothing."""


def node(value: Any, options: dict[str, Any] | None = None) -> RenderNode:
    """Classify ``value`` without colors."""
    return classify(value, resolve_options(options), PlainColorizer())


def header(value: Any, options: dict[str, Any] | None = None) -> str:
    """Return the uncolored header for ``value``."""
    return node(value, options).header


def child_keys(rendered: RenderNode) -> list[str]:
    """Return the keys of a node's children."""
    return [child.key for child in rendered.children]


@parametrize(
    "value, expected",
    [
        (None, "None"),
        (UNDEFINED, "undefined"),
        (True, "True"),
        (False, "False"),
        (42, "42"),
        (-7, "-7"),
        (3.5, "3.5"),
        (math.nan, "NaN"),
        (math.inf, "inf"),
        (2**63 - 1, "9223372036854775807"),
        (-(2**63), "-9223372036854775808"),
        (2**63, "9223372036854775808n"),
        (12345678901234567890, "12345678901234567890n"),
        (Color.RED, "Color.RED"),
        (Level.HIGH, "Level.HIGH"),
        (re.compile("a+"), "re.compile('a+')"),
    ],
)
def test_scalar_headers(value: Any, expected: str) -> None:
    """Scalars render as their text form with no children."""
    rendered = node(value)
    assert rendered.header == expected
    assert rendered.children == ()


@parametrize(
    "value, category",
    [
        (None, Categories.NULL),
        (UNDEFINED, Categories.UNDEFINED),
        (Color.RED, Categories.SYMBOL),
        (Level.HIGH, Categories.SYMBOL),
        (True, Categories.BOOLEAN),
        (2**70, Categories.BIGINT),
        (1, Categories.NUMBER),
        ("s", Categories.STRING),
        (b"s", Categories.STRING),
        (date(2020, 1, 1), Categories.DATE),
        (re.compile("x"), Categories.REGEXP),
        ((1,), Categories.ARRAY),
        (deque([1]), Categories.ARRAY),
        (frozenset({1}), Categories.SET),
        (OrderedDict(), Categories.MAP),
        (len, Categories.FUNCTION),
        (operator.itemgetter("a"), Categories.FUNCTION),
        (Adder(), Categories.INSTANCE),
        (Person, Categories.CLASS),
        (Person("x"), Categories.INSTANCE),
        ({}, Categories.OBJECT),
    ],
)
def test_handler_order(value: Any, category: str) -> None:
    """More specific handlers win over general ones."""
    handler = find_handler(value)
    assert handler is not None
    assert handler.category == category


def test_unknown_value() -> None:
    """A value no handler accepts renders as Unknown."""
    assert find_handler(object()) is None
    assert node(object()) == RenderNode("Unknown")


@parametrize(
    "quotes, expected",
    [("double", '"hi"'), ("single", "'hi'"), ("none", "hi")],
)
def test_string_quotes(quotes: str, expected: str) -> None:
    """Strings are wrapped according to the quote style."""
    assert header("hi", {"string": {"quotes": quotes}}) == expected


def test_string_truncation() -> None:
    """Strings longer than max_length keep max_length-1 chars plus an ellipsis."""
    options = {"string": {"max_length": 5}}
    assert header("abcdefgh", options) == '"abcd…"'
    assert header("abcde", options) == '"abcde"'
    assert header("ab", {"string": {"max_length": 0}}) == '"…"'
    assert header("", {"string": {"max_length": 0}}) == '""'


def test_bytes_render_with_prefix() -> None:
    """Bytes keep their escape sequences and get a b prefix."""
    assert header(b"ab\n") == 'b"ab\\n"'
    assert header(bytearray(b"x")) == 'b"x"'


@parametrize(
    "value, date_format, expected",
    [
        (datetime(1993, 5, 15), "none", "Date()"),
        (datetime(1993, 5, 15), "iso", "Date(1993-05-15T00:00:00)"),
        (date(2020, 1, 2), "iso", "Date(2020-01-02)"),
        (time(12, 30), "iso", "Time(12:30:00)"),
        (time(12, 30), "none", "Time()"),
    ],
)
def test_date_formats(value: Any, date_format: str, expected: str) -> None:
    """Dates render according to the date format option."""
    assert header(value, {"date": {"format": date_format}}) == expected


def test_date_locale_format() -> None:
    """Locale dates use the strftime locale representation."""
    value = datetime(2001, 2, 3, 4, 5, 6)
    assert header(value, {"date": {"format": "locale"}}) == f"Date({value.strftime('%c')})"


def test_array_children_and_header() -> None:
    """Sequences list their items keyed by index."""
    rendered = node(["a", "b"])
    assert rendered.header == "Array(2)"
    assert rendered.children == (ChildEntry("0", "a"), ChildEntry("1", "b"))
    assert header((1, 2, 3), {"array": {"show_length": False}}) == "Array"


def test_array_truncation_appends_marker() -> None:
    """Clamped sequences end with a truncation marker entry."""
    rendered = node(list(range(5)), {"array": {"max_items": 2}})
    assert child_keys(rendered) == ["0", "1", "…"]
    assert rendered.children[-1].value == TruncationMarker(3)
    assert str(rendered.children[-1].value) == "+3 more"


def test_array_limit_equal_to_size_has_no_marker() -> None:
    """No marker when the limit covers every item."""
    rendered = node([1, 2], {"array": {"max_items": 2}})
    assert child_keys(rendered) == ["0", "1"]


def test_array_limit_zero_shows_only_marker() -> None:
    """A zero limit leaves just the marker."""
    rendered = node([1, 2], {"array": {"max_items": 0}})
    assert rendered.children == (ChildEntry("…", TruncationMarker(2)),)


def test_set_header_and_limit() -> None:
    """Sets show their size and are indexed in iteration order."""
    rendered = node({1, 2, 3}, {"set": {"max_items": 1}})
    assert rendered.header == "Set(3)"
    assert child_keys(rendered) == ["0", "…"]
    assert header(frozenset(), {"set": {"show_size": False}}) == "Set"


def test_map_entries_carry_divider() -> None:
    """Map entries keep insertion order and use the map divider."""
    rendered = node(OrderedDict([("b", 1), ("a", 2)]))
    assert rendered.header == "Map(2)"
    assert rendered.children == (ChildEntry("b", 1, " → "), ChildEntry("a", 2, " → "))
    rendered = node(MappingProxyType({1: "x"}), {"map": {"divider": " = ", "show_size": False}})
    assert rendered.header == "Map"
    assert rendered.children == (ChildEntry("1", "x", " = "),)


@parametrize(
    "value, expected",
    [
        (named_function, "Function(named_function)"),
        (lambda: None, "Function(anonymous)"),
        (functools.partial(named_function), "Function(named_function)"),
        (len, "Function(len)"),
        (Person("x").hello, "Function(hello)"),
        (operator.itemgetter("a"), "Function(anonymous)"),
    ],
)
def test_function_names(value: Any, expected: str) -> None:
    """Callables render with their declared name or as anonymous."""
    assert header(value) == expected


def test_class_header() -> None:
    """Classes render with their name and no children."""
    assert node(Person) == RenderNode("Class(Person)")


def test_instance_fields() -> None:
    """Instances list their own ``__dict__`` fields."""
    rendered = node(Person("Ann"))
    assert rendered.header == "Person{}"
    assert rendered.children == (ChildEntry("name", "Ann"),)


def test_slots_instance_fields() -> None:
    """Slot fields are listed and unset slots are undefined."""
    rendered = node(Point(1))
    assert rendered.header == "Point{}"
    assert rendered.children == (ChildEntry("x", 1), ChildEntry("y", UNDEFINED))


def test_private_slot_is_read_by_mangled_name() -> None:
    """Private slot names are mangled the way Python stores them."""
    rendered = node(Secret())
    assert rendered.children == (ChildEntry("_Secret__token", "t"),)


def test_instance_fields_respect_max_keys() -> None:
    """Instance fields are clamped by object.max_keys."""
    rendered = node(Point(1), {"object": {"max_keys": 1}})
    assert child_keys(rendered) == ["x", "…"]


def test_object_keys_sorted_by_default() -> None:
    """Plain dict keys are sorted unless sort_keys is off."""
    value = {"b": 1, "a": 2, 10: 3}
    assert child_keys(node(value)) == ["10", "a", "b"]
    assert child_keys(node(value, {"object": {"sort_keys": False}})) == ["b", "a", "10"]


def test_object_max_keys() -> None:
    """Plain dicts are clamped after sorting."""
    rendered = node({"c": 1, "b": 2, "a": 3}, {"object": {"max_keys": 2}})
    assert child_keys(rendered) == ["a", "b", "…"]
    assert rendered.children[-1].value == TruncationMarker(1)


def test_classify_colors_header_with_category_color() -> None:
    """The header is colored with the color of the matching category."""
    options: TreeOptions = resolve_options({"colors": {"number": "magenta"}})
    assert classify(1, options, TagColorizer()).header == "<magenta>1</>"
    assert classify("s", options, TagColorizer()).header == '<green>"s"</>'


def test_classify_does_not_touch_children() -> None:
    """Colors apply to headers only; child keys stay plain."""
    rendered = classify({"k": 1}, TreeOptions(), TagColorizer())
    assert rendered.header == "<cyan>Object{}</>"
    assert child_keys(rendered) == ["k"]


def test_truncation_marker_text() -> None:
    """Markers render as '+N more'."""
    assert str(TruncationMarker(4)) == "+4 more"


@parametrize("value", [[], (), {}, set(), OrderedDict()])
def test_empty_containers_have_no_children(value: Any) -> None:
    """Empty containers produce a header and no children."""
    assert node(value).children == ()


def test_callable_instance_renders_as_instance() -> None:
    """Callable objects with their own field storage render as instances."""
    assert node(Adder()) == RenderNode("Adder{}")
