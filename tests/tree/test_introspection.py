# topmark:header:start
#
#   project      : ObjTree
#   file         : test_introspection.py
#   file_relpath : tests/tree/test_introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the introspection helpers (`objtree.introspection`)."""

from __future__ import annotations

import functools

from objtree.core.sentinels import UNDEFINED
from objtree.introspection import callable_name, has_field_storage, own_fields, slot_names


class Base:
    """Slots base class."""

    __slots__ = ("a",)


class Child(Base):
    """Slots subclass adding a field and instance dict storage."""

    __slots__ = ("b", "__dict__")


class Plain:
    """Regular class."""


def func() -> None:
    """Do nothing."""


def test_callable_name() -> None:
    """Names come from ``__name__``; lambdas and nameless objects are anonymous."""
    assert callable_name(func) == "func"
    assert callable_name(functools.partial(functools.partial(func))) == "func"
    assert callable_name(lambda: 0) is None
    assert callable_name(object()) is None


def test_slot_names_follow_mro() -> None:
    """Base slots come first and implicit slots are skipped."""
    assert slot_names(Child) == ["a", "b"]


def test_has_field_storage() -> None:
    """Instances with a dict or slots have storage; builtins do not."""
    assert has_field_storage(Plain())
    assert has_field_storage(Base())
    assert not has_field_storage(object())
    assert not has_field_storage(42)


def test_own_fields_mixes_dict_and_slots() -> None:
    """Dict entries come first, then slots; unset slots are undefined."""
    obj = Child()
    obj.b = 2
    obj.extra = "x"  # type: ignore[attr-defined]
    assert own_fields(obj) == [("extra", "x"), ("a", UNDEFINED), ("b", 2)]
