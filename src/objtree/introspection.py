# topmark:header:start
#
#   project      : ObjTree
#   file         : introspection.py
#   file_relpath : src/objtree/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Introspection helpers used by the handler chain.

These functions answer the questions the classifier asks about arbitrary
objects: what is this callable called, does this object carry its own
attribute storage, and which fields does it hold.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from objtree.config.logging import get_logger
from objtree.core.sentinels import UNDEFINED

if TYPE_CHECKING:
    from objtree.config.logging import ObjtreeLogger

logger: ObjtreeLogger = get_logger(__name__)

_LAMBDA_NAME: str = "<lambda>"
_IMPLICIT_SLOTS: frozenset[str] = frozenset({"__dict__", "__weakref__"})


def callable_name(obj: Any) -> str | None:
    """Return the declared name of a callable, or None when it is anonymous.

    Partials report the name of the wrapped callable. Lambdas are anonymous.

    Args:
        obj (Any): A function, method, builtin, partial or callable object.

    Returns:
        str | None: The name, or None if there is no usable one.
    """
    while isinstance(obj, functools.partial):
        obj = obj.func
    name: object = getattr(obj, "__name__", None)
    if not isinstance(name, str) or not name or name == _LAMBDA_NAME:
        return None
    return name


def type_name(cls: type) -> str | None:
    """Return the name of a class, or None for an empty name."""
    name: object = getattr(cls, "__name__", None)
    return name if isinstance(name, str) and name else None


def _mangle(cls: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


def slot_names(cls: type) -> list[str]:
    """Return the attribute names declared in ``__slots__`` across the MRO.

    Base classes come first. ``__dict__`` / ``__weakref__`` entries are skipped
    and private names are mangled the way Python stores them.
    """
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots: object = klass.__dict__.get("__slots__", ())
        declared: tuple[str, ...] = (slots,) if isinstance(slots, str) else tuple(slots)  # type: ignore[arg-type]
        for name in declared:
            if name in _IMPLICIT_SLOTS:
                continue
            mangled: str = _mangle(klass, name)
            if mangled not in names:
                names.append(mangled)
    return names


def has_field_storage(obj: object) -> bool:
    """Return True if ``obj`` carries its own attributes (``__dict__`` or slots)."""
    if isinstance(getattr(obj, "__dict__", None), dict):
        return True
    return any("__slots__" in klass.__dict__ for klass in type(obj).__mro__[:-1])


def own_fields(obj: object) -> list[tuple[str, object]]:
    """Return the own fields of an instance, in definition order.

    Instance ``__dict__`` entries come first, followed by slot attributes that
    are not shadowed by them. Slots that were never assigned yield `UNDEFINED`.

    Args:
        obj (object): The instance to inspect.

    Returns:
        list[tuple[str, object]]: ``(name, value)`` pairs.
    """
    fields: list[tuple[str, object]] = []
    seen: set[str] = set()

    instance_dict: object = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, value in instance_dict.items():
            label: str = str(name)
            fields.append((label, value))
            seen.add(label)

    for name in slot_names(type(obj)):
        if name in seen:
            continue
        try:
            value = object.__getattribute__(obj, name)
        except AttributeError:
            value = UNDEFINED
        fields.append((name, value))
        seen.add(name)

    logger.trace("Own fields of %s: %s", type(obj).__name__, [name for name, _ in fields])
    return fields
