# topmark:header:start
#
#   project      : ObjTree
#   file         : getters.py
#   file_relpath : src/objtree/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for option mappings.

Each getter validates one raw option value (from a Python mapping or a parsed
TOML table). The contract is the same for all of them:

- ``None`` means "not provided" and is returned as ``None`` without a diagnostic.
- A valid value is returned in its normalized form.
- An invalid value is rejected: a warning is logged *and* recorded in the
  supplied `DiagnosticLog`, and ``None`` is returned so the caller keeps the
  inherited/default value.

Getters never raise.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from objtree.config.logging import get_logger
from objtree.config.types import UNBOUNDED
from objtree.rendering.colors import ColorName

if TYPE_CHECKING:
    from objtree.config.logging import ObjtreeLogger
    from objtree.config.types import Limit
    from objtree.core.diagnostics import DiagnosticLog

logger: ObjtreeLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

#: String spellings accepted for an unbounded limit.
UNBOUNDED_TOKENS: frozenset[str] = frozenset({"inf", "infinity", "unbounded"})


def _reject(where: str, value: object, expected: str, diagnostics: DiagnosticLog) -> None:
    message: str = f"Ignoring {where} = {value!r}: expected {expected}"
    logger.warning(message)
    diagnostics.add_warning(message)


def check_limit(value: object, *, where: str, diagnostics: DiagnosticLog) -> Limit | None:
    """Validate a limit (``max_items``, ``max_keys``, ``max_depth``, ``max_length``).

    Accepted: non-negative ``int``, positive infinity, and the strings in
    `UNBOUNDED_TOKENS`. Integral floats (``3.0``) are converted to ``int``.

    Args:
        value (object): Raw value.
        where (str): Dotted option path used in messages (e.g. ``"array.max_items"``).
        diagnostics (DiagnosticLog): Log receiving a warning on rejection.

    Returns:
        Limit | None: The normalized limit, or None if absent or rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        _reject(where, value, "a non-negative integer or 'inf'", diagnostics)
        return None
    if isinstance(value, int):
        if value >= 0:
            return value
    elif isinstance(value, float):
        if value == math.inf:
            return UNBOUNDED
        if value >= 0 and value.is_integer():
            return int(value)
    elif isinstance(value, str):
        token: str = value.strip().lower()
        if token in UNBOUNDED_TOKENS:
            return UNBOUNDED
        if token.isdigit():
            return int(token)
    _reject(where, value, "a non-negative integer or 'inf'", diagnostics)
    return None


def check_bool(value: object, *, where: str, diagnostics: DiagnosticLog) -> bool | None:
    """Validate a boolean flag. Only real ``bool`` values are accepted."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _reject(where, value, "a boolean", diagnostics)
    return None


def check_str(value: object, *, where: str, diagnostics: DiagnosticLog) -> str | None:
    """Validate a string option (glyphs, indent, divider). Empty strings are allowed."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _reject(where, value, "a string", diagnostics)
    return None


def check_enum(
    value: object,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Validate a string-valued enum option (case-insensitive).

    Args:
        value (object): Raw value, either a member of ``enum_cls`` or its string value.
        enum_cls (type[E]): The target enum.
        where (str): Dotted option path used in messages.
        diagnostics (DiagnosticLog): Log receiving a warning on rejection.

    Returns:
        E | None: The matching member, or None if absent or rejected.
    """
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        lookup: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}
        member: E | None = lookup.get(value.strip().lower())
        if member is not None:
            return member
    choices: str = ", ".join(repr(member.value) for member in enum_cls)
    _reject(where, value, f"one of {choices}", diagnostics)
    return None


def check_color(value: object, *, where: str, diagnostics: DiagnosticLog) -> ColorName | None:
    """Validate a color name (see `ColorName.parse` for accepted spellings)."""
    if value is None:
        return None
    if isinstance(value, ColorName):
        return value
    color: ColorName | None = ColorName.parse(value) if isinstance(value, str) else None
    if color is None:
        _reject(where, value, "a color name such as 'green' or 'red_bright'", diagnostics)
    return color
