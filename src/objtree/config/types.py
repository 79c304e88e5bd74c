# topmark:header:start
#
#   project      : ObjTree
#   file         : types.py
#   file_relpath : src/objtree/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight option types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `Limit`: a non-negative item/key/depth count, or `UNBOUNDED`.
    - `UNBOUNDED`: the "no limit" sentinel (``math.inf``), so ``min(size, limit)``
      works without special-casing.
    - `QuoteStyle`: how rendered strings are wrapped.
    - `DateFormat`: how date-like values are rendered.
    - `TomlTable`: a TOML-serializable mapping.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Final

Limit = int | float

UNBOUNDED: Final[float] = math.inf


class QuoteStyle(str, Enum):
    """Quote characters wrapped around rendered strings."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    def wrap(self, text: str) -> str:
        """Return ``text`` wrapped in this quote style.

        Args:
            text (str): Already truncated string body.

        Returns:
            str: The quoted text (unchanged for `QuoteStyle.NONE`).
        """
        if self is QuoteStyle.SINGLE:
            return f"'{text}'"
        if self is QuoteStyle.DOUBLE:
            return f'"{text}"'
        return text


class DateFormat(str, Enum):
    """Rendering mode for date-like values.

    Attributes:
        NONE: Label only, e.g. ``Date()``.
        ISO: ISO-8601 text, e.g. ``Date(1993-05-15T00:00:00)``.
        LOCALE: The current locale's representation (``strftime("%c")``).
    """

    NONE = "none"
    ISO = "iso"
    LOCALE = "locale"


#: TOML-serializable table as produced by `TreeOptions.to_toml_dict`.
TomlTable = dict[str, Any]
