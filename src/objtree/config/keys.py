# topmark:header:start
#
#   project      : ObjTree
#   file         : keys.py
#   file_relpath : src/objtree/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical section and key names for ObjTree options.

These names are shared by the Python mapping API (``ObjectTree({...})``), the
TOML configuration files (``objtree.toml`` and ``[tool.objtree]`` in
``pyproject.toml``) and the config dump.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Keys are snake_case; camelCase spellings (``maxItems``) are accepted on
      input and normalized with `normalize_key`.
"""

from __future__ import annotations

import re
from typing import Final

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


class Keys:
    """Section names and keys of the ObjTree options schema."""

    # Top-level scalars
    KEY_INDENT: Final[str] = "indent"
    KEY_CONNECTOR_COLOR: Final[str] = "connector_color"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_SHOW_ROOT: Final[str] = "show_root"

    # [chars]
    SECTION_CHARS: Final[str] = "chars"

    KEY_TEE: Final[str] = "tee"
    KEY_ELL: Final[str] = "ell"
    KEY_PIPE: Final[str] = "pipe"

    # [colors] (keys are category names, see `Categories`)
    SECTION_COLORS: Final[str] = "colors"

    # [string]
    SECTION_STRING: Final[str] = "string"

    KEY_MAX_LENGTH: Final[str] = "max_length"
    KEY_QUOTES: Final[str] = "quotes"

    # [array]
    SECTION_ARRAY: Final[str] = "array"

    KEY_MAX_ITEMS: Final[str] = "max_items"
    KEY_SHOW_LENGTH: Final[str] = "show_length"

    # [object]
    SECTION_OBJECT: Final[str] = "object"

    KEY_MAX_KEYS: Final[str] = "max_keys"
    KEY_SORT_KEYS: Final[str] = "sort_keys"

    # [set]
    SECTION_SET: Final[str] = "set"

    KEY_SHOW_SIZE: Final[str] = "show_size"

    # [map]
    SECTION_MAP: Final[str] = "map"

    KEY_DIVIDER: Final[str] = "divider"

    # [date]
    SECTION_DATE: Final[str] = "date"

    KEY_FORMAT: Final[str] = "format"

    # [tool.objtree] in pyproject.toml
    PYPROJECT_TOOL_TABLE: Final[str] = "objtree"


class Categories:
    """Semantic value categories; each one has a configurable color."""

    STRING: Final[str] = "string"
    NUMBER: Final[str] = "number"
    BOOLEAN: Final[str] = "boolean"
    NULL: Final[str] = "null"
    UNDEFINED: Final[str] = "undefined"
    BIGINT: Final[str] = "bigint"
    SYMBOL: Final[str] = "symbol"
    FUNCTION: Final[str] = "function"
    CLASS: Final[str] = "class"
    DATE: Final[str] = "date"
    REGEXP: Final[str] = "regexp"
    ARRAY: Final[str] = "array"
    OBJECT: Final[str] = "object"
    SET: Final[str] = "set"
    MAP: Final[str] = "map"
    INSTANCE: Final[str] = "instance"

    # Synthetic lines emitted by the walker
    TRUNCATED: Final[str] = "truncated"
    CIRCULAR: Final[str] = "circular"


def normalize_key(key: str) -> str:
    """Return the snake_case form of an option key.

    Args:
        key (str): Key as supplied by the caller, e.g. ``"maxItems"``.

    Returns:
        str: Normalized key, e.g. ``"max_items"``.
    """
    return _CAMEL_BOUNDARY_RE.sub(r"_\1", key.strip()).lower().replace("-", "_")
