# topmark:header:start
#
#   project      : ObjTree
#   file         : constants.py
#   file_relpath : src/objtree/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OBJTREE_VERSION: str = get_version("objtree")

CONFIG_FILE_NAME: str = "objtree.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Key of the synthetic child that stands for clamped container entries.
ELLIPSIS: str = "…"

# Separator between a child's key and its header, unless the child overrides it.
DEFAULT_DIVIDER: str = ": "

CIRCULAR_TEXT: str = "[Circular]"
UNKNOWN_TEXT: str = "Unknown"
