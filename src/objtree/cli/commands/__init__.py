# topmark:header:start
#
#   project      : ObjTree
#   file         : __init__.py
#   file_relpath : src/objtree/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``objtree`` CLI."""

from __future__ import annotations
