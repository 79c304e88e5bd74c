# topmark:header:start
#
#   project      : ObjTree
#   file         : __init__.py
#   file_relpath : src/objtree/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ObjTree."""

from __future__ import annotations
