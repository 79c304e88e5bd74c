# topmark:header:start
#
#   project      : ObjTree
#   file         : __init__.py
#   file_relpath : src/objtree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree package.

ObjTree renders arbitrary Python values as indented, optionally colorized
trees of text lines for terminal display.

Example:
    ```python
    from objtree import ObjectTree

    print("\n".join(ObjectTree({"show_root": True}).render({"a": [1, 2]})))
    ```
"""

from __future__ import annotations

from objtree.config.model import MutableTreeOptions, TreeOptions, resolve_options
from objtree.config.types import UNBOUNDED, DateFormat, QuoteStyle
from objtree.core.sentinels import UNDEFINED
from objtree.handlers import ChildEntry, RenderNode, TruncationMarker, classify
from objtree.rendering.colors import ChalkColorizer, ColorName, PlainColorizer
from objtree.tree import ObjectTree, render_lines

__all__ = [
    "UNBOUNDED",
    "UNDEFINED",
    "ChalkColorizer",
    "ChildEntry",
    "ColorName",
    "DateFormat",
    "MutableTreeOptions",
    "ObjectTree",
    "PlainColorizer",
    "QuoteStyle",
    "RenderNode",
    "TreeOptions",
    "TruncationMarker",
    "classify",
    "render_lines",
    "resolve_options",
]
