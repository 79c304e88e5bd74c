# topmark:header:start
#
#   project      : ObjTree
#   file         : prefix.py
#   file_relpath : src/objtree/prefix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Connector prefixes for tree lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from objtree.config.model import TreeOptions
    from objtree.rendering.colors import Colorizer


class PrefixBuilder:
    """Build the connector prefix of one output line.

    Every ancestor level contributes a colored pipe plus the indent when that
    ancestor still has later siblings, or blank padding of the same width
    otherwise. The node itself then gets the ell (last child) or tee connector
    followed by one space.

    Args:
        options (TreeOptions): Supplies glyphs, indent and connector color.
        colorizer (Colorizer): Applied to every glyph.
    """

    def __init__(self, options: TreeOptions, colorizer: Colorizer) -> None:
        chars = options.chars
        color = options.connector_color
        self._pipe: str = colorizer(chars.pipe, color) + options.indent
        self._blank: str = " " * len(chars.pipe) + options.indent
        self._tee: str = colorizer(chars.tee, color) + " "
        self._ell: str = colorizer(chars.ell, color) + " "

    def build(self, levels: Sequence[bool], is_last: bool | None) -> str:
        """Return the prefix for a line.

        Args:
            levels (Sequence[bool]): One flag per ancestor level; True means the
                ancestor has a later sibling.
            is_last (bool | None): Whether the node is the last child at its
                level; None for the root line (no connector).

        Returns:
            str: The prefix text.
        """
        parts: list[str] = [self._pipe if has_more else self._blank for has_more in levels]
        if is_last is not None:
            parts.append(self._ell if is_last else self._tee)
        return "".join(parts)
