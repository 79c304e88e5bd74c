# topmark:header:start
#
#   project      : ObjTree
#   file         : tree.py
#   file_relpath : src/objtree/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-first tree walker producing the rendered lines.

`ObjectTree` resolves its options once and can be reused for any number of
`ObjectTree.render` calls. Each call keeps its own line list, sibling stack
and ancestor identity set, so instances are safe to share.

Walk rules:
    * The root is depth 0 and its children are depth 1, whether or not the
      root line is shown. Nodes deeper than ``max_depth`` are dropped silently.
    * The root line (no connector) is only emitted with ``show_root``; the root
      never adds a prefix level.
    * A child already present on the current ancestor path renders as
      ``[Circular]`` and is not expanded. Shared, acyclic references render in
      full each time.

Example:
    ```python
    from objtree.tree import ObjectTree

    for line in ObjectTree().render({"a": 1, "b": [True]}):
        print(line)
    # ├─ a: 1
    # └─ b: Array(1)
    #    └─ 0: True
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from objtree.config.keys import Categories
from objtree.config.logging import get_logger
from objtree.config.model import resolve_options
from objtree.constants import CIRCULAR_TEXT, DEFAULT_DIVIDER
from objtree.handlers import TruncationMarker, classify
from objtree.prefix import PrefixBuilder
from objtree.rendering.colors import PlainColorizer

if TYPE_CHECKING:
    from objtree.config.logging import ObjtreeLogger
    from objtree.config.model import OptionsLike, TreeOptions
    from objtree.handlers import RenderNode
    from objtree.rendering.colors import Colorizer

logger: ObjtreeLogger = get_logger(__name__)


class ObjectTree:
    """Render arbitrary values as indented, optionally colored tree lines.

    Args:
        options (OptionsLike): Partial options (mapping or builder) or resolved
            `TreeOptions`. Missing values fall back to the built-in defaults.
        colorizer (Colorizer | None): Header and connector styling. Defaults to
            `PlainColorizer` (no ANSI codes).
    """

    options: TreeOptions
    colorizer: Colorizer

    def __init__(self, options: OptionsLike = None, *, colorizer: Colorizer | None = None) -> None:
        self.options = resolve_options(options)
        self.colorizer = colorizer if colorizer is not None else PlainColorizer()
        self._prefix = PrefixBuilder(self.options, self.colorizer)
        if self.options.diagnostics:
            logger.debug("ObjectTree options carry %d diagnostic(s)", len(self.options.diagnostics))

    def __repr__(self) -> str:
        return f"ObjectTree(options={self.options!r}, colorizer={self.colorizer!r})"

    def render(self, root: object) -> list[str]:
        """Render ``root`` to a list of lines (not joined, no trailing newline).

        Args:
            root (object): Any value.

        Returns:
            list[str]: The rendered lines; empty when nothing is visible (for
            example an empty container with ``show_root`` off).
        """
        lines: list[str] = []
        self._walk(root, lines, (), 0, set())
        return lines

    def _walk(
        self,
        value: object,
        lines: list[str],
        levels: tuple[bool, ...],
        depth: int,
        ancestors: set[int],
        key: str | None = None,
        is_last: bool | None = None,
        divider: str = DEFAULT_DIVIDER,
    ) -> None:
        if depth > self.options.max_depth:
            return

        label: str = f"{key}{divider}" if key is not None else ""

        if isinstance(value, TruncationMarker):
            logger.trace("Truncated %d entr(y/ies) at depth %d", value.remaining, depth)
            text: str = self.colorizer(str(value), self.options.color_for(Categories.TRUNCATED))
            lines.append(f"{self._prefix.build(levels, is_last)}{label}{text}")
            return

        if id(value) in ancestors:
            logger.trace("Circular reference to %s at depth %d", type(value).__name__, depth)
            text = self.colorizer(CIRCULAR_TEXT, self.options.color_for(Categories.CIRCULAR))
            lines.append(f"{self._prefix.build(levels, is_last)}{label}{text}")
            return

        node: RenderNode = classify(value, self.options, self.colorizer)

        if key is not None or self.options.show_root or depth > 0:
            lines.append(f"{self._prefix.build(levels, is_last)}{label}{node.header}")

        if not node.children:
            return

        child_levels: tuple[bool, ...] = levels if depth == 0 else (*levels, is_last is not True)
        last_index: int = len(node.children) - 1
        ancestors.add(id(value))
        for index, child in enumerate(node.children):
            self._walk(
                child.value,
                lines,
                child_levels,
                depth + 1,
                ancestors,
                child.key,
                index == last_index,
                child.divider if child.divider is not None else DEFAULT_DIVIDER,
            )
        ancestors.discard(id(value))


def render_lines(
    value: object,
    options: OptionsLike = None,
    *,
    colorizer: Colorizer | None = None,
) -> list[str]:
    """Render ``value`` with a one-off `ObjectTree`.

    Args:
        value (object): Any value.
        options (OptionsLike): Partial or resolved options.
        colorizer (Colorizer | None): Styling; defaults to no ANSI codes.

    Returns:
        list[str]: The rendered lines.
    """
    return ObjectTree(options, colorizer=colorizer).render(value)
