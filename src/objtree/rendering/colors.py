# topmark:header:start
#
#   project      : ObjTree
#   file         : colors.py
#   file_relpath : src/objtree/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color adapters for tree rendering.

The formatting core only knows *semantic* color names; it never decides
whether the terminal supports ANSI styling. That decision belongs to whoever
constructs the colorizer (the CLI, via `resolve_color_mode`).

Key types:
    - `ColorName`: foreground colors understood by `yachalk`.
    - `Colorizer`: Protocol for ``colorizer(text, color) -> text``.
    - `PlainColorizer`: no-op implementation, the default for `ObjectTree`.
    - `ChalkColorizer`: `yachalk`-backed implementation.
    - `ColorMode` / `resolve_color_mode`: user intent for colored output.

Example:
    ```python
    from objtree.rendering.colors import ChalkColorizer, ColorName

    paint = ChalkColorizer()
    print(paint("hello", ColorName.GREEN))
    ```
"""

from __future__ import annotations

import os
import re
import sys
from enum import Enum
from typing import TYPE_CHECKING, Protocol, cast

from yachalk.chalk_factory import ChalkFactory

from objtree.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from objtree.config.logging import ObjtreeLogger

logger: ObjtreeLogger = get_logger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


class ColorName(str, Enum):
    """Foreground color names, spelled as `yachalk` attributes."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"
    BLACK_BRIGHT = "black_bright"
    RED_BRIGHT = "red_bright"
    GREEN_BRIGHT = "green_bright"
    YELLOW_BRIGHT = "yellow_bright"
    BLUE_BRIGHT = "blue_bright"
    MAGENTA_BRIGHT = "magenta_bright"
    CYAN_BRIGHT = "cyan_bright"
    WHITE_BRIGHT = "white_bright"

    @classmethod
    def parse(cls, name: str | None) -> ColorName | None:
        """Look up a color by name, accepting camelCase and the ``grey`` spelling.

        Args:
            name (str | None): Color name such as ``"red"``, ``"redBright"`` or
                ``"red_bright"``.

        Returns:
            ColorName | None: The matching member, or None if unknown.
        """
        if name is None:
            return None
        key: str = _CAMEL_BOUNDARY_RE.sub(r"_\1", name.strip()).lower().replace("-", "_")
        if key == "grey":
            key = "gray"
        try:
            return cls(key)
        except ValueError:
            return None


class Colorizer(Protocol):
    """Callable that decorates text with a semantic color."""

    def __call__(self, text: str, color: ColorName) -> str:
        """Return ``text`` styled with ``color`` (or unchanged if styling is off)."""
        ...


class PlainColorizer:
    """Colorizer that never emits ANSI codes."""

    def __call__(self, text: str, color: ColorName) -> str:
        return text

    def __repr__(self) -> str:
        return "PlainColorizer()"


class ChalkColorizer:
    """Colorizer backed by `yachalk`.

    An enabled colorizer always emits ANSI codes: it owns a `ChalkFactory`
    pinned to full color support instead of the shared `chalk` instance, whose
    terminal auto-detection would drop styling on pipes. Deciding whether
    color is wanted is left to `resolve_color_mode`.

    Args:
        enabled (bool): If False, behave like `PlainColorizer`.
    """

    enabled: bool

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled
        self._chalk: ChalkFactory = ChalkFactory()
        self._chalk.enable_full_colors()

    def __call__(self, text: str, color: ColorName) -> str:
        if not self.enabled:
            return text
        style = cast("Callable[[str], str]", getattr(self._chalk, ColorName(color).value))
        return style(text)

    def __repr__(self) -> str:
        return f"ChalkColorizer(enabled={self.enabled!r})"


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` means "not provided".
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.debug("Color auto-detection: stdout_isatty=%s", stdout_isatty)
    return bool(stdout_isatty)


def make_colorizer(enabled: bool) -> Colorizer:
    """Return a `ChalkColorizer` when ``enabled``, else a `PlainColorizer`."""
    return ChalkColorizer() if enabled else PlainColorizer()
