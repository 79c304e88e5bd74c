# topmark:header:start
#
#   project      : ObjTree
#   file         : options.py
#   file_relpath : src/objtree/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for ObjTree.

This module centralizes reusable options (verbosity, color, config files and
rendering overrides) and their resolution logic, so commands and groups can
stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from objtree.cli.cli_types import LIMIT, EnumChoiceParam
from objtree.cli.errors import ObjtreeUsageError
from objtree.config.keys import Keys
from objtree.config.logging import get_logger
from objtree.config.types import DateFormat, QuoteStyle
from objtree.rendering.colors import ColorMode

if TYPE_CHECKING:
    from collections.abc import Callable

    from objtree.config.logging import ObjtreeLogger
    from objtree.config.types import Limit

P = ParamSpec("P")
R = TypeVar("R")

logger: ObjtreeLogger = get_logger(__name__)

#: Click context settings shared by the group and its subcommands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: Positive for verbose, negative for quiet, 0 by default.

    Raises:
        ObjtreeUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ObjtreeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (print option warnings and details).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read options from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore objtree.toml / [tool.objtree] files.",
    )(f)
    return f


def render_override_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the rendering overrides layered on top of the config file."""
    f = click.option(
        "--max-depth",
        "max_depth",
        type=LIMIT,
        default=None,
        help="Deepest level to render (root children are level 1), or 'inf'.",
    )(f)
    f = click.option(
        "--show-root/--hide-root",
        "show_root",
        default=None,
        help="Emit a line for the root value itself.",
    )(f)
    f = click.option(
        "--max-items",
        "max_items",
        type=LIMIT,
        default=None,
        help="Maximum entries shown per sequence, set and mapping, or 'inf'.",
    )(f)
    f = click.option(
        "--max-keys",
        "max_keys",
        type=LIMIT,
        default=None,
        help="Maximum keys shown per dict or object, or 'inf'.",
    )(f)
    f = click.option(
        "--max-length",
        "max_length",
        type=LIMIT,
        default=None,
        help="Truncate strings longer than this many characters.",
    )(f)
    f = click.option(
        "--quotes",
        "quotes",
        type=EnumChoiceParam(QuoteStyle),
        default=None,
        help=f"Quote style for strings ({', '.join(q.value for q in QuoteStyle)}).",
    )(f)
    f = click.option(
        "--sort-keys/--no-sort-keys",
        "sort_keys",
        default=None,
        help="Sort dict keys (default) or keep insertion order.",
    )(f)
    f = click.option(
        "--date-format",
        "date_format",
        type=EnumChoiceParam(DateFormat),
        default=None,
        help=f"Date rendering ({', '.join(d.value for d in DateFormat)}).",
    )(f)
    return f


def build_override_mapping(
    *,
    max_depth: Limit | None = None,
    show_root: bool | None = None,
    max_items: Limit | None = None,
    max_keys: Limit | None = None,
    max_length: Limit | None = None,
    quotes: QuoteStyle | None = None,
    sort_keys: bool | None = None,
    date_format: DateFormat | None = None,
) -> dict[str, Any]:
    """Translate CLI overrides into an options mapping (unset flags are omitted).

    ``--max-items`` applies to the array, set and map sections alike.

    Returns:
        dict[str, Any]: Partial options suitable for `MutableTreeOptions.from_mapping`.
    """
    data: dict[str, Any] = {}
    if max_depth is not None:
        data[Keys.KEY_MAX_DEPTH] = max_depth
    if show_root is not None:
        data[Keys.KEY_SHOW_ROOT] = show_root
    if max_items is not None:
        for section in (Keys.SECTION_ARRAY, Keys.SECTION_SET, Keys.SECTION_MAP):
            data.setdefault(section, {})[Keys.KEY_MAX_ITEMS] = max_items
    if max_keys is not None:
        data.setdefault(Keys.SECTION_OBJECT, {})[Keys.KEY_MAX_KEYS] = max_keys
    if sort_keys is not None:
        data.setdefault(Keys.SECTION_OBJECT, {})[Keys.KEY_SORT_KEYS] = sort_keys
    if max_length is not None:
        data.setdefault(Keys.SECTION_STRING, {})[Keys.KEY_MAX_LENGTH] = max_length
    if quotes is not None:
        data.setdefault(Keys.SECTION_STRING, {})[Keys.KEY_QUOTES] = quotes
    if date_format is not None:
        data.setdefault(Keys.SECTION_DATE, {})[Keys.KEY_FORMAT] = date_format
    logger.debug("CLI overrides: %s", data)
    return data
