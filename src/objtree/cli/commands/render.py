# topmark:header:start
#
#   project      : ObjTree
#   file         : render.py
#   file_relpath : src/objtree/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree `render` command.

Reads a JSON or TOML document from a file or STDIN and prints it as a tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from objtree.cli.cli_types import EnumChoiceParam
from objtree.cli.cmd_common import (
    get_colorizer,
    get_console,
    report_diagnostics,
    resolve_cli_options,
)
from objtree.cli.io import STDIN_MARKER, InputFormat, load_input
from objtree.cli.options import build_override_mapping, config_file_options, render_override_options
from objtree.config.logging import get_logger
from objtree.tree import ObjectTree

if TYPE_CHECKING:
    from pathlib import Path

    from objtree.cli.console import ConsoleLike
    from objtree.config.logging import ObjtreeLogger
    from objtree.config.model import TreeOptions
    from objtree.config.types import DateFormat, Limit, QuoteStyle

logger: ObjtreeLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a JSON or TOML document (file or '-' for STDIN) as a tree.",
)
@click.argument("source", metavar="[INPUT]", required=False, default=STDIN_MARKER)
@click.option(
    "--input-format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=InputFormat.AUTO,
    show_default=True,
    help=f"Input format ({', '.join(f.value for f in InputFormat)}).",
)
@config_file_options
@render_override_options
def render_command(
    *,
    source: str,
    input_format: InputFormat,
    config_path: Path | None,
    no_config: bool,
    max_depth: Limit | None,
    show_root: bool | None,
    max_items: Limit | None,
    max_keys: Limit | None,
    max_length: Limit | None,
    quotes: QuoteStyle | None,
    sort_keys: bool | None,
    date_format: DateFormat | None,
) -> None:
    """Render a document as a tree.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        input_format (InputFormat): How to decode the input.
        config_path (Path | None): Explicit config file.
        no_config (bool): Skip config file discovery.
        max_depth (Limit | None): Override for ``max_depth``.
        show_root (bool | None): Override for ``show_root``.
        max_items (Limit | None): Override for array/set/map ``max_items``.
        max_keys (Limit | None): Override for ``object.max_keys``.
        max_length (Limit | None): Override for ``string.max_length``.
        quotes (QuoteStyle | None): Override for ``string.quotes``.
        sort_keys (bool | None): Override for ``object.sort_keys``.
        date_format (DateFormat | None): Override for ``date.format``.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    overrides: dict[str, Any] = build_override_mapping(
        max_depth=max_depth,
        show_root=show_root,
        max_items=max_items,
        max_keys=max_keys,
        max_length=max_length,
        quotes=quotes,
        sort_keys=sort_keys,
        date_format=date_format,
    )
    options: TreeOptions = resolve_cli_options(
        config_path=config_path, no_config=no_config, overrides=overrides
    )
    report_diagnostics(ctx, options)

    value: Any = load_input(source, input_format)
    tree = ObjectTree(options, colorizer=get_colorizer(ctx))
    for line in tree.render(value):
        console.print(line)
