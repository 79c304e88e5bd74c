# topmark:header:start
#
#   project      : ObjTree
#   file         : config.py
#   file_relpath : src/objtree/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree `config` command group.

  * ``objtree config dump``: show the effective options as TOML.
  * ``objtree config defaults``: show the built-in defaults as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtree.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    report_diagnostics,
    resolve_cli_options,
)
from objtree.cli.options import CONTEXT_SETTINGS, config_file_options
from objtree.config.io import to_toml
from objtree.config.model import TreeOptions

if TYPE_CHECKING:
    from pathlib import Path

    from objtree.cli.console import ConsoleLike


@click.group(
    name="config",
    help="Inspect ObjTree options.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


@config_command.command(
    name="dump",
    help="Print the effective options (defaults + config file) as TOML.",
)
@config_file_options
def config_dump_command(*, config_path: Path | None, no_config: bool) -> None:
    """Print the effective options as TOML.

    With ``-v`` the option sources are listed as TOML comments and any option
    warnings are printed to stderr.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    options: TreeOptions = resolve_cli_options(config_path=config_path, no_config=no_config)
    report_diagnostics(ctx, options)

    if get_effective_verbosity(ctx) > 0:
        for source in options.sources or ("<defaults>",):
            console.print(f"# source: {source}")
    console.print(to_toml(options.to_toml_dict()), nl=False)


@config_command.command(
    name="defaults",
    help="Print the built-in default options as TOML.",
)
def config_defaults_command() -> None:
    """Print the built-in default options as TOML."""
    console: ConsoleLike = get_console(click.get_current_context())
    console.print(to_toml(TreeOptions().to_toml_dict()), nl=False)
