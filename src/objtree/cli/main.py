# topmark:header:start
#
#   project      : ObjTree
#   file         : main.py
#   file_relpath : src/objtree/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree command line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj``.
- Subcommands read the console, verbosity and color state from ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtree.cli.commands.config import config_command
from objtree.cli.commands.demo import demo_command
from objtree.cli.commands.render import render_command
from objtree.cli.commands.version import version_command
from objtree.cli.console import ClickConsole
from objtree.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from objtree.config.logging import get_logger, resolve_env_log_level, setup_logging
from objtree.rendering.colors import ColorMode, resolve_color_mode

if TYPE_CHECKING:
    from objtree.cli.console import ConsoleLike
    from objtree.config.logging import ObjtreeLogger

logger: ObjtreeLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="ObjTree: render Python values and JSON/TOML documents as trees.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ObjTree CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'objtree render FILE' or 'objtree demo'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(config_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
