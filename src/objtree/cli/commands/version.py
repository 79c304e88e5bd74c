# topmark:header:start
#
#   project      : ObjTree
#   file         : version.py
#   file_relpath : src/objtree/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree `version` command.

Prints the current ObjTree version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtree.cli.cmd_common import get_console, get_effective_verbosity
from objtree.constants import OBJTREE_VERSION

if TYPE_CHECKING:
    from objtree.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ObjTree.",
)
def version_command() -> None:
    """Show the current version of ObjTree."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ObjTree version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(OBJTREE_VERSION, bold=True)}")
    else:
        console.print(console.styled(OBJTREE_VERSION, bold=True))
