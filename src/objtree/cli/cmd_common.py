# topmark:header:start
#
#   project      : ObjTree
#   file         : cmd_common.py
#   file_relpath : src/objtree/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by ObjTree subcommands.

Options are layered as: built-in defaults ← config file ← CLI flags. The
config-file layer comes from `objtree.config.io.load_config_layer`; CLI flags
are translated by `objtree.cli.options.build_override_mapping`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from objtree.cli.errors import ObjtreeConfigError, ObjtreeFileNotFoundError
from objtree.config.io import load_config_layer
from objtree.config.logging import get_logger
from objtree.config.model import MutableTreeOptions
from objtree.core.diagnostics import compute_diagnostic_stats
from objtree.rendering.colors import PlainColorizer, make_colorizer

if TYPE_CHECKING:
    from pathlib import Path

    from objtree.cli.console import ConsoleLike
    from objtree.config.logging import ObjtreeLogger
    from objtree.config.model import TreeOptions
    from objtree.core.diagnostics import DiagnosticStats
    from objtree.rendering.colors import Colorizer

logger: ObjtreeLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the program console stored on the context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` positive, ``-q`` negative)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def get_colorizer(ctx: click.Context) -> Colorizer:
    """Return the tree colorizer matching the resolved color mode."""
    ctx.ensure_object(dict)
    if not ctx.obj.get("color_enabled", False):
        return PlainColorizer()
    return make_colorizer(True)


def resolve_cli_options(
    *,
    config_path: Path | None,
    no_config: bool,
    overrides: dict[str, Any] | None = None,
) -> TreeOptions:
    """Build the effective options for a command.

    Args:
        config_path (Path | None): ``--config`` value.
        no_config (bool): ``--no-config`` flag.
        overrides (dict[str, Any] | None): CLI flag overrides (see
            `build_override_mapping`).

    Returns:
        TreeOptions: Resolved options, diagnostics included.

    Raises:
        ObjtreeConfigError: If ``--config`` and ``--no-config`` are combined.
        ObjtreeFileNotFoundError: If the ``--config`` file does not exist.
    """
    if config_path is not None and no_config:
        raise ObjtreeConfigError("The '--config' and '--no-config' options are mutually exclusive.")
    if config_path is not None and not config_path.is_file():
        raise ObjtreeFileNotFoundError(f"Config file not found: {config_path}")

    draft: MutableTreeOptions = load_config_layer(config_path=config_path, use_config=not no_config)
    if overrides:
        draft = draft.merge_with(MutableTreeOptions.from_mapping(overrides, source="command line"))
    return draft.freeze()


def report_diagnostics(ctx: click.Context, options: TreeOptions) -> None:
    """Report option diagnostics on stderr.

    Verbose runs print every diagnostic; default runs print a one-line count;
    quiet runs print nothing.
    """
    verbosity: int = get_effective_verbosity(ctx)
    if verbosity < 0 or not options.diagnostics:
        return
    console: ConsoleLike = get_console(ctx)
    if verbosity == 0:
        stats: DiagnosticStats = compute_diagnostic_stats(options.diagnostics)
        console.warn(f"{stats.total} option issue(s) ignored; use -v for details.")
        return
    for diagnostic in options.diagnostics:
        console.warn(f"[{diagnostic.level.value}] {diagnostic.message}")
