# topmark:header:start
#
#   project      : ObjTree
#   file         : errors.py
#   file_relpath : src/objtree/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ObjTree CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the program console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from objtree.cli.exit_codes import ExitCode


class ObjtreeError(click.ClickException):
    """Base class for all ObjTree CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the program console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class ObjtreeUsageError(ObjtreeError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ObjtreeInputError(ObjtreeError):
    """Error for input that cannot be decoded or parsed as JSON/TOML."""

    exit_code = ExitCode.DATA_ERROR


class ObjtreeFileNotFoundError(ObjtreeError):
    """Error when an input or config path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ObjtreeIOError(ObjtreeError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class ObjtreeConfigError(ObjtreeError):
    """Error for configuration errors (unusable config file argument)."""

    exit_code = ExitCode.CONFIG_ERROR
