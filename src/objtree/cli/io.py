# topmark:header:start
#
#   project      : ObjTree
#   file         : io.py
#   file_relpath : src/objtree/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for the ``render`` command.

The value to render is read from a file or from STDIN (``-``) and decoded as
JSON (standard library `json`) or TOML (`tomlkit`). Failures are mapped to the
CLI error classes so that they exit with a meaningful code.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from objtree.cli.errors import ObjtreeFileNotFoundError, ObjtreeInputError, ObjtreeIOError
from objtree.config.logging import ObjtreeLogger, get_logger

logger: ObjtreeLogger = get_logger(__name__)

#: Pseudo path selecting STDIN.
STDIN_MARKER: str = "-"


class InputFormat(str, Enum):
    """Format of the rendered input document.

    Attributes:
        AUTO: Pick by file suffix; otherwise try JSON, then TOML.
        JSON: Parse as JSON.
        TOML: Parse as TOML.
    """

    AUTO = "auto"
    JSON = "json"
    TOML = "toml"


def read_input_text(source: str) -> tuple[str, str]:
    """Read the raw input text.

    Args:
        source (str): A file path, or ``-`` for STDIN.

    Returns:
        tuple[str, str]: ``(text, label)`` where ``label`` names the source in messages.

    Raises:
        ObjtreeFileNotFoundError: If the file does not exist.
        ObjtreeIOError: If the file cannot be read.
        ObjtreeInputError: If the content is not valid UTF-8.
    """
    if source == STDIN_MARKER:
        logger.debug("Reading input from STDIN")
        label: str = "<stdin>"
        try:
            data: bytes = click.get_binary_stream("stdin").read()
        except OSError as e:
            raise ObjtreeIOError(f"Cannot read {label}: {e}") from e
    else:
        path = Path(source)
        if not path.exists():
            raise ObjtreeFileNotFoundError(f"Input file not found: {source}")
        label = str(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ObjtreeIOError(f"Cannot read {source}: {e}") from e

    try:
        return data.decode("utf-8"), label
    except UnicodeDecodeError as e:
        raise ObjtreeInputError(f"Cannot decode {label} as UTF-8: {e}") from e


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_toml(text: str) -> Any:
    return tomlkit.parse(text).unwrap()


def guess_format(source: str) -> InputFormat:
    """Return the format implied by the file suffix (AUTO when undecided)."""
    suffix: str = Path(source).suffix.lower() if source != STDIN_MARKER else ""
    if suffix == ".json":
        return InputFormat.JSON
    if suffix == ".toml":
        return InputFormat.TOML
    return InputFormat.AUTO


def parse_input(text: str, input_format: InputFormat, *, label: str = "<input>") -> Any:
    """Decode ``text`` as JSON or TOML.

    Args:
        text (str): Raw document.
        input_format (InputFormat): Requested format; AUTO tries JSON first.
        label (str): Source name used in error messages.

    Returns:
        Any: The decoded value (plain dicts, lists and scalars).

    Raises:
        ObjtreeInputError: If the document cannot be parsed.
    """
    if input_format == InputFormat.JSON:
        try:
            return _parse_json(text)
        except json.JSONDecodeError as e:
            raise ObjtreeInputError(f"Invalid JSON in {label}: {e}") from e
    if input_format == InputFormat.TOML:
        try:
            return _parse_toml(text)
        except TomlkitParseError as e:
            raise ObjtreeInputError(f"Invalid TOML in {label}: {e}") from e

    try:
        return _parse_json(text)
    except json.JSONDecodeError as json_error:
        logger.debug("Input %s is not JSON (%s); trying TOML", label, json_error)
    try:
        return _parse_toml(text)
    except TomlkitParseError as e:
        raise ObjtreeInputError(f"Cannot parse {label} as JSON or TOML") from e


def load_input(source: str, input_format: InputFormat = InputFormat.AUTO) -> Any:
    """Read and decode the value to render.

    Args:
        source (str): A file path, or ``-`` for STDIN.
        input_format (InputFormat): Requested format; AUTO consults the suffix.

    Returns:
        Any: The decoded value.
    """
    text, label = read_input_text(source)
    if input_format == InputFormat.AUTO:
        input_format = guess_format(source)
    logger.debug("Parsing %s as %s", label, input_format.value)
    return parse_input(text, input_format, label=label)
