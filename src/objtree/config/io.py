# topmark:header:start
#
#   project      : ObjTree
#   file         : io.py
#   file_relpath : src/objtree/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render TOML option files.

Supported sources:
- ``objtree.toml``: options at the top level.
- ``pyproject.toml``: options under ``[tool.objtree]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
TOML has no ``null`` value, so ``None`` entries are stripped when rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from objtree.config.keys import Keys
from objtree.config.logging import get_logger
from objtree.config.model import MutableTreeOptions
from objtree.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from objtree.config.logging import ObjtreeLogger
    from objtree.config.types import TomlTable

logger: ObjtreeLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``objtree.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_options_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the ObjTree options table of a parsed config document.

    For ``pyproject.toml`` this is the ``[tool.objtree]`` table (empty when
    missing); any other file holds the options at the top level.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(Keys.PYPROJECT_TOOL_TABLE, {}) if isinstance(tool, Mapping) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def _has_tool_table(path: Path) -> bool:
    data: TomlTable = load_toml_dict(path)
    tool: Any = data.get("tool", {})
    return isinstance(tool, Mapping) and Keys.PYPROJECT_TOOL_TABLE in tool


def discover_config_file(start: Path | None = None) -> Path | None:
    """Return the nearest config file, walking upward from ``start``.

    In each directory ``objtree.toml`` is preferred; a ``pyproject.toml`` only
    counts when it has a ``[tool.objtree]`` table.

    Args:
        start (Path | None): Directory (or file) where discovery starts.
            Defaults to the current working directory.

    Returns:
        Path | None: The first matching file, or None if none was found.
    """
    cur: Path = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        candidate: Path = cur / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        candidate = cur / PYPROJECT_FILE_NAME
        if candidate.is_file() and _has_tool_table(candidate):
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        parent: Path = cur.parent
        if parent == cur:
            logger.debug("No config file found above %s", start or "cwd")
            return None
        cur = parent


def load_options_file(path: Path) -> MutableTreeOptions:
    """Parse a config file into an options builder.

    Unreadable or malformed files yield an empty builder (the error is logged).

    Args:
        path (Path): ``objtree.toml``, ``pyproject.toml`` or any TOML file
            holding options at the top level.

    Returns:
        MutableTreeOptions: Builder with ``path`` recorded as its source.
    """
    table: TomlTable = extract_options_table(path, load_toml_dict(path))
    return MutableTreeOptions.from_mapping(table, source=str(path))


def load_config_layer(
    *,
    config_path: Path | None = None,
    use_config: bool = True,
    start: Path | None = None,
) -> MutableTreeOptions:
    """Return the config-file layer for the CLI.

    Args:
        config_path (Path | None): Explicit config file; disables discovery.
        use_config (bool): If False, no file is read at all.
        start (Path | None): Discovery anchor (defaults to the working directory).

    Returns:
        MutableTreeOptions: The parsed file, or an empty builder.
    """
    if not use_config:
        logger.debug("Config file loading disabled")
        return MutableTreeOptions()
    path: Path | None = config_path if config_path is not None else discover_config_file(start)
    if path is None:
        return MutableTreeOptions()
    logger.info("Loading options from %s", path)
    return load_options_file(path)


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
