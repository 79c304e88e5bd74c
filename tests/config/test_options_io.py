# topmark:header:start
#
#   project      : ObjTree
#   file         : test_options_io.py
#   file_relpath : tests/config/test_options_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading, discovering and rendering option files (`objtree.config.io`)."""

from __future__ import annotations

import logging
import textwrap
from typing import TYPE_CHECKING

import tomlkit

from objtree.config.io import (
    discover_config_file,
    extract_options_table,
    load_config_layer,
    load_options_file,
    load_toml_dict,
    to_toml,
)
from objtree.config.model import MutableTreeOptions, TreeOptions
from objtree.config.types import UNBOUNDED, QuoteStyle

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def _write(path: Path, content: str) -> Path:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    """Parsed documents are unwrapped into plain Python values."""
    path = _write(
        tmp_path / "objtree.toml",
        """
        max_depth = 3
        [string]
        quotes = "single"
        """,
    )
    data = load_toml_dict(path)
    assert data == {"max_depth": 3, "string": {"quotes": "single"}}
    assert type(data["string"]) is dict


def test_load_toml_dict_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A missing file yields an empty dict and an error log entry."""
    with caplog.at_level(logging.ERROR):
        assert load_toml_dict(tmp_path / "nope.toml") == {}
    assert "nope.toml" in caplog.text


def test_load_toml_dict_malformed_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A malformed file yields an empty dict and an error log entry."""
    path = _write(tmp_path / "objtree.toml", "max_depth = = 3\n")
    with caplog.at_level(logging.ERROR):
        assert load_toml_dict(path) == {}
    assert "Error decoding TOML" in caplog.text


def test_extract_options_table(tmp_path: Path) -> None:
    """pyproject.toml keeps options under [tool.objtree]; other files at the top level."""
    data = {"tool": {"objtree": {"show_root": True}, "other": {}}, "project": {}}
    assert extract_options_table(tmp_path / "pyproject.toml", data) == {"show_root": True}
    assert extract_options_table(tmp_path / "pyproject.toml", {"project": {}}) == {}
    assert extract_options_table(tmp_path / "objtree.toml", {"indent": " "}) == {"indent": " "}


def test_discovery_walks_upward(tmp_path: Path) -> None:
    """The nearest objtree.toml above the start directory is found."""
    config = _write(tmp_path / "objtree.toml", "show_root = true\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == config.resolve()


def test_discovery_prefers_objtree_toml(tmp_path: Path) -> None:
    """In one directory objtree.toml wins over pyproject.toml."""
    _write(tmp_path / "pyproject.toml", "[tool.objtree]\nshow_root = true\n")
    config = _write(tmp_path / "objtree.toml", "show_root = false\n")
    assert discover_config_file(tmp_path) == config.resolve()


def test_discovery_skips_pyproject_without_tool_table(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.objtree] does not stop discovery."""
    outer = _write(tmp_path / "pyproject.toml", "[tool.objtree]\nmax_depth = 1\n")
    _write(tmp_path / "pkg" / "pyproject.toml", "[project]\nname = 'pkg'\n")
    assert discover_config_file(tmp_path / "pkg") == outer.resolve()


def test_discovery_accepts_a_file_as_start(tmp_path: Path) -> None:
    """Starting from a file searches its directory."""
    config = _write(tmp_path / "objtree.toml", "")
    data_file = _write(tmp_path / "data.json", "{}")
    assert discover_config_file(data_file) == config.resolve()


def test_load_options_file_from_pyproject(tmp_path: Path) -> None:
    """Options in [tool.objtree] are parsed, with the file recorded as source."""
    path = _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.objtree]
        max_depth = inf

        [tool.objtree.string]
        maxLength = 5
        quotes = "none"
        """,
    )
    options = load_options_file(path).freeze()
    assert options.max_depth == UNBOUNDED
    assert options.string.max_length == 5
    assert options.string.quotes is QuoteStyle.NONE
    assert options.sources == (str(path),)
    assert options.diagnostics == ()


def test_load_options_file_reports_invalid_values(tmp_path: Path) -> None:
    """Invalid values in a file become diagnostics rather than errors."""
    path = _write(
        tmp_path / "objtree.toml",
        """
        [array]
        max_items = -2
        """,
    )
    options = load_options_file(path).freeze()
    assert options.array.max_items == UNBOUNDED
    assert len(options.diagnostics) == 1


def test_load_config_layer_disabled(tmp_path: Path) -> None:
    """With use_config=False nothing is read."""
    _write(tmp_path / "objtree.toml", "show_root = true\n")
    layer = load_config_layer(use_config=False, start=tmp_path)
    assert layer == MutableTreeOptions()


def test_load_config_layer_explicit_path(tmp_path: Path) -> None:
    """An explicit path is used instead of discovery."""
    _write(tmp_path / "objtree.toml", "show_root = true\n")
    other = _write(tmp_path / "other.toml", "max_depth = 2\n")
    options = load_config_layer(config_path=other, start=tmp_path).freeze()
    assert options.max_depth == 2
    assert options.show_root is False


def test_load_config_layer_discovers(tmp_path: Path) -> None:
    """Without an explicit path the discovered file is loaded."""
    _write(tmp_path / "objtree.toml", "show_root = true\n")
    assert load_config_layer(start=tmp_path).freeze().show_root is True


def test_to_toml_strips_none() -> None:
    """None values have no TOML form and are dropped."""
    text = to_toml({"a": 1, "b": None, "c": {"d": None, "e": [1, None, 2]}})
    assert tomlkit.parse(text).unwrap() == {"a": 1, "c": {"e": [1, 2]}}


def test_defaults_dump_parses_back() -> None:
    """The rendered defaults are valid TOML that resolves to the defaults."""
    text = to_toml(TreeOptions().to_toml_dict())
    assert "[string]" in text
    data = tomlkit.parse(text).unwrap()
    assert data["max_depth"] == UNBOUNDED
    assert MutableTreeOptions.from_mapping(data).freeze() == TreeOptions()
