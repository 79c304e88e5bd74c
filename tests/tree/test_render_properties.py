# topmark:header:start
#
#   project      : ObjTree
#   file         : test_render_properties.py
#   file_relpath : tests/tree/test_render_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the tree walker.

Generated JSON-like values are rendered with the default options and checked
for structural properties of the output:
1) one line per node (plus one for the root with ``show_root``),
2) rendering is deterministic,
3) the last line only continues closed ancestors,
4) container limits keep ``min(n, limit)`` entries plus one marker.
"""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from objtree.tree import ObjectTree, render_lines
from tests.strategies_objtree import count_nodes, s_containers, s_json_like, s_keys


@settings(max_examples=60, deadline=None)
@given(value=s_json_like)
def test_one_line_per_node(value: Any) -> None:
    """Without limits every descendant gets exactly one line."""
    assert len(render_lines(value)) == count_nodes(value)
    assert len(render_lines(value, {"show_root": True})) == count_nodes(value) + 1


@settings(max_examples=60, deadline=None)
@given(value=s_json_like, max_depth=st.integers(min_value=0, max_value=4))
def test_max_depth_bounds_line_count(value: Any, max_depth: int) -> None:
    """Only nodes down to max_depth are rendered."""
    assert len(render_lines(value, {"max_depth": max_depth})) == count_nodes(value, max_depth)


@settings(max_examples=40, deadline=None)
@given(value=s_json_like)
def test_render_is_deterministic(value: Any) -> None:
    """The same tree renders the same value identically twice."""
    tree = ObjectTree({"show_root": True})
    assert tree.render(value) == tree.render(value)


@settings(max_examples=60, deadline=None)
@given(value=s_containers)
def test_last_line_has_no_open_connectors(value: Any) -> None:
    """Every ancestor of the final line is a last child, so no pipe or tee precedes it."""
    lines = render_lines(value)
    if not lines:
        return
    prefix, _, _ = lines[-1].partition("└─ ")
    assert prefix.strip(" ") == ""


@settings(max_examples=60, deadline=None)
@given(
    items=st.lists(st.integers(min_value=0, max_value=9), max_size=12),
    limit=st.integers(min_value=0, max_value=12),
)
def test_item_limit_keeps_prefix_and_counts_the_rest(items: list[int], limit: int) -> None:
    """A list of n items shows min(n, limit) items and a '+k more' marker when clamped."""
    lines = render_lines(items, {"array": {"max_items": limit}})
    shown = min(len(items), limit)
    assert [line[3:] for line in lines[:shown]] == [
        f"{index}: {item}" for index, item in enumerate(items[:shown])
    ]
    if len(items) > limit:
        assert len(lines) == shown + 1
        assert lines[-1] == f"└─ …: +{len(items) - limit} more"
    else:
        assert len(lines) == shown


@settings(max_examples=40, deadline=None)
@given(value=st.dictionaries(s_keys, st.integers(), max_size=8))
def test_dict_keys_are_sorted(value: dict[str, int]) -> None:
    """Plain dict keys appear in sorted order by default."""
    keys = [line[3:].split(": ", 1)[0] for line in render_lines(value)]
    assert keys == sorted(value)
