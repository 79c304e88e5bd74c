# topmark:header:start
#
#   project      : ObjTree
#   file         : demo.py
#   file_relpath : src/objtree/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjTree `demo` command.

Renders a built-in sample value that exercises every value category.
"""

from __future__ import annotations

import re
from collections import OrderedDict
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

import click

from objtree.cli.cmd_common import get_colorizer, get_console
from objtree.config.keys import Keys
from objtree.core.sentinels import UNDEFINED
from objtree.tree import ObjectTree

if TYPE_CHECKING:
    from objtree.cli.console import ConsoleLike

#: Options used by the demo (the rest are the built-in defaults).
DEMO_OPTIONS: Final[dict[str, Any]] = {
    Keys.KEY_MAX_DEPTH: 3,
    Keys.KEY_SHOW_ROOT: True,
    Keys.SECTION_STRING: {Keys.KEY_MAX_LENGTH: 50},
    Keys.SECTION_ARRAY: {Keys.KEY_MAX_ITEMS: 5},
    Keys.SECTION_OBJECT: {Keys.KEY_MAX_KEYS: 20},
    Keys.SECTION_DATE: {Keys.KEY_FORMAT: "iso"},
}


class Person:
    """A small class with instance fields."""

    def __init__(self, name: str) -> None:
        self.name = name


class Marker(Enum):
    """An enum whose members render as symbols."""

    UNIQUE = "unique"


def greet(name: str) -> str:
    """Return a greeting."""
    return f"Hello, {name}!"


def build_sample() -> dict[str, Any]:
    """Return the sample value rendered by ``objtree demo``."""
    return {
        "address": {
            "city": "New York",
            "coordinates": {"lat": 40.7128, "lng": -74.006},
            "country": "USA",
            "street": "123 Main St",
        },
        "age": 30,
        "big_number": 12345678901234567890,
        "birth_date": datetime(1993, 5, 15),
        "class_constructor": Person,
        "fn": greet,
        "hobbies": ["reading", "coding", "gaming", "cooking", "traveling", "hiking"],
        "is_active": True,
        "name": "John Doe",
        "null_value": None,
        "owner": Person("Jane Doe"),
        "regex": re.compile(r"^[a-zA-Z0-9]+$"),
        "scores": OrderedDict([("math", 95), ("science", 87), ("english", 92)]),
        "symbol": Marker.UNIQUE,
        "tags": {"developer", "python", "terminal"},
        "undefined_value": UNDEFINED,
    }


@click.command(
    name="demo",
    help="Render a built-in sample value covering every value category.",
)
def demo_command() -> None:
    """Render the built-in sample value."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    tree = ObjectTree(DEMO_OPTIONS, colorizer=get_colorizer(ctx))
    for line in tree.render(build_sample()):
        console.print(line)
