# topmark:header:start
#
#   project      : ObjTree
#   file         : __main__.py
#   file_relpath : src/objtree/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ObjTree via ``python -m objtree``.

It delegates directly to `objtree.cli.main.cli`, the single CLI entry point.

Examples:
    Render a JSON document::

        python -m objtree render data.json
"""

from __future__ import annotations

from objtree.cli.main import cli

if __name__ == "__main__":
    cli()
