# topmark:header:start
#
#   project      : ObjTree
#   file         : __init__.py
#   file_relpath : src/objtree/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option handling for ObjTree.

Submodules:
    - `objtree.config.model`: `TreeOptions` (frozen) and `MutableTreeOptions`
      (tri-state builder), plus `resolve_options`.
    - `objtree.config.sections`: per-section option types and built-in defaults.
    - `objtree.config.getters`: checked getters used while parsing options.
    - `objtree.config.io`: TOML loading, discovery and rendering (`tomlkit`).
    - `objtree.config.logging`: logger setup with a TRACE level.

Submodules import each other directly; this package module stays import-free
so that `objtree.config.logging` can be imported from anywhere.
"""

from __future__ import annotations
