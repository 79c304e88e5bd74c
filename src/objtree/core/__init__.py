# topmark:header:start
#
#   project      : ObjTree
#   file         : __init__.py
#   file_relpath : src/objtree/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ObjTree.

Included modules:

- ``diagnostics``
  Diagnostic types and helpers (levels, messages, aggregation) used to
  collect and report warnings produced while resolving options.

- ``sentinels``
  The ``UNDEFINED`` marker rendered as ``undefined``.

Design goals:

- Keep this package free of CLI dependencies and side effects.
"""

from __future__ import annotations
