# topmark:header:start
#
#   project      : ObjTree
#   file         : sentinels.py
#   file_relpath : src/objtree/core/sentinels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``UNDEFINED`` sentinel.

``None`` is a real value in Python; ``UNDEFINED`` stands for "no value at all"
(for example an instance slot that was never assigned). The tree renders it as
``undefined``.
"""

from __future__ import annotations

from typing import Final


class _Undefined:
    """Singleton type of `UNDEFINED`."""

    __slots__ = ()

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()
