# topmark:header:start
#
#   project      : ObjTree
#   file         : diagnostics.py
#   file_relpath : src/objtree/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types collected while resolving ObjTree options.

Option resolution never raises: ignored keys and rejected values are recorded
here instead, so callers (the CLI in particular) can surface them.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticStats / compute_diagnostic_stats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from objtree.config.logging import get_logger

if TYPE_CHECKING:
    from objtree.config.logging import ObjtreeLogger

logger: ObjtreeLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics; option resolution only emits warnings."""

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_warning: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_warning


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    return DiagnosticStats(n_warning=n_warn)


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics gathered while building options."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics.
        """
        return cls(items=list(diagnostics))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the log."""
        diagnostic = Diagnostic(DiagnosticLevel.WARNING, message)
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
