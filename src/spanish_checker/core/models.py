"""Domain models for spanish-checker.

All models are **frozen** dataclasses — immutable value objects built
from a single service response and discarded once the report has been
rendered.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Match components
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Replacement:
    """A single suggested correction."""

    value: str


@dataclass(frozen=True, slots=True)
class Context:
    """Excerpt of surrounding text supplied by the service."""

    text: str
    """The excerpt itself, as shown to the user."""

    offset: int
    """Start of the issue within :attr:`text` (not within the source)."""

    length: int
    """Length of the issue within :attr:`text`."""


# ---------------------------------------------------------------------------
# Match
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Match:
    """One issue detected by the checking service."""

    message: str
    """Human-readable explanation of the issue."""

    offset: int
    """0-based start of the issue in the source, in code points."""

    length: int
    """Length of the offending span, in code points."""

    replacements: tuple[Replacement, ...]
    """Suggested corrections, best first."""

    context: Context

    category: str
    """Rule category label (e.g. ``"Gramática"``, ``"Tipografía"``)."""

    def suggestions(self, limit: int) -> list[str]:
        """Return the values of at most *limit* leading replacements."""
        return [replacement.value for replacement in self.replacements[:limit]]


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CheckResult:
    """Ordered matches exactly as returned by the service.

    The order is assumed to follow the source text left to right; it is
    never re-sorted.
    """

    matches: tuple[Match, ...]

    def __len__(self) -> int:
        return len(self.matches)

    def __bool__(self) -> bool:
        return len(self.matches) > 0
