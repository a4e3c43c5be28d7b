"""Custom exception hierarchy for spanish-checker.

All exceptions that cross layer boundaries must inherit from
:class:`SpanishCheckerError`.  Raw third-party exceptions (e.g. from
requests) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Messages are user-facing and written in Spanish.

Hierarchy
---------
SpanishCheckerError
├── FileReadError
├── CheckError
│   ├── NetworkError
│   └── DecodeError
└── DependencyError
"""

from __future__ import annotations


class SpanishCheckerError(Exception):
    """Base exception for all spanish-checker errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Source file -----------------------------------------------------------

class FileReadError(SpanishCheckerError):
    """Raised when the input file is missing, unreadable, or not UTF-8."""


# --- Checking service ------------------------------------------------------

class CheckError(SpanishCheckerError):
    """Raised when the remote check cannot produce a result."""


class NetworkError(CheckError):
    """Raised when the checking service cannot be reached."""


class DecodeError(CheckError):
    """Raised when the service response is not the expected JSON shape."""


# --- Environment -----------------------------------------------------------

class DependencyError(SpanishCheckerError):
    """Raised when a required third-party package is not installed."""
