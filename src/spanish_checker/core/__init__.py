"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from spanish_checker.core.check_service import CheckService
from spanish_checker.core.models import CheckResult, Context, Match, Replacement
from spanish_checker.core.protocols import CheckProvider
from spanish_checker.core.report import RenderedReport, render_report

__all__: list[str] = [
    "CheckProvider",
    "CheckResult",
    "CheckService",
    "Context",
    "Match",
    "RenderedReport",
    "Replacement",
    "render_report",
]
