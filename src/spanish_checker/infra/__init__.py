"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the
LanguageTool HTTP API.  Every raw third-party exception must be caught
here and re-raised as a
:class:`~spanish_checker.exceptions.SpanishCheckerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from spanish_checker.infra.languagetool_client import LanguageToolProvider
from spanish_checker.infra.source_reader import read_source

__all__: list[str] = [
    "LanguageToolProvider",
    "read_source",
]
