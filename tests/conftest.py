"""Shared pytest fixtures and configuration for the spanish-checker test suite.

Guidelines
----------
* No internet access in any test.
* requests must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state beyond ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def source_file(tmp_path: Path) -> Callable[..., str]:
    """Return a helper that writes text to a UTF-8 file and gives its path."""

    def _write(text: str, name: str = "texto.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return str(path)

    return _write
