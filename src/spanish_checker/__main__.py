"""Allow ``python -m spanish_checker`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m spanish_checker`` behaves identically to the
``spanish-checker`` console script.
"""

from __future__ import annotations

from spanish_checker.cli.app import cli

if __name__ == "__main__":
    cli()
