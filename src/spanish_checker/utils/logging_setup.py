"""Logging configuration for the console script.

Diagnostics always go to stderr so that stdout carries nothing but the
report.  Rich is used for the handler when it is installed.
"""

from __future__ import annotations

import logging

LOG_FORMAT: str = "%(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + LOG_FORMAT))
        return handler
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(verbose: bool = False) -> None:
    """Install a single stderr handler on the package logger.

    Parameters
    ----------
    verbose:
        ``True`` logs at ``DEBUG``; otherwise only warnings and above.
    """
    package_logger = logging.getLogger("spanish_checker")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(_build_handler())
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
