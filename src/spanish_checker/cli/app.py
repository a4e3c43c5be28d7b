"""CLI application entry point and command routing for spanish-checker.

This module is the **sole error boundary** for the entire application.
It catches :class:`~spanish_checker.exceptions.SpanishCheckerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* stdout carries only the report (or the empty-file notice); every
  other message goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from spanish_checker.cli import exit_codes
from spanish_checker.cli.console import console, escape_markup, report_console
from spanish_checker.exceptions import SpanishCheckerError
from spanish_checker.version import __version__

logger = logging.getLogger(__name__)

EMPTY_FILE_MESSAGE: str = "El archivo está vacío."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``spanish-checker examine <file>`` — check a text file
    * ``spanish-checker --version``
    """
    parser = argparse.ArgumentParser(
        prog="spanish-checker",
        description="Herramienta para revisar errores de español usando LanguageTool",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra mensajes de diagnóstico en stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")
    examine = subparsers.add_parser(
        "examine",
        help="Examina un archivo de texto",
        description="Examina un archivo de texto",
    )
    examine.add_argument("file", help="Ruta al archivo")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_examine(path: str) -> int:
    """Check a single file and print the report.

    Flow:
    1. Read the file as UTF-8.
    2. Stop early, without a request, when it is empty.
    3. Submit the text through the LanguageTool provider.
    4. Render the matches and write the report to stdout.
    """
    from spanish_checker.core.check_service import CheckService
    from spanish_checker.core.report import render_report
    from spanish_checker.infra.languagetool_client import LanguageToolProvider
    from spanish_checker.infra.source_reader import read_source

    text = read_source(path)
    if not text:
        report_console.write_lines([EMPTY_FILE_MESSAGE])
        return exit_codes.SUCCESS

    service = CheckService(LanguageToolProvider())
    result = service.check(text)

    report = render_report(result, text)
    logger.debug(
        "Rendered %d issue(s), %d repeated",
        report.total_errors,
        report.repeated_errors,
    )
    report_console.write_lines(report.lines)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the spanish-checker CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from spanish_checker.utils.logging_setup import configure_logging

    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_examine(args.file)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except SpanishCheckerError as exc:
        console.print(f"[bold red]{escape_markup(str(exc))}[/bold red]")
        if exc.hint:
            console.print(f"[yellow]Sugerencia:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelado por el usuario.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Error inesperado.[/bold red] "
            "Por favor, informa de este problema.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
