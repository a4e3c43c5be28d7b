"""requests-backed implementation of :class:`~spanish_checker.core.protocols.CheckProvider`.

This module is the **only** place in the codebase that imports
``requests``.  All requests exceptions are caught here and re-raised as
typed :class:`~spanish_checker.exceptions.CheckError` subclasses —
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

from spanish_checker.config import ENABLED_ONLY, LANGUAGE, LANGUAGETOOL_URL, USER_AGENT
from spanish_checker.exceptions import DecodeError, DependencyError, NetworkError

logger = logging.getLogger(__name__)


class LanguageToolProvider:
    """Concrete :class:`CheckProvider` backed by the LanguageTool HTTP API.

    Usage::

        provider = LanguageToolProvider()
        payload = provider.submit("Yo tiene un gato.")

    One call issues exactly one ``POST``.  No timeout is set, so the
    call blocks until the service answers or the connection fails.
    """

    def __init__(self, url: str = LANGUAGETOOL_URL) -> None:
        self._url: str = url

    @staticmethod
    def _build_form(text: str) -> dict[str, str]:
        """Return the form fields sent with every request."""
        return {
            "text": text,
            "language": LANGUAGE,
            # Ask for every rule category, not only the default ones.
            "enabledOnly": ENABLED_ONLY,
        }

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def submit(self, text: str) -> Any:
        """POST *text* to LanguageTool and return the decoded JSON body.

        Raises
        ------
        NetworkError
            On connection, DNS, TLS or HTTP status failures.
        DecodeError
            When the body is not valid JSON.
        """
        try:
            import requests
        except ModuleNotFoundError as exc:
            raise DependencyError(
                "requests no está instalado.",
                hint="Instálalo con: pip install requests",
            ) from exc

        logger.debug("POST %s (%d characters)", self._url, len(text))
        try:
            response = requests.post(
                self._url,
                data=self._build_form(text),
                headers={"User-Agent": USER_AGENT},
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", "desconocido")
            raise NetworkError(
                f"Error al analizar: el servicio respondió con estado {status}",
            ) from exc
        except requests.RequestException as exc:
            raise NetworkError(
                f"Error al analizar: {exc}",
                hint="Comprueba tu conexión a internet.",
            ) from exc

        logger.debug("Response %d, %d bytes", response.status_code, len(response.content))
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Error al analizar: la respuesta no es JSON válido: {exc}",
            ) from exc
