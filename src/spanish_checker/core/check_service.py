"""Core check service — submits text and decodes the service response.

This is the Checker Client consumed by the CLI layer.  It depends on a
:class:`~spanish_checker.core.protocols.CheckProvider` injected at
construction time, keeping the core free of any HTTP imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~spanish_checker.exceptions.SpanishCheckerError` subclasses escape.
* Decoding is strict: one malformed match fails the whole check, so no
  partial result is ever returned.
"""

from __future__ import annotations

import logging
from typing import Any

from spanish_checker.core.models import CheckResult, Context, Match, Replacement
from spanish_checker.core.protocols import CheckProvider
from spanish_checker.exceptions import CheckError, DecodeError, SpanishCheckerError

logger = logging.getLogger(__name__)


class CheckService:
    """Stateless service that checks a text through a provider.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`CheckProvider` protocol.
    """

    def __init__(self, provider: CheckProvider) -> None:
        self._provider: CheckProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, text: str) -> CheckResult:
        """Check *text* and return the matches in service order.

        Raises
        ------
        NetworkError
            If the service cannot be reached.
        DecodeError
            If the response does not match the expected schema.
        CheckError
            If the provider fails in any other way.
        """
        payload = self._submit(text)
        result = self.parse_response(payload)
        logger.debug("Service reported %d match(es)", len(result))
        return result

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _submit(self, text: str) -> Any:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.submit(text)
        except SpanishCheckerError:
            raise
        except Exception as exc:
            raise CheckError(
                f"Error al analizar: error inesperado del proveedor: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw JSON → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @classmethod
    def parse_response(cls, payload: Any) -> CheckResult:
        """Convert a decoded JSON body into a :class:`CheckResult`."""
        body = _require_dict(payload, "respuesta")
        raw_matches = _require(body, "matches", list, "respuesta")
        return CheckResult(
            matches=tuple(
                cls._parse_match(raw, f"matches[{index}]")
                for index, raw in enumerate(raw_matches)
            ),
        )

    @staticmethod
    def _parse_match(raw: Any, path: str) -> Match:
        """Convert one raw match dict to a :class:`Match`."""
        entry = _require_dict(raw, path)

        raw_replacements = _require(entry, "replacements", list, path)
        replacements = tuple(
            Replacement(
                value=_require(
                    _require_dict(item, f"{path}.replacements[{index}]"),
                    "value",
                    str,
                    f"{path}.replacements[{index}]",
                ),
            )
            for index, item in enumerate(raw_replacements)
        )

        raw_context = _require_dict(entry.get("context"), f"{path}.context")
        context = Context(
            text=_require(raw_context, "text", str, f"{path}.context"),
            offset=_require_count(raw_context, "offset", f"{path}.context"),
            length=_require_count(raw_context, "length", f"{path}.context"),
        )

        rule = _require_dict(entry.get("rule"), f"{path}.rule")
        category = _require_dict(rule.get("category"), f"{path}.rule.category")

        return Match(
            message=_require(entry, "message", str, path),
            offset=_require_count(entry, "offset", path),
            length=_require_count(entry, "length", path),
            replacements=replacements,
            context=context,
            category=_require(category, "name", str, f"{path}.rule.category"),
        )


# ---------------------------------------------------------------------------
# Schema helpers
# ---------------------------------------------------------------------------

def _schema_error(path: str, detail: str) -> DecodeError:
    return DecodeError(
        f"Error al analizar: respuesta inesperada del servicio ({path}: {detail})",
    )


def _require_dict(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _schema_error(path, "se esperaba un objeto")
    return value


def _require(container: dict[str, Any], key: str, kind: type, path: str) -> Any:
    if key not in container:
        raise _schema_error(f"{path}.{key}", "campo ausente")
    value = container[key]
    if not isinstance(value, kind):
        raise _schema_error(f"{path}.{key}", f"se esperaba {kind.__name__}")
    return value


def _require_count(container: dict[str, Any], key: str, path: str) -> int:
    """Return a non-negative integer field; ``bool`` is rejected."""
    value = _require(container, key, int, path)
    if isinstance(value, bool) or value < 0:
        raise _schema_error(f"{path}.{key}", "se esperaba un entero no negativo")
    return value
