"""Tests for the LanguageTool HTTP provider (infra/languagetool_client.py).

``requests.post`` is patched in every test — no request ever leaves the
machine.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from spanish_checker.config import LANGUAGETOOL_URL, USER_AGENT
from spanish_checker.exceptions import DecodeError, NetworkError
from spanish_checker.infra.languagetool_client import LanguageToolProvider


def _response(payload: Any = None, *, status: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = b"{}"
    response.json.return_value = payload if payload is not None else {"matches": []}
    return response


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------

class TestRequest:
    @patch("requests.post")
    def test_single_form_post(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response()

        LanguageToolProvider().submit("Yo tiene un gato.")

        mock_post.assert_called_once_with(
            LANGUAGETOOL_URL,
            data={"text": "Yo tiene un gato.", "language": "es", "enabledOnly": "false"},
            headers={"User-Agent": USER_AGENT},
        )

    @patch("requests.post")
    def test_no_timeout_override(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response()
        LanguageToolProvider().submit("hola")
        assert "timeout" not in mock_post.call_args.kwargs

    @patch("requests.post")
    def test_custom_url(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response()
        LanguageToolProvider("http://localhost:8081/v2/check").submit("hola")
        assert mock_post.call_args.args[0] == "http://localhost:8081/v2/check"

    @patch("requests.post")
    def test_returns_decoded_body(self, mock_post: MagicMock) -> None:
        payload = {"matches": [{"offset": 0}]}
        mock_post.return_value = _response(payload)
        assert LanguageToolProvider().submit("hola") == payload


# ---------------------------------------------------------------------------
# Exception mapping
# ---------------------------------------------------------------------------

class TestExceptionMapping:
    @patch("requests.post", side_effect=requests.ConnectionError("Connection refused"))
    def test_connection_refused(self, _mock_post: MagicMock) -> None:
        with pytest.raises(NetworkError, match="Connection refused") as exc_info:
            LanguageToolProvider().submit("hola")
        assert exc_info.value.hint is not None

    @patch("requests.post", side_effect=requests.exceptions.SSLError("bad cert"))
    def test_tls_failure(self, _mock_post: MagicMock) -> None:
        with pytest.raises(NetworkError, match="bad cert"):
            LanguageToolProvider().submit("hola")

    @patch("requests.post")
    def test_http_status_error(self, mock_post: MagicMock) -> None:
        response = _response(status=413)
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
        mock_post.return_value = response

        with pytest.raises(NetworkError, match="413"):
            LanguageToolProvider().submit("hola")

    @patch("requests.post")
    def test_invalid_json(self, mock_post: MagicMock) -> None:
        response = _response()
        response.json.side_effect = ValueError("Expecting value")
        mock_post.return_value = response

        with pytest.raises(DecodeError, match="JSON"):
            LanguageToolProvider().submit("hola")
