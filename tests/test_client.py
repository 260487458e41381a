"""Tests for GeminiClient."""

from unittest.mock import MagicMock

import pytest
import requests

from ai_news.client import GeminiClient
from ai_news.exceptions import ParseError, UpstreamError

from .helpers import envelope, make_response


def _client(session: MagicMock, **kwargs) -> GeminiClient:
    return GeminiClient("secret", session=session, **kwargs)


def test_requires_api_key() -> None:
    with pytest.raises(ValueError):
        GeminiClient("")


def test_posts_payload_with_key_param(session: MagicMock) -> None:
    session.post.return_value = make_response(payload=envelope("[]"))
    payload = {"contents": []}

    text = _client(session).generate_content(payload)

    assert text == "[]"
    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    assert kwargs["params"] == {"key": "secret"}
    assert kwargs["json"] is payload
    assert kwargs["timeout"] is None


def test_custom_model_base_and_timeout(session: MagicMock) -> None:
    session.post.return_value = make_response(payload=envelope("[]"))
    client = _client(session, model="gemini-2.5-pro", api_base="https://proxy.local/v1/", timeout=5.0)

    client.generate_content({})

    args, kwargs = session.post.call_args
    assert args[0] == "https://proxy.local/v1/models/gemini-2.5-pro:generateContent"
    assert kwargs["timeout"] == 5.0


def test_non_success_status(session: MagicMock) -> None:
    session.post.return_value = make_response(status_code=403, text='{"error": "denied"}', reason="Forbidden")

    with pytest.raises(UpstreamError) as info:
        _client(session).generate_content({})

    assert info.value.status_code == 403
    assert info.value.body == '{"error": "denied"}'
    assert "403" in str(info.value)
    assert "Forbidden" in str(info.value)


def test_transport_failure(session: MagicMock) -> None:
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(UpstreamError) as info:
        _client(session).generate_content({})

    assert info.value.status_code is None
    assert "connection refused" in str(info.value)


def test_envelope_not_json(session: MagicMock) -> None:
    response = make_response()
    response.json.side_effect = ValueError("no json")
    session.post.return_value = response

    with pytest.raises(ParseError):
        _client(session).generate_content({})


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {"candidates": [{"content": {"parts": [{"text": None}]}}]},
    ],
)
def test_envelope_without_text(session: MagicMock, payload: dict) -> None:
    session.post.return_value = make_response(payload=payload)

    with pytest.raises(ParseError, match="no generated text"):
        _client(session).generate_content({})
