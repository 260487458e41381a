from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from .config import DEFAULT_API_BASE, DEFAULT_MODEL
from .exceptions import ParseError, UpstreamError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends ``generateContent`` requests to the Gemini REST API."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_base: str = DEFAULT_API_BASE,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ValueError("GeminiClient requires an API key")
        self._api_key = api_key
        self._model = model
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    def generate_content(self, payload: Mapping[str, Any]) -> str:
        """POST ``payload`` once and return the generated text of the first candidate."""
        try:
            response = self._session.post(
                self.url,
                params={"key": self._api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamError(f"Request to {self._model} failed: {exc}") from exc

        if not response.ok:
            body = response.text
            logger.error("Gemini API returned %s: %s", response.status_code, body)
            raise UpstreamError(
                f"API error: {response.status_code} {response.reason} - {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            envelope = response.json()
        except ValueError as exc:
            raise ParseError("API response is not valid JSON") from exc
        return _candidate_text(envelope)


def _candidate_text(envelope: Any) -> str:
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise ParseError("API response contains no generated text") from None
    if not isinstance(text, str):
        raise ParseError("API response contains no generated text")
    return text
