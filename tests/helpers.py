"""Helpers for building mocked Gemini responses."""

import json
from datetime import datetime
from typing import Any
from unittest.mock import MagicMock

NOW = datetime(2026, 10, 19, 9, 30)
TODAY = "2026-10-19"
YESTERDAY = "2026-10-18"
TWO_DAYS_AGO = "2026-10-17"


def make_item(headline: str, date: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "headline": headline,
        "category": "Technology",
        "summary": f"Summary of {headline}",
        "source": "Reuters",
        "link": f"https://example.com/{headline.lower().replace(' ', '-')}",
    }
    if date is not None:
        item["publicationDate"] = date
    return item


def make_response(status_code: int = 200, payload: Any = None, text: str = "", reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.text = text
    response.json.return_value = payload
    return response


def envelope(generated_text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": generated_text}], "role": "model"}}]}


def model_response(items: Any) -> MagicMock:
    return make_response(payload=envelope(json.dumps(items)))
