from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_LANGUAGE = "English"


@dataclass(slots=True)
class FetcherConfig:
    """Runtime configuration for the news fetcher."""

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    language: str = DEFAULT_LANGUAGE
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "FetcherConfig":
        import os

        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            api_base=(os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            language=os.getenv("NEWS_LANGUAGE") or DEFAULT_LANGUAGE,
            timeout=_parse_timeout(os.getenv("NEWS_FETCHER_TIMEOUT")),
        )


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError("NEWS_FETCHER_TIMEOUT must be a number of seconds if set") from None
    if parsed <= 0:
        return None
    return parsed
