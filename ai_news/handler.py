"""Invocation handling shared by the serverless entry point and the Flask app."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .config import FetcherConfig
from .exceptions import ConfigurationError, NewsFetchError
from .fetcher import Clock, NewsFetcher

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
JSON_HEADERS = {**CORS_HEADERS, "Content-Type": "application/json"}


def handle_news_request(
    config: Optional[FetcherConfig] = None,
    *,
    fetcher: Optional[NewsFetcher] = None,
    clock: Optional[Clock] = None,
) -> Tuple[int, Any]:
    """Run one invocation and return ``(status_code, json_body)``.

    Configuration is read from the environment on every call unless given.
    Every failure is reported as status 500 with an ``{"error": ...}`` body.
    """
    try:
        if fetcher is None:
            config = config or _load_config()
            fetcher = NewsFetcher(config.api_key, config=config, clock=clock)
        items = fetcher.fetch_recent_news()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 500, {"error": str(exc)}
    except NewsFetchError as exc:
        logger.exception("%s while fetching news", type(exc).__name__)
        return 500, {"error": f"Failed to load news: {exc}"}
    return 200, [item.to_dict() for item in items]


def handler(event: Optional[Mapping[str, Any]] = None, context: Any = None) -> Dict[str, Any]:
    """Serverless entry point; the request event is ignored."""
    status, body = handle_news_request()
    return {
        "statusCode": status,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, ensure_ascii=False),
    }


def _load_config() -> FetcherConfig:
    try:
        return FetcherConfig.from_env()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
