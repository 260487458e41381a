from __future__ import annotations

from datetime import datetime
import json
import logging
from typing import Any, Callable, List, Optional

from .client import GeminiClient
from .config import FetcherConfig
from .exceptions import ConfigurationError, InternalError, NewsFetchError, ParseError
from .models import NewsItem
from .prompt import build_payload, build_prompt, reference_dates

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class NewsFetcher:
    """Asks the language model for recent AI news and keeps items from today or yesterday."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        client: Optional[GeminiClient] = None,
        config: Optional[FetcherConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.api_key = api_key
        self.config = config or FetcherConfig(api_key=api_key)
        self._client = client
        self._clock = clock or datetime.now

    def fetch_recent_news(self) -> List[NewsItem]:
        if not self.api_key:
            raise ConfigurationError("API key is not configured.")
        try:
            return self._fetch()
        except NewsFetchError:
            raise
        except Exception as exc:
            raise InternalError(exc) from exc

    def _fetch(self) -> List[NewsItem]:
        today, yesterday = reference_dates(self._clock())
        payload = build_payload(build_prompt(today, yesterday, self.config.language))
        text = self._get_client().generate_content(payload)
        items = _parse_items(text)
        window = (today, yesterday)
        results: List[NewsItem] = []
        for item in items:
            if not isinstance(item.publication_date, str) or item.publication_date not in window:
                logger.debug("Dropping item outside %s..%s: %r", yesterday, today, item.headline)
                continue
            results.append(item)
        logger.info("Kept %d of %d news items for %s..%s", len(results), len(items), yesterday, today)
        return results

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient(
                self.api_key,
                model=self.config.model,
                api_base=self.config.api_base,
                timeout=self.config.timeout,
            )
        return self._client


def _parse_items(text: str) -> List[NewsItem]:
    try:
        data: Any = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"Model output is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError("Model output is not a JSON array")
    return [NewsItem.from_payload(entry) for entry in data if isinstance(entry, dict)]
